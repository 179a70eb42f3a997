[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gtkmarkup"
version = "0.1.0"
description = "Turn a tag-based widget markup file into a GTK 3 C program"
requires-python = ">=3.10"
dependencies = []
keywords = ["gtk", "markup", "code generation", "widgets", "xml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: C",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gtkmarkup = "gtkmarkup.generator:main"

[tool.hatch.build.targets.wheel]
packages = ["gtkmarkup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
