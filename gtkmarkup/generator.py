"""Turn a widget markup document into a C program built on the widget framework."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .analyzer import AnalysisError, analyse, extract_content, is_close_tag, is_comment, parse_widget
from .widgets import UnknownWidgetError, render_widget

DEFAULT_OUTPUT = "../temp.c"

_PROLOGUE = (
    "#include <gtk/gtk.h>\n"
    '#include "include/GtkFramework/GtkFramework.h"\n'
    "static void activate(GtkApplication *app, gpointer data){\n"
)

_EPILOGUE = (
    "}\n"
    "int main(int argc, char *argv[]){\n"
    '    GtkApplication *app = gtk_application_new("org.example.app", G_APPLICATION_DEFAULT_FLAGS);\n'
    '    g_signal_connect(app, "activate", G_CALLBACK(activate), NULL);\n'
    "    int status = g_application_run(G_APPLICATION(app), argc, argv);\n"
    "    g_object_unref(app);\n"
    "    return status;\n"
    "}\n"
)


def _check(text: str) -> None:
    if not analyse(io.StringIO(text)):
        raise AnalysisError("file is not valid", text.count("\n") + 1)


def _body(text: str) -> str:
    parts = []
    for raw in text.split("\n"):
        line = raw.lstrip(" ")
        if not line or is_comment(line):
            continue
        if is_close_tag(line):
            content = extract_content(line)
            if content is not None:
                parts.append(f"{content};\n")
            continue
        parts.append(render_widget(parse_widget(line)))
    return "".join(parts)


def generate_program(stream: TextIO) -> str:
    """Validate a markup stream and return the C program it describes.

    Raises AnalysisError when the tags are malformed or unbalanced and
    UnknownWidgetError for a widget without a default database.
    """
    text = stream.read()
    _check(text)
    return _PROLOGUE + _body(text) + _EPILOGUE


def convert_file(input_path: str | Path, output_path: str | Path) -> None:
    """Read a markup file and write the generated C program to another file."""
    with open(input_path, encoding="utf-8") as source:
        program = generate_program(source)
    Path(output_path).write_text(program, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: ``gtkmarkup INPUT [OUTPUT]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("file path is required")
        return 1

    input_path = args[0]
    output_path = args[1] if len(args) > 1 else DEFAULT_OUTPUT

    try:
        text = Path(input_path).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"file not found: {exc.strerror or exc}", file=sys.stderr)
        return 1

    try:
        valid = analyse(io.StringIO(text))
    except AnalysisError as exc:
        print(exc, file=sys.stderr)
        return 1
    if not valid:
        print("file is not valid")
        return 1
    print("file valide")

    try:
        program = generate_program(io.StringIO(text))
    except UnknownWidgetError as exc:
        print(exc)
        return 255
    except (AnalysisError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        Path(output_path).write_text(program, encoding="utf-8")
    except OSError as exc:
        print(f"cannot write {output_path}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0