"""Generate GTK 3 C programs from a tag-based widget markup."""

__version__ = "0.1.0"