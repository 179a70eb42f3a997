"""Parsing and validation of the XML-like widget markup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TextIO

MAX_STACK_SIZE = 1000
MAX_TAG_LENGTH = 19

_C_WHITESPACE = " \t\n\r\v\f"


@dataclass
class Attribute:
    """One key/value pair of a widget tag."""

    key: str
    value: str
    is_string: bool = True


class AnalysisError(Exception):
    """Raised when a markup document is malformed."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.line = line


class TagStack:
    """Bounded stack of open tag names; names are cut to 19 characters."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, name: str) -> None:
        """Push a tag name; silently ignored once the stack is full."""
        if len(self._items) >= MAX_STACK_SIZE:
            return
        self._items.append(name[:MAX_TAG_LENGTH])

    def pop(self) -> str:
        """Pop the most recent tag name, or return "" when empty."""
        if not self._items:
            return ""
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def parse_widget(line: str) -> list[Attribute]:
    """Parse an opening tag into its widget type followed by its attributes."""
    if not line.startswith("<"):
        raise ValueError("a widget tag must start with '<'")

    end = len(line)
    pos = 1

    def skip_space(p: int) -> int:
        while p < end and line[p].isspace():
            p += 1
        return p

    pos = skip_space(pos)
    start = pos
    while pos < end and not line[pos].isspace() and line[pos] not in ">/":
        pos += 1
    attributes = [Attribute("widget", line[start:pos], True)]

    while pos < end and line[pos] != ">":
        pos = skip_space(pos)
        if pos >= end or line[pos] in ">/":
            break

        start = pos
        while pos < end and not line[pos].isspace() and line[pos] != "=":
            pos += 1
        key = line[start:pos]

        while pos < end and line[pos] != "=":
            pos += 1
        if pos < end:
            pos += 1
        pos = skip_space(pos)

        quote = ""
        if pos < end and line[pos] in "\"'":
            quote = line[pos]
            pos += 1
        start = pos
        if quote:
            while pos < end and line[pos] != quote:
                pos += 1
        else:
            while pos < end and not line[pos].isspace() and line[pos] != ">":
                pos += 1
        value = line[start:pos]
        if quote and pos < end and line[pos] == quote:
            pos += 1

        attributes.append(Attribute(key, value, True))

    return attributes


def _format_value(value: str, is_string: bool) -> str:
    if not is_string:
        return value
    if value == "NULL":
        return "NULL"
    return f'"{value}"'


def format_call(widget: Iterable[Attribute], defaults: Iterable[Attribute]) -> str:
    """Render a widget as a C constructor call, filling gaps from defaults.

    The widget's first entry is its type and its second entry its identifier;
    the defaults' first entry names the widget and is skipped.
    """
    widget = list(widget)
    defaults = list(defaults)
    if len(widget) < 2:
        raise ValueError("a widget needs a type and an identifier")

    kind, identifier = widget[0].value, widget[1].value
    given = widget[2:]
    text = f"GtkWidget *{identifier} = create_{kind}("

    for index, default in enumerate(defaults[1:]):
        matches = [attr.value for attr in given if attr.key == default.key]
        pieces = [_format_value(value, default.is_string) for value in matches or [default.value]]
        separator = "" if index == 0 else ", "
        text += "".join(separator + piece for piece in pieces)

    return text + ");\n"


def write_call(widget: Iterable[Attribute], defaults: Iterable[Attribute], stream: TextIO) -> None:
    """Write the constructor call for a widget to a text stream."""
    stream.write(format_call(widget, defaults))


class _CharReader:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def next(self) -> str:
        if self._pos >= len(self._text):
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def next_non_space(self) -> str:
        ch = self.next()
        while ch == " ":
            ch = self.next()
        return ch

    def read_name(self, first: str) -> tuple[str, str]:
        parts = [first]
        ch = self.next()
        while ch not in (" ", ">", ""):
            parts.append(ch)
            ch = self.next()
        return "".join(parts), ch

    def skip_through(self, stop: str) -> None:
        ch = self.next()
        while ch not in (stop, ""):
            ch = self.next()


def analyse(stream: TextIO) -> bool:
    """Check that the tags in a markup stream are balanced.

    Returns True when every opened tag was closed. Raises AnalysisError on an
    invalid character or a mismatched closing tag.
    """
    reader = _CharReader(stream.read())
    stack = TagStack()
    line = 1

    while ch := reader.next():
        if ch == "\n":
            line += 1
            continue
        if ch not in ("<", " "):
            raise AnalysisError(f"invalid character in line {line}", line)

        follower = reader.next()
        if ch == "<" and follower not in ("/", "!"):
            second = reader.next_non_space()
            name, last = reader.read_name(follower + second)
            stack.push(name)
            if last != ">":
                reader.skip_through(">")
        elif ch == "<" and follower == "/":
            name, last = reader.read_name(reader.next_non_space())
            if name != stack.pop():
                raise AnalysisError(f"Error in line {line}", line)
            if last != ">":
                reader.skip_through(">")
        else:
            reader.skip_through("\n")

    return stack.is_empty()


def is_comment(line: str) -> bool:
    """True when the line, after leading spaces, opens with '<!'."""
    return line.lstrip(" ").startswith("<!")


def is_close_tag(line: str) -> bool:
    """True when the line, after leading spaces, opens with '</'."""
    return line.lstrip(" ").startswith("</")


def extract_content(line: str) -> str | None:
    """Return the text following the tag name of a closing tag, if any."""
    if len(line) < 3 or not line.startswith("</") or not line.endswith(">"):
        return None
    inner = line[2:-1]
    name_end = next((i for i, ch in enumerate(inner) if ch in _C_WHITESPACE), len(inner))
    content = inner[name_end:].strip(_C_WHITESPACE)
    return content or None