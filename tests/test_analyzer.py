import io

import pytest

from gtkmarkup.analyzer import (
    AnalysisError,
    Attribute,
    TagStack,
    analyse,
    extract_content,
    format_call,
    is_close_tag,
    is_comment,
    parse_widget,
    write_call,
)


def test_parse_widget_reads_type_and_attributes():
    attrs = parse_widget('<window id = "main" title="Hello world" width=300>')
    assert [(a.key, a.value) for a in attrs] == [
        ("widget", "window"),
        ("id", "main"),
        ("title", "Hello world"),
        ("width", "300"),
    ]
    assert all(a.is_string for a in attrs)


def test_parse_widget_single_quotes_and_self_closing():
    attrs = parse_widget("<fixed id='f' label='a b'/>")
    assert [(a.key, a.value) for a in attrs] == [
        ("widget", "fixed"),
        ("id", "f"),
        ("label", "a b"),
    ]


def test_parse_widget_requires_opening_bracket():
    with pytest.raises(ValueError):
        parse_widget("window id='w'>")


def _window_defaults():
    return [
        Attribute("widget", "window", True),
        Attribute("title", "Default title", True),
        Attribute("width", "800", False),
        Attribute("icon", "NULL", True),
    ]


def test_format_call_mixes_given_and_default_values():
    widget = parse_widget('<window id="w" title="T">')
    assert format_call(widget, _window_defaults()) == 'GtkWidget *w = create_window("T", 800, NULL);\n'


def test_format_call_uses_given_non_string_values_raw():
    widget = parse_widget('<window id="w" width=1024>')
    out = format_call(widget, _window_defaults())
    assert ", 1024," in out
    assert '"Default title"' in out


def test_format_call_null_string_is_unquoted():
    widget = parse_widget('<window id="w" title="NULL">')
    out = format_call(widget, _window_defaults())
    assert "create_window(NULL, 800" in out


def test_format_call_without_arguments():
    widget = parse_widget('<fixed id="f">')
    assert format_call(widget, [Attribute("widget", "fixed", True)]) == "GtkWidget *f = create_fixed();\n"


def test_format_call_requires_identifier():
    with pytest.raises(ValueError):
        format_call(parse_widget("<window>"), _window_defaults())


def test_write_call_matches_format_call():
    widget = parse_widget('<window id="w" title="T">')
    buffer = io.StringIO()
    write_call(widget, _window_defaults(), buffer)
    assert buffer.getvalue() == format_call(widget, _window_defaults())


def test_tag_stack_is_lifo():
    stack = TagStack()
    assert stack.is_empty()
    stack.push("window")
    stack.push("box")
    assert stack.pop() == "box"
    assert stack.pop() == "window"
    assert stack.is_empty()


def test_tag_stack_pop_empty_gives_empty_string():
    assert TagStack().pop() == ""


def test_tag_stack_truncates_names():
    stack = TagStack()
    stack.push("a" * 30)
    assert stack.pop() == "a" * 19


def test_tag_stack_capacity():
    stack = TagStack()
    for i in range(1005):
        stack.push(str(i))
    assert len(stack) == 1000
    assert stack.pop() == "999"


def test_analyse_balanced_document():
    doc = '<window id="w">\n<box id="b">\n</box>\n</window>\n'
    assert analyse(io.StringIO(doc)) is True


def test_analyse_unclosed_document():
    doc = '<window id="w">\n<box id="b">\n</box>\n'
    assert analyse(io.StringIO(doc)) is False


def test_analyse_skips_comments():
    doc = '<!-- header -->\n<window id="w">\n</window>\n'
    assert analyse(io.StringIO(doc)) is True


def test_analyse_ignores_indented_lines():
    doc = '<window id="w">\n    <box id="b">\n</window>\n'
    assert analyse(io.StringIO(doc)) is True


def test_analyse_mismatched_close_reports_line():
    doc = '<window id="w">\n</box>\n'
    with pytest.raises(AnalysisError) as info:
        analyse(io.StringIO(doc))
    assert info.value.line == 2


def test_analyse_invalid_character_reports_line():
    with pytest.raises(AnalysisError) as info:
        analyse(io.StringIO("hello\n"))
    assert info.value.line == 1


def test_is_comment():
    assert is_comment("   <!-- note -->")
    assert not is_comment("<window>")


def test_is_close_tag():
    assert is_close_tag("  </window>")
    assert not is_close_tag("<window>")


def test_extract_content():
    assert extract_content("</window gtk_widget_show_all(window)>") == "gtk_widget_show_all(window)"
    assert extract_content("</window   x  >") == "x"


def test_extract_content_without_content():
    assert extract_content("</window>") is None
    assert extract_content("window") is None
    assert extract_content("</window") is None