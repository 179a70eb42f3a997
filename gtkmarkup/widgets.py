"""Default constructor arguments for every widget the markup understands."""

from __future__ import annotations

from typing import Sequence

from .analyzer import Attribute, format_call

# Each entry: widget name -> (database label, ((key, default, is_string), ...)).
# The order of the parameters is the order of the constructor's arguments.
_DATABASES: dict[str, tuple[str, tuple[tuple[str, str, bool], ...]]] = {
    "window": ("window", (
        ("app", "NULL", False),
        ("type", "GTK_WINDOW_TOPLEVEL", False),
        ("title", "Default title", True),
        ("width", "800", False),
        ("height", "600", False),
        ("resizable", "TRUE", False),
        ("position", "GTK_WIN_POS_CENTER", False),
        ("decorate", "TRUE", False),
        ("icon", "NULL", False),
        ("opacity", "1.0", False),
        ("fullscreen", "FALSE", False),
    )),
    "header_bar": ("headerBar", (
        ("title", "Default title", True),
        ("subtitle", "Default subtitle", True),
        ("icon_path", "NULL", True),
        ("settings", "TRUE", False),
    )),
    "scrolled_window": ("scrolledWindow", (
        ("horizontal", "TRUE", False),
        ("vertical", "TRUE", False),
    )),
    "box": ("box", (
        ("orientation", "GTK_ORIENTATION_VERTICAL", False),
        ("align", "GTK_ALIGN_CENTER", False),
        ("spacing", "0", False),
    )),
    "fixed": ("fixed", ()),
    "frame": ("frame", (
        ("title", "Default title", True),
        ("horizontal_placement", "0.5", False),
        ("vertical_placement", "0.5", False),
    )),
    "grid": ("grid", (
        ("rows_spacing", "0", False),
        ("columns_spacing", "0", False),
        ("rows_homogeneous", "FALSE", False),
        ("columns_homogeneous", "FALSE", False),
    )),
    "paned": ("paned", (
        ("orientation", "GTK_ORIENTATION_HORIZONTAL", False),
        ("default_position", "100", False),
        ("show_handle", "TRUE", False),
    )),
    "stack": ("stack", (
        ("switcher", "NULL", True),
        ("transition_type", "GTK_STACK_TRANSITION_TYPE_CROSSFADE", False),
        ("transition_duration", "500", False),
    )),
    "switcher": ("switcher", (
        ("spacing", "0", False),
        ("buttons_same_size", "TRUE", False),
    )),
    "button": ("button", (
        ("relief", "GTK_RELIEF_NORMAL", False),
        ("label", "Click me", True),
        ("use_underline", "FALSE", False),
        ("path_to_image", "NULL", True),
        ("callback", "NULL", True),
        ("data", "NULL", True),
    )),
    "check_button": ("check_button", (
        ("label", "Click me", True),
        ("active", "TRUE", False),
        ("use_underline", "FALSE", False),
        ("callback", "NULL", True),
        ("data", "NULL", True),
    )),
    "color_button": ("color_button", (
        ("default_color", "#FFFFFF", True),
        ("title", "coloring", True),
        ("use_alpha", "TRUE", False),
    )),
    "entry": ("entry", (
        ("default_text", "NULL", True),
        ("indicator_text", "NULL", True),
        ("visible", "TRUE", False),
        ("editable", "TRUE", False),
        ("max_length", "20", False),
        ("alignment", "0.5", False),
    )),
    "font_button": ("font_button", (
        ("default_font_name", "Arial", True),
        ("title", "font", True),
        ("show_size", "TRUE", False),
        ("show_style", "TRUE", False),
        ("use_size", "TRUE", False),
        ("use_font", "TRUE", False),
    )),
    "image": ("image", (
        ("path", "assets/Application_icon/apple.png", True),
    )),
    "label": ("label", (
        ("text", "Hello", True),
        ("size", "10", False),
        ("font", "Arial", True),
        ("color", "#FFFFFF", True),
        ("background", "#000000", True),
        ("justify", "GTK_JUSTIFY_CENTER", False),
        ("underline", "FALSE", False),
        ("weight", "0", False),
        ("style", "0", False),
        ("wrap", "TRUE", False),
    )),
    "level_bar": ("level_bar", (
        ("min_value", "0", False),
        ("max_value", "100", False),
        ("default_value", "50", False),
        ("mode", "GTK_LEVEL_BAR_MODE_HORIZONTAL", False),
        ("inverted", "FALSE", False),
    )),
    "link_button": ("link_button", (
        ("uri", "https://www.google.com", True),
        ("label", "Click me", True),
    )),
    "menu_button": ("menu_button", (
        ("label", "Click me", True),
        ("path_to_image", "NULL", True),
        ("arrow_type", "GTK_ARROW_DOWN", False),
    )),
    "menu_item": ("menu_item", (
        ("label", "Click me", True),
        ("type", "normal", True),
        ("submenu", "NULL", True),
        ("callback", "NULL", True),
        ("data", "NULL", True),
    )),
    "menu": ("menu", (
        ("is_primary", "TRUE", False),
        ("label", "Click me", True),
    )),
    "progress_bar": ("progress_bar", (
        ("text", "Click me", True),
        ("fraction", "0.5", False),
        ("show_text", "TRUE", False),
        ("pulse", "FALSE", False),
        ("inverted", "FALSE", False),
    )),
    "radio_button": ("radio_button", (
        ("label", "Click me", True),
        ("path_to_image", "NULL", True),
        ("radio_group_member", "NULL", True),
        ("default_state", "FALSE", False),
    )),
    "scale": ("scale", (
        ("orientation", "GTK_ORIENTATION_VERTICAL", False),
        ("min_value", "0", False),
        ("max_value", "10", False),
        ("step", "1", False),
        ("mark_value", "1", False),
        ("mark_position", "0.5", False),
        ("text", "Click me", True),
        ("digits", "0", False),
        ("value_pos", "0.5", False),
    )),
    "separator": ("separator", (
        ("orientation", "GTK_ORIENTATION_VERTICAL", False),
    )),
    "spin_button": ("spin_button", (
        ("min", "0", False),
        ("max", "10", False),
        ("step", "1", False),
        ("value", "1", False),
        ("digits", "0", False),
        ("wrap", "FALSE", False),
        ("numeric", "FALSE", False),
    )),
    "spinner": ("spinner", (
        ("active", "TRUE", False),
    )),
    "switch_button": ("switch_button", (
        ("default_state", "TRUE", False),
        ("callback", "NULL", True),
        ("data", "NULL", True),
    )),
    "text_view": ("text_view", (
        ("text", "Click me", True),
        ("size", "10", False),
        ("font", "Arial", True),
        ("color", "#FFFFFF", True),
        ("background", "#000000", True),
        ("justify", "GTK_JUSTIFY_CENTER", False),
        ("wrap", "TRUE", False),
        ("cursor_visible", "TRUE", False),
        ("editable", "TRUE", False),
    )),
}


class UnknownWidgetError(LookupError):
    """Raised for a widget name that has no default database."""

    def __init__(self, name: str) -> None:
        super().__init__(f"the widgets : {name} not exist in our databases!")
        self.name = name


def known_widgets() -> list[str]:
    """Names of every supported widget, in lookup order."""
    return list(_DATABASES)


def defaults_for(name: str) -> list[Attribute]:
    """Return a fresh default database for a widget.

    The first entry is the ``widget`` label; the rest are the constructor
    parameters with their default values, in argument order.
    """
    try:
        label, parameters = _DATABASES[name]
    except KeyError:
        raise UnknownWidgetError(name) from None
    return [Attribute("widget", label, True)] + [
        Attribute(key, value, is_string) for key, value, is_string in parameters
    ]


def render_widget(widget: Sequence[Attribute]) -> str:
    """Render a parsed widget tag as its C constructor call."""
    if not widget:
        raise ValueError("an empty widget cannot be rendered")
    return format_call(widget, defaults_for(widget[0].value))