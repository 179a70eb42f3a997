# gtkmarkup

`gtkmarkup` reads a small, line-oriented widget markup file and writes a GTK 3
C program from it. Each opening tag becomes a widget construction call. Each
closing tag that carries text has that text written out as a C statement.

## Markup

Each line holds one tag:

```
<!-- a comment line -->
<window id = "main_window" title = "Hello" width = 640 height = 480>
    <box id = "main_box" spacing = 10>
    </box gtk_container_add(GTK_CONTAINER(main_window), main_box)>
</window show_widget(main_window)>
```

- An opening tag `<name id = "..." key = value ...>` becomes
  `GtkWidget *id = create_name(...);`. Values may be quoted with `"` or `'`,
  or left bare. Any argument the tag leaves out gets that widget's default
  value. Arguments follow the order of the widget's constructor. Text
  parameters are written in double quotes, except the value `NULL`. Other
  parameters are written as given.
- A closing tag `</name text>` writes `text;` as a statement. A closing tag
  with no text writes nothing.
- Lines that start with `<!` (after any leading spaces) are ignored.
- Leading spaces are allowed. Empty lines are skipped.

Before generating anything, the tags are checked for balance. Tags that start
a line, with no indentation, must open and close in matching nesting order.
Indented lines and `<!` lines are not part of this check. Any other character
at the start of a line is an error. Errors are reported as
`gtkmarkup.analyzer.AnalysisError`, which carries the line number in `line`.

A widget name without a default table raises
`gtkmarkup.widgets.UnknownWidgetError`. To inspect the tables:

- `gtkmarkup.widgets.known_widgets()` lists the supported widget names.
- `gtkmarkup.widgets.defaults_for(name)` returns a widget's parameters and
  default values as `Attribute` objects, in argument order.

## Command line

```
gtkmarkup layout.xml [output.c]
```

The command checks `layout.xml`, prints `file valide`, and writes the
generated C source. It writes to `output.c` if that is given, otherwise to
`../temp.c`. The output has an `activate` callback holding the widget calls
and a `main` function that runs a `GtkApplication`.

Exit status:

- `0` on success.
- `1` for a missing argument, an unreadable input file, an invalid or
  unbalanced file, or an output file that cannot be written.
- `255` for an unknown widget name.

## Library use

```python
from gtkmarkup.generator import generate_program, convert_file
from gtkmarkup.analyzer import parse_widget
from gtkmarkup.widgets import render_widget

print(render_widget(parse_widget('<button id = "ok" label = "OK">')), end="")
# GtkWidget *ok = create_button(GTK_RELIEF_NORMAL, "OK", FALSE, NULL, NULL, NULL);

convert_file("layout.xml", "app.c")
```

`generate_program(stream)` reads a text stream and returns the whole program
as a string.

`gtkmarkup.analyzer` has the lower-level pieces:

- `parse_widget(line)` splits an opening tag into a list of `Attribute`
  (`key`, `value`, `is_string`). The widget type comes first.
- `format_call(widget, defaults)` and `write_call(widget, defaults, stream)`
  render a constructor call from explicit defaults.
- `analyse(stream)` runs the balance check. It returns `True` when every
  opened tag was closed.
- `is_comment`, `is_close_tag` and `extract_content` classify lines and pull
  out the statement text of a closing tag.
- `TagStack` is the bounded stack that the balance check uses.

`gtkmarkup.linked_list.LinkedList` is an ordered collection with positional
insertion and deletion. Out-of-range positions are ignored.

## What it does not do

`gtkmarkup` only writes C source text. It does not compile that source, run
it, or show any window. The `create_*` functions it calls must come from a
widget framework header that this package does not provide.