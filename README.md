# eikit

A small retained-mode widget toolkit. It keeps a tree of widgets, offers four
widget classes (`Frame`, `Button`, `Toplevel` and `Entry`), and works out what
each one draws. Drawing goes to a `Canvas`, which records each operation as a
`DrawOp` (polygon, polyline, text or image). A renderer can replay those
operations onto a real surface. The package needs nothing beyond the standard
library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

- `eikit.geometry`
  - Value types: `Point`, `Size`, `Rect` and `Color`.
  - Enums: `Anchor`, `Relief`, `AxisSet` and `FramePart`.
  - Recording surface: `Canvas`, which stores `DrawOp` entries in its `ops` list.
  - Polygon helpers: `rect_to_points`, `arc_point_count`, `arc_points`, `rounded_frame`,
    `half_rounded_frame` and `circle_points`.
  - Rectangle intersection: `intersect`.
  - Drawing routines: `draw_button` and `draw_toplevel`.
- `eikit.textedit`: string helpers for editing in an entry field.
  - `truncate`, `insert_char`, `insert_word`, `delete_char`, `cut_text`,
    `find_word`, `selected_text` and `skip_word`, which moves over a word the way
    a control-arrow key does.
  - `cursor_index` and `cursor_x`, which map a click position to a cursor index
    and to a pixel column. Each takes a width-measuring function.
- `eikit.picking`: `PickRegistry` maps pick ids to widgets. `pick_color` encodes
  an id as an opaque colour. `decode_pick_pixel` recovers the id from a packed
  32-bit pixel.
- `eikit.bindings`: `TagBindings` holds `TagBinding` entries, most recent first.
- `eikit.damage`: `InvalidatedRects` collects the rectangles that need redrawing.
- `eikit.widget`
  - `Widget` is the base class. It tracks the hierarchy, the pick colour, the
    requested size, the screen location and the content rect.
  - `GeometryParams` and `WidgetClassRegistry` support placement and class lookup.
  - `Toolkit` holds the class registry, the pick registry, the invalidated
    rectangles, the tag bindings and the entry focus.
- `eikit.frame`, `eikit.button`, `eikit.toplevel` and `eikit.entry` hold the
  widget classes. Their class names are `"frame"`, `"button"`, `"toplevel"` and
  `"entry"`.

## Example

```python
from eikit.widget import Toolkit
from eikit.frame import Frame
from eikit.button import Button
from eikit.geometry import Canvas, Color, Point, Rect, Size

toolkit = Toolkit()
toolkit.classes.register(Frame)
toolkit.classes.register(Button)

root = toolkit.create_widget("frame")
button = toolkit.create_widget("button", root)
button.configure(requested_size=Size(120, 40), text="Ok",
                 color=Color(0x88, 0x88, 0x88))
button.screen_location = Rect(Point(10, 10), Size(120, 40))

canvas, pick_canvas = Canvas(), Canvas()
button.draw(canvas, pick_canvas, None)
print([op.kind for op in canvas.ops])
```

The text helpers are plain functions:

```python
from eikit.textedit import insert_char, skip_word

insert_char("helo", "l", 3)       # "hello"
skip_word("hello world", 0, 1)    # 5
```

## Errors

Errors are raised as exceptions:

- Creating a widget of an unregistered class raises `KeyError`.
- Looking up a pick id that is out of range raises `IndexError`.
- Removing a tag binding that was never added raises `ValueError`.
- A negative radius or corner radius raises `ValueError`.

## What it does not do

eikit does not include the following:

- An application object, a main loop or event dispatch.
- A window or a pixel-level rasteriser, and no image loading.
- Geometry managers such as a placer. Placement is anything that satisfies the
  `GeometryManager` protocol in `eikit.widget`, with `run(widget)` and
  `release(widget)` methods, assigned through `GeometryParams`.

Text is measured with a built-in monospace font model, 8 by 16 pixels per
character, unless you supply a font object that has a `text_size(text)` method.

## Running the tests

```
pytest
```