"""The entry widget: a single line of editable text."""

from __future__ import annotations

from typing import Any, Optional

from eikit.frame import DEFAULT_FONT, _rect_corners
from eikit.geometry import BLACK, Canvas, Color, Point, Rect, intersect
from eikit.textedit import truncate
from eikit.widget import Destructor, Toolkit, Widget

CURSOR_TEXT = "|"
CURSOR_OFFSET = Point(-5, -5)
FOCUSED_BORDER_WIDTH = 2
UNFOCUSED_BORDER_WIDTH = 1
SELECTION_COLOR = Color(25, 25, 200, 100)
DEFAULT_CHAR_SIZE = 100


class Entry(Widget):
    """A text field with a cursor, horizontal scrolling and a selection.

    A font is any object with a ``text_size(text)`` method returning a
    :class:`~eikit.geometry.Size`.
    """

    class_name = "entry"

    def __init__(self, toolkit: Toolkit, parent: Optional[Widget] = None,
                 user_data: Any = None, destructor: Optional[Destructor] = None) -> None:
        super().__init__(toolkit, parent, user_data, destructor)
        self.color = Color(255, 255, 255, 255)
        self.border_width = UNFOCUSED_BORDER_WIDTH
        self.text_font: Any = DEFAULT_FONT
        self.text_color = BLACK
        self.requested_char_size = DEFAULT_CHAR_SIZE
        self.text = ""
        self.focus = False
        self.position = 0
        self.is_focus_visible = False
        self.decal_x = 0
        self.is_in_selection = False
        self.selection_start = 0
        self.selection_end = 0
        self.is_double_clickable = False

    def _width(self, text: str) -> int:
        return self.text_font.text_size(text).width

    def _scroll_to_cursor(self, content: Rect) -> int:
        """Adjust the scroll offset so the cursor stays visible; return cursor width."""
        width = self._width(truncate(self.text, self.position))
        if width > content.size.width + self.decal_x:
            self.decal_x = width - content.size.width
        if width < self.decal_x:
            self.decal_x = width
        return width

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Optional[Rect]) -> None:
        """Draw the border, the field, its text, cursor and selection, and its pick area."""
        super().draw(canvas, pick_canvas, clipper)
        content = self.content_rect
        x, y = content.top_left.x, content.top_left.y
        corners = _rect_corners(content)

        self.border_width = FOCUSED_BORDER_WIDTH if self.focus else UNFOCUSED_BORDER_WIDTH
        b = self.border_width
        border = [
            Point(x - b, y - b),
            Point(content.right + b, y - b),
            Point(content.right + b, content.bottom + b),
            Point(x - b, content.bottom + b),
        ]
        canvas.draw_polygon(border, BLACK, clipper)
        canvas.draw_polygon(corners, self.color, clipper)
        if self.pick_color is not None:
            pick_canvas.draw_polygon(corners, self.pick_color, clipper)

        cursor_width = self._scroll_to_cursor(content)
        place = Point(x - self.decal_x, y)
        text_clip = (self.screen_location if clipper is None
                     else intersect(self.screen_location, clipper))
        if text_clip is not None:
            canvas.draw_text(place, self.text, self.text_font, self.text_color, text_clip)

        if not self.focus:
            return

        if self.is_focus_visible and not self.is_in_selection:
            cursor_place = Point(x - self.decal_x + cursor_width, y) + CURSOR_OFFSET
            canvas.draw_text(cursor_place, CURSOR_TEXT, self.text_font, BLACK, clipper)

        if self.is_in_selection:
            low = min(self.selection_start, self.selection_end)
            high = max(self.selection_start, self.selection_end)
            left = x - self.decal_x + self._width(truncate(self.text, low))
            right = x - self.decal_x + self._width(truncate(self.text, high))
            selection = [
                Point(left, y),
                Point(left, content.bottom),
                Point(right, content.bottom),
                Point(right, y),
            ]
            canvas.draw_polygon(selection, SELECTION_COLOR, self.screen_location)

    def geometry_notify(self) -> None:
        """The content area follows the screen location."""
        super().geometry_notify()