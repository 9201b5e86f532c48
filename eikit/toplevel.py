"""The toplevel widget: a window with a title bar inside the application."""

from __future__ import annotations

from typing import Any, Optional

from eikit.frame import DEFAULT_FONT
from eikit.geometry import (
    TITLE_BAR_HEIGHT,
    AxisSet,
    Canvas,
    Color,
    Point,
    Rect,
    Size,
    draw_toplevel,
    intersect,
)
from eikit.widget import Destructor, Toolkit, Widget

DEFAULT_TOPLEVEL_SIZE = Size(500, 500)
TITLE_OFFSET = Point(20, -25)
TITLE_COLOR = Color(0xDF, 0xDF, 0xDF, 0xFF)


class Toplevel(Widget):
    """A movable window with a title bar, a close button and a resize handle."""

    class_name = "toplevel"

    def __init__(self, toolkit: Toolkit, parent: Optional[Widget] = None,
                 user_data: Any = None, destructor: Optional[Destructor] = None) -> None:
        super().__init__(toolkit, parent, user_data, destructor)
        self.color = Color(149, 149, 149, 255)
        self.border_width = 1
        self.title = "title"
        self.closable = True
        self.resizable = AxisSet.BOTH
        self.min_size = Size(160, 120)
        self.where_button_down = Point()

    def configure(self, requested_size: Optional[Size] = None, color: Optional[Color] = None,
                  border_width: Optional[int] = None, title: Optional[str] = None,
                  closable: Optional[bool] = None, resizable: Optional[AxisSet] = None,
                  min_size: Optional[Size] = None) -> None:
        """Change the given attributes; arguments left as None keep their value."""
        if requested_size is not None:
            self.set_requested_size(requested_size)
        elif self.geom_params is None:
            self.set_requested_size(DEFAULT_TOPLEVEL_SIZE)

        if color is not None:
            self.color = color
        if border_width is not None:
            self.border_width = border_width
        if title is not None:
            self.title = title
        if closable is not None:
            self.closable = closable
        if resizable is not None:
            self.resizable = resizable
        if min_size is not None:
            self.min_size = min_size

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Optional[Rect]) -> None:
        """Draw the window decoration, its body and its title."""
        super().draw(canvas, pick_canvas, clipper)
        content = self.content_rect
        draw_toplevel(canvas, content, self.color, clipper, False, self.resizable)
        if self.pick_color is not None:
            draw_toplevel(pick_canvas, content, self.pick_color, clipper, True, self.resizable)

        if self.title is not None:
            place = content.top_left + TITLE_OFFSET
            text_clipper = (self.screen_location if clipper is None
                            else intersect(clipper, self.screen_location))
            if text_clipper is not None:
                canvas.draw_text(place, self.title, DEFAULT_FONT, TITLE_COLOR, text_clipper)

    def geometry_notify(self) -> None:
        """Put the content below the title bar and extend the window to hold it."""
        screen = self.screen_location
        self.set_content_rect(Rect(screen.top_left + Point(0, TITLE_BAR_HEIGHT), screen.size))
        self.screen_location = Rect(
            screen.top_left, Size(screen.size.width, screen.size.height + TITLE_BAR_HEIGHT))