"""The frame widget: a plain rectangle with optional text or image."""

from __future__ import annotations

from typing import Any, NamedTuple, Optional

from eikit.geometry import (
    Anchor,
    Canvas,
    Color,
    Point,
    Rect,
    Relief,
    Size,
    draw_button,
)
from eikit.widget import Destructor, Toolkit, Widget

DEFAULT_FRAME_SIZE = Size(40, 30)


class _MonospaceFont(NamedTuple):
    """A font in which every character has the same width."""

    char_width: int = 8
    height: int = 16

    def text_size(self, text: str) -> Size:
        return Size(self.char_width * len(text), self.height)


DEFAULT_FONT = _MonospaceFont()


def _text_offset(anchor: Anchor, area: Size, text: Size) -> Point:
    """Offset of text of size ``text`` anchored within an area of size ``area``."""
    cx = area.width // 2 - text.width // 2
    cy = area.height // 2 - text.height // 2
    right = area.width - text.width
    bottom = area.height - text.height
    offsets = {
        Anchor.CENTER: (cx, cy),
        Anchor.NORTH: (cx, 0),
        Anchor.NORTHEAST: (right, 0),
        Anchor.WEST: (0, cy),
        Anchor.EAST: (right, cy),
        Anchor.SOUTHWEST: (0, bottom),
        Anchor.SOUTH: (cx, bottom),
        Anchor.SOUTHEAST: (right, bottom),
    }
    x, y = offsets.get(anchor, (0, 0))
    return Point(x, y)


def _image_place(anchor: Anchor, area: Rect, image: Size) -> Point:
    """Top-left corner where an image of size ``image`` goes within ``area``."""
    x0, y0 = area.top_left.x, area.top_left.y
    cx = x0 + area.size.width // 2 - image.width // 2
    cy = y0 + area.size.height // 2 - image.height // 2
    right = x0 + area.size.width - image.width
    bottom = y0 + area.size.height - image.height
    places = {
        Anchor.NORTHWEST: (x0, y0),
        Anchor.NORTH: (x0, cy),
        Anchor.NORTHEAST: (x0, bottom),
        Anchor.WEST: (cx, y0),
        Anchor.CENTER: (cx, cy),
        Anchor.EAST: (cx, bottom),
        Anchor.SOUTHWEST: (right, y0),
        Anchor.SOUTH: (right, cy),
    }
    x, y = places.get(anchor, (right, bottom))
    return Point(x, y)


def _rect_corners(rect: Rect) -> list[Point]:
    x, y = rect.top_left.x, rect.top_left.y
    return [Point(x, y), Point(rect.right, y), Point(rect.right, rect.bottom), Point(x, rect.bottom)]


class Frame(Widget):
    """A rectangle with a relief and optional text or image.

    An image is any object with a ``size`` attribute holding a :class:`Size`;
    a font is any object with a ``text_size(text)`` method returning a
    :class:`Size`.
    """

    class_name = "frame"

    def __init__(self, toolkit: Toolkit, parent: Optional[Widget] = None,
                 user_data: Any = None, destructor: Optional[Destructor] = None) -> None:
        super().__init__(toolkit, parent, user_data, destructor)
        self.color = Color(149, 149, 149, 255)
        self.border_width = 0
        self.relief = Relief.NONE
        self.text: Optional[str] = None
        self.text_font: Any = DEFAULT_FONT
        self.text_color = Color(0, 0, 0, 0)
        self.text_anchor = Anchor.CENTER
        self.img: Any = None
        self.img_rect: Optional[Rect] = None
        self.img_anchor = Anchor.CENTER

    def configure(self, requested_size: Optional[Size] = None, color: Optional[Color] = None,
                  border_width: Optional[int] = None, relief: Optional[Relief] = None,
                  text: Optional[str] = None, text_font: Any = None,
                  text_color: Optional[Color] = None, text_anchor: Optional[Anchor] = None,
                  img: Any = None, img_rect: Optional[Rect] = None,
                  img_anchor: Optional[Anchor] = None) -> None:
        """Change the given attributes; arguments left as None keep their value."""
        if requested_size is not None:
            self.set_requested_size(requested_size)
        elif self.geom_params is None and text is None:
            self.set_requested_size(DEFAULT_FRAME_SIZE)
        elif self.geom_params is None:
            self.set_requested_size(self.text_font.text_size(text))

        if color is not None:
            self.color = color
        if border_width is not None:
            self.border_width = border_width
        if relief is not None:
            self.relief = relief
        if text is not None:
            self.text = text
        if text_font is not None:
            self.text_font = text_font
        if text_color is not None:
            self.text_color = text_color
        if text_anchor is not None:
            self.text_anchor = text_anchor
        if img_anchor is not None:
            self.img_anchor = img_anchor
        if img is not None:
            self.img = img
        if img_rect is not None:
            self.img_rect = img_rect

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Optional[Rect]) -> None:
        """Draw the frame, its text and its image, and its pick area."""
        super().draw(canvas, pick_canvas, clipper)
        content = self.content_rect

        draw_button(canvas, self.screen_location, 0, self.color, self.relief, clipper)
        if self.pick_color is not None:
            pick_canvas.draw_polygon(_rect_corners(content), self.pick_color, clipper)

        if self.text is not None:
            size = self.text_font.text_size(self.text)
            place = content.top_left + _text_offset(self.text_anchor, content.size, size)
            canvas.draw_text(place, self.text, self.text_font, self.text_color, clipper)

        if self.img is not None:
            image_size = self.img.size
            if content.size.width < image_size.width or content.size.height < image_size.height:
                self.img_anchor = Anchor.NORTHWEST
            place = _image_place(self.img_anchor, content, image_size)
            if self.img_rect is None:
                self.img_rect = Rect(Point(0, 0), image_size)
            canvas.copy_image(Rect(place, self.img_rect.size), self.img, self.img_rect, True)

    def geometry_notify(self) -> None:
        """The content area follows the screen location."""
        super().geometry_notify()