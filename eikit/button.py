"""The button widget: a rounded, raised rectangle that reacts to clicks."""

from __future__ import annotations

from typing import Any, Callable, Optional

from eikit.frame import DEFAULT_FONT, _image_place, _text_offset
from eikit.geometry import (
    Anchor,
    Canvas,
    Color,
    Point,
    Rect,
    Relief,
    Size,
    draw_button,
    intersect,
)
from eikit.widget import Destructor, Toolkit, Widget

DEFAULT_BUTTON_SIZE = Size(50, 20)
SUNKEN_TEXT_SHIFT_PERCENT = 5


class Button(Widget):
    """A clickable widget with rounded corners, a relief, and text or an image.

    An image is any object with a ``size`` attribute holding a :class:`Size`;
    a font is any object with a ``text_size(text)`` method returning a
    :class:`Size`.
    """

    class_name = "button"

    def __init__(self, toolkit: Toolkit, parent: Optional[Widget] = None,
                 user_data: Any = None, destructor: Optional[Destructor] = None) -> None:
        super().__init__(toolkit, parent, user_data, destructor)
        self.requested_size = Size(100, 100)
        self.color = Color(180, 180, 180, 255)
        self.border_width = 3
        self.corner_radius = 10
        self.relief = Relief.RAISED
        self.text: Optional[str] = None
        self.text_font: Any = DEFAULT_FONT
        self.text_color = Color(10, 10, 10, 255)
        self.text_anchor = Anchor.CENTER
        self.img: Any = None
        self.img_rect: Optional[Rect] = None
        self.img_anchor = Anchor.CENTER
        self.user_param: Any = None
        self.is_clicked = False

    def configure(self, requested_size: Optional[Size] = None, color: Optional[Color] = None,
                  border_width: Optional[int] = None, corner_radius: Optional[int] = None,
                  relief: Optional[Relief] = None, text: Optional[str] = None,
                  text_font: Any = None, text_color: Optional[Color] = None,
                  text_anchor: Optional[Anchor] = None, img: Any = None,
                  img_rect: Optional[Rect] = None, img_anchor: Optional[Anchor] = None,
                  callback: Optional[Callable[..., Any]] = None,
                  user_param: Any = None) -> None:
        """Change the given attributes; arguments left as None keep their value."""
        if requested_size is not None:
            self.set_requested_size(requested_size)
        elif self.geom_params is None and text is not None:
            self.set_requested_size(self.text_font.text_size(text))
        elif self.geom_params is None:
            self.set_requested_size(DEFAULT_BUTTON_SIZE)

        if color is not None:
            self.color = color
        if border_width is not None:
            self.border_width = border_width
        if corner_radius is not None:
            if corner_radius < 0:
                raise ValueError(f"corner radius must not be negative: {corner_radius}")
            self.corner_radius = corner_radius
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
        if img is not None:
            self.img = img
        if img_rect is not None:
            self.img_rect = img_rect
        if img_anchor is not None:
            self.img_anchor = img_anchor
        if callback is not None:
            self.callback = callback
            self.user_param = user_param
        if user_param is not None:
            self.user_data = user_param

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Optional[Rect]) -> None:
        """Draw the button body, its text or image, and its pick area."""
        super().draw(canvas, pick_canvas, clipper)
        content = self.content_rect

        if self.img is None:
            draw_button(canvas, content, self.corner_radius, self.color, self.relief, clipper)
        if self.pick_color is not None:
            draw_button(pick_canvas, content, self.corner_radius, self.pick_color,
                        Relief.NONE, clipper)

        if self.text:
            self._draw_text(canvas, content, clipper)
        if self.img is not None:
            self._draw_image(canvas, content, clipper)

    def _draw_text(self, canvas: Canvas, content: Rect, clipper: Optional[Rect]) -> None:
        size = self.text_font.text_size(self.text)
        offset = _text_offset(self.text_anchor, content.size, size)
        if self.relief is Relief.SUNKEN:
            shift = SUNKEN_TEXT_SHIFT_PERCENT * content.size.height // 100
            offset = offset + Point(shift, shift)
        canvas.draw_text(content.top_left + offset, self.text, self.text_font,
                         self.text_color, clipper)

    def _draw_image(self, canvas: Canvas, content: Rect, clipper: Optional[Rect]) -> None:
        image_size = self.img.size
        if content.size.width < image_size.width or content.size.height < image_size.height:
            self.img_anchor = Anchor.NORTHWEST
        place = _image_place(self.img_anchor, content, image_size)
        if self.img_rect is None:
            self.img_rect = Rect(Point(0, 0), image_size)
        target = Rect(place, self.img_rect.size)

        if clipper is None:
            canvas.copy_image(target, self.img, self.img_rect, True)
            return

        visible = intersect(target, clipper)
        if visible is None:
            return
        src_x = self.img_rect.left
        if visible.left == clipper.left:
            src_x += self.img_rect.size.width - visible.size.width
        src_y = self.img_rect.top
        if visible.top == clipper.top:
            src_y += self.img_rect.size.height - visible.size.height
        source = Rect(Point(src_x, src_y), visible.size)
        canvas.copy_image(visible, self.img, source, True)

    def geometry_notify(self) -> None:
        """The content area follows the screen location."""
        super().geometry_notify()