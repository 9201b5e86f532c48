"""Geometric primitives and the polygon shapes used to draw widgets."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Optional, Sequence

TITLE_BAR_HEIGHT = 30
TITLE_BAR_RADIUS = 20
RESIZE_HANDLE_SIZE = 10
CLOSE_BUTTON_RADIUS = 6
CIRCLE_POINT_DENSITY = 0.7

TOPLEVEL_DARK = None  # set below, once Color exists
CLOSE_RED = None


@dataclass(frozen=True)
class Point:
    """A pixel position."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    """A width and a height in pixels."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    top_left: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @property
    def left(self) -> int:
        return self.top_left.x

    @property
    def top(self) -> int:
        return self.top_left.y

    @property
    def right(self) -> int:
        """First column to the right of the rectangle."""
        return self.top_left.x + self.size.width

    @property
    def bottom(self) -> int:
        """First row below the rectangle."""
        return self.top_left.y + self.size.height


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")


TOPLEVEL_DARK = Color(87, 93, 100, 255)
CLOSE_RED = Color(230, 40, 40, 255)
BLACK = Color(0, 0, 0, 255)


class Anchor(Enum):
    """Where a widget or its content is attached within a rectangle."""

    NONE = 0
    CENTER = 1
    NORTH = 2
    NORTHEAST = 3
    EAST = 4
    SOUTHEAST = 5
    SOUTH = 6
    SOUTHWEST = 7
    WEST = 8
    NORTHWEST = 9


class Relief(Enum):
    """The 3D look of a widget border."""

    NONE = 0
    RAISED = 1
    SUNKEN = 2


class AxisSet(Enum):
    """Axes along which a toplevel can be resized."""

    NONE = 0
    X = 1
    Y = 2
    BOTH = 3


class FramePart(Enum):
    """Which part of a rounded frame to generate."""

    FULL = 0
    LOW = 1
    HIGH = 2


class DrawOp(NamedTuple):
    """One recorded drawing operation."""

    kind: str
    points: tuple
    color: Optional[Color]
    clipper: Optional[Rect]
    extra: Any = None


class Canvas:
    """A drawing surface that records the operations drawn on it."""

    def __init__(self, size: Size | None = None) -> None:
        self.size = size or Size()
        self.ops: list[DrawOp] = []

    def draw_polygon(self, points: Sequence[Point], color: Color,
                     clipper: Rect | None = None) -> None:
        self.ops.append(DrawOp("polygon", tuple(points), color, clipper))

    def draw_polyline(self, points: Sequence[Point], color: Color,
                      clipper: Rect | None = None) -> None:
        self.ops.append(DrawOp("polyline", tuple(points), color, clipper))

    def draw_text(self, where: Point, text: str, font: Any, color: Color,
                  clipper: Rect | None = None) -> None:
        self.ops.append(DrawOp("text", (where,), color, clipper, (text, font)))

    def copy_image(self, dst: Rect, image: Any, src: Rect | None = None,
                   alpha: bool = True) -> None:
        self.ops.append(DrawOp("image", (dst.top_left,), None, dst, (image, src, alpha)))

    def clear(self) -> None:
        self.ops.clear()


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _shift_color(color: Color, delta: int) -> Color:
    return Color((color.red + delta) % 256, (color.green + delta) % 256,
                 (color.blue + delta) % 256, color.alpha)


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError(f"radius must not be negative: {radius}")


def rect_to_points(rect: Rect) -> list[Point]:
    """Return the four corner pixels of a rectangle, clockwise from top-left."""
    tl = rect.top_left
    w, h = rect.size.width, rect.size.height
    return [
        tl,
        tl + Point(w - 1, 0),
        tl + Point(w - 1, h - 1),
        tl + Point(0, h - 1),
    ]


def arc_point_count(radius: int, start: int, end: int) -> int:
    """Number of points used to draw an arc from start to end degrees."""
    _check_radius(radius)
    if radius == 0:
        return 1
    start_rad = start * math.pi / 180.0
    end_rad = end * math.pi / 180.0
    return int(math.ceil(abs(end_rad - start_rad) / (2 * math.pi / 360) / 2 + 1))


def arc_points(center: Point, radius: int, start: int, end: int) -> list[Point]:
    """Points along an arc of a circle, angles in degrees."""
    _check_radius(radius)
    if radius == 0:
        return [center]
    start_rad = start * math.pi / 180.0
    end_rad = end * math.pi / 180.0
    count = arc_point_count(radius, start, end)
    if count == 1:
        angles = [start_rad]
    else:
        angles = [start_rad + (end_rad - start_rad) * i / (count - 1) for i in range(count)]
    return [
        Point(int(center.x + radius * math.cos(a)), int(center.y + radius * math.sin(a)))
        for a in angles
    ]


def rounded_frame(rect: Rect, radius: int, part: FramePart) -> list[Point]:
    """Polygon of a rectangle with rounded corners, or its upper or lower half."""
    x, y = rect.top_left.x, rect.top_left.y
    w, h = rect.size.width, rect.size.height
    top_left = Point(x + radius, y + radius)
    top_right = Point(x + w - radius, y + radius)
    bottom_left = Point(x + radius, y + h - radius)
    bottom_right = Point(x + w - radius, y + h - radius)

    if part is FramePart.FULL:
        return (arc_points(top_left, radius, 180, 270)
                + arc_points(top_right, radius, 270, 360)
                + arc_points(bottom_right, radius, 0, 90)
                + arc_points(bottom_left, radius, 90, 180))

    half = _cdiv(h, 2) if w > h else _cdiv(w, 2)
    inner_top_left = Point(x + half, y + half)
    inner_bottom_right = Point(x - half + w, y - half + h)

    if part is FramePart.HIGH:
        return (arc_points(bottom_left, radius, 135, 180)
                + arc_points(top_left, radius, 180, 270)
                + arc_points(top_right, radius, 270, 315)
                + [inner_bottom_right, inner_top_left])

    return (arc_points(top_right, radius, 315, 360)
            + arc_points(bottom_right, radius, 0, 90)
            + arc_points(bottom_left, radius, 90, 135)
            + [inner_top_left, inner_bottom_right])


def half_rounded_frame(rect: Rect, radius: int) -> list[Point]:
    """Polygon of a rectangle whose top corners only are rounded."""
    x, y = rect.top_left.x, rect.top_left.y
    w, h = rect.size.width, rect.size.height
    bottom_left = Point(x, y + h)
    bottom_right = Point(x + w, y + h)
    return (arc_points(Point(x + radius, y + radius), radius, 180, 270)
            + arc_points(Point(x + w - radius, y + radius), radius, 270, 360)
            + [bottom_right, bottom_left])


def circle_points(center: Point, radius: int) -> list[Point]:
    """Points on the circumference of a circle, density proportional to radius."""
    _check_radius(radius)
    count = int(2 * math.pi * radius * CIRCLE_POINT_DENSITY)
    if count == 0:
        return []
    step = 2 * math.pi / count
    return [
        Point(int(center.x + radius * math.cos(i * step)),
              int(center.y + radius * math.sin(i * step)))
        for i in range(count)
    ]


def intersect(a: Rect, b: Rect) -> Rect | None:
    """Intersection of two rectangles, or None when they do not overlap."""
    left = max(a.left, b.left)
    top = max(a.top, b.top)
    right = min(a.right, b.right)
    bottom = min(a.bottom, b.bottom)
    if right <= left or bottom <= top:
        return None
    return Rect(Point(left, top), Size(right - left, bottom - top))


def draw_button(canvas: Canvas, rect: Rect, radius: int, color: Color,
                relief: Relief, clipper: Rect | None) -> None:
    """Draw a rounded button with the given relief."""
    lighter = _shift_color(color, -10)
    darker = _shift_color(color, 10)

    high = rounded_frame(rect, radius, FramePart.HIGH)
    low = rounded_frame(rect, radius, FramePart.LOW)

    w = rect.size.width - _cdiv(rect.size.height, 10)
    h = rect.size.height - _cdiv(rect.size.height, 10)
    offset = _cdiv(h, 20)
    inner = Rect(rect.top_left + Point(offset, offset), Size(w, h))
    body = rounded_frame(inner, radius, FramePart.FULL)

    if relief is Relief.RAISED:
        canvas.draw_polygon(low, darker, clipper)
        canvas.draw_polygon(high, lighter, clipper)
    elif relief is Relief.SUNKEN:
        canvas.draw_polygon(low, lighter, clipper)
        canvas.draw_polygon(high, darker, clipper)
    else:
        body = rounded_frame(rect, radius, FramePart.FULL)

    canvas.draw_polygon(body, color, clipper)


def draw_toplevel(canvas: Canvas, rect: Rect, color: Color, clipper: Rect | None,
                  picking: bool, resizable: AxisSet) -> None:
    """Draw a toplevel window: title bar, body, border, close button and resize handle."""
    x, y = rect.top_left.x, rect.top_left.y
    w, h = rect.size.width, rect.size.height

    bar_rect = Rect(Point(x, y - TITLE_BAR_HEIGHT), Size(w - 1, TITLE_BAR_HEIGHT))
    top_bar = half_rounded_frame(bar_rect, TITLE_BAR_RADIUS)
    body = rect_to_points(rect)
    border = [
        rect.top_left,
        Point(x + w - 1, y),
        Point(x + w - 1, y + h - 1),
        Point(x, y + h - 1),
        rect.top_left,
    ]
    handle = rect_to_points(Rect(
        Point(x + w - RESIZE_HANDLE_SIZE, y + h - RESIZE_HANDLE_SIZE),
        Size(RESIZE_HANDLE_SIZE, RESIZE_HANDLE_SIZE)))
    close = circle_points(Point(x + 12, y - 10), CLOSE_BUTTON_RADIUS)

    if picking:
        canvas.draw_polygon(body, color, clipper)
        canvas.draw_polygon(top_bar, color, clipper)
        return

    canvas.draw_polygon(top_bar, TOPLEVEL_DARK, clipper)
    canvas.draw_polygon(body, color, clipper)
    canvas.draw_polyline(border, TOPLEVEL_DARK, clipper)
    canvas.draw_polygon(close, CLOSE_RED, clipper)
    if resizable is not AxisSet.NONE:
        canvas.draw_polygon(handle, TOPLEVEL_DARK, clipper)