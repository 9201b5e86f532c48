import math

import pytest

from eikit.geometry import (
    AxisSet,
    Canvas,
    Color,
    FramePart,
    Point,
    Rect,
    Relief,
    Size,
    arc_point_count,
    arc_points,
    circle_points,
    draw_button,
    draw_toplevel,
    half_rounded_frame,
    intersect,
    rect_to_points,
    rounded_frame,
)


def _within(points, center, radius):
    return all(math.hypot(p.x - center.x, p.y - center.y) <= radius + 1.5 for p in points)


def test_point_addition_and_subtraction():
    a, b = Point(3, 4), Point(10, 20)
    assert (a + b) - b == a


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_rect_to_points_corners():
    rect = Rect(Point(10, 20), Size(5, 3))
    pts = rect_to_points(rect)
    assert len(pts) == 4
    assert pts[0] == rect.top_left
    assert pts[2] - pts[0] == Point(rect.size.width - 1, rect.size.height - 1)
    assert pts[1].y == pts[0].y and pts[3].x == pts[0].x


def test_arc_zero_radius_is_single_center_point():
    center = Point(7, 8)
    assert arc_point_count(0, 0, 90) == 1
    assert arc_points(center, 0, 0, 90) == [center]


def test_arc_length_matches_count():
    for start, end in [(0, 90), (135, 180), (270, 360), (90, 135)]:
        assert len(arc_points(Point(50, 50), 15, start, end)) == arc_point_count(15, start, end)


def test_arc_count_symmetric_for_quarter_circles():
    assert arc_point_count(10, 0, 90) == arc_point_count(10, 180, 270)
    assert arc_point_count(10, 0, 45) < arc_point_count(10, 0, 90)


def test_arc_points_lie_on_circle():
    center = Point(100, 100)
    pts = arc_points(center, 10, 180, 270)
    assert _within(pts, center, 10)
    assert pts[0] == Point(center.x - 10, center.y)


def test_negative_radius_raises():
    with pytest.raises(ValueError):
        arc_point_count(-1, 0, 90)
    with pytest.raises(ValueError):
        circle_points(Point(0, 0), -3)


def test_rounded_frame_full_length():
    rect = Rect(Point(0, 0), Size(100, 60))
    pts = rounded_frame(rect, 10, FramePart.FULL)
    assert len(pts) == 4 * arc_point_count(10, 180, 270)
    assert all(0 <= p.x <= 100 and 0 <= p.y <= 60 for p in pts)


def test_rounded_frame_high_ends_with_inner_points():
    rect = Rect(Point(5, 5), Size(60, 40))
    pts = rounded_frame(rect, 8, FramePart.HIGH)
    half = min(rect.size.width, rect.size.height) // 2
    expected_len = (arc_point_count(8, 135, 180) + arc_point_count(8, 180, 270)
                    + arc_point_count(8, 270, 315) + 2)
    assert len(pts) == expected_len
    assert pts[-1] == Point(rect.left + half, rect.top + half)
    assert pts[-2] == Point(rect.right - half, rect.bottom - half)


def test_rounded_frame_low_ends_with_inner_points_reversed():
    rect = Rect(Point(5, 5), Size(60, 40))
    high = rounded_frame(rect, 8, FramePart.HIGH)
    low = rounded_frame(rect, 8, FramePart.LOW)
    assert low[-2] == high[-1]
    assert low[-1] == high[-2]
    assert len(low) == len(high)


def test_half_rounded_frame_bottom_corners():
    rect = Rect(Point(10, 10), Size(80, 30))
    pts = half_rounded_frame(rect, 5)
    assert pts[-2] == Point(rect.right, rect.bottom)
    assert pts[-1] == Point(rect.left, rect.bottom)
    assert len(pts) == arc_point_count(5, 180, 270) + arc_point_count(5, 270, 360) + 2


def test_circle_points():
    center = Point(40, 40)
    assert circle_points(center, 0) == []
    pts = circle_points(center, 6)
    assert pts[0] == Point(center.x + 6, center.y)
    assert _within(pts, center, 6)
    assert len(circle_points(center, 12)) > len(pts)


def test_intersect():
    a = Rect(Point(0, 0), Size(10, 10))
    b = Rect(Point(5, 5), Size(10, 10))
    assert intersect(a, b) == Rect(Point(5, 5), Size(5, 5))
    assert intersect(a, Rect(Point(20, 20), Size(3, 3))) is None
    inner = Rect(Point(2, 2), Size(3, 3))
    assert intersect(a, inner) == inner
    assert intersect(a, Rect(Point(10, 0), Size(5, 5))) is None


def test_draw_button_raised_and_sunken_swap_colors():
    rect = Rect(Point(10, 10), Size(100, 50))
    color = Color(100, 100, 100, 255)
    raised, sunken = Canvas(), Canvas()
    draw_button(raised, rect, 10, color, Relief.RAISED, None)
    draw_button(sunken, rect, 10, color, Relief.SUNKEN, None)
    assert len(raised.ops) == 3 and len(sunken.ops) == 3
    assert raised.ops[0].color == sunken.ops[1].color
    assert raised.ops[1].color == sunken.ops[0].color
    assert raised.ops[2].color == color
    assert raised.ops[0].color == Color(110, 110, 110, 255)


def test_draw_button_color_wraps():
    canvas = Canvas()
    draw_button(canvas, Rect(Point(0, 0), Size(40, 20)), 5, Color(5, 250, 0, 9), Relief.RAISED, None)
    assert canvas.ops[0].color == Color(15, 4, 10, 9)


def test_draw_button_flat_uses_full_rect():
    rect = Rect(Point(0, 0), Size(60, 30))
    clip = Rect(Point(0, 0), Size(20, 20))
    canvas = Canvas()
    draw_button(canvas, rect, 4, Color(1, 2, 3), Relief.NONE, clip)
    assert len(canvas.ops) == 1
    assert list(canvas.ops[0].points) == rounded_frame(rect, 4, FramePart.FULL)
    assert canvas.ops[0].clipper == clip


def test_draw_toplevel_picking():
    rect = Rect(Point(50, 80), Size(200, 100))
    pick = Color(7, 0, 0)
    canvas = Canvas()
    draw_toplevel(canvas, rect, pick, None, True, AxisSet.BOTH)
    assert [op.kind for op in canvas.ops] == ["polygon", "polygon"]
    assert all(op.color == pick for op in canvas.ops)
    assert list(canvas.ops[0].points) == rect_to_points(rect)


def test_draw_toplevel_normal():
    rect = Rect(Point(50, 80), Size(200, 100))
    color = Color(149, 149, 149)
    fixed, resizable = Canvas(), Canvas()
    draw_toplevel(fixed, rect, color, None, False, AxisSet.NONE)
    draw_toplevel(resizable, rect, color, None, False, AxisSet.BOTH)
    assert len(fixed.ops) == 4
    assert len(resizable.ops) == 5
    border = fixed.ops[2]
    assert border.kind == "polyline"
    assert len(border.points) == 5 and border.points[0] == border.points[-1]
    assert fixed.ops[3].color == Color(230, 40, 40, 255)
    assert fixed.ops[1].color == color
    assert min(p.y for p in fixed.ops[0].points) == rect.top - 30


def test_canvas_clear():
    canvas = Canvas()
    canvas.draw_polygon([Point(0, 0)], Color(0, 0, 0))
    canvas.clear()
    assert canvas.ops == []