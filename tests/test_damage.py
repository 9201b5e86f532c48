import pytest

from eikit.damage import InvalidatedRects
from eikit.geometry import Point, Rect, Size


def test_add_keeps_order():
    rects = InvalidatedRects()
    a = Rect(Point(0, 0), Size(10, 10))
    b = Rect(Point(5, 5), Size(20, 30))
    rects.add(a)
    rects.add(b)
    assert list(rects) == [a, b]
    assert len(rects) == 2


def test_clear_empties():
    rects = InvalidatedRects()
    rects.add(Rect(Point(1, 2), Size(3, 4)))
    rects.clear()
    assert len(rects) == 0
    assert list(rects) == []


def test_new_list_is_empty():
    assert list(InvalidatedRects()) == []


def test_add_rejects_non_rect():
    rects = InvalidatedRects()
    with pytest.raises(TypeError):
        rects.add((0, 0, 10, 10))
    assert len(rects) == 0


def test_iteration_snapshot_survives_clear():
    rects = InvalidatedRects()
    r = Rect(Point(0, 0), Size(2, 2))
    rects.add(r)
    seen = []
    for item in rects:
        rects.clear()
        seen.append(item)
    assert seen == [r]
    assert len(rects) == 0