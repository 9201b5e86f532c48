import pytest

from eikit.geometry import TITLE_BAR_HEIGHT, AxisSet, Canvas, Color, Point, Rect, Size
from eikit.toplevel import Toplevel
from eikit.widget import GeometryParams, Toolkit


class _Manager:
    def __init__(self, origin):
        self.origin = origin

    def run(self, widget):
        widget.screen_location = Rect(self.origin, widget.requested_size)
        widget.geometry_notify()

    def release(self, widget):
        pass


@pytest.fixture
def toolkit():
    tk = Toolkit()
    tk.classes.register(Toplevel)
    return tk


def _placed(toolkit, origin=Point(30, 10), size=Size(320, 240)):
    window = toolkit.create_widget("toplevel")
    window.configure(requested_size=size, title="Hello World")
    window.geom_params = GeometryParams(_Manager(origin))
    return window


def test_defaults(toolkit):
    window = toolkit.create_widget("toplevel")
    assert isinstance(window, Toplevel)
    assert window.title == "title"
    assert window.closable is True
    assert window.resizable is AxisSet.BOTH
    assert window.min_size == Size(160, 120)
    assert window.border_width == 1
    assert window.color == Color(149, 149, 149, 255)


def test_unmanaged_configure_requests_default_size(toolkit):
    window = toolkit.create_widget("toplevel")
    window.configure(title="Login information", resizable=AxisSet.X)
    assert window.requested_size == Size(500, 500)
    assert window.title == "Login information"
    assert window.resizable is AxisSet.X


def test_configure_stores_values(toolkit):
    window = toolkit.create_widget("toplevel")
    window.configure(requested_size=Size(320, 240), color=Color(0xA0, 0xA0, 0xA0),
                     border_width=2, closable=False, min_size=Size(50, 50))
    assert window.requested_size == Size(320, 240)
    assert window.color == Color(0xA0, 0xA0, 0xA0)
    assert window.border_width == 2
    assert window.closable is False
    assert window.min_size == Size(50, 50)
    assert window.title == "title"


def test_geometry_notify_makes_room_for_title_bar(toolkit):
    window = toolkit.create_widget("toplevel")
    window.screen_location = Rect(Point(10, 20), Size(100, 50))
    window.geometry_notify()
    assert window.content_rect == Rect(Point(10, 20 + TITLE_BAR_HEIGHT), Size(100, 50))
    assert window.screen_location == Rect(Point(10, 20), Size(100, 50 + TITLE_BAR_HEIGHT))


def test_draw_pick_uses_pick_color_only(toolkit):
    window = _placed(toolkit)
    pick = Canvas()
    window.draw(Canvas(), pick, None)
    assert len(pick.ops) == 2
    assert all(op.color == window.pick_color for op in pick.ops)


def test_draw_title_text(toolkit):
    window = _placed(toolkit)
    canvas = Canvas()
    window.draw(canvas, Canvas(), None)
    texts = [op for op in canvas.ops if op.kind == "text"]
    assert len(texts) == 1
    assert texts[0].extra[0] == "Hello World"
    assert texts[0].color == Color(0xDF, 0xDF, 0xDF, 0xFF)
    assert texts[0].points[0] == window.content_rect.top_left + Point(20, -25)
    assert texts[0].clipper == window.screen_location


def test_not_resizable_has_no_handle(toolkit):
    resizable = _placed(toolkit)
    fixed = _placed(toolkit)
    fixed.configure(resizable=AxisSet.NONE)
    with_handle, without_handle = Canvas(), Canvas()
    resizable.draw(with_handle, Canvas(), None)
    fixed.draw(without_handle, Canvas(), None)
    assert len(with_handle.ops) == len(without_handle.ops) + 1


def test_title_not_drawn_outside_clipper(toolkit):
    window = _placed(toolkit)
    canvas = Canvas()
    window.draw(canvas, Canvas(), Rect(Point(5000, 5000), Size(10, 10)))
    assert [op for op in canvas.ops if op.kind == "text"] == []


def test_redraw_keeps_content_below_title_bar(toolkit):
    window = _placed(toolkit, origin=Point(0, 0), size=Size(80, 40))
    window.draw(Canvas(), Canvas(), None)
    window.draw(Canvas(), Canvas(), None)
    assert window.content_rect.top == window.screen_location.top + TITLE_BAR_HEIGHT
    assert window.screen_location.size.height == 40 + TITLE_BAR_HEIGHT