import pytest

from coordpicker.canvas import Canvas
from coordpicker.geometry import Point, Rect, Vector

VIEW = Rect(Point(0.0, 0.0), Point(1000.0, 800.0))


def test_new_canvas_defaults():
    canvas = Canvas(1920.0, 1080.0)
    assert canvas.zoom == 0.5
    assert canvas.offset == Vector(0.0, 0.0)
    assert canvas.size() == (1920.0, 1080.0)


def test_set_size():
    canvas = Canvas(1920.0, 1080.0)
    canvas.set_size(390.0, 844.0)
    assert canvas.size() == (390.0, 844.0)


def test_screen_rect_centred_and_scaled():
    canvas = Canvas(1920.0, 1080.0)
    rect = canvas.screen_rect(VIEW)
    assert rect.center() == VIEW.center()
    assert rect.width() == pytest.approx(canvas.width * canvas.zoom)
    assert rect.height() == pytest.approx(canvas.height * canvas.zoom)


def test_pan_moves_screen_rect():
    canvas = Canvas(1920.0, 1080.0)
    before = canvas.screen_rect(VIEW)
    delta = Vector(30.0, -12.0)
    canvas.pan(delta)
    after = canvas.screen_rect(VIEW)
    assert after.min == before.min + delta
    assert canvas.offset == delta


def test_canvas_origin_maps_to_rect_min():
    canvas = Canvas(1920.0, 1080.0)
    assert canvas.canvas_to_screen(Point(0.0, 0.0), VIEW) == canvas.screen_rect(VIEW).min


@pytest.mark.parametrize("point", [Point(0.0, 0.0), Point(100.0, 250.0), Point(1920.0, 1080.0)])
def test_screen_canvas_round_trip(point):
    canvas = Canvas(1920.0, 1080.0)
    canvas.pan(Vector(17.0, 9.0))
    screen = canvas.canvas_to_screen(point, VIEW)
    back = canvas.screen_to_canvas(screen, VIEW)
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_zoom_clamped_to_maximum():
    canvas = Canvas(1920.0, 1080.0)
    for _ in range(100):
        canvas.zoom_at(1.1, VIEW.center(), VIEW)
    assert canvas.zoom == 10.0


def test_zoom_clamped_to_minimum():
    canvas = Canvas(1920.0, 1080.0)
    for _ in range(100):
        canvas.zoom_at(1 / 1.1, VIEW.center(), VIEW)
    assert canvas.zoom == 0.1


def test_zoom_at_view_center_keeps_offset():
    canvas = Canvas(1920.0, 1080.0)
    canvas.zoom_at(2.0, VIEW.center(), VIEW)
    assert canvas.zoom == pytest.approx(1.0)
    assert canvas.offset == Vector(0.0, 0.0)


def test_zoom_keeps_point_under_cursor():
    canvas = Canvas(1920.0, 1080.0)
    mouse = Point(700.0, 300.0)
    under = canvas.screen_to_canvas(mouse, VIEW)
    canvas.zoom_at(1.1, mouse, VIEW)
    screen = canvas.canvas_to_screen(under, VIEW)
    assert screen.x == pytest.approx(mouse.x)
    assert screen.y == pytest.approx(mouse.y)


def test_reset_view():
    canvas = Canvas(1920.0, 1080.0)
    canvas.pan(Vector(5.0, 5.0))
    canvas.zoom_at(3.0, Point(10.0, 10.0), VIEW)
    canvas.reset_view()
    assert canvas.zoom == 0.5
    assert canvas.offset == Vector(0.0, 0.0)