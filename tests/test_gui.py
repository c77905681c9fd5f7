import math

import pytest

from coordpicker.canvas import Canvas
from coordpicker.geometry import Point, Rect
from coordpicker.gui import main, parse_args, scroll_zoom_factor


def test_scroll_up_zooms_in():
    assert scroll_zoom_factor(1) == pytest.approx(1.1)
    assert scroll_zoom_factor(120) == pytest.approx(1.1)


def test_scroll_down_zooms_out():
    assert scroll_zoom_factor(-1) == pytest.approx(1 / 1.1)
    assert scroll_zoom_factor(-120.0) == pytest.approx(1 / 1.1)


def test_scroll_in_then_out_is_identity():
    assert math.isclose(scroll_zoom_factor(3) * scroll_zoom_factor(-3), 1.0)


def test_no_scroll_keeps_zoom():
    assert scroll_zoom_factor(0) == 1.0


def test_scroll_factor_applied_to_canvas_round_trips():
    canvas = Canvas(1920.0, 1080.0)
    view = Rect(Point(0.0, 0.0), Point(800.0, 600.0))
    start = canvas.zoom
    canvas.zoom_at(scroll_zoom_factor(1), Point(400.0, 300.0), view)
    assert canvas.zoom > start
    canvas.zoom_at(scroll_zoom_factor(-1), Point(400.0, 300.0), view)
    assert canvas.zoom == pytest.approx(start)


def test_parse_args_defaults():
    args = parse_args([])
    assert (args.width, args.height) == (1280, 800)
    assert args.light is False


def test_parse_args_custom_size_and_theme():
    args = parse_args(["--width", "1024", "--height", "768", "--light"])
    assert (args.width, args.height) == (1024, 768)
    assert args.light is True


def test_parse_args_accepts_minimum_size():
    args = parse_args(["--width", "800", "--height", "600"])
    assert (args.width, args.height) == (800, 600)


@pytest.mark.parametrize(
    "argv",
    [
        ["--width", "799"],
        ["--height", "599"],
        ["--width", "wide"],
    ],
)
def test_parse_args_rejects_bad_sizes(argv):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(argv)
    assert excinfo.value.code == 2


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--width" in capsys.readouterr().out