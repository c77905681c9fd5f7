import pytest

from coordpicker.geometry import Point
from coordpicker.grid import Grid

WIDTH = 1920.0
HEIGHT = 1080.0


def test_defaults():
    grid = Grid(45.0)
    assert grid.visible is True
    assert grid.snapping is False


def test_no_snapping_returns_position():
    grid = Grid(45.0, True, snapping=False)
    p = Point(101.3, 77.7)
    assert grid.snap(p, WIDTH, HEIGHT) == p


def test_interior_snap_value():
    grid = Grid(45.0, snapping=True)
    assert grid.snap(Point(100.0, 100.0), WIDTH, HEIGHT) == Point(90.0, 90.0)


@pytest.mark.parametrize("point", [Point(300.0, 400.0), Point(512.3, 611.9), Point(1000.0, 500.0)])
def test_interior_snap_is_nearest_grid_point(point):
    grid = Grid(45.0, snapping=True)
    snapped = grid.snap(point, WIDTH, HEIGHT)
    assert (snapped.x / 45.0) == pytest.approx(round(snapped.x / 45.0))
    assert (snapped.y / 45.0) == pytest.approx(round(snapped.y / 45.0))
    assert abs(snapped.x - point.x) <= 22.5
    assert abs(snapped.y - point.y) <= 22.5


def test_half_rounds_away_from_zero():
    grid = Grid(10.0, snapping=True)
    assert grid.snap(Point(25.0, 500.0), WIDTH, HEIGHT).x == 30.0


def test_near_left_edge_snaps_to_zero():
    grid = Grid(45.0, snapping=True)
    assert grid.snap(Point(10.0, 500.0), WIDTH, HEIGHT).x == 0.0


def test_near_right_edge_snaps_to_width():
    grid = Grid(45.0, snapping=True)
    assert grid.snap(Point(WIDTH - 5.0, 500.0), WIDTH, HEIGHT).x == WIDTH


def test_near_top_edge_snaps_to_zero():
    grid = Grid(45.0, snapping=True)
    assert grid.snap(Point(500.0, 3.0), WIDTH, HEIGHT).y == 0.0


def test_near_bottom_edge_snaps_to_height():
    grid = Grid(45.0, snapping=True)
    snapped = grid.snap(Point(500.0, HEIGHT - 2.0), WIDTH, HEIGHT)
    assert snapped.y == HEIGHT


def test_snap_is_idempotent():
    grid = Grid(45.0, snapping=True)
    once = grid.snap(Point(812.0, 433.0), WIDTH, HEIGHT)
    assert grid.snap(once, WIDTH, HEIGHT) == once