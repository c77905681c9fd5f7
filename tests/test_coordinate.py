import pytest

from coordpicker.coordinate import CoordinateSystem
from coordpicker.geometry import Point


def test_defaults():
    system = CoordinateSystem()
    assert system.origin_top_left is True
    assert system.canvas_height == 1080.0


def test_top_left_is_identity():
    system = CoordinateSystem(True)
    p = Point(12.0, 34.0)
    assert system.to_system(p) == p
    assert system.from_system(p) == p


def test_bottom_left_flips_origin():
    system = CoordinateSystem(False)
    assert system.to_system(Point(0.0, 0.0)) == Point(0.0, 1080.0)
    assert system.to_system(Point(0.0, 1080.0)) == Point(0.0, 0.0)


def test_bottom_left_uses_updated_height():
    system = CoordinateSystem(False)
    system.canvas_height = 720.0
    assert system.to_system(Point(5.0, 0.0)) == Point(5.0, 720.0)


@pytest.mark.parametrize("top_left", [True, False])
@pytest.mark.parametrize("point", [Point(0.0, 0.0), Point(100.5, 33.25), Point(1920.0, 1080.0)])
def test_round_trip(top_left, point):
    system = CoordinateSystem(top_left)
    assert system.from_system(system.to_system(point)) == point
    assert system.to_system(system.from_system(point)) == point


def test_bottom_left_keeps_x():
    system = CoordinateSystem(False)
    assert system.to_system(Point(77.0, 10.0)).x == 77.0