from coordpicker.geometry import Point
from coordpicker.marker import Color
from coordpicker.state import UiState


def test_resolution_defaults():
    state = UiState()
    assert state.selected_resolution == "Full HD (1920x1080)"
    assert (state.custom_width, state.custom_height) == (1920.0, 1080.0)


def test_grid_defaults():
    state = UiState()
    assert state.show_grid is True
    assert state.grid_size == 45.0
    assert state.enable_snapping is True


def test_view_defaults():
    state = UiState()
    assert state.origin_top_left is True
    assert state.dark_mode is True
    assert state.recalculate_markers is True
    assert state.marker_color == Color(0, 120, 255)


def test_positions_start_at_origin():
    state = UiState()
    assert state.current_position == Point(0.0, 0.0)
    assert state.current_position_raw == Point(0.0, 0.0)


def test_instances_are_independent():
    first = UiState()
    second = UiState()
    first.current_position = Point(3.0, 4.0)
    first.grid_size = 20.0
    assert second.current_position == Point(0.0, 0.0)
    assert second.grid_size == 45.0