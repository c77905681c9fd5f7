"""The coordinate picker's model: canvas, grid, coordinate system and markers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from coordpicker.canvas import Canvas
from coordpicker.coordinate import CoordinateSystem
from coordpicker.geometry import Point, Rect
from coordpicker.grid import Grid
from coordpicker.marker import Marker, _as_int
from coordpicker.state import UiState

CUSTOM_RESOLUTION = "Custom"
CLICK_THRESHOLD = 10.0
MIN_CUSTOM_SIZE = 100.0
MAX_CUSTOM_SIZE = 10000.0
MIN_GRID_SIZE = 5.0
MAX_GRID_SIZE = 100.0
MIN_GRID_SCREEN_SPACING = 5.0

RESOLUTION_PRESETS: dict[str, tuple[float, float]] = {
    "HD (1280x720)": (1280.0, 720.0),
    "Full HD (1920x1080)": (1920.0, 1080.0),
    "4K (3840x2160)": (3840.0, 2160.0),
    "iPhone (390x844)": (390.0, 844.0),
    "iPad (810x1080)": (810.0, 1080.0),
    CUSTOM_RESOLUTION: (800.0, 600.0),
}


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def format_position(pos: Point) -> str:
    """A position as whole numbers, e.g. "(12, 34)"."""
    return f"({_as_int(pos.x)}, {_as_int(pos.y)})"


@dataclass
class GridLines:
    """Screen positions of the grid lines and canvas edges to draw."""

    vertical: list[float] = field(default_factory=list)
    horizontal: list[float] = field(default_factory=list)
    edges_x: list[float] = field(default_factory=list)
    edges_y: list[float] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.vertical or self.horizontal or self.edges_x or self.edges_y)


class CoordinatePicker:
    """Everything the picker knows, independent of how it is displayed."""

    def __init__(self) -> None:
        self.canvas = Canvas(1920.0, 1080.0)
        self.grid = Grid(45.0, True)
        self.coordinate_system = CoordinateSystem(True)
        self.markers: list[Marker] = []
        self.ui_state = UiState()
        self.resolution_presets = dict(RESOLUTION_PRESETS)

        self.grid.size = self.ui_state.grid_size
        self.grid.visible = self.ui_state.show_grid
        self.grid.snapping = self.ui_state.enable_snapping
        self.coordinate_system.origin_top_left = self.ui_state.origin_top_left
        self.apply_resolution()

    # Canvas size

    def apply_resolution(self) -> None:
        """Resize the canvas to match the selected resolution."""
        state = self.ui_state
        preset = self.resolution_presets.get(state.selected_resolution)
        if preset is None:
            return
        if state.selected_resolution == CUSTOM_RESOLUTION:
            self.canvas.set_size(state.custom_width, state.custom_height)
            self.coordinate_system.canvas_height = state.custom_height
        else:
            width, height = preset
            self.canvas.set_size(width, height)
            state.custom_width = width
            state.custom_height = height
            self.coordinate_system.canvas_height = height

    def select_resolution(self, name: str) -> None:
        """Select a resolution preset by name and apply it."""
        if name not in self.resolution_presets:
            raise KeyError(f"unknown resolution preset: {name!r}")
        self.ui_state.selected_resolution = name
        self.apply_resolution()

    def set_custom_size(self, width: float, height: float) -> None:
        """Set the custom canvas size, clamped to the allowed range."""
        self.ui_state.custom_width = _clamp(width, MIN_CUSTOM_SIZE, MAX_CUSTOM_SIZE)
        self.ui_state.custom_height = _clamp(height, MIN_CUSTOM_SIZE, MAX_CUSTOM_SIZE)
        self.apply_resolution()

    # Grid

    def update_grid(
        self,
        size: float | None = None,
        visible: bool | None = None,
        snapping: bool | None = None,
    ) -> None:
        """Change any of the grid settings; the size is clamped to its range."""
        state = self.ui_state
        if size is not None:
            state.grid_size = _clamp(size, MIN_GRID_SIZE, MAX_GRID_SIZE)
        if visible is not None:
            state.show_grid = visible
        if snapping is not None:
            state.enable_snapping = snapping
        self.grid.size = state.grid_size
        self.grid.visible = state.show_grid
        self.grid.snapping = state.enable_snapping

    def snap(self, pos: Point) -> Point:
        """Snap a canvas position to the grid if snapping is enabled."""
        width, height = self.canvas.size()
        return self.grid.snap(pos, width, height)

    # Pointer interaction

    def hover(self, screen_pos: Point, view_rect: Rect) -> Point:
        """Track the cursor and return its (snapped) position in the chosen system."""
        canvas_pos = self.canvas.screen_to_canvas(screen_pos, view_rect)
        snapped = self.snap(canvas_pos)
        self.ui_state.current_position = self.coordinate_system.to_system(snapped)
        self.ui_state.current_position_raw = self.coordinate_system.to_system(canvas_pos)
        return self.ui_state.current_position

    def place_marker(self, screen_pos: Point, view_rect: Rect) -> Marker | None:
        """Place a marker at a screen position if it falls on the canvas."""
        if not self.canvas.screen_rect(view_rect).contains(screen_pos):
            return None
        snapped = self.snap(self.canvas.screen_to_canvas(screen_pos, view_rect))
        width, height = self.canvas.size()
        if not (0.0 <= snapped.x <= width and 0.0 <= snapped.y <= height):
            return None
        marker = Marker(
            snapped,
            self.coordinate_system.to_system(snapped),
            self.ui_state.marker_color,
        )
        self.markers.append(marker)
        return marker

    def remove_marker_at(self, screen_pos: Point, view_rect: Rect) -> bool:
        """Remove a marker near a screen position; return whether one was removed."""
        if not self.canvas.screen_rect(view_rect).contains(screen_pos):
            return False
        canvas_pos = self.canvas.screen_to_canvas(screen_pos, view_rect)
        return self.remove_nearby_marker(canvas_pos) is not None

    def remove_nearby_marker(self, position: Point) -> Marker | None:
        """Remove the first marker within the click threshold of a canvas position."""
        for index, marker in enumerate(self.markers):
            if (marker.position - position).length() < CLICK_THRESHOLD:
                return self.markers.pop(index)
        return None

    def delete_marker(self, index: int) -> Marker | None:
        """Delete the marker at a list index; out-of-range indices are ignored."""
        if 0 <= index < len(self.markers):
            return self.markers.pop(index)
        return None

    def clear_markers(self) -> None:
        self.markers.clear()

    # Coordinate system

    def set_origin_top_left(self, top_left: bool) -> None:
        """Move the origin, recalculating marker positions if that is enabled."""
        self.ui_state.origin_top_left = top_left
        old_top_left = self.coordinate_system.origin_top_left
        self.coordinate_system.origin_top_left = top_left
        if not self.ui_state.recalculate_markers or old_top_left == top_left:
            return
        height = self.canvas.height
        for marker in self.markers:
            system = marker.system_position
            canvas_pos = system if old_top_left else Point(system.x, height - system.y)
            marker.system_position = self.coordinate_system.to_system(canvas_pos)

    # Text shown in the interface

    def zoom_percentage(self) -> int:
        return _as_int(self.canvas.zoom * 100.0)

    def current_position_text(self) -> str:
        return format_position(self.ui_state.current_position)

    def raw_position_text(self) -> str:
        if self.grid.snapping:
            return "Snapping enabled"
        raw = self.ui_state.current_position_raw
        return f"Raw: ({raw.x:.1f}, {raw.y:.1f})"

    def marker_lines(self) -> list[str]:
        return [
            f"{number}. {format_position(marker.system_position)}"
            for number, marker in enumerate(self.markers, start=1)
        ]

    def all_coordinates_text(self) -> str:
        return "\n".join(self.marker_lines())

    # Drawing geometry

    def grid_lines(self, view_rect: Rect) -> GridLines:
        """Screen positions of the visible grid lines and canvas edges."""
        lines = GridLines()
        if not self.grid.visible:
            return lines
        cell = self.grid.size
        screen_cell = cell * self.canvas.zoom
        if screen_cell < MIN_GRID_SCREEN_SPACING:
            return lines

        border = self.canvas.screen_rect(view_rect)
        origin = self.canvas.canvas_to_screen(Point(0.0, 0.0), view_rect)
        left = math.ceil((origin.x - border.min.x) / screen_cell) + 2
        right = math.ceil((border.max.x - origin.x) / screen_cell) + 2
        up = math.ceil((origin.y - border.min.y) / screen_cell) + 2
        down = math.ceil((border.max.y - origin.y) / screen_cell) + 2

        def in_x(x: float) -> bool:
            return border.min.x <= x <= border.max.x

        def in_y(y: float) -> bool:
            return border.min.y <= y <= border.max.y

        for i in range(-left, right + 1):
            x = self.canvas.canvas_to_screen(Point(i * cell, 0.0), view_rect).x
            if in_x(x):
                lines.vertical.append(x)
        for i in range(-up, down + 1):
            y = self.canvas.canvas_to_screen(Point(0.0, i * cell), view_rect).y
            if in_y(y):
                lines.horizontal.append(y)

        width, height = self.canvas.size()
        for canvas_x in (0.0, width):
            x = self.canvas.canvas_to_screen(Point(canvas_x, 0.0), view_rect).x
            if in_x(x):
                lines.edges_x.append(x)
        for canvas_y in (0.0, height):
            y = self.canvas.canvas_to_screen(Point(0.0, canvas_y), view_rect).y
            if in_y(y):
                lines.edges_y.append(y)
        return lines

    def origin_point(self, view_rect: Rect) -> Point | None:
        """Screen position of the coordinate origin, or None if outside the view."""
        if self.coordinate_system.origin_top_left:
            canvas_origin = Point(0.0, 0.0)
        else:
            canvas_origin = Point(0.0, self.canvas.height)
        origin = self.canvas.canvas_to_screen(canvas_origin, view_rect)
        return origin if view_rect.contains(origin) else None