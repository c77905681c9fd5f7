"""Settings and live values shown by the user interface."""

from __future__ import annotations

from dataclasses import dataclass, field

from coordpicker.geometry import Point
from coordpicker.marker import Color


@dataclass
class UiState:
    """Current choices made in the settings panel and the tracked cursor position."""

    selected_resolution: str = "Full HD (1920x1080)"
    custom_width: float = 1920.0
    custom_height: float = 1080.0

    show_grid: bool = True
    grid_size: float = 45.0
    enable_snapping: bool = True

    origin_top_left: bool = True

    marker_color: Color = field(default_factory=lambda: Color(0, 120, 255))

    current_position: Point = field(default_factory=Point)
    current_position_raw: Point = field(default_factory=Point)

    dark_mode: bool = True
    recalculate_markers: bool = True