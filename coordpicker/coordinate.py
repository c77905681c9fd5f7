"""Conversion between canvas coordinates and the user's coordinate system."""

from __future__ import annotations

from dataclasses import dataclass

from coordpicker.geometry import Point


@dataclass
class CoordinateSystem:
    """A coordinate system with its origin at the top-left or bottom-left corner."""

    origin_top_left: bool = True
    canvas_height: float = 1080.0

    def to_system(self, canvas_pos: Point) -> Point:
        """Convert canvas coordinates to this system."""
        if self.origin_top_left:
            return canvas_pos
        return Point(canvas_pos.x, self.canvas_height - canvas_pos.y)

    def from_system(self, system_pos: Point) -> Point:
        """Convert coordinates in this system back to canvas coordinates."""
        if self.origin_top_left:
            return system_pos
        return Point(system_pos.x, self.canvas_height - system_pos.y)