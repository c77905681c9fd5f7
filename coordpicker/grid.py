"""The alignment grid and snapping to its intersections."""

from __future__ import annotations

import math
from dataclasses import dataclass

from coordpicker.geometry import Point


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class Grid:
    """Grid spacing, visibility and whether positions snap to it."""

    size: float
    visible: bool = True
    snapping: bool = False

    def snap(self, pos: Point, canvas_width: float, canvas_height: float) -> Point:
        """Snap a canvas position to the nearest grid point when snapping is on.

        Positions within half a cell of a canvas edge snap onto that edge.
        """
        if not self.snapping:
            return pos
        size = self.size
        half = size / 2.0
        x = _round_half_away(pos.x / size) * size
        y = _round_half_away(pos.y / size) * size
        if pos.x < half:
            return Point(0.0, y)
        if pos.x > canvas_width - half:
            return Point(canvas_width, y)
        if pos.y < half:
            return Point(x, 0.0)
        if pos.y > canvas_height - half:
            return Point(x, canvas_height)
        return Point(x, y)