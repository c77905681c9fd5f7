"""Colours and the markers placed on the canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass

from coordpicker.geometry import Point

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _as_int(value: float) -> int:
    """Truncate toward zero, saturating to a 32-bit range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I32_MAX if value > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, int(value)))


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha, each channel 0..255."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def hex(self) -> str:
        """The colour as #rrggbb, or #rrggbbaa when not fully opaque."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            text += f"{self.a:02x}"
        return text


@dataclass
class Marker:
    """A point placed on the canvas, with its position in the chosen system."""

    position: Point
    system_position: Point
    color: Color

    def label(self) -> str:
        """The marker's system position as whole numbers, e.g. "(x, y)"."""
        return f"({_as_int(self.system_position.x)}, {_as_int(self.system_position.y)})"