"""Plain 2D vectors, points and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A displacement in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, factor: float) -> Vector:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vector(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class Point:
    """A position in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def to_vector(self) -> Vector:
        """The vector from the origin to this point."""
        return Vector(self.x, self.y)

    def __add__(self, other: Vector) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point | Vector) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    min: Point
    max: Point

    @classmethod
    def from_center_size(cls, center: Point, size: Vector) -> Rect:
        """Build a rectangle of the given size centred on a point."""
        half = size / 2.0
        return cls(center - half, center + half)

    def center(self) -> Point:
        return Point((self.min.x + self.max.x) / 2.0, (self.min.y + self.max.y) / 2.0)

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside the rectangle, edges included."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )