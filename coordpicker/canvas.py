"""The virtual canvas: its size, pan offset and zoom, and screen mapping."""

from __future__ import annotations

from dataclasses import dataclass, field

from coordpicker.geometry import Point, Rect, Vector

DEFAULT_ZOOM = 0.5
MIN_ZOOM = 0.1
MAX_ZOOM = 10.0


@dataclass
class Canvas:
    """A canvas of fixed logical size shown panned and zoomed in a view."""

    width: float
    height: float
    offset: Vector = field(default_factory=Vector)
    zoom: float = DEFAULT_ZOOM

    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def pan(self, delta: Vector) -> None:
        """Move the canvas on screen by the given amount."""
        self.offset = self.offset + delta

    def zoom_at(self, factor: float, pos: Point, view_rect: Rect) -> None:
        """Zoom by a factor, keeping the view centred relative to the cursor."""
        old_zoom = self.zoom
        self.zoom = min(max(self.zoom * factor, MIN_ZOOM), MAX_ZOOM)
        mouse_offset = pos - view_rect.center()
        self.offset = self.offset - mouse_offset * (self.zoom / old_zoom - 1.0)

    def reset_view(self) -> None:
        self.offset = Vector()
        self.zoom = DEFAULT_ZOOM

    def screen_rect(self, view_rect: Rect) -> Rect:
        """Where the canvas lies on screen within the given view."""
        center = view_rect.center() + self.offset
        size = Vector(self.width, self.height) * self.zoom
        return Rect.from_center_size(center, size)

    def screen_to_canvas(self, screen_pos: Point, view_rect: Rect) -> Point:
        rect = self.screen_rect(view_rect)
        normalized = (screen_pos - rect.min) / self.zoom
        return Point(normalized.x, normalized.y)

    def canvas_to_screen(self, canvas_pos: Point, view_rect: Rect) -> Point:
        rect = self.screen_rect(view_rect)
        return rect.min + canvas_pos.to_vector() * self.zoom