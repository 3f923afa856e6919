"""Crosshair that marks a position on an image."""

from __future__ import annotations

from .selection import Point, Rect

LINE_WIDTH = 1.0
LINE_THICKNESS = 1.5
DEFAULT_SCALE = 6.0
LINE_COLOR = (10, 10, 10, 128)
FILL_COLOR = (0, 255, 0, 128)


class PositionTarget:
    """A vertical and a horizontal line crossing at a point of the scene."""

    def __init__(
        self,
        size: tuple[float, float],
        position: Point = (0.0, 0.0),
        scale: float = DEFAULT_SCALE,
    ) -> None:
        self.scale = float(scale)
        self.scene_size = (float(size[0]), float(size[1]))
        self.position = (float(position[0]), float(position[1]))
        self._pen_width = LINE_WIDTH * DEFAULT_SCALE
        width, height = self.scene_size
        x, y = self.position
        self._vertical = Rect(x - 1, 0.0, 1.0, height)
        self._horizontal = Rect(0.0, y - 1, width, 1.0)

    def set_position(self, position: Point) -> None:
        self.position = (float(position[0]), float(position[1]))
        x, y = self.position
        width, height = self.scene_size
        thickness = LINE_THICKNESS * self.scale
        self._vertical = Rect(x - 1, 0.0, thickness, height)
        self._horizontal = Rect(0.0, y - 1, width, thickness)

    def set_scale(self, scale: float) -> None:
        self.scale = float(scale)
        self._pen_width = LINE_WIDTH * self.scale
        self.set_position(self.position)

    def update_scene_size(self, size: tuple[float, float]) -> None:
        """Resize the scene, pulling the position back inside it."""
        self.scene_size = (float(size[0]), float(size[1]))
        x, y = self.position
        width, height = self.scene_size
        if x > width:
            x = width
        if y > height:
            # An overflowing y clamps the x coordinate, as the viewer always has.
            x = height
        self.set_position((x, y))

    def line_rects(self) -> tuple[Rect, Rect]:
        """The vertical and the horizontal line."""
        return self._vertical, self._horizontal

    def line_width(self) -> float:
        """Width of the outline pen."""
        return self._pen_width