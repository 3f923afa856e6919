"""Rectangles and the resizable selection rectangle drawn over an image."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

Point = tuple[float, float]

LINE_WIDTH = 2.0
HANDLE_SIZE = 8.0
DEFAULT_SCALE = 6.0
LINE_COLOR = (0, 255, 0, 128)
HANDLE_COLOR = (255, 0, 0, 255)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; width and height may be negative."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "Rect":
        return cls(start[0], start[1], end[0] - start[0], end[1] - start[1])

    def normalized(self) -> "Rect":
        """Return the same area with non-negative width and height."""
        x, width = (self.x + self.width, -self.width) if self.width < 0 else (self.x, self.width)
        y, height = (self.y + self.height, -self.height) if self.height < 0 else (self.y, self.height)
        return Rect(x, y, width, height)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Top-left, top-right, bottom-left and bottom-right corners."""
        right = self.x + self.width
        bottom = self.y + self.height
        return ((self.x, self.y), (right, self.y), (self.x, bottom), (right, bottom))


def _round_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _key(point: Point) -> tuple[int, int]:
    return _round_away(point[0] * 10000), _round_away(point[1] * 10000)


class SelectionRect:
    """A selection rectangle with round handles at its four corners.

    ``scale`` is scene units per screen pixel, so outlines and handles keep
    their on-screen size whatever the zoom.
    """

    def __init__(self, rect: Rect, scale: float = DEFAULT_SCALE) -> None:
        self.scale = float(scale)
        self._pen_width = LINE_WIDTH * DEFAULT_SCALE
        self.rect = rect
        self.corners = rect.corners()

    def set_rect(self, rect: Rect) -> None:
        self.rect = rect
        self.corners = rect.corners()

    def set_scale(self, scale: float) -> None:
        self.scale = float(scale)
        self.set_rect(self.rect)
        self._pen_width = LINE_WIDTH * self.scale

    def line_width(self) -> float:
        """Width of the outline pen."""
        return self._pen_width

    def handle_rects(self) -> list[Rect]:
        """Bounding boxes of the corner handles, in corner order."""
        size = HANDLE_SIZE * self.scale
        return [Rect(cx - size / 2, cy - size / 2, size, size) for cx, cy in self.corners]

    def corner_point(self, point: Point) -> Optional[Point]:
        """Return the corner whose handle covers the point, if any."""
        radius = HANDLE_SIZE / 2 * self.scale
        return next((c for c in self.corners if math.dist(c, point) < radius), None)

    def opposite_point(self, point: Point) -> Point:
        """Return the corner diagonally opposite the given corner."""
        px, py = _key(point)
        keys = [(corner, _key(corner)) for corner in self.corners]
        for corner, (cx, cy) in keys:
            if cx != px and cy != py:
                return corner
        # The rectangle has collapsed into a line.
        for corner, ck in keys:
            if ck != (px, py):
                return corner
        return self.corners[0]

    def visible_area(self) -> float:
        """Area in screen pixels at the current scale."""
        return abs(self.rect.width) / self.scale * (abs(self.rect.height) / self.scale)