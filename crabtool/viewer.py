"""Zoom and selection state of the main image view."""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from PIL import Image

from .selection import Point, Rect, SelectionRect

MIN_ZOOM = 1
MAX_ZOOM = 20
MIN_PIXEL_DENSITY = 10.0  # screen pixels per image pixel at the deepest zoom
SMOOTH_BELOW_SCALE = 2.0
MIN_VISIBLE_AREA = 60.0
_EPSILON = 1e-9


def _round_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _is_unit_zoom(level: float) -> bool:
    return _round_away(level * 1000) == 1000


def zoom_scale(level: float, min_zoom: float, max_zoom: float, scale_max: float) -> float:
    """Scale factor for a zoom level, interpolated logarithmically up to scale_max."""
    if max_zoom == min_zoom:
        raise ValueError("zoom range is empty")
    return scale_max ** ((level - min_zoom) / (max_zoom - min_zoom))


def _open_image(path: Any) -> Optional[Image.Image]:
    if path is None:
        return None
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except (OSError, ValueError):
        return None


class ViewerState:
    """What the main view shows: its scale, the image and the selections.

    ``scale`` is screen pixels per image pixel; ``viewport`` is the view's
    size in screen pixels.
    """

    def __init__(self, viewport: tuple[float, float] = (800.0, 600.0)) -> None:
        self.viewport = (float(viewport[0]), float(viewport[1]))
        self.image_size: Optional[tuple[int, int]] = None
        self.scale = 1.0
        self.zoom_level = 1.0
        self.resized = False
        self.initialized = False
        self.drag_mode = False
        self.smooth = True
        self.rectangles: list[SelectionRect] = []
        self.current_rect: Optional[SelectionRect] = None
        self.start_pos: Point = (0.0, 0.0)
        self.position_listeners: list[Callable[[Point], None]] = []

    def set_image_size(self, width: int, height: int) -> None:
        """Show a new image of the given size, dropping all selections."""
        self.clear()
        if width > 0 and height > 0:
            self.image_size = (int(width), int(height))
            self.initialized = True
        self.zoom_to_extent()

    def clear(self) -> None:
        self.current_rect = None
        self.rectangles.clear()
        self.image_size = None
        self.initialized = False

    def resize(self, width: float, height: float) -> None:
        """Change the viewport size, refitting the image unless zoomed in."""
        self.viewport = (float(width), float(height))
        if not self.initialized:
            return
        if not self.resized:
            self.zoom_to_extent()
        self._check_zoom()
        self._update_rects()

    def _fit(self) -> None:
        if self.image_size is None:
            return
        view_width, view_height = self.viewport
        if view_width <= 0 or view_height <= 0:
            return
        image_width, image_height = self.image_size
        self.scale = min(view_width / image_width, view_height / image_height)

    def set_zoom(self, level: float) -> None:
        self._fit()
        self.zoom_level = level
        if _is_unit_zoom(level):
            self.resized = False
            return
        self.resized = True
        clamped = min(max(level, MIN_ZOOM), MAX_ZOOM)
        scale_max = MIN_PIXEL_DENSITY / self.scale
        self.scale *= zoom_scale(clamped, MIN_ZOOM, MAX_ZOOM, scale_max)
        self._check_zoom()
        self._update_rects()

    def zoom_in(self) -> None:
        self.set_zoom(self.zoom_level + 1)

    def zoom_out(self) -> None:
        self.set_zoom(self.zoom_level - 1)

    def zoom_to_extent(self) -> None:
        self.set_zoom(1)

    def _check_zoom(self) -> None:
        if self.image_size is None:
            return
        self.smooth = self.scale < SMOOTH_BELOW_SCALE
        view_width, view_height = self.viewport
        image_width, image_height = self.image_size
        visible_width = view_width / self.scale
        visible_height = view_height / self.scale
        # Never zoom out further than the whole image.
        if visible_width >= image_width - _EPSILON and visible_height >= image_height - _EPSILON:
            self.zoom_to_extent()

    def _update_rects(self) -> None:
        for rect in self.rectangles:
            rect.set_scale(1 / self.scale)

    def _inside_image(self, point: Point) -> bool:
        assert self.image_size is not None
        width, height = self.image_size
        return 0 <= point[0] <= width and 0 <= point[1] <= height

    def press(self, point: Point) -> None:
        """Start a selection at a point, or grab a corner of an existing one."""
        if not self.initialized or not self._inside_image(point):
            return
        if self.drag_mode:
            return
        self.activate_rect_by_point(point)
        if self.current_rect is None:
            self.start_pos = (float(point[0]), float(point[1]))
            self.current_rect = SelectionRect(
                Rect.from_points(self.start_pos, self.start_pos), 1 / self.scale
            )
            self.current_rect.set_scale(1 / self.scale)

    def move(self, point: Point) -> Optional[Point]:
        """Follow the pointer; returns the position clamped to the image."""
        if not self.initialized:
            return None
        assert self.image_size is not None
        width, height = self.image_size
        position = (min(max(float(point[0]), 0.0), width), min(max(float(point[1]), 0.0), height))
        if self.current_rect is not None:
            self.current_rect.set_rect(Rect.from_points(self.start_pos, position).normalized())
        for listener in self.position_listeners:
            listener(position)
        return position

    def release(self) -> Optional[SelectionRect]:
        """Finish the selection; returns it if it was big enough to keep."""
        rect = self.current_rect
        if rect is None:
            return None
        self.current_rect = None
        if rect not in self.rectangles:
            self.rectangles.append(rect)
        if rect.visible_area() < MIN_VISIBLE_AREA:
            self.rectangles = [r for r in self.rectangles if r is not rect]
            return None
        return rect

    def activate_rect_by_point(self, point: Point) -> bool:
        """Make the selection with a corner under the point the current one."""
        distance = 9999.0
        for rect in self.rectangles:
            corner = rect.corner_point(point)
            if corner is None:
                continue
            if self.current_rect is None or math.dist(corner, point) < distance:
                self.current_rect = rect
                self.start_pos = rect.opposite_point(corner)
                distance = abs(math.dist(self.start_pos, point))
        return self.current_rect is not None


class ImageViewer:
    """The main image view: an image file and the state of its display."""

    def __init__(self, viewport: tuple[float, float] = (800.0, 600.0), path: Any = None) -> None:
        self.state = ViewerState(viewport)
        self.image: Optional[Image.Image] = None
        self.path: Any = None
        self.set_image(path)

    def set_image(self, path: Any) -> bool:
        """Load an image; returns False when it cannot be read."""
        self.path = path
        self.image = _open_image(path)
        if self.image is None:
            self.state.clear()
            self.state.zoom_to_extent()
            return False
        self.state.set_image_size(*self.image.size)
        return True

    def zoom_in(self) -> None:
        self.state.zoom_in()

    def zoom_out(self) -> None:
        self.state.zoom_out()

    def zoom_to_extent(self) -> None:
        self.state.zoom_to_extent()

    def set_drag_mode(self, enabled: bool) -> None:
        """Switch between panning the image and drawing selections."""
        self.state.drag_mode = bool(enabled)