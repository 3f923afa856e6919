"""The magnifier panel: a zoomed view of the image with a crosshair."""

from __future__ import annotations

import math
from typing import Any, Optional

from PIL import Image

from .selection import Point
from .target import PositionTarget
from .viewer import zoom_scale

MIN_PIXEL_DENSITY = 20.0
SLIDER_MIN = 1
SLIDER_MAX = 100
DEFAULT_WIDTH = 300
PLACEHOLDER_SIZE = (300, 150)
PLACEHOLDER_COLOR = (204, 204, 204)
TARGET_SCALE = 6.0


def _round_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _open_image(path: Any) -> Optional[Image.Image]:
    if path is None:
        return None
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except (OSError, ValueError):
        return None


class ZoomState:
    """Scale, centre and crosshair of the magnifier.

    The view is as wide as the panel and as tall as the image's aspect
    ratio makes it.
    """

    def __init__(self, view_width: int = DEFAULT_WIDTH) -> None:
        self.view_width = int(view_width)
        self.image_size: tuple[int, int] = PLACEHOLDER_SIZE
        self.scale = 1.0
        self.zoom_level = 1.0
        self.center: Point = (0.0, 0.0)
        self.target: Optional[PositionTarget] = None
        self.initialized = False
        self.set_image_size(0, 0)

    def view_height(self) -> int:
        width, height = self.image_size
        return int(self.view_width / (width / height))

    def _fit(self) -> None:
        view_height = self.view_height()
        if self.view_width <= 0 or view_height <= 0:
            return
        width, height = self.image_size
        self.scale = min(self.view_width / width, view_height / height)

    def _image_center(self) -> Point:
        width, height = self.image_size
        return width / 2, height / 2

    def _update_target(self, position: Point, target_scale: float = 0.0) -> None:
        if self.target is None or self.view_width <= 0:
            return
        if _round_away(target_scale * 1000) <= 0:
            target_scale = 1.0 / (self.view_width / self.image_size[0])
        self.target.set_scale(target_scale)
        if position != (0, 0):
            self.target.set_position(position)

    def set_image_size(self, width: int, height: int) -> None:
        """Show an image of the given size; a missing one gets a placeholder."""
        self.initialized = False
        if width <= 0 or height <= 0:
            width, height = PLACEHOLDER_SIZE
        self.image_size = (int(width), int(height))
        self.set_zoom(1)
        if self.target is not None:
            self.target.update_scene_size(self.image_size)
        else:
            self.target = PositionTarget(self.image_size, (0.0, 0.0), TARGET_SCALE)
        self._update_target(self._image_center())
        self.initialized = True

    def set_view_width(self, width: int) -> None:
        """Resize the panel, refitting the image when not zoomed in."""
        self.view_width = int(width)
        if _round_away(self.zoom_level * 1000) == 1000:
            self._fit()
        self._update_target(self._image_center(), 1.0 / self.scale)

    def set_zoom(self, level: float) -> None:
        self._fit()
        self.zoom_level = level
        if _round_away(level * 1000) == 1000:
            self._update_target(self._image_center())
            return
        fit = self.scale
        scale_max = MIN_PIXEL_DENSITY / fit
        factor = zoom_scale(level, SLIDER_MIN, SLIDER_MAX, scale_max)
        self.scale = fit * factor
        self._update_target(self._image_center(), 1.0 / (fit * factor))

    def center_on(self, position: Point) -> None:
        self.center = (float(position[0]), float(position[1]))
        if self.target is not None:
            self.target.set_position(self.center)


class ImageZoomPanel:
    """The magnifier with its zoom slider and zoom buttons."""

    def __init__(self, view_width: int = DEFAULT_WIDTH) -> None:
        self.state = ZoomState(view_width)
        self.slider_value = SLIDER_MIN
        self.image: Optional[Image.Image] = None
        self.set_image(None)

    def set_image(self, path: Any) -> bool:
        """Load an image; returns False when it cannot be read."""
        self.image = _open_image(path)
        if self.image is None:
            self.image = Image.new("RGB", PLACEHOLDER_SIZE, PLACEHOLDER_COLOR)
            self.state.set_image_size(0, 0)
            loaded = False
        else:
            self.state.set_image_size(*self.image.size)
            loaded = True
        self.set_zoom(self.slider_value)
        return loaded

    def set_zoom(self, level: float) -> None:
        self.state.set_zoom(level)

    def center_on(self, position: Point) -> None:
        self.state.center_on(position)

    def _set_slider(self, value: float) -> None:
        value = min(max(int(value), SLIDER_MIN), SLIDER_MAX)
        if value != self.slider_value:
            self.slider_value = value
            self.set_zoom(float(value))

    def zoom_in(self) -> None:
        self._set_slider(self.state.zoom_level + 1)

    def zoom_out(self) -> None:
        self._set_slider(self.state.zoom_level - 1)

    def zoom_to_extent(self) -> None:
        self._set_slider(SLIDER_MIN)