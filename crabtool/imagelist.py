"""List of image names with thumbnails, and the layout of one list item."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .selection import Rect

TEXT_SPACING = 5
TEXT_HEIGHT = 30
THUMBNAIL_WIDTH_RATIO = 0.7


class ImageListModel:
    """Names and thumbnails shown by the image list.

    A thumbnail of ``None`` is one not loaded yet; the default thumbnail
    stands in for it.
    """

    def __init__(self, default_thumbnail: Any = None, broken_thumbnail: Any = None) -> None:
        self.names: list[str] = []
        self.thumbnails: list[Any] = []
        self.default_thumbnail = default_thumbnail
        self.broken_thumbnail = broken_thumbnail
        self.reset_listeners: list[Callable[[], None]] = []

    def __len__(self) -> int:
        return self.row_count()

    def row_count(self) -> int:
        return len(self.names)

    def display(self, row: int) -> str:
        """The name in a row, or an empty string for a row that does not exist."""
        if 0 <= row < len(self.names):
            return self.names[row]
        return ""

    def decoration(self, row: int) -> Any:
        """The thumbnail in a row, or the default thumbnail if there is none."""
        if 0 <= row < len(self.thumbnails) and self.thumbnails[row] is not None:
            return self.thumbnails[row]
        return self.default_thumbnail

    def update_data(self, names: Sequence[str], thumbnails: Sequence[Any]) -> None:
        """Replace all rows and tell listeners the model was reset."""
        self.names = list(names)
        self.thumbnails = list(thumbnails)
        for listener in self.reset_listeners:
            listener()

    def set_item(self, row: int, name: str, thumbnail: Any) -> None:
        if not (0 <= row < len(self.names) and row < len(self.thumbnails)):
            raise IndexError(f"row {row} out of range")
        self.names[row] = name
        self.thumbnails[row] = thumbnail


@dataclass(frozen=True)
class ItemLayout:
    """Where a list item draws its thumbnail and its caption."""

    image_rect: Rect
    text_rect: Rect


def _trunc_div(a: float, b: float) -> int:
    return int(a / b)


def _fitted_size(thumb_width: float, thumb_height: float, width: float) -> tuple[int, int]:
    if thumb_width <= 0 or width <= 0:
        raise ValueError("thumbnail and item widths must be positive")
    scaling = thumb_width / (width * THUMBNAIL_WIDTH_RATIO)
    return int(thumb_width / scaling), int(thumb_height / scaling)


def item_layout(
    x: int,
    y: int,
    width: int,
    height: int,
    thumb_width: float,
    thumb_height: float,
    font_size: int,
) -> ItemLayout:
    """Centre the thumbnail in the item with the caption just below it."""
    image_width, image_height = _fitted_size(thumb_width, thumb_height, width)
    image_rect = Rect(
        x + _trunc_div(width - image_width, 2),
        y + _trunc_div(height - image_height - font_size - TEXT_SPACING, 2),
        image_width,
        image_height,
    )
    image_bottom = image_rect.y + image_height - 1
    text_rect = Rect(x, image_bottom + TEXT_SPACING, width, height - image_height - TEXT_SPACING)
    return ItemLayout(image_rect, text_rect)


def item_size_hint(thumb_width: float, thumb_height: float, view_width: int) -> tuple[int, int]:
    """Width and height of an item in a view of the given width."""
    _, image_height = _fitted_size(thumb_width, thumb_height, view_width)
    return view_width, image_height + TEXT_HEIGHT


_Optional = Optional