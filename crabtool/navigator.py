"""Navigators: the list of images in a directory and the tree of image directories."""

from __future__ import annotations

import os
import threading
from concurrent.futures import Executor
from typing import Any, Callable, Iterable, Optional

from PIL import Image

from .filters import ImageDirectoryIndex, PathLike, list_image_files
from .imagelist import ImageListModel

PIXMAP_MAX_SIDE_SIZE = 300


def thumbnail_size(width: float, height: float, max_side: int = PIXMAP_MAX_SIDE_SIZE) -> tuple[int, int]:
    """Size of a thumbnail whose longer side is max_side, keeping the aspect ratio."""
    if width <= 0 or height <= 0 or max_side <= 0:
        raise ValueError("image size and maximum side must be positive")
    factor = max(width, height) / max_side
    return max(1, int(width / factor)), max(1, int(height / factor))


def load_thumbnail(path: PathLike, max_side: int = PIXMAP_MAX_SIDE_SIZE) -> Optional[Image.Image]:
    """Read an image as a thumbnail; returns None when it cannot be read."""
    if max_side <= 0:
        raise ValueError("maximum side must be positive")
    try:
        with Image.open(path) as image:
            width, height = image.size
            # A quick coarse pass first, somewhat larger than the final size.
            factor = max(max(width, height) / (max_side * 2), 1.0)
            coarse = image.resize(
                (max(1, int(width / factor)), max(1, int(height / factor))),
                Image.Resampling.NEAREST,
            )
    except (OSError, ValueError):
        return None
    return coarse.resize(thumbnail_size(*coarse.size, max_side), Image.Resampling.LANCZOS)


class ImageNavigator:
    """The list of images shown beside the main view.

    Thumbnails are loaded on the given executor, or at once when there is none.
    Results of a listing that has since been replaced are dropped.
    """

    def __init__(
        self,
        default_thumbnail: Any = None,
        broken_thumbnail: Any = None,
        executor: Optional[Executor] = None,
        max_side: int = PIXMAP_MAX_SIDE_SIZE,
    ) -> None:
        self.directory = ""
        self.file_paths: list[str] = []
        self.file_names: list[str] = []
        self.thumbnails: list[Any] = []
        self.model = ImageListModel(default_thumbnail, broken_thumbnail)
        self.executor = executor
        self.max_side = max_side
        self.image_clicked: list[Callable[[str], None]] = []
        self.item_updated: list[Callable[[int], None]] = []
        self._lock = threading.RLock()
        self._generation = 0

    def set_path(self, directory: PathLike) -> None:
        """Show the images directly inside a directory."""
        self.directory = os.fspath(directory)
        self.load_items(list_image_files(self.directory))

    def load_items(self, paths: Iterable[PathLike]) -> None:
        """Show the given image files, sorted, and start loading their thumbnails."""
        ordered = sorted(os.fspath(p) for p in paths)
        with self._lock:
            self._generation += 1
            generation = self._generation
            self.file_paths = list(ordered)
            self.file_names = [os.path.basename(p) for p in ordered]
            self.thumbnails = [None] * len(ordered)
            self.model.update_data(self.file_names, self.thumbnails)
        for index, path in enumerate(ordered):
            if self.executor is None:
                self._load(generation, index, path)
            else:
                self.executor.submit(self._load, generation, index, path)

    def _load(self, generation: int, index: int, path: str) -> None:
        thumbnail = load_thumbnail(path, self.max_side)
        if thumbnail is None:
            thumbnail = self.model.broken_thumbnail
        with self._lock:
            if generation != self._generation:
                return
            self.update_item(index, path, thumbnail)

    def update_item(self, index: int, path: PathLike, thumbnail: Any) -> bool:
        """Set one row's file and thumbnail; False when the row does not exist."""
        path = os.fspath(path)
        with self._lock:
            if not 0 <= index < len(self.thumbnails):
                return False
            self.file_paths[index] = path
            self.file_names[index] = os.path.basename(path)
            self.thumbnails[index] = thumbnail
            self.model.set_item(index, self.file_names[index], thumbnail)
        for listener in self.item_updated:
            listener(index)
        return True

    def click(self, row: int) -> str:
        """Activate a row, telling listeners which image it holds."""
        path = self.file_paths[row]
        for listener in self.image_clicked:
            listener(path)
        return path


class DirNavigator:
    """The tree of directories that hold images.

    A path set before the navigator is first shown is applied when it is.
    """

    def __init__(self) -> None:
        self.root: Optional[str] = None
        self.dir_path = ""
        self.requested_path: Optional[str] = None
        self.index = ImageDirectoryIndex()
        self.initialized = False
        self.path_changed: list[Callable[[str], None]] = []

    def show(self) -> None:
        if self.initialized:
            return
        self.initialized = True
        if self.requested_path is not None:
            self.set_path(self.requested_path)

    def set_path(self, directory: PathLike) -> None:
        """Make a directory the root of the tree."""
        self.requested_path = os.fspath(directory)
        if not self.initialized:
            return
        self.root = os.path.abspath(self.requested_path)
        self.index = ImageDirectoryIndex()

    def children(self, path: Optional[PathLike] = None) -> list[str]:
        """Subdirectories shown under a directory, the root by default."""
        if self.root is None:
            return []
        return self.index.image_subdirs(self.root if path is None else path)

    def has_children(self, path: PathLike) -> bool:
        return self.index.has_image_subdirs(path)

    def select(self, path: PathLike) -> bool:
        """Select a directory; True when the selection changed."""
        if not self.initialized or self.root is None:
            return False
        chosen = os.path.abspath(os.fspath(path))
        if not os.path.isdir(chosen) or chosen == self.dir_path:
            return False
        self.dir_path = chosen
        for listener in self.path_changed:
            listener(chosen)
        return True