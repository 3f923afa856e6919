"""Recognising image files and directories that hold images."""

from __future__ import annotations

import os
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "bmp", "gif", "webp")
IMAGE_EXTENSION_FILTERS = tuple(f"*.{ext}" for ext in IMAGE_EXTENSIONS)


def _suffix(path: PathLike) -> str:
    name = os.path.basename(os.fspath(path))
    head, dot, tail = name.rpartition(".")
    return tail if dot else ""


def is_image_file(path: PathLike) -> bool:
    """Return True when the path's suffix is a known image extension."""
    return _suffix(path).lower() in IMAGE_EXTENSIONS


def _visible_entries(directory: PathLike) -> Iterator[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            listed = list(entries)
    except OSError:
        return
    for entry in listed:
        if not entry.name.startswith("."):
            yield entry


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _image_entries(directory: PathLike) -> Iterator[os.DirEntry]:
    return (e for e in _visible_entries(directory) if _is_file(e) and is_image_file(e.name))


def list_image_files(directory: PathLike) -> list[str]:
    """Return the sorted paths of image files directly inside a directory."""
    base = os.fspath(directory)
    return sorted(os.path.join(base, entry.name) for entry in _image_entries(base))


def _subdirs(directory: str) -> list[str]:
    return sorted(os.path.join(directory, e.name) for e in _visible_entries(directory) if _is_dir(e))


class ImageDirectoryIndex:
    """Answers, with caching, whether directories hold images at any depth."""

    def __init__(self) -> None:
        self._cache: dict[str, bool] = {}

    def contains_images(self, path: PathLike) -> bool:
        """True if the directory or any directory below it holds an image."""
        key = os.path.abspath(os.fspath(path))
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        # Guards against symlink cycles while this directory is being examined.
        self._cache[key] = False
        result = any(True for _ in _image_entries(key)) or any(
            self.contains_images(sub) for sub in _subdirs(key)
        )
        self._cache[key] = result
        return result

    def has_image_subdirs(self, path: PathLike) -> bool:
        """True if some subdirectory of the directory holds images."""
        key = os.path.abspath(os.fspath(path))
        if not os.path.isdir(key):
            return False
        return any(self.contains_images(sub) for sub in _subdirs(key))

    def accepts(self, path: PathLike, root: PathLike) -> bool:
        """True for a directory under root that holds images."""
        key = os.path.abspath(os.fspath(path))
        if not os.path.isdir(key):
            return False
        if not key.startswith(os.path.abspath(os.fspath(root))):
            return False
        return self.contains_images(key)

    def image_subdirs(self, path: PathLike) -> list[str]:
        """Return the sorted subdirectories of path that hold images."""
        key = os.path.abspath(os.fspath(path))
        return [sub for sub in _subdirs(key) if self.accepts(sub, key)]