import os

import pytest

from crabtool.filters import ImageDirectoryIndex, is_image_file, list_image_files


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")


@pytest.fixture
def tree(tmp_path):
    _touch(tmp_path / "root.png")
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "photos" / "a.jpg")
    _touch(tmp_path / "nested" / "deep" / "b.gif")
    _touch(tmp_path / "empty" / "readme.md")
    (tmp_path / "bare").mkdir()
    return tmp_path


@pytest.mark.parametrize("name", ["a.jpg", "b.JPEG", "c.Png", "d.bmp", "e.gif", "dir/f.webp"])
def test_image_suffixes_accepted(name):
    assert is_image_file(name) is True


@pytest.mark.parametrize("name", ["a.txt", "noext", "archive.png.zip", "png", "photo.tiff"])
def test_other_suffixes_rejected(name):
    assert is_image_file(name) is False


def test_list_image_files_only_direct_images(tree):
    assert list_image_files(tree) == [os.path.join(tree, "root.png")]


def test_list_image_files_sorted_and_skips_hidden(tmp_path):
    for name in ("b.png", "a.jpg", "c.txt", ".hidden.png"):
        _touch(tmp_path / name)
    assert list_image_files(tmp_path) == [
        os.path.join(tmp_path, "a.jpg"),
        os.path.join(tmp_path, "b.png"),
    ]


def test_list_image_files_ignores_directories_named_like_images(tmp_path):
    (tmp_path / "folder.png").mkdir()
    assert list_image_files(tmp_path) == []


def test_list_image_files_missing_directory(tmp_path):
    assert list_image_files(tmp_path / "missing") == []


def test_contains_images(tree):
    index = ImageDirectoryIndex()
    assert index.contains_images(tree / "photos") is True
    assert index.contains_images(tree / "nested") is True
    assert index.contains_images(tree / "empty") is False
    assert index.contains_images(tree / "bare") is False


def test_image_subdirs(tree):
    index = ImageDirectoryIndex()
    assert index.image_subdirs(tree) == [
        os.path.join(tree, "nested"),
        os.path.join(tree, "photos"),
    ]


def test_has_image_subdirs(tree):
    index = ImageDirectoryIndex()
    assert index.has_image_subdirs(tree) is True
    assert index.has_image_subdirs(tree / "nested") is True
    assert index.has_image_subdirs(tree / "photos") is False
    assert index.has_image_subdirs(tree / "root.png") is False


def test_accepts(tree):
    index = ImageDirectoryIndex()
    assert index.accepts(tree / "photos", tree) is True
    assert index.accepts(tree / "photos", tree / "nested") is False
    assert index.accepts(tree / "root.png", tree) is False
    assert index.accepts(tree / "empty", tree) is False


def test_results_are_cached(tree):
    index = ImageDirectoryIndex()
    assert index.contains_images(tree / "photos") is True
    (tree / "photos" / "a.jpg").unlink()
    assert index.contains_images(tree / "photos") is True
    assert ImageDirectoryIndex().contains_images(tree / "photos") is False