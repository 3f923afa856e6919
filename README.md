# crabtool

The working parts of an image browser: finding folders that hold images,
listing and thumbnailing the images in a folder, the zoom and selection
state of a main image view, and a magnifier with a crosshair. The parts are
wired together by `crabtool.app.MainWindow`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The `crabtool` command

```
crabtool [PATH ...]
```

Each `PATH` is a directory or a file. If any files are given, they are
loaded (thumbnails included) and their file names are printed, sorted by full
path. Otherwise the first directory given is opened and the names of the
image files directly inside it are printed, sorted. With no arguments nothing
is printed. The command exits with status 0.

## Modules

- `crabtool.filters` — `is_image_file(path)` recognises the extensions
  `jpg`, `jpeg`, `png`, `bmp`, `gif` and `webp` in any letter case.
  `list_image_files(directory)` returns the sorted paths of image files
  directly inside a directory, skipping hidden entries.
  `ImageDirectoryIndex` answers, with a cache, whether a directory holds
  images at any depth (`contains_images`), whether any subdirectory does
  (`has_image_subdirs`), whether a directory under a root should be shown
  (`accepts`), and which subdirectories hold images (`image_subdirs`).
- `crabtool.selection` — `Rect` (with `normalized()` and `corners()`) and
  `SelectionRect`, a rectangle with corner handles whose outline and handles
  follow a scale. `corner_point` finds the corner under a point,
  `opposite_point` the diagonally opposite corner, and `visible_area` the
  area in screen pixels.
- `crabtool.target` — `PositionTarget`, a crosshair of a vertical and a
  horizontal line over a scene.
- `crabtool.imagelist` — `ImageListModel`, the names and thumbnails of a
  list (a missing thumbnail falls back to the default one), and
  `item_layout` / `item_size_hint`, which place a thumbnail and its caption
  inside a list item.
- `crabtool.viewer` — `zoom_scale`, the logarithmic zoom curve;
  `ViewerState`, the main view's scale, zoom level (1 to 20) and
  selections: `press`, `move` and `release` draw a selection or grab a
  corner of an existing one, and selections smaller than 60 square screen
  pixels are dropped on release; `ImageViewer`, which loads an image with
  Pillow into a `ViewerState` and switches drag mode.
- `crabtool.zoomview` — `ZoomState` and `ImageZoomPanel`, the magnifier:
  zoom by slider value (1 to 100), `center_on` a position, a grey
  placeholder when no image can be read.
- `crabtool.navigator` — `thumbnail_size` and `load_thumbnail`;
  `ImageNavigator`, which lists a folder's images and loads thumbnails at
  once or on a given `concurrent.futures` executor, dropping results from a
  listing that has been replaced; `DirNavigator`, the tree of image folders,
  which applies a path set before it is first shown when it is.
- `crabtool.toolbox` — `Toolbox` and `ToolboxButton`. `open_file` and
  `open_dir` ask through the callables you pass in, or through tkinter
  dialogs by default, and tell their listeners what was chosen.
- `crabtool.app` — `MainWindow`, which connects the toolbox, viewer,
  magnifier and navigators, and `main`, the command above.

## Example

```python
from crabtool.filters import ImageDirectoryIndex, is_image_file, list_image_files
from crabtool.selection import Rect, SelectionRect
from crabtool.navigator import thumbnail_size

is_image_file("photo.JPG")          # True
list_image_files("pictures")        # image files directly in the folder

index = ImageDirectoryIndex()
index.contains_images("pictures")   # True if any image lies below it

selection = SelectionRect(Rect(0, 0, 100, 50))
selection.visible_area()            # area in screen pixels at the current scale

thumbnail_size(1200, 800, 300)      # (300, 200)
```

## What it does not do

There is no graphical window. `MainWindow` holds and connects the state of
the views but draws nothing on screen, and the `crabtool` command only prints
the names of the images it finds. Selections are kept in memory and are not
saved: the toolbox has a Save button, but nothing is connected to it.