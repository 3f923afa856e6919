"""The main window, which ties the toolbar, the views and the navigators together."""

from __future__ import annotations

import argparse
import os
from concurrent.futures import Executor
from typing import Optional, Sequence

from .navigator import DirNavigator, ImageNavigator
from .toolbox import DirectoryChooser, FileChooser, Toolbox
from .viewer import ImageViewer
from .zoomview import ImageZoomPanel

APP_NAME = "CrabTool"


class MainWindow:
    """The toolbar, the main view, the magnifier and both navigators, connected."""

    def __init__(
        self,
        choose_files: Optional[FileChooser] = None,
        choose_directory: Optional[DirectoryChooser] = None,
        executor: Optional[Executor] = None,
        viewport: tuple[float, float] = (800.0, 600.0),
    ) -> None:
        self.title = APP_NAME
        self.visible = False
        self.dir_dock_visible = True

        self.toolbox = Toolbox(choose_files, choose_directory)
        self.toolbox.hand_tool_button.toggled.append(self.on_move_changed)
        self.toolbox.dir_open.append(self.on_dir_open)
        self.toolbox.files_open.append(self.on_files_open)

        self.viewer = ImageViewer(viewport)
        self.toolbox.zoom_in_button.triggered.append(self.viewer.zoom_in)
        self.toolbox.zoom_out_button.triggered.append(self.viewer.zoom_out)
        self.toolbox.zoom_to_extents_button.triggered.append(self.viewer.zoom_to_extent)

        self.dir_navigator = DirNavigator()
        self.dir_navigator.path_changed.append(self.on_path_changed)

        self.image_navigator = ImageNavigator(executor=executor)
        self.image_navigator.image_clicked.append(self.on_image_clicked)

        self.zoom_panel = ImageZoomPanel()
        self.viewer.state.position_listeners.append(self.zoom_panel.center_on)

    def show(self) -> None:
        self.visible = True
        self.dir_navigator.show()

    def on_dir_open(self, directory: str) -> None:
        self.dir_navigator.set_path(directory)
        self.dir_dock_visible = True

    def on_files_open(self, paths: Sequence[str]) -> None:
        self.image_navigator.load_items(paths)
        self.dir_dock_visible = False

    def on_path_changed(self, directory: str) -> None:
        self.image_navigator.set_path(directory)

    def on_image_clicked(self, path: str) -> None:
        self.viewer.set_image(path)
        self.zoom_panel.set_image(path)

    def on_move_changed(self, enabled: bool) -> None:
        self.viewer.set_drag_mode(enabled)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a directory or image files and list the images found."""
    parser = argparse.ArgumentParser(prog="crabtool", description="Browse and mark up images.")
    parser.add_argument("paths", nargs="*", help="a directory or image files to open")
    args = parser.parse_args(argv)

    window = MainWindow()
    window.show()
    directories = [p for p in args.paths if os.path.isdir(p)]
    files = [p for p in args.paths if not os.path.isdir(p)]
    if files:
        window.on_files_open(files)
    elif directories:
        window.on_dir_open(directories[0])
        window.on_path_changed(directories[0])
    for name in window.image_navigator.file_names:
        print(name)
    return 0