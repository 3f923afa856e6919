"""The toolbar: file and directory opening, the hand tool and zoom buttons."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

TOOLBOX_BUTTON_HEIGHT = 30
BUTTON_SIZE = 32
ICON_SIZE = 24
FILE_TYPES = (("Images", "*.png *.jpg *.bmp"), ("All Files", "*.*"))

FileChooser = Callable[[str], Sequence[str]]
DirectoryChooser = Callable[[str], Optional[str]]


def _ask_files(start_dir: str) -> list[str]:
    from tkinter import Tk, filedialog

    root = Tk()
    root.withdraw()
    try:
        chosen = filedialog.askopenfilenames(
            parent=root, title="Select Files", initialdir=start_dir, filetypes=list(FILE_TYPES)
        )
    finally:
        root.destroy()
    return list(chosen) if chosen else []


def _ask_directory(start_dir: str) -> str:
    from tkinter import Tk, filedialog

    root = Tk()
    root.withdraw()
    try:
        chosen = filedialog.askdirectory(
            parent=root, title="Select Directory", initialdir=start_dir, mustexist=True
        )
    finally:
        root.destroy()
    return str(chosen) if chosen else ""


@dataclass(eq=False)
class ToolboxButton:
    """An icon-only tool button; checkable buttons toggle when triggered."""

    name: str
    icon: str
    size: int = BUTTON_SIZE
    icon_size: int = ICON_SIZE
    checkable: bool = False
    checked: bool = False
    triggered: list[Callable[[], object]] = field(default_factory=list)
    toggled: list[Callable[[bool], object]] = field(default_factory=list)

    def trigger(self) -> None:
        if self.checkable:
            self.checked = not self.checked
            for listener in self.toggled:
                listener(self.checked)
        for listener in self.triggered:
            listener()


class Toolbox:
    """The row of tool buttons above the image.

    Choosing files and directories is delegated to the given callables,
    which receive the starting directory; by default they are dialogs.
    """

    def __init__(
        self,
        choose_files: Optional[FileChooser] = None,
        choose_directory: Optional[DirectoryChooser] = None,
        start_dir: Optional[str] = None,
    ) -> None:
        self.choose_files = choose_files or _ask_files
        self.choose_directory = choose_directory or _ask_directory
        self.start_dir = start_dir if start_dir is not None else os.path.expanduser("~")
        self.height = TOOLBOX_BUTTON_HEIGHT
        self.files_open: list[Callable[[list[str]], None]] = []
        self.dir_open: list[Callable[[str], None]] = []

        self.open_file_button = ToolboxButton("Open File", "file-add-fill.png")
        self.open_file_button.triggered.append(self.open_file)
        self.open_dir_button = ToolboxButton("Open Directory", "folder-fill.png")
        self.open_dir_button.triggered.append(self.open_dir)
        self.save_button = ToolboxButton("Save", "save.png")
        self.hand_tool_button = ToolboxButton("Move", "drag.png", checkable=True)
        self.zoom_in_button = ToolboxButton("Zoom In", "zoom-in.png")
        self.zoom_out_button = ToolboxButton("Zoom Out", "zoom-out.png")
        self.zoom_to_extents_button = ToolboxButton("Zoom To Extents", "zoom-to-extents.png")

    @property
    def buttons(self) -> tuple[ToolboxButton, ...]:
        """The buttons in the order they are laid out."""
        return (
            self.open_file_button,
            self.open_dir_button,
            self.save_button,
            self.hand_tool_button,
            self.zoom_in_button,
            self.zoom_out_button,
            self.zoom_to_extents_button,
        )

    def open_file(self) -> list[str]:
        """Ask for image files; listeners hear of them unless none were chosen."""
        names = list(self.choose_files(self.start_dir) or [])
        if not names:
            return []
        for listener in self.files_open:
            listener(names)
        return names

    def open_dir(self) -> Optional[str]:
        """Ask for a directory; listeners hear of it unless none was chosen."""
        directory = self.choose_directory(self.start_dir)
        if not directory:
            return None
        for listener in self.dir_open:
            listener(directory)
        return directory