import os

from PIL import Image

from crabtool.app import MainWindow, main


def _make_image(path, size=(400, 300)):
    Image.new("RGB", size, (200, 100, 50)).save(path)
    return str(path)


def test_dir_open_sets_navigator_and_shows_dock(tmp_path):
    window = MainWindow(lambda s: [], lambda s: str(tmp_path))
    window.show()
    window.dir_dock_visible = False
    window.toolbox.open_dir()
    assert window.dir_navigator.root == os.path.abspath(tmp_path)
    assert window.dir_dock_visible is True


def test_files_open_loads_items_and_hides_dock(tmp_path):
    paths = [_make_image(tmp_path / "b.png"), _make_image(tmp_path / "a.png")]
    window = MainWindow(lambda s: paths, lambda s: "")
    window.toolbox.open_file()
    assert window.image_navigator.file_names == ["a.png", "b.png"]
    assert window.dir_dock_visible is False


def test_path_changed_lists_directory(tmp_path):
    (tmp_path / "sub").mkdir()
    _make_image(tmp_path / "sub" / "c.jpg")
    window = MainWindow(lambda s: [], lambda s: "")
    window.show()
    window.on_dir_open(str(tmp_path))
    window.dir_navigator.select(tmp_path / "sub")
    assert window.image_navigator.file_names == ["c.jpg"]


def test_image_click_shows_image_in_both_views(tmp_path):
    path = _make_image(tmp_path / "a.png")
    window = MainWindow(lambda s: [], lambda s: "")
    window.on_files_open([path])
    window.image_navigator.click(0)
    assert window.viewer.image.size == (400, 300)
    assert window.zoom_panel.image.size == (400, 300)
    assert window.viewer.state.initialized is True


def test_hand_tool_switches_drag_mode():
    window = MainWindow(lambda s: [], lambda s: "")
    window.toolbox.hand_tool_button.trigger()
    assert window.viewer.state.drag_mode is True
    window.toolbox.hand_tool_button.trigger()
    assert window.viewer.state.drag_mode is False


def test_zoom_buttons_drive_viewer(tmp_path):
    window = MainWindow(lambda s: [], lambda s: "")
    window.on_image_clicked(_make_image(tmp_path / "a.png"))
    window.toolbox.zoom_in_button.trigger()
    assert window.viewer.state.zoom_level == 2
    window.toolbox.zoom_to_extents_button.trigger()
    assert window.viewer.state.zoom_level == 1


def test_pointer_moves_magnifier(tmp_path):
    window = MainWindow(lambda s: [], lambda s: "")
    window.on_image_clicked(_make_image(tmp_path / "a.png"))
    window.viewer.state.move((10, 20))
    assert window.zoom_panel.state.center == (10.0, 20.0)


def test_main_lists_directory_images(tmp_path, capsys):
    _make_image(tmp_path / "b.png", (20, 10))
    _make_image(tmp_path / "a.jpg", (20, 10))
    (tmp_path / "readme.txt").write_text("x")
    assert main([str(tmp_path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["a.jpg", "b.png"]


def test_main_lists_given_files(tmp_path, capsys):
    path = _make_image(tmp_path / "only.png", (20, 10))
    assert main([path]) == 0
    assert capsys.readouterr().out.splitlines() == ["only.png"]