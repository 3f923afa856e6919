import pytest
from PIL import Image

from crabtool.viewer import (
    MAX_ZOOM,
    MIN_PIXEL_DENSITY,
    MIN_ZOOM,
    ImageViewer,
    ViewerState,
    zoom_scale,
)


@pytest.fixture
def state():
    viewer = ViewerState((400, 400))
    viewer.set_image_size(200, 100)
    return viewer


def test_zoom_scale_endpoints():
    assert zoom_scale(MIN_ZOOM, MIN_ZOOM, MAX_ZOOM, 7.5) == pytest.approx(1.0)
    assert zoom_scale(MAX_ZOOM, MIN_ZOOM, MAX_ZOOM, 7.5) == pytest.approx(7.5)


def test_zoom_scale_is_monotonic():
    values = [zoom_scale(level, 1, 20, 5.0) for level in range(1, 21)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_zoom_scale_empty_range():
    with pytest.raises(ValueError):
        zoom_scale(3, 2, 2, 5.0)


def test_set_image_size_initializes(state):
    assert state.initialized
    assert state.image_size == (200, 100)
    assert state.zoom_level == 1
    assert state.resized is False


def test_invalid_size_not_initialized():
    viewer = ViewerState((400, 400))
    viewer.set_image_size(0, 10)
    assert viewer.initialized is False
    assert viewer.image_size is None


def test_full_zoom_reaches_pixel_density(state):
    state.set_zoom(MAX_ZOOM)
    assert state.scale == pytest.approx(MIN_PIXEL_DENSITY)
    assert state.resized is True
    assert state.smooth is False


def test_zoom_beyond_max_is_clamped(state):
    state.set_zoom(MAX_ZOOM + 30)
    assert state.scale == pytest.approx(MIN_PIXEL_DENSITY)
    assert state.zoom_level == MAX_ZOOM + 30


def test_zoom_in_increases_scale(state):
    fit = state.scale
    state.zoom_in()
    assert state.zoom_level == 2
    assert state.scale > fit


def test_zoom_out_below_extent_returns_to_extent(state):
    fit = state.scale
    state.zoom_out()
    assert state.zoom_level == 1
    assert state.resized is False
    assert state.scale == pytest.approx(fit)


def test_resize_refits_when_not_zoomed(state):
    state.resize(800, 800)
    assert state.scale * 200 == pytest.approx(800)


def test_selection_is_kept(state):
    state.press((10, 10))
    state.move((110, 60))
    kept = state.release()
    assert kept is not None
    assert state.rectangles == [kept]
    assert kept.rect.corners()[3] == (110.0, 60.0)
    assert state.current_rect is None


def test_tiny_selection_is_dropped(state):
    state.press((10, 10))
    state.move((11, 11))
    assert state.release() is None
    assert state.rectangles == []


def test_press_outside_image_ignored(state):
    state.press((300, 10))
    assert state.current_rect is None


def test_drag_mode_blocks_selection(state):
    state.drag_mode = True
    state.press((10, 10))
    assert state.current_rect is None


def test_move_clamps_and_notifies(state):
    seen = []
    state.position_listeners.append(seen.append)
    result = state.move((-5, 500))
    assert result == (0.0, 100.0)
    assert seen == [(0.0, 100.0)]


def test_move_before_image_returns_none():
    viewer = ViewerState((400, 400))
    assert viewer.move((1, 1)) is None


def test_grabbing_a_corner_resizes_existing_rect(state):
    state.press((10, 10))
    state.move((110, 60))
    first = state.release()
    state.press((110.5, 60))
    assert state.current_rect is first
    assert state.start_pos == (10.0, 10.0)
    state.move((150, 80))
    assert first.rect.corners()[3] == (150.0, 80.0)
    state.release()
    assert state.rectangles == [first]


def test_activate_without_corner(state):
    assert state.activate_rect_by_point((50, 50)) is False


def test_image_viewer_loads_file(tmp_path):
    path = tmp_path / "pic.png"
    Image.new("RGB", (64, 32)).save(path)
    viewer = ImageViewer((200, 200), path)
    assert viewer.state.image_size == (64, 32)
    assert viewer.state.initialized


def test_image_viewer_bad_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    viewer = ImageViewer((200, 200))
    assert viewer.set_image(path) is False
    assert viewer.state.initialized is False


def test_image_viewer_drag_mode(tmp_path):
    path = tmp_path / "pic.png"
    Image.new("RGB", (64, 32)).save(path)
    viewer = ImageViewer((200, 200), path)
    viewer.set_drag_mode(True)
    viewer.state.press((5, 5))
    assert viewer.state.current_rect is None
    viewer.set_drag_mode(False)
    viewer.state.press((5, 5))
    assert viewer.state.current_rect is not None and viewer.state.start_pos == (5.0, 5.0)