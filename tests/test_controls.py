from dataclasses import replace

import pytest

from fractview.controls import key_pressed, key_released, pan, zoom_at
from fractview.model import FractalState, Key, KeyState


def _plane_point(state, x, y):
    vp = state.viewport
    return (
        vp.x_min + x * vp.width / state.width,
        vp.y_max - y * vp.height / state.height,
    )


def test_escape_requests_close():
    state = FractalState()
    assert key_pressed(state, Key.ESC) is True


def test_arrow_press_sets_flag():
    state = FractalState()
    assert key_pressed(state, Key.UP) is False
    assert key_pressed(state, Key.LEFT) is False
    assert state.keys == KeyState(up=True, left=True)


def test_release_clears_flag():
    state = FractalState()
    key_pressed(state, Key.DOWN)
    key_pressed(state, Key.RIGHT)
    key_released(state, Key.DOWN)
    assert state.keys == KeyState(right=True)


def test_unknown_key_changes_nothing():
    state = FractalState()
    assert key_pressed(state, 0x61) is False
    key_released(state, 0x61)
    assert state.keys == KeyState()


def test_pan_without_keys_keeps_view():
    state = FractalState()
    before = replace(state.viewport)
    pan(state)
    assert state.viewport == before


def test_pan_up_moves_vertically_only():
    state = FractalState()
    before = replace(state.viewport)
    state.keys.up = True
    pan(state)
    vp = state.viewport
    assert vp.y_min == pytest.approx(before.y_min - before.width * 0.005)
    assert vp.height == pytest.approx(before.height)
    assert (vp.x_min, vp.x_max) == (before.x_min, before.x_max)


def test_pan_down_and_up_cancel():
    state = FractalState()
    before = replace(state.viewport)
    state.keys.down = True
    pan(state)
    state.keys.down = False
    state.keys.up = True
    pan(state)
    assert state.viewport.y_min == pytest.approx(before.y_min)
    assert state.viewport.y_max == pytest.approx(before.y_max)


def test_pan_up_takes_priority_over_right():
    state = FractalState()
    before = replace(state.viewport)
    state.keys.up = True
    state.keys.right = True
    pan(state)
    assert (state.viewport.x_min, state.viewport.x_max) == (before.x_min, before.x_max)
    assert state.viewport.y_min < before.y_min


def test_pan_right_moves_horizontally_only():
    state = FractalState()
    before = replace(state.viewport)
    state.keys.right = True
    pan(state)
    assert state.viewport.x_min > before.x_min
    assert state.viewport.width == pytest.approx(before.width)
    assert (state.viewport.y_min, state.viewport.y_max) == (before.y_min, before.y_max)


def test_wheel_up_zooms_in():
    state = FractalState()
    before = replace(state.viewport)
    assert zoom_at(state, 4, 100, 50) is True
    assert state.viewport.width == pytest.approx(before.width * 0.90)
    assert state.viewport.height == pytest.approx(before.height * 0.90)


def test_wheel_down_zooms_out():
    state = FractalState()
    before = replace(state.viewport)
    assert zoom_at(state, 5, 300, 200) is True
    assert state.viewport.width == pytest.approx(before.width * 1.10)
    assert state.viewport.height == pytest.approx(before.height * 1.10)


@pytest.mark.parametrize("button", [4, 5])
@pytest.mark.parametrize("x, y", [(0, 0), (256, 144), (500, 10), (37, 280)])
def test_zoom_keeps_point_under_cursor(button, x, y):
    state = FractalState()
    before = _plane_point(state, x, y)
    zoom_at(state, button, x, y)
    after = _plane_point(state, x, y)
    assert after == pytest.approx(before)


def test_other_buttons_do_nothing():
    state = FractalState()
    before = replace(state.viewport)
    assert zoom_at(state, 1, 100, 100) is False
    assert state.viewport == before