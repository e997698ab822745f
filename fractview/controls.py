"""Keyboard panning and mouse-wheel zooming of the viewport."""

from __future__ import annotations

from .model import FractalState, Key

SCROLL_UP = 4
SCROLL_DOWN = 5
ZOOM_IN = 0.90
ZOOM_OUT = 1.10
PAN_STEP = 0.005

_ARROWS = {
    Key.UP: "up",
    Key.DOWN: "down",
    Key.RIGHT: "right",
    Key.LEFT: "left",
}


def key_pressed(state: FractalState, key: int) -> bool:
    """Record a key press; return True when the key asks the viewer to close."""
    if key == Key.ESC:
        return True
    try:
        name = _ARROWS[Key(key)]
    except (ValueError, KeyError):
        return False
    setattr(state.keys, name, True)
    return False


def key_released(state: FractalState, key: int) -> None:
    """Record that an arrow key was let go."""
    try:
        name = _ARROWS[Key(key)]
    except (ValueError, KeyError):
        return
    setattr(state.keys, name, False)


def pan(state: FractalState) -> None:
    """Shift the view by a small fraction of its width for the held arrow key.

    Only one direction moves per call, checked in the order up, down, right, left.
    """
    vp = state.viewport
    keys = state.keys
    shift = vp.width * PAN_STEP
    if keys.up:
        vp.y_min -= shift
        vp.y_max -= shift
    elif keys.down:
        vp.y_min += shift
        vp.y_max += shift
    elif keys.right:
        vp.x_min += shift
        vp.x_max += shift
    elif keys.left:
        vp.x_min -= shift
        vp.x_max -= shift


def zoom_at(state: FractalState, button: int, x: int, y: int) -> bool:
    """Zoom around the point under pixel (x, y) for a wheel button.

    Returns True when the button was a wheel step and the view changed.
    """
    if button == SCROLL_UP:
        ratio = ZOOM_IN
    elif button == SCROLL_DOWN:
        ratio = ZOOM_OUT
    else:
        return False
    vp = state.viewport
    width, height = vp.width, vp.height
    mouse_real = vp.x_min + float(x) * width / state.width
    mouse_imag = vp.y_max - float(y) * height / state.height
    vp.x_min = mouse_real - (mouse_real - vp.x_min) * ratio
    vp.x_max = vp.x_min + width * ratio
    vp.y_min = mouse_imag - (mouse_imag - vp.y_min) * ratio
    vp.y_max = vp.y_min + height * ratio
    return True