"""Turning escape results into pixel colours and whole frames."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from .colors import hsv_animate, hsv_to_rgb
from .model import ColorMode, FractalState
from .sets import Escape, escape_for_pixel

ANIMATION_HUES = 360
BLACK = 0x000000

_MASK32 = 0xFFFFFFFF


def _wrap_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass
class Frame:
    """A width x height grid of packed 0xRRGGBB pixel values, row by row."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("frame dimensions must not be negative")
        self.pixels = [BLACK] * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the frame are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color

    def get(self, x: int, y: int) -> int:
        """Return one pixel; raises IndexError outside the frame."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        return self.pixels[y * self.width + x]

    def rows(self) -> Iterator[list[int]]:
        """Yield the pixels one row at a time, top row first."""
        for start in range(0, self.width * self.height, self.width or 1):
            yield self.pixels[start:start + self.width]


def _smoothing(zn: float) -> float:
    try:
        nu = math.log2(math.log2(zn))
    except ValueError:
        return 0.0
    return nu if math.isfinite(nu) else 0.0


def pixel_color(state: FractalState, escape: Escape) -> int:
    """Colour for one escape result; points that never escaped are black."""
    if escape.iterations == state.max_iter:
        return BLACK
    z = escape.z
    zn = z.real * z.real + z.imag * z.imag
    gradient = int(escape.iterations + 1 - _smoothing(zn))
    state.max_ite = ANIMATION_HUES
    if state.color_mode is ColorMode.ANIMATED:
        return hsv_animate(_wrap_int32(gradient * state.frame), state.frame, state.max_ite)
    return hsv_to_rgb(gradient, 1, 1)


def render(state: FractalState, frame: Frame) -> Frame:
    """Draw the state's fractal into frame and advance the animation counter."""
    for py in range(state.height):
        for px in range(state.width):
            frame.put(px, py, pixel_color(state, escape_for_pixel(state, px, py)))
    state.frame += 1
    return frame