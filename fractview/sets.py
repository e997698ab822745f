"""Escape-time iteration for the Mandelbrot, multibrot and Julia sets."""

from __future__ import annotations

from dataclasses import dataclass

from .model import FractalState, FractalType

_BAILOUT = 4.0
_PERIOD = 20
_MANDELBROT_SHIFT = 0.5


@dataclass(frozen=True)
class Escape:
    """How many iterations a point survived and where it ended up."""

    iterations: int
    z: complex


def map_to_plane(value: float, lo: float, hi: float, span: float) -> float:
    """Scale value from [0, span] linearly onto [lo, hi]."""
    return (hi - lo) * (value / span) + lo


def point_for_pixel(state: FractalState, px: int, py: int) -> complex:
    """The complex number under pixel (px, py); row 0 is the top of the view."""
    vp = state.viewport
    real = map_to_plane(float(px), vp.x_min, vp.x_max, float(state.width))
    if state.kind is FractalType.MANDELBROT:
        real -= _MANDELBROT_SHIFT
    imag = map_to_plane(float(py), vp.y_max, vp.y_min, float(state.height))
    return complex(real, imag)


def _iterate_with_cycle_check(c: complex, max_iter: int, step) -> Escape:
    cx, cy = c.real, c.imag
    zx = zy = 0.0
    x2 = y2 = 0.0
    old_x = old_y = 0.0
    period = 0
    i = 0
    while x2 + y2 <= _BAILOUT and i < max_iter:
        zx, zy = step(zx, zy, x2, y2, cx, cy)
        x2 = zx * zx
        y2 = zy * zy
        i += 1
        if zx == old_x and zy == old_y:
            i = max_iter
        period += 1
        if period > _PERIOD:
            period = 0
            old_x, old_y = zx, zy
    return Escape(i, complex(zx, zy))


def _square_step(zx, zy, x2, y2, cx, cy):
    new_y = 2.0 * zx * zy + cy
    new_x = x2 - y2 + cx
    return new_x, new_y


def _fourth_power_step(zx, zy, x2, y2, cx, cy):
    new_x = (x2 * x2) - (6.0 * x2 * y2) + (y2 * y2) + cx
    new_y = 4.0 * zx * zy * (x2 - y2) + cy
    return new_x, new_y


def mandelbrot(c: complex, max_iter: int) -> Escape:
    """Iterate z -> z**2 + c from zero; a detected cycle counts as bounded."""
    return _iterate_with_cycle_check(c, max_iter, _square_step)


def multibrot(c: complex, max_iter: int) -> Escape:
    """Iterate z -> z**4 + c from zero; a detected cycle counts as bounded."""
    return _iterate_with_cycle_check(c, max_iter, _fourth_power_step)


def julia(z: complex, c: complex, max_iter: int) -> Escape:
    """Iterate z -> z**2 + c from the given starting point."""
    zx, zy = z.real, z.imag
    cx, cy = c.real, c.imag
    i = 0
    while i < max_iter:
        if zx * zx + zy * zy > _BAILOUT:
            break
        squared = zx * zx - zy * zy
        zy = 2 * zx * zy + cy
        zx = squared + cx
        i += 1
    return Escape(i, complex(zx, zy))


def escape_for_pixel(state: FractalState, px: int, py: int) -> Escape:
    """Run the state's fractal for the point under pixel (px, py)."""
    point = point_for_pixel(state, px, py)
    if state.kind is FractalType.JULIA:
        return julia(point, state.julia_c, state.max_iter)
    if state.kind is FractalType.MULTIBROT:
        return multibrot(point, state.max_iter)
    return mandelbrot(point, state.max_iter)