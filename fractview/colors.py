"""Hue-based colouring of escape counts."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def _wrap_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_mod(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def hsv_to_rgb(h: float, s: float, v: float) -> int:
    """Map a hue in degrees to a packed 0xRRGGBB pixel value.

    Saturation and value are accepted for symmetry but do not change the result.
    Hues outside [0, 360) are not normalised, so their channels may overflow
    into neighbouring bits; the result is the 32-bit pixel pattern.
    """
    del s, v
    segment = _trunc_mod(int(h / 60.0), 6)
    fraction = h / 60.0 - segment
    q = int((1.0 - fraction) * 255.0)
    t = int(fraction * 255.0)
    channels = {
        0: (225, t, 0),
        1: (q, 255, 0),
        2: (0, 255, t),
        3: (0, q, 255),
        4: (t, 0, 255),
    }
    red, green, blue = channels.get(segment, (225, 0, q))
    return ((red << 16) | (green << 8) | blue) & _MASK32


def hsv_animate(n: int, frame: int, max_ite: int) -> int:
    """Colour for a frame-dependent gradient value; black when n reaches max_ite."""
    if n == max_ite:
        return 0x000000
    hue = _wrap_int32(n * n) / 15.0 + float(frame)
    return hsv_to_rgb(hue, 1.0, 1.0)