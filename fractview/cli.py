"""Command-line argument handling for the viewer."""

from __future__ import annotations

from collections.abc import Sequence

from .model import ColorMode, FractalState, FractalType

FLOAT_MAX = 3.4028234663852886e38

ERROR_BADGE = "\033[1;41m \u2718 ERROR \033[0m"
INVALID_NAME = (
    "\033[1mPlease enter a correct fractal type : julia, "
    "mandelbrol or multibrot.\033[0m"
)
OPTIONS = (
    "\n\033[1mChoose a type :\033[0m\n"
    "\u27a4 mandelbrot\033[3manimate\033[0m\n"
    "\u27a4 julia [0.00...] [0.00...] \033[3manimate\033[0m "
    "\033[2m0.001643721971153 0.822467633298876\033[0m \n"
    "\u27a4 multibrot \033[2m(no options)\033[0m \033[3manimate\033[0m\n"
    "\033[2m(add 'animate' option for animated color shifting)\033[0m"
)

_DIGITS = frozenset("0123456789")
_ANIMATE = "animate"


class UsageError(ValueError):
    """The command line does not name a fractal the viewer can draw."""


def usage_message() -> str:
    """The error text and option summary printed on a bad command line."""
    return f"{ERROR_BADGE} {INVALID_NAME}\n{OPTIONS}\n"


def is_number(text: str) -> bool:
    """True for an optionally signed decimal with at most one dot, within float range."""
    body = text[1:] if text[:1] in ("-", "+") else text
    if not body or body[0] == ".":
        return False
    if body.count(".") > 1:
        return False
    if any(ch != "." and ch not in _DIGITS for ch in body):
        return False
    return -FLOAT_MAX <= float(text) <= FLOAT_MAX


def _color_mode(args: Sequence[str], expected: int) -> ColorMode:
    """Read the optional trailing word; only an exact 'animate' animates."""
    if len(args) == expected:
        return ColorMode.ANIMATED if args[-1] == _ANIMATE else ColorMode.STATIC
    if len(args) == expected - 1:
        return ColorMode.STATIC
    raise UsageError("unexpected number of arguments")


def parse_args(argv: Sequence[str]) -> FractalState:
    """Build the starting state from the arguments after the program name."""
    args = list(argv)
    name = args[0] if args else None
    if name == "julia" and len(args) >= 3:
        mode = _color_mode(args, 4)
        real, imag = args[1], args[2]
        if not (is_number(real) and is_number(imag)):
            raise UsageError("julia needs two numeric parameters")
        return FractalState(
            kind=FractalType.JULIA,
            color_mode=mode,
            julia_c=complex(float(real), float(imag)),
        )
    if name == "mandelbrot":
        return FractalState(kind=FractalType.MANDELBROT, color_mode=_color_mode(args, 2))
    if name == "multibrot":
        return FractalState(kind=FractalType.MULTIBROT, color_mode=_color_mode(args, 2))
    raise UsageError("unknown fractal type")