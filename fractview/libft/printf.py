"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator

from .search import strlen

_MASK32 = 0xFFFFFFFF


def _wrap_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _integer(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer argument, got {type(value).__name__}") from None


def _char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_integer(value) & 0xFF)


def _string(value: object) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value[:strlen(value)]


def _pointer(value: object) -> str:
    address = 0 if value is None else _integer(value)
    if address < 0:
        raise ValueError("an address must not be negative")
    return "(nil)" if address == 0 else f"0x{address:x}"


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda value: str(_wrap_int32(_integer(value))),
    "i": lambda value: str(_wrap_int32(_integer(value))),
    "u": lambda value: str(_integer(value) & _MASK32),
    "x": lambda value: format(_integer(value) & _MASK32, "x"),
    "X": lambda value: format(_integer(value) & _MASK32, "X"),
}


def _pieces(template: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            yield "%"
        elif spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            yield _CONVERSIONS[spec](value)
        # Unknown conversions produce nothing and consume no argument.


def format_string(template: str, *args: object) -> str:
    """Return the text that printf would write for template and args."""
    if template is None:
        raise TypeError("template must not be None")
    return "".join(_pieces(template, args))


def printf(template: str, *args: object) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(template, *args)
    sys.stdout.write(text)
    return len(text)