"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from .conversions import itoa
from .search import strlen


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(char: int | str) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return char
    return chr(char & 0xFF)


def put_char(char: int | str, stream: TextIO | None = None) -> int:
    """Write one character; an int is taken as a byte value. Returns 1."""
    _target(stream).write(_as_char(char))
    return 1


def put_str(text: str, stream: TextIO | None = None) -> int:
    """Write text up to its first NUL; return the number of characters written."""
    body = text[:strlen(text)]
    _target(stream).write(body)
    return len(body)


def put_endl(text: str, stream: TextIO | None = None) -> int:
    """Write text up to its first NUL followed by a newline."""
    written = put_str(text, stream)
    _target(stream).write("\n")
    return written + 1


def put_nbr(number: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit signed integer in decimal.

    Raises OverflowError when number does not fit in 32 bits.
    """
    digits = itoa(number)
    _target(stream).write(digits)
    return len(digits)