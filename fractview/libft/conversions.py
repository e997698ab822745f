"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1
_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))


def _wrap_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits.

    Parsing stops at the first other character. Values wrap around the
    32-bit signed range instead of raising.
    """
    chars = iter(text)
    char = next(chars, "")
    while char in _WHITESPACE and char:
        char = next(chars, "")
    negative = False
    if char in ("+", "-") and char:
        negative = char == "-"
        char = next(chars, "")
    number = 0
    while char and "0" <= char <= "9":
        number = (number * 10 + ord(char) - ord("0")) & _MASK32
        char = next(chars, "")
    return _wrap_int32(-number if negative else number)


def itoa(number: int) -> str:
    """Decimal text for a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)