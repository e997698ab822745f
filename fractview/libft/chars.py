"""ASCII character classification and case conversion on integer codes."""

from __future__ import annotations

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def is_alpha(code: int) -> bool:
    """True for an ASCII letter."""
    return code in _UPPER or code in _LOWER


def is_digit(code: int) -> bool:
    """True for an ASCII decimal digit."""
    return code in _DIGITS


def is_alnum(code: int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """Upper-case an ASCII lower-case letter; other codes are returned unchanged."""
    return code - _CASE_OFFSET if code in _LOWER else code


def to_lower(code: int) -> int:
    """Lower-case an ASCII upper-case letter; other codes are returned unchanged."""
    return code + _CASE_OFFSET if code in _UPPER else code