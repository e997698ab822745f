"""Length, character search, comparison and substring search on NUL-terminated text.

Text is treated as a C string: anything from the first NUL character on is ignored.
"""

from __future__ import annotations

from itertools import zip_longest

_NUL = "\0"


def _c_string(text: str) -> str:
    return text.split(_NUL, 1)[0]


def _as_char(char: int | str) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return char
    return chr(char & 0xFF)


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_c_string(text))


def strchr(text: str, char: int | str) -> int | None:
    """Index of the first occurrence of char, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    target = _as_char(char)
    body = _c_string(text)
    if target == _NUL:
        return len(body)
    index = body.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: int | str) -> int | None:
    """Index of the last occurrence of char, or None.

    Searching for NUL finds the terminator, at index strlen(text).
    """
    target = _as_char(char)
    body = _c_string(text)
    if target == _NUL:
        return len(body)
    index = body.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most count characters; return the code difference of the first mismatch."""
    if count < 0:
        raise ValueError("count must not be negative")
    left = _c_string(first)[:count]
    right = _c_string(second)[:count]
    for a, b in zip_longest(left, right, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first needle lying wholly within the first length characters.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    target = _c_string(needle)
    if not target:
        return 0
    index = _c_string(haystack)[:length].find(target)
    return None if index < 0 else index