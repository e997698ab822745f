"""Copying, bounded concatenation, slicing, trimming and mapping of C-style strings.

Text arguments are read as C strings: anything from the first NUL on is ignored.
Buffers for the bounded copy functions are bytearrays that receive a NUL terminator.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _c_string(text: str) -> str:
    return text.split(_NUL, 1)[0]


def _c_bytes(data: bytes | bytearray | str) -> bytes:
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return raw.split(b"\0", 1)[0]


def strdup(text: str) -> str:
    """Return a copy of the C string in text."""
    return _c_string(text)


def strlcpy(dest: bytearray, src: bytes | bytearray | str, size: int) -> int:
    """Copy src into dest, writing at most size bytes including the terminator.

    Returns the length of src, so a result >= size means the copy was cut short.
    Raises IndexError when dest cannot hold what must be written.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _c_bytes(src)
    if size == 0:
        return len(source)
    copied = min(len(source), size - 1)
    if copied + 1 > len(dest):
        raise IndexError(f"destination holds {len(dest)} bytes, {copied + 1} needed")
    dest[:copied] = source[:copied]
    dest[copied] = 0
    return len(source)


def strlcat(dest: bytearray, src: bytes | bytearray | str, size: int) -> int:
    """Append src to the C string in dest, keeping the total within size bytes.

    Returns the length the full result would have had: len(dest string) + len(src),
    or size + len(src) when dest already fills size bytes.
    Raises IndexError when dest cannot hold what must be written.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    source = _c_bytes(src)
    if size == 0:
        return len(source)
    terminator = dest.find(0)
    dest_len = len(dest) if terminator < 0 else terminator
    if dest_len >= size:
        return size + len(source)
    copied = min(len(source), size - dest_len - 1)
    end = dest_len + copied
    if end + 1 > len(dest):
        raise IndexError(f"destination holds {len(dest)} bytes, {end + 1} needed")
    dest[dest_len:end] = source[:copied]
    dest[end] = 0
    return dest_len + len(source)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from index start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    body = _c_string(text)
    if start >= len(body):
        return ""
    return body[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two C strings."""
    return _c_string(first) + _c_string(second)


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in charset from both ends of text.

    With no charset the text is returned unchanged.
    """
    body = _c_string(text)
    if charset is None:
        return body
    return body.strip(_c_string(charset))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character of text."""
    return "".join(func(index, char) for index, char in enumerate(_c_string(text)))


def striteri(
    buffer: MutableSequence, func: Callable[[int, object], object]
) -> None:
    """Replace each element of buffer, up to the first NUL, by func(index, element)."""
    for index, value in enumerate(buffer):
        if value in (0, _NUL):
            break
        buffer[index] = func(index, value)