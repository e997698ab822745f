"""Byte-buffer primitives: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _byte(value: int) -> int:
    """Reduce an int to the unsigned byte it stands for."""
    return value & 0xFF


def _check_span(buffer, offset: int, count: int, name: str) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative")
    if offset + count > len(buffer):
        raise IndexError(
            f"{name} holds {len(buffer)} bytes, {offset + count} requested"
        )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first count bytes of buffer with value and return buffer."""
    _check_span(buffer, 0, count, "buffer")
    buffer[:count] = bytes([_byte(value)]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first count bytes of buffer to zero."""
    memset(buffer, 0, count)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb * size bytes.

    Raises MemoryError when the total would not fit in a machine size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb != 0 and size > SIZE_MAX // nmemb:
        raise MemoryError("requested size overflows")
    return bytearray(nmemb * size)


def memchr(buffer, value: int, count: int) -> int | None:
    """Index of the first byte equal to value among the first count, or None."""
    _check_span(buffer, 0, count, "buffer")
    target = _byte(value)
    return next(
        (index for index, byte in enumerate(buffer[:count]) if byte == target),
        None,
    )


def memcmp(first, second, count: int) -> int:
    """Compare up to count bytes; return the difference of the first unequal pair."""
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return 0
    left = bytes(first[:count])
    right = bytes(second[:count])
    for a, b in zip(left, right):
        if a != b:
            return a - b
    if len(left) < count or len(right) < count:
        raise IndexError("buffers are shorter than the compared length")
    return 0


def memcpy(dest: bytearray, src, count: int) -> bytearray:
    """Copy the first count bytes of src to the start of dest and return dest."""
    _check_span(src, 0, count, "source")
    _check_span(dest, 0, count, "destination")
    dest[:count] = bytes(src[:count])
    return dest


def memmove(
    dest: bytearray, dest_offset: int, src, src_offset: int, count: int
) -> bytearray:
    """Copy count bytes between offsets, correct even when the regions overlap."""
    _check_span(src, src_offset, count, "source")
    _check_span(dest, dest_offset, count, "destination")
    if count == 0 or (dest is src and dest_offset == src_offset):
        return dest
    chunk = bytes(src[src_offset:src_offset + count])
    dest[dest_offset:dest_offset + count] = chunk
    return dest