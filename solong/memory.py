"""Byte-buffer helpers working on bytes-like objects.

Functions that write take a mutable buffer (a bytearray or memoryview),
modify it in place and return it. Lengths beyond a buffer raise IndexError
instead of running past its end.
"""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of value."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buffer."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes from offset src to offset dest within one buffer.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if dest + n > len(buffer) or src + n > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c's low byte among the first n, or None."""
    _check_length(n, data)
    target = c & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first unequal byte pair in the first n bytes, else 0."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count * size bytes.

    Raises MemoryError when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise MemoryError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(total)