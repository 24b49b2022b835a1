"""Byte-buffer operations over bytes, bytearray and memoryview objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf, c: int, n: int):
    """Fill the first n bytes of buf with the low byte of c; return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of count * size bytes.

    Raises MemoryError when the product does not fit in a 64-bit size.
    """
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)


def memchr(data, c: int, n: int) -> int | None:
    """Index of the first byte equal to c within the first n bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Difference of the first differing bytes in the first n, or 0."""
    _check_length(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst, src, n: int):
    """Copy n bytes from src to the start of dst; return dst."""
    _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(dst, src, n: int):
    """Copy n bytes from src to dst, correct even when the two overlap."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst