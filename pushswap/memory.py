"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional


def _require(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):  # type: ignore[arg-type]
            raise IndexError(f"length {n} exceeds buffer of size {len(buf)}")  # type: ignore[arg-type]


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``c``."""
    _require(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _require(n, dst, src)
    if n and dst is not src:
        dst[:n] = src[:n]
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes inside ``buffer`` from offset ``src`` to ``dst``.

    The regions may overlap.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _require(length)
    if max(dst, src) + length > len(buffer):
        raise IndexError("region extends past the end of the buffer")
    if dst != src:
        buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n``
    bytes of ``data``, or None."""
    _require(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first
    differing pair, or 0."""
    _require(n, a, b)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)