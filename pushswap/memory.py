"""Byte-buffer operations on bytearrays and other byte sequences."""

from __future__ import annotations

import sys
from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(name: str, length: int, *buffers: Bytes) -> None:
    if length < 0:
        raise ValueError(f"{name} must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise IndexError(
                f"{name} {length} exceeds buffer of {len(buf)} bytes"
            )


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (low 8 bits)."""
    _check_length("length", length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def memcpy(dst: bytearray, src: Bytes, size: int) -> bytearray:
    """Copy ``size`` bytes from ``src`` to the start of ``dst``."""
    _check_length("size", size, dst, src)
    dst[:size] = bytes(src[:size])
    return dst


def memmove(buf: bytearray, dst: int, src: int, size: int) -> bytearray:
    """Copy ``size`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if max(dst, src) + size > len(buf):
        raise IndexError("move reaches past the end of the buffer")
    buf[dst:dst + size] = bytes(buf[src:src + size])
    return buf


def memchr(buf: Bytes, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``length``."""
    _check_length("length", length, buf)
    index = bytes(buf[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: Bytes, b: Bytes, length: int) -> int:
    """Difference of the first differing bytes within ``length``, else 0."""
    _check_length("length", length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > sys.maxsize // size:
        raise OverflowError("requested size overflows")
    return bytearray(count * size)