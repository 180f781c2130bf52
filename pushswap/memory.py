"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray]


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer size {len(buf)}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Buffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` in the first ``length`` bytes."""
    _check_length(length, buf)
    index = buf.find(value & 0xFF, 0, length)
    return None if index == -1 else index


def memcmp(a: Buffer, b: Buffer, length: int) -> int:
    """Compare ``length`` bytes; the difference of the first unequal pair, or 0."""
    _check_length(length, a, b)
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Buffer, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` to the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = src[:length]
    return dst


def memmove(dst: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``dst`` from ``src_offset`` to ``dst_offset``.

    Overlapping regions are handled correctly.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if max(dst_offset, src_offset) + length > len(dst):
        raise ValueError("region extends past the end of the buffer")
    dst[dst_offset:dst_offset + length] = bytes(dst[src_offset:src_offset + length])
    return dst