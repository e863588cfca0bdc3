"""Operations on mutable byte buffers: fill, copy, move, search, compare."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(buf: ReadableBuffer, n: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if n > len(buf):
        raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def mem_set(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` taken as a byte; return ``buf``."""
    _check_span(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    mem_set(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_copy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into ``dst``; return ``dst``.

    The result is unspecified when the two regions overlap; use mem_move then.
    """
    _check_span(src, n)
    _check_span(dst, n)
    dst[:n] = src[:n]
    return dst


def mem_move(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into ``dst``, safe for overlap; return ``dst``."""
    _check_span(src, n)
    _check_span(dst, n)
    dst[:n] = bytes(src[:n])
    return dst


def mem_chr(buf: ReadableBuffer, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if none differ."""
    _check_span(a, n)
    _check_span(b, n)
    return next(
        (x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y),
        0,
    )