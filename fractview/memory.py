"""Filling, copying and moving bytes inside mutable buffers.

Buffers are ``bytearray`` objects, which are changed in place. Counts
that are negative, or that reach past the end of a buffer, raise
``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(name: str, data: BytesLike, offset: int, n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative")
    if offset + n > len(data):
        raise ValueError(
            f"{n} bytes at offset {offset} do not fit in {name} of length {len(data)}"
        )


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` taken modulo 256."""
    _check_span("buffer", buffer, 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span("src", src, 0, n)
    _check_span("dst", dst, 0, n)
    dst[:n] = bytes(src)[:n]
    return dst


def memccpy(dst: bytearray, src: BytesLike, ch: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dst`` up to and including the first ``ch``.

    At most ``n`` bytes are copied. Returns the index in ``dst`` just
    after the copied ``ch``, or ``None`` when ``ch`` was not among the
    first ``n`` bytes (all ``n`` of which have then been copied).
    """
    _check_span("src", src, 0, n)
    _check_span("dst", dst, 0, n)
    source = bytes(src)[:n]
    index = source.find(ch & 0xFF)
    if index < 0:
        dst[:n] = source
        return None
    dst[:index + 1] = source[:index + 1]
    return index + 1


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from offset ``src`` to offset ``dst``.

    The two regions may overlap; the result is as if the bytes had first
    been copied aside.
    """
    _check_span("buffer", buffer, src, n)
    _check_span("buffer", buffer, dst, n)
    if dst != src:
        buffer[dst:dst + n] = buffer[src:src + n]
    return buffer


def memalloc(size: int) -> bytearray:
    """A new zero-filled buffer of ``size`` bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    return bytearray(size)