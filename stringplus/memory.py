"""Routines that work on raw byte buffers: search, compare, copy and fill."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _view(buffer: BytesLike) -> memoryview:
    return memoryview(buffer).cast("B")


def _check_count(count: int, *views: memoryview) -> None:
    if count < 0:
        raise ValueError(f"byte count must not be negative, got {count}")
    for view in views:
        if count > view.nbytes:
            raise ValueError(
                f"byte count {count} exceeds buffer size {view.nbytes}"
            )


def memchr(data: BytesLike, c: int, count: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` within the first
    ``count`` bytes of ``data``, or None when there is no such byte."""
    view = _view(data)
    _check_count(count, view)
    index = view[:count].tobytes().find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    left, right = _view(first), _view(second)
    _check_count(n, left, right)
    for a, b in zip(left[:n].tobytes(), right[:n].tobytes()):
        if a != b:
            return a - b
    return 0


def memcpy(dest: BytesLike, src: BytesLike, count: int) -> BytesLike:
    """Copy ``count`` bytes from ``src`` into the writable buffer ``dest``.

    The bytes are read before anything is written, so overlapping buffers
    are handled correctly. Returns ``dest``.
    """
    target, source = _view(dest), _view(src)
    _check_count(count, target, source)
    target[:count] = source[:count].tobytes()
    return dest


def memmove(dest: BytesLike, src: BytesLike, count: int) -> BytesLike:
    """Copy ``count`` bytes from ``src`` into ``dest``; the regions may overlap.

    Returns ``dest``.
    """
    return memcpy(dest, src, count)


def memset(dest: BytesLike, c: int, count: int) -> BytesLike:
    """Fill the first ``count`` bytes of ``dest`` with the byte ``c``.

    Returns ``dest``.
    """
    target = _view(dest)
    _check_count(count, target)
    target[:count] = bytes([c & 0xFF]) * count
    return dest