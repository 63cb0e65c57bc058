"""Byte-level search and comparison over the first ``n`` bytes of a buffer."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _prefix(data: BytesLike, n: int, name: str) -> bytes:
    if n < 0:
        raise ValueError("n must not be negative")
    view = bytes(data)
    if n > len(view):
        raise ValueError(f"n ({n}) exceeds the length of {name} ({len(view)})")
    return view[:n]


def memchr(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    ``value`` is reduced to its low eight bits. Returns None when no such
    byte is found.
    """
    index = _prefix(data, n, "data").find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 if they are equal, otherwise the difference between the first
    pair of bytes that differ, taken as unsigned values.
    """
    left = _prefix(first, n, "first")
    right = _prefix(second, n, "second")
    for a, b in zip(left, right):
        if a != b:
            return a - b
    return 0