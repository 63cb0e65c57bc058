"""String helpers: splitting, trimming, searching, bounded copy and compare.

Positions are returned as indices, with None where nothing is found. The end
of a string acts as a terminating NUL character: searching for ``"\\0"``
finds the position just past the last character, and comparisons treat the
end of the shorter string as a NUL.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional, TypeVar, Union

CharLike = Union[int, str]
T = TypeVar("T")

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on a single separator character, dropping empty pieces."""
    return [piece for piece in text.split(_char(sep)) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    return text[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as absent.

    Returns None only when both are None.
    """
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``char``, or None.

    Searching for NUL yields the index of the string's end.
    """
    ch = _char(char)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``char``, or None.

    Searching for NUL yields the index of the string's end.
    """
    ch = _char(char)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match, otherwise the difference of the code points
    of the first differing pair. Comparison stops at the end of both strings.
    """
    _non_negative(n, "n")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``; a result length
    at least ``size`` means the copy was truncated.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer nothing is appended and the length
    reported is ``size`` plus the length of ``src``.
    """
    _non_negative(size, "size")
    dlen = min(len(dst), size)
    if dlen == size:
        return dst, size + len(src)
    room = size - dlen - 1
    return dst + src[:room], dlen + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Apply ``func(index, item)`` to each item of a mutable sequence in place.

    A value returned by ``func`` replaces the item; None leaves it unchanged.
    """
    for index, item in enumerate(text):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement