"""Conversions between decimal text and integers.

Parsing wraps to fixed-width signed integers, as a 32-bit ``int`` and a
64-bit ``long`` do.
"""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _scan(text: str) -> tuple[int, int]:
    """Parse leading blanks, a sign and digits; return (value, end index)."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return sign * value, pos


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring anything after the digits.

    Blank characters may come first and one sign may precede the digits.
    Text with no digits gives 0. The result wraps to a 32-bit signed integer.
    """
    value, _ = _scan(text)
    return _wrap(value, 32)


def atol(text: str) -> int:
    """Parse a decimal integer that must end the text or be followed by a space.

    Leading blanks and one sign are allowed as in :func:`atoi`. If the digits
    are followed by anything other than the end of the text or a space,
    the result is 0. The result wraps to a 64-bit signed integer.
    """
    value, end = _scan(text)
    if end < len(text) and text[end] != " ":
        return 0
    return _wrap(value, 64)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)