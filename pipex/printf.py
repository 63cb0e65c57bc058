"""A small formatter supporting the %c %s %p %d %i %u %x %X and %% conversions.

Integers are reduced to their C widths: %d and %i to a signed 32-bit value,
%u, %x and %X to an unsigned 32-bit value, and %p to an unsigned 64-bit
address. An unknown conversion character produces no output and consumes
no argument; a lone ``%`` at the end of the format is ignored.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF


class _Arguments:
    """Hands out the arguments one at a time."""

    def __init__(self, args: tuple[Any, ...]) -> None:
        self._values: Iterator[Any] = iter(args)

    def take(self, spec: str) -> Any:
        try:
            return next(self._values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} requires an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _U32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a str, got {type(value).__name__}")
    return value


def _pointer(value: Optional[int]) -> str:
    address = 0 if value is None else _require_int(value, "p") & _U64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _decimal(value: Any) -> str:
    return str(_signed32(_require_int(value, "d")))


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _U32)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _U32, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _U32, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted arguments.

    Raises TypeError when ``fmt`` is None, when an argument is missing, or
    when an argument has the wrong type for its conversion.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    arguments = _Arguments(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            parts.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            parts.append(convert(arguments.take(spec)))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)