"""Write characters, strings, lines and integers to a stream or file descriptor.

The ``stream`` argument may be a text stream with a ``write`` method, an
integer file descriptor, or None for standard output.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO, Union

Stream = Union[TextIO, int, None]


def _emit(text: str, stream: Stream) -> None:
    if stream is None:
        sys.stdout.write(text)
    elif isinstance(stream, bool):
        raise TypeError("stream must be a text stream, a file descriptor or None")
    elif isinstance(stream, int):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(c: Union[str, int], stream: Stream = None) -> None:
    """Write a single character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _emit(c, stream)
    elif isinstance(c, int) and not isinstance(c, bool):
        _emit(chr(c & 0xFF), stream)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def put_str(s: Optional[str], stream: Stream = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _emit(s, stream)


def put_endl(s: str, stream: Stream = None) -> None:
    """Write a string followed by a newline."""
    _emit(s + "\n", stream)


def put_nbr(n: int, stream: Stream = None) -> None:
    """Write the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _emit(str(n), stream)