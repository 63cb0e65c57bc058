"""Line-by-line reading from a raw file descriptor."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is read in chunks of ``buffer_size`` bytes. Any bytes past the
    newline are kept for the next call. Each line keeps its trailing
    newline. The last line of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"fd must be an int, got {type(fd).__name__}")
        if fd < 0:
            raise ValueError("fd must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._leftover = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted.

        A failed read discards any buffered data and raises OSError.
        """
        buffer = self._leftover
        while b"\n" not in buffer:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._leftover = bytearray()
                raise
            if not chunk:
                break
            buffer += chunk
        if not buffer:
            self._leftover = bytearray()
            return None
        end = buffer.find(b"\n")
        if end < 0:
            self._leftover = bytearray()
            return bytes(buffer)
        line = bytes(buffer[: end + 1])
        self._leftover = bytearray(buffer[end + 1:])
        return line

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line