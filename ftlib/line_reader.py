"""Reading a file descriptor line by line through a fixed-size buffer."""

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 32

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class LineReader:
    """Reads lines from a raw file descriptor, buffer_size bytes at a time.

    Lines are returned without their newline. When the input ends, the text
    after the last newline is returned as a final line, even if empty.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()
        self._finished = False

    def _next(self) -> "tuple[str, bool]":
        """The next line and whether a newline ended it."""
        while True:
            newline = self._pending.find(b"\n")
            if newline != -1:
                line = bytes(self._pending[:newline])
                del self._pending[: newline + 1]
                return line.decode(_ENCODING, _ERRORS), True
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                line = bytes(self._pending)
                self._pending.clear()
                return line.decode(_ENCODING, _ERRORS), False
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """The next line, or None once the final line has been returned."""
        if self._finished:
            return None
        line, terminated = self._next()
        if not terminated:
            self._finished = True
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: "dict[int, LineReader]" = {}


def get_next_line(fd: int) -> "tuple[str, bool]":
    """Read the next line from fd, keeping leftover bytes between calls.

    Returns the line and True when a newline ended it, or the remaining text
    and False when the input is exhausted.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line, terminated = reader._next()
    except OSError:
        _readers.pop(fd, None)
        raise
    if not terminated:
        _readers.pop(fd, None)
    return line, terminated