"""Writing characters, strings and numbers to raw file descriptors."""

import os

from ftlib.conv import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str, fd: int) -> None:
    """Write one character to fd."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def put_str_fd(s: "str | None", fd: int) -> None:
    """Write s to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode())


def put_endl_fd(s: "str | None", fd: int) -> None:
    """Write s followed by a newline to fd; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode() + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write a 32-bit signed integer in decimal to fd."""
    _write_all(fd, itoa(n).encode())