"""Byte-buffer operations on mutable buffers such as bytearray."""

from collections.abc import MutableSequence, Sequence


def _check_length(buf: Sequence[int], n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"{what} holds {len(buf)} bytes, fewer than {n}")


def memset(buf: MutableSequence[int], c: int, n: int) -> MutableSequence[int]:
    """Fill the first n bytes of buf with the byte value c and return buf."""
    _check_length(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: MutableSequence[int], n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest: MutableSequence[int], src: Sequence[int], n: int) -> MutableSequence[int]:
    """Copy n bytes from src to the start of dest and return dest."""
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memccpy(dest: MutableSequence[int], src: Sequence[int], c: int, n: int) -> "int | None":
    """Copy bytes from src to dest, stopping after the first byte equal to c.

    At most n bytes are copied. Returns the index in dest just past the copied
    c, or None when c was not among the first n bytes of src.
    """
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    chunk = bytes(src[:n])
    found = chunk.find(c & 0xFF)
    if found == -1:
        dest[:n] = chunk
        return None
    dest[: found + 1] = chunk[: found + 1]
    return found + 1


def memmove(dest: MutableSequence[int], src: Sequence[int], n: int) -> MutableSequence[int]:
    """Copy n bytes from src to dest, correct even when both are the same buffer."""
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: Sequence[int], c: int, n: int) -> "int | None":
    """Index of the first byte equal to c among the first n bytes, or None."""
    _check_length(buf, n, "buffer")
    found = bytes(buf[:n]).find(c & 0xFF)
    return None if found == -1 else found


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch, or 0."""
    _check_length(a, n, "first buffer")
    _check_length(b, n, "second buffer")
    return next(
        (x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y),
        0,
    )


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of count * size bytes.

    A request for zero bytes still yields a one-byte buffer.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if not count or not size:
        return bytearray(1)
    return bytearray(count * size)