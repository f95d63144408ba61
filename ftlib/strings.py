"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices instead of pointers. ``None`` stands for
"not found". The terminating NUL of a C string is modelled as the index just
past the end of the text.
"""

from collections.abc import Callable
from itertools import zip_longest

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_count(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strchr(s: str, c: str) -> "int | None":
    """Index of the first occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index len(s).
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    found = s.find(c)
    return None if found == -1 else found


def strrchr(s: str, c: str) -> "int | None":
    """Index of the last occurrence of c in s, or None.

    Searching for NUL finds the terminator, at index len(s).
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    found = s.rfind(c)
    return None if found == -1 else found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the character codes at the first mismatch,
    a shorter string comparing as if followed by NUL, or 0 when equal.
    """
    _check_count(n, "character count")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> "tuple[str, int]":
    """Copy src into a buffer of the given size.

    Returns the text that fits, at most size - 1 characters, and the full
    length of src, which the caller compares with size to detect truncation.
    """
    _check_count(size, "buffer size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> "tuple[str, int]":
    """Append src to dest within a buffer of the given size.

    Returns the resulting text and the length the full concatenation would
    have had. When dest already fills the buffer it is left unchanged and
    the length reported is size + len(src).
    """
    _check_count(size, "buffer size")
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strnstr(haystack: str, needle: str, n: int) -> "int | None":
    """Index of needle found wholly within the first n characters of haystack.

    An empty needle is found at index 0.
    """
    _check_count(n, "character count")
    if not needle:
        return 0
    found = haystack[:n].find(needle)
    return None if found == -1 else found


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start; empty past the end."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """s without the leading and trailing characters that belong to charset."""
    return s.strip(charset)


def split(s: str, sep: str) -> "list[str]":
    """The non-empty pieces of s between occurrences of the separator character."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: "Callable[[int, str], str]") -> str:
    """Build a new string by applying func to each index and character of s."""
    return "".join(func(i, ch) for i, ch in enumerate(s))