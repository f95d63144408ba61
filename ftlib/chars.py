"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from typing import TypeVar

CharLike = TypeVar("CharLike", str, int)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: "str | int") -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def is_alpha(c: "str | int") -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: "str | int") -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: "str | int") -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: "str | int") -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: "str | int") -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lowercase letter; anything else is returned as is."""
    code = _code(c)
    if _is_lower(code):
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII uppercase letter; anything else is returned as is."""
    code = _code(c)
    if _is_upper(code):
        return _same_kind(c, code + _CASE_OFFSET)
    return c