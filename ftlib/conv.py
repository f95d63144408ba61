"""Conversions between decimal text and 32-bit signed integers."""

from itertools import takewhile

from ftlib.chars import is_digit

_WHITESPACE = "\t\n\v\f\r "
_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _wrap_int(value: int) -> int:
    """Reduce a value to a 32-bit two's-complement integer."""
    modulus = 1 << _INT_BITS
    return (value - _INT_MIN) % modulus + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is read, then every
    following ASCII digit. Text without digits gives 0. The result wraps
    to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)