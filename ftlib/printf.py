"""Formatted output with the conversions c, s, p, d, i, u, x, X and %.

A conversion is written ``%`` followed by optional flags and then the
conversion letter. The flags are ``0`` followed by a zero-padding width,
a plain width, ``-`` followed by a left-justification width, ``.`` followed
by a precision, and ``*``, which takes the value from the next argument.
A negative ``*`` width left-justifies. Any other conversion letter produces
nothing and is skipped. Integer arguments are taken as 32-bit C ``int``
(or ``unsigned int``) values. Pointers are integers or ``None``.
"""

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ftlib.chars import is_digit
from ftlib.output import put_str_fd

_END = "\0"
_NULL_TEXT = "(null)"
_POINTER_PREFIX = "0x"


@dataclass
class _Spec:
    """The flags read from one conversion specification."""

    zero: int = 0
    left: int = 0
    precision: int = -1
    width: int = 0


def _wrap(value: int, bits: int, signed: bool) -> int:
    modulus = 1 << bits
    value %= modulus
    if signed and value >= modulus >> 1:
        value -= modulus
    return value


def _zero_precision_digit(spec: _Spec) -> str:
    """What a zero prints as under a zero precision."""
    return " " if spec.zero or spec.width else ""


def _integer_field(value: int, digits: str, spec: _Spec) -> str:
    """Lay out a number whose magnitude is written as digits."""
    negative = value < 0
    length = len(digits) + int(negative)
    precision = spec.precision
    sign_shift = 1 if negative and precision > 0 else 0

    zeros = max(spec.zero - length, 0)
    spaces = max(spec.width - length, 0)
    if precision >= 0:
        zeros = max(precision - (length - sign_shift), 0)
        widest = max(spec.zero, spec.width)
        if length <= precision:
            spaces = max(widest - precision - sign_shift, 0)
        else:
            spaces = max(widest - length, 0)

    sign_first = negative and (spec.zero > 0 or precision > 0)
    if value == 0 and precision == 0:
        number = _zero_precision_digit(spec)
    elif negative and not sign_first:
        number = "-" + digits
    else:
        number = digits
    return " " * spaces + ("-" if sign_first else "") + "0" * zeros + number


def _pointer_field(address: int, spec: _Spec) -> str:
    digits = format(address, "x")
    length = len(digits)
    precision = spec.precision
    spaces = max(max(spec.zero, spec.width) - length - 2, 0)
    zeros = 0
    if precision >= 0:
        zeros = max(precision - length, 0)
        reach = spec.zero if spec.zero > precision else precision
        spaces = max(reach - (zeros + length + 2), 0)
    if address == 0 and precision == 0:
        number = _zero_precision_digit(spec)
    else:
        number = digits
    return " " * spaces + _POINTER_PREFIX + "0" * zeros + number


def _char_field(ch: str, spec: _Spec) -> str:
    return "0" * max(spec.zero - 1, 0) + " " * max(spec.width - 1, 0) + ch


def _string_field(text: "str | None", spec: _Spec) -> str:
    shown = _NULL_TEXT if text is None else text
    precision = spec.precision if spec.precision >= 0 else len(shown)
    count = min(len(shown), precision)
    spaces = max(max(spec.zero, spec.width) - count, 0)
    return " " * spaces + shown[:count]


class _Formatter:
    """Walks a format string, consuming arguments as conversions need them."""

    def __init__(self, fmt: str, args: Iterable[Any]) -> None:
        self._fmt = fmt.split(_END, 1)[0]
        self._pos = 0
        self._args = iter(args)
        self._conversions: "dict[str, Callable[[_Spec], str]]" = {
            "c": self._convert_char,
            "s": self._convert_string,
            "p": self._convert_pointer,
            "d": self._convert_signed,
            "i": self._convert_signed,
            "u": self._convert_unsigned,
            "x": self._convert_hex_lower,
            "X": self._convert_hex_upper,
            "%": self._convert_percent,
        }

    def _peek(self) -> str:
        return self._fmt[self._pos] if self._pos < len(self._fmt) else _END

    def _advance(self) -> None:
        self._pos += 1

    def _next_arg(self) -> Any:
        try:
            return next(self._args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def _next_int(self) -> int:
        return _wrap(operator.index(self._next_arg()), 32, signed=True)

    def _next_unsigned(self) -> int:
        return _wrap(operator.index(self._next_arg()), 32, signed=False)

    def _read_number(self) -> int:
        """Read one flag's number: skip its lead character, then spaces, then a star or digits."""
        if self._peek() in "0-.":
            self._advance()
        sign = 1
        while self._peek() == " ":
            self._advance()
            sign = -1
        if self._peek() == "*":
            self._advance()
            return _wrap(self._next_int() * sign, 32, signed=True)
        value = 0
        while is_digit(self._peek()):
            value = value * 10 + int(self._peek())
            self._advance()
        return value * sign

    def _read_spec(self) -> _Spec:
        spec = _Spec()
        while is_digit(self._peek()) or self._peek() in "-.*":
            start = self._pos
            if is_digit(self._peek()) and not spec.left:
                if self._peek() == "0":
                    spec.zero = self._read_number()
                else:
                    spec.width = self._read_number()
            if self._peek() == "-":
                spec.left = abs(self._read_number())
                spec.zero = 0
            if self._peek() == ".":
                spec.precision = self._read_number()
            if self._peek() == "*":
                star = self._read_number()
                if star < 0:
                    spec.left = -star
                else:
                    spec.width = star
            if spec.zero < 0:
                spec.left = -spec.zero
                spec.zero = 0
            if self._pos == start:
                raise ValueError(
                    f"malformed conversion specification at index {start} of {self._fmt!r}"
                )
        return spec

    def _convert_char(self, spec: _Spec) -> str:
        arg = self._next_arg()
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError(f"%c expects a single character, got {arg!r}")
            ch = arg
        else:
            ch = chr(_wrap(operator.index(arg), 8, signed=False))
        return _char_field(ch, spec)

    def _convert_string(self, spec: _Spec) -> str:
        arg = self._next_arg()
        if arg is not None and not isinstance(arg, str):
            raise TypeError(f"%s expects a string or None, got {type(arg).__name__}")
        return _string_field(arg, spec)

    def _convert_pointer(self, spec: _Spec) -> str:
        arg = self._next_arg()
        address = 0 if arg is None else _wrap(operator.index(arg), 64, signed=False)
        return _pointer_field(address, spec)

    def _convert_signed(self, spec: _Spec) -> str:
        value = self._next_int()
        return _integer_field(value, str(abs(value)), spec)

    def _convert_unsigned(self, spec: _Spec) -> str:
        value = self._next_unsigned()
        return _integer_field(value, str(value), spec)

    def _convert_hex_lower(self, spec: _Spec) -> str:
        value = self._next_unsigned()
        return _integer_field(value, format(value, "x"), spec)

    def _convert_hex_upper(self, spec: _Spec) -> str:
        value = self._next_unsigned()
        return _integer_field(value, format(value, "X"), spec)

    def _convert_percent(self, spec: _Spec) -> str:
        return _char_field("%", spec)

    def render(self) -> str:
        parts: "list[str]" = []
        while self._pos < len(self._fmt):
            percent = self._fmt.find("%", self._pos)
            if percent == -1:
                parts.append(self._fmt[self._pos :])
                break
            parts.append(self._fmt[self._pos : percent])
            self._pos = percent + 1
            spec = self._read_spec()
            letter = self._peek()
            if letter == _END:
                raise ValueError(f"incomplete conversion specification in {self._fmt!r}")
            self._advance()
            convert = self._conversions.get(letter)
            if convert is not None:
                body = convert(spec)
                parts.append(body + " " * max(spec.left - len(body), 0))
        return "".join(parts)


def format_string(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the text."""
    return _Formatter(fmt, args).render()


def printf_fd(fd: int, fmt: str, *args: Any) -> int:
    """Format args according to fmt, write the text to fd and return its length in characters."""
    text = format_string(fmt, *args)
    put_str_fd(text, fd)
    return len(text)