import os
from contextlib import contextmanager
from dataclasses import dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.output import put_char_fd, put_endl_fd, put_nbr_fd, put_str_fd


@dataclass
class _Sink:
    fd: int
    data: bytes = field(default=b"")


@contextmanager
def _captured():
    read_end, write_end = os.pipe()
    sink = _Sink(write_end)
    try:
        yield sink
    finally:
        os.close(write_end)
        with os.fdopen(read_end, "rb") as reader:
            sink.data = reader.read()


def test_put_char():
    with _captured() as sink:
        put_char_fd("x", sink.fd)
    assert sink.data == b"x"


def test_put_char_rejects_string():
    with pytest.raises(ValueError), _captured() as sink:
        put_char_fd("xy", sink.fd)


def test_put_str():
    with _captured() as sink:
        put_str_fd("hello", sink.fd)
    assert sink.data == b"hello"


def test_put_str_none_writes_nothing():
    with _captured() as sink:
        put_str_fd(None, sink.fd)
    assert sink.data == b""


def test_put_endl():
    with _captured() as sink:
        put_endl_fd("line", sink.fd)
    assert sink.data == b"line\n"


def test_put_endl_none_writes_nothing():
    with _captured() as sink:
        put_endl_fd(None, sink.fd)
    assert sink.data == b""


def test_put_nbr_int_min():
    with _captured() as sink:
        put_nbr_fd(-2147483648, sink.fd)
    assert sink.data == b"-2147483648"


def test_put_nbr_zero():
    with _captured() as sink:
        put_nbr_fd(0, sink.fd)
    assert sink.data == b"0"


def test_put_nbr_overflow():
    with pytest.raises(OverflowError), _captured() as sink:
        put_nbr_fd(2**31, sink.fd)


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_nbr_round_trip(n):
    with _captured() as sink:
        put_nbr_fd(n, sink.fd)
    assert int(sink.data) == n


@given(st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=50))
def test_put_str_round_trip(s):
    with _captured() as sink:
        put_str_fd(s, sink.fd)
    assert sink.data.decode() == s