import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from ftlib.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)

data = st.binary(min_size=1, max_size=64)


@given(data, st.integers(min_value=0, max_value=255), st.data())
def test_memset_fills_prefix_only(raw, c, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(raw)))
    buf = bytearray(raw)
    result = memset(buf, c, n)
    assert result is buf
    assert all(b == c for b in buf[:n])
    assert buf[n:] == raw[n:]


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray(b"AAA")


@given(data)
def test_bzero_clears_everything(raw):
    buf = bytearray(raw)
    bzero(buf, len(buf))
    assert buf == bytearray(len(raw))


@given(data, data)
def test_memcpy_copies_prefix(src, original):
    n = min(len(src), len(original))
    dest = bytearray(original)
    result = memcpy(dest, src, n)
    assert result is dest
    assert dest[:n] == src[:n]
    assert dest[n:] == original[n:]


def test_memcpy_rejects_short_destination():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abcd", 4)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


@given(data, st.integers(min_value=0, max_value=255))
def test_memccpy_stops_after_byte(src, c):
    dest = bytearray(len(src))
    end = memccpy(dest, src, c, len(src))
    if c in src:
        assert end == src.index(c) + 1
        assert dest[end - 1] == c
        assert dest[:end] == src[:end]
        assert dest[end:] == bytearray(len(src) - end)
    else:
        assert end is None
        assert dest == bytearray(src)


def test_memccpy_example():
    dest = bytearray(b"........")
    end = memccpy(dest, b"key=value", ord("="), 8)
    assert end == 4
    assert dest == bytearray(b"key=....")


@given(data)
def test_memmove_same_buffer_shift(raw):
    buf = bytearray(raw)
    tail = bytes(buf[1:])
    memmove(buf, buf[1:], len(tail))
    assert buf[: len(tail)] == tail


@given(data, st.integers(min_value=0, max_value=255))
def test_memchr_finds_first_occurrence(raw, c):
    index = memchr(raw, c, len(raw))
    if c in raw:
        assert index == raw.index(c)
    else:
        assert index is None


def test_memchr_respects_limit():
    assert memchr(b"abcz", ord("z"), 3) is None
    assert memchr(b"abcz", ord("z"), 4) == 3


@given(data)
def test_memcmp_equal_buffers(raw):
    assert memcmp(raw, bytearray(raw), len(raw)) == 0


@given(data, data)
def test_memcmp_is_antisymmetric(a, b):
    n = min(len(a), len(b))
    assert memcmp(a, b, n) == -memcmp(b, a, n)


@given(data, st.data())
def test_memcmp_reports_first_difference(raw, draw):
    pos = draw.draw(st.integers(min_value=0, max_value=len(raw) - 1))
    other = bytearray(raw)
    other[pos] = (other[pos] + 1) % 256
    assume(other[pos] != raw[pos])
    assert memcmp(raw, other, len(raw)) == raw[pos] - other[pos]
    assert memcmp(raw, other, pos) == 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) > 0


@given(st.integers(min_value=1, max_value=32), st.integers(min_value=1, max_value=32))
def test_calloc_is_zeroed(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_zero_request_gives_one_byte():
    assert calloc(0, 8) == bytearray(1)
    assert calloc(8, 0) == bytearray(1)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)