import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.conv import atoi, itoa

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(int32)
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@given(int32)
def test_itoa_produces_parsable_decimal(n):
    assert int(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_values_outside_int32():
    with pytest.raises(OverflowError):
        itoa(2**31)
    with pytest.raises(OverflowError):
        itoa(-(2**31) - 1)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == atoi("")
    assert atoi("+-5") == atoi("")
    assert atoi("- 5") == atoi("")


@given(int32, st.text(alphabet="xyz.-+ ", max_size=5))
def test_atoi_ignores_trailing_garbage(n, tail):
    assert atoi(itoa(n) + "x" + tail) == n


@given(st.integers(min_value=0, max_value=2**31 - 1))
def test_atoi_leading_zeros(n):
    assert atoi("000" + itoa(n)) == n


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("4294967296") == atoi("0")


@given(st.integers(min_value=0, max_value=2**40))
def test_atoi_result_always_in_int32(n):
    result = atoi(str(n))
    assert -(2**31) <= result <= 2**31 - 1
    assert (result - n) % (2**32) == 0