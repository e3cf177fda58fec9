import sys

import pytest
from hypothesis import given, strategies as st

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memset(buf, 0x7, 3)
    assert result is buf
    assert buf == bytearray(b"\x07\x07\x07def")


def test_memset_uses_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"\x41\x41")


def test_memset_too_long_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_memset_negative_length_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


@given(st.binary(max_size=32), st.data())
def test_bzero_zeroes_prefix_only(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    bzero(buf, n)
    assert buf[:n] == bytearray(n)
    assert buf[n:] == bytearray(data[n:])


@given(st.binary(max_size=32))
def test_memcpy_round_trip(data):
    dst = bytearray(len(data))
    memcpy(dst, data, len(data))
    assert dst == bytearray(data)
    assert memcmp(dst, data, len(data)) == 0


def test_memcpy_size_too_big_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 0, 4)
    assert buf == bytearray(b"aabcdf")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_bounds():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


@given(st.binary(min_size=1, max_size=32), st.integers(0, 255), st.data())
def test_memchr_finds_first(data, value, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    index = memchr(data, value, n)
    if index is None:
        assert value not in data[:n]
    else:
        assert data[index] == value
        assert value not in data[:index]
        assert index < n


def test_memchr_zero_byte():
    assert memchr(bytes([0, 1, 2, 3, 4, 5]), 0, 1) == 0


def test_memchr_respects_length():
    assert memchr(b"abc", ord("c"), 2) is None


@given(st.binary(max_size=16), st.binary(max_size=16))
def test_memcmp_sign_is_antisymmetric(a, b):
    n = min(len(a), len(b))
    assert memcmp(a, b, n) == -memcmp(b, a, n)
    assert (memcmp(a, b, n) == 0) == (a[:n] == b[:n])


def test_memcmp_reports_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")


def test_calloc_zeroed():
    buf = calloc(10, 4)
    assert len(buf) == 40
    assert not any(buf)


def test_calloc_zero_count():
    assert calloc(0, 5) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(sys.maxsize, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)