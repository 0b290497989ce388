import pytest

from ftprintf.numconv import (
    decimal_length,
    to_signed,
    to_unsigned,
    toupper,
    ultoa,
    ultoa_base,
)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 12345, 2**63, 2**64 - 1])
def test_ultoa_round_trip(n):
    assert int(ultoa(n)) == n


def test_ultoa_wraps_negative_to_twenty_digits():
    text = ultoa(-1)
    assert len(text) == 20
    assert int(text) == to_unsigned(-1, 64)


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("value", [0, 7, 255, 4096, 2**64 - 1])
def test_ultoa_base_round_trip(value, base):
    text = ultoa_base(value, base)
    assert int(text, base) == value
    assert text == text.lower()


def test_ultoa_base_octal_of_long_min():
    assert ultoa_base(-9223372036854775807 - 1, 8) == "1000000000000000000000"


@pytest.mark.parametrize("base", [0, 1, 37])
def test_ultoa_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        ultoa_base(10, base)


def test_toupper_letters():
    assert toupper(ord("a")) == ord("A")
    assert toupper("z") == "Z"


@pytest.mark.parametrize("c", ["A", "0", "%", " ", "{"])
def test_toupper_leaves_others(c):
    assert toupper(c) == c
    assert toupper(ord(c)) == ord(c)


def test_toupper_rejects_long_string():
    with pytest.raises(ValueError):
        toupper("ab")


@pytest.mark.parametrize("value", [0, 1, -1, 127, -128, 2**31 - 1, -(2**31)])
@pytest.mark.parametrize("bits", [32, 64])
def test_signed_unsigned_round_trip(value, bits):
    unsigned = to_unsigned(value, bits)
    assert 0 <= unsigned < 2**bits
    assert to_signed(unsigned, bits) == value


def test_to_unsigned_rejects_zero_bits():
    with pytest.raises(ValueError):
        to_unsigned(5, 0)


@pytest.mark.parametrize("value", [0, 5, 42, 1000, 2**40])
def test_decimal_length_matches_ultoa(value):
    assert decimal_length(value) == len(ultoa(value))


@pytest.mark.parametrize("value", [1, 42, 99999])
def test_decimal_length_counts_sign(value):
    assert decimal_length(-value) == decimal_length(value) + 1