import pytest

from padprintf.plain import (
    format_char,
    format_decimal,
    format_hex,
    format_percent,
    format_pointer,
    format_string,
    format_unsigned,
)


def test_char_from_str_and_int_agree():
    assert format_char("A") == "A"
    assert format_char(ord("z")) == "z"


def test_char_wraps_to_a_byte():
    assert format_char(ord("A") + 256) == format_char(ord("A"))


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_string_passthrough():
    assert format_string("hello world") == "hello world"


def test_string_none_is_null_marker():
    assert format_string(None) == "(null)"


def test_string_stops_at_nul():
    assert format_string("abc\0def") == "abc"


def test_string_rejects_non_string():
    with pytest.raises(TypeError):
        format_string(12)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -2147483648, 2147483647])
def test_decimal_round_trip(n):
    assert int(format_decimal(n)) == n


def test_decimal_wraps_to_int32():
    assert int(format_decimal(2**31)) == -(2**31)


@pytest.mark.parametrize("n", [0, 7, 4294967295])
def test_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 255, 3735928559])
def test_hex_round_trip(n):
    assert int(format_hex(n, False), 16) == n
    assert format_hex(n, True) == format_hex(n, False).upper()


def test_hex_lowercase_digits_only():
    assert set(format_hex(0xABCDEF)) <= set("0123456789abcdef")


def test_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x7FFF1234, 2**63])
def test_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_percent():
    assert format_percent() == "%"