import pytest

from padprintf.flags import parse_spec
from padprintf.padded_numbers import (
    format_hex_padded,
    format_int_padded,
    format_unsigned_padded,
)
from padprintf.plain import format_decimal, format_hex, format_unsigned


def _spec(directive):
    spec, _ = parse_spec(directive)
    return spec


INT_DIRECTIVES = [
    "d", "5d", "-5d", "05d", "+5d", "+05d", "% d", "% 05d",
    ".5d", "8.5d", "-8.5d", "+.3d", "-+6d",
]
INT_VALUES = [0, 7, -7, 42, -42, 123456, -2147483648, 2147483647]


@pytest.mark.parametrize("value", INT_VALUES)
def test_int_without_flags_matches_plain(value):
    assert format_int_padded(_spec("d"), value) == format_decimal(value)


def test_int_wraps_to_32_bits():
    assert format_int_padded(_spec("d"), 2**31) == "%d" % (-(2**31))


@pytest.mark.parametrize("directive", [".0d", ".d"])
def test_zero_with_zero_precision_prints_nothing(directive):
    assert format_int_padded(_spec(directive), 0) == ""


@pytest.mark.parametrize("width", [1, 4, 9, 15])
@pytest.mark.parametrize("value", [-42, 0, 99999])
def test_int_length_is_at_least_width(width, value):
    result = format_int_padded(_spec(f"{width}d"), value)
    assert len(result) == max(width, len(str(value)))
    assert int(result) == value


def test_int_rejects_non_integer():
    with pytest.raises(TypeError):
        format_int_padded(_spec("d"), "42")


UNSIGNED_DIRECTIVES = ["u", "5u", "-5u", "05u", ".5u", "8.5u", "-8.5u"]


@pytest.mark.parametrize("directive", UNSIGNED_DIRECTIVES)
@pytest.mark.parametrize("value", [0, 42, 4294967295])
def test_unsigned_matches_standard_formatting(directive, value):
    assert format_unsigned_padded(_spec(directive), value) == ("%" + directive) % value


@pytest.mark.parametrize("value", [-1, -42, 2**32 + 5])
def test_unsigned_wraps_to_32_bits(value):
    result = format_unsigned_padded(_spec("u"), value)
    assert result == "%u" % (value % 2**32)
    assert result == format_unsigned(value)


def test_unsigned_precision_disables_zero_fill():
    assert format_unsigned_padded(_spec("08.5u"), 42) == ("%.5u" % 42).rjust(8)


def test_zero_precision_zero_value_is_empty_for_all_bases():
    empty = format_int_padded(_spec(".0d"), 0)
    assert format_unsigned_padded(_spec(".0u"), 0) == empty
    assert format_hex_padded(_spec(".0x"), 0) == empty
    assert format_hex_padded(_spec(".x"), 0, True) == empty


HEX_DIRECTIVES = ["x", "5x", "-5x", "05x", ".4x", "8.4x", "-8.4x"]


@pytest.mark.parametrize("directive", HEX_DIRECTIVES)
@pytest.mark.parametrize("value", [0, 1, 255, 0xDEADBEEF])
def test_hex_matches_standard_formatting(directive, value):
    assert format_hex_padded(_spec(directive), value) == ("%" + directive) % value


@pytest.mark.parametrize("directive", ["#x", "#08x", "#-8x", "#6x", "#10.4x"])
@pytest.mark.parametrize("value", [1, 255, 0xDEADBEEF])
def test_hex_prefix_matches_standard_formatting(directive, value):
    assert format_hex_padded(_spec(directive), value) == ("%" + directive) % value


@pytest.mark.parametrize("directive", ["X", "#X", "#08X", "#6X", "-6X"])
def test_upper_hex_matches_standard_formatting(directive):
    spec = _spec(directive)
    assert format_hex_padded(spec, 255, upper=True) == ("%" + directive) % 255


@pytest.mark.parametrize("value", [0, 1, 0xABCDEF, -1])
def test_hex_without_flags_matches_plain(value):
    assert format_hex_padded(_spec("x"), value) == format_hex(value)
    assert format_hex_padded(_spec("X"), value, upper=True) == format_hex(value, upper=True)


def test_hash_ignored_for_zero():
    assert format_hex_padded(_spec("#08x"), 0) == format_hex_padded(_spec("08x"), 0)
    assert format_hex_padded(_spec("#x"), 0) == "%x" % 0


def test_hash_with_single_fill_column_marks_first_zero():
    assert format_hex_padded(_spec("#5x"), 255) == " x0ff"


def test_left_aligned_upper_prefix_is_lower_case():
    assert format_hex_padded(_spec("#-8X"), 255, upper=True) == "0xFF    "