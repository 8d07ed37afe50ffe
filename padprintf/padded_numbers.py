"""Signed, unsigned and hexadecimal conversions with flags, width and precision."""

from __future__ import annotations

import operator

from .flags import FormatSpec
from .textutils import itoa_base

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"

_UINT_MODULUS = 1 << 32
_INT_SIGN_BIT = 1 << 31


def _as_int32(value: int) -> int:
    value = operator.index(value) % _UINT_MODULUS
    return value - _UINT_MODULUS if value >= _INT_SIGN_BIT else value


def _as_uint32(value: int) -> int:
    return operator.index(value) % _UINT_MODULUS


def _put(text: str, index: int, char: str) -> str:
    """Return *text* with the character at *index* replaced by *char*."""
    return text[:index] + char + text[index + 1:]


def _paddings(middle: str, precision: int, width: int,
              left_align: bool, fill: str) -> tuple[str, str]:
    """Build the two padding pieces around the digits.

    Left-aligned output keeps the precision zeros in the first piece and the
    field blanks in the second; otherwise the first piece is the field fill
    and the second the precision zeros.
    """
    zeros = "0" * (precision - len(middle))
    field = width - precision
    if left_align:
        return zeros, " " * field
    return fill * field, zeros


def _digits_or_empty(spec: FormatSpec, value: int, digits: str) -> str:
    if spec.dot and value == 0 and spec.precision <= 0:
        return ""
    return digits


def format_int_padded(spec: FormatSpec, value: int) -> str:
    """Render a signed 32-bit integer according to *spec*."""
    value = _as_int32(value)
    negative = value < 0
    magnitude = -value if negative else value
    middle = _digits_or_empty(spec, magnitude, str(magnitude))
    precision = max(len(middle), spec.precision)
    if spec.blank or spec.plus or negative:
        precision += 1
    width = max(spec.width, precision)
    zero = spec.zero and not spec.dot
    left, right = _paddings(middle, precision, width, spec.minus,
                            "0" if zero else " ")

    if spec.minus:
        if negative:
            left = _put(left, 0, "-")
        elif spec.plus:
            left = _put(left, 0, "+")
        elif spec.blank:
            left = _put(left, 0, " ")
        return left + middle + right

    if negative and zero and left:
        left = _put(left, 0, "-")
    elif negative and right:
        right = _put(right, 0, "-")
    elif zero and spec.plus and left:
        left = _put(left, 0, "+")
    elif spec.plus and right:
        right = _put(right, 0, "+")
    elif zero and spec.blank and left:
        left = _put(left, 0, " ")
    elif spec.blank and right:
        right = _put(right, 0, " ")
    if left and right and right[0] == left[0] and right[0] in "+-":
        right = _put(right, 0, "0")
    return left + right + middle


def format_unsigned_padded(spec: FormatSpec, value: int) -> str:
    """Render an unsigned 32-bit integer in decimal according to *spec*."""
    value = _as_uint32(value)
    middle = _digits_or_empty(spec, value, str(value))
    precision = max(len(middle), spec.precision)
    width = max(spec.width, precision)
    zero = spec.zero and not spec.dot
    left, right = _paddings(middle, precision, width, spec.minus,
                            "0" if zero else " ")
    if spec.minus:
        return left + middle + right
    return left + right + middle


def format_hex_padded(spec: FormatSpec, value: int, upper: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal according to *spec*."""
    value = _as_uint32(value)
    middle = _digits_or_empty(
        spec, value, itoa_base(value, _UPPER_HEX if upper else _LOWER_HEX)
    )
    zero = spec.zero and not (spec.dot and spec.precision != -1)
    precision = max(len(middle), spec.precision)
    prefixed = spec.hash and value != 0
    if prefixed:
        precision += 2
    width = max(spec.width, precision)
    fill = "0" if zero and not spec.dot else " "
    left, right = _paddings(middle, precision, width, spec.minus, fill)

    if spec.minus:
        if prefixed:
            # The left-aligned prefix is always written in lower case.
            left = _put(left, 1, "x")
        return left + middle + right

    if prefixed:
        marker = "X" if upper else "x"
        if zero and left[1:2] == "0":
            left = _put(left, 1, marker)
        elif len(left) == 1:
            right = _put(right, 0, marker)
        else:
            right = _put(right, 1, marker)
    return left + right + middle