"""Conversions without flags, width or precision."""

from __future__ import annotations

import operator

from .textutils import itoa_base

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"

_UINT_MODULUS = 1 << 32
_INT_SIGN_BIT = 1 << 31

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _as_int32(value: int) -> int:
    value = operator.index(value) % _UINT_MODULUS
    return value - _UINT_MODULUS if value >= _INT_SIGN_BIT else value


def _as_uint32(value: int) -> int:
    return operator.index(value) % _UINT_MODULUS


def format_char(value: str | int) -> str:
    """Render one character; an integer is taken as a byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion needs exactly one character")
        return value
    return chr(operator.index(value) & 0xFF)


def format_string(value: str | None) -> str:
    """Render a string, stopping at the first NUL; None gives '(null)'."""
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError("a string conversion needs a str or None")
    return value.split("\0", 1)[0]


def format_decimal(value: int) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_as_int32(value))


def format_unsigned(value: int) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(_as_uint32(value))


def format_hex(value: int, upper: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    return itoa_base(_as_uint32(value), _UPPER_HEX if upper else _LOWER_HEX)


def format_pointer(value: int | None) -> str:
    """Render an address as '0x' and lowercase hex; a null address gives '(nil)'."""
    if value is None or operator.index(value) == 0:
        return NULL_POINTER
    return "0x" + itoa_base(value, _LOWER_HEX)


def format_percent() -> str:
    """Render a literal percent sign."""
    return "%"