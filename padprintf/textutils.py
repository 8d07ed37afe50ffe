"""Small string and number helpers used by the formatter."""

from __future__ import annotations

import operator
import re

_ULONG_MODULUS = 1 << 64
_INT_MODULUS = 1 << 32
_INT_SIGN_BIT = 1 << 31

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    value %= _INT_MODULUS
    return value - _INT_MODULUS if value >= _INT_SIGN_BIT else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    Parsing stops at the first non-digit; a string without digits gives 0.
    The result wraps to a signed 32-bit integer.
    """
    match = _ATOI_PATTERN.match(text)
    sign_text, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign_text == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(operator.index(n))


def itoa_base(num: int, base: str) -> str:
    """Render an unsigned 64-bit value with the digit alphabet *base*."""
    radix = len(base)
    if radix < 2:
        raise ValueError("base must contain at least two digits")
    value = operator.index(num) % _ULONG_MODULUS
    if value == 0:
        return base[0]
    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(base[remainder])
    return "".join(reversed(digits))


def nbrlen_dec(n: int) -> int:
    """Number of characters in the decimal form of *n*, sign included."""
    return len(itoa(n))


def nbrlen_hex(n: int) -> int:
    """Number of hexadecimal digits of *n* taken as unsigned 64-bit."""
    return len(format(operator.index(n) % _ULONG_MODULUS, "x"))


def nbrlen_oct(n: int) -> int:
    """Number of octal digits of *n* taken as unsigned 64-bit."""
    return len(format(operator.index(n) % _ULONG_MODULUS, "o"))


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character of *chars* from both ends of *text*."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* wholly inside the first *length* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    position = haystack.find(needle, 0, length)
    return None if position < 0 else position