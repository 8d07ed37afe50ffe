"""Character, string and percent conversions with flags, width and precision."""

from __future__ import annotations

from .flags import FormatSpec
from .plain import format_char, format_percent, format_string


def _pad(text: str, padding: str, left_align: bool) -> str:
    return text + padding if left_align else padding + text


def format_char_padded(spec: FormatSpec, value: str | int) -> str:
    """Render one character inside the field width of *spec*."""
    char = format_char(value)
    padding = " " * max(spec.width - 1, 0)
    return _pad(char, padding, spec.minus)


def format_string_padded(spec: FormatSpec, value: str | None) -> str:
    """Render a string with the precision and field width of *spec*."""
    middle = format_string(value)
    if spec.dot:
        precision = max(0, min(spec.precision, len(middle)))
    else:
        precision = len(middle)
    width = spec.width
    if value is None and precision < 6:
        # A cut "(null)" is replaced by blanks, limited by the width.
        middle = " " * (precision if width >= precision else max(width, 0))
    width = max(width, precision)
    padding = " " * (width - precision)
    shown = middle[:min(precision, len(middle))]
    return _pad(shown, padding, spec.minus)


def format_percent_padded(spec: FormatSpec) -> str:
    """Render a literal percent sign; flags and width are ignored."""
    return format_percent()