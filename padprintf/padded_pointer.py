"""Pointer conversion with flags, width and precision."""

from __future__ import annotations

import operator

from .flags import FormatSpec
from .plain import NULL_POINTER
from .textutils import itoa_base, strnstr

_LOWER_HEX = "0123456789abcdef"


def _mark_prefix(spec: FormatSpec, head: str) -> str:
    """Turn the first run of zeros in *head* into the '0x' prefix and sign."""
    if spec.blank or spec.plus:
        position = strnstr(head, "000", len(head))
        sign = "+" if spec.plus else " "
        return head[:position] + sign + "0x" + head[position + 3:]
    position = strnstr(head, "00", len(head))
    return head[:position] + "0x" + head[position + 2:]


def format_pointer_padded(spec: FormatSpec, value: int | None) -> str:
    """Render an address according to *spec*; a null address gives '(nil)'."""
    address = None if value is None else operator.index(value)
    if not address:
        padding = " " * max(spec.width - len(NULL_POINTER), 0)
        return NULL_POINTER + padding if spec.minus else padding + NULL_POINTER

    middle = itoa_base(address, _LOWER_HEX)
    precision = max(len(middle), spec.precision) + 2
    if spec.blank or spec.plus:
        precision += 1
    width = max(spec.width, precision)
    zero = spec.zero and not spec.dot
    zeros = "0" * (precision - len(middle))
    field = width - precision

    if spec.minus:
        return _mark_prefix(spec, zeros) + middle + " " * field
    head = ("0" if zero else " ") * field + zeros
    return _mark_prefix(spec, head) + middle