"""Conversion specifiers and the flag, width and precision parser."""

from __future__ import annotations

from dataclasses import dataclass

from .textutils import atoi, nbrlen_dec

SPECIFIERS = frozenset("cspdiuxX%o")

_FLAG_FIELDS = {
    "-": "minus",
    " ": "blank",
    "+": "plus",
    "#": "hash",
    "0": "zero",
}


def is_specifier(c: str) -> bool:
    """Return True if *c* is a conversion character."""
    return c in SPECIFIERS and len(c) == 1


@dataclass
class FormatSpec:
    """Flags, width, precision and conversion of one directive."""

    width: int = -1
    precision: int = -1
    dot: bool = False
    hash: bool = False
    minus: bool = False
    plus: bool = False
    blank: bool = False
    zero: bool = False
    conversion: str = ""

    def apply_flag(self, c: str) -> bool:
        """Set the flag named by *c*; return False if *c* is not a flag."""
        field = _FLAG_FIELDS.get(c)
        if field is None:
            return False
        setattr(self, field, True)
        return True

    def _has_any(self) -> bool:
        return bool(
            self.minus or self.dot or self.plus or self.zero
            or self.hash or self.blank or self.precision or self.width
        )


def _read_number(fmt: str, index: int) -> tuple[int, int]:
    """Read a number at *index*; return it and the index of its last digit."""
    value = atoi(fmt[index:])
    return value, index + nbrlen_dec(value) - 1


def parse_spec(fmt: str) -> tuple[FormatSpec, int]:
    """Parse the directive text after a '%'.

    Returns the spec and the number of characters consumed before the
    conversion character.
    """
    spec = FormatSpec()
    index = 0
    while index < len(fmt) and fmt[index] != "\0" and not is_specifier(fmt[index]):
        c = fmt[index]
        if spec.apply_flag(c):
            pass
        elif c.isascii() and c.isdigit():
            if spec.dot:
                spec.precision, index = _read_number(fmt, index)
            else:
                spec.width, index = _read_number(fmt, index)
        elif c == ".":
            spec.dot = True
            index += 1
            following = fmt[index] if index < len(fmt) else ""
            if following == "0":
                spec.zero = True
            elif following.isascii() and following.isdigit() and following:
                spec.precision, index = _read_number(fmt, index)
            else:
                index -= 1
        index += 1
    consumed = index if spec._has_any() else 0
    if consumed < len(fmt) and fmt[consumed] != "\0":
        spec.conversion = fmt[consumed]
    return spec, consumed