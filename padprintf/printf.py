"""Formatting entry points: expand a format string and write the result."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from .flags import FormatSpec, is_specifier, parse_spec
from .padded_numbers import (
    format_hex_padded,
    format_int_padded,
    format_unsigned_padded,
)
from .padded_pointer import format_pointer_padded
from .padded_text import (
    format_char_padded,
    format_percent_padded,
    format_string_padded,
)
from .plain import (
    format_char,
    format_decimal,
    format_hex,
    format_percent,
    format_pointer,
    format_string,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised when a format string cannot be expanded.

    ``partial`` holds the text produced before the error was found.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


_PLAIN: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "d": format_decimal,
    "i": format_decimal,
    "p": format_pointer,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}

_PADDED: dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": format_char_padded,
    "s": format_string_padded,
    "d": format_int_padded,
    "i": format_int_padded,
    "u": format_unsigned_padded,
    "x": lambda spec, value: format_hex_padded(spec, value, False),
    "X": lambda spec, value: format_hex_padded(spec, value, True),
    "p": format_pointer_padded,
}


class _Arguments:
    """Hands out the variadic arguments one at a time."""

    def __init__(self, args: tuple[Any, ...]) -> None:
        self._values: Iterator[Any] = iter(args)

    def take(self) -> Any:
        try:
            return next(self._values)
        except StopIteration:
            raise FormatError("not enough arguments for format string") from None


def _plain(conversion: str, arguments: _Arguments) -> str:
    if conversion == "%":
        return format_percent()
    handler = _PLAIN.get(conversion)
    if handler is None:
        # Recognised as a conversion but produces nothing.
        return ""
    return handler(arguments.take())


def _padded(spec: FormatSpec, arguments: _Arguments) -> str:
    if spec.conversion == "%":
        return format_percent_padded(spec)
    handler = _PADDED.get(spec.conversion)
    if handler is None:
        return ""
    return handler(spec, arguments.take())


def _expand(fmt: str, arguments: _Arguments, pieces: list[str]) -> None:
    length = len(fmt)
    index = 0
    while index < length:
        if fmt[index] != "%":
            end = fmt.find("%", index)
            if end < 0:
                end = length
            pieces.append(fmt[index:end])
            index = end
            continue
        index += 1
        rest = fmt[index:]
        if rest and is_specifier(rest[0]):
            pieces.append(_plain(rest[0], arguments))
            index += 1
            continue
        spec, consumed = parse_spec(rest)
        if consumed == 0 or not spec.conversion:
            raise FormatError("incomplete conversion at end of format string")
        pieces.append(_padded(spec, arguments))
        index += consumed + 1


def render(fmt: str, *args: Any) -> str:
    """Expand *fmt* with *args* and return the resulting text."""
    if fmt is None:
        raise FormatError("format string must not be None")
    fmt = fmt.split("\0", 1)[0]
    pieces: list[str] = []
    try:
        _expand(fmt, _Arguments(args), pieces)
    except FormatError as exc:
        raise FormatError(str(exc), "".join(pieces)) from None
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expansion of *fmt* to *file* (stdout by default).

    Returns the number of characters written. On a format error the text
    produced before the error is still written, then FormatError is raised.
    """
    stream = sys.stdout if file is None else file
    try:
        text = render(fmt, *args)
    except FormatError as exc:
        if exc.partial:
            stream.write(exc.partial)
        raise
    stream.write(text)
    return len(text)