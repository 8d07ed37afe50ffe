# padprintf

A compact printf-style formatter. It understands the conversions
`%c %s %p %d %i %u %x %X %%` together with the flags `-`, `0`, `+`,
space and `#`, a field width and a `.precision`.

## Installation

    pip install padprintf

## Usage

`padprintf.printf.render` returns the formatted text:

```python
from padprintf.printf import render

render("%5d|%-5s|%#x", 42, "ab", 255)
# '   42|ab   |0xff'

render("%.3s", "abcdef")
# 'abc'

render("%08.3d", -7)
# '    -007'

render("%p", 0)
# '(nil)'
```

`padprintf.printf.printf` writes the formatted text to `file` (standard
output when no file is given) and returns the number of characters written:

```python
import sys
from padprintf.printf import printf

count = printf("%-6s|\n", "hi", file=sys.stdout)
# writes 'hi    |\n', count == 8
```

### Errors

`padprintf.printf.FormatError` (a subclass of `ValueError`) is raised when

- the format string is `None`,
- a `%` at the end of the format string, or a run of flags, width and
  precision, is not followed by a conversion character,
- there are fewer arguments than conversions that need one.

The exception's `partial` attribute holds the text produced before the
error. `printf` writes that partial text to the file before raising.

A NUL character ends the format string; anything after it is ignored.

### Conversions

| Conversion | Argument | Output |
|------------|----------|--------|
| `%c` | `str` of length 1, or an `int` (its low byte is used) | a single character |
| `%s` | `str` or `None` | the text up to the first NUL, or `(null)` for `None` |
| `%p` | `int` address, or `None`/`0` | `0x` and lowercase hex, or `(nil)` |
| `%d`, `%i` | `int` | signed decimal, wrapped to 32 bits |
| `%u` | `int` | unsigned decimal, wrapped to 32 bits |
| `%x`, `%X` | `int` | hexadecimal of the 32-bit unsigned value, lower or upper case |
| `%%` | — | a literal `%`; flags and width are ignored |

`%o` is accepted as a conversion character but produces no output and
takes no argument.

### Building blocks

Each step is also available on its own:

- `padprintf.flags` — `is_specifier(c)`, `parse_spec(fmt)` which returns a
  `FormatSpec` and the number of characters read before the conversion
  character, and `FormatSpec.apply_flag(c)`.
- `padprintf.plain` — `format_char`, `format_string`, `format_decimal`,
  `format_unsigned`, `format_hex`, `format_pointer`, `format_percent`
  for conversions without flags.
- `padprintf.padded_text` — `format_char_padded`, `format_string_padded`,
  `format_percent_padded`.
- `padprintf.padded_numbers` — `format_int_padded`,
  `format_unsigned_padded`, `format_hex_padded`.
- `padprintf.padded_pointer` — `format_pointer_padded`.
- `padprintf.textutils` — small helpers: `atoi`, `itoa`, `itoa_base`,
  `nbrlen_dec`, `nbrlen_hex`, `nbrlen_oct`, `split`, `strtrim`, `substr`,
  `strnstr`.

```python
from padprintf.flags import parse_spec
from padprintf.padded_numbers import format_hex_padded

spec, consumed = parse_spec("#08X")
format_hex_padded(spec, 255, upper=True)
```

## What it does not do

There are no floating-point conversions (`%f`, `%e`, `%g`), no length
modifiers (`l`, `h`), no `*` width or precision taken from the arguments,
and no command-line tool. Output matches the conversion rules coded here,
which differ from the C library's `printf` in some flag combinations.