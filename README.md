# printfmt

`printfmt` fills in a printf-style template. It covers the usual integer,
string and character conversions. It also has a few of its own: binary
output, reversed strings, ROT13 and escaped non-printable bytes. Integers are
treated as C `int`, `long`, `short` or pointer values. They wrap to 32, 64 or
16 bits, and negative numbers in binary, octal and hex are shown in two's
complement.

## Installation

```
pip install printfmt
```

## Usage

```python
from printfmt.formatter import sprintf, printf

sprintf("Length:[%d, %i]", 39, 39)      # 'Length:[39, 39]'
sprintf("%b", 98)                       # '1100010'
sprintf("%R", "Hello")                  # 'Uryyb'
sprintf("%r", "abc")                    # 'cba'
sprintf("%S", "Best\nSchool")           # 'Best\\x0ASchool'
sprintf("%#x %+d % d", 255, 5, 7)       # '0xff +5  7'
sprintf("%x", -1)                       # 'ffffffff'

count = printf("Percent:[%%]\n")        # writes to stdout, returns 12
```

`printf` writes to standard output by default. Pass `stream=` to write to any
other text stream. It returns the number of characters written. Output passes
through `printfmt.buffer.OutputBuffer`, which writes in blocks of at most 1024
characters and flushes at the end.

### Errors

`printfmt.formatter.FormatError` is a subclass of `ValueError`. It is raised when:

- the template is `None` or a lone `%`;
- the template ends in `%` or `% `;
- a conversion has no argument left to use.

If a template ends in `%`, `printf` still writes the text that came before it.
`FormatError.output` holds that text. An unknown conversion such as `%y` is
copied through as written.

### Conversions

| Specifier | Output |
|-----------|--------|
| `%c` | one character; a one-character string or an integer byte value |
| `%s` | a string (`(null)` for `None`) |
| `%d`, `%i` | a signed int; `%ld`/`%li` long, `%hd`/`%hi` short |
| `%u` | an unsigned int; `%lu`, `%hu` |
| `%o`, `%x`, `%X` | octal / hex; `l` and `h` length modifiers supported |
| `%#o`, `%#x`, `%#X` | with a `0`, `0x` or `0X` prefix (zero stays `0`) |
| `%+d`, `% d` | with a forced sign or a leading space |
| `%b` | binary |
| `%p` | an address as `0x…`, or `(nil)` for `None` or zero |
| `%r` | a reversed string (`(llun)` for `None`) |
| `%R` | a ROT13 string (`(avyy)` for `None`) |
| `%S` | a string with non-printable bytes shown as `\xHH` |
| `%%` | a literal percent sign |

A bare `%l` or `%h` with no letter after it prints a `%` and uses up no argument.
The flag `#` has no effect on `%d`, `%i` and `%u`. The flags `+` and ` ` have
no effect on `%u`, `%o`, `%x` and `%X`.

`printfmt.specifiers.match_specifier(fmt, index)` returns the `Specifier`
that begins at `fmt[index]`, or `None` if there is none.

Each conversion can also be called on its own. The functions are in
`printfmt.text`, `printfmt.integers` and `printfmt.radix`. For example,
`printfmt.radix.format_hex(255, True)` gives `'FF'`. `printfmt.digits` gives
the fixed-width two's-complement digit strings that these functions use.

## Demo

```
printfmt-demo
```

This prints a set of sample lines. Each line is printed twice: first through
`printfmt`, then through Python's own formatting, so the two can be compared.
The last line shows `%r` with no string.

## Not supported

Field widths, precision, zero padding and floating-point conversions are not
supported. A `.5`, `10` or `%f` in a template is copied through as written and
is not treated as part of a conversion.