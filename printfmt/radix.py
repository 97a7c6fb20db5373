"""Binary, octal, hexadecimal and pointer conversions.

Covers %b, %o, %x, %X, their long (``l``), short (``h``) and alternate
(``#``) forms, and %p. Negative values are shown in two's complement at the
width of the C type the conversion stands for.
"""

from __future__ import annotations

import operator

from printfmt.digits import strip_leading_zeros, to_binary, to_hex, to_octal

INT_BITS = 32
LONG_BITS = 64
SHORT_BITS = 16
POINTER_BITS = 64
NIL = "(nil)"


def _hex(value: int, bits: int, upper: bool) -> str:
    return strip_leading_zeros(to_hex(value, bits, upper))


def _octal(value: int, bits: int) -> str:
    return strip_leading_zeros(to_octal(value, bits))


def format_binary(value: int) -> str:
    """Render a 32-bit integer in binary (%b)."""
    return strip_leading_zeros(to_binary(value, INT_BITS))


def format_hex(value: int, upper: bool = False) -> str:
    """Render a 32-bit integer in hexadecimal (%x, or %X when *upper*)."""
    return _hex(value, INT_BITS, upper)


def format_long_hex(value: int, upper: bool = False) -> str:
    """Render a 64-bit integer in hexadecimal (%lx, or %lX when *upper*)."""
    return _hex(value, LONG_BITS, upper)


def format_short_hex(value: int, upper: bool = False) -> str:
    """Render a 16-bit integer in hexadecimal (%hx, or %hX when *upper*)."""
    return _hex(value, SHORT_BITS, upper)


def format_octal(value: int) -> str:
    """Render a 32-bit integer in octal (%o)."""
    return _octal(value, INT_BITS)


def format_long_octal(value: int) -> str:
    """Render a 64-bit integer in octal (%lo)."""
    return _octal(value, LONG_BITS)


def format_short_octal(value: int) -> str:
    """Render a 16-bit integer in octal (%ho)."""
    return _octal(value, SHORT_BITS)


def format_alt_octal(value: int) -> str:
    """Render a 32-bit integer in octal with a leading ``0`` (%#o).

    Zero is rendered as a single ``0``.
    """
    if operator.index(value) == 0:
        return "0"
    return "0" + _octal(value, INT_BITS)


def format_alt_hex(value: int, upper: bool = False) -> str:
    """Render a 32-bit integer in hexadecimal with a ``0x``/``0X`` prefix (%#x, %#X).

    Zero is rendered as a single ``0``.
    """
    if operator.index(value) == 0:
        return "0"
    prefix = "0X" if upper else "0x"
    return prefix + _hex(value, INT_BITS, upper)


def format_address(value: int | None) -> str:
    """Render a pointer value as ``0x`` and lower-case hex (%p).

    A missing or zero address is rendered as ``(nil)``.
    """
    if value is None or operator.index(value) == 0:
        return NIL
    return "0x" + _hex(value, POINTER_BITS, False)