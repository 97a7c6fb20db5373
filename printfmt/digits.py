"""Fixed-width two's-complement digit strings in base 2, 8 and 16."""

from __future__ import annotations

import operator


def _masked(value: int, width: int) -> int:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return operator.index(value) & ((1 << width) - 1)


def to_binary(value: int, width: int) -> str:
    """Return *value* as a two's-complement binary string of *width* bits."""
    return format(_masked(value, width), f"0{width}b")


def to_hex(value: int, width: int, upper: bool = False) -> str:
    """Return *value* as hexadecimal digits covering *width* bits.

    *width* must be a multiple of four; the result has ``width // 4`` digits.
    """
    if width % 4:
        raise ValueError(f"hexadecimal width must be a multiple of 4, got {width}")
    spec = "X" if upper else "x"
    return format(_masked(value, width), f"0{width // 4}{spec}")


def to_octal(value: int, width: int) -> str:
    """Return *value* as octal digits covering *width* bits.

    The digits are grouped from the least significant bit, so the leading
    digit holds whatever bits are left over.
    """
    digits = -(-width // 3)
    return format(_masked(value, width), f"0{digits}o")


def strip_leading_zeros(digits: str) -> str:
    """Drop leading zeros, keeping a single ``"0"`` when nothing else is left."""
    return digits.lstrip("0") or "0"