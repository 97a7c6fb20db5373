"""Conversions for characters and strings: %c, %s, %r, %R, %S and %%."""

from __future__ import annotations

import operator
import string

_ROT13 = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[13:]
    + string.ascii_uppercase[:13]
    + string.ascii_lowercase[13:]
    + string.ascii_lowercase[:13],
)


def format_char(value: int | str) -> str:
    """Render a single character; integers are taken as a byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def format_string(value: str | None) -> str:
    """Render a string, with ``(null)`` for a missing one."""
    return "(null)" if value is None else value


def format_reversed(value: str | None) -> str:
    """Render a string back to front, with ``(llun)`` for a missing one."""
    return "(llun)" if value is None else value[::-1]


def format_rot13(value: str | None) -> str:
    """Render a string in ROT13, with ``(avyy)`` for a missing one."""
    return "(avyy)" if value is None else value.translate(_ROT13)


def format_escaped(value: str | bytes) -> str:
    """Render bytes, showing non-printable ones as ``\\xHH`` in upper-case hex.

    Text is encoded as UTF-8 first, so each byte of a non-ASCII character is
    escaped separately.
    """
    if value is None:
        raise TypeError("format_escaped needs a string, not None")
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return "".join(chr(b) if 32 <= b < 127 else f"\\x{b:02X}" for b in data)


def format_percent() -> str:
    """Render a literal percent sign."""
    return "%"