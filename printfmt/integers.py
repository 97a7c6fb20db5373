"""Decimal conversions: %d/%i, %u and their long, short, '+' and ' ' variants."""

from __future__ import annotations

import operator


def _signed(value: int, bits: int) -> int:
    value = operator.index(value) & ((1 << bits) - 1)
    return value - (1 << bits) if value >> (bits - 1) else value


def _unsigned(value: int, bits: int) -> int:
    return operator.index(value) & ((1 << bits) - 1)


def format_int(value: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    return str(_signed(value, 32))


def format_long(value: int) -> str:
    """Render a 64-bit signed integer in decimal."""
    return str(_signed(value, 64))


def format_short(value: int) -> str:
    """Render a 16-bit signed integer in decimal."""
    return str(_signed(value, 16))


def format_unsigned(value: int) -> str:
    """Render a 32-bit unsigned integer in decimal."""
    return str(_unsigned(value, 32))


def format_long_unsigned(value: int) -> str:
    """Render a 64-bit unsigned integer in decimal."""
    return str(_unsigned(value, 64))


def format_short_unsigned(value: int) -> str:
    """Render a 16-bit unsigned integer in decimal."""
    return str(_unsigned(value, 16))


def format_plus(value: int) -> str:
    """Render a 32-bit signed integer, with ``+`` before non-negative values."""
    number = _signed(value, 32)
    return f"+{number}" if number >= 0 else str(number)


def format_space(value: int) -> str:
    """Render a 32-bit signed integer, with a space before non-negative values."""
    number = _signed(value, 32)
    return f" {number}" if number >= 0 else str(number)