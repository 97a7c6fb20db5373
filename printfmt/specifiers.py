"""The table of conversion specifiers and the rule for picking one."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable

from printfmt.integers import (
    format_int,
    format_long,
    format_long_unsigned,
    format_plus,
    format_short,
    format_short_unsigned,
    format_space,
    format_unsigned,
)
from printfmt.radix import (
    format_address,
    format_alt_hex,
    format_alt_octal,
    format_binary,
    format_hex,
    format_long_hex,
    format_long_octal,
    format_octal,
    format_short_hex,
    format_short_octal,
)
from printfmt.text import (
    format_char,
    format_escaped,
    format_percent,
    format_reversed,
    format_rot13,
    format_string,
)


@dataclass(frozen=True)
class Specifier:
    """One conversion: the characters after ``%`` and how to render its argument."""

    token: str
    convert: Callable[..., str]
    consumes_argument: bool = True

    def render(self, value: Any = None) -> str:
        """Render *value*; conversions that take no argument ignore it."""
        if self.consumes_argument:
            return self.convert(value)
        return self.convert()


def _upper(func: Callable[..., str]) -> Callable[[Any], str]:
    return partial(func, upper=True)


_TABLE: tuple[tuple[str, Callable[..., str]], ...] = (
    ("c", format_char),
    ("s", format_string),
    ("i", format_int),
    ("d", format_int),
    ("b", format_binary),
    ("u", format_unsigned),
    ("o", format_octal),
    ("x", format_hex),
    ("X", _upper(format_hex)),
    ("S", format_escaped),
    ("p", format_address),
    ("li", format_long),
    ("ld", format_long),
    ("lu", format_long_unsigned),
    ("lo", format_long_octal),
    ("lx", format_long_hex),
    ("lX", _upper(format_long_hex)),
    ("hi", format_short),
    ("hd", format_short),
    ("hu", format_short_unsigned),
    ("ho", format_short_octal),
    ("hx", format_short_hex),
    ("hX", _upper(format_short_hex)),
    ("#o", format_alt_octal),
    ("#x", format_alt_hex),
    ("#X", _upper(format_alt_hex)),
    ("#i", format_int),
    ("#d", format_int),
    ("#u", format_unsigned),
    ("+i", format_plus),
    ("+d", format_plus),
    ("+u", format_unsigned),
    ("+o", format_octal),
    ("+x", format_hex),
    ("+X", _upper(format_hex)),
    (" i", format_space),
    (" d", format_space),
    (" u", format_unsigned),
    (" o", format_octal),
    (" x", format_hex),
    (" X", _upper(format_hex)),
    ("R", format_rot13),
    ("r", format_reversed),
    ("%", format_percent),
    ("l", format_percent),
    ("h", format_percent),
    (" +i", format_plus),
    (" +d", format_plus),
    ("+ i", format_plus),
    ("+ d", format_plus),
    (" %", format_percent),
)

SPECIFIERS: tuple[Specifier, ...] = tuple(
    Specifier(token, func, func is not format_percent) for token, func in _TABLE
)


def match_specifier(fmt: str, index: int) -> Specifier | None:
    """Return the first specifier in table order that starts at *fmt[index]*.

    *index* points just past the ``%``. ``None`` means nothing matches.
    """
    if index < 0:
        raise ValueError(f"index must not be negative, got {index}")
    return next((spec for spec in SPECIFIERS if fmt.startswith(spec.token, index)), None)