"""The format engine: ``sprintf`` builds a string, ``printf`` writes it out."""

from __future__ import annotations

from typing import Any, Iterator, TextIO

from printfmt.buffer import OutputBuffer
from printfmt.specifiers import match_specifier

_MISSING = object()


class FormatError(ValueError):
    """A format string could not be rendered.

    *output* holds the text that had already been produced and is still
    written out by :func:`printf`; it is empty when nothing is written.
    """

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    if fmt is None:
        raise FormatError("format string is missing")
    if fmt == "%":
        raise FormatError("format string is a lone '%'")
    values: Iterator[Any] = iter(args)
    pieces: list[str] = []
    i = 0
    end = len(fmt)
    while i < end:
        char = fmt[i]
        if char != "%":
            pieces.append(char)
            i += 1
            continue
        if i + 1 == end:
            raise FormatError("format string ends with '%'", output="".join(pieces))
        spec = match_specifier(fmt, i + 1)
        if spec is None:
            if fmt[i + 1] == " " and i + 2 == end:
                raise FormatError("format string ends with '% '")
            pieces.append("%")
            i += 1
            continue
        if spec.consumes_argument:
            value = next(values, _MISSING)
            if value is _MISSING:
                raise FormatError(f"missing argument for '%{spec.token}'")
            pieces.append(spec.render(value))
        else:
            pieces.append(spec.render())
        i += 1 + len(spec.token)
    return "".join(pieces)


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the rendered *args*."""
    return _render(fmt, args)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream* (standard output by default).

    Returns the number of characters written.
    """
    with OutputBuffer(stream) as buffer:
        try:
            text = _render(fmt, args)
        except FormatError as error:
            buffer.write(error.output)
            raise
        buffer.write(text)
    return len(text)