"""A fixed-size output buffer that writes through to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

DEFAULT_SIZE = 1024


class OutputBuffer:
    """Collects text and writes it to *stream* in blocks of at most *size* characters.

    The buffer is only written out when it is full and more text arrives, or
    when :meth:`flush` is called (which leaving a ``with`` block does).
    """

    def __init__(self, stream: TextIO | None = None, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        self._stream = stream if stream is not None else sys.stdout
        self._size = size
        self._pending = ""

    def write(self, text: str) -> int:
        """Append *text* to the buffer and return the number of characters taken."""
        remaining = text
        while remaining:
            if len(self._pending) == self._size:
                self.flush()
            room = self._size - len(self._pending)
            self._pending += remaining[:room]
            remaining = remaining[room:]
        return len(text)

    def flush(self) -> int:
        """Write out everything held and return the number of characters written."""
        data, self._pending = self._pending, ""
        if data:
            self._stream.write(data)
        flush = getattr(self._stream, "flush", None)
        if callable(flush):
            flush()
        return len(data)

    def __enter__(self) -> OutputBuffer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()