"""Printf-style string formatting with extra binary, ROT13, reversal and escape conversions."""

__version__ = "0.1.0"