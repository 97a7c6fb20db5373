"""A demonstration that prints sample conversions next to Python's own formatting."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from printfmt.formatter import printf

_INT_MAX = 2**31 - 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print each sample line twice: once by this package, once for reference."""
    parser = argparse.ArgumentParser(
        prog="printfmt",
        description="Show sample conversions beside reference output.",
    )
    parser.parse_args(argv)

    out = sys.stdout

    def reference(text: str) -> int:
        out.write(text)
        out.flush()
        return len(text)

    sentence = "Let's try to printf a simple sentence.\n"
    length = printf(sentence)
    length2 = reference(sentence)
    unsigned = _INT_MAX + 1024
    address = 0x7FFE63

    printf("Length:[%d, %i]\n", length, length)
    reference("Length:[%d, %i]\n" % (length2, length2))
    printf("Negative:[%d]\n", -762534)
    reference("Negative:[%d]\n" % -762534)
    printf("Unsigned:[%u]\n", unsigned)
    reference("Unsigned:[%u]\n" % unsigned)
    printf("Unsigned octal:[%o]\n", unsigned)
    reference("Unsigned octal:[%o]\n" % unsigned)
    printf("Unsigned hexadecimal:[%x, %X]\n", unsigned, unsigned)
    reference("Unsigned hexadecimal:[%x, %X]\n" % (unsigned, unsigned))
    printf("Character:[%c]\n", "H")
    reference("Character:[%c]\n" % "H")
    printf("String:[%s]\n", "I am a string !")
    reference("String:[%s]\n" % "I am a string !")
    printf("Address:[%p]\n", address)
    reference(f"Address:[{address:#x}]\n")
    length = printf("Percent:[%%]\n")
    length2 = reference("Percent:[%%]\n" % ())
    printf("Len:[%d]\n", length)
    reference("Len:[%d]\n" % length2)
    printf("Unknown:[%r]\n", None)
    return 0


if __name__ == "__main__":
    sys.exit(main())