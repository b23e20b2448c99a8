"""A minimal printf-style formatter and the greeting program built on it."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

__all__ = ["format_message", "main"]

_DIGITS = "0123456789abcdef"
_ULONG_MASK = 0xFFFFFFFF


def _number(value: int, base: int) -> str:
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
        if not value:
            break
    return "".join(reversed(digits))


def format_message(fmt: str, *args: object) -> str:
    """Format ``fmt`` with the specifiers %c, %s, %d and %x.

    Any other character after '%' (including a second '%') is dropped
    together with the '%'. Extra arguments are ignored; too few raise
    TypeError.
    """
    remaining = iter(args)

    def take() -> object:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "c":
            value = take()
            out.append(value if isinstance(value, str) else chr(int(value) & 0xFF))
        elif spec == "s":
            out.append(str(take()))
        elif spec == "d":
            value = int(take())
            if value < 0:
                out.append("-")
                value = -value
            out.append(_number(value, 10))
        elif spec == "x":
            out.append(_number(int(take()) & _ULONG_MASK, 16))
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting lines to standard output."""
    parser = argparse.ArgumentParser(description="Print a greeting.")
    parser.parse_args(argv)
    sys.stdout.write(format_message("Hello RISC-V 32!\n"))
    sys.stdout.write(format_message("Number %d = 0x%x\n", 1234, 1234))
    sys.stdout.flush()
    return 0