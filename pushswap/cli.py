"""Command line entry: read numbers, print the operations that sort them."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .numbers import INT_MAX, INT_MIN, atoll
from .sorter import sort_numbers

__all__ = ["InputError", "parse_arguments", "main"]


class InputError(ValueError):
    """The command line does not hold a usable list of numbers."""


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Numbers from the arguments, top of stack a first.

    Each argument is read like a C integer literal prefix. Zero and values
    outside the 32-bit signed range are rejected, as is an empty list.
    """
    if not args:
        raise InputError("no numbers given")
    numbers = []
    for arg in args:
        value = atoll(arg)
        if value == 0 or not INT_MIN <= value <= INT_MAX:
            raise InputError(f"invalid number: {arg!r}")
        numbers.append(value)
    return numbers


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one sorting operation per line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in sort_numbers(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())