"""Conversions between decimal text and integers with C integer widths."""

from __future__ import annotations

from .chars import is_digit, is_space

__all__ = ["atoi", "atoll", "itoa", "INT_MIN", "INT_MAX", "LLONG_MIN", "LLONG_MAX"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement signed integer of the given width."""
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _parse(text: str) -> int:
    """Leading whitespace, one optional sign, then as many ASCII digits as follow."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    rest = text.lstrip()
    # lstrip also removes non-ASCII whitespace, so strip by hand.
    position = 0
    while position < len(text) and is_space(text[position]):
        position += 1
    rest = text[position:]
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not is_digit(char):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def atoi(text: str) -> int:
    """Parse a leading decimal number as a 32-bit signed int, wrapping on overflow.

    Text with no digits after the optional sign gives 0.
    """
    return _wrap(_parse(text), 32)


def atoll(text: str) -> int:
    """Parse a leading decimal number as a 64-bit signed int, wrapping on overflow."""
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer.

    Raises OverflowError when n does not fit in 32 bits.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)