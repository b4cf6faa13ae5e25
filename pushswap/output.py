"""Formatted output supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

__all__ = [
    "CONVERSIONS",
    "is_valid_conversion",
    "number_in_base",
    "format_conversion",
    "sprintf",
    "printf",
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
]

CONVERSIONS = "cspdiuxX%"
DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"


def _int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _uint32(value: int) -> int:
    return value % 2**32


def _require_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_require_int(value) & 0xFF)


def _stream(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def is_valid_conversion(text: str) -> bool:
    """True when text starts with '%' followed by a supported conversion letter."""
    return len(text) >= 2 and text[0] == "%" and text[1] in CONVERSIONS


def number_in_base(n: int, digits: str) -> str:
    """Representation of a non-negative n using digits as the base's symbols."""
    _require_int(n)
    if n < 0:
        raise ValueError(f"number must not be negative, got {n}")
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    symbols = []
    while True:
        n, remainder = divmod(n, base)
        symbols.append(digits[remainder])
        if n == 0:
            break
    return "".join(reversed(symbols))


def format_conversion(conversion: str, value=None) -> str:
    """Text for one conversion letter applied to value.

    Integers are taken at C widths: d and i as 32-bit signed, u, x and X as
    32-bit unsigned, p as a 64-bit address.
    """
    if conversion == "c":
        return _char(value)
    if conversion == "%":
        return "%"
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in ("d", "i"):
        number = _int32(_require_int(value))
        if number < 0:
            return "-" + number_in_base(-number, DECIMAL)
        return number_in_base(number, DECIMAL)
    if conversion == "p":
        if value is None or value == 0:
            return "(nil)"
        return "0x" + number_in_base(_require_int(value) % 2**64, HEX_LOWER)
    if conversion == "u":
        return number_in_base(_uint32(_require_int(value)), DECIMAL)
    if conversion in ("x", "X"):
        digits = HEX_LOWER if conversion == "x" else HEX_UPPER
        return number_in_base(_uint32(_require_int(value)), digits)
    raise ValueError(f"unsupported conversion {conversion!r}")


def sprintf(fmt: str, *args) -> str:
    """Format fmt with args; text that is not a valid conversion is copied as is.

    Raises TypeError when fmt needs more arguments than were given.
    """
    pieces = []
    remaining = iter(args)
    position = 0
    while position < len(fmt):
        if is_valid_conversion(fmt[position:position + 2]):
            conversion = fmt[position + 1]
            if conversion == "%":
                pieces.append("%")
            else:
                try:
                    value = next(remaining)
                except StopIteration:
                    raise TypeError("not enough arguments for format string") from None
                pieces.append(format_conversion(conversion, value))
            position += 2
        else:
            pieces.append(fmt[position])
            position += 1
    return "".join(pieces)


def printf(fmt: str, *args, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (standard output by default); return its length."""
    text = sprintf(fmt, *args)
    _stream(file).write(text)
    return len(text)


def put_char(c: Union[int, str], file: Optional[TextIO] = None) -> None:
    """Write one character."""
    _stream(file).write(_char(c))


def put_str(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string."""
    _stream(file).write(s)


def put_endl(s: str, file: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    _stream(file).write(s + "\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _stream(file).write(format_conversion("d", n))