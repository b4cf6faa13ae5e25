"""Byte-buffer helpers over bytearray and other bytes-like objects."""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc", "SIZE_MAX"]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of value; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy the first n bytes of src into dest; return dest.

    With neither buffer given, nothing is copied and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes inside one buffer, from src_offset to dest_offset; regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, dest)
    if max(dest_offset, src_offset) + n > len(dest):
        raise IndexError("move runs past the end of the buffer")
    dest[dest_offset:dest_offset + n] = bytes(dest[src_offset:src_offset + n])
    return dest


def memchr(buf, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of value among the first n, or None."""
    _check_count(n, buf)
    target = value & 0xFF
    return next((i for i, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(first, second, n: int) -> int:
    """Difference of the first differing bytes within n bytes, or 0 if they match."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of nmemb elements of size bytes each.

    Raises OverflowError when the total size does not fit in SIZE_MAX.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(nmemb * size)