"""Rendering of numbers and padding used by the formatter."""

from __future__ import annotations

from .strutil import itoa

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def decimal(n: int) -> str:
    """Return a 32-bit signed integer in decimal, with a leading ``-`` if negative."""
    return itoa(n)


def unsigned_decimal(n: int) -> str:
    """Return *n*, taken as a 32-bit unsigned integer, in decimal."""
    return str(n & _UINT_MASK)


def hex_lower(n: int) -> str:
    """Return *n*, taken as a 32-bit unsigned integer, in lower-case hexadecimal."""
    return format(n & _UINT_MASK, "x")


def hex_upper(n: int) -> str:
    """Return *n*, taken as a 32-bit unsigned integer, in upper-case hexadecimal."""
    return format(n & _UINT_MASK, "X")


def address(n: int) -> str:
    """Return *n*, taken as a 64-bit unsigned address, in lower-case hexadecimal."""
    return format(n & _ULONG_MASK, "x")


def spaces(count: int) -> str:
    """Return *count* spaces; a count below one gives an empty string."""
    return " " * max(count, 0)


def zeros(count: int) -> str:
    """Return *count* zero digits; a count below one gives an empty string."""
    return "0" * max(count, 0)


def truncate(text: str, count: int) -> str:
    """Return the first *count* characters of *text*.

    A count below one gives an empty string; a count longer than the text
    is an error.
    """
    if count > len(text):
        raise ValueError(f"cannot take {count} characters from a string of {len(text)}")
    return text[:max(count, 0)]