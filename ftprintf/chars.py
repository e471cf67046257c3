"""Character classification, case mapping and raw byte helpers.

Character arguments may be given either as a one-character string or as an
integer character code, the way the C routines take an ``int``.
"""

from __future__ import annotations

from collections.abc import Callable


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or pass an int through."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def isalnum(c: str | int) -> bool:
    """Return whether *c* is an ASCII letter or digit."""
    code = _code(c)
    return (
        ord("A") <= code <= ord("Z")
        or ord("a") <= code <= ord("z")
        or ord("0") <= code <= ord("9")
    )


def isalpha(c: str | int) -> int:
    """Classify *c* as a letter: 2 for upper case, 1 for lower case, 0 otherwise."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return 2
    if ord("a") <= code <= ord("z"):
        return 1
    return 0


def isascii(c: str | int) -> bool:
    """Return whether *c* lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isdigit(c: str | int) -> bool:
    """Return whether *c* is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isprint(c: str | int) -> bool:
    """Return whether *c* is a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def _shift_case(c: str | int, low: str, high: str, delta: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def tolower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else alone.

    The result has the same kind (string or code) as the argument.
    """
    return _shift_case(c, "A", "Z", 32)


def toupper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else alone.

    The result has the same kind (string or code) as the argument.
    """
    return _shift_case(c, "a", "z", -32)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character."""
    if func is None:
        raise TypeError("strmapi needs a mapping function")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def _check_span(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"n={n} exceeds the buffer length {len(buffer)}")


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to *value* in ``data[:n]``, or ``None``.

    Only the low eight bits of *value* take part in the comparison.
    """
    _check_span(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch, else 0."""
    _check_span(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0