"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices into the string (or ``None`` when nothing
is found) rather than as pointers.
"""

from __future__ import annotations

from itertools import islice, zip_longest

_WHITESPACE = "\f\n\r\t\v "
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, as C ``int`` arithmetic does."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; a string without digits gives 0.
    The result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if _wrap_int32(n) != n:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the character *sep*, dropping empty fields."""
    if sep in ("", "\0"):
        return [text] if text else []
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in *charset*."""
    charset = charset.split("\0", 1)[0]
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* starting at *start*.

    A start beyond the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* within the first *length* characters of *haystack*.

    Returns the index of the first match, 0 for an empty needle, or ``None``.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the difference at the first mismatch.

    The end of a string counts as a character with code 0.
    """
    pairs = zip_longest(s1, s2, fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first *char* in *text*, or ``None``.

    Searching for ``"\\0"`` finds the terminator at ``len(text)``.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last *char* in *text*, or ``None``.

    Searching for ``"\\0"`` finds the terminator at ``len(text)``.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strnlen(text: str, maxlen: int) -> int:
    """Return the length of *text*, but never more than *maxlen*."""
    if maxlen < 0:
        raise ValueError("maxlen must not be negative")
    return min(len(text), maxlen)


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of *s1* and *s2*."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2