"""Rendering of one conversion (``%c``, ``%s``, ``%p``, ``%d``, ``%u``, ``%x`` ...).

Every function returns the text that the directive produces. The
specification is expected to be normalized (see ``FormatSpec.normalize``);
``convert`` takes care of that itself.
"""

from __future__ import annotations

from typing import Any

from .numfmt import address, hex_lower, hex_upper, spaces, truncate, unsigned_decimal, zeros
from .spec import ArgumentQueue, FormatSpec

_NULL_TEXT = "(null)"
_UINT_MASK = (1 << 32) - 1


def _require_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an integer argument, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _pad_single(spec: FormatSpec, text: str) -> str:
    """Pad a one-character conversion to the field width."""
    fill = spec.width - 1
    if spec.width <= 1:
        return text
    if spec.minus:
        return text + spaces(fill)
    return (zeros(fill) if spec.zero else spaces(fill)) + text


def _left_padding(spec: FormatSpec, length: int, negative: bool) -> str:
    """Padding and sign placed before the digits of a right-aligned number."""
    sign = "-" if negative else ""
    if spec.width > length:
        fill = spec.width - length
        if not spec.zero or (spec.dot and spec.width >= spec.precision):
            return spaces(fill) + sign
        return sign + zeros(fill)
    return sign


def _format_number(spec: FormatSpec, digits: str, negative: bool) -> str:
    """Lay out the digits of an integer with sign, precision and width."""
    digit_count = len(digits)
    length = digit_count
    if spec.precision > 0 and spec.precision > length:
        length = spec.precision
    if negative:
        length += 1
    if digits == "0" and spec.dot and spec.precision == 0:
        return spaces(spec.width)
    parts = []
    if not spec.minus:
        parts.append(_left_padding(spec, length, negative))
    elif negative and not spec.zero:
        parts.append("-")
    if spec.precision > digit_count:
        parts.append(zeros(spec.precision - digit_count))
    parts.append(digits)
    if spec.minus and spec.width > length:
        parts.append(spaces(spec.width - length))
    return "".join(parts)


def format_char(spec: FormatSpec, value: Any) -> str:
    """Render ``%c``: a character given as a code or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        char = value
    else:
        char = chr(_require_int(value, "c") & 0xFF)
    return _pad_single(spec, char)


def format_str(spec: FormatSpec, value: Any) -> str:
    """Render ``%s``; ``None`` prints as ``(null)``."""
    if value is None:
        value = _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string argument, got {type(value).__name__}")
    if 0 < spec.precision < len(value):
        length = spec.precision
    elif spec.dot and spec.precision == 0:
        length = 0
    else:
        length = len(value)
    body = truncate(value, length)
    fill = spec.width - length
    if spec.minus:
        return body + spaces(fill)
    return (zeros(fill) if spec.zero else spaces(fill)) + body


def format_pointer(spec: FormatSpec, value: Any) -> str:
    """Render ``%p`` as ``0x`` and lower-case hex digits.

    ``None`` is the null address; an integer is used as it is; any other
    object is shown by its identity.
    """
    if value is None:
        number = 0
    elif isinstance(value, int):
        number = value
    else:
        number = id(value)
    digits = address(number)
    length = len(digits)
    is_null = int(digits, 16) == 0
    hide_digits = spec.dot and spec.precision == 0 and is_null
    prefix_len = 2
    if is_null and not hide_digits:
        prefix_len += 1
    fill = spec.width - (prefix_len + length - (1 if is_null else 0))

    body = "0x"
    if spec.precision > 0 and spec.dot:
        body += zeros(spec.precision - length)
    if not hide_digits:
        body += digits
    if fill <= 0:
        return body
    return body + spaces(fill) if spec.minus else spaces(fill) + body


def format_int(spec: FormatSpec, value: Any) -> str:
    """Render ``%d`` / ``%i`` for a 32-bit signed integer."""
    number = _to_int32(_require_int(value, spec.conversion or "d"))
    return _format_number(spec, unsigned_decimal(abs(number)), number < 0)


def format_uint(spec: FormatSpec, value: Any) -> str:
    """Render ``%u`` for a 32-bit unsigned integer."""
    number = _require_int(value, "u")
    return _format_number(spec, unsigned_decimal(number), False)


def format_hex(spec: FormatSpec, value: Any, upper: bool) -> str:
    """Render ``%x`` (or ``%X`` when *upper*) for a 32-bit unsigned integer."""
    number = _require_int(value, "X" if upper else "x")
    digits = hex_upper(number) if upper else hex_lower(number)
    return _format_number(spec, digits, False)


def format_percent(spec: FormatSpec) -> str:
    """Render ``%%``, padded like a character."""
    return _pad_single(spec, "%")


def convert(spec: FormatSpec, args: ArgumentQueue) -> str:
    """Normalize *spec* and render it, taking its argument from *args*.

    Conversions without a renderer (``%f``, ``%n``, ``%o`` ...) and malformed
    directives produce nothing and consume no argument.
    """
    spec.normalize()
    conversion = spec.conversion
    if conversion == "%":
        return format_percent(spec)
    if conversion == "c":
        return format_char(spec, args.next())
    if conversion == "s":
        return format_str(spec, args.next())
    if conversion == "p":
        return format_pointer(spec, args.next())
    if conversion in ("d", "i"):
        return format_int(spec, args.next())
    if conversion == "u":
        return format_uint(spec, args.next())
    if conversion == "x":
        return format_hex(spec, args.next(), False)
    if conversion == "X":
        return format_hex(spec, args.next(), True)
    return ""