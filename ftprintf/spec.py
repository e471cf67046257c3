"""Parsing of a single conversion specification such as ``%-08.3lx``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .strutil import atoi

CONVERSIONS = "cspdiuxX%nfgeoEFGaACSm"
_FLAG_CHARS = "-# +"
_NONZERO_DIGITS = "123456789"
_LENGTH_CHARS = "hlLjzt"
_LENGTH_REPEAT = "hl"


class ArgumentQueue:
    """The arguments still waiting to be consumed by a format string."""

    def __init__(self, args: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(args)

    def next(self) -> Any:
        """Remove and return the next argument."""
        if not self._items:
            raise TypeError("not enough arguments for format string")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class FormatSpec:
    """Flags, width, precision and conversion of one ``%`` directive.

    ``conversion`` is ``None`` when the directive is malformed; ``text`` is
    everything after the ``%`` up to and including the conversion character.
    """

    width: int = 0
    precision: int = 0
    dot: bool = False
    minus: bool = False
    minus_precision: bool = False
    zero: bool = False
    star: bool = False
    hash: bool = False
    space: bool = False
    plus: bool = False
    length: bool = False
    conversion: str | None = None
    text: str = ""

    def normalize(self) -> None:
        """Resolve conflicting settings in place.

        A negative width means left alignment, a negative precision means no
        precision, and zero padding is dropped without a width or when
        left-aligned.
        """
        if self.width < 0:
            self.width = -self.width
            self.minus = True
        if self.precision < 0:
            self.dot = False
        if self.zero and self.width == 0:
            self.zero = False
        if self.zero and self.minus:
            self.zero = False


class _Scanner:
    """A read position inside the directive text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at(self, chars: str) -> bool:
        ch = self.peek()
        return bool(ch) and ch in chars

    def advance(self, count: int = 1) -> None:
        self.pos += count

    def number(self) -> int:
        value = atoi(self.text[self.pos:])
        # The position moves by the digit count of the parsed value.
        self.advance(len(str(value)) if value > 0 else 1)
        return value


def _star_value(args: ArgumentQueue) -> int:
    value = args.next()
    if not isinstance(value, int):
        raise TypeError(f"'*' needs an integer argument, got {type(value).__name__}")
    return value


def _scan_flags(spec: FormatSpec, text: str) -> None:
    for ch in text:
        if ch == "-":
            if spec.dot:
                spec.minus_precision = True
            else:
                spec.minus = True
        elif ch == "*":
            spec.star = True
        elif ch == ".":
            spec.dot = True
        elif ch == "#":
            spec.hash = True
        elif ch == " ":
            spec.space = True
        elif ch == "+":
            spec.plus = True


def _scan_width(spec: FormatSpec, sc: _Scanner, args: ArgumentQueue) -> None:
    while sc.at(_FLAG_CHARS):
        sc.advance()
    if sc.at("0"):
        spec.zero = True
        sc.advance()
    while sc.at("0-"):
        sc.advance()
    if sc.at(_NONZERO_DIGITS):
        spec.width = sc.number()
    if sc.at("*"):
        spec.width = _star_value(args)
        sc.advance()


def _scan_precision(spec: FormatSpec, sc: _Scanner, args: ArgumentQueue) -> None:
    if not sc.at("."):
        return
    sc.advance()
    while sc.at("0"):
        sc.advance()
    if sc.at(_NONZERO_DIGITS):
        spec.precision = sc.number()
    if sc.at("*"):
        spec.precision = _star_value(args)
        sc.advance()


def _scan_length(spec: FormatSpec, sc: _Scanner) -> None:
    if sc.at(_LENGTH_CHARS):
        spec.length = True
        sc.advance()
        if sc.at(_LENGTH_REPEAT):
            sc.advance()


def parse_spec(fmt: str, start: int, args: ArgumentQueue) -> tuple[FormatSpec, int]:
    """Parse the directive whose ``%`` sits at ``fmt[start]``.

    Arguments for ``*`` widths and precisions are taken from *args*.
    Returns the specification and the index just past its conversion
    character. The specification is not normalized.
    """
    if not 0 <= start < len(fmt) or fmt[start] != "%":
        raise ValueError(f"no '%' at index {start} of the format string")
    body_start = start + 1
    for offset, ch in enumerate(fmt[body_start:]):
        if ch in CONVERSIONS:
            break
    else:
        raise ValueError(f"incomplete conversion specification at index {start}")
    end = body_start + offset + 1
    text = fmt[body_start:end]

    spec = FormatSpec(text=text)
    _scan_flags(spec, text)
    sc = _Scanner(text)
    if text[0] not in CONVERSIONS:
        _scan_width(spec, sc, args)
        if spec.dot:
            _scan_precision(spec, sc, args)
        _scan_length(spec, sc)
    ch = sc.peek()
    spec.conversion = ch if ch and ch in CONVERSIONS else None
    return spec, end