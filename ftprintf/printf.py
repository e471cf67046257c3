"""The ``printf`` family: expand a format string and write or return it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from .conversions import convert
from .spec import ArgumentQueue, parse_spec

_DEMO_FORMAT = "%*.52s%.d%07.*X%25c\n"
_DEMO_ARGS = (-42, "INT_MIN", 6541, 58, 12585, 104)


def sprintf(fmt: str, *args: Any) -> str:
    """Expand *fmt* with *args* and return the resulting text.

    Surplus arguments are ignored; missing ones raise ``TypeError`` and an
    unterminated directive raises ``ValueError``.
    """
    queue = ArgumentQueue(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        index = fmt.find("%", pos)
        if index < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:index])
        spec, pos = parse_spec(fmt, index, queue)
        parts.append(convert(spec, queue))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of *fmt* to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a sample line exercising width, precision and padding."""
    parser = argparse.ArgumentParser(
        prog="ftprintf",
        description="Print a sample line produced by the formatter.",
    )
    parser.parse_args(argv)
    printf(_DEMO_FORMAT, *_DEMO_ARGS)
    return 0


if __name__ == "__main__":
    sys.exit(main())