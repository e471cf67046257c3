"""A printf-style formatter for c, s, p, d, i, u, x, X and % conversions, with string and byte helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "conversions", "numfmt", "printf", "spec", "strutil"]