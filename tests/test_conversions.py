import pytest

from ftprintf.conversions import (
    convert,
    format_char,
    format_hex,
    format_int,
    format_percent,
    format_pointer,
    format_str,
    format_uint,
)
from ftprintf.spec import ArgumentQueue, FormatSpec, parse_spec


def render(directive, *args):
    queue = ArgumentQueue(args)
    spec, _ = parse_spec(directive, 0, queue)
    return convert(spec, queue)


@pytest.mark.parametrize(
    "directive, value",
    [
        ("%d", 42),
        ("%i", -42),
        ("%5d", 42),
        ("%-5d", 42),
        ("%05d", -42),
        ("%.3d", 7),
        ("%8.3d", -7),
        ("%-8.3d", -7),
        ("%d", -2147483648),
        ("%12d", -2147483648),
        ("%u", 3000000000),
        ("%7u", 12),
        ("%x", 255),
        ("%X", 255),
        ("%08x", 255),
        ("%-6X", 12585),
        ("%s", "hello"),
        ("%.2s", "hello"),
        ("%10s", "hello"),
        ("%-10s", "hello"),
        ("%c", 65),
        ("%5c", 104),
        ("%-5c", "z"),
    ],
)
def test_matches_standard_formatting(directive, value):
    assert render(directive, value) == directive % value


def test_zero_flag_ignored_with_precision():
    assert render("%08.3d", -7) == ("%.3d" % -7).rjust(8)


def test_star_width_negative_means_left_aligned():
    assert render("%*d", -5, 42) == "%-5d" % 42


def test_star_precision():
    assert render("%.*X", 6, 12585) == "%.6X" % 12585


def test_zero_with_zero_precision_prints_nothing():
    text = render("%5.0d", 0)
    assert len(text) == 5
    assert text.strip() == ""
    assert render("%.0x", 0) == render("%.0u", 0) == render("%.d", 0)
    assert len(render("%.d", 0)) == 0


def test_int_wraps_to_32_bits():
    assert render("%d", 2**32 + 5) == "5"


def test_unsigned_of_negative_wraps():
    assert render("%x", -1) == "ffffffff"
    assert render("%u", -1) == str(2**32 - 1)


def test_string_null_and_precision():
    assert render("%s", None) == "(null)"
    assert render("%.0s", "hello") == ""
    assert render("%.3s", None) == "(nu"


def test_string_zero_padding():
    assert render("%07s", "ab") == "00000ab"


def test_char_zero_padding_and_nul():
    text = render("%04c", "q")
    assert text.endswith("q") and set(text[:-1]) == {"0"}
    assert render("%c", 0) == "\0"


def test_percent_padding():
    text = render("%5%")
    assert len(text) == 5
    assert text.strip() == "%"
    assert render("%-3%") == "%  "


def test_pointer_round_trip():
    text = render("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text, 16) == 0xDEADBEEF


def test_pointer_null_forms():
    assert render("%p", 0) == "0x0"
    assert format_pointer(FormatSpec(), None) == render("%p", 0)
    assert render("%.0p", 0) == "0x"


def test_pointer_width_invariants():
    right = render("%20p", 4096)
    left = render("%-20p", 4096)
    assert len(right) == len(left) == 20
    assert right.strip() == left.strip() == "0x1000"
    assert right.startswith(" ") and left.endswith(" ")


def test_pointer_object_uses_identity():
    obj = object()
    assert int(format_pointer(FormatSpec(), obj), 16) == id(obj)


def test_direct_renderers():
    assert format_int(FormatSpec(width=6, minus=True), 3) == "%-6d" % 3
    assert format_uint(FormatSpec(precision=4, dot=True), 9) == "%.4u" % 9
    assert format_hex(FormatSpec(width=4), 171, True) == "%4X" % 171
    assert format_char(FormatSpec(width=3), "a") == "%3c" % "a"
    assert format_str(FormatSpec(width=2), "abc") == "abc"
    assert format_percent(FormatSpec()) == "%"


def test_unsupported_conversion_consumes_nothing():
    queue = ArgumentQueue([1.5])
    spec, _ = parse_spec("%f", 0, queue)
    assert convert(spec, queue) == ""
    assert len(queue) == 1


def test_convert_consumes_one_argument():
    queue = ArgumentQueue([10, 20])
    spec, _ = parse_spec("%d", 0, queue)
    assert convert(spec, queue) == "10"
    assert len(queue) == 1


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


@pytest.mark.parametrize(
    "directive, value",
    [("%d", "12"), ("%x", 1.5), ("%s", 12), ("%u", None)],
)
def test_wrong_argument_type_raises(directive, value):
    with pytest.raises(TypeError):
        render(directive, value)


def test_char_string_must_be_single():
    with pytest.raises(ValueError):
        format_char(FormatSpec(), "ab")