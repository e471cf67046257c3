import pytest

from ftprintf.printf import main, printf, sprintf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%5d", (42,)),
        ("%-5d|", (-3,)),
        ("%05d", (-42,)),
        ("%.3d", (7,)),
        ("%x", (255,)),
        ("%X", (48879,)),
        ("%8.3x", (255,)),
        ("%s", ("hello",)),
        ("%.2s", ("hello",)),
        ("%-6s|", ("abc",)),
        ("%10s", ("abc",)),
        ("%c", (104,)),
        ("%3c", (65,)),
        ("100%%", ()),
        ("%i and %u", (12, 34)),
        ("plain text", ()),
        ("%*d", (6, 99)),
        ("%-*d|", (4, 1)),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert sprintf(fmt, *args) == fmt % args


def test_null_string_prints_null_marker():
    assert sprintf("%s", None) == "(null)"


def test_unsigned_wraps_negative():
    assert sprintf("%u", -1) == "4294967295"


def test_zero_with_empty_precision_prints_nothing():
    assert sprintf("%.0d", 0) == ""


def test_unhandled_conversion_produces_nothing():
    assert sprintf("a%fb", 1.5) == "ab"


def test_pointer_round_trip():
    text = sprintf("%p", 255)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 255


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 5, 6, 7) == sprintf("%d", 5)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "x")


def test_unterminated_directive_raises():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_printf_writes_and_counts(capsys):
    count = printf("%-4s|%03d\n", "ab", 7)
    out = capsys.readouterr().out
    assert out == sprintf("%-4s|%03d\n", "ab", 7)
    assert count == len(out)


def test_main_prints_demo_line(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = "%*.52s%.d%07.*X%25c\n" % (-42, "INT_MIN", 6541, 58, 12585, 104)
    assert out == expected
    assert out.startswith("INT_MIN")
    assert out.endswith("h\n")