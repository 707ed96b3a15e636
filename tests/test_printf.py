import pytest

from ftkit.printf import CountRef, format_string, printf
from ftkit.printf_spec import FormatError


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (-17,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (5,)),
        ("% d", (5,)),
        ("%+.3d", (5,)),
        ("%5.3d", (7,)),
        ("%u", (3000000000,)),
        ("%c", (65,)),
        ("%5c", (66,)),
        ("%-5c|", (67,)),
        ("%s", ("hello",)),
        ("%.2s", ("hello",)),
        ("%8s", ("abc",)),
        ("%-8s|", ("abc",)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#X", (255,)),
        ("%#08x", (255,)),
        ("%10.4x", (255,)),
        ("%-10.4x|", (255,)),
        ("%%", ()),
        ("a%db%sc", (1, "z")),
        ("%ld", (2**40,)),
        ("%*d", (6, 42)),
        ("%.*s", (3, "hello")),
    ],
)
def test_matches_python_percent_formatting(fmt, args):
    assert format_string(fmt, *args) == fmt % args


def test_plain_text_is_unchanged():
    assert format_string("no conversions here") == "no conversions here"


def test_negative_star_width_left_justifies():
    assert format_string("%*d|", -6, 42) == "%-6d|" % 42


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_pointer_has_prefix():
    assert format_string("%p", 255) == "0x" + format(255, "x")
    assert format_string("%p", 0) == "0x0"


def test_zero_with_zero_precision_prints_nothing():
    assert format_string("[%.0d]", 0) == "[]"


def test_zero_hex_with_hash_has_no_prefix():
    assert format_string("%#x", 0) == format_string("%x", 0)


def test_grouping_flag():
    assert format_string("%'d", 1234567) == f"{1234567:,}"
    assert format_string("%'u", 999) == "999"


def test_length_modifiers_wrap():
    assert format_string("%hhd", 256 + 7) == format_string("%d", 7)
    assert format_string("%hd", 65536 + 9) == format_string("%d", 9)
    assert format_string("%d", 2**32 + 5) == format_string("%d", 5)


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == str(2**32 - 1)
    assert format_string("%llu", -1) == str(2**64 - 1)


def test_unknown_conversion_is_written():
    assert format_string("%q") == "q"


def test_character_from_string_argument():
    assert format_string("%c%c", "o", "k") == "ok"


def test_count_ref_receives_count():
    ref = CountRef()
    text = format_string("abc%nxyz", ref)
    assert ref.value == len("abc")
    assert text == "abcxyz"


def test_count_ref_after_conversion():
    ref = CountRef()
    format_string("%5d%n", 1, ref)
    assert ref.value == len(format_string("%5d", 1))


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d")


def test_wide_char_out_of_range_raises():
    with pytest.raises(FormatError):
        format_string("%lc", 300)


def test_wide_string_without_precision_raises():
    with pytest.raises(FormatError):
        format_string("%ls", "x")


def test_n_requires_count_ref():
    with pytest.raises(TypeError):
        format_string("%n", 5)


@pytest.mark.parametrize(
    "fmt, args",
    [("hello %s", ("world",)), ("%5d|%-4x|", (12, 255)), ("%c%%", (65,)), ("", ())],
)
def test_printf_writes_and_counts(capsys, fmt, args):
    count = printf(fmt, *args)
    written = capsys.readouterr().out
    assert written == format_string(fmt, *args)
    assert count == len(written)


def test_extra_arguments_are_ignored():
    assert format_string("%d", 1, 2, 3) == format_string("%d", 1)