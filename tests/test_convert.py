import pytest

from ftformat.convert import (
    NULL_POINTER,
    NULL_STRING,
    format_char,
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
    render,
)
from ftformat.spec import parse_spec


def spec(directive):
    return parse_spec(directive, 1)


@pytest.mark.parametrize(
    "directive, n",
    [
        ("%d", 42),
        ("%d", -42),
        ("%i", 123),
        ("%5d", 42),
        ("%-5d", -42),
        ("%05d", -42),
        ("%+5d", 42),
        ("%+05d", 42),
        ("% d", 42),
        ("% 05d", 42),
        ("%.5d", -42),
        ("%10.4d", -42),
        ("%+.3d", 7),
        ("%d", 0),
    ],
)
def test_signed_matches_standard_printf(directive, n):
    text, count = format_signed(spec(directive), n)
    assert text == directive % n
    assert count == len(text)


def test_signed_wraps_to_32_bits():
    text, count = format_signed(spec("%d"), 2**31)
    assert text == str(-(2**31))
    assert count == len(text)


def test_signed_zero_with_zero_precision_prints_nothing():
    assert format_signed(spec("%.0d"), 0) == ("", 0)


def test_signed_zero_with_zero_precision_keeps_width():
    text, count = format_signed(spec("%5.0d"), 0)
    assert text.strip() == ""
    assert len(text) == 5
    assert count == len(text)


def test_signed_rejects_non_integers():
    with pytest.raises(TypeError):
        format_signed(spec("%d"), "12")


@pytest.mark.parametrize(
    "directive, n",
    [("%u", 7), ("%8u", 123), ("%-8u", 123), ("%08u", 123), ("%.4u", 9)],
)
def test_unsigned_matches_standard_printf(directive, n):
    text, count = format_unsigned(spec(directive), n)
    assert text == directive % n
    assert count == len(text)


def test_unsigned_wraps_negative_values():
    text, _ = format_unsigned(spec("%u"), -1)
    assert text == str(2**32 - 1)


@pytest.mark.parametrize(
    "directive, n",
    [
        ("%x", 255),
        ("%X", 0xABC),
        ("%#x", 255),
        ("%#X", 0xABC),
        ("%#08x", 255),
        ("%8.3x", 255),
        ("%-8.3x", 255),
        ("%#-8x", 255),
        ("%x", 0),
    ],
)
def test_hex_matches_standard_printf(directive, n):
    text, count = format_hex(spec(directive), n, upper=directive.endswith("X"))
    assert text == directive % n
    assert count == len(text)


def test_hex_alternate_form_of_zero_has_no_prefix():
    text, count = format_hex(spec("%#x"), 0)
    assert text == "%x" % 0
    assert count == len(text)


@pytest.mark.parametrize("directive", ["%c", "%5c", "%-5c"])
def test_char_matches_standard_printf(directive):
    text, count = format_char(spec(directive), "a")
    assert text == directive % "a"
    assert count == len(text)


def test_char_accepts_code_point():
    assert format_char(spec("%c"), 65)[0] == "%c" % 65


def test_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        format_char(spec("%c"), "ab")


@pytest.mark.parametrize(
    "directive",
    ["%s", "%10s", "%-10s", "%.2s", "%5.2s", "%.0s"],
)
def test_string_matches_standard_printf(directive):
    text, count = format_string(spec(directive), "hello")
    assert text == directive % "hello"
    assert count == len(text)


def test_null_string():
    assert format_string(spec("%s"), None) == (NULL_STRING, len(NULL_STRING))
    assert format_string(spec("%8s"), None)[0] == NULL_STRING.rjust(8)
    assert format_string(spec("%.8s"), None)[0] == NULL_STRING


def test_null_string_with_short_precision_prints_nothing():
    assert format_string(spec("%.3s"), None) == ("", 0)


def test_string_stops_at_nul():
    assert format_string(spec("%s"), "ab\0cd")[0] == "ab"


@pytest.mark.parametrize("p", [255, 0xDEADBEEF, 4096])
def test_pointer_forms(p):
    assert format_pointer(spec("%p"), p)[0] == hex(p)
    assert format_pointer(spec("%20p"), p)[0] == hex(p).rjust(20)
    assert format_pointer(spec("%-20p"), p)[0] == hex(p).ljust(20)
    assert format_pointer(spec("%020p"), p)[0] == "%#020x" % p
    text, count = format_pointer(spec("%.6p"), p)
    assert text == "%#.6x" % p
    assert count == len(text)


def test_null_pointer():
    assert format_pointer(spec("%p"), 0) == (NULL_POINTER, len(NULL_POINTER))
    assert format_pointer(spec("%p"), None)[0] == NULL_POINTER
    assert format_pointer(spec("%10p"), 0)[0] == NULL_POINTER.rjust(10)


def test_plus_on_null_pointer_is_counted_but_not_written():
    text, count = format_pointer(spec("%+p"), 0)
    assert text == NULL_POINTER
    assert count == len(text) + 1


def test_plus_on_pointer():
    text, count = format_pointer(spec("%+p"), 255)
    assert text == "+" + hex(255)
    assert count == len(text)


@pytest.mark.parametrize(
    "directive, arg",
    [("%5s", "ab"), ("%-4d", 9), ("%#x", 17), ("%X", 17), ("%u", 3), ("%3c", "z")],
)
def test_render_dispatches(directive, arg):
    text, count = render(spec(directive), arg)
    assert text == directive % arg
    assert count == len(text)


def test_render_percent_and_invalid():
    assert render(spec("%%")) == ("%", len("%"))
    assert render(spec("%k"), 5) == ("", 0)