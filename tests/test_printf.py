import pytest

from solongmap.printf import (
    format_conversion,
    format_pointer,
    format_printf,
    printf,
    to_hex,
)


def test_decimal_round_trip():
    for n in (0, 7, 42, -42, 123456, -98765):
        assert int(format_printf("%d", n)) == n
        assert int(format_printf("%i", n)) == n


def test_int_min_and_wraparound():
    assert format_conversion("d", -2147483648) == "-2147483648"
    assert format_conversion("d", 2147483648) == "-2147483648"


def test_unsigned_of_minus_one():
    assert format_conversion("u", -1) == "4294967295"
    assert format_conversion("u", 4294967295) == "4294967295"


def test_hex_round_trip_and_case():
    for n in (0, 1, 15, 16, 255, 4096, 0xDEADBEEF):
        lower = to_hex(n, "x")
        upper = to_hex(n, "X")
        assert int(lower, 16) == n
        assert int(upper, 16) == n
        assert lower == lower.lower()
        assert upper == upper.upper()
        assert lower.upper() == upper


def test_hex_conversion_masks_to_unsigned_int():
    assert int(format_conversion("x", -1), 16) == 4294967295


def test_to_hex_rejects_bad_spec_and_negative():
    with pytest.raises(ValueError):
        to_hex(10, "d")
    with pytest.raises(ValueError):
        to_hex(-1, "x")


def test_pointer_null_and_round_trip():
    assert format_pointer(0) == "(nil)"
    for address in (1, 0x7FFDEADBEEF0, 255):
        text = format_pointer(address)
        assert text.startswith("0x")
        assert int(text, 16) == address


def test_string_and_null_string():
    assert format_printf("%s", "Hello, 42!") == "Hello, 42!"
    assert format_printf("%s", None) == "(null)"


def test_char_from_code_and_string():
    assert format_printf("%c", ord("A")) == "A"
    assert format_printf("%c", "A") == "A"


def test_percent_literal_takes_no_argument():
    assert format_printf("%%") == "%"
    assert format_printf("%%%d", 7) == "%7"


def test_unknown_conversion_written_as_is_without_argument():
    assert format_printf("%y%d", 5) == "y5"


def test_plain_text_unchanged():
    text = "no conversions here\n"
    assert format_printf(text) == text


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_printf("%d %d", 1)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_printf("100%")


def test_non_int_for_decimal_raises():
    with pytest.raises(TypeError):
        format_conversion("d", "12")


def test_surplus_arguments_ignored():
    assert format_printf("%d", 3, 4, 5) == "3"


def test_printf_writes_and_counts(capsys):
    count = printf("Error - %s\n", "map")
    out = capsys.readouterr().out
    assert out == "Error - map\n"
    assert count == len(out)