import pytest

from solongmap.numbers import atoi, itoa

SAMPLES = [0, 7, -7, 42, -456, 12345, -12345, 2147483647, -2147483648]


def test_atoi_source_example():
    assert atoi("  -12345") == -12345


def test_itoa_source_example():
    assert itoa(-456) == "-456"


@pytest.mark.parametrize("n", SAMPLES)
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_itoa_matches_builtin_formatting(n):
    assert itoa(n) == str(n)


@pytest.mark.parametrize("blank", list(" \t\n\v\f\r"))
def test_atoi_skips_leading_whitespace(blank):
    assert atoi(blank * 3 + itoa(-456)) == -456


def test_atoi_accepts_plus_sign():
    assert atoi("+" + itoa(12345)) == 12345


def test_atoi_stops_at_first_non_digit():
    assert atoi(itoa(42) + "abc99") == 42


@pytest.mark.parametrize("text", ["", "abc", "+-5", "- 5", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa(3.5)