import pytest

from wireframe.numbers import atoi_hex, detect_base


@pytest.mark.parametrize("text", ["0x1A", "0X1a", "0xff", "0x"])
def test_detect_base_hex_prefix(text):
    assert detect_base(text) == 16


@pytest.mark.parametrize("text", ["42", "", "0", "x0", "-0x10", "10,0xFF0000"])
def test_detect_base_defaults_to_decimal(text):
    assert detect_base(text) == 10


def test_atoi_decimal():
    assert atoi_hex("42", 10) == 42


def test_atoi_negative():
    assert atoi_hex("-17", 10) == -17


def test_atoi_skips_whitespace_and_plus():
    assert atoi_hex(" \t +5", 10) == 5


def test_atoi_stops_at_colour_suffix():
    assert atoi_hex("10,0xFF0000", 10) == 10


def test_atoi_stops_at_letters():
    assert atoi_hex("12abc", 10) == 12


def test_atoi_empty_is_zero():
    assert atoi_hex("", 10) == 0


def test_hex_prefix_is_not_skipped():
    assert atoi_hex("0xff", 16) == 0


def test_hex_uppercase_not_accepted():
    assert atoi_hex("FF", 16) == 0


@pytest.mark.parametrize("value", [0, 1, 9, 10, 255, 1000, 123456])
def test_decimal_round_trip(value):
    assert atoi_hex(str(value), 10) == value
    assert atoi_hex("-" + str(value), 10) == -value


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 4096, 0xABCDEF])
def test_hex_round_trip(value):
    assert atoi_hex(format(value, "x"), 16) == value