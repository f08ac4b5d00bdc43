import pytest

from throttler.util.conversion import (
    MAX_U64,
    byte_converter,
    parse_byte_quantity,
    unit_factor,
)


@pytest.mark.parametrize(
    "unit, factor",
    [
        ("k", 1024),
        ("K", 1024),
        ("m", 1024**2),
        ("M", 1024**2),
        ("g", 1024**3),
        ("G", 1024**3),
        ("t", 1024**4),
        ("T", 1024**4),
    ],
)
def test_suffix_multiplies_by_binary_factor(unit, factor):
    assert unit_factor(unit) == factor
    assert parse_byte_quantity(f"15{unit}") == 15 * factor


def test_plain_digits_are_bytes():
    assert parse_byte_quantity("1500") == 1500
    assert parse_byte_quantity("0") == 0


def test_unknown_unit_counts_as_bytes():
    assert unit_factor("x") == 1
    assert unit_factor(None) == 1
    assert parse_byte_quantity("10B") == 10
    assert parse_byte_quantity("10 G") == 10


def test_trailing_text_after_unit_is_ignored():
    assert parse_byte_quantity("2GB") == 2 * 1024**3
    assert parse_byte_quantity("  3k") == 3 * 1024


@pytest.mark.parametrize("value", ["", "G", "abc", "-5", " ", "k10"])
def test_no_leading_digits_fails(value):
    with pytest.raises(ValueError):
        parse_byte_quantity(value)


def test_overflow_is_rejected():
    assert parse_byte_quantity(str(MAX_U64)) == MAX_U64
    with pytest.raises(ValueError):
        parse_byte_quantity(str(MAX_U64 + 1))
    with pytest.raises(ValueError):
        parse_byte_quantity("18000000000000000000T")


def test_byte_converter():
    assert byte_converter(512) == "512.00 B"
    assert byte_converter(10 * 1024**3) == "10.00 GiB"
    assert byte_converter(3 * 1024**2, unit="Ki") == "3072.00 KiB"
