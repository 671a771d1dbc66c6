# tests/test_forms.py
import pytest

from oilmart.core.forms import (
    format_number,
    optional_float,
    optional_text,
    parse_float,
    parse_int,
)
from oilmart.services.product_service import calculate_total_price


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", 12.5),
        ("  7", 7.0),
        ("12abc", 12.0),
        (".5", 0.5),
        ("-3", -3.0),
        ("1e2", 100.0),
        ("", None),
        ("abc", None),
        (None, None),
    ],
)
def test_parse_float(raw, expected):
    assert parse_float(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("150", 150), ("12.9", 12), (" 8L", 8), ("", None), ("L8", None)],
)
def test_parse_int(raw, expected):
    assert parse_int(raw) == expected


def test_optional_helpers_treat_blank_as_unset():
    assert optional_float("") is None
    assert optional_float("   ") is None
    assert optional_float("499") == 499.0
    assert optional_text("") is None
    assert optional_text("https://cdn/img.png") == "https://cdn/img.png"


def test_format_number_drops_trailing_zero():
    assert format_number(50.0) == "50"
    assert format_number(12.5) == "12.5"
    assert format_number(150) == "150"


@pytest.mark.parametrize(
    "price, quantity, expected",
    [
        ("3250", "5", "16250.00"),
        ("199.99", "3", "599.97"),
        ("", "5", "0.00"),
        ("3250", "", "0.00"),
        ("abc", "5", "0.00"),
        ("120", "two", "0.00"),
    ],
)
def test_calculate_total_price(price, quantity, expected):
    assert calculate_total_price(price, quantity) == expected
