import math

import pytest

from madfood.utilities.money import coerce_amount, format_currency, line_total, to_two_decimals


@pytest.mark.parametrize("value, expected", [
    (0.125, 0.13),
    (1.005, 1.0),   # binary value is just under 1.005
    (2.675, 2.67),
    (3.8, 3.8),
    (10, 10.0),
])
def test_to_two_decimals(value, expected):
    assert to_two_decimals(value) == expected


@pytest.mark.parametrize("value", [0.125, 1.005, 2.345, 19.999, 1234.5678])
def test_rounding_is_idempotent(value):
    once = to_two_decimals(value)
    assert to_two_decimals(once) == once


def test_non_finite_rounds_to_zero():
    assert to_two_decimals(math.inf) == 0.0
    assert to_two_decimals(math.nan) == 0.0


@pytest.mark.parametrize("raw, expected", [
    (None, 0.0),
    (True, 0.0),
    ("abc", 0.0),
    (-3, 0.0),
    (float("nan"), 0.0),
    (float("inf"), 0.0),
    ("2.5", 2.5),
    (4, 4.0),
])
def test_coerce_amount(raw, expected):
    assert coerce_amount(raw) == expected


def test_line_total_is_unrounded():
    assert line_total(3, 0.333) == pytest.approx(0.999)
    assert line_total(-1, 5) == 0.0
    assert to_two_decimals(line_total(3, 0.333)) == to_two_decimals(3 * 0.333)


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(0) == "$0.00"
    assert format_currency(3.799) == "$3.80"
