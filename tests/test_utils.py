"""Tests for display formatting helpers."""

from __future__ import annotations

import math
from datetime import date, datetime

import pytest

from notifier.utils import format_currency, format_day_count, format_long_date


@pytest.mark.parametrize(
    "value, expected",
    [
        (1200, "$1,200"),
        ("1200.5", "$1,200.50"),
        ("15,000", "$15,000"),
        (-42, "-$42"),
        ("n/a", "n/a"),
        (math.inf, "inf"),
        ("1e5000000", "1e5000000"),
        ("sNaN", "sNaN"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_day_count():
    assert format_day_count(1) == "1 day"
    assert format_day_count("3") == "3 days"
    assert format_day_count(1.5) == "1.5 days"


def test_format_day_count_echoes_values_that_are_not_finite():
    assert format_day_count(math.inf) == "inf"
    assert format_day_count("sNaN") == "sNaN"
    assert format_day_count("1e5000000") == "1e5000000"


def test_format_long_date():
    assert format_long_date("2024-01-15") == "January 15, 2024"
    assert format_long_date("2024-03-01T10:00:00Z") == "March 1, 2024"
    assert format_long_date(date(2023, 12, 5)) == "December 5, 2023"
    assert format_long_date(datetime(2023, 7, 4, 9, 30)) == "July 4, 2023"
    assert format_long_date("soon") == "soon"
