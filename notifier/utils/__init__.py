"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    format_long_date,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    parse_date_value,
)
from .formatting import format_currency, format_day_count, truncate

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_currency",
    "format_day_count",
    "format_long_date",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "parse_date_value",
    "truncate",
]
