"""Display formatters shared by notification templates."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

# Larger integers cannot be converted to text by default.
_MAX_DIGITS = 4000


def _to_decimal(value: Any) -> Decimal | None:
    """Return ``value`` as a finite decimal or ``None`` when it is not one."""

    if isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).replace(",", "").strip())
    except (InvalidOperation, ValueError):
        return None
    if not parsed.is_finite() or parsed.adjusted() >= _MAX_DIGITS:
        return None
    return parsed


def format_currency(value: Any) -> str:
    """Return ``value`` as US currency: ``$1,200`` or ``$1,200.50``.

    Values that are not finite numbers, or too large to format, are echoed.
    """

    amount = _to_decimal(value)
    if amount is None:
        return str(value)

    try:
        sign = "-" if amount < 0 else ""
        amount = abs(amount)
        if amount == amount.to_integral_value():
            return f"{sign}${int(amount):,}"
        return f"{sign}${amount:,.2f}"
    except (ArithmeticError, ValueError):
        return str(value)


def format_day_count(value: Any) -> str:
    """Return ``value`` as ``1 day`` / ``3 days``."""

    count = _to_decimal(value)
    if count is None:
        return str(value)
    try:
        label = "day" if count == 1 else "days"
        rendered = int(count) if count == count.to_integral_value() else count
        return f"{rendered} {label}"
    except (ArithmeticError, ValueError):
        return str(value)


def truncate(text: str, limit: int) -> str:
    """Return at most ``limit`` characters of ``text``."""

    return text[:limit]


__all__ = ["format_currency", "format_day_count", "truncate"]
