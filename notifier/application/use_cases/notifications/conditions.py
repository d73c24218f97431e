"""Evaluation of rule threshold conditions against event payloads."""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Mapping

from notifier.domain.entities import RuleConditions

logger = logging.getLogger(__name__)

# (condition attribute, payload field, comparison payload vs threshold)
_THRESHOLD_CHECKS: tuple[tuple[str, str, Callable[[float, float], bool]], ...] = (
    ("amount_threshold", "amount", operator.ge),
    ("days_before_threshold", "daysUntilDue", operator.le),
    ("days_after_threshold", "daysOverdue", operator.ge),
    ("stock_level_threshold", "stockLevel", operator.le),
    ("percentage_threshold", "percentage", operator.ge),
)


def evaluate_conditions(
    event_data: Mapping[str, Any] | None, conditions: RuleConditions | None
) -> bool:
    """Return whether ``event_data`` satisfies ``conditions``.

    Only thresholds configured on the rule *and* carried by the payload are
    compared; when none qualify the rule matches. ``requires_all`` combines the
    comparisons with AND, otherwise with OR. Malformed values never propagate:
    they are logged and the rule is treated as non-matching.
    """

    if conditions is None:
        return True

    data = event_data or {}
    try:
        results: list[bool] = []
        for attribute, field, compare in _THRESHOLD_CHECKS:
            threshold = getattr(conditions, attribute)
            value = data.get(field)
            if threshold is None or value is None or value == "":
                continue
            results.append(compare(float(value), float(threshold)))
    except Exception as exc:
        logger.error("Failed to evaluate notification rule conditions: %s", exc)
        return False

    if not results:
        return True
    if conditions.requires_all:
        return all(results)
    return any(results)


__all__ = ["evaluate_conditions"]
