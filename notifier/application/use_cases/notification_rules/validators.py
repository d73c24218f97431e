"""Validation helpers shared by notification rule use cases."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from notifier.domain.entities import RuleConditions, normalize_channel
from notifier.domain.entities.notification import (
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
)

from ..notifications.recipients import registered_roles

ALLOWED_PRIORITIES = (PRIORITY_HIGH, PRIORITY_MEDIUM, PRIORITY_LOW)


def normalize_event_type(value: str) -> str:
    event_type = (value or "").strip()
    if not event_type:
        raise ValueError("Event type is required")
    return event_type


def normalize_category(value: str) -> str:
    category = (value or "").strip().lower()
    if not category:
        raise ValueError("Category is required")
    return category


def validate_priority(value: str) -> str:
    priority = (value or "").strip().lower()
    if priority not in ALLOWED_PRIORITIES:
        raise ValueError(
            f"Priority must be one of: {', '.join(ALLOWED_PRIORITIES)}"
        )
    return priority


def validate_roles(roles: Iterable[str]) -> list[str]:
    """Return the deduplicated role tokens, rejecting unknown ones."""

    known = set(registered_roles())
    normalized: list[str] = []
    for role in roles:
        token = (role or "").strip().lower()
        if not token:
            continue
        if token not in known:
            raise ValueError(f"Unknown recipient role: {role}")
        if token not in normalized:
            normalized.append(token)
    if not normalized:
        raise ValueError("At least one recipient role is required")
    return normalized


def validate_channels(channels: Iterable[str]) -> list[str]:
    normalized: list[str] = []
    for raw in channels:
        channel = normalize_channel(raw)
        if channel is None:
            raise ValueError(f"Unsupported notification channel: {raw}")
        if channel not in normalized:
            normalized.append(channel)
    if not normalized:
        raise ValueError("At least one channel is required")
    return normalized


def build_conditions(raw: Mapping[str, Any] | None) -> RuleConditions | None:
    if not raw:
        return None
    conditions = RuleConditions.from_mapping(raw)
    if conditions is None:
        return None
    for attribute in (
        "amount_threshold",
        "days_before_threshold",
        "days_after_threshold",
        "stock_level_threshold",
        "percentage_threshold",
    ):
        value = getattr(conditions, attribute)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Condition {attribute} must be a number")
    return conditions


__all__ = [
    "ALLOWED_PRIORITIES",
    "build_conditions",
    "normalize_category",
    "normalize_event_type",
    "validate_channels",
    "validate_priority",
    "validate_roles",
]
