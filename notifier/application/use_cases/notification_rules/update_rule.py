"""Use case for updating notification rules."""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from notifier.domain.entities import NotificationRule
from notifier.infrastructure.repositories import NotificationRuleRepository

from .validators import (
    build_conditions,
    normalize_category,
    normalize_event_type,
    validate_channels,
    validate_priority,
    validate_roles,
)

_UNSET: Any = object()


def update_rule(
    session: Session,
    rule_id: str,
    *,
    event_type: str | None = None,
    category: str | None = None,
    priority: str | None = None,
    recipient_roles: Sequence[str] | None = None,
    channels: Sequence[str] | None = None,
    conditions: Mapping[str, Any] | None = _UNSET,
    enabled: bool | None = None,
    description: str | None = _UNSET,
) -> NotificationRule:
    """Apply a partial update to the rule identified by ``rule_id``.

    ``conditions`` and ``description`` accept ``None`` to clear the stored value.
    """

    repository = NotificationRuleRepository(session)
    current = repository.get(rule_id)
    if current is None:
        raise ValueError("Notification rule not found")

    changes: dict[str, Any] = {}
    if event_type is not None:
        changes["event_type"] = normalize_event_type(event_type)
    if category is not None:
        changes["category"] = normalize_category(category)
    if priority is not None:
        changes["priority"] = validate_priority(priority)
    if recipient_roles is not None:
        changes["recipient_roles"] = validate_roles(recipient_roles)
    if channels is not None:
        changes["channels"] = validate_channels(channels)
    if conditions is not _UNSET:
        changes["conditions"] = build_conditions(conditions)
    if enabled is not None:
        changes["enabled"] = enabled
    if description is not _UNSET:
        changes["description"] = description

    if not changes:
        return current
    return repository.update(replace(current, **changes))


__all__ = ["update_rule"]
