"""Use case for creating notification rules."""

from collections.abc import Mapping, Sequence
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


def create_rule(
    session: Session,
    *,
    event_type: str,
    category: str,
    priority: str,
    recipient_roles: Sequence[str],
    channels: Sequence[str],
    conditions: Mapping[str, Any] | None = None,
    enabled: bool = True,
    description: str | None = None,
) -> NotificationRule:
    """Create a new notification rule."""

    entity = NotificationRule(
        id=None,
        event_type=normalize_event_type(event_type),
        category=normalize_category(category),
        priority=validate_priority(priority),
        recipient_roles=validate_roles(recipient_roles),
        channels=validate_channels(channels),
        conditions=build_conditions(conditions),
        enabled=enabled,
        description=description,
    )
    return NotificationRuleRepository(session).create(entity)


__all__ = ["create_rule"]
