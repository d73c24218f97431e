"""Use case for listing notification rules."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import NotificationRule
from notifier.infrastructure.repositories import NotificationRuleRepository


def list_rules(
    session: Session,
    *,
    event_type: str | None = None,
    category: str | None = None,
    enabled: bool | None = None,
    skip: int = 0,
    limit: int | None = 100,
) -> Sequence[NotificationRule]:
    """Return notification rules ordered by category and event type."""

    return NotificationRuleRepository(session).list(
        event_type=event_type,
        category=category,
        enabled=enabled,
        skip=skip,
        limit=limit,
    )


__all__ = ["list_rules"]
