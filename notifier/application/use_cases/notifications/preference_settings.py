"""Use cases letting users read and change their notification preferences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from notifier.domain.entities import NotificationPreference, normalize_channel
from notifier.infrastructure.repositories import NotificationPreferenceRepository


@dataclass(frozen=True)
class PreferenceChange:
    category: str
    enabled: bool
    channel: str | None = None


def list_preferences(session: Session, *, user_id: str) -> Sequence[NotificationPreference]:
    return NotificationPreferenceRepository(session).list_for_user(user_id)


def update_preferences(
    session: Session, *, user_id: str, changes: Iterable[PreferenceChange]
) -> Sequence[NotificationPreference]:
    """Upsert ``changes`` and return the user's full preference list."""

    repository = NotificationPreferenceRepository(session)
    validated: list[PreferenceChange] = []
    for change in changes:
        category = change.category.strip()
        if not category:
            raise ValueError("Preference category is required")
        channel = None
        if change.channel is not None:
            channel = normalize_channel(change.channel)
            if channel is None:
                raise ValueError(f"Unsupported notification channel: {change.channel}")
        validated.append(PreferenceChange(category=category, enabled=change.enabled, channel=channel))

    for change in validated:
        repository.upsert(user_id, change.category, change.channel, change.enabled)
    return repository.list_for_user(user_id)


__all__ = ["PreferenceChange", "list_preferences", "update_preferences"]
