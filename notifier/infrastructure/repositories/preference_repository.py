"""Persistence helpers for notification preferences."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import NotificationPreference
from notifier.infrastructure.models import NotificationPreferenceModel
from notifier.utils import ensure_app_timezone


class NotificationPreferenceRepository:
    """Read and upsert per-user notification preferences."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_preference(
        self, user_id: str, category: str, channel: str | None
    ) -> bool | None:
        """Return the flag stored for exactly ``(user, category, channel)``."""

        query = (
            self.session.query(NotificationPreferenceModel.enabled)
            .filter(NotificationPreferenceModel.user_id == user_id)
            .filter(NotificationPreferenceModel.category == category)
        )
        if channel is None:
            query = query.filter(NotificationPreferenceModel.channel.is_(None))
        else:
            query = query.filter(NotificationPreferenceModel.channel == channel)
        row = query.first()
        return bool(row[0]) if row is not None else None

    def list_for_user(self, user_id: str) -> Sequence[NotificationPreference]:
        query = (
            self.session.query(NotificationPreferenceModel)
            .filter(NotificationPreferenceModel.user_id == user_id)
            .order_by(
                NotificationPreferenceModel.category.asc(),
                NotificationPreferenceModel.channel.asc(),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def upsert(
        self, user_id: str, category: str, channel: str | None, enabled: bool
    ) -> NotificationPreference:
        query = (
            self.session.query(NotificationPreferenceModel)
            .filter(NotificationPreferenceModel.user_id == user_id)
            .filter(NotificationPreferenceModel.category == category)
        )
        if channel is None:
            query = query.filter(NotificationPreferenceModel.channel.is_(None))
        else:
            query = query.filter(NotificationPreferenceModel.channel == channel)
        model = query.first()
        if model is None:
            model = NotificationPreferenceModel(
                user_id=user_id, category=category, channel=channel
            )
        model.enabled = enabled
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NotificationPreferenceModel) -> NotificationPreference:
        return NotificationPreference(
            id=model.id,
            user_id=model.user_id,
            category=model.category,
            channel=model.channel,
            enabled=bool(model.enabled),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationPreferenceRepository"]
