"""Persistence helpers for delivery audit records."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import DeliveryLog
from notifier.infrastructure.models import DeliveryLogModel
from notifier.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class DeliveryLogRepository:
    """Append and query :class:`DeliveryLog` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, log: DeliveryLog) -> DeliveryLog:
        model = DeliveryLogModel(
            notification_id=log.notification_id,
            user_id=log.user_id,
            channel=log.channel,
            status=log.status,
            provider_response=log.provider_response,
            error_message=log.error_message,
            created_at=ensure_app_naive_datetime(log.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list(
        self,
        *,
        notification_id: str | None = None,
        user_id: str | None = None,
        channel: str | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> Sequence[DeliveryLog]:
        query = self.session.query(DeliveryLogModel)
        if notification_id:
            query = query.filter(DeliveryLogModel.notification_id == notification_id)
        if user_id:
            query = query.filter(DeliveryLogModel.user_id == user_id)
        if channel:
            query = query.filter(DeliveryLogModel.channel == channel)
        if status:
            query = query.filter(DeliveryLogModel.status == status)
        query = query.order_by(
            DeliveryLogModel.created_at.desc(), DeliveryLogModel.id.desc()
        ).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: DeliveryLogModel) -> DeliveryLog:
        return DeliveryLog(
            id=model.id,
            notification_id=model.notification_id,
            user_id=model.user_id,
            channel=model.channel,
            status=model.status,
            provider_response=model.provider_response,
            error_message=model.error_message,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["DeliveryLogRepository"]
