"""Use case for auditing delivery attempts."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import (
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_SENT,
    DELIVERY_STATUS_SKIPPED,
    SUPPORTED_CHANNELS,
    DeliveryLog,
)
from notifier.infrastructure.repositories import DeliveryLogRepository

_STATUSES = (DELIVERY_STATUS_SENT, DELIVERY_STATUS_FAILED, DELIVERY_STATUS_SKIPPED)


def list_delivery_logs(
    session: Session,
    *,
    notification_id: str | None = None,
    user_id: str | None = None,
    channel: str | None = None,
    status: str | None = None,
    skip: int = 0,
    limit: int | None = 100,
) -> Sequence[DeliveryLog]:
    """Return delivery logs, newest first, narrowed by the given filters."""

    if channel is not None and channel not in SUPPORTED_CHANNELS:
        raise ValueError(f"Unsupported notification channel: {channel}")
    if status is not None and status not in _STATUSES:
        raise ValueError(f"Unsupported delivery status: {status}")
    return DeliveryLogRepository(session).list(
        notification_id=notification_id,
        user_id=user_id,
        channel=channel,
        status=status,
        skip=skip,
        limit=limit,
    )


__all__ = ["list_delivery_logs"]
