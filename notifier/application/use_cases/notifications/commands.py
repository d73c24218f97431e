"""Use cases mutating notifications on behalf of their owner."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from notifier.domain.entities import Notification
from notifier.infrastructure.notifications import notification_publisher
from notifier.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def _publish_unread_count(repository: NotificationRepository, user_id: str) -> None:
    if not notification_publisher.is_connected(user_id):
        return
    notification_publisher.dispatch_unread_count(user_id, repository.count_unread(user_id))


def mark_notification_as_read(
    session: Session, *, user_id: str, notification_id: str
) -> Notification:
    """Mark one of the user's notifications as read."""

    repository = NotificationRepository(session)
    notification = repository.mark_as_read(notification_id, user_id)
    if notification is None:
        raise ValueError("Notification not found")
    _publish_unread_count(repository, user_id)
    return notification


def mark_all_notifications_as_read(session: Session, *, user_id: str) -> int:
    """Mark every unread notification of the user as read."""

    repository = NotificationRepository(session)
    updated = repository.mark_all_as_read(user_id)
    _publish_unread_count(repository, user_id)
    return updated


def delete_notification(session: Session, *, user_id: str, notification_id: str) -> None:
    """Soft delete one of the user's notifications."""

    repository = NotificationRepository(session)
    if not repository.soft_delete(notification_id, user_id):
        raise ValueError("Notification not found")
    _publish_unread_count(repository, user_id)


def clean_old_notifications(session: Session, *, days_to_keep: int) -> int:
    """Soft delete notifications older than ``days_to_keep`` days."""

    if days_to_keep < 1:
        raise ValueError("days_to_keep must be a positive number of days")
    removed = NotificationRepository(session).clean_old_notifications(days_to_keep)
    logger.info("Soft deleted %s notifications older than %s days", removed, days_to_keep)
    return removed


__all__ = [
    "clean_old_notifications",
    "delete_notification",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
]
