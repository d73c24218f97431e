"""Read use cases over the authenticated user's notifications."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notifier.domain.entities import (
    Notification,
    NotificationFilters,
    NotificationPage,
    NotificationStats,
)
from notifier.infrastructure.repositories import NotificationRepository

MAX_PAGE_SIZE = 100


def list_notifications(
    session: Session,
    *,
    user_id: str,
    filters: NotificationFilters | None = None,
    page: int = 1,
    limit: int = 20,
) -> NotificationPage:
    """Return a page of the user's notifications, newest first."""

    if page < 1:
        raise ValueError("Page must be greater than or equal to 1")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValueError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")
    if (
        filters is not None
        and filters.start_date is not None
        and filters.end_date is not None
        and filters.start_date > filters.end_date
    ):
        raise ValueError("start_date must not be later than end_date")
    return NotificationRepository(session).list_for_user(
        user_id, filters, page=page, limit=limit
    )


def get_notification(session: Session, *, user_id: str, notification_id: str) -> Notification:
    """Return one of the user's notifications or raise an error."""

    notification = NotificationRepository(session).get_for_user(notification_id, user_id)
    if notification is None:
        raise ValueError("Notification not found")
    return notification


def count_unread(session: Session, *, user_id: str) -> int:
    return NotificationRepository(session).count_unread(user_id)


def get_notification_stats(session: Session, *, user_id: str) -> NotificationStats:
    return NotificationRepository(session).stats(user_id)


__all__ = [
    "MAX_PAGE_SIZE",
    "count_unread",
    "get_notification",
    "get_notification_stats",
    "list_notifications",
]
