"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from notifier.domain.entities import Notification

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notifications and schedule their delivery.

    Dispatch runs on worker threads, so the publisher keeps a reference to the
    application's event loop (bound at startup) and hands the websocket sends
    over to it.
    """

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._loop: asyncio.AbstractEventLoop | None = None

    def bind_loop(self, loop: asyncio.AbstractEventLoop | None) -> None:
        """Remember the loop serving websocket connections (``None`` unbinds)."""

        self._loop = loop

    def is_connected(self, user_id: str) -> bool:
        return self._manager.is_connected(user_id)

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its user."""

        message = {"type": "notification", "data": serialize_notification(notification)}
        self._schedule_send(notification.user_id, message)

    def dispatch_unread_count(self, user_id: str, unread_count: int) -> None:
        """Schedule an unread counter update for ``user_id``."""

        message = {"type": "unread-count", "data": {"unread_count": unread_count}}
        self._schedule_send(user_id, message)

    def _schedule_send(self, user_id: str, message: dict[str, Any]) -> None:
        if not self._manager.is_connected(user_id):
            return

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is not None:
            running.create_task(self._manager.send_to_user(user_id, message))
            return

        loop = self._loop
        if loop is not None and loop.is_running():
            asyncio.run_coroutine_threadsafe(
                self._manager.send_to_user(user_id, message), loop
            )
            return

        try:
            from_thread.run(self._manager.send_to_user, user_id, message)
        except RuntimeError:
            logger.debug("No event loop available to push realtime update to %s", user_id)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "category": notification.category,
        "type": notification.type,
        "title": notification.title,
        "message": notification.message,
        "short_message": notification.short_message,
        "priority": notification.priority,
        "read": notification.read,
        "action_url": notification.action_url,
        "related_entity_type": notification.related_entity_type,
        "related_entity_id": notification.related_entity_id,
        "related_entity_name": notification.related_entity_name,
        "created_at": notification.created_at.isoformat()
        if notification.created_at
        else None,
    }


notification_publisher = NotificationPublisher(notification_manager)


__all__ = [
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
