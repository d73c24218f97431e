"""Registry of the websocket connections opened by notification clients."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track open websockets per user; one user may have several tabs open."""

    def __init__(self) -> None:
        self._connections: dict[str, set[WebSocket]] = {}

    async def connect(self, user_id: str, websocket: WebSocket) -> None:
        await websocket.accept()
        self._connections.setdefault(user_id, set()).add(websocket)
        logger.debug(
            "Notification websocket opened for %s (%s open)",
            user_id,
            len(self._connections[user_id]),
        )

    def disconnect(self, user_id: str, websocket: WebSocket) -> None:
        sockets = self._connections.get(user_id)
        if not sockets:
            return
        sockets.discard(websocket)
        if not sockets:
            del self._connections[user_id]
        logger.debug("Notification websocket closed for %s", user_id)

    def is_connected(self, user_id: str) -> bool:
        return user_id in self._connections

    def connected_users(self) -> list[str]:
        return sorted(self._connections)

    async def send_to_user(self, user_id: str, message: dict[str, Any]) -> int:
        """Send ``message`` to every socket of ``user_id``; return how many got it.

        Sockets that fail to receive are considered stale and dropped.
        """

        delivered = 0
        for websocket in list(self._connections.get(user_id, ())):
            try:
                await websocket.send_json(message)
            except Exception as exc:
                logger.debug("Dropping stale websocket for %s: %s", user_id, exc)
                self.disconnect(user_id, websocket)
                continue
            delivered += 1
        return delivered


notification_manager = NotificationConnectionManager()


__all__ = ["NotificationConnectionManager", "notification_manager"]
