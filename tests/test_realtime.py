"""Tests for the websocket connection registry and the realtime publisher."""

from __future__ import annotations

import asyncio

import pytest

from notifier.domain.entities import Notification
from notifier.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
    serialize_notification,
)


class FakeWebSocket:
    def __init__(self, *, broken: bool = False):
        self.broken = broken
        self.accepted = False
        self.sent: list[dict] = []

    async def accept(self):
        self.accepted = True

    async def send_json(self, message):
        if self.broken:
            raise RuntimeError("socket closed")
        self.sent.append(message)


def _notification(user_id="u1") -> Notification:
    return Notification(
        id="n1",
        user_id=user_id,
        category="job",
        type="job_overdue",
        title="Job Overdue",
        message="Job is overdue",
    )


@pytest.mark.anyio
async def test_manager_fans_out_and_drops_stale_sockets():
    manager = NotificationConnectionManager()
    healthy, stale = FakeWebSocket(), FakeWebSocket(broken=True)
    await manager.connect("u1", healthy)
    await manager.connect("u1", stale)

    delivered = await manager.send_to_user("u1", {"type": "pong"})

    assert healthy.accepted is True
    assert delivered == 1
    assert healthy.sent == [{"type": "pong"}]
    assert manager.connected_users() == ["u1"]

    manager.disconnect("u1", healthy)
    assert manager.is_connected("u1") is False
    assert await manager.send_to_user("u1", {"type": "pong"}) == 0


@pytest.mark.anyio
async def test_publisher_pushes_only_to_connected_users():
    manager = NotificationConnectionManager()
    publisher = NotificationPublisher(manager)
    socket = FakeWebSocket()
    await manager.connect("u1", socket)

    publisher.dispatch(_notification("u1"))
    publisher.dispatch(_notification("u2"))
    publisher.dispatch_unread_count("u1", 3)
    await asyncio.sleep(0)

    assert socket.sent == [
        {"type": "notification", "data": serialize_notification(_notification("u1"))},
        {"type": "unread-count", "data": {"unread_count": 3}},
    ]


def test_publisher_without_loop_is_a_no_op():
    manager = NotificationConnectionManager()
    publisher = NotificationPublisher(manager)

    publisher.dispatch(_notification())

    assert publisher.is_connected("u1") is False


def test_serialized_notification_has_no_timestamp_when_unsaved():
    payload = serialize_notification(_notification())

    assert payload["id"] == "n1"
    assert payload["created_at"] is None
    assert payload["read"] is False


@pytest.fixture
def anyio_backend():
    return "asyncio"
