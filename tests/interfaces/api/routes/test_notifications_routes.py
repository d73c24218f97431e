"""API tests for the user notification endpoints."""

from __future__ import annotations

import pytest

from notifier.application.use_cases.notifications import NotificationDispatcher
from notifier.domain.entities import Notification
from notifier.infrastructure import database
from notifier.infrastructure.repositories import NotificationRepository
from notifier.infrastructure.security import create_access_token
from notifier.interfaces.api.routes.notifications import get_notification_dispatcher


@pytest.fixture()
def people(make_user):
    make_user("admin", roles=("Executive",))
    make_user("tech", roles=("Field Technician",))
    make_user("gone", is_active=False)


@pytest.fixture()
def stored(session, people):
    repository = NotificationRepository(session)

    def _store(user_id="tech", **fields):
        return repository.create(
            Notification(
                id=None,
                user_id=user_id,
                category=fields.pop("category", "job"),
                type="job_overdue",
                title=fields.pop("title", "Job Overdue"),
                message="Job is overdue",
                priority=fields.pop("priority", "high"),
                **fields,
            )
        )

    return _store


def test_requests_without_token_are_rejected(client):
    response = client.get("/notifications")

    assert response.status_code == 401


def test_inactive_users_are_rejected(client, people, auth_headers):
    response = client.get("/notifications", headers=auth_headers("gone"))

    assert response.status_code == 400
    assert response.json()["detail"] == "Inactive user"


def test_list_and_count(client, stored, auth_headers):
    stored(title="first")
    stored(title="second", category="invoice")
    stored("admin")

    response = client.get(
        "/notifications", params={"limit": 1}, headers=auth_headers("tech")
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert body["total_pages"] == 2
    assert body["has_more"] is True
    assert len(body["notifications"]) == 1

    filtered = client.get(
        "/notifications", params={"category": "invoice"}, headers=auth_headers("tech")
    ).json()
    assert [item["title"] for item in filtered["notifications"]] == ["second"]

    count = client.get("/notifications/unread-count", headers=auth_headers("tech"))
    assert count.json() == {"unread_count": 2}


def test_invalid_page_size_is_rejected(client, people, auth_headers):
    response = client.get(
        "/notifications", params={"limit": 500}, headers=auth_headers("tech")
    )

    assert response.status_code == 422


def test_read_mark_and_delete(client, stored, auth_headers):
    notification = stored()
    headers = auth_headers("tech")

    assert client.get(f"/notifications/{notification.id}", headers=headers).status_code == 200
    assert (
        client.get(f"/notifications/{notification.id}", headers=auth_headers("admin")).status_code
        == 404
    )

    marked = client.patch(f"/notifications/{notification.id}/read", headers=headers)
    assert marked.status_code == 200
    assert marked.json()["read"] is True

    deleted = client.delete(f"/notifications/{notification.id}", headers=headers)
    assert deleted.status_code == 204
    assert client.get(f"/notifications/{notification.id}", headers=headers).status_code == 404


def test_mark_all_and_stats(client, stored, auth_headers):
    stored()
    stored(category="invoice", priority="low")
    headers = auth_headers("tech")

    stats = client.get("/notifications/stats", headers=headers).json()
    assert stats["total_notifications"] == 2
    assert stats["by_category"] == {"job": 1, "invoice": 1}

    response = client.patch("/notifications/read-all", headers=headers)
    assert response.json() == {"updated": 2}
    assert client.get("/notifications/unread-count", headers=headers).json() == {
        "unread_count": 0
    }


def test_preferences_round_trip(client, people, auth_headers):
    headers = auth_headers("tech")

    response = client.put(
        "/notifications/preferences",
        json={"preferences": [{"category": "job", "channel": "email", "enabled": False}]},
        headers=headers,
    )
    assert response.status_code == 200
    assert [(p["category"], p["channel"], p["enabled"]) for p in response.json()] == [
        ("job", "email", False)
    ]

    invalid = client.put(
        "/notifications/preferences",
        json={"preferences": [{"category": "job", "channel": "fax", "enabled": False}]},
        headers=headers,
    )
    assert invalid.status_code == 400

    listed = client.get("/notifications/preferences", headers=headers).json()
    assert len(listed) == 1


def test_trigger_requires_admin(client, people, auth_headers):
    response = client.post(
        "/notifications/trigger",
        json={"type": "job_overdue", "data": {}},
        headers=auth_headers("tech"),
    )

    assert response.status_code == 403


def test_trigger_dispatches_after_response(
    client, people, make_rule, auth_headers, session, test_settings, email_sender
):
    make_rule("job_overdue", ["technician"])
    dispatcher = NotificationDispatcher(
        database.SessionLocal,
        email_sender=email_sender,
        publisher=None,
        settings=test_settings,
    )
    client.app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher
    try:
        response = client.post(
            "/notifications/trigger",
            json={
                "type": "job_overdue",
                "data": {"assignedTechnicianId": "tech", "entityName": "Boiler"},
            },
            headers=auth_headers("admin"),
        )
    finally:
        client.app.dependency_overrides.clear()
        dispatcher.shutdown()

    assert response.status_code == 202
    assert response.json() == {"accepted": True, "type": "job_overdue"}
    (notification,) = NotificationRepository(session).list_for_user("tech").notifications
    assert notification.title == "Job Overdue"
    assert notification.created_by == "admin"


def test_websocket_init_ping_and_mark_read(client, stored):
    notification = stored()
    token = create_access_token({"sub": "tech"})

    with client.websocket_connect(f"/notifications/ws?token={token}") as websocket:
        init = websocket.receive_json()
        assert init["type"] == "init"
        assert init["data"]["unread_count"] == 1
        assert [item["id"] for item in init["data"]["notifications"]] == [notification.id]

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        websocket.send_json({"type": "mark-read", "ids": [notification.id]})
        assert websocket.receive_json() == {
            "type": "unread-count",
            "data": {"unread_count": 0},
        }
