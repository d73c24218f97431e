"""API tests for notification rule management and delivery log auditing."""

from __future__ import annotations

import pytest

from notifier.domain.entities import DeliveryLog
from notifier.infrastructure.repositories import DeliveryLogRepository


@pytest.fixture()
def admin_headers(make_user, auth_headers):
    make_user("admin", roles=("Admin",))
    make_user("tech", roles=("Field Technician",))
    return auth_headers("admin")


def test_rule_endpoints_require_admin(client, admin_headers, auth_headers):
    assert client.get("/notification-rules", headers=auth_headers("tech")).status_code == 403
    assert client.get("/delivery-logs", headers=auth_headers("tech")).status_code == 403


def test_rule_lifecycle(client, admin_headers):
    created = client.post(
        "/notification-rules",
        json={
            "event_type": "invoice_overdue",
            "category": "invoice",
            "priority": "high",
            "recipient_roles": ["manager", "executive"],
            "channels": ["email", "push"],
            "conditions": {"amountThreshold": 5000, "requiresAll": False},
        },
        headers=admin_headers,
    )
    assert created.status_code == 201
    rule = created.json()
    assert rule["channels"] == ["email", "in_app"]
    assert rule["conditions"] == {"requiresAll": False, "amountThreshold": 5000}

    listed = client.get(
        "/notification-rules", params={"event_type": "invoice_overdue"}, headers=admin_headers
    )
    assert [item["id"] for item in listed.json()] == [rule["id"]]

    patched = client.patch(
        f"/notification-rules/{rule['id']}",
        json={"enabled": False, "conditions": None},
        headers=admin_headers,
    )
    assert patched.status_code == 200
    assert patched.json()["enabled"] is False
    assert patched.json()["conditions"] is None
    assert patched.json()["channels"] == ["email", "in_app"]

    deleted = client.delete(f"/notification-rules/{rule['id']}", headers=admin_headers)
    assert deleted.status_code == 204
    missing = client.get(f"/notification-rules/{rule['id']}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Notification rule not found"


def test_invalid_rule_is_rejected(client, admin_headers):
    response = client.post(
        "/notification-rules",
        json={
            "event_type": "job_overdue",
            "category": "job",
            "recipient_roles": ["technician"],
            "channels": ["sms"],
        },
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert "Unsupported notification channel" in response.json()["detail"]


def test_delivery_logs_are_filterable(client, admin_headers, session):
    repository = DeliveryLogRepository(session)
    repository.create(
        DeliveryLog(id=None, notification_id="n1", user_id="tech", channel="in_app", status="sent")
    )
    repository.create(
        DeliveryLog(
            id=None,
            notification_id="n1",
            user_id="tech",
            channel="email",
            status="skipped",
            error_message="Email provider not configured",
        )
    )

    everything = client.get("/delivery-logs", headers=admin_headers)
    skipped = client.get("/delivery-logs", params={"status": "skipped"}, headers=admin_headers)
    bad = client.get("/delivery-logs", params={"status": "lost"}, headers=admin_headers)

    assert len(everything.json()) == 2
    assert [(log["channel"], log["error_message"]) for log in skipped.json()] == [
        ("email", "Email provider not configured")
    ]
    assert bad.status_code == 400
