"""End-to-end tests of the notification dispatch pipeline on SQLite."""

from __future__ import annotations

import logging
import math

import pytest

from notifier.application.use_cases.notifications import (
    DispatchState,
    NotificationDispatcher,
)
from notifier.application.use_cases.notifications import dispatcher as dispatcher_module
from notifier.domain.entities import NotificationEvent, RuleConditions
from notifier.infrastructure import database
from notifier.infrastructure.directory import UserDirectory
from notifier.infrastructure.email import EmailResult
from notifier.infrastructure.repositories import (
    DeliveryLogRepository,
    NotificationPreferenceRepository,
    NotificationRepository,
)


@pytest.fixture()
def make_dispatcher(test_settings):
    created: list[NotificationDispatcher] = []

    def _make(email_sender=None, **options) -> NotificationDispatcher:
        dispatcher = NotificationDispatcher(
            database.SessionLocal,
            email_sender=email_sender,
            publisher=None,
            settings=test_settings,
            **options,
        )
        created.append(dispatcher)
        return dispatcher

    yield _make
    for dispatcher in created:
        dispatcher.shutdown()


@pytest.fixture()
def job_team(make_user, make_employee):
    make_user("u1", email="tech@example.com", full_name="Tina Tech", roles=("Field Technician",))
    make_user("u2", email="boss@example.com", full_name="Sam Super", roles=("Manager",))
    make_user("u3", email="other@example.com", full_name="Other Manager", roles=("Manager",))
    make_employee("u1", reports_to="u2")


def _overdue_event(**extra) -> NotificationEvent:
    payload = {
        "assignedTechnicianId": "u1",
        "entityName": "Roof repair",
        "entityType": "Job",
        "entityId": "job-9",
        "clientName": "Acme",
        "daysOverdue": 2,
    }
    payload.update(extra)
    return NotificationEvent.from_payload("job_overdue", payload)


def _logs(session, **filters):
    return DeliveryLogRepository(session).list(**filters)


def test_event_without_rules_creates_nothing(session, make_dispatcher, email_sender):
    report = make_dispatcher(email_sender).run(
        NotificationEvent.from_payload("job_overdue", {"assignedTechnicianId": "u1"})
    )

    assert report.state is DispatchState.LOGGED
    assert report.matched_rule_ids == []
    assert report.error is None
    assert NotificationRepository(session).list_for_user("u1").total == 0
    assert _logs(session) == []
    assert email_sender.calls == []


def test_job_overdue_reaches_technician_and_direct_supervisor(
    session, job_team, make_rule, make_dispatcher, email_sender
):
    make_rule(
        "job_overdue", ["assigned_technician", "supervisor"], channels=["in_app", "email"]
    )

    report = make_dispatcher(email_sender).run(_overdue_event(triggeredBy="admin-1"))

    assert report.error is None
    assert sorted(report.recipient_ids) == ["u1", "u2"]
    assert report.notifications_created == 2

    repository = NotificationRepository(session)
    for user_id in ("u1", "u2"):
        page = repository.list_for_user(user_id)
        assert page.total == 1
        notification = page.notifications[0]
        assert notification.title == "Job Overdue"
        assert notification.category == "job"
        assert notification.priority == "high"
        assert notification.read is False
        assert notification.action_url == "/dashboard/jobs/job-9"
        assert notification.related_entity_id == "job-9"
        assert notification.created_by == "admin-1"
        assert notification.message.startswith(
            'Job "Roof repair" for client Acme is now 2 days overdue.'
        )
    assert repository.list_for_user("u3").total == 0

    assert sorted(to for to, _, _ in email_sender.calls) == [
        "boss@example.com",
        "tech@example.com",
    ]
    assert all(subject == "Job Overdue" for _, subject, _ in email_sender.calls)
    assert "https://app.example.com/dashboard/jobs/job-9" in email_sender.calls[0][2]

    logs = _logs(session)
    assert len(logs) == 4
    assert {log.status for log in logs} == {"sent"}
    for user_id in ("u1", "u2"):
        in_app_id = repository.list_for_user(user_id).notifications[0].id
        (email_log,) = _logs(session, user_id=user_id, channel="email")
        assert email_log.notification_id == in_app_id
        assert email_log.provider_response == "msg-1"


def test_unconfigured_email_provider_logs_skipped(
    session, job_team, make_rule, make_dispatcher
):
    make_rule("job_overdue", ["technician", "supervisor"], channels=["in_app", "email"])

    report = make_dispatcher().run(_overdue_event())

    assert report.notifications_created == 2
    email_logs = _logs(session, channel="email")
    assert sorted(log.user_id for log in email_logs) == ["u1", "u2"]
    assert {log.status for log in email_logs} == {"skipped"}
    assert {log.error_message for log in email_logs} == {"Email provider not configured"}
    assert {log.status for log in _logs(session, channel="in_app")} == {"sent"}


def test_preference_opt_out_skips_only_that_channel(
    session, job_team, make_rule, make_dispatcher, email_sender
):
    make_rule("job_overdue", ["technician"], channels=["in_app", "email"])
    NotificationPreferenceRepository(session).upsert("u1", "job", "email", False)

    make_dispatcher(email_sender).run(_overdue_event())

    assert NotificationRepository(session).list_for_user("u1").total == 1
    assert email_sender.calls == []
    (email_log,) = _logs(session, channel="email")
    assert email_log.status == "skipped"
    assert email_log.error_message == "Disabled by user preference"


def test_category_wide_opt_out_blocks_every_channel(
    session, job_team, make_rule, make_dispatcher, email_sender
):
    make_rule("job_overdue", ["technician"], channels=["in_app", "email"])
    NotificationPreferenceRepository(session).upsert("u1", "job", None, False)

    make_dispatcher(email_sender).run(_overdue_event())

    assert NotificationRepository(session).list_for_user("u1").total == 0
    assert {log.status for log in _logs(session)} == {"skipped"}


def test_recipient_without_email_is_skipped(
    session, make_user, make_rule, make_dispatcher, email_sender
):
    make_user("u9", email="", roles=("Field Technician",))
    make_rule("job_overdue", ["technician"], channels=["email"])

    make_dispatcher(email_sender).run(
        NotificationEvent.from_payload("job_overdue", {"assignedTechnicianId": "u9"})
    )

    (log,) = _logs(session)
    assert log.status == "skipped"
    assert log.error_message == "Recipient has no email address"
    assert email_sender.calls == []


def test_rules_matching_the_same_user_are_merged(
    session, job_team, make_rule, make_dispatcher, email_sender
):
    make_rule("job_overdue", ["technician"], channels=["email"])
    make_rule("job_overdue", ["assigned_technician"], channels=["in_app"])

    report = make_dispatcher(email_sender).run(_overdue_event())

    assert report.recipient_ids == ["u1"]
    assert len(report.matched_rule_ids) == 2
    page = NotificationRepository(session).list_for_user("u1")
    assert page.total == 1
    assert len(email_sender.calls) == 1
    (email_log,) = _logs(session, channel="email")
    assert email_log.notification_id == page.notifications[0].id


def test_rules_whose_conditions_fail_are_ignored(
    session, job_team, make_rule, make_dispatcher, email_sender
):
    make_rule(
        "job_overdue",
        ["technician"],
        conditions=RuleConditions(days_after_threshold=7),
    )
    make_rule("job_overdue", ["supervisor"], enabled=False)

    report = make_dispatcher(email_sender).run(_overdue_event(daysOverdue=2))

    assert report.matched_rule_ids == []
    assert _logs(session) == []


def test_event_envelope_overrides_rule_classification(
    session, job_team, make_rule, make_dispatcher
):
    make_rule("job_overdue", ["technician"], category="job", priority="high")

    make_dispatcher().run(_overdue_event(category="safety", priority="low"))

    (notification,) = NotificationRepository(session).list_for_user("u1").notifications
    assert notification.category == "safety"
    assert notification.priority == "low"


def test_dispatch_runs_in_background(session, job_team, make_rule, make_dispatcher, email_sender):
    make_rule("job_overdue", ["technician"])

    future = make_dispatcher(email_sender).dispatch(
        "job_overdue", {"assignedTechnicianId": "u1", "entityName": "Roof"}
    )

    report = future.result(timeout=10)
    assert report.state is DispatchState.LOGGED
    assert report.notifications_created == 1


def test_broken_session_factory_is_reported_not_raised(test_settings):
    def broken_factory():
        raise RuntimeError("database unavailable")

    dispatcher = NotificationDispatcher(
        broken_factory, publisher=None, settings=test_settings
    )

    report = dispatcher.run(NotificationEvent.from_payload("job_overdue", {}))

    assert report.error == "database unavailable"


def test_email_sender_result_statuses_are_logged(
    session, job_team, make_rule, make_dispatcher
):
    make_rule("job_overdue", ["technician", "supervisor"], channels=["email"])

    def sender(to, subject, html_body):
        if to == "tech@example.com":
            raise RuntimeError("connection reset")
        return EmailResult(success=False, error="SendGrid responded with status 500")

    make_dispatcher(sender).run(_overdue_event())

    statuses = {log.user_id: (log.status, log.error_message) for log in _logs(session)}
    assert statuses == {
        "u1": ("failed", "connection reset"),
        "u2": ("failed", "SendGrid responded with status 500"),
    }


def test_unformattable_payload_values_still_notify(
    session, job_team, make_rule, make_dispatcher
):
    make_rule("job_overdue", ["technician", "supervisor"])

    report = make_dispatcher().run(_overdue_event(daysOverdue=math.inf))

    assert report.state is DispatchState.LOGGED
    assert report.error is None
    assert report.notifications_created == 2
    notification = NotificationRepository(session).list_for_user("u1").notifications[0]
    assert "is now inf overdue" in notification.message


def test_compose_failure_falls_back_to_generic_content(
    session, job_team, make_rule, make_dispatcher, monkeypatch, caplog
):
    make_rule("job_overdue", ["technician"])

    def broken_compose(event_type, event_data):
        raise ValueError("template exploded")

    monkeypatch.setattr(dispatcher_module, "compose", broken_compose)

    with caplog.at_level(logging.ERROR):
        report = make_dispatcher().run(_overdue_event())

    assert report.state is DispatchState.LOGGED
    assert report.error is None
    assert report.notifications_created == 1
    notification = NotificationRepository(session).list_for_user("u1").notifications[0]
    assert notification.title == "Notification"
    assert notification.short_message == "Update: Item"
    assert "Could not render message for job_overdue" in caplog.text


class _UnreachableUserDirectory(UserDirectory):
    def get_users_by_ids(self, user_ids):
        raise RuntimeError("directory unavailable")


def test_failing_user_lookup_completes_without_recipients(
    session, job_team, make_rule, make_dispatcher, email_sender
):
    make_rule("job_overdue", ["technician", "supervisor"], channels=["in_app", "email"])

    report = make_dispatcher(
        email_sender, directory_factory=_UnreachableUserDirectory
    ).run(_overdue_event())

    assert report.state is DispatchState.LOGGED
    assert report.error is None
    assert report.recipient_ids == []
    assert report.notifications_created == 0
    assert NotificationRepository(session).list_for_user("u1").total == 0
    assert _logs(session) == []
    assert email_sender.calls == []
