"""Tests for reading and managing a user's notifications."""

from __future__ import annotations

from datetime import timedelta

import pytest

from notifier.application.use_cases.notifications import (
    clean_old_notifications,
    count_unread,
    delete_notification,
    get_notification,
    get_notification_stats,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from notifier.domain.entities import Notification, NotificationFilters
from notifier.infrastructure.repositories import NotificationRepository
from notifier.utils import now_in_app_timezone


@pytest.fixture()
def add_notification(session):
    repository = NotificationRepository(session)

    def _add(user_id="u1", *, age=timedelta(0), category="job", priority="medium", **fields):
        return repository.create(
            Notification(
                id=None,
                user_id=user_id,
                category=category,
                type=fields.pop("type", "job_overdue"),
                title=fields.pop("title", "Job Overdue"),
                message=fields.pop("message", "Job is overdue"),
                priority=priority,
                created_at=now_in_app_timezone() - age,
                **fields,
            )
        )

    return _add


def test_listing_is_newest_first_and_paginated(session, add_notification):
    for minutes in range(5):
        add_notification(title=f"n{minutes}", age=timedelta(minutes=minutes))
    add_notification("someone-else")

    first = list_notifications(session, user_id="u1", page=1, limit=2)
    last = list_notifications(session, user_id="u1", page=3, limit=2)

    assert [n.title for n in first.notifications] == ["n0", "n1"]
    assert first.total == 5
    assert first.total_pages == 3
    assert first.has_more is True
    assert [n.title for n in last.notifications] == ["n4"]
    assert last.has_more is False


def test_listing_filters(session, add_notification):
    add_notification(category="invoice", priority="high")
    add_notification(category="job", priority="low", age=timedelta(days=3))
    read = add_notification(category="job", priority="high")
    mark_notification_as_read(session, user_id="u1", notification_id=read.id)

    by_category = list_notifications(
        session, user_id="u1", filters=NotificationFilters(category="job")
    )
    unread_high = list_notifications(
        session, user_id="u1", filters=NotificationFilters(priority="high", read=False)
    )
    recent = list_notifications(
        session,
        user_id="u1",
        filters=NotificationFilters(start_date=now_in_app_timezone() - timedelta(days=1)),
    )

    assert by_category.total == 2
    assert [n.category for n in unread_high.notifications] == ["invoice"]
    assert recent.total == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"page": 0},
        {"limit": 0},
        {"limit": 101},
        {
            "filters": NotificationFilters(
                start_date=now_in_app_timezone(),
                end_date=now_in_app_timezone() - timedelta(days=1),
            )
        },
    ],
)
def test_listing_rejects_invalid_arguments(session, kwargs):
    with pytest.raises(ValueError):
        list_notifications(session, user_id="u1", **kwargs)


def test_mark_as_read_is_scoped_to_the_owner(session, add_notification):
    notification = add_notification()

    with pytest.raises(ValueError, match="Notification not found"):
        mark_notification_as_read(session, user_id="intruder", notification_id=notification.id)

    updated = mark_notification_as_read(session, user_id="u1", notification_id=notification.id)
    assert updated.read is True
    assert updated.read_at is not None
    assert count_unread(session, user_id="u1") == 0


def test_mark_all_as_read_returns_updated_count(session, add_notification):
    add_notification()
    add_notification()
    add_notification("u2")

    assert mark_all_notifications_as_read(session, user_id="u1") == 2
    assert count_unread(session, user_id="u1") == 0
    assert count_unread(session, user_id="u2") == 1


def test_deleted_notifications_are_hidden(session, add_notification):
    notification = add_notification()

    delete_notification(session, user_id="u1", notification_id=notification.id)

    with pytest.raises(ValueError):
        get_notification(session, user_id="u1", notification_id=notification.id)
    with pytest.raises(ValueError):
        delete_notification(session, user_id="u1", notification_id=notification.id)
    assert list_notifications(session, user_id="u1").total == 0


def test_stats(session, add_notification):
    add_notification(category="job", priority="high")
    add_notification(category="job", priority="low", age=timedelta(days=2))
    add_notification(category="invoice", priority="high", age=timedelta(hours=1))

    stats = get_notification_stats(session, user_id="u1")

    assert stats.total_notifications == 3
    assert stats.unread_count == 3
    assert stats.by_category == {"job": 2, "invoice": 1}
    assert stats.by_priority == {"high": 2, "low": 1}
    assert stats.recent_count == 2


def test_clean_old_notifications(session, add_notification):
    add_notification(age=timedelta(days=120))
    keep = add_notification(age=timedelta(days=10))

    assert clean_old_notifications(session, days_to_keep=90) == 1
    page = list_notifications(session, user_id="u1")
    assert [n.id for n in page.notifications] == [keep.id]

    with pytest.raises(ValueError):
        clean_old_notifications(session, days_to_keep=0)
