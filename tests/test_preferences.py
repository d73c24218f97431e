"""Tests for per-user channel preferences."""

from __future__ import annotations

import pytest

from notifier.application.use_cases.notifications import (
    PreferenceChange,
    PreferenceGate,
    list_preferences,
    update_preferences,
)
from notifier.infrastructure.repositories import NotificationPreferenceRepository


class CountingStore:
    def __init__(self, rows):
        self.rows = rows
        self.calls = 0

    def get_preference(self, user_id, category, channel):
        self.calls += 1
        return self.rows.get((user_id, category, channel))


def test_no_preferences_means_everything_is_allowed():
    gate = PreferenceGate(CountingStore({}))

    assert gate.allowed("u1", "job", "email") is True


def test_channel_specific_row_wins_over_category_row():
    store = CountingStore({("u1", "job", None): False, ("u1", "job", "in_app"): True})
    gate = PreferenceGate(store)

    assert gate.allowed("u1", "job", "in_app") is True
    assert gate.allowed("u1", "job", "email") is False


def test_answers_are_memoized_per_gate():
    store = CountingStore({("u1", "job", "email"): False})
    gate = PreferenceGate(store)

    gate.allowed("u1", "job", "email")
    gate.allowed("u1", "job", "email")

    assert store.calls == 1


def test_repository_upsert_replaces_existing_row(session):
    repository = NotificationPreferenceRepository(session)
    repository.upsert("u1", "invoice", "email", False)
    repository.upsert("u1", "invoice", "email", True)
    repository.upsert("u1", "invoice", None, False)

    preferences = repository.list_for_user("u1")

    assert len(preferences) == 2
    assert repository.get_preference("u1", "invoice", "email") is True
    assert repository.get_preference("u1", "invoice", None) is False
    assert repository.get_preference("u1", "job", None) is None


def test_update_preferences_use_case(session):
    updated = update_preferences(
        session,
        user_id="u1",
        changes=[
            PreferenceChange(category="job", enabled=False, channel="email"),
            PreferenceChange(category="inventory", enabled=False),
        ],
    )

    assert {(p.category, p.channel, p.enabled) for p in updated} == {
        ("job", "email", False),
        ("inventory", None, False),
    }
    assert len(list_preferences(session, user_id="u1")) == 2


def test_update_preferences_rejects_unknown_channel(session):
    with pytest.raises(ValueError):
        update_preferences(
            session,
            user_id="u1",
            changes=[PreferenceChange(category="job", enabled=False, channel="sms")],
        )
