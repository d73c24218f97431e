"""Tests for notification rule management and the default catalogue."""

from __future__ import annotations

import pytest

from notifier.application.use_cases.notification_rules import (
    DEFAULT_RULES,
    create_rule,
    delete_rule,
    get_rule,
    list_rules,
    seed_default_rules,
    update_rule,
)
from notifier.application.use_cases.notifications.recipients import registered_roles
from notifier.domain.entities import SUPPORTED_CHANNELS, RuleConditions


def _create(session, **overrides):
    values = {
        "event_type": "invoice_overdue",
        "category": "Invoice",
        "priority": "High",
        "recipient_roles": ["manager", "executive", "manager"],
        "channels": ["push", "email"],
    }
    values.update(overrides)
    return create_rule(session, **values)


def test_create_rule_normalizes_values(session):
    rule = _create(session, conditions={"amountThreshold": 5000})

    assert rule.id
    assert rule.category == "invoice"
    assert rule.priority == "high"
    assert rule.recipient_roles == ["manager", "executive"]
    assert rule.channels == ["in_app", "email"]
    assert rule.conditions == RuleConditions(amount_threshold=5000)
    assert get_rule(session, rule.id) == rule


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"event_type": " "}, "Event type is required"),
        ({"priority": "urgent"}, "Priority must be one of"),
        ({"recipient_roles": ["wizard"]}, "Unknown recipient role"),
        ({"recipient_roles": []}, "At least one recipient role"),
        ({"channels": ["sms"]}, "Unsupported notification channel"),
        ({"conditions": {"amountThreshold": "many"}}, "must be a number"),
    ],
)
def test_create_rule_rejects_invalid_values(session, overrides, message):
    with pytest.raises(ValueError, match=message):
        _create(session, **overrides)


def test_update_rule_applies_partial_changes(session):
    rule = _create(session, conditions={"amountThreshold": 5000}, description="Old")

    updated = update_rule(session, rule.id, enabled=False, channels=["email"])
    assert updated.enabled is False
    assert updated.channels == ["email"]
    assert updated.conditions == rule.conditions
    assert updated.description == "Old"

    cleared = update_rule(session, rule.id, conditions=None, description=None)
    assert cleared.conditions is None
    assert cleared.description is None


def test_missing_rules_raise(session):
    with pytest.raises(ValueError, match="Notification rule not found"):
        get_rule(session, "missing")
    with pytest.raises(ValueError, match="Notification rule not found"):
        update_rule(session, "missing", enabled=False)
    with pytest.raises(ValueError, match="Notification rule not found"):
        delete_rule(session, "missing")


def test_list_and_delete_rules(session):
    first = _create(session)
    _create(session, event_type="job_overdue", category="job")

    assert {r.event_type for r in list_rules(session)} == {"invoice_overdue", "job_overdue"}
    assert [r.id for r in list_rules(session, category="invoice")] == [first.id]

    delete_rule(session, first.id)
    assert [r.event_type for r in list_rules(session)] == ["job_overdue"]


def test_default_catalogue_uses_known_roles_and_channels():
    known_roles = set(registered_roles())
    for default in DEFAULT_RULES:
        assert set(default.roles) <= known_roles, default.event_type
        assert set(default.channels) <= set(SUPPORTED_CHANNELS), default.event_type


def test_seed_default_rules_is_idempotent(session):
    event_types = {default.event_type for default in DEFAULT_RULES}

    assert seed_default_rules(session) == (len(event_types), 0)
    assert seed_default_rules(session) == (0, 0)
    assert len(list_rules(session, limit=None)) == len(event_types)


def test_seed_with_overwrite_resets_existing_rules(session):
    seed_default_rules(session)
    (rule,) = list_rules(session, event_type="job_overdue")
    update_rule(session, rule.id, enabled=False)

    created, updated = seed_default_rules(session, overwrite=True)

    assert created == 0
    assert updated == len({default.event_type for default in DEFAULT_RULES})
    assert get_rule(session, rule.id).enabled is True
