"""Use case for retrieving a single notification rule."""

from sqlalchemy.orm import Session

from notifier.domain.entities import NotificationRule
from notifier.infrastructure.repositories import NotificationRuleRepository


def get_rule(session: Session, rule_id: str) -> NotificationRule:
    """Return the rule identified by ``rule_id`` or raise an error."""

    rule = NotificationRuleRepository(session).get(rule_id)
    if rule is None:
        raise ValueError("Notification rule not found")
    return rule


__all__ = ["get_rule"]
