"""Use case for deleting notification rules."""

from sqlalchemy.orm import Session

from notifier.infrastructure.repositories import NotificationRuleRepository


def delete_rule(session: Session, rule_id: str) -> None:
    """Delete the specified notification rule."""

    repository = NotificationRuleRepository(session)
    if repository.get(rule_id) is None:
        raise ValueError("Notification rule not found")
    repository.delete(rule_id)


__all__ = ["delete_rule"]
