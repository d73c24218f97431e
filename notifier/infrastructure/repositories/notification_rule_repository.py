"""Persistence helpers for notification rules."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import NotificationRule, RuleConditions
from notifier.infrastructure.models import NotificationRuleModel
from notifier.utils import ensure_app_timezone


class NotificationRuleRepository:
    """Provide CRUD operations for :class:`NotificationRule` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        event_type: str | None = None,
        category: str | None = None,
        enabled: bool | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> Sequence[NotificationRule]:
        query = self.session.query(NotificationRuleModel)
        if event_type:
            query = query.filter(NotificationRuleModel.event_type == event_type)
        if category:
            query = query.filter(NotificationRuleModel.category == category)
        if enabled is not None:
            query = query.filter(NotificationRuleModel.enabled.is_(enabled))
        query = query.order_by(
            NotificationRuleModel.category.asc(), NotificationRuleModel.event_type.asc()
        ).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_enabled_for_event(self, event_type: str) -> Sequence[NotificationRule]:
        query = (
            self.session.query(NotificationRuleModel)
            .filter(NotificationRuleModel.event_type == event_type)
            .filter(NotificationRuleModel.enabled.is_(True))
            .order_by(NotificationRuleModel.created_at.asc(), NotificationRuleModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, rule_id: str) -> NotificationRule | None:
        model = self.session.get(NotificationRuleModel, rule_id)
        return self._to_entity(model) if model else None

    def create(self, rule: NotificationRule) -> NotificationRule:
        model = NotificationRuleModel()
        if rule.id is not None:
            model.id = rule.id
        self._apply_entity_to_model(model, rule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, rule: NotificationRule) -> NotificationRule:
        if rule.id is None:
            raise ValueError("Notification rule id is required for updates")
        model = self.session.get(NotificationRuleModel, rule.id)
        if model is None:
            msg = f"Notification rule with id {rule.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, rule)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, rule_id: str) -> None:
        model = self.session.get(NotificationRuleModel, rule_id)
        if model is None:
            msg = f"Notification rule with id {rule_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationRuleModel, rule: NotificationRule
    ) -> None:
        model.event_type = rule.event_type
        model.category = rule.category
        model.priority = rule.priority
        model.recipient_roles = list(rule.recipient_roles)
        model.channels = list(rule.channels)
        model.conditions = rule.conditions.to_mapping() if rule.conditions else None
        model.enabled = rule.enabled
        model.description = rule.description

    @staticmethod
    def _to_entity(model: NotificationRuleModel) -> NotificationRule:
        return NotificationRule(
            id=model.id,
            event_type=model.event_type,
            category=model.category,
            priority=model.priority,
            recipient_roles=list(model.recipient_roles or []),
            channels=list(model.channels or []),
            conditions=RuleConditions.from_mapping(model.conditions),
            enabled=bool(model.enabled),
            description=model.description,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationRuleRepository"]
