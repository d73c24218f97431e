"""Administrative endpoints for notification rules."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from notifier.application.use_cases.notification_rules import (
    create_rule as create_rule_uc,
    delete_rule as delete_rule_uc,
    get_rule as get_rule_uc,
    list_rules as list_rules_uc,
    update_rule as update_rule_uc,
)
from notifier.domain.entities import NotificationRule, User
from notifier.infrastructure.database import get_db
from notifier.interfaces.api.dependencies import require_admin
from notifier.interfaces.api.schemas import (
    NotificationRuleCreate,
    NotificationRuleRead,
    NotificationRuleUpdate,
)

router = APIRouter(prefix="/notification-rules", tags=["notification-rules"])

_NOT_FOUND = "Notification rule not found"


def _to_read_model(rule: NotificationRule) -> NotificationRuleRead:
    return NotificationRuleRead(
        id=rule.id or "",
        event_type=rule.event_type,
        category=rule.category,
        priority=rule.priority,
        recipient_roles=list(rule.recipient_roles),
        channels=list(rule.channels),
        conditions=rule.conditions.to_mapping() if rule.conditions else None,
        enabled=rule.enabled,
        description=rule.description,
        created_at=rule.created_at,
        updated_at=rule.updated_at,
    )


def _translate_error(exc: ValueError) -> HTTPException:
    detail = str(exc)
    status_code = status.HTTP_400_BAD_REQUEST
    if detail == _NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND
    return HTTPException(status_code=status_code, detail=detail)


@router.get("", response_model=list[NotificationRuleRead])
def list_rules(
    event_type: str | None = None,
    category: str | None = None,
    enabled: bool | None = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> list[NotificationRuleRead]:
    """Return notification rules, optionally filtered."""

    rules = list_rules_uc(
        db,
        event_type=event_type,
        category=category,
        enabled=enabled,
        skip=skip,
        limit=limit,
    )
    return [_to_read_model(rule) for rule in rules]


@router.post("", response_model=NotificationRuleRead, status_code=status.HTTP_201_CREATED)
def register_rule(
    rule_in: NotificationRuleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> NotificationRuleRead:
    try:
        rule = create_rule_uc(db, **rule_in.model_dump())
    except ValueError as exc:
        raise _translate_error(exc) from exc
    return _to_read_model(rule)


@router.get("/{rule_id}", response_model=NotificationRuleRead)
def read_rule(
    rule_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> NotificationRuleRead:
    try:
        rule = get_rule_uc(db, rule_id)
    except ValueError as exc:
        raise _translate_error(exc) from exc
    return _to_read_model(rule)


@router.patch("/{rule_id}", response_model=NotificationRuleRead)
def update_rule(
    rule_id: str,
    rule_in: NotificationRuleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> NotificationRuleRead:
    """Partially update a rule; explicit ``null`` clears conditions or description."""

    update_data = rule_in.model_dump(exclude_unset=True)
    try:
        rule = update_rule_uc(db, rule_id, **update_data)
    except ValueError as exc:
        raise _translate_error(exc) from exc
    return _to_read_model(rule)


@router.delete("/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_rule(
    rule_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Response:
    try:
        delete_rule_uc(db, rule_id)
    except ValueError as exc:
        raise _translate_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
