"""Schemas for notification rule endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRuleBase(BaseModel):
    event_type: str = Field(..., min_length=1, max_length=100)
    category: str = Field(..., min_length=1, max_length=50)
    priority: str = "medium"
    recipient_roles: list[str] = Field(..., min_length=1)
    channels: list[str] = Field(..., min_length=1)
    conditions: dict[str, Any] | None = Field(
        default=None,
        description="Thresholds such as amountThreshold or daysAfterThreshold plus requiresAll",
    )
    enabled: bool = True
    description: str | None = None


class NotificationRuleCreate(NotificationRuleBase):
    """Payload required to create a rule."""

    model_config = ConfigDict(extra="forbid")


class NotificationRuleUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    event_type: str | None = Field(default=None, min_length=1, max_length=100)
    category: str | None = Field(default=None, min_length=1, max_length=50)
    priority: str | None = None
    recipient_roles: list[str] | None = None
    channels: list[str] | None = None
    conditions: dict[str, Any] | None = None
    enabled: bool | None = None
    description: str | None = None


class NotificationRuleRead(BaseModel):
    id: str
    event_type: str
    category: str
    priority: str
    recipient_roles: list[str]
    channels: list[str]
    conditions: dict[str, Any] | None = None
    enabled: bool
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "NotificationRuleCreate",
    "NotificationRuleRead",
    "NotificationRuleUpdate",
]
