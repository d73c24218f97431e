"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    category: str
    type: str
    title: str
    message: str
    short_message: str | None = None
    priority: str
    read: bool
    created_at: datetime
    read_at: datetime | None = None
    related_entity_type: str | None = None
    related_entity_id: str | None = None
    related_entity_name: str | None = None
    action_url: str | None = None
    created_by: str | None = None
    additional_notes: str | None = None


class NotificationPageRead(BaseModel):
    notifications: list[NotificationRead]
    total: int
    page: int
    limit: int
    total_pages: int
    has_more: bool


class UnreadCountRead(BaseModel):
    unread_count: int


class MarkAllReadResponse(BaseModel):
    updated: int


class NotificationStatsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_notifications: int
    unread_count: int
    by_category: dict[str, int] = Field(default_factory=dict)
    by_priority: dict[str, int] = Field(default_factory=dict)
    recent_count: int


class NotificationTriggerRequest(BaseModel):
    """Payload used by administrators to emit an event manually."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., min_length=1, max_length=100)
    data: dict[str, Any] = Field(default_factory=dict)


class NotificationTriggerResponse(BaseModel):
    accepted: bool
    type: str


__all__ = [
    "MarkAllReadResponse",
    "NotificationPageRead",
    "NotificationRead",
    "NotificationStatsRead",
    "NotificationTriggerRequest",
    "NotificationTriggerResponse",
    "UnreadCountRead",
]
