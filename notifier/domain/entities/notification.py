"""Domain entity representing an in-app user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"

CATEGORY_SYSTEM = "system"


@dataclass
class Notification:
    """Message persisted for a specific user at fan-out time."""

    id: str | None
    user_id: str
    category: str
    type: str
    title: str
    message: str
    short_message: str | None = None
    priority: str = PRIORITY_MEDIUM
    read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None
    related_entity_type: str | None = None
    related_entity_id: str | None = None
    related_entity_name: str | None = None
    action_url: str | None = None
    created_by: str | None = None
    additional_notes: str | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class NotificationFilters:
    """Optional filters applied when listing a user's notifications."""

    category: str | None = None
    priority: str | None = None
    read: bool | None = None
    type: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


@dataclass(frozen=True)
class NotificationPage:
    """A page of notifications plus pagination metadata."""

    notifications: list[Notification]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return (self.total + self.limit - 1) // self.limit

    @property
    def has_more(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class NotificationStats:
    """Aggregated counters describing a user's notifications."""

    total_notifications: int
    unread_count: int
    by_category: dict[str, int]
    by_priority: dict[str, int]
    recent_count: int


__all__ = [
    "CATEGORY_SYSTEM",
    "Notification",
    "NotificationFilters",
    "NotificationPage",
    "NotificationStats",
    "PRIORITY_HIGH",
    "PRIORITY_LOW",
    "PRIORITY_MEDIUM",
]
