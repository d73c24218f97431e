"""Pydantic schemas exposed by the HTTP interface."""

from .delivery_log import DeliveryLogRead
from .notification import (
    MarkAllReadResponse,
    NotificationPageRead,
    NotificationRead,
    NotificationStatsRead,
    NotificationTriggerRequest,
    NotificationTriggerResponse,
    UnreadCountRead,
)
from .notification_rule import (
    NotificationRuleCreate,
    NotificationRuleRead,
    NotificationRuleUpdate,
)
from .preference import PreferenceRead, PreferenceUpdateItem, PreferenceUpdateRequest

__all__ = [
    "DeliveryLogRead",
    "MarkAllReadResponse",
    "NotificationPageRead",
    "NotificationRead",
    "NotificationRuleCreate",
    "NotificationRuleRead",
    "NotificationRuleUpdate",
    "NotificationStatsRead",
    "NotificationTriggerRequest",
    "NotificationTriggerResponse",
    "PreferenceRead",
    "PreferenceUpdateItem",
    "PreferenceUpdateRequest",
    "UnreadCountRead",
]
