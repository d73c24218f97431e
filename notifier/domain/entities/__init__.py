"""Domain entities exposed by the application."""

from .delivery_log import (
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_SENT,
    DELIVERY_STATUS_SKIPPED,
    DeliveryLog,
)
from .event import NotificationEvent
from .notification import (
    CATEGORY_SYSTEM,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    Notification,
    NotificationFilters,
    NotificationPage,
    NotificationStats,
)
from .preference import NotificationPreference
from .recipient import RecipientInfo
from .role import Role
from .rule import (
    CHANNEL_EMAIL,
    CHANNEL_IN_APP,
    SUPPORTED_CHANNELS,
    NotificationRule,
    RuleConditions,
    normalize_channel,
)
from .user import Department, Employee, User

__all__ = [
    "CATEGORY_SYSTEM",
    "CHANNEL_EMAIL",
    "CHANNEL_IN_APP",
    "DELIVERY_STATUS_FAILED",
    "DELIVERY_STATUS_SENT",
    "DELIVERY_STATUS_SKIPPED",
    "DeliveryLog",
    "Department",
    "Employee",
    "Notification",
    "NotificationEvent",
    "NotificationFilters",
    "NotificationPage",
    "NotificationPreference",
    "NotificationRule",
    "NotificationStats",
    "PRIORITY_HIGH",
    "PRIORITY_LOW",
    "PRIORITY_MEDIUM",
    "RecipientInfo",
    "Role",
    "RuleConditions",
    "SUPPORTED_CHANNELS",
    "User",
    "normalize_channel",
]
