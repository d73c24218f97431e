"""Notification dispatch and the user-facing notification use cases."""

from .commands import (
    clean_old_notifications,
    delete_notification,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)
from .composer import ComposedMessage, build_action_url, compose
from .conditions import evaluate_conditions
from .dispatcher import (
    DeliveryOutcome,
    DispatchReport,
    DispatchState,
    NotificationDispatcher,
    get_dispatcher,
    notify,
    shutdown_dispatcher,
)
from .preference_settings import PreferenceChange, list_preferences, update_preferences
from .preferences import PreferenceGate
from .queries import (
    count_unread,
    get_notification,
    get_notification_stats,
    list_notifications,
)
from .recipients import BranchResult, RecipientResolver, register_role

__all__ = [
    "BranchResult",
    "ComposedMessage",
    "DeliveryOutcome",
    "DispatchReport",
    "DispatchState",
    "NotificationDispatcher",
    "PreferenceChange",
    "PreferenceGate",
    "RecipientResolver",
    "build_action_url",
    "clean_old_notifications",
    "compose",
    "count_unread",
    "delete_notification",
    "evaluate_conditions",
    "get_dispatcher",
    "get_notification",
    "get_notification_stats",
    "list_notifications",
    "list_preferences",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "notify",
    "register_role",
    "shutdown_dispatcher",
    "update_preferences",
]
