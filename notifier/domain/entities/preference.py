"""Domain entity representing a user's notification opt-in/opt-out flag."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class NotificationPreference:
    """Preference for a category, optionally narrowed to a single channel.

    ``channel`` set to ``None`` applies the flag to every channel of the
    category; a channel-specific row takes precedence over it.
    """

    id: str | None
    user_id: str
    category: str
    channel: str | None
    enabled: bool
    updated_at: datetime | None = None


__all__ = ["NotificationPreference"]
