"""Domain entities describing admin-configured notification rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

CHANNEL_IN_APP = "in_app"
CHANNEL_EMAIL = "email"
SUPPORTED_CHANNELS = (CHANNEL_IN_APP, CHANNEL_EMAIL)

# Older rule rows refer to the in-app channel by these names.
_CHANNEL_ALIASES = {
    "in_app": CHANNEL_IN_APP,
    "inapp": CHANNEL_IN_APP,
    "in-app": CHANNEL_IN_APP,
    "push": CHANNEL_IN_APP,
    "email": CHANNEL_EMAIL,
}


def normalize_channel(value: Any) -> str | None:
    """Return the canonical channel name for ``value`` or ``None``."""

    if not isinstance(value, str):
        return None
    return _CHANNEL_ALIASES.get(value.strip().lower())


_CONDITION_KEYS = {
    "amount_threshold": ("amountThreshold", "amount_threshold"),
    "days_before_threshold": ("daysBeforeThreshold", "days_before_threshold"),
    "days_after_threshold": ("daysAfterThreshold", "days_after_threshold"),
    "stock_level_threshold": ("stockLevelThreshold", "stock_level_threshold"),
    "percentage_threshold": ("percentageThreshold", "percentage_threshold"),
    "requires_all": ("requiresAll", "requires_all"),
}


@dataclass(frozen=True)
class RuleConditions:
    """Optional numeric thresholds combined with AND (``requires_all``) or OR."""

    amount_threshold: float | None = None
    days_before_threshold: float | None = None
    days_after_threshold: float | None = None
    stock_level_threshold: float | None = None
    percentage_threshold: float | None = None
    requires_all: bool = False

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "RuleConditions | None":
        """Build conditions from a stored JSON object (camelCase or snake_case)."""

        if not raw:
            return None
        values: dict[str, Any] = {}
        for attribute, keys in _CONDITION_KEYS.items():
            for key in keys:
                if key in raw and raw[key] is not None:
                    values[attribute] = raw[key]
                    break
        if "requires_all" in values:
            values["requires_all"] = bool(values["requires_all"])
        return cls(**values)

    def to_mapping(self) -> dict[str, Any]:
        """Return the camelCase JSON representation stored with the rule."""

        payload: dict[str, Any] = {"requiresAll": self.requires_all}
        for attribute, keys in _CONDITION_KEYS.items():
            if attribute == "requires_all":
                continue
            value = getattr(self, attribute)
            if value is not None:
                payload[keys[0]] = value
        return payload


@dataclass
class NotificationRule:
    """Binding from an event type to recipient roles, conditions and channels."""

    id: str | None
    event_type: str
    category: str
    priority: str
    recipient_roles: list[str] = field(default_factory=list)
    channels: list[str] = field(default_factory=list)
    conditions: RuleConditions | None = None
    enabled: bool = True
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def active_channels(self) -> list[str]:
        """Return the supported channels enabled on the rule, deduplicated."""

        active: list[str] = []
        for raw in self.channels:
            channel = normalize_channel(raw)
            if channel and channel not in active:
                active.append(channel)
        return active


__all__ = [
    "CHANNEL_EMAIL",
    "CHANNEL_IN_APP",
    "SUPPORTED_CHANNELS",
    "NotificationRule",
    "RuleConditions",
    "normalize_channel",
]
