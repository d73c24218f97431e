"""Domain entity describing a business event that may warrant notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class NotificationEvent:
    """Typed occurrence emitted by a business action after its commit.

    ``data`` is the loosely typed payload agreed per ``type``. Events live only
    for the duration of one dispatch and are never persisted.
    """

    type: str
    data: Mapping[str, Any] = field(default_factory=dict)
    category: str | None = None
    priority: str | None = None
    triggered_by: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data or {})))

    @classmethod
    def from_payload(cls, event_type: str, data: Mapping[str, Any] | None) -> "NotificationEvent":
        """Build an event, lifting the optional envelope keys out of ``data``."""

        payload = dict(data or {})
        return cls(
            type=event_type,
            data=payload,
            category=_optional_str(payload.get("category")),
            priority=_optional_str(payload.get("priority")),
            triggered_by=_optional_str(payload.get("triggeredBy")),
        )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["NotificationEvent"]
