"""Domain entity representing one delivery attempt on one channel."""

from dataclasses import dataclass
from datetime import datetime

DELIVERY_STATUS_SENT = "sent"
DELIVERY_STATUS_FAILED = "failed"
DELIVERY_STATUS_SKIPPED = "skipped"


@dataclass
class DeliveryLog:
    """Append-only audit record of a (recipient, channel) outcome."""

    id: str | None
    notification_id: str | None
    user_id: str
    channel: str
    status: str
    provider_response: str | None = None
    error_message: str | None = None
    created_at: datetime | None = None


__all__ = [
    "DELIVERY_STATUS_FAILED",
    "DELIVERY_STATUS_SENT",
    "DELIVERY_STATUS_SKIPPED",
    "DeliveryLog",
]
