"""Schemas for delivery log endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class DeliveryLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    notification_id: str | None = None
    user_id: str
    channel: str
    status: str
    provider_response: str | None = None
    error_message: str | None = None
    created_at: datetime | None = None


__all__ = ["DeliveryLogRead"]
