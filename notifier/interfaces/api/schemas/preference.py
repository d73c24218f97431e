"""Schemas for notification preference endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PreferenceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    channel: str | None = None
    enabled: bool
    updated_at: datetime | None = None


class PreferenceUpdateItem(BaseModel):
    category: str = Field(..., min_length=1, max_length=50)
    channel: str | None = Field(
        default=None, description="Channel name; omit to apply to the whole category"
    )
    enabled: bool


class PreferenceUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    preferences: list[PreferenceUpdateItem] = Field(..., min_length=1)


__all__ = ["PreferenceRead", "PreferenceUpdateItem", "PreferenceUpdateRequest"]
