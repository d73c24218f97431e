"""SQLAlchemy model for notification rules."""

import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text

from notifier.infrastructure.database import Base
from notifier.utils import now_in_app_naive_datetime


class NotificationRuleModel(Base):
    """Database representation of an event type to recipients binding."""

    __tablename__ = "notification_rule"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_type = Column(String(100), nullable=False, index=True)
    category = Column(String(50), nullable=False)
    priority = Column(String(20), nullable=False, default="medium")
    recipient_roles = Column(JSON, nullable=False, default=list)
    channels = Column(JSON, nullable=False, default=list)
    conditions = Column(JSON, nullable=True)
    enabled = Column(Boolean, nullable=False, default=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["NotificationRuleModel"]
