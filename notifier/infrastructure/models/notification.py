"""SQLAlchemy model for persisted notifications."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text

from notifier.infrastructure.database import Base
from notifier.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_user_read", "user_id", "read"),
        Index("ix_notification_user_created", "user_id", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("user.id"), nullable=False, index=True)
    category = Column(String(50), nullable=False)
    type = Column(String(100), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    short_message = Column(String(255), nullable=True)
    priority = Column(String(20), nullable=False, default="medium")
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    read_at = Column(DateTime(), nullable=True)
    related_entity_type = Column(String(50), nullable=True)
    related_entity_id = Column(String(100), nullable=True)
    related_entity_name = Column(String(255), nullable=True)
    action_url = Column(String(500), nullable=True)
    created_by = Column(String(36), nullable=True)
    additional_notes = Column(Text, nullable=True)
    deleted_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
