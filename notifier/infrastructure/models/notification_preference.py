"""SQLAlchemy model for per-user notification preferences."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, UniqueConstraint

from notifier.infrastructure.database import Base
from notifier.utils import now_in_app_naive_datetime


class NotificationPreferenceModel(Base):
    """Opt-in/opt-out flag for a user, category and optional channel."""

    __tablename__ = "notification_preference"
    __table_args__ = (
        UniqueConstraint("user_id", "category", "channel", name="uq_notification_preference"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("user.id"), nullable=False, index=True)
    category = Column(String(50), nullable=False)
    channel = Column(String(20), nullable=True)
    enabled = Column(Boolean, nullable=False, default=True)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["NotificationPreferenceModel"]
