"""SQLAlchemy model for delivery audit records."""

import uuid

from sqlalchemy import Column, DateTime, String, Text

from notifier.infrastructure.database import Base
from notifier.utils import now_in_app_naive_datetime


class DeliveryLogModel(Base):
    """Append-only record of one delivery attempt on one channel."""

    __tablename__ = "delivery_log"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    notification_id = Column(String(36), nullable=True, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    channel = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False)
    provider_response = Column(Text, nullable=True)
    error_message = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["DeliveryLogModel"]
