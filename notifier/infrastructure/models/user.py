"""SQLAlchemy models for the user directory."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Table, func
from sqlalchemy.orm import relationship

from notifier.infrastructure.database import Base

user_role_table = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", String(36), ForeignKey("user.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
)


class UserModel(Base):
    """Database representation of a platform user."""

    __tablename__ = "user"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    full_name = Column(String(150), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    roles = relationship("RoleModel", secondary=user_role_table, lazy="selectin")


__all__ = ["UserModel", "user_role_table"]
