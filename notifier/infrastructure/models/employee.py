"""SQLAlchemy models for the organizational hierarchy."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String

from notifier.infrastructure.database import Base


class DepartmentModel(Base):
    """Database representation of a department."""

    __tablename__ = "department"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    manager_id = Column(String(36), ForeignKey("user.id"), nullable=True)


class EmployeeModel(Base):
    """Database representation of an employee record."""

    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(36), ForeignKey("user.id"), nullable=True, index=True)
    reports_to = Column(String(36), ForeignKey("user.id"), nullable=True)
    department_id = Column(Integer, ForeignKey("department.id"), nullable=True)
    termination_date = Column(Date, nullable=True)


__all__ = ["DepartmentModel", "EmployeeModel"]
