"""Read-only view over users, roles and the org hierarchy used by dispatch."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import Department, Employee, User
from notifier.infrastructure.repositories import (
    DepartmentRepository,
    EmployeeRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class UserDirectory:
    """Answer the directory questions asked while resolving recipients."""

    def __init__(self, session: Session) -> None:
        self._users = UserRepository(session)
        self._employees = EmployeeRepository(session)
        self._departments = DepartmentRepository(session)

    def list_active_users_by_role(self, role_name: str) -> list[str]:
        return self._users.list_active_ids_by_role_name(role_name)

    def get_employee_by_id(self, employee_id: int | str) -> Employee | None:
        try:
            key = int(employee_id)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed employee id %r", employee_id)
            return None
        return self._employees.get(key)

    def get_direct_supervisor(self, user_id: str) -> str | None:
        """Return the user id the employee behind ``user_id`` reports to."""

        employee = self._employees.get_by_user_id(user_id)
        if employee is None:
            return None
        return employee.reports_to

    def list_active_employees(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get_department_manager(self, department_id: int | str) -> str | None:
        try:
            key = int(department_id)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed department id %r", department_id)
            return None
        department: Department | None = self._departments.get(key)
        return department.manager_id if department else None

    def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, User]:
        return self._users.get_map_by_ids(user_ids)


__all__ = ["UserDirectory"]
