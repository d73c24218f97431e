"""Persistence layer for employees and departments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifier.domain.entities import Department, Employee
from notifier.infrastructure.models import DepartmentModel, EmployeeModel


class EmployeeRepository:
    """Provide lookups over employee records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, employee_id: int) -> Employee | None:
        model = self.session.get(EmployeeModel, employee_id)
        return self._to_entity(model) if model else None

    def get_by_user_id(self, user_id: str) -> Employee | None:
        model = (
            self.session.query(EmployeeModel)
            .filter(EmployeeModel.user_id == user_id)
            .order_by(EmployeeModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_active(self) -> Sequence[Employee]:
        query = self.session.query(EmployeeModel).filter(
            EmployeeModel.termination_date.is_(None)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, employee: Employee) -> Employee:
        model = EmployeeModel(
            user_id=employee.user_id,
            reports_to=employee.reports_to,
            department_id=employee.department_id,
            termination_date=employee.termination_date,
        )
        if employee.id:
            model.id = employee.id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: EmployeeModel) -> Employee:
        return Employee(
            id=model.id,
            user_id=model.user_id,
            reports_to=model.reports_to,
            department_id=model.department_id,
            termination_date=model.termination_date,
        )


class DepartmentRepository:
    """Provide lookups over departments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, department_id: int) -> Department | None:
        model = self.session.get(DepartmentModel, department_id)
        if model is None:
            return None
        return Department(id=model.id, name=model.name, manager_id=model.manager_id)

    def create(self, department: Department) -> Department:
        model = DepartmentModel(name=department.name, manager_id=department.manager_id)
        if department.id:
            model.id = department.id
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return Department(id=model.id, name=model.name, manager_id=model.manager_id)


__all__ = ["DepartmentRepository", "EmployeeRepository"]
