"""Domain entities for the user directory consulted during dispatch."""

from dataclasses import dataclass, field
from datetime import date

from .role import Role

ADMIN_ROLE_NAMES = frozenset({"executive", "admin"})


@dataclass
class User:
    """Core attributes describing a platform user."""

    id: str
    email: str | None
    phone: str | None
    full_name: str | None
    is_active: bool = True
    roles: list[Role] = field(default_factory=list)

    def has_role(self, name: str) -> bool:
        """Return ``True`` when one of the user's roles matches ``name``."""

        target = name.lower()
        return any(role.name.lower() == target for role in self.roles)

    def is_admin(self) -> bool:
        """Return ``True`` when the user may manage rules and read delivery logs."""

        return any(role.name.lower() in ADMIN_ROLE_NAMES for role in self.roles)


@dataclass
class Employee:
    """Organizational record linking a user to the reporting hierarchy."""

    id: int
    user_id: str | None
    reports_to: str | None = None
    department_id: int | None = None
    termination_date: date | None = None


@dataclass
class Department:
    """Department with an optional managing user."""

    id: int
    name: str
    manager_id: str | None = None


__all__ = ["ADMIN_ROLE_NAMES", "Department", "Employee", "User"]
