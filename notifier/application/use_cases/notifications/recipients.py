"""Resolution of rule recipient roles into addressable users."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Protocol, Sequence

from notifier.domain.entities import (
    Employee,
    NotificationEvent,
    NotificationRule,
    RecipientInfo,
    User,
)

logger = logging.getLogger(__name__)

# Rule role tokens mapped onto the role names stored in the directory.
ROLE_NAME_MAP: dict[str, str] = {
    "manager": "Manager",
    "project_manager": "Manager",
    "supervisor": "Manager",
    "executive": "Executive",
    "admin": "Executive",
    "technician": "Field Technician",
    "client": "Client",
}


class Directory(Protocol):
    def list_active_users_by_role(self, role_name: str) -> list[str]: ...

    def get_employee_by_id(self, employee_id: Any) -> Employee | None: ...

    def get_direct_supervisor(self, user_id: str) -> str | None: ...

    def list_active_employees(self) -> Sequence[Employee]: ...

    def get_department_manager(self, department_id: Any) -> str | None: ...

    def get_users_by_ids(self, user_ids: Iterable[str]) -> dict[str, User]: ...


RoleResolver = Callable[[Mapping[str, Any], Directory], set[str]]

_ROLE_RESOLVERS: dict[str, RoleResolver] = {}


def register_role(*tokens: str) -> Callable[[RoleResolver], RoleResolver]:
    """Register the decorated function as the resolver for ``tokens``."""

    def decorator(func: RoleResolver) -> RoleResolver:
        for token in tokens:
            _ROLE_RESOLVERS[token] = func
        return func

    return decorator


def registered_roles() -> list[str]:
    return sorted(_ROLE_RESOLVERS)


@dataclass(frozen=True)
class BranchResult:
    """Outcome of resolving a single role token."""

    role: str
    user_ids: frozenset[str] = field(default_factory=frozenset)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _users_with_role(token: str, directory: Directory) -> set[str]:
    return set(directory.list_active_users_by_role(ROLE_NAME_MAP.get(token, token)))


def _ids(*values: Any) -> set[str]:
    collected: set[str] = set()
    for value in values:
        if value is None or value == "":
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            collected.update(str(item) for item in value if item not in (None, ""))
        else:
            collected.add(str(value))
    return collected


@register_role("user")
def _resolve_user(data: Mapping[str, Any], directory: Directory) -> set[str]:
    return _ids(data.get("userId"))


@register_role("technician", "assigned_technician")
def _resolve_technicians(data: Mapping[str, Any], directory: Directory) -> set[str]:
    return _ids(data.get("assignedTechnicianId"), data.get("assignedTechnicianIds"))


@register_role("manager", "project_manager")
def _resolve_managers(data: Mapping[str, Any], directory: Directory) -> set[str]:
    return _users_with_role("manager", directory) | _ids(
        data.get("projectManagerId"), data.get("managerId")
    )


@register_role("executive", "admin")
def _resolve_executives(data: Mapping[str, Any], directory: Directory) -> set[str]:
    return _users_with_role("executive", directory) | _ids(data.get("executiveIds"))


@register_role("supervisor")
def _resolve_supervisor(data: Mapping[str, Any], directory: Directory) -> set[str]:
    technician_id = data.get("assignedTechnicianId")
    if not technician_id:
        return _users_with_role("supervisor", directory)

    supervisor_id = directory.get_direct_supervisor(str(technician_id))
    if not supervisor_id:
        logger.info(
            "No direct supervisor found for technician %s; skipping supervisor",
            technician_id,
        )
        return set()
    return {str(supervisor_id)}


@register_role("client")
def _resolve_client(data: Mapping[str, Any], directory: Directory) -> set[str]:
    return _ids(data.get("clientId"))


@register_role("driver")
def _resolve_driver(data: Mapping[str, Any], directory: Directory) -> set[str]:
    return _ids(data.get("driverId"))


@register_role("employee")
def _resolve_employee(data: Mapping[str, Any], directory: Directory) -> set[str]:
    employee_id = data.get("employeeId")
    if employee_id in (None, ""):
        return set()
    employee = directory.get_employee_by_id(employee_id)
    if employee is None or not employee.user_id:
        return set()
    return {str(employee.user_id)}


@register_role("all_employees")
def _resolve_all_employees(data: Mapping[str, Any], directory: Directory) -> set[str]:
    return {
        str(employee.user_id)
        for employee in directory.list_active_employees()
        if employee.user_id
    }


@register_role("department_manager")
def _resolve_department_manager(
    data: Mapping[str, Any], directory: Directory
) -> set[str]:
    department_id = data.get("departmentId")
    if department_id in (None, ""):
        return set()
    return _ids(directory.get_department_manager(department_id))


class RecipientResolver:
    """Turn the role tokens of a rule into deduplicated recipients."""

    def __init__(self, directory: Directory) -> None:
        self._directory = directory

    def resolve_branches(
        self, event: NotificationEvent, roles: Iterable[str]
    ) -> list[BranchResult]:
        """Resolve each role token independently, capturing failures."""

        results: list[BranchResult] = []
        seen: set[str] = set()
        for role in roles:
            if role in seen:
                continue
            seen.add(role)
            resolver = _ROLE_RESOLVERS.get(role)
            if resolver is None:
                logger.warning("Unknown recipient role: %s", role)
                continue
            try:
                user_ids = resolver(event.data, self._directory)
            except Exception as exc:
                logger.error(
                    "Failed to resolve recipient role %s for event %s",
                    role,
                    event.type,
                    exc_info=True,
                )
                results.append(BranchResult(role=role, error=str(exc)))
                continue
            results.append(BranchResult(role=role, user_ids=frozenset(user_ids)))
        return results

    def resolve_user_ids(
        self, event: NotificationEvent, rule: NotificationRule
    ) -> dict[str, str]:
        """Return the resolved user ids mapped to the first role that matched."""

        labels: dict[str, str] = {}
        for branch in self.resolve_branches(event, rule.recipient_roles):
            for user_id in sorted(branch.user_ids):
                labels.setdefault(user_id, branch.role)
        return labels

    def hydrate(self, labels: Mapping[str, str]) -> list[RecipientInfo]:
        """Load contact details for ``labels`` in one batch lookup."""

        if not labels:
            return []
        users = self._directory.get_users_by_ids(list(labels))
        recipients: list[RecipientInfo] = []
        for user_id, role in labels.items():
            user = users.get(user_id)
            if user is None:
                logger.debug("Recipient %s not found in directory; skipping", user_id)
                continue
            recipients.append(
                RecipientInfo(
                    id=user.id,
                    email=user.email or None,
                    phone=user.phone or None,
                    full_name=user.full_name or None,
                    role=role,
                )
            )
        return recipients

    def resolve(
        self, event: NotificationEvent, rule: NotificationRule
    ) -> list[RecipientInfo]:
        """Return the recipients of ``rule`` for ``event``; never raises."""

        try:
            recipients = self.hydrate(self.resolve_user_ids(event, rule))
        except Exception:
            logger.exception("Error resolving recipients for event %s", event.type)
            return []
        logger.debug(
            "Resolved %s recipients for event type %s", len(recipients), event.type
        )
        return recipients


__all__ = [
    "BranchResult",
    "Directory",
    "ROLE_NAME_MAP",
    "RecipientResolver",
    "register_role",
    "registered_roles",
]
