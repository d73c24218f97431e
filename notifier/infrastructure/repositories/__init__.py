"""Repository implementations for infrastructure layer."""

from .delivery_log_repository import DeliveryLogRepository
from .employee_repository import DepartmentRepository, EmployeeRepository
from .notification_repository import NotificationRepository
from .notification_rule_repository import NotificationRuleRepository
from .preference_repository import NotificationPreferenceRepository
from .user_repository import RoleRepository, UserRepository

__all__ = [
    "DeliveryLogRepository",
    "DepartmentRepository",
    "EmployeeRepository",
    "NotificationPreferenceRepository",
    "NotificationRepository",
    "NotificationRuleRepository",
    "RoleRepository",
    "UserRepository",
]
