"""ORM models used by the application infrastructure."""

from .delivery_log import DeliveryLogModel
from .employee import DepartmentModel, EmployeeModel
from .notification import NotificationModel
from .notification_preference import NotificationPreferenceModel
from .notification_rule import NotificationRuleModel
from .role import RoleModel
from .user import UserModel, user_role_table

__all__ = [
    "DeliveryLogModel",
    "DepartmentModel",
    "EmployeeModel",
    "NotificationModel",
    "NotificationPreferenceModel",
    "NotificationRuleModel",
    "RoleModel",
    "UserModel",
    "user_role_table",
]
