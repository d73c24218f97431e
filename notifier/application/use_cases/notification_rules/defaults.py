"""Default notification rule catalogue and the seeding use case."""

from __future__ import annotations

import logging
from typing import NamedTuple

from sqlalchemy.orm import Session

from notifier.domain.entities import CHANNEL_EMAIL, CHANNEL_IN_APP, NotificationRule
from notifier.infrastructure.repositories import NotificationRuleRepository

logger = logging.getLogger(__name__)

EMAIL = (CHANNEL_EMAIL,)
IN_APP = (CHANNEL_IN_APP,)
ALL = (CHANNEL_EMAIL, CHANNEL_IN_APP)

MANAGEMENT = ("manager", "executive")


class DefaultRule(NamedTuple):
    category: str
    event_type: str
    description: str
    priority: str
    roles: tuple[str, ...]
    channels: tuple[str, ...]


DEFAULT_RULES: tuple[DefaultRule, ...] = (
    # Authentication & security
    DefaultRule("system", "2fa_code", "2FA Code", "high", ("user",), EMAIL),
    DefaultRule("system", "password_reset_request", "Password Reset Request", "high", ("user",), EMAIL),
    DefaultRule("system", "password_changed", "Password Changed Successfully", "medium", ("user",), ALL),
    DefaultRule("system", "new_account_created", "New Account Created", "medium", ("user",), ALL),
    DefaultRule("system", "password_setup_link", "Password Setup Link (New User)", "high", ("user",), EMAIL),
    DefaultRule("system", "account_locked", "Account Locked", "high", ("user", "admin"), EMAIL),
    # Jobs
    DefaultRule("job", "job_assigned", "Job Assigned to Technician", "high", ("assigned_technician", "supervisor"), ALL),
    DefaultRule("job", "job_status_changed", "Job Status Changed", "medium", ("project_manager",), ALL),
    DefaultRule("job", "job_started", "Job Started", "medium", ("client", "project_manager", "executive"), ALL),
    DefaultRule("job", "job_completed", "Job Completed", "medium", ("client", "project_manager", "executive"), ALL),
    DefaultRule("job", "job_overdue", "Job Overdue", "high", ("manager", "technician", "executive"), ALL),
    DefaultRule("job", "job_cancelled", "Job Cancelled", "medium", ("executive",), IN_APP),
    DefaultRule("job", "job_site_notes_added", "Job Site Notes Added", "low", ("assigned_technician", "project_manager"), ALL),
    DefaultRule("job", "job_cost_exceeds_budget", "Job Cost Exceeds Budget", "high", ("project_manager", "executive"), ALL),
    # Bids
    DefaultRule("job", "bid_created", "Bid Created", "medium", MANAGEMENT, ALL),
    DefaultRule("job", "bid_sent_to_client", "Bid Sent to Client", "medium", ("client",), EMAIL),
    DefaultRule("job", "bid_expired", "Bid Expired", "medium", MANAGEMENT, ALL),
    DefaultRule("job", "bid_won", "Bid Won", "high", MANAGEMENT, ALL),
    DefaultRule("job", "bid_requires_approval", "Bid Requires Approval", "high", MANAGEMENT, ALL),
    # Invoicing & payments
    DefaultRule("financial", "invoice_sent", "Invoice Sent to Client", "medium", ("client",), EMAIL),
    DefaultRule("financial", "payment_received_full", "Payment Received (Full)", "medium", ("client",), EMAIL),
    DefaultRule("financial", "payment_received_partial", "Payment Received (Partial)", "medium", ("client",), EMAIL),
    DefaultRule("financial", "invoice_due_tomorrow", "Invoice Due Tomorrow", "high", ("client", "project_manager", "executive"), ALL),
    DefaultRule("financial", "invoice_overdue_1day", "Invoice Overdue (1 day)", "high", ("client", "project_manager", "executive"), ALL),
    DefaultRule("financial", "invoice_overdue_7days", "Invoice Overdue (7 days)", "high", ("client", "project_manager", "executive"), ALL),
    DefaultRule("financial", "invoice_overdue_30days", "Invoice Overdue (30 days)", "high", ("client", "project_manager", "executive"), ALL),
    DefaultRule("financial", "invoice_cancelled", "Invoice Cancelled", "medium", ("client",), EMAIL),
    # Dispatch
    DefaultRule("dispatch", "technician_assigned_to_dispatch", "Technician Assigned to Dispatch", "high", ("assigned_technician",), ALL),
    DefaultRule("dispatch", "dispatch_reassigned", "Dispatch Reassigned", "high", ("assigned_technician",), ALL),
    # Timesheets
    DefaultRule("timesheet", "timesheet_approved", "Timesheet Approved", "medium", ("employee",), ALL),
    DefaultRule("timesheet", "timesheet_rejected", "Timesheet Rejected", "high", ("employee",), ALL),
    DefaultRule("timesheet", "clock_reminder", "Clock in/out Reminder (If pending)", "medium", ("employee",), ALL),
    DefaultRule("timesheet", "timesheet_resubmitted", "Timesheet Resubmitted After Rejection", "medium", ("department_manager", "executive"), IN_APP),
    # Expenses
    DefaultRule("expense", "job_budget_exceeded", "Job Budget Exceeded", "high", ("project_manager", "executive"), ALL),
    # Fleet
    DefaultRule("fleet", "vehicle_checked_out", "Vehicle Checked Out", "low", ("project_manager",), IN_APP),
    DefaultRule("fleet", "vehicle_checked_in", "Vehicle Checked In", "low", ("project_manager",), IN_APP),
    DefaultRule("fleet", "maintenance_due_7days", "Vehicle Maintenance Due (7 days)", "medium", ("driver", "manager"), IN_APP),
    DefaultRule("fleet", "maintenance_due_3days", "Vehicle Maintenance Due (3 days)", "high", ("driver", "manager"), ALL),
    DefaultRule("fleet", "maintenance_overdue", "Vehicle Maintenance Overdue", "high", ("driver", "manager", "executive"), ALL),
    DefaultRule("fleet", "safety_inspection_required", "Safety Inspection Required", "high", MANAGEMENT, ALL),
    DefaultRule("fleet", "safety_inspection_expired", "Safety Inspection Expired", "high", MANAGEMENT, ALL),
    DefaultRule("fleet", "safety_inspection_failed", "Safety Inspection Failed", "high", MANAGEMENT, ALL),
    DefaultRule("fleet", "driver_reassigned", "Driver Reassigned to Vehicle", "medium", ("driver",), ALL),
    DefaultRule("fleet", "vehicle_registration_expiring", "Vehicle Registration Expiring", "high", MANAGEMENT, ALL),
    DefaultRule("fleet", "vehicle_insurance_expiring", "Vehicle Insurance Expiring", "high", MANAGEMENT, ALL),
    # Inventory
    DefaultRule("inventory", "low_stock_warning", "Low Stock Warning (At Reorder Level)", "high", MANAGEMENT, IN_APP),
    DefaultRule("inventory", "out_of_stock", "Out of Stock Alert", "high", MANAGEMENT, ALL),
    DefaultRule("inventory", "stock_reordered", "Stock Reordered", "medium", MANAGEMENT, ALL),
    DefaultRule("inventory", "purchase_order_created", "Purchase Order Created", "medium", MANAGEMENT, IN_APP),
    DefaultRule("inventory", "purchase_order_approved", "Purchase Order Approved", "medium", ("manager",), IN_APP),
    DefaultRule("inventory", "purchase_order_received_full", "Purchase Order Received (Full)", "medium", MANAGEMENT, IN_APP),
    DefaultRule("inventory", "purchase_order_received_partial", "Purchase Order Received (Partial)", "medium", MANAGEMENT, IN_APP),
    DefaultRule("inventory", "purchase_order_delayed", "Purchase Order Delayed", "medium", MANAGEMENT, IN_APP),
    DefaultRule("inventory", "item_allocated_to_job", "Item Allocated to Job", "low", MANAGEMENT, IN_APP),
    # Team & HR
    DefaultRule("system", "new_employee_onboarded", "New Employee Onboarded", "medium", ("manager",), IN_APP),
    DefaultRule("system", "performance_review_due", "Performance Review Due", "medium", ("manager",), IN_APP),
    # Safety & compliance
    DefaultRule("safety", "safety_incident_reported", "Safety Incident Reported", "high", MANAGEMENT, ALL),
    DefaultRule("safety", "compliance_case_opened", "Compliance Case Opened", "high", MANAGEMENT, IN_APP),
    DefaultRule("safety", "compliance_case_resolved", "Compliance Case Resolved", "medium", MANAGEMENT, IN_APP),
    DefaultRule("safety", "employee_suspended", "Employee Suspended", "high", ("employee", "manager", "executive"), ALL),
)


def seed_default_rules(session: Session, *, overwrite: bool = False) -> tuple[int, int]:
    """Insert the default catalogue; return ``(created, updated)`` counts.

    Event types that already have a rule are left untouched unless
    ``overwrite`` is set, in which case their first rule is reset to the
    default values.
    """

    repository = NotificationRuleRepository(session)
    created = updated = 0
    for default in DEFAULT_RULES:
        existing = repository.list(event_type=default.event_type, limit=1)
        if existing and not overwrite:
            continue
        rule = NotificationRule(
            id=existing[0].id if existing else None,
            event_type=default.event_type,
            category=default.category,
            priority=default.priority,
            recipient_roles=list(default.roles),
            channels=list(default.channels),
            conditions=existing[0].conditions if existing else None,
            enabled=True,
            description=default.description,
        )
        if existing:
            repository.update(rule)
            updated += 1
        else:
            repository.create(rule)
            created += 1
    logger.info("Seeded notification rules: %s created, %s updated", created, updated)
    return created, updated


__all__ = ["DEFAULT_RULES", "DefaultRule", "seed_default_rules"]
