"""Static message catalogue keyed by notification event type.

Each entry is a :class:`MessageTemplate` made of literal text and optional
:class:`Clause` fragments. Literal parts are rendered with ``str.format_map``
against the event payload (``{name}`` is the entity name); a clause is only
rendered when every field it ``requires`` is present in the payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from notifier.utils import format_currency, format_day_count, format_long_date


@dataclass(frozen=True)
class Clause:
    """Fragment rendered only when all ``requires`` fields are present."""

    text: str
    requires: tuple[str, ...] = ()
    otherwise: str = ""


Part = Union[str, Clause]


@dataclass(frozen=True)
class MessageTemplate:
    title: str
    message: tuple[Part, ...]
    short: tuple[Part, ...]


DEFAULT_TITLE = "Notification"
DEFAULT_ENTITY_NAME = "Item"

FIELD_FORMATTERS: dict[str, Callable[[Any], str]] = {
    "amount": format_currency,
    "budget": format_currency,
    "currentCost": format_currency,
    "remainingBalance": format_currency,
    "dueDate": format_long_date,
    "daysOverdue": format_day_count,
}

# Values computed from other payload fields before rendering.
DERIVED_FIELDS: dict[str, Callable[[Mapping[str, Any]], Any]] = {
    "clockDirection": lambda data: "out" if data.get("clockType") == "out" else "in",
    "schedule": lambda data: data.get("scheduledTime") or data.get("scheduledDate"),
    "site": lambda data: data.get("location") or data.get("siteAddress"),
    "currentStock": lambda data: 0 if data.get("stockLevel") is None else data.get("stockLevel"),
}


def _template(
    title: str,
    message: Part | tuple[Part, ...],
    short: Part | tuple[Part, ...],
) -> MessageTemplate:
    if not isinstance(message, tuple):
        message = (message,)
    if not isinstance(short, tuple):
        short = (short,)
    return MessageTemplate(title=title, message=message, short=short)


CLIENT = Clause(" for client {clientName}", requires=("clientName",))
FOR_AMOUNT = Clause(" for {amount}", requires=("amount",))
OF_AMOUNT = Clause(" of {amount}", requires=("amount",))
AMOUNT_NOTE = Clause(" (Amount: {amount})", requires=("amount",))
WAS_DUE = Clause(" (was due {dueDate})", requires=("dueDate",))
ON_DUE_DATE = Clause(" on {dueDate}", requires=("dueDate",))
PLATE = Clause(" (Plate: {licensePlate})", requires=("licensePlate",))
MAINTENANCE_TYPE = Clause(": {maintenanceType}", requires=("maintenanceType",))
REASON = Clause(". Reason: {reason}", requires=("reason",))
EXPIRING_ON = Clause(" on {dueDate}", requires=("dueDate",), otherwise=" soon")
SCHEDULED = Clause(" Scheduled: {schedule}.", requires=("schedule",))

DEFAULT_TEMPLATE = _template(
    DEFAULT_TITLE,
    'There is an update regarding "{name}" that requires your attention. '
    "Please log in to review the latest information.",
    "Update: {name}",
)

_AUTH_TEMPLATES: dict[str, MessageTemplate] = {
    "2fa_code": _template(
        "2FA Code",
        Clause(
            "Your two-factor authentication code is: {code}. This code expires in "
            "10 minutes. Do not share it with anyone.",
            requires=("code",),
            otherwise="Your two-factor authentication code has been sent. Please "
            "check your registered device. The code expires in 10 minutes.",
        ),
        "Your 2FA code is ready",
    ),
    "password_reset_request": _template(
        "Password Reset Request",
        "We received a request to reset your T3 Mechanical account password. "
        "Click the button below to create a new password. This link is valid for "
        "1 hour. If you did not request this, you can safely ignore this email and "
        "your password will not change.",
        "Password reset link sent",
    ),
    "password_changed": _template(
        "Password Changed Successfully",
        "Your T3 Mechanical account password was changed successfully. If you made "
        "this change, no action is needed. If you did not change your password, "
        "please contact your administrator immediately to secure your account.",
        "Your password has been changed",
    ),
    "new_account_created": _template(
        "Welcome to T3 Mechanical",
        "Your T3 Mechanical account has been created successfully. You can now "
        "access the platform using your registered email. A separate email has been "
        "sent with instructions to set up your password. If you have questions, "
        "contact your administrator.",
        "Your T3 Mechanical account is ready",
    ),
    "password_setup_link": _template(
        "Set Up Your Password",
        "Your T3 Mechanical account is ready. Please click the button below to set "
        "your password and activate your account. This link is valid for 24 hours. "
        "If you did not expect this, please contact your administrator.",
        "Set up your account password",
    ),
    "account_locked": _template(
        "Account Locked",
        "Your T3 Mechanical account has been temporarily locked due to multiple "
        "failed login attempts. Please contact your administrator to unlock your "
        "account and verify your identity before trying again.",
        "Your account has been locked",
    ),
}

_BUDGET_MESSAGE = (
    'Job "{name}"',
    CLIENT,
    " has exceeded its approved budget.",
    Clause(" Current cost: {currentCost}.", requires=("currentCost",)),
    Clause(" Budget: {budget}.", requires=("budget",)),
    " Please log in to review the cost breakdown and determine whether additional "
    "approval is required before work continues.",
)

_JOB_TEMPLATES: dict[str, MessageTemplate] = {
    "job_assigned": _template(
        "New Job Assigned",
        (
            'You have been assigned to job "{name}"',
            CLIENT,
            ". Please log in to review the full job details, scheduled dates, and "
            "site information before your start date.",
        ),
        "New job assigned: {name}",
    ),
    "job_status_changed": _template(
        "Job Status Updated",
        (
            'The status of job "{name}"',
            CLIENT,
            " has been updated",
            Clause(' from "{oldStatus}"', requires=("oldStatus",)),
            Clause(' to "{newStatus}"', requires=("newStatus",)),
            ". Please log in to review the latest details and any new instructions.",
        ),
        (
            "Job status updated: {name}",
            Clause(" → {newStatus}", requires=("newStatus",)),
        ),
    ),
    "job_started": _template(
        "Job Started",
        (
            'Job "{name}"',
            CLIENT,
            " has officially started. The assigned team is on-site and work has "
            "begun. You will be notified when the job is completed or if any issues "
            "arise.",
        ),
        "Job started: {name}",
    ),
    "job_completed": _template(
        "Job Completed",
        (
            'Job "{name}"',
            CLIENT,
            " has been completed successfully. Please log in to review the final "
            "report and any follow-up actions required before closing.",
        ),
        "Job completed: {name}",
    ),
    "job_overdue": _template(
        "Job Overdue",
        (
            'Job "{name}"',
            CLIENT,
            " is now ",
            Clause("{daysOverdue} overdue", requires=("daysOverdue",), otherwise="overdue"),
            WAS_DUE,
            ". Immediate attention is required. Please log in to review the job "
            "status and take corrective action.",
        ),
        "Job overdue: {name}",
    ),
    "job_cancelled": _template(
        "Job Cancelled",
        (
            'Job "{name}"',
            CLIENT,
            " has been cancelled",
            REASON,
            ". Please log in to review any outstanding tasks, materials, or "
            "commitments tied to this job.",
        ),
        "Job cancelled: {name}",
    ),
    "job_site_notes_added": _template(
        "New Job Site Notes",
        (
            'New site notes have been added to job "{name}"',
            CLIENT,
            Clause(" by {addedBy}", requires=("addedBy",)),
            ". Please review the updated notes before your next visit to ensure you "
            "have the latest site information.",
        ),
        "New site notes: {name}",
    ),
    "job_cost_exceeds_budget": _template(
        "Job Cost Alert", _BUDGET_MESSAGE, "Budget exceeded: {name}"
    ),
    "job_budget_exceeded": _template(
        "Budget Exceeded", _BUDGET_MESSAGE, "Budget exceeded: {name}"
    ),
}

_BID_TEMPLATES: dict[str, MessageTemplate] = {
    "bid_created": _template(
        "New Bid Created",
        (
            'A new bid "{name}"',
            CLIENT,
            AMOUNT_NOTE,
            " has been created and is awaiting review. Please log in to verify the "
            "details and take the appropriate next steps.",
        ),
        "New bid created: {name}",
    ),
    "bid_sent_to_client": _template(
        "Bid Sent to Client",
        (
            'Bid "{name}"',
            CLIENT,
            AMOUNT_NOTE,
            " has been sent to the client for review. You will be notified when the "
            "client responds with an acceptance, revision request, or rejection.",
        ),
        "Bid sent to client: {name}",
    ),
    "bid_requires_approval": _template(
        "Bid Requires Approval",
        (
            'Bid "{name}"',
            CLIENT,
            AMOUNT_NOTE,
            " is pending your approval before it can be sent. Please log in to "
            "review the bid details and either approve it or return it with comments.",
        ),
        "Bid approval required: {name}",
    ),
    "bid_won": _template(
        "Bid Won!",
        (
            'Great news! Bid "{name}"',
            CLIENT,
            AMOUNT_NOTE,
            " has been won and the client has accepted the proposal. Please log in "
            "to begin the job creation and project planning process.",
        ),
        "Bid won: {name}",
    ),
    "bid_expired": _template(
        "Bid Expired",
        (
            'Bid "{name}"',
            CLIENT,
            AMOUNT_NOTE,
            " has expired without a client response",
            Clause(" (expired {dueDate})", requires=("dueDate",)),
            ". Please log in to review the bid and decide whether to renew it, "
            "follow up with the client, or close it.",
        ),
        "Bid expired: {name}",
    ),
}

_OVERDUE_1DAY = _template(
    "Invoice Overdue",
    (
        "Invoice {name}",
        CLIENT,
        FOR_AMOUNT,
        " is 1 day overdue",
        WAS_DUE,
        ". Please follow up with the client immediately to arrange payment.",
    ),
    "Invoice overdue: {name}",
)

_INVOICE_TEMPLATES: dict[str, MessageTemplate] = {
    "invoice_sent": _template(
        "Invoice Sent",
        (
            "Invoice {name}",
            CLIENT,
            FOR_AMOUNT,
            " has been sent",
            Clause(" and is due on {dueDate}", requires=("dueDate",)),
            ". Please log in to track payment status or download a copy of the invoice.",
        ),
        "Invoice sent: {name}",
    ),
    "payment_received_full": _template(
        "Payment Received",
        (
            "Full payment",
            OF_AMOUNT,
            " has been received for invoice {name}",
            CLIENT,
            ". The invoice is now fully settled. Please log in to confirm and close "
            "the invoice.",
        ),
        "Full payment received: {name}",
    ),
    "payment_received_partial": _template(
        "Partial Payment Received",
        (
            "A partial payment",
            OF_AMOUNT,
            " has been received for invoice {name}",
            CLIENT,
            ".",
            Clause(" Remaining balance: {remainingBalance}.", requires=("remainingBalance",)),
            " Please log in to review the payment history and follow up on the "
            "outstanding balance.",
        ),
        "Partial payment received: {name}",
    ),
    "invoice_due_tomorrow": _template(
        "Invoice Due Tomorrow",
        (
            "Invoice {name}",
            CLIENT,
            FOR_AMOUNT,
            " is due tomorrow. Please ensure payment is received on time or contact "
            "the client to arrange settlement.",
        ),
        "Invoice due tomorrow: {name}",
    ),
    "invoice_overdue": _OVERDUE_1DAY,
    "invoice_overdue_1day": _OVERDUE_1DAY,
    "invoice_overdue_7days": _template(
        "Invoice 7 Days Overdue",
        (
            "Invoice {name}",
            CLIENT,
            FOR_AMOUNT,
            " is now 7 days overdue",
            WAS_DUE,
            ". This requires prompt escalation. Please contact the client and "
            "consider formal follow-up procedures.",
        ),
        "Invoice 7 days overdue: {name}",
    ),
    "invoice_overdue_30days": _template(
        "Invoice 30 Days Overdue",
        (
            "Invoice {name}",
            CLIENT,
            FOR_AMOUNT,
            " is 30 days overdue",
            WAS_DUE,
            ". This is a critical overdue notice. Immediate escalation and formal "
            "collections procedures may be required.",
        ),
        "Invoice 30 days overdue: {name}",
    ),
    "invoice_cancelled": _template(
        "Invoice Cancelled",
        (
            "Invoice {name}",
            CLIENT,
            FOR_AMOUNT,
            " has been cancelled",
            REASON,
            ". Please log in to review the cancellation details and any related "
            "outstanding items.",
        ),
        "Invoice cancelled: {name}",
    ),
}

_DISPATCH_TEMPLATES: dict[str, MessageTemplate] = {
    "technician_assigned_to_dispatch": _template(
        "New Dispatch Assignment",
        (
            'You have been assigned to a new dispatch: "{name}".',
            SCHEDULED,
            Clause(" Location: {site}.", requires=("site",)),
            " Please review the dispatch details and prepare before heading out.",
        ),
        "New dispatch assignment: {name}",
    ),
    "dispatch_reassigned": _template(
        "Dispatch Reassigned",
        (
            'Dispatch "{name}" has been reassigned to you.',
            SCHEDULED,
            " Please review your updated schedule and the dispatch details before "
            "heading out.",
        ),
        "Dispatch reassigned: {name}",
    ),
}

_TIMESHEET_TEMPLATES: dict[str, MessageTemplate] = {
    "timesheet_approved": _template(
        "Timesheet Approved",
        (
            'Your timesheet "{name}"',
            Clause(" for period {period}", requires=("period",)),
            Clause(" ({totalHours} hrs)", requires=("totalHours",)),
            " has been approved. Your logged hours have been accepted and recorded. "
            "No further action is needed.",
        ),
        "Timesheet approved: {name}",
    ),
    "timesheet_rejected": _template(
        "Timesheet Rejected",
        (
            'Your timesheet "{name}" has been rejected and requires corrections.',
            Clause(" Reason: {reason}.", requires=("reason",)),
            " Please log in to review the feedback and resubmit with the necessary "
            "changes as soon as possible.",
        ),
        "Timesheet rejected: {name}",
    ),
    "timesheet_resubmitted": _template(
        "Timesheet Resubmitted",
        (
            'Timesheet "{name}"',
            Clause(" from {employeeName}", requires=("employeeName",)),
            " has been corrected and resubmitted for approval. Please log in to "
            "review the changes.",
        ),
        "Timesheet resubmitted: {name}",
    ),
    "clock_reminder": _template(
        "Clock In/Out Reminder",
        "This is a reminder that you have not yet clocked {clockDirection} today. "
        "Please log in and update your timesheet to ensure accurate records. Contact "
        "your supervisor if you are having trouble.",
        "Clock in/out reminder",
    ),
}

_FLEET_TEMPLATES: dict[str, MessageTemplate] = {
    "vehicle_checked_out": _template(
        "Vehicle Checked Out",
        (
            'Vehicle "{name}"',
            PLATE,
            " has been checked out",
            Clause(" by {driverName}", requires=("driverName",)),
            ".",
        ),
        "Vehicle checked out: {name}",
    ),
    "vehicle_checked_in": _template(
        "Vehicle Checked In",
        (
            'Vehicle "{name}"',
            PLATE,
            " has been checked in",
            Clause(" by {driverName}", requires=("driverName",)),
            Clause(" with a mileage of {mileage}", requires=("mileage",)),
            ".",
        ),
        "Vehicle checked in: {name}",
    ),
    "maintenance_due_3days": _template(
        "Maintenance Due in 3 Days",
        (
            'Scheduled maintenance for "{name}"',
            PLATE,
            MAINTENANCE_TYPE,
            " is due in 3 days",
            ON_DUE_DATE,
            ". Please ensure the vehicle is available and any required parts or "
            "service appointments are arranged ahead of time.",
        ),
        "Maintenance due in 3 days: {name}",
    ),
    "maintenance_due_7days": _template(
        "Maintenance Due Soon",
        (
            'Scheduled maintenance for "{name}"',
            PLATE,
            MAINTENANCE_TYPE,
            " is coming up in 7 days",
            ON_DUE_DATE,
            ". This is an advance notice to help you plan for the upcoming service.",
        ),
        "Maintenance due in 7 days: {name}",
    ),
    "maintenance_overdue": _template(
        "Maintenance Overdue",
        (
            'Maintenance for "{name}"',
            PLATE,
            MAINTENANCE_TYPE,
            " is overdue",
            Clause(" since {dueDate}", requires=("dueDate",)),
            ". This vehicle should not be operated until the required maintenance is "
            "completed. Please arrange service immediately.",
        ),
        "Maintenance overdue: {name}",
    ),
    "safety_inspection_required": _template(
        "Safety Inspection Required",
        (
            'A safety inspection is required for vehicle "{name}"',
            PLATE,
            ". Please schedule the inspection immediately to ensure the vehicle "
            "remains compliant and safe to operate.",
        ),
        "Safety inspection required: {name}",
    ),
    "safety_inspection_expired": _template(
        "Safety Inspection Expired",
        (
            'The safety inspection for vehicle "{name}"',
            PLATE,
            " has expired",
            ON_DUE_DATE,
            ". This vehicle cannot be operated until a valid inspection is completed. "
            "Please schedule an inspection immediately.",
        ),
        "Safety inspection expired: {name}",
    ),
    "safety_inspection_failed": _template(
        "Safety Inspection Failed",
        (
            'The safety inspection for vehicle "{name}"',
            PLATE,
            " has failed",
            Clause(": {failureReason}", requires=("failureReason",)),
            ". The vehicle is out of service and must not be operated until all "
            "identified issues are resolved and re-inspected.",
        ),
        "Safety inspection failed: {name}",
    ),
    "driver_reassigned": _template(
        "Driver Reassigned",
        (
            'You have been reassigned to vehicle "{name}"',
            PLATE,
            ". Please review the vehicle details, report any pre-existing damage, and "
            "make sure you are familiar with its condition before operating it.",
        ),
        "Driver reassigned to: {name}",
    ),
    "vehicle_registration_expiring": _template(
        "Vehicle Registration Expiring",
        (
            'The registration for vehicle "{name}"',
            PLATE,
            " is expiring",
            EXPIRING_ON,
            ". Please start the renewal process immediately to avoid operating the "
            "vehicle with an expired registration.",
        ),
        "Registration expiring: {name}",
    ),
    "vehicle_insurance_expiring": _template(
        "Vehicle Insurance Expiring",
        (
            'The insurance policy for vehicle "{name}"',
            PLATE,
            " is expiring",
            EXPIRING_ON,
            ". Please renew the policy immediately to ensure continuous coverage. "
            "Operating an uninsured vehicle is not permitted.",
        ),
        "Insurance expiring: {name}",
    ),
}

_PURCHASE_ORDER = ("Purchase order {name}", Clause(" from {vendorName}", requires=("vendorName",)))

_INVENTORY_TEMPLATES: dict[str, MessageTemplate] = {
    "low_stock_warning": _template(
        "Low Stock Warning",
        (
            'Inventory item "{name}" is running low. Current stock: {currentStock} units',
            Clause(" (reorder level: {reorderLevel})", requires=("reorderLevel",)),
            ". Please initiate a reorder to avoid a stockout that could impact "
            "ongoing jobs.",
        ),
        "Low stock: {name}",
    ),
    "out_of_stock": _template(
        "Out of Stock Alert",
        (
            'Inventory item "{name}" is now OUT OF STOCK',
            Clause(" ({unit})", requires=("unit",)),
            ". This may impact ongoing or upcoming jobs that require this item. "
            "Please initiate an emergency reorder immediately.",
        ),
        "Out of stock: {name}",
    ),
    "stock_reordered": _template(
        "Stock Reordered",
        (
            'A reorder for inventory item "{name}" has been placed',
            Clause(" (quantity: {quantity} units)", requires=("quantity",)),
            Clause(". Expected delivery: {deliveryDate}", requires=("deliveryDate",)),
            ". You will be notified when the stock is received.",
        ),
        "Stock reordered: {name}",
    ),
    "purchase_order_created": _template(
        "Purchase Order Created",
        (*_PURCHASE_ORDER, FOR_AMOUNT, " has been created and is awaiting approval."),
        "Purchase order created: {name}",
    ),
    "purchase_order_approved": _template(
        "Purchase Order Approved",
        (*_PURCHASE_ORDER, FOR_AMOUNT, " has been approved and can be sent to the vendor."),
        "Purchase order approved: {name}",
    ),
    "purchase_order_received_full": _template(
        "Purchase Order Received",
        (*_PURCHASE_ORDER, " has been received in full. Inventory levels have been updated."),
        "Purchase order received: {name}",
    ),
    "purchase_order_received_partial": _template(
        "Purchase Order Partially Received",
        (
            *_PURCHASE_ORDER,
            " has been partially received. Please log in to review the outstanding "
            "items and follow up with the vendor.",
        ),
        "Purchase order partially received: {name}",
    ),
    "purchase_order_delayed": _template(
        "Purchase Order Delayed",
        (
            *_PURCHASE_ORDER,
            " is delayed",
            Clause(". New expected delivery: {deliveryDate}", requires=("deliveryDate",)),
            ". Please review any jobs that depend on these items.",
        ),
        "Purchase order delayed: {name}",
    ),
    "item_allocated_to_job": _template(
        "Item Allocated to Job",
        (
            'Inventory item "{name}"',
            Clause(" ({quantity} units)", requires=("quantity",)),
            " has been allocated",
            Clause(' to job "{jobName}"', requires=("jobName",)),
            ".",
        ),
        "Item allocated: {name}",
    ),
}

_TEAM_TEMPLATES: dict[str, MessageTemplate] = {
    "new_employee_onboarded": _template(
        "New Employee Onboarded",
        (
            '"{name}" has joined the team',
            Clause(" as {position}", requires=("position",)),
            Clause(" in {departmentName}", requires=("departmentName",)),
            ". Please help them get set up and welcome them aboard.",
        ),
        "New employee: {name}",
    ),
    "performance_review_due": _template(
        "Performance Review Due",
        (
            'A performance review for "{name}" is due',
            ON_DUE_DATE,
            ". Please log in to complete the review on time.",
        ),
        "Performance review due: {name}",
    ),
    "safety_incident_reported": _template(
        "Safety Incident Reported",
        (
            'A safety incident has been reported on job "{name}"',
            Clause(" by {reportedBy}", requires=("reportedBy",)),
            Clause(" on {incidentDate}", requires=("incidentDate",)),
            Clause(". Severity: {severity}", requires=("severity",)),
            ". This requires immediate review and response. Please log in to read the "
            "full incident report and initiate the appropriate procedures.",
        ),
        "Safety incident reported: {name}",
    ),
    "compliance_case_opened": _template(
        "Compliance Case Opened",
        (
            'A compliance case "{name}" has been opened',
            Clause(" for {employeeName}", requires=("employeeName",)),
            ". Please log in to review the case details and assign follow-up actions.",
        ),
        "Compliance case opened: {name}",
    ),
    "compliance_case_resolved": _template(
        "Compliance Case Resolved",
        (
            'Compliance case "{name}" has been resolved',
            Clause(". Resolution: {resolution}", requires=("resolution",)),
            ".",
        ),
        "Compliance case resolved: {name}",
    ),
    "employee_suspended": _template(
        "Employee Suspended",
        (
            'Employee "{name}" has been suspended',
            Clause(" effective {effectiveDate}", requires=("effectiveDate",)),
            REASON,
            ". Please log in to review the details, ensure a proper handover of "
            "responsibilities, and follow the required HR procedures.",
        ),
        "Employee suspended: {name}",
    ),
}

MESSAGE_TEMPLATES: dict[str, MessageTemplate] = {
    **_AUTH_TEMPLATES,
    **_JOB_TEMPLATES,
    **_BID_TEMPLATES,
    **_INVOICE_TEMPLATES,
    **_DISPATCH_TEMPLATES,
    **_TIMESHEET_TEMPLATES,
    **_FLEET_TEMPLATES,
    **_INVENTORY_TEMPLATES,
    **_TEAM_TEMPLATES,
}

ACTION_URL_PATTERNS: dict[str, str] = {
    "Job": "/dashboard/jobs/{id}",
    "Bid": "/dashboard/bids/{id}",
    "Invoice": "/dashboard/invoicing/{id}",
    "Timesheet": "/dashboard/timesheets/{id}",
    "Vehicle": "/dashboard/fleet/{id}",
    "Expense": "/dashboard/expenses/{id}",
    "Dispatch": "/dashboard/dispatch",
    "Employee": "/dashboard/team/employees/{id}",
    "Client": "/dashboard/clients/{id}",
    "Inventory": "/dashboard/inventory/{id}",
}
DEFAULT_ACTION_URL = "/dashboard"


def get_template(event_type: str) -> MessageTemplate:
    """Return the template registered for ``event_type`` or the generic one."""

    return MESSAGE_TEMPLATES.get(event_type, DEFAULT_TEMPLATE)


__all__ = [
    "ACTION_URL_PATTERNS",
    "Clause",
    "DEFAULT_ACTION_URL",
    "DEFAULT_ENTITY_NAME",
    "DEFAULT_TEMPLATE",
    "DEFAULT_TITLE",
    "DERIVED_FIELDS",
    "FIELD_FORMATTERS",
    "MESSAGE_TEMPLATES",
    "MessageTemplate",
    "get_template",
]
