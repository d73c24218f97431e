"""Utility helpers for sending transactional email notifications via SendGrid."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail

from notifier.config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailResult:
    """Outcome of a single transactional email send."""

    success: bool
    message_id: str | None = None
    error: str | None = None
    skipped: bool = False


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                field = item.get("field")
                if message and field:
                    messages.append(f"{message} (field: {field})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _describe_sendgrid_exception(exc: Exception) -> str:
    """Log a SendGrid API error and return a short description of it."""

    status_code = getattr(exc, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(exc, "body", None))

    if status_code and details:
        logger.error(
            "SendGrid API request failed with status %s: %s", status_code, details
        )
        return f"SendGrid error {status_code}: {details}"
    if status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
        return f"SendGrid error {status_code}"
    if details:
        logger.error("SendGrid API request failed: %s", details)
        return details
    logger.exception("Error sending email via SendGrid: %s", exc)
    return str(exc) or exc.__class__.__name__


def _describe_unsuccessful_response(response: Any) -> str:
    """Log details from an unsuccessful SendGrid response object."""

    status_code = getattr(response, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(response, "body", None))

    if details:
        logger.error("SendGrid API responded with status %s: %s", status_code, details)
        return f"SendGrid responded with status {status_code}: {details}"
    logger.error("SendGrid API responded with status %s", status_code)
    return f"SendGrid responded with status {status_code}"


def _extract_message_id(response: Any) -> str | None:
    headers = getattr(response, "headers", None)
    if not headers:
        return None
    try:
        return headers.get("X-Message-Id") or headers.get("x-message-id")
    except AttributeError:
        return None


def _build_client(settings: Settings) -> SendGridAPIClient:
    client = SendGridAPIClient(settings.sendgrid_api_key)
    client.client.timeout = settings.email_timeout_seconds
    return client


def send_transactional_email(
    to: str,
    subject: str,
    html_body: str,
    *,
    settings: Settings | None = None,
) -> EmailResult:
    """Send an email using the configured SendGrid credentials.

    Never raises: missing credentials produce a ``skipped`` result and provider
    failures a result carrying the error description.
    """

    settings = settings or get_settings()
    if not settings.email_enabled:
        logger.warning("SendGrid configuration incomplete; skipping email to %s", to)
        return EmailResult(
            success=False, error="Email provider not configured", skipped=True
        )

    message = Mail(
        from_email=From(settings.sendgrid_sender, settings.sendgrid_sender_name),
        to_emails=to,
        subject=subject,
        html_content=html_body,
    )

    try:
        response = _build_client(settings).send(message)
    except Exception as exc:
        return EmailResult(success=False, error=_describe_sendgrid_exception(exc))

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        return EmailResult(success=False, error=_describe_unsuccessful_response(response))

    message_id = _extract_message_id(response)
    logger.debug("Email sent to %s (message id %s)", to, message_id)
    return EmailResult(success=True, message_id=message_id)


def render_notification_email(
    *,
    recipient_name: str | None,
    title: str,
    message: str,
    action_url: str | None,
    client_url: str = "",
) -> str:
    """Return the HTML body used for notification emails."""

    greeting = escape(recipient_name or "there")
    parts = [
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">',
        f'<h2 style="color: #1f2937;">{escape(title)}</h2>',
        f"<p>Hi {greeting},</p>",
        f'<p style="line-height: 1.5;">{escape(message)}</p>',
    ]
    if action_url:
        link = escape(f"{client_url.rstrip('/')}{action_url}", quote=True)
        parts.append(
            '<p style="margin: 24px 0;">'
            f'<a href="{link}" style="background-color: #2563eb; color: #ffffff; '
            'padding: 10px 18px; border-radius: 4px; text-decoration: none;">'
            "View Details</a></p>"
        )
    parts.append(
        '<p style="color: #6b7280; font-size: 12px;">'
        "You are receiving this email because of your notification settings.</p>"
    )
    parts.append("</div>")
    return "".join(parts)


__all__ = ["EmailResult", "render_notification_email", "send_transactional_email"]
