"""Fan-out of business events into in-app notifications, emails and delivery logs."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Mapping, Sequence

from sqlalchemy.orm import Session

from notifier.config import Settings, get_settings
from notifier.domain.entities import (
    CATEGORY_SYSTEM,
    CHANNEL_EMAIL,
    CHANNEL_IN_APP,
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_SENT,
    DELIVERY_STATUS_SKIPPED,
    PRIORITY_MEDIUM,
    DeliveryLog,
    Notification,
    NotificationEvent,
    NotificationRule,
    RecipientInfo,
)
from notifier.infrastructure.database import SessionLocal
from notifier.infrastructure.directory import UserDirectory
from notifier.infrastructure.email import (
    EmailResult,
    render_notification_email,
    send_transactional_email,
)
from notifier.infrastructure.notifications import (
    NotificationPublisher,
    notification_publisher,
)
from notifier.infrastructure.repositories import (
    DeliveryLogRepository,
    NotificationPreferenceRepository,
    NotificationRepository,
    NotificationRuleRepository,
)
from notifier.utils import now_in_app_timezone

from .composer import ComposedMessage, compose, compose_fallback
from .conditions import evaluate_conditions
from .preferences import PreferenceGate, PreferenceStore
from .recipients import Directory, RecipientResolver

logger = logging.getLogger(__name__)

EmailSender = Callable[[str, str, str], EmailResult]

# In-app rows are written first so email log rows can reference them.
_CHANNEL_ORDER = {CHANNEL_IN_APP: 0, CHANNEL_EMAIL: 1}


class DispatchState(str, Enum):
    MATCHING = "matching"
    RESOLVING = "resolving"
    COMPOSING = "composing"
    DELIVERING = "delivering"
    LOGGED = "logged"


@dataclass
class DeliveryOutcome:
    """Result of delivering one event to one recipient on one channel."""

    user_id: str
    channel: str
    status: str
    notification_id: str | None = None
    provider_response: str | None = None
    error: str | None = None


@dataclass
class DispatchReport:
    """Summary of a single dispatch run."""

    event_type: str
    state: DispatchState = DispatchState.MATCHING
    matched_rule_ids: list[str] = field(default_factory=list)
    recipient_ids: list[str] = field(default_factory=list)
    notifications_created: int = 0
    outcomes: list[DeliveryOutcome] = field(default_factory=list)
    error: str | None = None

    def outcomes_for(self, channel: str) -> list[DeliveryOutcome]:
        return [outcome for outcome in self.outcomes if outcome.channel == channel]


@dataclass
class _EmailJob:
    recipient: RecipientInfo
    notification_id: str | None


class NotificationDispatcher:
    """Run the MATCHING → RESOLVING → COMPOSING → DELIVERING → LOGGED pipeline.

    ``dispatch`` hands the work to a bounded background pool and returns at
    once; ``run`` executes synchronously and reports what happened. Neither
    ever raises to the caller.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session] = SessionLocal,
        *,
        email_sender: EmailSender | None = None,
        publisher: NotificationPublisher | None = notification_publisher,
        settings: Settings | None = None,
        directory_factory: Callable[[Session], Directory] = UserDirectory,
        preference_store_factory: Callable[
            [Session], PreferenceStore
        ] = NotificationPreferenceRepository,
    ) -> None:
        self._session_factory = session_factory
        self._settings = settings or get_settings()
        self._email_sender = email_sender or self._send_with_sendgrid
        self._publisher = publisher
        self._directory_factory = directory_factory
        self._preference_store_factory = preference_store_factory
        self._lock = threading.Lock()
        self._dispatch_pool: ThreadPoolExecutor | None = None
        self._email_pool: ThreadPoolExecutor | None = None

    # Event intake -------------------------------------------------------

    def dispatch(self, event_type: str, data: Mapping[str, Any] | None = None) -> Future | None:
        """Schedule the event for background processing and return immediately."""

        try:
            event = NotificationEvent.from_payload(event_type, data)
            return self._get_dispatch_pool().submit(self.run, event)
        except Exception:
            logger.exception("Failed to schedule notification event %s", event_type)
            return None

    def run(self, event: NotificationEvent) -> DispatchReport:
        """Process ``event`` synchronously on the calling thread."""

        report = DispatchReport(event_type=event.type)
        try:
            session = self._session_factory()
        except Exception as exc:
            logger.exception("Could not open a session to dispatch %s", event.type)
            report.error = str(exc)
            return report

        try:
            self._run(session, event, report)
        except Exception as exc:
            logger.exception(
                "Notification dispatch for %s aborted in state %s",
                event.type,
                report.state.value,
            )
            report.error = str(exc)
        finally:
            session.close()
        return report

    def shutdown(self, wait: bool = True) -> None:
        """Release the worker pools; they are recreated on the next dispatch."""

        with self._lock:
            pools = (self._dispatch_pool, self._email_pool)
            self._dispatch_pool = None
            self._email_pool = None
        for pool in pools:
            if pool is not None:
                pool.shutdown(wait=wait)

    # Pipeline -----------------------------------------------------------

    def _run(self, session: Session, event: NotificationEvent, report: DispatchReport) -> None:
        report.state = DispatchState.MATCHING
        rules = self._match_rules(session, event)
        report.matched_rule_ids = [rule.id for rule in rules if rule.id]
        if not rules:
            logger.debug("No notification rules matched event %s", event.type)
            report.state = DispatchState.LOGGED
            return

        report.state = DispatchState.RESOLVING
        recipients, channels = self._resolve(session, event, rules)
        report.recipient_ids = [recipient.id for recipient in recipients]

        report.state = DispatchState.COMPOSING
        try:
            composed = compose(event.type, event.data)
        except Exception:
            logger.exception(
                "Could not render message for %s; sending generic content", event.type
            )
            composed = compose_fallback(event.type)
        category, priority = self._classify(event, rules)

        report.state = DispatchState.DELIVERING
        gate = PreferenceGate(self._preference_store_factory(session))
        notifications = NotificationRepository(session)
        email_jobs: list[_EmailJob] = []
        for recipient in recipients:
            notification_id: str | None = None
            for channel in channels.get(recipient.id, []):
                try:
                    allowed = gate.allowed(recipient.id, category, channel)
                except Exception as exc:
                    logger.error(
                        "Preference lookup failed for %s on %s: %s",
                        recipient.id,
                        channel,
                        exc,
                    )
                    report.outcomes.append(
                        DeliveryOutcome(
                            recipient.id, channel, DELIVERY_STATUS_FAILED, error=str(exc)
                        )
                    )
                    continue
                if not allowed:
                    report.outcomes.append(
                        DeliveryOutcome(
                            recipient.id,
                            channel,
                            DELIVERY_STATUS_SKIPPED,
                            notification_id=notification_id,
                            error="Disabled by user preference",
                        )
                    )
                    continue

                if channel == CHANNEL_IN_APP:
                    outcome = self._deliver_in_app(
                        session, notifications, event, recipient, composed, category, priority
                    )
                    report.outcomes.append(outcome)
                    if outcome.status == DELIVERY_STATUS_SENT:
                        notification_id = outcome.notification_id
                        report.notifications_created += 1
                elif not recipient.email:
                    report.outcomes.append(
                        DeliveryOutcome(
                            recipient.id,
                            channel,
                            DELIVERY_STATUS_SKIPPED,
                            notification_id=notification_id,
                            error="Recipient has no email address",
                        )
                    )
                else:
                    email_jobs.append(_EmailJob(recipient, notification_id))

        report.outcomes.extend(self._deliver_emails(email_jobs, composed))

        report.state = DispatchState.LOGGED
        self._write_logs(session, report.outcomes)
        logger.info(
            "Dispatched %s: %s rule(s), %s recipient(s), %s notification(s)",
            event.type,
            len(rules),
            len(recipients),
            report.notifications_created,
        )

    def _match_rules(
        self, session: Session, event: NotificationEvent
    ) -> list[NotificationRule]:
        rules = NotificationRuleRepository(session).list_enabled_for_event(event.type)
        return [
            rule
            for rule in rules
            if rule.enabled and evaluate_conditions(event.data, rule.conditions)
        ]

    def _resolve(
        self,
        session: Session,
        event: NotificationEvent,
        rules: Sequence[NotificationRule],
    ) -> tuple[list[RecipientInfo], dict[str, list[str]]]:
        resolver = RecipientResolver(self._directory_factory(session))
        labels: dict[str, str] = {}
        channels: dict[str, list[str]] = {}
        for rule in rules:
            try:
                rule_labels = resolver.resolve_user_ids(event, rule)
            except Exception:
                logger.exception("Error resolving recipients of rule %s", rule.id)
                continue
            rule_channels = rule.active_channels()
            for user_id, role in rule_labels.items():
                labels.setdefault(user_id, role)
                bucket = channels.setdefault(user_id, [])
                for channel in rule_channels:
                    if channel not in bucket:
                        bucket.append(channel)

        for bucket in channels.values():
            bucket.sort(key=lambda channel: _CHANNEL_ORDER.get(channel, len(_CHANNEL_ORDER)))

        try:
            recipients = resolver.hydrate(labels)
        except Exception:
            logger.exception("Error loading recipients for event %s", event.type)
            recipients = []
        return recipients, channels

    @staticmethod
    def _classify(
        event: NotificationEvent, rules: Sequence[NotificationRule]
    ) -> tuple[str, str]:
        first = rules[0] if rules else None
        category = event.category or (first.category if first else None) or CATEGORY_SYSTEM
        priority = event.priority or (first.priority if first else None) or PRIORITY_MEDIUM
        return category, priority

    # Channels -----------------------------------------------------------

    def _deliver_in_app(
        self,
        session: Session,
        repository: NotificationRepository,
        event: NotificationEvent,
        recipient: RecipientInfo,
        composed: ComposedMessage,
        category: str,
        priority: str,
    ) -> DeliveryOutcome:
        data = event.data
        entity_type = data.get("entityType") or data.get("relatedEntityType")
        entity_id = data.get("entityId") or data.get("relatedEntityId")
        entity_name = data.get("entityName")
        notes = data.get("additionalNotes")
        notification = Notification(
            id=None,
            user_id=recipient.id,
            category=category,
            type=event.type,
            title=composed.title,
            message=composed.message,
            short_message=composed.short_message,
            priority=priority,
            created_at=now_in_app_timezone(),
            related_entity_type=str(entity_type) if entity_type else None,
            related_entity_id=str(entity_id) if entity_id not in (None, "") else None,
            related_entity_name=str(entity_name) if entity_name else None,
            action_url=composed.action_url,
            created_by=event.triggered_by,
            additional_notes=str(notes) if notes else None,
        )
        try:
            saved = repository.create(notification)
        except Exception as exc:
            session.rollback()
            logger.error(
                "Failed to store notification %s for %s: %s", event.type, recipient.id, exc
            )
            return DeliveryOutcome(
                recipient.id, CHANNEL_IN_APP, DELIVERY_STATUS_FAILED, error=str(exc)
            )

        self._push_realtime(repository, saved)
        return DeliveryOutcome(
            recipient.id, CHANNEL_IN_APP, DELIVERY_STATUS_SENT, notification_id=saved.id
        )

    def _push_realtime(self, repository: NotificationRepository, notification: Notification) -> None:
        if self._publisher is None:
            return
        try:
            self._publisher.dispatch(notification)
            if self._publisher.is_connected(notification.user_id):
                self._publisher.dispatch_unread_count(
                    notification.user_id, repository.count_unread(notification.user_id)
                )
        except Exception as exc:
            logger.warning(
                "Realtime push failed for notification %s: %s", notification.id, exc
            )

    def _deliver_emails(
        self, jobs: Sequence[_EmailJob], composed: ComposedMessage
    ) -> list[DeliveryOutcome]:
        if not jobs:
            return []

        pool = self._get_email_pool()
        delay = self._settings.email_send_delay_ms / 1000
        futures: list[tuple[_EmailJob, Future]] = []
        for index, job in enumerate(jobs):
            if index and delay:
                time.sleep(delay)
            html_body = render_notification_email(
                recipient_name=job.recipient.full_name,
                title=composed.title,
                message=composed.message,
                action_url=composed.action_url,
                client_url=self._settings.client_url,
            )
            futures.append(
                (job, pool.submit(self._send_email, job.recipient.email, composed.title, html_body))
            )

        outcomes: list[DeliveryOutcome] = []
        for job, future in futures:
            result: EmailResult = future.result()
            if result.success:
                status = DELIVERY_STATUS_SENT
            elif result.skipped:
                status = DELIVERY_STATUS_SKIPPED
            else:
                status = DELIVERY_STATUS_FAILED
            outcomes.append(
                DeliveryOutcome(
                    job.recipient.id,
                    CHANNEL_EMAIL,
                    status,
                    notification_id=job.notification_id,
                    provider_response=result.message_id,
                    error=result.error,
                )
            )
        return outcomes

    def _send_email(self, to: str, subject: str, html_body: str) -> EmailResult:
        try:
            return self._email_sender(to, subject, html_body)
        except Exception as exc:
            logger.error("Email delivery to %s failed: %s", to, exc)
            return EmailResult(success=False, error=str(exc))

    def _send_with_sendgrid(self, to: str, subject: str, html_body: str) -> EmailResult:
        return send_transactional_email(to, subject, html_body, settings=self._settings)

    # Logging ------------------------------------------------------------

    @staticmethod
    def _write_logs(session: Session, outcomes: Sequence[DeliveryOutcome]) -> None:
        repository = DeliveryLogRepository(session)
        for outcome in outcomes:
            try:
                repository.create(
                    DeliveryLog(
                        id=None,
                        notification_id=outcome.notification_id,
                        user_id=outcome.user_id,
                        channel=outcome.channel,
                        status=outcome.status,
                        provider_response=outcome.provider_response,
                        error_message=outcome.error,
                    )
                )
            except Exception as exc:
                session.rollback()
                logger.error(
                    "Failed to write delivery log for %s on %s: %s",
                    outcome.user_id,
                    outcome.channel,
                    exc,
                )

    # Pools --------------------------------------------------------------

    def _get_dispatch_pool(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._dispatch_pool is None:
                self._dispatch_pool = ThreadPoolExecutor(
                    max_workers=self._settings.dispatch_max_workers,
                    thread_name_prefix="notify-dispatch",
                )
            return self._dispatch_pool

    def _get_email_pool(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._email_pool is None:
                self._email_pool = ThreadPoolExecutor(
                    max_workers=self._settings.email_max_workers,
                    thread_name_prefix="notify-email",
                )
            return self._email_pool


@lru_cache(maxsize=1)
def get_dispatcher() -> NotificationDispatcher:
    """Return the process-wide dispatcher."""

    return NotificationDispatcher()


def shutdown_dispatcher(wait: bool = True) -> None:
    """Stop the shared dispatcher's worker pools if it was ever created."""

    if get_dispatcher.cache_info().currsize:
        get_dispatcher().shutdown(wait=wait)


def notify(event_type: str, data: Mapping[str, Any] | None = None) -> Future | None:
    """Fire-and-forget helper for business code emitting an event."""

    return get_dispatcher().dispatch(event_type, data)


__all__ = [
    "DeliveryOutcome",
    "DispatchReport",
    "DispatchState",
    "NotificationDispatcher",
    "get_dispatcher",
    "notify",
    "shutdown_dispatcher",
]
