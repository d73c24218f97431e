"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from notifier.domain.entities import (
    Notification,
    NotificationFilters,
    NotificationPage,
    NotificationStats,
)
from notifier.infrastructure.models import NotificationModel
from notifier.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get_for_user(self, notification_id: str, user_id: str) -> Notification | None:
        model = self._get_visible_model(notification_id, user_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: str,
        filters: NotificationFilters | None = None,
        *,
        page: int = 1,
        limit: int = 20,
    ) -> NotificationPage:
        query = self._apply_filters(self._visible_query(user_id), filters)
        total = query.count()
        page = max(page, 1)
        models = (
            query.order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return NotificationPage(
            notifications=[self._to_entity(model) for model in models],
            total=total,
            page=page,
            limit=limit,
        )

    def count_unread(self, user_id: str) -> int:
        return (
            self._visible_query(user_id)
            .filter(NotificationModel.read.is_(False))
            .count()
        )

    def mark_as_read(self, notification_id: str, user_id: str) -> Notification | None:
        model = self._get_visible_model(notification_id, user_id)
        if model is None:
            return None
        if not model.read:
            model.read = True
            model.read_at = ensure_app_naive_datetime(now_in_app_timezone())
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(self, user_id: str) -> int:
        updated = (
            self._visible_query(user_id)
            .filter(NotificationModel.read.is_(False))
            .update(
                {
                    NotificationModel.read: True,
                    NotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    ),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def soft_delete(self, notification_id: str, user_id: str) -> bool:
        model = self._get_visible_model(notification_id, user_id)
        if model is None:
            return False
        model.deleted_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.commit()
        return True

    def stats(self, user_id: str) -> NotificationStats:
        base = self._visible_query(user_id)
        total = base.count()
        unread = base.filter(NotificationModel.read.is_(False)).count()
        by_category = self._count_by(user_id, NotificationModel.category)
        by_priority = self._count_by(user_id, NotificationModel.priority)
        since = ensure_app_naive_datetime(now_in_app_timezone() - timedelta(hours=24))
        recent = base.filter(NotificationModel.created_at >= since).count()
        return NotificationStats(
            total_notifications=total,
            unread_count=unread,
            by_category=by_category,
            by_priority=by_priority,
            recent_count=recent,
        )

    def clean_old_notifications(self, days_to_keep: int) -> int:
        """Soft delete notifications older than ``days_to_keep`` days."""

        now = now_in_app_timezone()
        cutoff = ensure_app_naive_datetime(now - timedelta(days=days_to_keep))
        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.deleted_at.is_(None))
            .filter(NotificationModel.created_at < cutoff)
            .update(
                {NotificationModel.deleted_at: ensure_app_naive_datetime(now)},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def _count_by(self, user_id: str, column) -> dict[str, int]:
        rows: Sequence = (
            self.session.query(column, func.count(NotificationModel.id))
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.deleted_at.is_(None))
            .group_by(column)
            .all()
        )
        return {key: count for key, count in rows}

    def _visible_query(self, user_id: str) -> Query:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.deleted_at.is_(None))
        )

    def _get_visible_model(
        self, notification_id: str, user_id: str
    ) -> NotificationModel | None:
        return (
            self._visible_query(user_id)
            .filter(NotificationModel.id == notification_id)
            .first()
        )

    @staticmethod
    def _apply_filters(query: Query, filters: NotificationFilters | None) -> Query:
        if filters is None:
            return query
        if filters.category:
            query = query.filter(NotificationModel.category == filters.category)
        if filters.priority:
            query = query.filter(NotificationModel.priority == filters.priority)
        if filters.read is not None:
            query = query.filter(NotificationModel.read.is_(filters.read))
        if filters.type:
            query = query.filter(NotificationModel.type == filters.type)
        if filters.start_date is not None:
            query = query.filter(
                NotificationModel.created_at
                >= ensure_app_naive_datetime(filters.start_date)
            )
        if filters.end_date is not None:
            query = query.filter(
                NotificationModel.created_at
                <= ensure_app_naive_datetime(filters.end_date)
            )
        return query

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        if notification.id is not None:
            model.id = notification.id
        model.created_at = ensure_app_naive_datetime(
            notification.created_at
        ) or ensure_app_naive_datetime(now_in_app_timezone())
        model.user_id = notification.user_id
        model.category = notification.category
        model.type = notification.type
        model.title = notification.title
        model.message = notification.message
        model.short_message = notification.short_message
        model.priority = notification.priority
        model.read = notification.read
        model.read_at = ensure_app_naive_datetime(notification.read_at)
        model.related_entity_type = notification.related_entity_type
        model.related_entity_id = notification.related_entity_id
        model.related_entity_name = notification.related_entity_name
        model.action_url = notification.action_url
        model.created_by = notification.created_by
        model.additional_notes = notification.additional_notes
        model.deleted_at = ensure_app_naive_datetime(notification.deleted_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            category=model.category,
            type=model.type,
            title=model.title,
            message=model.message,
            short_message=model.short_message,
            priority=model.priority,
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
            related_entity_type=model.related_entity_type,
            related_entity_id=model.related_entity_id,
            related_entity_name=model.related_entity_name,
            action_url=model.action_url,
            created_by=model.created_by,
            additional_notes=model.additional_notes,
            deleted_at=ensure_app_timezone(model.deleted_at),
        )


__all__ = ["NotificationRepository"]
