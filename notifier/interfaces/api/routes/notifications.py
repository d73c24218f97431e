"""Endpoints and websocket handler for user notifications."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Depends,
    HTTPException,
    Query,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from sqlalchemy.orm import Session

from notifier.application.use_cases.notifications import (
    NotificationDispatcher,
    PreferenceChange,
    count_unread,
    delete_notification,
    get_dispatcher,
    get_notification,
    get_notification_stats,
    list_notifications,
    list_preferences,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    update_preferences,
)
from notifier.domain.entities import (
    Notification,
    NotificationEvent,
    NotificationFilters,
    User,
)
from notifier.infrastructure.database import SessionLocal, get_db
from notifier.infrastructure.notifications import notification_manager, serialize_notification
from notifier.infrastructure.repositories import NotificationRepository
from notifier.interfaces.api.dependencies import (
    get_current_active_user,
    require_admin,
    resolve_current_user,
)
from notifier.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationPageRead,
    NotificationRead,
    NotificationStatsRead,
    NotificationTriggerRequest,
    NotificationTriggerResponse,
    PreferenceRead,
    PreferenceUpdateRequest,
    UnreadCountRead,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_notification_dispatcher() -> NotificationDispatcher:
    return get_dispatcher()


def _to_read_model(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _not_found(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("", response_model=NotificationPageRead)
def list_user_notifications(
    category: str | None = None,
    priority: str | None = None,
    read: bool | None = None,
    type: str | None = Query(default=None, alias="type"),
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationPageRead:
    """Return the authenticated user's notifications, newest first."""

    filters = NotificationFilters(
        category=category,
        priority=priority,
        read=read,
        type=type,
        start_date=start_date,
        end_date=end_date,
    )
    try:
        result = list_notifications(
            db, user_id=current_user.id, filters=filters, page=page, limit=limit
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return NotificationPageRead(
        notifications=[_to_read_model(item) for item in result.notifications],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
        has_more=result.has_more,
    )


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountRead:
    return UnreadCountRead(unread_count=count_unread(db, user_id=current_user.id))


@router.get("/stats", response_model=NotificationStatsRead)
def notification_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationStatsRead:
    stats = get_notification_stats(db, user_id=current_user.id)
    return NotificationStatsRead.model_validate(stats)


@router.get("/preferences", response_model=list[PreferenceRead])
def read_preferences(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[PreferenceRead]:
    preferences = list_preferences(db, user_id=current_user.id)
    return [PreferenceRead.model_validate(item) for item in preferences]


@router.put("/preferences", response_model=list[PreferenceRead])
def replace_preferences(
    payload: PreferenceUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[PreferenceRead]:
    """Create or update the given category/channel preferences."""

    changes = [
        PreferenceChange(category=item.category, channel=item.channel, enabled=item.enabled)
        for item in payload.preferences
    ]
    try:
        preferences = update_preferences(db, user_id=current_user.id, changes=changes)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [PreferenceRead.model_validate(item) for item in preferences]


@router.patch("/read-all", response_model=MarkAllReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    return MarkAllReadResponse(
        updated=mark_all_notifications_as_read(db, user_id=current_user.id)
    )


@router.post(
    "/trigger",
    response_model=NotificationTriggerResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
def trigger_notification(
    payload: NotificationTriggerRequest,
    background_tasks: BackgroundTasks,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
    current_user: User = Depends(require_admin),
) -> NotificationTriggerResponse:
    """Emit an event manually; the dispatch runs after the response is sent."""

    data: dict[str, Any] = {"triggeredBy": current_user.id, **payload.data}
    event = NotificationEvent.from_payload(payload.type, data)
    background_tasks.add_task(dispatcher.run, event)
    logger.info("Notification event %s triggered by %s", payload.type, current_user.id)
    return NotificationTriggerResponse(accepted=True, type=payload.type)


@router.get("/{notification_id}", response_model=NotificationRead)
def read_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    try:
        notification = get_notification(
            db, user_id=current_user.id, notification_id=notification_id
        )
    except ValueError as exc:
        raise _not_found(exc) from exc
    return _to_read_model(notification)


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    try:
        notification = mark_notification_as_read(
            db, user_id=current_user.id, notification_id=notification_id
        )
    except ValueError as exc:
        raise _not_found(exc) from exc
    return _to_read_model(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        delete_notification(db, user_id=current_user.id, notification_id=notification_id)
    except ValueError as exc:
        raise _not_found(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket endpoint that streams notifications to the authenticated user."""

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=1008)
        return

    session = SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Inactive user")
        repository = NotificationRepository(session)
        pending = repository.list_for_user(
            user.id, NotificationFilters(read=False), page=1, limit=50
        ).notifications
        unread = repository.count_unread(user.id)
    except HTTPException:
        await websocket.close(code=1008)
        return
    except Exception:
        logger.exception("Failed to open notification websocket")
        await websocket.close(code=1011)
        return
    finally:
        session.close()

    await notification_manager.connect(user.id, websocket)
    try:
        await websocket.send_json(
            {
                "type": "init",
                "data": {
                    "notifications": [serialize_notification(item) for item in pending],
                    "unread_count": unread,
                },
            }
        )
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "mark-read":
                ids = message.get("ids", [])
                if not isinstance(ids, list):
                    continue
                ack_session = SessionLocal()
                try:
                    repository = NotificationRepository(ack_session)
                    for notification_id in ids:
                        repository.mark_as_read(str(notification_id), user.id)
                    unread = repository.count_unread(user.id)
                finally:
                    ack_session.close()
                await websocket.send_json(
                    {"type": "unread-count", "data": {"unread_count": unread}}
                )
    except WebSocketDisconnect:
        notification_manager.disconnect(user.id, websocket)
    except Exception:
        notification_manager.disconnect(user.id, websocket)
        raise


__all__ = ["get_notification_dispatcher", "router"]
