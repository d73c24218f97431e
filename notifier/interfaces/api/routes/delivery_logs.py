"""Administrative endpoint for auditing notification deliveries."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from notifier.application.use_cases.delivery_logs import list_delivery_logs
from notifier.domain.entities import User
from notifier.infrastructure.database import get_db
from notifier.interfaces.api.dependencies import require_admin
from notifier.interfaces.api.schemas import DeliveryLogRead

router = APIRouter(prefix="/delivery-logs", tags=["delivery-logs"])


@router.get("", response_model=list[DeliveryLogRead])
def list_logs(
    notification_id: str | None = None,
    user_id: str | None = None,
    channel: str | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> list[DeliveryLogRead]:
    """Return delivery logs, newest first."""

    try:
        logs = list_delivery_logs(
            db,
            notification_id=notification_id,
            user_id=user_id,
            channel=channel,
            status=status_filter,
            skip=skip,
            limit=limit,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return [DeliveryLogRead.model_validate(log) for log in logs]


__all__ = ["router"]
