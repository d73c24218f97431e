from fastapi import FastAPI

from .delivery_logs import router as delivery_logs_router
from .notification_rules import router as notification_rules_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(notifications_router)
    app.include_router(notification_rules_router)
    app.include_router(delivery_logs_router)
