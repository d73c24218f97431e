import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notifier.application.use_cases.notifications import shutdown_dispatcher
from notifier.config import get_settings
from notifier.infrastructure.database import engine, initialize_database
from notifier.infrastructure.notifications import notification_publisher
from notifier.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release the worker pools on shutdown."""

    initialize_database()
    notification_publisher.bind_loop(asyncio.get_running_loop())
    yield
    notification_publisher.bind_loop(None)
    shutdown_dispatcher(wait=True)
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title="Field Service Notifications", lifespan=lifespan)

    allowed_origins = [settings.client_url] if settings.client_url else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=bool(settings.client_url),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
