"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the structured JSON envelope
    - CORS configured from settings (not hardcoded)
    - The process clock is started at import, before the first request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered in one call
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, users, welcome
from app.config import get_settings
from app.core.uptime import process_clock
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"{settings.app_name} started "
        f"({process_clock.uptime():.3f}s after process start)",
    )
    yield
    logger.info(
        f"{settings.app_name} shutting down after {process_clock.uptime():.1f}s",
    )


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(welcome.router)
app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
