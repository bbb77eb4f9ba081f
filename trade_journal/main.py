"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trade_journal.api.routes import api_router
from trade_journal.config import AppSettings, get_settings
from trade_journal.core.logging import setup_logging
from trade_journal.core.telemetry import setup_telemetry

logger = logging.getLogger(__name__)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the application with routes, CORS and optional telemetry."""

    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        """Return service readiness metadata."""

        return {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "timezone": settings.timezone,
        }

    app.include_router(api_router)
    setup_telemetry(app, settings)
    logger.debug("Settings: %s", settings.dict_for_logging())
    return app


app = create_app()

__all__ = ["app", "create_app"]
