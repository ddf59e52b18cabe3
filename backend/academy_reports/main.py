"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI

from academy_reports import __version__
from academy_reports.api.routes import api_router
from academy_reports.config import get_settings
from academy_reports.core.logging import setup_logging
from academy_reports.core.telemetry import setup_telemetry
from academy_reports.db.init import init_database
from academy_reports.db.session import _engine

logger = logging.getLogger(__name__)

settings = get_settings()
setup_logging(settings.log_level)
app = FastAPI(title=settings.app_name, version=__version__)
setup_telemetry(app, settings, engine=_engine)


@app.on_event("startup")
async def startup() -> None:
    """Initialise the database schema when the service boots."""

    logger.info("Starting %s with %s", settings.app_name, settings.dict_for_logging())
    await init_database()


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Return service readiness metadata."""

    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
        "timezone": settings.timezone,
    }


app.include_router(api_router)

__all__ = ["app"]
