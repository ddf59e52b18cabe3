"""Create missing reporting tables at startup."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

import academy_reports.models  # noqa: F401  registers every table on Base.metadata
from academy_reports.db.base import Base
from academy_reports.db.session import _engine

logger = logging.getLogger(__name__)


async def init_database() -> None:
    """Run ``create_all`` for every mapped table; Alembic owns later changes."""

    try:
        async with _engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError:
        logger.exception("Failed to initialise database schema")
        raise
    logger.info("Database schema ready (%d tables)", len(Base.metadata.tables))


__all__ = ["init_database"]
