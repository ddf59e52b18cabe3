"""Async engine and per-request reporting sessions."""

from __future__ import annotations

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from academy_reports.config import get_settings

_settings = get_settings()
_engine: AsyncEngine = create_async_engine(_settings.database_url, pool_pre_ping=True)
_session_factory = async_sessionmaker(bind=_engine, expire_on_commit=False, class_=AsyncSession)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield a session whose reads share one transaction.

    Every query of a report runs inside the same transaction, so a request
    never mixes rows from before and after a concurrent write.
    """

    async with _session_factory() as session:
        async with session.begin():
            yield session


__all__ = ["get_db", "_engine", "_session_factory"]
