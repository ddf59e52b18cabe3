"""Shared FastAPI dependencies for the reporting routes."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Iterator, Protocol

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from academy_reports.config import AppSettings, get_settings
from academy_reports.core.exceptions import InvalidPeriod, UpstreamDataError
from academy_reports.db.session import get_db
from academy_reports.services.sources import FinanceSource
from academy_reports.services.sql_source import load_finance_source


class SourceLoader(Protocol):
    async def __call__(
        self,
        start: date,
        end: date,
        *,
        employee_id: int | None = None,
        include_targets: bool = False,
    ) -> FinanceSource:
        ...


def get_app_settings() -> AppSettings:
    return get_settings()


async def get_source_loader(session: AsyncSession = Depends(get_db)) -> SourceLoader:
    """Return a loader that snapshots reporting data through the request session."""

    async def _load(
        start: date,
        end: date,
        *,
        employee_id: int | None = None,
        include_targets: bool = False,
    ) -> FinanceSource:
        return await load_finance_source(
            session, start, end, employee_id=employee_id, include_targets=include_targets
        )

    return _load


@contextmanager
def reporting_errors() -> Iterator[None]:
    """Translate core errors into HTTP responses."""

    try:
        yield
    except InvalidPeriod as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except UpstreamDataError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


__all__ = ["SourceLoader", "get_app_settings", "get_source_loader", "reporting_errors"]
