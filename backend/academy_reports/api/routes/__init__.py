"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .daily_stats import router as daily_stats_router
from .reports import router as reports_router
from .targets import router as targets_router

api_router = APIRouter()
api_router.include_router(reports_router, prefix="/reports", tags=["reports"])
api_router.include_router(targets_router, prefix="/targets", tags=["targets"])
api_router.include_router(daily_stats_router, prefix="/daily-stats", tags=["daily-stats"])

__all__ = ["api_router"]
