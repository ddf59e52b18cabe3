"""Aggregated employee daily statistics."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from academy_reports.api.dependencies import SourceLoader, get_app_settings, get_source_loader, reporting_errors
from academy_reports.config import AppSettings
from academy_reports.schemas import DailyStatTotalsSchema
from academy_reports.services.daily_stats import monthly_totals
from academy_reports.services.periods import month_bounds

router = APIRouter()


@router.get("/totals", response_model=DailyStatTotalsSchema)
async def get_monthly_totals(
    year: int = Query(...),
    month: int = Query(..., description="Calendar month, 1-12"),
    employee_id: int | None = Query(default=None, description="Restrict totals to one employee"),
    load_source: SourceLoader = Depends(get_source_loader),
    settings: AppSettings = Depends(get_app_settings),
) -> DailyStatTotalsSchema:
    with reporting_errors():
        start, end = month_bounds(year, month)
        source = await load_source(start, end, employee_id=employee_id)
        totals = monthly_totals(
            source,
            year,
            month,
            employee_id=employee_id,
            include_pending=settings.include_pending_daily_stats,
        )
    return DailyStatTotalsSchema(
        employee_id=employee_id,
        year=year,
        month=month,
        confirmed_customers=totals.confirmed_customers,
        registered_customers=totals.registered_customers,
        targeted_customers=totals.targeted_customers,
        targeted_by_services=totals.targeted_by_services,
        services_sold=totals.services_sold,
        courses_revenue=float(totals.courses_revenue),
        services_revenue=float(totals.services_revenue),
        total_revenue=float(totals.total_revenue),
        total_days=totals.total_days,
    )


__all__ = ["router"]
