"""Strategic target progress and employee monthly targets."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from academy_reports.api.dependencies import SourceLoader, get_app_settings, get_source_loader, reporting_errors
from academy_reports.config import AppSettings
from academy_reports.core.telemetry import record_report
from academy_reports.schemas import (
    EmployeeTargetProgressSchema,
    TargetProgressResponse,
    TargetProgressSchema,
    TargetTypeSchema,
)
from academy_reports.services.employee_targets import get_employee_target_progress
from academy_reports.services.periods import month_bounds, resolve_period
from academy_reports.services.targets import TARGET_TYPES, TargetProgress, format_target_value, get_target_progress

router = APIRouter()


def _serialize_progress(progress: TargetProgress, currency_label: str) -> TargetProgressSchema:
    def fmt(value):
        return format_target_value(value, progress.target_type, currency_label=currency_label)

    formatted = {
        "period_target": fmt(progress.period_target),
        "actual": fmt(progress.actual),
        "baseline": fmt(progress.baseline),
        "net_progress": fmt(progress.net_progress),
    }
    if progress.annual_target is not None:
        formatted["annual_target"] = fmt(progress.annual_target)
    return TargetProgressSchema(
        target_type=progress.target_type.value,
        label=progress.label,
        kind=progress.kind.value,
        period_target=float(progress.period_target),
        actual=float(progress.actual),
        baseline=float(progress.baseline),
        net_progress=float(progress.net_progress),
        percentage=float(progress.percentage),
        annual_target=None if progress.annual_target is None else float(progress.annual_target),
        formatted=formatted,
    )


@router.get("/types", response_model=list[TargetTypeSchema])
async def list_target_types() -> list[TargetTypeSchema]:
    return [
        TargetTypeSchema(
            type=target_type.value,
            label=info.label,
            kind=info.kind.value,
            actual_source=info.actual_source.value,
        )
        for target_type, info in TARGET_TYPES.items()
    ]


@router.get("/progress", response_model=TargetProgressResponse)
async def get_progress(
    year: int = Query(...),
    period_type: str = Query(default="annual", description="monthly, quarterly, semiAnnual or annual"),
    period_index: int | None = Query(default=None),
    load_source: SourceLoader = Depends(get_source_loader),
    settings: AppSettings = Depends(get_app_settings),
) -> TargetProgressResponse:
    with reporting_errors():
        period = resolve_period(period_type, year, period_index)
        source = await load_source(period.start, period.end, include_targets=True)
        progress = get_target_progress(
            source,
            year,
            period.period.type,
            period_index,
            include_pending=settings.include_pending_daily_stats,
        )
    record_report("targets", period.period.type.value)
    return TargetProgressResponse(
        year=year,
        period_type=period.period.type.value,
        period_index=period_index,
        targets={
            target_type.value: _serialize_progress(item, settings.currency_label)
            for target_type, item in progress.items()
        },
    )


@router.get("/employees/{employee_id}/progress", response_model=list[EmployeeTargetProgressSchema])
async def get_employee_progress(
    employee_id: int,
    year: int = Query(...),
    month: int = Query(...),
    load_source: SourceLoader = Depends(get_source_loader),
    settings: AppSettings = Depends(get_app_settings),
) -> list[EmployeeTargetProgressSchema]:
    with reporting_errors():
        start, end = month_bounds(year, month)
        source = await load_source(start, end, employee_id=employee_id)
        items = get_employee_target_progress(
            source, employee_id, year, month, include_pending=settings.include_pending_daily_stats
        )
    return [
        EmployeeTargetProgressSchema(
            target_type=item.target_type,
            custom_name=item.custom_name,
            target_value=float(item.target_value),
            base_value=float(item.base_value),
            achieved_from_stats=float(item.achieved_from_stats),
            current_value=float(item.current_value),
            remaining=float(item.remaining),
            percentage=float(item.percentage),
            status=item.status,
        )
        for item in items
    ]


__all__ = ["router"]
