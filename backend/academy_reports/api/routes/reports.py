"""Monthly, quarterly, semi-annual and annual financial reports."""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from academy_reports.api.dependencies import SourceLoader, get_app_settings, get_source_loader, reporting_errors
from academy_reports.config import AppSettings
from academy_reports.core.telemetry import record_report
from academy_reports.schemas import FinancialReportSchema, MonthlyBreakdownSchema, PeriodSchema
from academy_reports.services.financial import FinancialReport, build_report
from academy_reports.services.periods import resolve_period

router = APIRouter()


def _to_float(value: Decimal | int | None) -> float | None:
    if value is None:
        return None
    return float(Decimal(str(value)))


def _serialize(report: FinancialReport) -> FinancialReportSchema:
    period = report.period
    monthly = None
    if report.monthly_data is not None:
        monthly = [
            MonthlyBreakdownSchema(
                month=row.month,
                year=row.year,
                revenue=_to_float(row.revenue),
                expenses=_to_float(row.expenses),
                profit=_to_float(row.profit),
            )
            for row in report.monthly_data
        ]
    return FinancialReportSchema(
        period=PeriodSchema(
            type=period.period.type.value,
            year=period.period.year,
            index=period.period.index,
            start_date=period.start,
            end_date=period.end,
        ),
        active_courses=report.active_courses,
        total_enrollments=report.total_enrollments,
        courses_revenue=_to_float(report.courses_revenue),
        services_revenue=_to_float(report.services_revenue),
        services_count=report.services_count,
        total_revenue=_to_float(report.total_revenue),
        course_expenses=_to_float(report.course_expenses),
        course_expenses_by_category={k: _to_float(v) for k, v in report.course_expenses_by_category.items()},
        operational_expenses=_to_float(report.operational_expenses),
        operational_expenses_by_category={
            k: _to_float(v) for k, v in report.operational_expenses_by_category.items()
        },
        total_expenses=_to_float(report.total_expenses),
        net_profit=_to_float(report.net_profit),
        profit_margin=_to_float(report.profit_margin),
        monthly_data=monthly,
        reconciled=report.reconciled,
    )


@router.get("/{report_type}", response_model=FinancialReportSchema)
async def get_report(
    report_type: str,
    year: int = Query(..., description="Calendar year of the report"),
    index: int | None = Query(
        default=None, description="Month (1-12), quarter (1-4) or half (1-2); omit for annual"
    ),
    load_source: SourceLoader = Depends(get_source_loader),
    settings: AppSettings = Depends(get_app_settings),
) -> FinancialReportSchema:
    with reporting_errors():
        period = resolve_period(report_type, year, index)
        source = await load_source(period.start, period.end)
        report = build_report(
            source, report_type, year, index, include_pending=settings.include_pending_daily_stats
        )
    record_report("financial", report.period.period.type.value)
    return _serialize(report)


__all__ = ["router"]
