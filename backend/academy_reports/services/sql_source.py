"""Load a per-request :class:`InMemoryFinanceSource` snapshot from the database."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from academy_reports.core.exceptions import UpstreamDataError
from academy_reports.models import (
    Course,
    CourseEnrollment,
    CourseExpense,
    CourseTemplate,
    DailyStat,
    EmployeeTarget,
    InnovativeIdea,
    OperationalExpense,
    Partnership,
    Project,
    QualityScore,
    ServiceSale,
    StrategicTarget,
    StrategicTargetType,
)
from academy_reports.services.sources import (
    CourseRecord,
    DailyStatRecord,
    EmployeeTargetRecord,
    EnrollmentRecord,
    ExpenseRecord,
    FeeLine,
    InMemoryFinanceSource,
    MetricEvent,
    ServiceSaleRecord,
    TargetDefinition,
)

logger = logging.getLogger(__name__)


def _fee_lines(raw: Iterable[dict[str, Any]] | None) -> tuple[FeeLine, ...]:
    if not raw:
        return ()
    return tuple(
        FeeLine(
            fee_id=int(item.get("fee_id", 0)),
            fee_amount=Decimal(str(item.get("fee_amount", "0"))),
            customer_count=int(item.get("customer_count", 0)),
        )
        for item in raw
    )


def _to_daily_stat(row: DailyStat) -> DailyStatRecord:
    return DailyStatRecord(
        employee_id=row.employee_id,
        date=row.date,
        confirmed_customers=row.confirmed_customers or 0,
        registered_customers=row.registered_customers or 0,
        targeted_customers=row.targeted_customers or 0,
        targeted_by_services=row.targeted_by_services or 0,
        services_sold=row.services_sold or 0,
        sales_amount=Decimal(row.sales_amount or 0),
        calculated_revenue=None if row.calculated_revenue is None else Decimal(row.calculated_revenue),
        fee_breakdown=_fee_lines(row.fee_breakdown),
        review_status=row.review_status,
    )


async def _scalars(session: AsyncSession, stmt) -> list[Any]:
    return list((await session.execute(stmt)).scalars().all())


async def _metric_events(session: AsyncSession, start: date, end: date) -> list[MetricEvent]:
    events: list[MetricEvent] = []

    recorded = await _scalars(
        session,
        select(Course).where(
            Course.is_recorded.is_(True),
            Course.start_date >= start,
            Course.start_date <= end,
            Course.status != "cancelled",
        ),
    )
    for course in recorded:
        events.append(MetricEvent(metric=StrategicTargetType.RECORDED_COURSES.value, occurred_on=course.start_date))

    templates = await _scalars(
        session,
        select(CourseTemplate).where(
            CourseTemplate.is_active.is_(True),
            CourseTemplate.created_at >= datetime.combine(start, time.min),
            CourseTemplate.created_at < datetime.combine(end + timedelta(days=1), time.min),
        ),
    )
    # Direct and new courses both count distinct templates, not repeated runs.
    for template in templates:
        created_on = template.created_at.date()
        events.append(MetricEvent(metric=StrategicTargetType.DIRECT_COURSES.value, occurred_on=created_on))
        events.append(MetricEvent(metric=StrategicTargetType.NEW_COURSES.value, occurred_on=created_on))

    partnerships = await _scalars(
        session,
        select(Partnership).where(
            Partnership.status == "active",
            Partnership.partnership_date >= start,
            Partnership.partnership_date <= end,
        ),
    )
    for partnership in partnerships:
        metric = (
            StrategicTargetType.ENTITY_PARTNERSHIPS
            if partnership.type == "entity"
            else StrategicTargetType.INDIVIDUAL_PARTNERSHIPS
        )
        events.append(MetricEvent(metric=metric.value, occurred_on=partnership.partnership_date))

    ideas = await _scalars(
        session,
        select(InnovativeIdea).where(InnovativeIdea.submission_date >= start, InnovativeIdea.submission_date <= end),
    )
    for idea in ideas:
        events.append(
            MetricEvent(metric=StrategicTargetType.INNOVATIVE_IDEAS.value, occurred_on=idea.submission_date)
        )

    scores = await _scalars(
        session,
        select(QualityScore).where(QualityScore.measured_on >= start, QualityScore.measured_on <= end),
    )
    for score in scores:
        events.append(MetricEvent(metric=score.metric, occurred_on=score.measured_on, value=Decimal(score.score)))

    return events


async def load_finance_source(
    session: AsyncSession,
    start: date,
    end: date,
    *,
    employee_id: int | None = None,
    include_targets: bool = False,
) -> InMemoryFinanceSource:
    """Read every row one report or target view needs for ``[start, end]``.

    A single snapshot per request keeps all figures of one response
    consistent with each other. Database failures surface as
    :class:`UpstreamDataError`; no partial snapshot is ever returned.
    """

    try:
        stat_stmt = select(DailyStat).where(DailyStat.date >= start, DailyStat.date <= end)
        if employee_id is not None:
            stat_stmt = stat_stmt.where(DailyStat.employee_id == employee_id)
        daily_stats = [_to_daily_stat(row) for row in await _scalars(session, stat_stmt)]

        course_expenses = [
            ExpenseRecord(category=row.category, amount=Decimal(row.amount), incurred_on=row.expense_date)
            for row in await _scalars(
                session,
                select(CourseExpense).where(CourseExpense.expense_date >= start, CourseExpense.expense_date <= end),
            )
        ]
        operational_expenses = [
            ExpenseRecord(category=row.category, amount=Decimal(row.amount), incurred_on=row.incurred_on)
            for row in await _scalars(
                session,
                select(OperationalExpense).where(
                    OperationalExpense.incurred_on >= start, OperationalExpense.incurred_on <= end
                ),
            )
        ]
        service_sales = [
            ServiceSaleRecord(amount=Decimal(row.total_amount), sale_date=row.sale_date, project_id=row.project_id)
            for row in await _scalars(
                session,
                select(ServiceSale).where(ServiceSale.sale_date >= start, ServiceSale.sale_date <= end),
            )
        ]
        excluded_projects = await _scalars(
            session, select(Project.id).where(Project.include_in_reports.is_(False))
        )
        courses = [
            CourseRecord(course_id=row.id, start_date=row.start_date, end_date=row.end_date, status=row.status)
            for row in await _scalars(
                session, select(Course).where(Course.start_date <= end, Course.end_date >= start)
            )
        ]
        enrollments = [
            EnrollmentRecord(
                course_id=row.course_id,
                enrollment_date=row.enrollment_date,
                trainee_count=row.trainee_count or 0,
            )
            for row in await _scalars(
                session,
                select(CourseEnrollment).where(
                    CourseEnrollment.enrollment_date >= start, CourseEnrollment.enrollment_date <= end
                ),
            )
        ]

        targets: list[TargetDefinition] = []
        metric_events: list[MetricEvent] = []
        if include_targets:
            targets = [
                TargetDefinition(
                    year=row.year,
                    type=row.type,
                    target_value=Decimal(row.target_value),
                    baseline=Decimal(row.baseline or 0),
                    custom_name=row.custom_name,
                )
                for row in await _scalars(
                    session,
                    select(StrategicTarget)
                    .where(StrategicTarget.year >= start.year, StrategicTarget.year <= end.year)
                    .order_by(StrategicTarget.id),
                )
            ]
            metric_events = await _metric_events(session, start, end)

        employee_targets: list[EmployeeTargetRecord] = []
        if employee_id is not None:
            employee_targets = [
                EmployeeTargetRecord(
                    employee_id=row.employee_id,
                    target_type=row.target_type,
                    target_value=Decimal(row.target_value),
                    year=row.year,
                    month=row.month,
                    base_value=Decimal(row.base_value or 0),
                    custom_name=row.custom_name,
                )
                for row in await _scalars(
                    session,
                    select(EmployeeTarget).where(
                        EmployeeTarget.employee_id == employee_id,
                        EmployeeTarget.year >= start.year,
                        EmployeeTarget.year <= end.year,
                    ),
                )
            ]
    except SQLAlchemyError as exc:
        logger.exception("Failed to load reporting data for %s..%s", start, end)
        raise UpstreamDataError(f"could not read reporting data for {start}..{end}") from exc

    return InMemoryFinanceSource(
        daily_stats=daily_stats,
        course_expenses=course_expenses,
        operational_expenses=operational_expenses,
        service_sales=service_sales,
        excluded_project_ids=excluded_projects,
        courses=courses,
        enrollments=enrollments,
        targets=targets,
        metric_events=metric_events,
        employee_targets=employee_targets,
    )


__all__ = ["load_finance_source"]
