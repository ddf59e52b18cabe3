"""Record types and pluggable readers for the reporting core.

The aggregators never talk to the database. They read through a
:class:`FinanceSource`, which production code fills from SQL (see
``sql_source``) and tests fill by hand with :class:`InMemoryFinanceSource`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Protocol, Sequence

from academy_reports.models.stats import ReviewStatus
from academy_reports.models.targets import QUALITY_METRICS, StrategicTargetType

ZERO = Decimal("0")


@dataclass(frozen=True)
class FeeLine:
    fee_id: int
    fee_amount: Decimal
    customer_count: int

    @property
    def total(self) -> Decimal:
        return Decimal(self.fee_amount) * self.customer_count


@dataclass
class DailyStatRecord:
    employee_id: int
    date: date
    confirmed_customers: int = 0
    registered_customers: int = 0
    targeted_customers: int = 0
    targeted_by_services: int = 0
    services_sold: int = 0
    sales_amount: Decimal = ZERO
    calculated_revenue: Decimal | None = None
    fee_breakdown: Sequence[FeeLine] = ()
    review_status: ReviewStatus = ReviewStatus.PENDING

    @property
    def course_revenue(self) -> Decimal:
        """Recorded course revenue, else the fee breakdown total."""

        if self.calculated_revenue is not None:
            return Decimal(self.calculated_revenue)
        return sum((line.total for line in self.fee_breakdown), ZERO)


@dataclass(frozen=True)
class ExpenseRecord:
    category: str
    amount: Decimal
    incurred_on: date


@dataclass(frozen=True)
class ServiceSaleRecord:
    amount: Decimal
    sale_date: date
    project_id: int | None = None


@dataclass(frozen=True)
class CourseRecord:
    course_id: int
    start_date: date
    end_date: date
    status: str = "active"


@dataclass(frozen=True)
class EnrollmentRecord:
    course_id: int
    enrollment_date: date
    trainee_count: int = 1


@dataclass
class TargetDefinition:
    year: int
    type: StrategicTargetType
    target_value: Decimal
    baseline: Decimal = ZERO
    custom_name: str | None = None


@dataclass(frozen=True)
class MetricEvent:
    """One occurrence feeding a non-stat target actual (a partnership, a score...)."""

    metric: str
    occurred_on: date
    value: Decimal = Decimal("1")


@dataclass
class EmployeeTargetRecord:
    employee_id: int
    target_type: str
    target_value: Decimal
    year: int
    month: int
    base_value: Decimal = ZERO
    custom_name: str | None = None


class FinanceSource(Protocol):
    """Read-only access to everything the reporting core aggregates."""

    def list_daily_stats(
        self, start: date, end: date, *, employee_id: int | None = None
    ) -> list[DailyStatRecord]:
        ...

    def list_course_expenses(self, start: date, end: date) -> list[ExpenseRecord]:
        ...

    def list_operational_expenses(self, start: date, end: date) -> list[ExpenseRecord]:
        ...

    def list_service_sales(self, start: date, end: date) -> list[ServiceSaleRecord]:
        ...

    def count_active_courses(self, start: date, end: date) -> int:
        ...

    def count_enrollments(self, start: date, end: date) -> int:
        ...

    def get_strategic_targets(self, year: int) -> list[TargetDefinition]:
        ...

    def get_non_stat_actual(self, target_type: StrategicTargetType, start: date, end: date) -> Decimal:
        ...

    def list_employee_targets(self, employee_id: int, year: int, month: int) -> list[EmployeeTargetRecord]:
        ...


def _within(day: date, start: date, end: date) -> bool:
    return start <= day <= end


class InMemoryFinanceSource:
    """List-backed source for tests and per-request snapshots."""

    def __init__(
        self,
        *,
        daily_stats: Iterable[DailyStatRecord] = (),
        course_expenses: Iterable[ExpenseRecord] = (),
        operational_expenses: Iterable[ExpenseRecord] = (),
        service_sales: Iterable[ServiceSaleRecord] = (),
        excluded_project_ids: Iterable[int] = (),
        courses: Iterable[CourseRecord] = (),
        enrollments: Iterable[EnrollmentRecord] = (),
        targets: Iterable[TargetDefinition] = (),
        metric_events: Iterable[MetricEvent] = (),
        employee_targets: Iterable[EmployeeTargetRecord] = (),
    ):
        self.daily_stats: list[DailyStatRecord] = list(daily_stats)
        self.course_expenses: list[ExpenseRecord] = list(course_expenses)
        self.operational_expenses: list[ExpenseRecord] = list(operational_expenses)
        self.service_sales: list[ServiceSaleRecord] = list(service_sales)
        self.excluded_project_ids: set[int] = set(excluded_project_ids)
        self.courses: list[CourseRecord] = list(courses)
        self.enrollments: list[EnrollmentRecord] = list(enrollments)
        self.targets: list[TargetDefinition] = list(targets)
        self.metric_events: list[MetricEvent] = list(metric_events)
        self.employee_targets: list[EmployeeTargetRecord] = list(employee_targets)

    def list_daily_stats(
        self, start: date, end: date, *, employee_id: int | None = None
    ) -> list[DailyStatRecord]:
        rows = [s for s in self.daily_stats if _within(s.date, start, end)]
        if employee_id is not None:
            rows = [s for s in rows if s.employee_id == employee_id]
        return sorted(rows, key=lambda s: (s.date, s.employee_id))

    def list_course_expenses(self, start: date, end: date) -> list[ExpenseRecord]:
        return [e for e in self.course_expenses if _within(e.incurred_on, start, end)]

    def list_operational_expenses(self, start: date, end: date) -> list[ExpenseRecord]:
        return [e for e in self.operational_expenses if _within(e.incurred_on, start, end)]

    def list_service_sales(self, start: date, end: date) -> list[ServiceSaleRecord]:
        return [
            s
            for s in self.service_sales
            if _within(s.sale_date, start, end)
            and (s.project_id is None or s.project_id not in self.excluded_project_ids)
        ]

    def count_active_courses(self, start: date, end: date) -> int:
        overlapping = {
            c.course_id
            for c in self.courses
            if c.status != "cancelled" and c.start_date <= end and c.end_date >= start
        }
        return len(overlapping)

    def count_enrollments(self, start: date, end: date) -> int:
        return sum(e.trainee_count for e in self.enrollments if _within(e.enrollment_date, start, end))

    def get_strategic_targets(self, year: int) -> list[TargetDefinition]:
        return [t for t in self.targets if t.year == year]

    def get_non_stat_actual(self, target_type: StrategicTargetType, start: date, end: date) -> Decimal:
        metric = StrategicTargetType(target_type).value
        values = [
            Decimal(e.value)
            for e in self.metric_events
            if e.metric == metric and _within(e.occurred_on, start, end)
        ]
        if not values:
            return ZERO
        if metric in QUALITY_METRICS:
            return sum(values, ZERO) / len(values)
        return sum(values, ZERO)

    def list_employee_targets(self, employee_id: int, year: int, month: int) -> list[EmployeeTargetRecord]:
        return [
            t
            for t in self.employee_targets
            if t.employee_id == employee_id and t.year == year and t.month == month
        ]


__all__ = [
    "FeeLine",
    "DailyStatRecord",
    "ExpenseRecord",
    "ServiceSaleRecord",
    "CourseRecord",
    "EnrollmentRecord",
    "TargetDefinition",
    "MetricEvent",
    "EmployeeTargetRecord",
    "FinanceSource",
    "InMemoryFinanceSource",
    "ZERO",
]
