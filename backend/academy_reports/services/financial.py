"""Period financial reports with an optional per-month breakdown.

Revenue comes from two places: the employee daily statistics (course fees
and service sales reported day by day) and ad-hoc service sales booked
directly. Expenses come from course-linked and operational ledgers. Every
figure is a :class:`~decimal.Decimal` so that a quarter, half or year always
equals the exact sum of its months.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, getcontext
from typing import Iterable, Sequence

from academy_reports.models.finance import COURSE_EXPENSE_CATEGORIES, OPERATIONAL_EXPENSE_CATEGORIES
from academy_reports.services.daily_stats import combine_totals, monthly_totals
from academy_reports.services.periods import ReportType, ResolvedPeriod, resolve_period
from academy_reports.services.sources import ZERO, ExpenseRecord, FinanceSource

getcontext().prec = 28

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


@dataclass
class MonthlyBreakdownRow:
    month: int
    year: int
    revenue: Decimal
    expenses: Decimal
    profit: Decimal


@dataclass
class FinancialReport:
    period: ResolvedPeriod
    active_courses: int
    total_enrollments: int
    courses_revenue: Decimal
    services_revenue: Decimal
    services_count: int
    course_expenses_by_category: dict[str, Decimal]
    operational_expenses_by_category: dict[str, Decimal]
    monthly_data: list[MonthlyBreakdownRow] | None = None
    reconciled: bool = True

    @property
    def total_revenue(self) -> Decimal:
        return self.courses_revenue + self.services_revenue

    @property
    def course_expenses(self) -> Decimal:
        return sum(self.course_expenses_by_category.values(), ZERO)

    @property
    def operational_expenses(self) -> Decimal:
        return sum(self.operational_expenses_by_category.values(), ZERO)

    @property
    def total_expenses(self) -> Decimal:
        return self.course_expenses + self.operational_expenses

    @property
    def net_profit(self) -> Decimal:
        return self.total_revenue - self.total_expenses

    @property
    def profit_margin(self) -> Decimal:
        return profit_margin(self.net_profit, self.total_revenue)


def profit_margin(net_profit: Decimal, total_revenue: Decimal) -> Decimal:
    """Net profit as a percentage of revenue; 0 when there is no revenue."""

    if total_revenue <= 0:
        return ZERO
    return net_profit / total_revenue * HUNDRED


def sum_by_category(expenses: Iterable[ExpenseRecord], categories: Sequence[str]) -> dict[str, Decimal]:
    """Total ``expenses`` per category, with every known category present.

    Rows carrying an unknown category are folded into ``other``.
    """

    totals = {category: ZERO for category in categories}
    for expense in expenses:
        key = expense.category if expense.category in totals else "other"
        totals[key] += Decimal(expense.amount)
    return totals


def aggregate_period(
    source: FinanceSource,
    period: ResolvedPeriod,
    *,
    include_pending: bool = True,
) -> FinancialReport:
    """Build the report figures for ``period`` without a monthly breakdown."""

    stat_totals = combine_totals(
        monthly_totals(source, year, month, include_pending=include_pending)
        for year, month in period.months
    )
    sales = source.list_service_sales(period.start, period.end)
    direct_sales = sum((Decimal(s.amount) for s in sales), ZERO)

    return FinancialReport(
        period=period,
        active_courses=source.count_active_courses(period.start, period.end),
        total_enrollments=source.count_enrollments(period.start, period.end),
        courses_revenue=stat_totals.courses_revenue,
        services_revenue=stat_totals.services_revenue + direct_sales,
        services_count=len(sales),
        course_expenses_by_category=sum_by_category(
            source.list_course_expenses(period.start, period.end), COURSE_EXPENSE_CATEGORIES
        ),
        operational_expenses_by_category=sum_by_category(
            source.list_operational_expenses(period.start, period.end), OPERATIONAL_EXPENSE_CATEGORIES
        ),
    )


def build_monthly_breakdown(
    source: FinanceSource,
    period: ResolvedPeriod,
    *,
    include_pending: bool = True,
) -> list[MonthlyBreakdownRow]:
    """Run the aggregator once per constituent month, in calendar order."""

    rows: list[MonthlyBreakdownRow] = []
    for year, month in period.months:
        month_report = aggregate_period(
            source, resolve_period(ReportType.MONTHLY, year, month), include_pending=include_pending
        )
        rows.append(
            MonthlyBreakdownRow(
                month=month,
                year=year,
                revenue=month_report.total_revenue,
                expenses=month_report.total_expenses,
                profit=month_report.net_profit,
            )
        )
    return rows


def breakdown_matches(report: FinancialReport) -> bool:
    if report.monthly_data is None:
        return True
    revenue = sum((row.revenue for row in report.monthly_data), ZERO)
    expenses = sum((row.expenses for row in report.monthly_data), ZERO)
    profit = sum((row.profit for row in report.monthly_data), ZERO)
    return (
        revenue == report.total_revenue
        and expenses == report.total_expenses
        and profit == report.net_profit
    )


def build_report(
    source: FinanceSource,
    report_type: ReportType | str,
    year: int,
    index: int | None = None,
    *,
    include_pending: bool = True,
) -> FinancialReport:
    """Resolve the period and build its report.

    Quarterly, semi-annual and annual reports carry ``monthly_data``; the
    report is flagged ``reconciled=False`` when the months do not add up to
    the period total (the underlying data moved between reads).
    """

    period = resolve_period(report_type, year, index)
    report = aggregate_period(source, period, include_pending=include_pending)
    if period.is_multi_month:
        report.monthly_data = build_monthly_breakdown(source, period, include_pending=include_pending)
        report.reconciled = breakdown_matches(report)
        if not report.reconciled:
            logger.warning(
                "Monthly breakdown for %s %s/%s does not match the period total",
                period.period.type.value,
                year,
                index,
            )
    logger.info(
        "Built %s report for %s/%s: revenue=%s expenses=%s",
        period.period.type.value,
        year,
        index,
        report.total_revenue,
        report.total_expenses,
    )
    return report


__all__ = [
    "FinancialReport",
    "MonthlyBreakdownRow",
    "aggregate_period",
    "breakdown_matches",
    "build_monthly_breakdown",
    "build_report",
    "profit_margin",
    "sum_by_category",
]
