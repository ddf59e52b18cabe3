"""Monthly totals of employee daily statistics."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from academy_reports.models.stats import ReviewStatus
from academy_reports.services.periods import month_bounds
from academy_reports.services.sources import ZERO, DailyStatRecord, FinanceSource


@dataclass
class DailyStatTotals:
    confirmed_customers: int = 0
    registered_customers: int = 0
    targeted_customers: int = 0
    targeted_by_services: int = 0
    services_sold: int = 0
    courses_revenue: Decimal = ZERO
    services_revenue: Decimal = ZERO
    total_days: int = 0

    @property
    def total_revenue(self) -> Decimal:
        return self.courses_revenue + self.services_revenue


def counts_toward_totals(stat: DailyStatRecord, *, include_pending: bool = True) -> bool:
    if stat.review_status == ReviewStatus.REJECTED:
        return False
    if stat.review_status == ReviewStatus.PENDING:
        return include_pending
    return True


def summarize_daily_stats(
    stats: Iterable[DailyStatRecord], *, include_pending: bool = True
) -> DailyStatTotals:
    """Sum the rows that count; rejected rows never contribute."""

    totals = DailyStatTotals()
    days = set()
    for stat in stats:
        if not counts_toward_totals(stat, include_pending=include_pending):
            continue
        totals.confirmed_customers += stat.confirmed_customers
        totals.registered_customers += stat.registered_customers
        totals.targeted_customers += stat.targeted_customers
        totals.targeted_by_services += stat.targeted_by_services
        totals.services_sold += stat.services_sold
        totals.courses_revenue += stat.course_revenue
        totals.services_revenue += Decimal(stat.sales_amount)
        days.add(stat.date)
    totals.total_days = len(days)
    return totals


def monthly_totals(
    source: FinanceSource,
    year: int,
    month: int,
    *,
    employee_id: int | None = None,
    include_pending: bool = True,
) -> DailyStatTotals:
    """Recompute one month's totals from scratch, optionally for one employee."""

    start, end = month_bounds(year, month)
    stats = source.list_daily_stats(start, end, employee_id=employee_id)
    return summarize_daily_stats(stats, include_pending=include_pending)


def combine_totals(parts: Iterable[DailyStatTotals]) -> DailyStatTotals:
    """Add per-month totals together. Months never share dates, so days add too."""

    combined = DailyStatTotals()
    for part in parts:
        combined.confirmed_customers += part.confirmed_customers
        combined.registered_customers += part.registered_customers
        combined.targeted_customers += part.targeted_customers
        combined.targeted_by_services += part.targeted_by_services
        combined.services_sold += part.services_sold
        combined.courses_revenue += part.courses_revenue
        combined.services_revenue += part.services_revenue
        combined.total_days += part.total_days
    return combined


__all__ = [
    "DailyStatTotals",
    "counts_toward_totals",
    "summarize_daily_stats",
    "monthly_totals",
    "combine_totals",
]
