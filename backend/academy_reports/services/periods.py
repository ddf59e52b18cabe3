"""Calendar period resolution for reports and target views."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from academy_reports.core.exceptions import InvalidPeriod


class ReportType(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUAL = "semiAnnual"
    ANNUAL = "annual"


# Highest valid index for each granularity; annual takes no index.
_INDEX_LIMITS: dict[ReportType, int | None] = {
    ReportType.MONTHLY: 12,
    ReportType.QUARTERLY: 4,
    ReportType.SEMI_ANNUAL: 2,
    ReportType.ANNUAL: None,
}

# How many of each period make up one year.
PERIODS_PER_YEAR: dict[ReportType, int] = {
    ReportType.MONTHLY: 12,
    ReportType.QUARTERLY: 4,
    ReportType.SEMI_ANNUAL: 2,
    ReportType.ANNUAL: 1,
}


@dataclass(frozen=True)
class Period:
    type: ReportType
    year: int
    index: int | None = None


@dataclass(frozen=True)
class ResolvedPeriod:
    """Inclusive date boundaries of a period and the months it spans."""

    period: Period
    start: date
    end: date
    months: tuple[tuple[int, int], ...] = field(default_factory=tuple)

    @property
    def is_multi_month(self) -> bool:
        return len(self.months) > 1


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last calendar day of ``month``."""

    if not 1 <= month <= 12:
        raise InvalidPeriod(f"month must be between 1 and 12, got {month}")
    _validate_year(year)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def coerce_report_type(value: ReportType | str) -> ReportType:
    try:
        return ReportType(value)
    except ValueError as exc:
        raise InvalidPeriod(f"unknown report type {value!r}") from exc


def resolve_period(report_type: ReportType | str, year: int, index: int | None = None) -> ResolvedPeriod:
    """Compute boundaries and constituent months for one report period.

    ``index`` is the month (1-12), quarter (1-4) or half (1-2) and must be
    omitted for annual periods. Out-of-range values raise :class:`InvalidPeriod`
    rather than being clamped.
    """

    kind = coerce_report_type(report_type)
    _validate_year(year)
    limit = _INDEX_LIMITS[kind]
    if limit is None:
        if index is not None:
            raise InvalidPeriod("annual periods take no index")
    else:
        if index is None:
            raise InvalidPeriod(f"{kind.value} periods require an index")
        if not 1 <= index <= limit:
            raise InvalidPeriod(f"{kind.value} index must be between 1 and {limit}, got {index}")

    if kind is ReportType.MONTHLY:
        first_month, last_month = index, index
    elif kind is ReportType.QUARTERLY:
        first_month, last_month = 3 * index - 2, 3 * index
    elif kind is ReportType.SEMI_ANNUAL:
        first_month, last_month = (1, 6) if index == 1 else (7, 12)
    else:
        first_month, last_month = 1, 12

    start, _ = month_bounds(year, first_month)
    _, end = month_bounds(year, last_month)
    months = tuple((year, m) for m in range(first_month, last_month + 1))
    return ResolvedPeriod(period=Period(type=kind, year=year, index=index), start=start, end=end, months=months)


def _validate_year(year: int) -> None:
    if not 1 <= year <= 9999:
        raise InvalidPeriod(f"year out of range: {year}")


__all__ = [
    "ReportType",
    "Period",
    "ResolvedPeriod",
    "PERIODS_PER_YEAR",
    "coerce_report_type",
    "month_bounds",
    "resolve_period",
]
