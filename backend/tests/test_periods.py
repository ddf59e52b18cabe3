from __future__ import annotations

from datetime import date

import pytest

from academy_reports.core.exceptions import InvalidPeriod
from academy_reports.services.periods import ReportType, month_bounds, resolve_period


def test_monthly_period_covers_whole_month():
    period = resolve_period("monthly", 2024, 2)
    assert period.start == date(2024, 2, 1)
    assert period.end == date(2024, 2, 29)
    assert period.months == ((2024, 2),)
    assert not period.is_multi_month


def test_quarter_boundaries():
    period = resolve_period(ReportType.QUARTERLY, 2025, 3)
    assert (period.start, period.end) == (date(2025, 7, 1), date(2025, 9, 30))
    assert [m for _, m in period.months] == [7, 8, 9]


@pytest.mark.parametrize("index, first, last", [(1, 1, 6), (2, 7, 12)])
def test_semi_annual_halves(index, first, last):
    period = resolve_period("semiAnnual", 2025, index)
    assert period.start == date(2025, first, 1)
    assert period.end.month == last
    assert len(period.months) == 6


def test_annual_spans_the_year():
    period = resolve_period("annual", 2025)
    assert (period.start, period.end) == (date(2025, 1, 1), date(2025, 12, 31))
    assert len(period.months) == 12
    assert period.period.index is None


@pytest.mark.parametrize(
    "report_type, index",
    [
        ("monthly", 13),
        ("monthly", 0),
        ("quarterly", 5),
        ("semiAnnual", 3),
        ("monthly", None),
        ("annual", 1),
        ("weekly", 1),
    ],
)
def test_invalid_periods_raise(report_type, index):
    with pytest.raises(InvalidPeriod):
        resolve_period(report_type, 2025, index)


def test_month_bounds_rejects_bad_month():
    with pytest.raises(InvalidPeriod):
        month_bounds(2025, 13)
    assert month_bounds(2023, 2) == (date(2023, 2, 1), date(2023, 2, 28))
