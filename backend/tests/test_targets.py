from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from academy_reports.core.exceptions import InvalidPeriod
from academy_reports.models.stats import ReviewStatus
from academy_reports.models.targets import StrategicTargetType
from academy_reports.services.periods import ReportType
from academy_reports.services.sources import (
    DailyStatRecord,
    ExpenseRecord,
    InMemoryFinanceSource,
    MetricEvent,
    TargetDefinition,
)
from academy_reports.services.targets import (
    TARGET_TYPES,
    ValueKind,
    compute_progress,
    format_target_value,
    get_target_progress,
    target_label,
)


def _customers_target(**overrides) -> TargetDefinition:
    values = {
        "year": 2025,
        "type": StrategicTargetType.CUSTOMERS,
        "target_value": Decimal("1200"),
        "baseline": Decimal("100"),
    }
    values.update(overrides)
    return TargetDefinition(**values)


def test_catalog_covers_every_target_type():
    assert set(TARGET_TYPES) == set(StrategicTargetType)
    assert TARGET_TYPES[StrategicTargetType.ANNUAL_PROFIT].kind is ValueKind.CURRENCY
    assert TARGET_TYPES[StrategicTargetType.WEBSITE_QUALITY].kind is ValueKind.PERCENTAGE


def test_quarter_target_is_a_quarter_of_the_annual_value():
    progress = compute_progress(_customers_target(), ReportType.QUARTERLY, Decimal("250"))

    assert progress.period_target == Decimal("300")
    assert progress.net_progress == Decimal("150")
    assert progress.percentage == Decimal("50")
    assert progress.annual_target == Decimal("1200")


def test_whole_baseline_is_subtracted_for_every_period():
    monthly = compute_progress(_customers_target(), ReportType.MONTHLY, Decimal("150"))
    assert monthly.period_target == Decimal("100")
    assert monthly.net_progress == Decimal("50")
    assert monthly.percentage == Decimal("50")


def test_semi_annual_target_is_half_the_annual_value():
    progress = compute_progress(_customers_target(baseline=Decimal("0")), ReportType.SEMI_ANNUAL, Decimal("300"))
    assert progress.period_target == Decimal("600")
    assert progress.percentage == Decimal("50")


@pytest.mark.parametrize("actual, expected", [(Decimal("50"), Decimal("0")), (Decimal("99999"), Decimal("100"))])
def test_percentage_is_clamped(actual, expected):
    progress = compute_progress(_customers_target(), ReportType.ANNUAL, actual)
    assert progress.percentage == expected
    assert progress.net_progress >= 0


def test_annual_view_has_no_annual_target():
    progress = compute_progress(_customers_target(), ReportType.ANNUAL, Decimal("700"))
    assert progress.annual_target is None
    assert progress.period_target == Decimal("1200")
    assert progress.percentage == Decimal("50")


def test_zero_target_value_gives_zero_percentage():
    progress = compute_progress(_customers_target(target_value=Decimal("0")), ReportType.ANNUAL, Decimal("500"))
    assert progress.percentage == 0


def test_custom_name_overrides_label():
    assert target_label(_customers_target()) == "أعداد العملاء"
    assert target_label(_customers_target(custom_name="عملاء الشركات")) == "عملاء الشركات"


def build_source() -> InMemoryFinanceSource:
    return InMemoryFinanceSource(
        daily_stats=[
            DailyStatRecord(
                employee_id=1,
                date=date(2025, 1, 3),
                confirmed_customers=120,
                calculated_revenue=Decimal("10000"),
                review_status=ReviewStatus.APPROVED,
            ),
            DailyStatRecord(employee_id=2, date=date(2025, 2, 3), confirmed_customers=130),
            DailyStatRecord(
                employee_id=2,
                date=date(2025, 2, 4),
                confirmed_customers=400,
                review_status=ReviewStatus.REJECTED,
            ),
            DailyStatRecord(employee_id=1, date=date(2025, 4, 3), confirmed_customers=999),
        ],
        operational_expenses=[
            ExpenseRecord(category="rent", amount=Decimal("4000"), incurred_on=date(2025, 2, 1)),
        ],
        targets=[
            _customers_target(),
            _customers_target(target_value=Decimal("5")),
            TargetDefinition(year=2025, type=StrategicTargetType.ANNUAL_PROFIT, target_value=Decimal("96000")),
            TargetDefinition(
                year=2025,
                type=StrategicTargetType.CUSTOMER_SATISFACTION,
                target_value=Decimal("360"),
            ),
            TargetDefinition(year=2025, type=StrategicTargetType.ENTITY_PARTNERSHIPS, target_value=Decimal("8")),
            TargetDefinition(year=2024, type=StrategicTargetType.INNOVATIVE_IDEAS, target_value=Decimal("10")),
        ],
        metric_events=[
            MetricEvent(metric="customer_satisfaction", occurred_on=date(2025, 1, 15), value=Decimal("80")),
            MetricEvent(metric="customer_satisfaction", occurred_on=date(2025, 3, 15), value=Decimal("90")),
            MetricEvent(metric="entity_partnerships", occurred_on=date(2025, 2, 1)),
            MetricEvent(metric="entity_partnerships", occurred_on=date(2025, 5, 1)),
        ],
    )


def test_quarter_progress_uses_each_actual_source():
    progress = get_target_progress(build_source(), 2025, "quarterly", 1)

    customers = progress[StrategicTargetType.CUSTOMERS]
    assert customers.actual == Decimal("250")
    assert customers.period_target == Decimal("300")
    assert customers.percentage == Decimal("50")

    profit = progress[StrategicTargetType.ANNUAL_PROFIT]
    assert profit.actual == Decimal("6000")
    assert profit.percentage == Decimal("25")

    satisfaction = progress[StrategicTargetType.CUSTOMER_SATISFACTION]
    assert satisfaction.actual == Decimal("85")
    assert satisfaction.period_target == Decimal("90")

    partnerships = progress[StrategicTargetType.ENTITY_PARTNERSHIPS]
    assert partnerships.actual == Decimal("1")
    assert partnerships.percentage == Decimal("50")


def test_types_without_target_are_absent():
    progress = get_target_progress(build_source(), 2025, "annual")
    assert StrategicTargetType.INNOVATIVE_IDEAS not in progress
    assert StrategicTargetType.WEBSITE_QUALITY not in progress
    assert get_target_progress(build_source(), 2030, "annual") == {}


def test_duplicate_target_keeps_the_first():
    progress = get_target_progress(build_source(), 2025, "annual")
    assert progress[StrategicTargetType.CUSTOMERS].period_target == Decimal("1200")


def test_invalid_period_is_rejected():
    with pytest.raises(InvalidPeriod):
        get_target_progress(build_source(), 2025, "quarterly", 5)


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        (Decimal("1234567.5"), "annual_profit", "1,234,568 ر.س"),
        (Decimal("87.25"), "service_quality", "87.3%"),
        (Decimal("1500"), "customers", "1,500"),
        (Decimal("12.25"), "direct_courses", "12.3"),
        (Decimal("0"), "annual_profit", "0 ر.س"),
    ],
)
def test_format_target_value(value, target_type, expected):
    assert format_target_value(value, target_type) == expected


def test_format_uses_configured_currency_label():
    assert format_target_value(Decimal("2500"), "annual_profit", currency_label="SAR") == "2,500 SAR"


def test_monthly_and_annual_views_share_one_baseline():
    target = TargetDefinition(
        year=2025, type=StrategicTargetType.CUSTOMERS, target_value=Decimal("1200"), baseline=Decimal("100")
    )
    january = compute_progress(target, ReportType.MONTHLY, Decimal("150"))
    assert (january.period_target, january.net_progress, january.percentage) == (
        Decimal("100"),
        Decimal("50"),
        Decimal("50"),
    )
    year = compute_progress(target, ReportType.ANNUAL, Decimal("400"))
    assert (year.period_target, year.net_progress, year.percentage) == (
        Decimal("1200"),
        Decimal("300"),
        Decimal("25"),
    )


def test_january_customers_end_to_end():
    source = InMemoryFinanceSource(
        daily_stats=[
            DailyStatRecord(employee_id=1, date=date(2025, 1, 5), confirmed_customers=90),
            DailyStatRecord(
                employee_id=2, date=date(2025, 1, 19), confirmed_customers=60, review_status=ReviewStatus.APPROVED
            ),
        ],
        targets=[
            TargetDefinition(
                year=2025, type=StrategicTargetType.CUSTOMERS, target_value=Decimal("1200"), baseline=Decimal("50")
            )
        ],
    )
    customers = get_target_progress(source, 2025, "monthly", 1)["customers"]

    assert customers.period_target == Decimal("100")
    assert customers.actual == Decimal("150")
    assert customers.baseline == Decimal("50")
    assert customers.net_progress == Decimal("100")
    assert customers.percentage == Decimal("100")
