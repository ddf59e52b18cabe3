"""Strategic target rollup across monthly, quarterly, semi-annual and annual views.

Targets are set per year. A period view divides the annual value by the
number of such periods in a year, but subtracts the *whole* baseline from the
period's actual: the baseline is what already existed on 1 January, not a
per-period quota.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from academy_reports.config.settings import DEFAULT_CURRENCY_LABEL
from academy_reports.models.targets import StrategicTargetType
from academy_reports.services.daily_stats import DailyStatTotals, combine_totals, monthly_totals
from academy_reports.services.financial import HUNDRED, aggregate_period
from academy_reports.services.periods import PERIODS_PER_YEAR, ReportType, ResolvedPeriod, resolve_period
from academy_reports.services.sources import ZERO, FinanceSource, TargetDefinition

logger = logging.getLogger(__name__)


class ValueKind(str, Enum):
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    PLAIN = "plain"


class ActualSource(str, Enum):
    DAILY_STATS = "daily_stats"
    FINANCIAL = "financial"
    EXTERNAL = "external"


@dataclass(frozen=True)
class TargetTypeInfo:
    label: str
    kind: ValueKind = ValueKind.PLAIN
    actual_source: ActualSource = ActualSource.EXTERNAL
    stat_field: str | None = None


TARGET_TYPES: dict[StrategicTargetType, TargetTypeInfo] = {
    StrategicTargetType.DIRECT_COURSES: TargetTypeInfo("الدورات التدريبية المباشرة"),
    StrategicTargetType.NEW_COURSES: TargetTypeInfo("الدورات الجديدة (قوالب فريدة)"),
    StrategicTargetType.RECORDED_COURSES: TargetTypeInfo("الدورات المسجلة"),
    StrategicTargetType.CUSTOMERS: TargetTypeInfo(
        "أعداد العملاء",
        actual_source=ActualSource.DAILY_STATS,
        stat_field="confirmed_customers",
    ),
    StrategicTargetType.ANNUAL_PROFIT: TargetTypeInfo(
        "الربح السنوي", kind=ValueKind.CURRENCY, actual_source=ActualSource.FINANCIAL
    ),
    StrategicTargetType.ENTITY_PARTNERSHIPS: TargetTypeInfo("الشراكات مع الجهات"),
    StrategicTargetType.INDIVIDUAL_PARTNERSHIPS: TargetTypeInfo("الشراكات مع الأفراد"),
    StrategicTargetType.INNOVATIVE_IDEAS: TargetTypeInfo("الأفكار النوعية"),
    StrategicTargetType.SERVICE_QUALITY: TargetTypeInfo("جودة تقديم الخدمة", kind=ValueKind.PERCENTAGE),
    StrategicTargetType.CUSTOMER_SATISFACTION: TargetTypeInfo("رضا العملاء", kind=ValueKind.PERCENTAGE),
    StrategicTargetType.WEBSITE_QUALITY: TargetTypeInfo(
        "جودة الموقع وتجربة العميل", kind=ValueKind.PERCENTAGE
    ),
}


@dataclass
class TargetProgress:
    target_type: StrategicTargetType
    label: str
    kind: ValueKind
    period_target: Decimal
    actual: Decimal
    baseline: Decimal
    net_progress: Decimal
    percentage: Decimal
    annual_target: Decimal | None = None


def target_label(target: TargetDefinition) -> str:
    if target.custom_name:
        return target.custom_name
    return TARGET_TYPES[StrategicTargetType(target.type)].label


def compute_progress(
    target: TargetDefinition,
    period_type: ReportType,
    actual: Decimal,
) -> TargetProgress:
    """Turn one period's actual into progress against the period's share of the target."""

    annual_value = Decimal(target.target_value)
    baseline = Decimal(target.baseline or 0)
    period_target = annual_value / PERIODS_PER_YEAR[period_type]
    net_progress = max(ZERO, actual - baseline)
    if period_target > 0:
        percentage = min(HUNDRED, net_progress / period_target * HUNDRED)
    else:
        percentage = ZERO
    target_type = StrategicTargetType(target.type)
    return TargetProgress(
        target_type=target_type,
        label=target_label(target),
        kind=TARGET_TYPES[target_type].kind,
        period_target=period_target,
        actual=actual,
        baseline=baseline,
        net_progress=net_progress,
        percentage=max(ZERO, percentage),
        annual_target=None if period_type is ReportType.ANNUAL else annual_value,
    )


class _ActualResolver:
    """Look up period actuals, reading each underlying source at most once."""

    def __init__(self, source: FinanceSource, period: ResolvedPeriod, *, include_pending: bool):
        self._source = source
        self._period = period
        self._include_pending = include_pending
        self._stat_totals: DailyStatTotals | None = None
        self._net_profit: Decimal | None = None

    def actual_for(self, target_type: StrategicTargetType) -> Decimal:
        info = TARGET_TYPES[target_type]
        if info.actual_source is ActualSource.DAILY_STATS:
            totals = self._daily_totals()
            return Decimal(getattr(totals, info.stat_field or ""))
        if info.actual_source is ActualSource.FINANCIAL:
            if self._net_profit is None:
                report = aggregate_period(self._source, self._period, include_pending=self._include_pending)
                self._net_profit = report.net_profit
            return self._net_profit
        return Decimal(self._source.get_non_stat_actual(target_type, self._period.start, self._period.end))

    def _daily_totals(self) -> DailyStatTotals:
        if self._stat_totals is None:
            self._stat_totals = combine_totals(
                monthly_totals(self._source, year, month, include_pending=self._include_pending)
                for year, month in self._period.months
            )
        return self._stat_totals


def get_target_progress(
    source: FinanceSource,
    year: int,
    period_type: ReportType | str,
    period_index: int | None = None,
    *,
    include_pending: bool = True,
) -> dict[StrategicTargetType, TargetProgress]:
    """Progress of every strategic target defined for ``year`` over one period.

    Types without a target are simply absent from the result. When a year
    holds more than one target of a type, the first one wins.
    """

    period = resolve_period(period_type, year, period_index)
    resolver = _ActualResolver(source, period, include_pending=include_pending)
    progress: dict[StrategicTargetType, TargetProgress] = {}
    for target in source.get_strategic_targets(year):
        target_type = StrategicTargetType(target.type)
        if target_type in progress:
            logger.warning("Ignoring duplicate %s target for %s", target_type.value, year)
            continue
        progress[target_type] = compute_progress(
            target, period.period.type, resolver.actual_for(target_type)
        )
    return progress


def format_target_value(
    value: Decimal | int | float,
    target_type: StrategicTargetType | str,
    *,
    currency_label: str = DEFAULT_CURRENCY_LABEL,
) -> str:
    """Render a value the way its target type is displayed."""

    amount = Decimal(str(value))
    kind = TARGET_TYPES[StrategicTargetType(target_type)].kind
    if kind is ValueKind.CURRENCY:
        return f"{amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP):,} {currency_label}"
    if kind is ValueKind.PERCENTAGE:
        return f"{amount.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"
    rounded = amount.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return f"{rounded.quantize(Decimal('1')):,}"
    return f"{rounded:,}"


__all__ = [
    "ActualSource",
    "TARGET_TYPES",
    "TargetProgress",
    "TargetTypeInfo",
    "ValueKind",
    "compute_progress",
    "format_target_value",
    "get_target_progress",
    "target_label",
]
