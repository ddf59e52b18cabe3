"""Monthly employee targets measured against their own daily statistics."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from academy_reports.services.daily_stats import DailyStatTotals, monthly_totals
from academy_reports.services.financial import HUNDRED
from academy_reports.services.sources import ZERO, EmployeeTargetRecord, FinanceSource

# Target type -> DailyStatTotals attribute. Sales targets track collected
# revenue (courses and services), not the services amount alone.
STAT_FIELDS: dict[str, str] = {
    "confirmed_customers": "confirmed_customers",
    "registered_customers": "registered_customers",
    "targeted_customers": "targeted_customers",
    "services_sold": "services_sold",
    "sales_amount": "total_revenue",
    "daily_calls": "targeted_customers",
}


@dataclass
class EmployeeTargetProgress:
    target_type: str
    custom_name: str | None
    target_value: Decimal
    base_value: Decimal
    achieved_from_stats: Decimal
    current_value: Decimal
    remaining: Decimal
    percentage: Decimal
    status: str


def evaluate_employee_target(target: EmployeeTargetRecord, totals: DailyStatTotals) -> EmployeeTargetProgress:
    field_name = STAT_FIELDS.get(target.target_type)
    achieved = Decimal(getattr(totals, field_name)) if field_name else ZERO
    base_value = Decimal(target.base_value or 0)
    target_value = Decimal(target.target_value)
    current = base_value + achieved
    percentage = min(HUNDRED, current / target_value * HUNDRED) if target_value > 0 else ZERO
    return EmployeeTargetProgress(
        target_type=target.target_type,
        custom_name=target.custom_name,
        target_value=target_value,
        base_value=base_value,
        achieved_from_stats=achieved,
        current_value=current,
        remaining=max(ZERO, target_value - current),
        percentage=max(ZERO, percentage),
        status="achieved" if target_value > 0 and current >= target_value else "in_progress",
    )


def get_employee_target_progress(
    source: FinanceSource,
    employee_id: int,
    year: int,
    month: int,
    *,
    include_pending: bool = True,
) -> list[EmployeeTargetProgress]:
    totals = monthly_totals(source, year, month, employee_id=employee_id, include_pending=include_pending)
    return [
        evaluate_employee_target(target, totals)
        for target in source.list_employee_targets(employee_id, year, month)
    ]


__all__ = [
    "EmployeeTargetProgress",
    "STAT_FIELDS",
    "evaluate_employee_target",
    "get_employee_target_progress",
]
