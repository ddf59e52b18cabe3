"""Pydantic schema exports."""

from .daily_stats import DailyStatTotalsSchema
from .reports import FinancialReportSchema, MonthlyBreakdownSchema, PeriodSchema
from .targets import (
    EmployeeTargetProgressSchema,
    TargetProgressResponse,
    TargetProgressSchema,
    TargetTypeSchema,
)

__all__ = [
    "DailyStatTotalsSchema",
    "FinancialReportSchema",
    "MonthlyBreakdownSchema",
    "PeriodSchema",
    "EmployeeTargetProgressSchema",
    "TargetProgressResponse",
    "TargetProgressSchema",
    "TargetTypeSchema",
]
