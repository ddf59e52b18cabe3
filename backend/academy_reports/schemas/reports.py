"""Pydantic schemas for period financial reports."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class PeriodSchema(BaseModel):
    type: str = Field(..., examples=["quarterly"])
    year: int
    index: int | None = None
    start_date: date
    end_date: date


class MonthlyBreakdownSchema(BaseModel):
    month: int
    year: int
    revenue: float
    expenses: float
    profit: float


class FinancialReportSchema(BaseModel):
    period: PeriodSchema
    active_courses: int
    total_enrollments: int
    courses_revenue: float
    services_revenue: float
    services_count: int
    total_revenue: float
    course_expenses: float
    course_expenses_by_category: dict[str, float]
    operational_expenses: float
    operational_expenses_by_category: dict[str, float]
    total_expenses: float
    net_profit: float
    profit_margin: float
    monthly_data: list[MonthlyBreakdownSchema] | None = None
    reconciled: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "period": {
                    "type": "quarterly",
                    "year": 2025,
                    "index": 1,
                    "start_date": "2025-01-01",
                    "end_date": "2025-03-31",
                },
                "active_courses": 4,
                "total_enrollments": 58,
                "courses_revenue": 87000.0,
                "services_revenue": 12500.0,
                "services_count": 9,
                "total_revenue": 99500.0,
                "course_expenses": 21000.0,
                "course_expenses_by_category": {
                    "certificates": 1500.0,
                    "instructor": 15000.0,
                    "marketing": 3000.0,
                    "tax": 1500.0,
                    "other": 0.0,
                },
                "operational_expenses": 30000.0,
                "operational_expenses_by_category": {
                    "salaries": 24000.0,
                    "electricity": 1200.0,
                    "water": 300.0,
                    "rent": 4500.0,
                    "government": 0.0,
                    "other": 0.0,
                },
                "total_expenses": 51000.0,
                "net_profit": 48500.0,
                "profit_margin": 48.74,
                "monthly_data": [
                    {"month": 1, "year": 2025, "revenue": 30000.0, "expenses": 17000.0, "profit": 13000.0},
                    {"month": 2, "year": 2025, "revenue": 34500.0, "expenses": 17000.0, "profit": 17500.0},
                    {"month": 3, "year": 2025, "revenue": 35000.0, "expenses": 17000.0, "profit": 18000.0},
                ],
                "reconciled": True,
            }
        }


__all__ = ["PeriodSchema", "MonthlyBreakdownSchema", "FinancialReportSchema"]
