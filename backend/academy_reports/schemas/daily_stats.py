"""Pydantic schemas for aggregated daily statistics."""

from __future__ import annotations

from pydantic import BaseModel


class DailyStatTotalsSchema(BaseModel):
    employee_id: int | None = None
    year: int
    month: int
    confirmed_customers: int
    registered_customers: int
    targeted_customers: int
    targeted_by_services: int
    services_sold: int
    courses_revenue: float
    services_revenue: float
    total_revenue: float
    total_days: int


__all__ = ["DailyStatTotalsSchema"]
