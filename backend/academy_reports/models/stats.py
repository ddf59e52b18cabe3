"""Employee daily statistics and monthly employee targets."""

from __future__ import annotations

import datetime as dt
import enum
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, Date, DateTime, Enum, Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from academy_reports.db.base import Base


class ReviewStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


EMPLOYEE_TARGET_TYPES = (
    "confirmed_customers",
    "registered_customers",
    "targeted_customers",
    "services_sold",
    "sales_amount",
    "daily_calls",
    "other",
)


class DailyStat(Base):
    """One employee's self-reported activity for one calendar date."""

    __tablename__ = "daily_stat"
    __table_args__ = (
        UniqueConstraint("employee_id", "date", name="uq_daily_stat_employee_date"),
        Index("ix_daily_stat_date_status", "date", "review_status"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    employee_id: Mapped[int] = mapped_column(Integer, index=True)
    course_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    date: Mapped[dt.date] = mapped_column(Date)
    confirmed_customers: Mapped[int] = mapped_column(Integer, default=0)
    registered_customers: Mapped[int] = mapped_column(Integer, default=0)
    targeted_customers: Mapped[int] = mapped_column(Integer, default=0)
    targeted_by_services: Mapped[int] = mapped_column(Integer, default=0)
    services_sold: Mapped[int] = mapped_column(Integer, default=0)
    sales_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    calculated_revenue: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    # [{"fee_id": 3, "fee_amount": "500.00", "customer_count": 2}, ...]
    fee_breakdown: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True)
    review_status: Mapped[ReviewStatus] = mapped_column(
        Enum(ReviewStatus, name="review_status", values_callable=lambda e: [m.value for m in e]),
        default=ReviewStatus.PENDING,
    )
    reviewed_by: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reviewed_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=dt.datetime.utcnow)


class EmployeeTarget(Base):
    __tablename__ = "employee_target"
    __table_args__ = (
        Index("ix_employee_target_period", "employee_id", "year", "month"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    employee_id: Mapped[int] = mapped_column(Integer)
    target_type: Mapped[str] = mapped_column(Enum(*EMPLOYEE_TARGET_TYPES, name="employee_target_type"))
    custom_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    target_value: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    base_value: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    year: Mapped[int] = mapped_column(Integer)
    month: Mapped[int] = mapped_column(Integer)


__all__ = ["DailyStat", "EmployeeTarget", "ReviewStatus", "EMPLOYEE_TARGET_TYPES"]
