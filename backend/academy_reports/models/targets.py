"""Strategic targets and the records their non-stat actuals come from."""

from __future__ import annotations

import enum
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, Enum, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from academy_reports.db.base import Base


class StrategicTargetType(str, enum.Enum):
    DIRECT_COURSES = "direct_courses"
    NEW_COURSES = "new_courses"
    RECORDED_COURSES = "recorded_courses"
    CUSTOMERS = "customers"
    ANNUAL_PROFIT = "annual_profit"
    ENTITY_PARTNERSHIPS = "entity_partnerships"
    INDIVIDUAL_PARTNERSHIPS = "individual_partnerships"
    INNOVATIVE_IDEAS = "innovative_ideas"
    SERVICE_QUALITY = "service_quality"
    CUSTOMER_SATISFACTION = "customer_satisfaction"
    WEBSITE_QUALITY = "website_quality"


QUALITY_METRICS = (
    StrategicTargetType.SERVICE_QUALITY.value,
    StrategicTargetType.CUSTOMER_SATISFACTION.value,
    StrategicTargetType.WEBSITE_QUALITY.value,
)
PARTNERSHIP_TYPES = ("entity", "individual")
IDEA_STATUSES = ("pending", "approved", "implemented", "rejected")


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class StrategicTarget(Base):
    """An annual company goal; one per (year, type) is expected but not enforced."""

    __tablename__ = "strategic_target"
    __table_args__ = (
        Index("ix_strategic_target_year_type", "year", "type"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    year: Mapped[int] = mapped_column(Integer)
    type: Mapped[StrategicTargetType] = mapped_column(
        Enum(StrategicTargetType, name="strategic_target_type", values_callable=_enum_values)
    )
    custom_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    baseline: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0)
    target_value: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )


class Partnership(Base):
    __tablename__ = "partnership"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    type: Mapped[str] = mapped_column(Enum(*PARTNERSHIP_TYPES, name="partnership_type"))
    status: Mapped[str] = mapped_column(Enum("active", "inactive", name="partnership_status"), default="active")
    partnership_date: Mapped[date] = mapped_column(Date, index=True)


class InnovativeIdea(Base):
    __tablename__ = "innovative_idea"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(Enum(*IDEA_STATUSES, name="idea_status"), default="pending")
    submission_date: Mapped[date] = mapped_column(Date, index=True)


class QualityScore(Base):
    """A periodic survey or audit score, 0-100, for one quality metric."""

    __tablename__ = "quality_score"
    __table_args__ = (
        Index("ix_quality_score_metric_date", "metric", "measured_on"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    metric: Mapped[str] = mapped_column(Enum(*QUALITY_METRICS, name="quality_metric"))
    score: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    measured_on: Mapped[date] = mapped_column(Date)


__all__ = [
    "StrategicTarget",
    "StrategicTargetType",
    "Partnership",
    "InnovativeIdea",
    "QualityScore",
    "QUALITY_METRICS",
    "PARTNERSHIP_TYPES",
    "IDEA_STATUSES",
]
