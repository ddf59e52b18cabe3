"""Courses, enrollments, expenses and service sales."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, Enum, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academy_reports.db.base import Base

COURSE_EXPENSE_CATEGORIES = ("certificates", "instructor", "marketing", "tax", "other")
OPERATIONAL_EXPENSE_CATEGORIES = ("salaries", "electricity", "water", "rent", "government", "other")
COURSE_STATUSES = ("upcoming", "active", "completed", "cancelled")


class CourseTemplate(Base):
    __tablename__ = "course_template"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)


class Course(Base):
    __tablename__ = "course"
    __table_args__ = (
        Index("ix_course_dates", "start_date", "end_date"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    template_id: Mapped[int | None] = mapped_column(
        ForeignKey("course_template.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255))
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[date] = mapped_column(Date)
    status: Mapped[str] = mapped_column(Enum(*COURSE_STATUSES, name="course_status"), default="upcoming")
    is_recorded: Mapped[bool] = mapped_column(Boolean, default=False)

    enrollments: Mapped[list["CourseEnrollment"]] = relationship(
        back_populates="course", cascade="all, delete-orphan"
    )
    expenses: Mapped[list["CourseExpense"]] = relationship(back_populates="course")


class CourseEnrollment(Base):
    __tablename__ = "course_enrollment"

    id: Mapped[int] = mapped_column(primary_key=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("course.id", ondelete="CASCADE"))
    trainee_count: Mapped[int] = mapped_column(Integer, default=1)
    paid_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0)
    enrollment_date: Mapped[date] = mapped_column(Date, index=True)
    daily_stat_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    course: Mapped[Course] = relationship(back_populates="enrollments")


class CourseExpense(Base):
    __tablename__ = "course_expense"

    id: Mapped[int] = mapped_column(primary_key=True)
    course_id: Mapped[int | None] = mapped_column(ForeignKey("course.id", ondelete="SET NULL"), nullable=True)
    category: Mapped[str] = mapped_column(Enum(*COURSE_EXPENSE_CATEGORIES, name="course_expense_category"))
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    expense_date: Mapped[date] = mapped_column(Date, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    course: Mapped[Optional[Course]] = relationship(back_populates="expenses")


class OperationalExpense(Base):
    __tablename__ = "operational_expense"

    id: Mapped[int] = mapped_column(primary_key=True)
    category: Mapped[str] = mapped_column(
        Enum(*OPERATIONAL_EXPENSE_CATEGORIES, name="operational_expense_category")
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    incurred_on: Mapped[date] = mapped_column(Date, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Project(Base):
    __tablename__ = "project"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    include_in_reports: Mapped[bool] = mapped_column(Boolean, default=True)


class ServiceSale(Base):
    __tablename__ = "service_sale"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    quantity: Mapped[int] = mapped_column(Integer, default=1)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    sale_date: Mapped[date] = mapped_column(Date, index=True)
    project_id: Mapped[int | None] = mapped_column(ForeignKey("project.id", ondelete="SET NULL"), nullable=True)


__all__ = [
    "CourseTemplate",
    "Course",
    "CourseEnrollment",
    "CourseExpense",
    "OperationalExpense",
    "Project",
    "ServiceSale",
    "COURSE_EXPENSE_CATEGORIES",
    "OPERATIONAL_EXPENSE_CATEGORIES",
    "COURSE_STATUSES",
]
