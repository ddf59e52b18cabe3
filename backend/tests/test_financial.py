from __future__ import annotations

from datetime import date
from decimal import Decimal

from academy_reports.models.stats import ReviewStatus
from academy_reports.services.financial import (
    aggregate_period,
    breakdown_matches,
    build_report,
    profit_margin,
    sum_by_category,
)
from academy_reports.services.periods import resolve_period
from academy_reports.services.sources import (
    CourseRecord,
    DailyStatRecord,
    EnrollmentRecord,
    ExpenseRecord,
    InMemoryFinanceSource,
    ServiceSaleRecord,
)


def build_q1_source() -> InMemoryFinanceSource:
    return InMemoryFinanceSource(
        daily_stats=[
            DailyStatRecord(
                employee_id=1,
                date=date(2025, 1, 5),
                calculated_revenue=Decimal("1000"),
                sales_amount=Decimal("200"),
                review_status=ReviewStatus.APPROVED,
            ),
            DailyStatRecord(employee_id=2, date=date(2025, 2, 11), calculated_revenue=Decimal("2000")),
            DailyStatRecord(employee_id=1, date=date(2025, 3, 30), calculated_revenue=Decimal("500")),
            DailyStatRecord(
                employee_id=3,
                date=date(2025, 3, 31),
                calculated_revenue=Decimal("7000"),
                review_status=ReviewStatus.REJECTED,
            ),
            DailyStatRecord(employee_id=1, date=date(2025, 4, 1), calculated_revenue=Decimal("800")),
        ],
        course_expenses=[
            ExpenseRecord(category="instructor", amount=Decimal("300"), incurred_on=date(2025, 1, 20)),
            ExpenseRecord(category="misc", amount=Decimal("50"), incurred_on=date(2025, 3, 3)),
        ],
        operational_expenses=[
            ExpenseRecord(category="rent", amount=Decimal("400"), incurred_on=date(2025, 2, 1)),
            ExpenseRecord(category="salaries", amount=Decimal("900"), incurred_on=date(2025, 4, 1)),
        ],
        service_sales=[
            ServiceSaleRecord(amount=Decimal("100"), sale_date=date(2025, 3, 15)),
            ServiceSaleRecord(amount=Decimal("999"), sale_date=date(2025, 3, 16), project_id=7),
        ],
        excluded_project_ids=[7],
        courses=[
            CourseRecord(course_id=1, start_date=date(2024, 12, 1), end_date=date(2025, 1, 31)),
            CourseRecord(course_id=2, start_date=date(2025, 2, 1), end_date=date(2025, 2, 10), status="cancelled"),
            CourseRecord(course_id=3, start_date=date(2025, 5, 1), end_date=date(2025, 5, 30)),
        ],
        enrollments=[
            EnrollmentRecord(course_id=1, enrollment_date=date(2025, 1, 2), trainee_count=3),
            EnrollmentRecord(course_id=1, enrollment_date=date(2025, 1, 9), trainee_count=2),
            EnrollmentRecord(course_id=3, enrollment_date=date(2025, 4, 20), trainee_count=6),
        ],
    )


def test_quarter_totals():
    report = build_report(build_q1_source(), "quarterly", 2025, 1)

    assert report.courses_revenue == Decimal("3500")
    assert report.services_revenue == Decimal("300")
    assert report.total_revenue == Decimal("3800")
    assert report.services_count == 1
    assert report.course_expenses == Decimal("350")
    assert report.operational_expenses == Decimal("400")
    assert report.net_profit == Decimal("3050")
    assert report.active_courses == 1
    assert report.total_enrollments == 5


def test_quarter_equals_sum_of_months():
    report = build_report(build_q1_source(), "quarterly", 2025, 1)

    assert [row.month for row in report.monthly_data] == [1, 2, 3]
    assert sum(row.revenue for row in report.monthly_data) == report.total_revenue
    assert sum(row.expenses for row in report.monthly_data) == report.total_expenses
    assert sum(row.profit for row in report.monthly_data) == report.net_profit
    assert report.reconciled
    assert breakdown_matches(report)


def test_annual_report_has_twelve_months():
    report = build_report(build_q1_source(), "annual", 2025)
    assert len(report.monthly_data) == 12
    assert report.monthly_data[3].revenue == Decimal("800")
    assert report.reconciled


def test_monthly_report_has_no_breakdown():
    report = build_report(build_q1_source(), "monthly", 2025, 2)
    assert report.monthly_data is None
    assert report.total_revenue == Decimal("2000")
    assert report.total_expenses == Decimal("400")


def test_expense_categories_always_complete():
    report = aggregate_period(InMemoryFinanceSource(), resolve_period("monthly", 2025, 1))

    assert set(report.course_expenses_by_category) == {"certificates", "instructor", "marketing", "tax", "other"}
    assert set(report.operational_expenses_by_category) == {
        "salaries",
        "electricity",
        "water",
        "rent",
        "government",
        "other",
    }
    assert all(value == 0 for value in report.course_expenses_by_category.values())


def test_unknown_category_folds_into_other():
    totals = sum_by_category(
        [ExpenseRecord(category="misc", amount=Decimal("12.5"), incurred_on=date(2025, 1, 1))],
        ("tax", "other"),
    )
    assert totals == {"tax": Decimal("0"), "other": Decimal("12.5")}


def test_profit_margin_without_revenue_is_zero():
    assert profit_margin(Decimal("-500"), Decimal("0")) == 0
    report = build_report(
        InMemoryFinanceSource(
            operational_expenses=[ExpenseRecord(category="rent", amount=Decimal("500"), incurred_on=date(2025, 6, 1))]
        ),
        "monthly",
        2025,
        6,
    )
    assert report.net_profit == Decimal("-500")
    assert report.profit_margin == 0


def test_profit_margin_percentage():
    assert profit_margin(Decimal("25"), Decimal("200")) == Decimal("12.5")


def test_pending_stats_can_be_excluded():
    report = build_report(build_q1_source(), "quarterly", 2025, 1, include_pending=False)
    assert report.courses_revenue == Decimal("1000")
    assert report.services_revenue == Decimal("300")
