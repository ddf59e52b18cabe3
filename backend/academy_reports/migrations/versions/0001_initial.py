"""Initial schema for academy reporting."""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


course_status = sa.Enum("upcoming", "active", "completed", "cancelled", name="course_status")
course_expense_category = sa.Enum(
    "certificates", "instructor", "marketing", "tax", "other", name="course_expense_category"
)
operational_expense_category = sa.Enum(
    "salaries", "electricity", "water", "rent", "government", "other", name="operational_expense_category"
)
review_status = sa.Enum("pending", "approved", "rejected", name="review_status")
employee_target_type = sa.Enum(
    "confirmed_customers",
    "registered_customers",
    "targeted_customers",
    "services_sold",
    "sales_amount",
    "daily_calls",
    "other",
    name="employee_target_type",
)
strategic_target_type = sa.Enum(
    "direct_courses",
    "new_courses",
    "recorded_courses",
    "customers",
    "annual_profit",
    "entity_partnerships",
    "individual_partnerships",
    "innovative_ideas",
    "service_quality",
    "customer_satisfaction",
    "website_quality",
    name="strategic_target_type",
)
partnership_type = sa.Enum("entity", "individual", name="partnership_type")
partnership_status = sa.Enum("active", "inactive", name="partnership_status")
idea_status = sa.Enum("pending", "approved", "implemented", "rejected", name="idea_status")
quality_metric = sa.Enum("service_quality", "customer_satisfaction", "website_quality", name="quality_metric")


def upgrade() -> None:
    op.create_table(
        "course_template",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "course",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "template_id", sa.Integer(), sa.ForeignKey("course_template.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("status", course_status, nullable=False, server_default="upcoming"),
        sa.Column("is_recorded", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_course_dates", "course", ["start_date", "end_date"])

    op.create_table(
        "course_enrollment",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("course.id", ondelete="CASCADE"), nullable=False),
        sa.Column("trainee_count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("paid_amount", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("enrollment_date", sa.Date(), nullable=False),
        sa.Column("daily_stat_id", sa.Integer(), nullable=True),
    )
    op.create_index("ix_course_enrollment_enrollment_date", "course_enrollment", ["enrollment_date"])

    op.create_table(
        "course_expense",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("course.id", ondelete="SET NULL"), nullable=True),
        sa.Column("category", course_expense_category, nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("expense_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("ix_course_expense_expense_date", "course_expense", ["expense_date"])

    op.create_table(
        "operational_expense",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("category", operational_expense_category, nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("incurred_on", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("ix_operational_expense_incurred_on", "operational_expense", ["incurred_on"])

    op.create_table(
        "project",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("include_in_reports", sa.Boolean(), nullable=False, server_default=sa.true()),
    )

    op.create_table(
        "service_sale",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("total_amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("sale_date", sa.Date(), nullable=False),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("project.id", ondelete="SET NULL"), nullable=True),
    )
    op.create_index("ix_service_sale_sale_date", "service_sale", ["sale_date"])

    op.create_table(
        "daily_stat",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("course_id", sa.Integer(), nullable=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("confirmed_customers", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("registered_customers", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("targeted_customers", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("targeted_by_services", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("services_sold", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("sales_amount", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("calculated_revenue", sa.Numeric(12, 2), nullable=True),
        sa.Column("fee_breakdown", sa.JSON(), nullable=True),
        sa.Column("review_status", review_status, nullable=False, server_default="pending"),
        sa.Column("reviewed_by", sa.Integer(), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("employee_id", "date", name="uq_daily_stat_employee_date"),
    )
    op.create_index("ix_daily_stat_employee_id", "daily_stat", ["employee_id"])
    op.create_index("ix_daily_stat_date_status", "daily_stat", ["date", "review_status"])

    op.create_table(
        "employee_target",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("target_type", employee_target_type, nullable=False),
        sa.Column("custom_name", sa.String(length=255), nullable=True),
        sa.Column("target_value", sa.Numeric(12, 2), nullable=False),
        sa.Column("base_value", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
    )
    op.create_index("ix_employee_target_period", "employee_target", ["employee_id", "year", "month"])

    op.create_table(
        "strategic_target",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("type", strategic_target_type, nullable=False),
        sa.Column("custom_name", sa.String(length=255), nullable=True),
        sa.Column("baseline", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("target_value", sa.Numeric(14, 2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_strategic_target_year_type", "strategic_target", ["year", "type"])

    op.create_table(
        "partnership",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", partnership_type, nullable=False),
        sa.Column("status", partnership_status, nullable=False, server_default="active"),
        sa.Column("partnership_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_partnership_partnership_date", "partnership", ["partnership_date"])

    op.create_table(
        "innovative_idea",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("status", idea_status, nullable=False, server_default="pending"),
        sa.Column("submission_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_innovative_idea_submission_date", "innovative_idea", ["submission_date"])

    op.create_table(
        "quality_score",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("metric", quality_metric, nullable=False),
        sa.Column("score", sa.Numeric(5, 2), nullable=False),
        sa.Column("measured_on", sa.Date(), nullable=False),
    )
    op.create_index("ix_quality_score_metric_date", "quality_score", ["metric", "measured_on"])


def downgrade() -> None:
    op.drop_index("ix_quality_score_metric_date", table_name="quality_score")
    op.drop_table("quality_score")

    op.drop_index("ix_innovative_idea_submission_date", table_name="innovative_idea")
    op.drop_table("innovative_idea")

    op.drop_index("ix_partnership_partnership_date", table_name="partnership")
    op.drop_table("partnership")

    op.drop_index("ix_strategic_target_year_type", table_name="strategic_target")
    op.drop_table("strategic_target")

    op.drop_index("ix_employee_target_period", table_name="employee_target")
    op.drop_table("employee_target")

    op.drop_index("ix_daily_stat_date_status", table_name="daily_stat")
    op.drop_index("ix_daily_stat_employee_id", table_name="daily_stat")
    op.drop_table("daily_stat")

    op.drop_index("ix_service_sale_sale_date", table_name="service_sale")
    op.drop_table("service_sale")
    op.drop_table("project")

    op.drop_index("ix_operational_expense_incurred_on", table_name="operational_expense")
    op.drop_table("operational_expense")

    op.drop_index("ix_course_expense_expense_date", table_name="course_expense")
    op.drop_table("course_expense")

    op.drop_index("ix_course_enrollment_enrollment_date", table_name="course_enrollment")
    op.drop_table("course_enrollment")

    op.drop_index("ix_course_dates", table_name="course")
    op.drop_table("course")
    op.drop_table("course_template")

    bind = op.get_bind()
    for enum_type in (
        quality_metric,
        idea_status,
        partnership_status,
        partnership_type,
        strategic_target_type,
        employee_target_type,
        review_status,
        operational_expense_category,
        course_expense_category,
        course_status,
    ):
        enum_type.drop(bind, checkfirst=True)
