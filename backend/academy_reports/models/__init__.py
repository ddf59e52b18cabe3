"""Database model exports."""

from .finance import (
    COURSE_EXPENSE_CATEGORIES,
    OPERATIONAL_EXPENSE_CATEGORIES,
    Course,
    CourseEnrollment,
    CourseExpense,
    CourseTemplate,
    OperationalExpense,
    Project,
    ServiceSale,
)
from .stats import EMPLOYEE_TARGET_TYPES, DailyStat, EmployeeTarget, ReviewStatus
from .targets import (
    InnovativeIdea,
    Partnership,
    QualityScore,
    StrategicTarget,
    StrategicTargetType,
)

__all__ = [
    "Course",
    "CourseTemplate",
    "CourseEnrollment",
    "CourseExpense",
    "OperationalExpense",
    "Project",
    "ServiceSale",
    "DailyStat",
    "EmployeeTarget",
    "ReviewStatus",
    "StrategicTarget",
    "StrategicTargetType",
    "Partnership",
    "InnovativeIdea",
    "QualityScore",
    "COURSE_EXPENSE_CATEGORIES",
    "OPERATIONAL_EXPENSE_CATEGORIES",
    "EMPLOYEE_TARGET_TYPES",
]
