"""Pydantic schemas for strategic and employee target progress."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TargetProgressSchema(BaseModel):
    target_type: str = Field(..., examples=["customers"])
    label: str
    kind: str = Field(..., description="currency, percentage or plain")
    period_target: float
    actual: float
    baseline: float
    net_progress: float
    percentage: float
    annual_target: float | None = Field(
        default=None, description="Annual target value, present for non-annual views"
    )
    formatted: dict[str, str] = Field(default_factory=dict)


class TargetProgressResponse(BaseModel):
    year: int
    period_type: str
    period_index: int | None = None
    targets: dict[str, TargetProgressSchema]


class TargetTypeSchema(BaseModel):
    type: str
    label: str
    kind: str
    actual_source: str


class EmployeeTargetProgressSchema(BaseModel):
    target_type: str
    custom_name: str | None = None
    target_value: float
    base_value: float
    achieved_from_stats: float
    current_value: float
    remaining: float
    percentage: float
    status: str


__all__ = [
    "TargetProgressSchema",
    "TargetProgressResponse",
    "TargetTypeSchema",
    "EmployeeTargetProgressSchema",
]
