# 📄 File: app/modules/plant_care/domain/models/schedule.py
# 🧭 Purpose (Layman Explanation):
# The answers the care calendar gives: how soon a plant needs water, which tasks are
# for today or later, and what each square of the month view looks like.
# 🧪 Purpose (Technical Summary):
# Derived, never-persisted value objects produced by the care-schedule engine:
# CareStatusBucket, CareStatus, TaskBuckets and CalendarDay.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# care_schedule.py, plant_care_service.py, schedule API schemas

from datetime import date
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CareStatusBucket(str, Enum):
    """Display category of a plant's next care action"""
    NOT_YET_CARED = "not_yet_cared"
    DUE_NOW = "due_now"          # due today or overdue
    TOMORROW = "tomorrow"
    IN_DAYS = "in_days"          # two or more days away


class CareStatus(BaseModel):
    """
    Complete scheduling picture of one plant at one instant.

    ``days_until_due`` never goes negative; how late a plant is lives in
    ``is_overdue`` / ``overdue_by_days`` instead.
    """

    model_config = ConfigDict(frozen=True)

    never_cared: bool
    days_until_due: Optional[int] = None
    is_overdue: bool = False
    overdue_by_days: int = 0
    progress: float = Field(..., ge=0.0, le=1.0)
    progress_percent: int = Field(..., ge=0, le=100)
    bucket: CareStatusBucket
    text: str


class TaskBuckets(BaseModel, Generic[T]):
    """Tasks split into the four display groups, input order kept inside each."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    today: List[T] = Field(default_factory=list)
    tomorrow: List[T] = Field(default_factory=list)
    this_week: List[T] = Field(default_factory=list)
    later: List[T] = Field(default_factory=list)

    def total(self) -> int:
        return len(self.today) + len(self.tomorrow) + len(self.this_week) + len(self.later)

    def as_dict(self) -> dict:
        return {
            "today": list(self.today),
            "tomorrow": list(self.tomorrow),
            "this_week": list(self.this_week),
            "later": list(self.later),
        }


class CalendarDay(BaseModel):
    """One cell of a Sunday-first month grid."""

    model_config = ConfigDict(frozen=True)

    date: date
    is_current_month: bool
    is_today: bool = False


__all__ = ["CareStatusBucket", "CareStatus", "TaskBuckets", "CalendarDay"]
