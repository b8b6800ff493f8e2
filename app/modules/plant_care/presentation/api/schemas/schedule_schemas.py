# 📄 File: app/modules/plant_care/presentation/api/schemas/schedule_schemas.py
# 🧭 Purpose (Layman Explanation):
# Data formats for the calendar month view and the dashboard overview.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for the month grid (with per-day tasks and indicators) and the
# dashboard summary.
#
# 🔗 Dependencies:
# - pydantic
# - plant/task/activity schemas, app.modules.plant_care.domain.models
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1.schedule

from datetime import date
from typing import Dict, List

from pydantic import BaseModel, Field

from app.modules.plant_care.domain.models import CalendarMonth, DashboardSummary, TaskType

from .activity_schemas import ActivityResponse
from .plant_schemas import PlantResponse
from .task_schemas import TaskResponse


class CalendarDayResponse(BaseModel):
    date: date
    is_current_month: bool
    is_today: bool
    tasks: List[TaskResponse] = Field(default_factory=list)
    indicators: List[TaskType] = Field(default_factory=list)


class CalendarMonthResponse(BaseModel):
    """Sunday-first month grid; ``month`` is 0-based (0 = January)."""

    month: int
    year: int
    weeks: int
    days: List[CalendarDayResponse]

    @classmethod
    def from_domain(cls, calendar: CalendarMonth) -> "CalendarMonthResponse":
        days = [
            CalendarDayResponse(
                date=cell.day.date,
                is_current_month=cell.day.is_current_month,
                is_today=cell.day.is_today,
                tasks=[TaskResponse.from_domain(task) for task in cell.tasks],
                indicators=list(cell.indicators),
            )
            for cell in calendar.days
        ]
        return cls(month=calendar.month, year=calendar.year, weeks=len(days) // 7, days=days)


class PlantAttentionResponse(BaseModel):
    task: TaskResponse
    plant: PlantResponse


class DashboardResponse(BaseModel):
    total_plants: int
    needs_watering: int
    open_tasks: int
    tasks_by_type: Dict[str, int]
    attention: List[PlantAttentionResponse]
    recent_activities: List[ActivityResponse]

    @classmethod
    def from_domain(cls, summary: DashboardSummary) -> "DashboardResponse":
        return cls(
            total_plants=summary.total_plants,
            needs_watering=summary.needs_watering,
            open_tasks=summary.open_tasks,
            tasks_by_type=dict(summary.tasks_by_type),
            attention=[
                PlantAttentionResponse(
                    task=TaskResponse.from_domain(item.task),
                    plant=PlantResponse.from_domain(item.plant),
                )
                for item in summary.attention
            ],
            recent_activities=[ActivityResponse.from_domain(a) for a in summary.recent_activities],
        )
