# 📄 File: app/modules/plant_care/domain/models/summaries.py
# 🧭 Purpose (Layman Explanation):
# The combined views the app shows on its main screens: a plant with its watering status,
# a calendar square with its tasks, and the dashboard overview.
# 🧪 Purpose (Technical Summary):
# Read-model aggregates composed by PlantCareService from entities and engine results.
# 🔗 Dependencies:
# pydantic, domain models
# 🔄 Connected Modules / Calls From:
# plant_care_service.py, schedule/plant API schemas

from typing import Dict, List

from pydantic import BaseModel, Field

from .activity import Activity
from .care_task import CareTask, TaskType
from .plant import Plant
from .schedule import CalendarDay, CareStatus


class PlantCareStatus(BaseModel):
    plant: Plant
    status: CareStatus


class PlantAttention(BaseModel):
    """An open task paired with the plant it belongs to."""
    task: CareTask
    plant: Plant


class CalendarCell(BaseModel):
    day: CalendarDay
    tasks: List[CareTask] = Field(default_factory=list)
    indicators: List[TaskType] = Field(default_factory=list)


class CalendarMonth(BaseModel):
    month: int  # 0-based
    year: int
    days: List[CalendarCell]


class DashboardSummary(BaseModel):
    """
    Dashboard overview.

    ``tasks_by_type`` counts open tasks only; ``attention`` lists the first
    open tasks (by date) whose plant still exists.
    """
    total_plants: int
    needs_watering: int
    open_tasks: int
    tasks_by_type: Dict[str, int] = Field(default_factory=dict)
    attention: List[PlantAttention] = Field(default_factory=list)
    recent_activities: List[Activity] = Field(default_factory=list)
