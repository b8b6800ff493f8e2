# 📄 File: app/modules/plant_care/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core plant care data models: plants, their care tasks, the activity diary
# and the calendar answers derived from them.
# 🧪 Purpose (Technical Summary):
# Package initialization for plant care domain entities and the derived schedule value objects.
# 🔗 Dependencies:
# Domain model classes, enums, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer, presentation schemas

"""
Plant Care Domain Models

Entities:
- Plant: a plant with its watering frequency and last watering time
- CareTask: a scheduled care action (watering, fertilizing, pruning, light check)
- Activity: an entry in the activity log

Derived values (recomputed per query, never stored):
- CareStatus / CareStatusBucket: how soon a plant needs care
- TaskBuckets: tasks grouped into today / tomorrow / this week / later
- CalendarDay: one cell of a month grid
- PlantCareStatus, CalendarMonth, DashboardSummary: read models for the API
"""

from .activity import Activity
from .care_task import CareTask, TaskType
from .plant import Plant
from .schedule import CalendarDay, CareStatus, CareStatusBucket, TaskBuckets
from .summaries import CalendarCell, CalendarMonth, DashboardSummary, PlantAttention, PlantCareStatus

__all__ = [
    "Activity",
    "CareTask",
    "TaskType",
    "Plant",
    "CalendarDay",
    "CareStatus",
    "CareStatusBucket",
    "TaskBuckets",
    "CalendarCell",
    "CalendarMonth",
    "DashboardSummary",
    "PlantAttention",
    "PlantCareStatus",
]
