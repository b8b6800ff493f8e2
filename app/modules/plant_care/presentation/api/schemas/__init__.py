# 📄 File: app/modules/plant_care/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the request and response formats of the plant care API.
# 🧪 Purpose (Technical Summary):
# Pydantic schema package for plant, task, activity, calendar and dashboard endpoints.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# app.modules.plant_care.presentation.api.v1 routers

from .activity_schemas import ActivityCreateRequest, ActivityResponse
from .plant_schemas import (
    CareStatusResponse,
    PlantCareStatusResponse,
    PlantCreateRequest,
    PlantResponse,
    PlantUpdateRequest,
)
from .schedule_schemas import (
    CalendarDayResponse,
    CalendarMonthResponse,
    DashboardResponse,
    PlantAttentionResponse,
)
from .task_schemas import GroupedTasksResponse, TaskCreateRequest, TaskResponse, TaskUpdateRequest

__all__ = [
    "ActivityCreateRequest",
    "ActivityResponse",
    "CareStatusResponse",
    "PlantCareStatusResponse",
    "PlantCreateRequest",
    "PlantResponse",
    "PlantUpdateRequest",
    "CalendarDayResponse",
    "CalendarMonthResponse",
    "DashboardResponse",
    "PlantAttentionResponse",
    "GroupedTasksResponse",
    "TaskCreateRequest",
    "TaskResponse",
    "TaskUpdateRequest",
]
