# 📄 File: app/modules/plant_care/presentation/api/schemas/task_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats for care task requests and responses, including the task
# list grouped into today, tomorrow, this week and later.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for care task CRUD, completion and bucketed listing.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - app.modules.plant_care.domain.models (CareTask, TaskType, TaskBuckets)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1.tasks
# - app.modules.plant_care.presentation.api.schemas.schedule_schemas

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_care.domain.models import CareTask, TaskBuckets, TaskType


class TaskCreateRequest(BaseModel):
    """Schema for scheduling a care task."""

    plant_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    type: TaskType
    date: datetime
    completed: bool = False


class TaskUpdateRequest(BaseModel):
    """Schema for partial task updates."""

    plant_id: Optional[int] = Field(None, ge=1)
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[TaskType] = None
    date: Optional[datetime] = None
    completed: Optional[bool] = None


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    plant_id: int
    title: str
    type: TaskType
    date: datetime
    completed: bool

    @classmethod
    def from_domain(cls, task: CareTask) -> "TaskResponse":
        return cls.model_validate(task)


class GroupedTasksResponse(BaseModel):
    """Open tasks bucketed by scheduled day."""

    today: List[TaskResponse] = Field(default_factory=list)
    tomorrow: List[TaskResponse] = Field(default_factory=list)
    this_week: List[TaskResponse] = Field(default_factory=list)
    later: List[TaskResponse] = Field(default_factory=list)
    total: int = 0

    @classmethod
    def from_domain(cls, buckets: TaskBuckets) -> "GroupedTasksResponse":
        return cls(
            today=[TaskResponse.from_domain(task) for task in buckets.today],
            tomorrow=[TaskResponse.from_domain(task) for task in buckets.tomorrow],
            this_week=[TaskResponse.from_domain(task) for task in buckets.this_week],
            later=[TaskResponse.from_domain(task) for task in buckets.later],
            total=buckets.total(),
        )
