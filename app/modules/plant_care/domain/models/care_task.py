# 📄 File: app/modules/plant_care/domain/models/care_task.py
# 🧭 Purpose (Layman Explanation):
# A single care job on the calendar, like "water the fern on Friday".
# 🧪 Purpose (Technical Summary):
# CareTask domain entity and TaskType enumeration used by task bucketing, the
# month calendar and the dashboard counters.
# 🔗 Dependencies:
# pydantic, enum
# 🔄 Connected Modules / Calls From:
# care_schedule.py, plant_care_service.py, task_repository.py, task API schemas

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.time import ensure_utc


class TaskType(str, Enum):
    """Kinds of scheduled care actions"""
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    LIGHT_CHECK = "light-check"


class CareTask(BaseModel):
    """Scheduled care action for one plant."""

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    plant_id: int
    title: str = Field(..., min_length=1, max_length=200)
    type: TaskType
    date: datetime
    completed: bool = False

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def is_watering(self) -> bool:
        return self.type == TaskType.WATERING

    def mark_completed(self) -> None:
        self.completed = True

    def apply_updates(self, updates: Dict[str, Any]) -> None:
        for key, value in updates.items():
            if key == "id" or key not in type(self).model_fields:
                continue
            setattr(self, key, value)
