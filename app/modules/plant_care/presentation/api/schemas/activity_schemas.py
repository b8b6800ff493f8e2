# 📄 File: app/modules/plant_care/presentation/api/schemas/activity_schemas.py
# 🧭 Purpose (Layman Explanation):
# Data formats for writing to and reading from the plant care diary.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for activity log entries.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models (Activity)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1.activities, schedule_schemas

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_care.domain.models import Activity


class ActivityCreateRequest(BaseModel):
    """Schema for a manual activity log entry."""

    plant_id: Optional[int] = Field(None, ge=1)
    type: str = Field(..., min_length=1, max_length=50, description="Task type or free tag, e.g. SENSOR_ALERT")
    description: str = Field(..., min_length=1)
    timestamp: Optional[datetime] = Field(None, description="Defaults to the current time")
    notes: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    plant_id: Optional[int] = None
    type: str
    timestamp: datetime
    description: str
    date: str
    notes: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def from_domain(cls, activity: Activity) -> "ActivityResponse":
        return cls.model_validate(activity)
