# 📄 File: app/modules/plant_care/domain/models/activity.py
# 🧭 Purpose (Layman Explanation):
# The diary of the collection: every watering, pruning or alert gets a line here.
# 🧪 Purpose (Technical Summary):
# Activity log domain entity with a derived ISO ``date`` string and a free-form
# JSON metadata payload.
# 🔗 Dependencies:
# pydantic, app.shared.utils.time
# 🔄 Connected Modules / Calls From:
# plant_care_service.py, activity_repository.py, activity API schemas

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.shared.utils.time import ensure_utc, utc_now


class Activity(BaseModel):
    """
    Activity log entry.

    ``plant_id`` is None for collection-wide events (for example a sensor alert
    not tied to one plant, or a plant that has since been deleted). ``type``
    holds a task type value or a free tag such as ``SENSOR_ALERT``.
    """

    id: Optional[int] = None
    plant_id: Optional[int] = None
    type: str = Field(..., min_length=1, max_length=50)
    timestamp: datetime = Field(default_factory=utc_now)
    description: str = Field(..., min_length=1)
    date: str = ""
    notes: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    # UTC fallback; the service supplies the care-timezone date.
    @model_validator(mode="after")
    def fill_date(self) -> "Activity":
        if not self.date:
            self.date = self.timestamp.date().isoformat()
        return self
