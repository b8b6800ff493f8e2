# 📄 File: app/modules/plant_care/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant in the collection: what it is, where it lives, how often it needs
# water and when it was last watered.
# 🧪 Purpose (Technical Summary):
# Plant domain entity (pydantic) with watering frequency validation and UTC-normalized
# timestamps; the scheduling inputs for the care-schedule engine.
# 🔗 Dependencies:
# pydantic, app.shared.utils.time
# 🔄 Connected Modules / Calls From:
# plant_care_service.py, plant_repository.py, plant_repository_impl.py, plant API schemas

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.time import ensure_utc, utc_now


class Plant(BaseModel):
    """
    Plant domain model.

    ``last_watered`` is None for a plant that has never been cared for, which
    the care-schedule engine treats as maximally urgent.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=100)
    species: Optional[str] = None
    location: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    watering_frequency: int = Field(..., ge=1)  # days
    light_needs: str = Field(..., min_length=1)
    last_watered: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("last_watered", "created_at")
    @classmethod
    def normalize_timestamps(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    def water(self, when: datetime) -> None:
        """Record a watering at ``when``."""
        self.last_watered = when

    def apply_updates(self, updates: Dict[str, Any]) -> None:
        """Apply a partial update; unknown keys are ignored."""
        for key, value in updates.items():
            if key in ("id", "created_at") or key not in type(self).model_fields:
                continue
            setattr(self, key, value)

    def matches_search(self, term: str) -> bool:
        """Case-insensitive match against name, species and location."""
        needle = term.strip().lower()
        if not needle:
            return True
        haystack = (self.name, self.species or "", self.location)
        return any(needle in field.lower() for field in haystack)
