# 📄 File: app/modules/plant_care/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the data formats for plant requests and responses, like what to send when
# adding a plant and what comes back when asking how thirsty it is.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for plant CRUD, plant list filters and care status.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - app.modules.plant_care.domain.models (conversion from domain entities)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1.plants
# - app.modules.plant_care.presentation.api.schemas.schedule_schemas

"""
Plant API Schemas

Request Schemas:
- PlantCreateRequest: New plant with its watering schedule
- PlantUpdateRequest: Partial plant update (only sent fields change)

Response Schemas:
- PlantResponse: Plant information
- CareStatusResponse: Engine output for one plant
- PlantCareStatusResponse: Plant with its care status
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_care.domain.models import CareStatus, CareStatusBucket, Plant, PlantCareStatus


class PlantCreateRequest(BaseModel):
    """Schema for adding a plant to the collection."""

    name: str = Field(..., min_length=1, max_length=100, description="Plant name")
    species: Optional[str] = Field(None, max_length=150)
    location: str = Field(..., min_length=1, max_length=150, description="Where the plant lives")
    image_url: Optional[str] = None
    watering_frequency: int = Field(..., ge=1, description="Days between waterings")
    light_needs: str = Field(..., min_length=1, max_length=50)
    last_watered: Optional[datetime] = None
    notes: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Monstera",
                "species": "Monstera deliciosa",
                "location": "Living room",
                "watering_frequency": 7,
                "light_needs": "Bright indirect",
            }
        }
    )


class PlantUpdateRequest(BaseModel):
    """Schema for partial plant updates."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    species: Optional[str] = Field(None, max_length=150)
    location: Optional[str] = Field(None, min_length=1, max_length=150)
    image_url: Optional[str] = None
    watering_frequency: Optional[int] = Field(None, ge=1)
    light_needs: Optional[str] = Field(None, min_length=1, max_length=50)
    last_watered: Optional[datetime] = None
    notes: Optional[str] = None


class PlantResponse(BaseModel):
    """Schema for plant information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: Optional[str] = None
    location: str
    image_url: Optional[str] = None
    watering_frequency: int
    light_needs: str
    last_watered: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, plant: Plant) -> "PlantResponse":
        return cls.model_validate(plant)


class CareStatusResponse(BaseModel):
    """Care-schedule engine output for one plant."""

    model_config = ConfigDict(from_attributes=True)

    never_cared: bool
    days_until_due: Optional[int] = Field(None, description="Whole days until due, 0 when due or overdue")
    is_overdue: bool
    overdue_by_days: int
    progress: float = Field(..., description="Elapsed fraction of the watering interval, 0..1")
    progress_percent: int
    bucket: CareStatusBucket
    text: str

    @classmethod
    def from_domain(cls, status: CareStatus) -> "CareStatusResponse":
        return cls.model_validate(status)


class PlantCareStatusResponse(BaseModel):
    plant: PlantResponse
    status: CareStatusResponse

    @classmethod
    def from_domain(cls, entry: PlantCareStatus) -> "PlantCareStatusResponse":
        return cls(
            plant=PlantResponse.from_domain(entry.plant),
            status=CareStatusResponse.from_domain(entry.status),
        )
