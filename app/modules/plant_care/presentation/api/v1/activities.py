# 📄 File: app/modules/plant_care/presentation/api/v1/activities.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the plant care diary: read the latest entries or add one by hand.
#
# 🧪 Purpose (Technical Summary):
# FastAPI activity log endpoints (newest-first listing, manual entries).
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.plant_care.presentation.dependencies, activity schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion under /activities)

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.modules.plant_care.domain.services.plant_care_service import PlantCareService
from app.modules.plant_care.presentation.api.schemas import ActivityCreateRequest, ActivityResponse
from app.modules.plant_care.presentation.dependencies import get_clock, get_plant_care_service

activities_router = APIRouter()


@activities_router.get("", response_model=List[ActivityResponse], summary="List activities, newest first")
async def list_activities(
    limit: Optional[int] = Query(None, ge=1, le=500),
    plant_id: Optional[int] = Query(None, ge=1),
    service: PlantCareService = Depends(get_plant_care_service),
) -> List[ActivityResponse]:
    activities = await service.list_activities(limit=limit, plant_id=plant_id)
    return [ActivityResponse.from_domain(activity) for activity in activities]


@activities_router.post(
    "",
    response_model=ActivityResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an activity entry",
    responses={404: {"description": "Plant not found"}},
)
async def create_activity(
    request: ActivityCreateRequest,
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> ActivityResponse:
    data = request.model_dump()
    if data["timestamp"] is None:
        data["timestamp"] = now
    return ActivityResponse.from_domain(await service.log_activity(data))
