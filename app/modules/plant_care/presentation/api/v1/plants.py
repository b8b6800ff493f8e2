# 📄 File: app/modules/plant_care/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for the plant collection: listing and searching plants,
# adding, editing and removing them, checking how thirsty each one is and watering it.
#
# 🧪 Purpose (Technical Summary):
# FastAPI plant endpoints delegating to PlantCareService, with filters, care status from the
# care-schedule engine and the water-now action.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters, status codes
# - app.modules.plant_care.presentation.dependencies (service, clock)
# - app.modules.plant_care.presentation.api.schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion under /plants)

"""
Plants API Endpoints

Endpoints:
- GET /: List plants (search, filter)
- POST /: Add a plant
- GET /care-status: Care status of every plant
- GET /{plant_id}: Get one plant
- PATCH /{plant_id}: Partial update
- DELETE /{plant_id}: Remove a plant and its tasks
- GET /{plant_id}/care-status: Care status of one plant
- POST /{plant_id}/water: Water the plant now
- GET /{plant_id}/activities: Activity log of one plant
"""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.modules.plant_care.domain.services.plant_care_service import PlantCareService, PlantFilter
from app.modules.plant_care.presentation.api.schemas import (
    ActivityResponse,
    PlantCareStatusResponse,
    PlantCreateRequest,
    PlantResponse,
    PlantUpdateRequest,
)
from app.modules.plant_care.presentation.dependencies import get_clock, get_plant_care_service

logger = logging.getLogger(__name__)

plants_router = APIRouter()


@plants_router.get(
    "",
    response_model=List[PlantResponse],
    summary="List plants",
    description="List the plant collection, optionally searched and filtered",
)
async def list_plants(
    search: Optional[str] = Query(None, description="Match on name, species or location"),
    plant_filter: PlantFilter = Query(
        PlantFilter.ALL, alias="filter", description="all, needs-water, recently-added, alphabetical"
    ),
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> List[PlantResponse]:
    plants = await service.list_plants(search=search, plant_filter=plant_filter, now=now)
    return [PlantResponse.from_domain(plant) for plant in plants]


@plants_router.post(
    "",
    response_model=PlantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
    responses={
        201: {"description": "Plant created"},
        422: {"description": "Invalid plant data"},
    },
)
async def create_plant(
    request: PlantCreateRequest,
    service: PlantCareService = Depends(get_plant_care_service),
) -> PlantResponse:
    plant = await service.create_plant(request.model_dump())
    return PlantResponse.from_domain(plant)


@plants_router.get(
    "/care-status",
    response_model=List[PlantCareStatusResponse],
    summary="Care status of every plant",
)
async def list_care_statuses(
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> List[PlantCareStatusResponse]:
    entries = await service.list_care_statuses(now=now)
    return [PlantCareStatusResponse.from_domain(entry) for entry in entries]


@plants_router.get(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Get a plant",
    responses={404: {"description": "Plant not found"}},
)
async def get_plant(
    plant_id: int,
    service: PlantCareService = Depends(get_plant_care_service),
) -> PlantResponse:
    return PlantResponse.from_domain(await service.get_plant(plant_id))


@plants_router.patch(
    "/{plant_id}",
    response_model=PlantResponse,
    summary="Update a plant",
    description="Partial update: only the fields sent are changed",
    responses={404: {"description": "Plant not found"}, 422: {"description": "Invalid plant data"}},
)
async def update_plant(
    plant_id: int,
    request: PlantUpdateRequest,
    service: PlantCareService = Depends(get_plant_care_service),
) -> PlantResponse:
    plant = await service.update_plant(plant_id, request.model_dump(exclude_unset=True))
    return PlantResponse.from_domain(plant)


@plants_router.delete(
    "/{plant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a plant",
    description="Deletes the plant and its care tasks; its activity entries are kept",
    responses={404: {"description": "Plant not found"}},
)
async def delete_plant(
    plant_id: int,
    service: PlantCareService = Depends(get_plant_care_service),
) -> Response:
    await service.delete_plant(plant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@plants_router.get(
    "/{plant_id}/care-status",
    response_model=PlantCareStatusResponse,
    summary="Care status of a plant",
    responses={404: {"description": "Plant not found"}},
)
async def get_care_status(
    plant_id: int,
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> PlantCareStatusResponse:
    return PlantCareStatusResponse.from_domain(await service.get_care_status(plant_id, now=now))


@plants_router.post(
    "/{plant_id}/water",
    response_model=PlantCareStatusResponse,
    summary="Water a plant now",
    description="Records a completed watering task and returns the refreshed care status",
    responses={404: {"description": "Plant not found"}},
)
async def water_plant(
    plant_id: int,
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> PlantCareStatusResponse:
    plant = await service.water_plant(plant_id, now=now)
    logger.info(f"Plant {plant_id} watered via API")
    return PlantCareStatusResponse.from_domain(service.care_status_for(plant, now=now))


@plants_router.get(
    "/{plant_id}/activities",
    response_model=List[ActivityResponse],
    summary="Activity log of a plant",
    responses={404: {"description": "Plant not found"}},
)
async def list_plant_activities(
    plant_id: int,
    limit: Optional[int] = Query(None, ge=1, le=500),
    service: PlantCareService = Depends(get_plant_care_service),
) -> List[ActivityResponse]:
    activities = await service.list_activities(limit=limit, plant_id=plant_id)
    return [ActivityResponse.from_domain(activity) for activity in activities]
