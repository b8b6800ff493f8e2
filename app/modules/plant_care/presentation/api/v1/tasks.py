# 📄 File: app/modules/plant_care/presentation/api/v1/tasks.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for care tasks: the to-do list grouped by day,
# scheduling new tasks, editing them and ticking them off.
#
# 🧪 Purpose (Technical Summary):
# FastAPI care task endpoints delegating to PlantCareService, including bucketed listing and
# task completion (which updates the plant and the activity log).
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters, status codes
# - app.modules.plant_care.presentation.dependencies (service, clock)
# - app.modules.plant_care.presentation.api.schemas.task_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion under /tasks)

"""
Tasks API Endpoints

Endpoints:
- GET /: List tasks (type, completed, plant filters)
- POST /: Schedule a task
- GET /grouped: Open tasks in today / tomorrow / this week / later
- GET /{task_id}: Get one task
- PATCH /{task_id}: Partial update
- DELETE /{task_id}: Delete a task
- POST /{task_id}/complete: Complete a task
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.modules.plant_care.domain.models import TaskType
from app.modules.plant_care.domain.services.plant_care_service import PlantCareService
from app.modules.plant_care.presentation.api.schemas import (
    GroupedTasksResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)
from app.modules.plant_care.presentation.dependencies import get_clock, get_plant_care_service

tasks_router = APIRouter()


@tasks_router.get("", response_model=List[TaskResponse], summary="List care tasks")
async def list_tasks(
    task_type: Optional[TaskType] = Query(None, alias="type", description="Only tasks of this type"),
    completed: Optional[bool] = Query(None, description="Only completed or open tasks"),
    plant_id: Optional[int] = Query(None, ge=1),
    service: PlantCareService = Depends(get_plant_care_service),
) -> List[TaskResponse]:
    tasks = await service.list_tasks(task_type=task_type, completed=completed, plant_id=plant_id)
    return [TaskResponse.from_domain(task) for task in tasks]


@tasks_router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a care task",
    responses={404: {"description": "Plant not found"}, 422: {"description": "Invalid task data"}},
)
async def create_task(
    request: TaskCreateRequest,
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> TaskResponse:
    return TaskResponse.from_domain(await service.create_task(request.model_dump(), now=now))


@tasks_router.get(
    "/grouped",
    response_model=GroupedTasksResponse,
    summary="Open tasks grouped by day",
    description="Today, tomorrow, the rest of this week, and later (including past-dated tasks)",
)
async def grouped_tasks(
    task_type: Optional[TaskType] = Query(None, alias="type", description="Only tasks of this type"),
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> GroupedTasksResponse:
    buckets = await service.grouped_tasks(task_type=task_type, now=now)
    return GroupedTasksResponse.from_domain(buckets)


@tasks_router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a care task",
    responses={404: {"description": "Task not found"}},
)
async def get_task(
    task_id: int,
    service: PlantCareService = Depends(get_plant_care_service),
) -> TaskResponse:
    return TaskResponse.from_domain(await service.get_task(task_id))


@tasks_router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Update a care task",
    description="Setting completed to true completes the task; completed tasks cannot be reopened",
    responses={404: {"description": "Task or plant not found"}, 409: {"description": "Task cannot be reopened"}},
)
async def update_task(
    task_id: int,
    request: TaskUpdateRequest,
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> TaskResponse:
    task = await service.update_task(task_id, request.model_dump(exclude_unset=True), now=now)
    return TaskResponse.from_domain(task)


@tasks_router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a care task",
    responses={404: {"description": "Task not found"}},
)
async def delete_task(
    task_id: int,
    service: PlantCareService = Depends(get_plant_care_service),
) -> Response:
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@tasks_router.post(
    "/{task_id}/complete",
    response_model=TaskResponse,
    summary="Complete a care task",
    description="Watering tasks also update the plant's last watering time",
    responses={404: {"description": "Task not found"}, 409: {"description": "Task already completed"}},
)
async def complete_task(
    task_id: int,
    now: datetime = Depends(get_clock),
    service: PlantCareService = Depends(get_plant_care_service),
) -> TaskResponse:
    return TaskResponse.from_domain(await service.complete_task(task_id, now=now))
