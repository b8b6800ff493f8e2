# 📄 File: app/modules/plant_care/domain/services/plant_care_service.py
# 🧭 Purpose (Layman Explanation):
# The plant care assistant: adds and edits plants, keeps the task list, ticks tasks off,
# waters plants, writes the diary and prepares the calendar and dashboard views.
# 🧪 Purpose (Technical Summary):
# Domain service orchestrating Plant/CareTask/Activity repositories and the pure care-schedule
# engine. Every time-dependent operation takes an explicit ``now``.
# 🔗 Dependencies:
# Domain models, repository interfaces, care_schedule engine, app.shared.core.exceptions,
# app.shared.utils.logging (business events)
# 🔄 Connected Modules / Calls From:
# app.modules.plant_care.presentation.dependencies, plant care API routers, tests

import logging
from datetime import datetime, tzinfo
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from ..models.activity import Activity
from ..models.care_task import CareTask, TaskType
from ..models.plant import Plant
from ..models.schedule import TaskBuckets
from ..models.summaries import (
    CalendarCell,
    CalendarMonth,
    DashboardSummary,
    PlantAttention,
    PlantCareStatus,
)
from ..repositories.activity_repository import ActivityRepository
from ..repositories.plant_repository import PlantRepository
from ..repositories.task_repository import TaskRepository
from . import care_schedule
from app.shared.core.exceptions import (
    ConflictError,
    PlantNotFoundError,
    TaskNotFoundError,
    ValidationError,
)
from app.shared.utils.logging import get_logger
from app.shared.utils.time import ensure_aware, local_date, utc_now

logger = logging.getLogger(__name__)
events = get_logger(__name__)


class PlantFilter(str, Enum):
    """Plant list filters offered by the collection screen"""
    ALL = "all"
    NEEDS_WATER = "needs-water"
    RECENTLY_ADDED = "recently-added"
    ALPHABETICAL = "alphabetical"


def _validation_error(entity: str, error: PydanticValidationError) -> ValidationError:
    return ValidationError(
        message=f"Invalid {entity} data",
        details={
            "errors": error.errors(include_url=False, include_context=False, include_input=False)
        },
    )


class PlantCareService:
    """
    Domain service for plant care business logic.

    Implements:
    - Plant collection management with search and filters
    - Care status per plant from the care-schedule engine
    - Care task lifecycle (create, update, complete)
    - Activity log entries for completed care
    - Grouped task list, month calendar and dashboard read models
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        task_repository: TaskRepository,
        activity_repository: ActivityRepository,
        timezone: Optional[tzinfo] = None,
        attention_limit: int = 3,
        recent_activity_limit: int = 4,
        recently_added_limit: int = 5,
    ):
        self.plant_repository = plant_repository
        self.task_repository = task_repository
        self.activity_repository = activity_repository
        self.timezone = timezone
        self.attention_limit = attention_limit
        self.recent_activity_limit = recent_activity_limit
        self.recently_added_limit = recently_added_limit

    def _now(self, now: Optional[datetime]) -> datetime:
        if now is not None:
            return ensure_aware(now)
        current = utc_now()
        return current.astimezone(self.timezone) if self.timezone else current

    # =========================================================================
    # PLANTS
    # =========================================================================

    async def create_plant(self, data: Dict[str, Any]) -> Plant:
        """
        Add a plant to the collection.

        Raises:
            ValidationError: If the plant data is invalid (e.g. frequency < 1)
        """
        try:
            plant = Plant(**data)
        except PydanticValidationError as e:
            raise _validation_error("plant", e) from e

        created = await self.plant_repository.create(plant)
        events.log_business_event(
            "plant_created",
            f"Plant added: {created.name}",
            entity_id=created.id,
            entity_type="plant",
        )
        return created

    async def get_plant(self, plant_id: int) -> Plant:
        plant = await self.plant_repository.get_by_id(plant_id)
        if plant is None:
            raise PlantNotFoundError(plant_id)
        return plant

    async def list_plants(
        self,
        search: Optional[str] = None,
        plant_filter: PlantFilter = PlantFilter.ALL,
        now: Optional[datetime] = None,
    ) -> List[Plant]:
        """
        List plants matching ``search`` under the given filter.

        - needs-water: never watered or due now / overdue
        - recently-added: the newest plants by creation time, newest first
        - alphabetical: sorted by name, case-insensitive
        """
        plants = await self.plant_repository.list_all()
        if search:
            plants = [plant for plant in plants if plant.matches_search(search)]

        if plant_filter == PlantFilter.NEEDS_WATER:
            now = self._now(now)
            return [
                plant for plant in plants
                if care_schedule.needs_care(plant.last_watered, plant.watering_frequency, now=now)
            ]

        if plant_filter == PlantFilter.RECENTLY_ADDED:
            newest = sorted(plants, key=lambda p: (p.created_at, p.id or 0), reverse=True)
            return newest[:self.recently_added_limit]

        if plant_filter == PlantFilter.ALPHABETICAL:
            return sorted(plants, key=lambda p: p.name.casefold())

        return plants

    async def update_plant(self, plant_id: int, updates: Dict[str, Any]) -> Plant:
        """
        Apply a partial update to a plant.

        Raises:
            PlantNotFoundError: If the plant does not exist
            ValidationError: If an updated value is invalid
        """
        plant = await self.get_plant(plant_id)
        try:
            plant.apply_updates(updates)
        except PydanticValidationError as e:
            raise _validation_error("plant", e) from e

        updated = await self.plant_repository.update(plant)
        logger.info(f"Updated plant {plant_id}: {sorted(updates)}")
        return updated

    async def delete_plant(self, plant_id: int) -> None:
        if not await self.plant_repository.delete(plant_id):
            raise PlantNotFoundError(plant_id)
        events.log_business_event(
            "plant_deleted", f"Plant removed: {plant_id}", entity_id=plant_id, entity_type="plant"
        )

    # =========================================================================
    # CARE STATUS
    # =========================================================================

    def care_status_for(self, plant: Plant, now: Optional[datetime] = None) -> PlantCareStatus:
        status = care_schedule.care_status(
            plant.last_watered, plant.watering_frequency, now=self._now(now)
        )
        return PlantCareStatus(plant=plant, status=status)

    async def get_care_status(self, plant_id: int, now: Optional[datetime] = None) -> PlantCareStatus:
        plant = await self.get_plant(plant_id)
        return self.care_status_for(plant, now)

    async def list_care_statuses(self, now: Optional[datetime] = None) -> List[PlantCareStatus]:
        now = self._now(now)
        plants = await self.plant_repository.list_all()
        return [self.care_status_for(plant, now) for plant in plants]

    async def water_plant(self, plant_id: int, now: Optional[datetime] = None) -> Plant:
        """
        Water a plant right now.

        Records a completed watering task dated ``now``, which in turn sets
        ``last_watered`` and writes the activity log entry.
        """
        now = self._now(now)
        plant = await self.get_plant(plant_id)
        task = await self.task_repository.create(
            CareTask(plant_id=plant.id, title=f"Water {plant.name}", type=TaskType.WATERING, date=now)
        )
        await self.complete_task(task.id, now=now)
        return await self.get_plant(plant_id)

    # =========================================================================
    # TASKS
    # =========================================================================

    async def create_task(self, data: Dict[str, Any], now: Optional[datetime] = None) -> CareTask:
        """
        Schedule a care task.

        A task submitted as already completed is stored open and then run
        through ``complete_task``, so watering still sets ``last_watered``.

        Raises:
            ValidationError: If the task data is invalid
            PlantNotFoundError: If the owning plant does not exist
        """
        data = dict(data)
        already_done = bool(data.pop("completed", False))
        try:
            task = CareTask(**data)
        except PydanticValidationError as e:
            raise _validation_error("task", e) from e

        if not await self.plant_repository.exists(task.plant_id):
            raise PlantNotFoundError(task.plant_id)

        created = await self.task_repository.create(task)
        logger.info(f"Scheduled {created.type.value} task {created.id} for plant {created.plant_id}")
        if already_done:
            return await self.complete_task(created.id, now=now)
        return created

    async def get_task(self, task_id: int) -> CareTask:
        task = await self.task_repository.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def list_tasks(
        self,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
        plant_id: Optional[int] = None,
    ) -> List[CareTask]:
        return await self.task_repository.list(task_type=task_type, completed=completed, plant_id=plant_id)

    async def update_task(
        self, task_id: int, updates: Dict[str, Any], now: Optional[datetime] = None
    ) -> CareTask:
        """
        Partially update a task.

        ``completed: true`` on an open task goes through ``complete_task``.

        Raises:
            TaskNotFoundError: If the task does not exist
            PlantNotFoundError: If ``plant_id`` moves the task to an unknown plant
            ConflictError: If ``completed: false`` is sent for a completed task
        """
        updates = dict(updates)
        completed = updates.pop("completed", None)
        task = await self.get_task(task_id)
        if completed is False and task.completed:
            raise ConflictError(
                f"Completed care task cannot be reopened: {task_id}",
                resource_type="task",
                resource_id=task_id,
            )

        new_plant_id = updates.get("plant_id")
        if new_plant_id is not None and new_plant_id != task.plant_id:
            if not await self.plant_repository.exists(new_plant_id):
                raise PlantNotFoundError(new_plant_id)

        try:
            task.apply_updates(updates)
        except PydanticValidationError as e:
            raise _validation_error("task", e) from e

        updated = await self.task_repository.update(task)
        if completed and not updated.completed:
            return await self.complete_task(task_id, now=now)
        return updated

    async def delete_task(self, task_id: int) -> None:
        if not await self.task_repository.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"Deleted task {task_id}")

    async def complete_task(self, task_id: int, now: Optional[datetime] = None) -> CareTask:
        """
        Mark a task as done.

        A watering task also sets the plant's ``last_watered`` to ``now``.
        Every completion is written to the activity log.

        Raises:
            TaskNotFoundError: If the task does not exist
            ConflictError: If the task is already completed
        """
        now = self._now(now)
        task = await self.get_task(task_id)
        if task.completed:
            raise ConflictError(
                f"Care task already completed: {task_id}",
                resource_type="task",
                resource_id=task_id,
            )

        plant = await self.get_plant(task.plant_id)

        task.mark_completed()
        completed = await self.task_repository.update(task)

        if task.is_watering:
            plant.water(now)
            plant = await self.plant_repository.update(plant)

        await self.activity_repository.create(
            Activity(
                plant_id=plant.id,
                type=task.type.value,
                timestamp=now,
                date=now.date().isoformat(),
                description=f"Completed {task.type.value} for {plant.name}",
                metadata={"task_id": task.id, "task_title": task.title},
            )
        )

        events.log_business_event(
            "task_completed",
            f"Task {task.id} ({task.type.value}) completed for plant {plant.id}",
            entity_id=task.id,
            entity_type="task",
            extra={"plant_id": plant.id, "task_type": task.type.value},
        )
        return completed

    async def grouped_tasks(
        self,
        task_type: Optional[TaskType] = None,
        now: Optional[datetime] = None,
    ) -> TaskBuckets:
        """Open tasks (optionally one type) bucketed into today / tomorrow / this week / later."""
        tasks = await self.task_repository.list(task_type=task_type, completed=False)
        return care_schedule.bucket_tasks_by_date(tasks, now=self._now(now))

    # =========================================================================
    # CALENDAR
    # =========================================================================

    async def calendar(self, month: int, year: int, now: Optional[datetime] = None) -> CalendarMonth:
        """
        Month grid (0-based ``month``) with each day's tasks and task-type indicators.

        Raises:
            CareScheduleError: If ``month`` or ``year`` is out of range
        """
        now = self._now(now)
        grid = care_schedule.build_month_grid(month, year, now=now)
        tasks = await self.task_repository.list()

        cells = []
        for day in grid:
            day_tasks = care_schedule.tasks_for_day(tasks, day.date, tz=now.tzinfo)
            cells.append(
                CalendarCell(
                    day=day,
                    tasks=day_tasks,
                    indicators=care_schedule.task_indicators_for_day(day_tasks, day.date, tz=now.tzinfo),
                )
            )

        return CalendarMonth(month=month, year=year, days=cells)

    # =========================================================================
    # ACTIVITIES
    # =========================================================================

    async def list_activities(
        self,
        limit: Optional[int] = None,
        plant_id: Optional[int] = None,
    ) -> List[Activity]:
        if plant_id is not None:
            await self.get_plant(plant_id)
        return await self.activity_repository.list_recent(limit=limit, plant_id=plant_id)

    async def log_activity(self, data: Dict[str, Any]) -> Activity:
        """
        Write an activity log entry.

        Raises:
            ValidationError: If the entry is invalid
            PlantNotFoundError: If ``plant_id`` is given but unknown
        """
        try:
            activity = Activity(**data)
        except PydanticValidationError as e:
            raise _validation_error("activity", e) from e
        if not data.get("date"):
            activity.date = local_date(activity.timestamp, self.timezone).isoformat()

        if activity.plant_id is not None and not await self.plant_repository.exists(activity.plant_id):
            raise PlantNotFoundError(activity.plant_id)

        return await self.activity_repository.create(activity)

    # =========================================================================
    # DASHBOARD
    # =========================================================================

    async def dashboard(self, now: Optional[datetime] = None) -> DashboardSummary:
        now = self._now(now)
        plants = await self.plant_repository.list_all()
        open_tasks = await self.task_repository.list(completed=False)
        recent = await self.activity_repository.list_recent(limit=self.recent_activity_limit)

        needs_watering = sum(
            1 for plant in plants
            if care_schedule.needs_care(plant.last_watered, plant.watering_frequency, now=now)
        )

        tasks_by_type: Dict[str, int] = {}
        for task in open_tasks:
            tasks_by_type[task.type.value] = tasks_by_type.get(task.type.value, 0) + 1

        plants_by_id = {plant.id: plant for plant in plants}
        attention = [
            PlantAttention(task=task, plant=plants_by_id[task.plant_id])
            for task in open_tasks
            if task.plant_id in plants_by_id
        ][:self.attention_limit]

        return DashboardSummary(
            total_plants=len(plants),
            needs_watering=needs_watering,
            open_tasks=len(open_tasks),
            tasks_by_type=tasks_by_type,
            attention=attention,
            recent_activities=recent,
        )
