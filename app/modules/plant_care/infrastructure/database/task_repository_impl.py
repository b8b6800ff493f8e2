# 📄 File: app/modules/plant_care/infrastructure/database/task_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file stores and finds the care tasks on the plant calendar, like "water the fern on Friday".
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of TaskRepository with type/completion/plant filters and
# date-ordered listing.
#
# 🔗 Dependencies:
# - app.modules.plant_care.domain.repositories.task_repository (interface)
# - app.modules.plant_care.infrastructure.database.models (TaskModel)
# - SQLAlchemy async session
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (repository wiring)
# - app.modules.plant_care.domain.services.plant_care_service

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_care.domain.models.care_task import CareTask, TaskType
from app.modules.plant_care.domain.repositories.task_repository import TaskRepository
from app.modules.plant_care.infrastructure.database.models import TaskModel
from app.shared.core.exceptions import RepositoryError, TaskNotFoundError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.time import ensure_utc

logger = logging.getLogger(__name__)


class TaskRepositoryImpl(TaskRepository):
    """SQLAlchemy implementation of the TaskRepository interface."""

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, task: CareTask) -> CareTask:
        try:
            task_model = self._domain_to_model(task)
            self._session.add(task_model)
            await self._session.flush()

            logger.info(f"Created {task.type.value} task with ID: {task_model.id}")
            return self._model_to_domain(task_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during task creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create task: {str(e)}", operation="create", entity="task"
            ) from e

    async def get_by_id(self, task_id: int) -> Optional[CareTask]:
        try:
            task_model = await self._session.get(TaskModel, task_id)
            return self._model_to_domain(task_model) if task_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error getting task {task_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to get task: {str(e)}", operation="get_by_id", entity="task"
            ) from e

    async def list(
        self,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
        plant_id: Optional[int] = None,
    ) -> List[CareTask]:
        try:
            query = select(TaskModel)

            if task_type is not None:
                query = query.where(TaskModel.type == TaskType(task_type).value)
            if completed is not None:
                query = query.where(TaskModel.completed == completed)
            if plant_id is not None:
                query = query.where(TaskModel.plant_id == plant_id)

            result = await self._session.execute(query.order_by(TaskModel.date, TaskModel.id))
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing tasks: {str(e)}")
            raise RepositoryError(
                f"Failed to list tasks: {str(e)}", operation="list", entity="task"
            ) from e

    async def update(self, task: CareTask) -> CareTask:
        try:
            task_model = await self._session.get(TaskModel, task.id)
            if task_model is None:
                raise TaskNotFoundError(task.id)

            task_model.plant_id = task.plant_id
            task_model.title = task.title
            task_model.type = task.type.value
            task_model.date = ensure_utc(task.date)
            task_model.completed = task.completed

            await self._session.flush()
            return self._model_to_domain(task_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating task {task.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update task: {str(e)}", operation="update", entity="task"
            ) from e

    async def delete(self, task_id: int) -> bool:
        try:
            result = await self._session.execute(delete(TaskModel).where(TaskModel.id == task_id))
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting task {task_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to delete task: {str(e)}", operation="delete", entity="task"
            ) from e

    def _domain_to_model(self, task: CareTask) -> TaskModel:
        return TaskModel(
            id=task.id,
            plant_id=task.plant_id,
            title=task.title,
            type=task.type.value,
            date=ensure_utc(task.date),
            completed=task.completed,
        )

    def _model_to_domain(self, model: TaskModel) -> CareTask:
        return CareTask(
            id=model.id,
            plant_id=model.plant_id,
            title=model.title,
            type=TaskType(model.type),
            date=ensure_utc(model.date),
            completed=bool(model.completed),
        )
