# 📄 File: app/modules/plant_care/domain/repositories/task_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for storing and finding the care tasks on the calendar.
# 🧪 Purpose (Technical Summary):
# Repository interface for CareTask entities with filtering by type, completion and plant.
# 🔗 Dependencies:
# Domain models (CareTask, TaskType), typing, abc
# 🔄 Connected Modules / Calls From:
# plant_care_service.py, task_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.care_task import CareTask, TaskType


class TaskRepository(ABC):
    """
    Repository interface for CareTask data access operations.

    Listing methods return tasks ordered by scheduled date, then ID.
    """

    @abstractmethod
    async def create(self, task: CareTask) -> CareTask:
        pass

    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional[CareTask]:
        pass

    @abstractmethod
    async def list(
        self,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
        plant_id: Optional[int] = None,
    ) -> List[CareTask]:
        """
        List tasks, optionally filtered.

        Args:
            task_type: Only tasks of this type
            completed: Only completed (True) or open (False) tasks
            plant_id: Only tasks of this plant
        """
        pass

    @abstractmethod
    async def update(self, task: CareTask) -> CareTask:
        """
        Raises:
            TaskNotFoundError: If the task no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, task_id: int) -> bool:
        pass
