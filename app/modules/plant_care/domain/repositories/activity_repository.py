# 📄 File: app/modules/plant_care/domain/repositories/activity_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for writing to and reading from the plant care diary.
# 🧪 Purpose (Technical Summary):
# Repository interface for the append-only Activity log.
# 🔗 Dependencies:
# Domain models (Activity), typing, abc
# 🔄 Connected Modules / Calls From:
# plant_care_service.py, activity_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.activity import Activity


class ActivityRepository(ABC):
    """Repository interface for activity log entries."""

    @abstractmethod
    async def create(self, activity: Activity) -> Activity:
        pass

    @abstractmethod
    async def list_recent(
        self,
        limit: Optional[int] = None,
        plant_id: Optional[int] = None,
    ) -> List[Activity]:
        """
        Activities newest first.

        Args:
            limit: Maximum number of entries, all when None
            plant_id: Only entries for this plant
        """
        pass
