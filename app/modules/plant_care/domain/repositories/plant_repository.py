# 📄 File: app/modules/plant_care/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update and delete plants in the database.
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for Plant entities following the Repository pattern.
# 🔗 Dependencies:
# Domain models (Plant), typing, abc
# 🔄 Connected Modules / Calls From:
# plant_care_service.py, plant_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant


class PlantRepository(ABC):
    """
    Repository interface for Plant entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (Plant), not database models
    - All operations are async for non-blocking I/O
    """

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """
        Persist a new plant.

        Returns:
            Created Plant entity with ``id`` populated

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        """Get plant by ID, None when it does not exist."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Plant]:
        """All plants in insertion order."""
        pass

    @abstractmethod
    async def update(self, plant: Plant) -> Plant:
        """
        Save changes to an existing plant.

        Raises:
            PlantNotFoundError: If the plant no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, plant_id: int) -> bool:
        """Delete a plant (its tasks go with it). Returns False when absent."""
        pass

    @abstractmethod
    async def exists(self, plant_id: int) -> bool:
        pass
