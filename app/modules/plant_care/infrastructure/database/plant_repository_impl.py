# 📄 File: app/modules/plant_care/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for plants: saving new ones, looking them up,
# editing their details and removing them from the collection.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of PlantRepository using SQLAlchemy async sessions, mapping
# PlantModel rows to Plant domain entities with UTC-normalized timestamps.
#
# 🔗 Dependencies:
# - app.modules.plant_care.domain.repositories.plant_repository (interface)
# - app.modules.plant_care.domain.models.plant (domain model)
# - app.modules.plant_care.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (repository wiring)
# - app.modules.plant_care.domain.services.plant_care_service

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_care.domain.models.plant import Plant
from app.modules.plant_care.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_care.infrastructure.database.models import PlantModel
from app.shared.core.exceptions import PlantNotFoundError, RepositoryError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.time import ensure_utc

logger = logging.getLogger(__name__)


class PlantRepositoryImpl(PlantRepository):
    """
    SQLAlchemy implementation of the PlantRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        """
        Initialize the plant repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def create(self, plant: Plant) -> Plant:
        try:
            plant_model = self._domain_to_model(plant)

            self._session.add(plant_model)
            await self._session.flush()  # Get the generated ID

            logger.info(f"Created plant with ID: {plant_model.id}")
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error during plant creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create plant: {str(e)}", operation="create", entity="plant"
            ) from e

    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        try:
            plant_model = await self._session.get(PlantModel, plant_id)
            return self._model_to_domain(plant_model) if plant_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error getting plant {plant_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to get plant: {str(e)}", operation="get_by_id", entity="plant"
            ) from e

    async def list_all(self) -> List[Plant]:
        try:
            result = await self._session.execute(select(PlantModel).order_by(PlantModel.id))
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing plants: {str(e)}")
            raise RepositoryError(
                f"Failed to list plants: {str(e)}", operation="list_all", entity="plant"
            ) from e

    async def update(self, plant: Plant) -> Plant:
        try:
            plant_model = await self._session.get(PlantModel, plant.id)
            if plant_model is None:
                raise PlantNotFoundError(plant.id)

            plant_model.name = plant.name
            plant_model.species = plant.species
            plant_model.location = plant.location
            plant_model.image_url = plant.image_url
            plant_model.watering_frequency = plant.watering_frequency
            plant_model.light_needs = plant.light_needs
            plant_model.last_watered = ensure_utc(plant.last_watered)
            plant_model.notes = plant.notes

            await self._session.flush()
            logger.debug(f"Updated plant {plant.id}")
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating plant {plant.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update plant: {str(e)}", operation="update", entity="plant"
            ) from e

    async def delete(self, plant_id: int) -> bool:
        try:
            result = await self._session.execute(delete(PlantModel).where(PlantModel.id == plant_id))
            deleted = result.rowcount > 0
            if deleted:
                logger.info(f"Deleted plant {plant_id}")
            return deleted

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting plant {plant_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to delete plant: {str(e)}", operation="delete", entity="plant"
            ) from e

    async def exists(self, plant_id: int) -> bool:
        try:
            result = await self._session.execute(
                select(func.count()).select_from(PlantModel).where(PlantModel.id == plant_id)
            )
            return result.scalar_one() > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error checking plant {plant_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to check plant: {str(e)}", operation="exists", entity="plant"
            ) from e

    def _domain_to_model(self, plant: Plant) -> PlantModel:
        """Convert domain Plant to SQLAlchemy model."""
        return PlantModel(
            id=plant.id,
            name=plant.name,
            species=plant.species,
            location=plant.location,
            image_url=plant.image_url,
            watering_frequency=plant.watering_frequency,
            light_needs=plant.light_needs,
            last_watered=ensure_utc(plant.last_watered),
            notes=plant.notes,
            created_at=ensure_utc(plant.created_at),
        )

    def _model_to_domain(self, model: PlantModel) -> Plant:
        """Convert SQLAlchemy model to domain Plant."""
        return Plant(
            id=model.id,
            name=model.name,
            species=model.species,
            location=model.location,
            image_url=model.image_url,
            watering_frequency=model.watering_frequency,
            light_needs=model.light_needs,
            last_watered=ensure_utc(model.last_watered),
            notes=model.notes,
            created_at=ensure_utc(model.created_at),
        )
