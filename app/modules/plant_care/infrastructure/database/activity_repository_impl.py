# 📄 File: app/modules/plant_care/infrastructure/database/activity_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Writes entries into the plant care diary and reads back the latest ones.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of the append-only ActivityRepository, newest-first listing.
#
# 🔗 Dependencies:
# - app.modules.plant_care.domain.repositories.activity_repository (interface)
# - app.modules.plant_care.infrastructure.database.models (ActivityModel)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies
# - app.modules.plant_care.domain.services.plant_care_service

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_care.domain.models.activity import Activity
from app.modules.plant_care.domain.repositories.activity_repository import ActivityRepository
from app.modules.plant_care.infrastructure.database.models import ActivityModel
from app.shared.core.exceptions import RepositoryError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.time import ensure_utc

logger = logging.getLogger(__name__)


class ActivityRepositoryImpl(ActivityRepository):
    """SQLAlchemy implementation of the ActivityRepository interface."""

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, activity: Activity) -> Activity:
        try:
            model = ActivityModel(
                plant_id=activity.plant_id,
                type=activity.type,
                timestamp=ensure_utc(activity.timestamp),
                description=activity.description,
                date=activity.date,
                notes=activity.notes,
                activity_metadata=activity.metadata,
            )
            self._session.add(model)
            await self._session.flush()

            logger.debug(f"Logged {activity.type} activity with ID: {model.id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            logger.error(f"Database error logging activity: {str(e)}")
            raise RepositoryError(
                f"Failed to log activity: {str(e)}", operation="create", entity="activity"
            ) from e

    async def list_recent(
        self,
        limit: Optional[int] = None,
        plant_id: Optional[int] = None,
    ) -> List[Activity]:
        try:
            query = select(ActivityModel).order_by(ActivityModel.timestamp.desc(), ActivityModel.id.desc())
            if plant_id is not None:
                query = query.where(ActivityModel.plant_id == plant_id)
            if limit is not None:
                query = query.limit(limit)

            result = await self._session.execute(query)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing activities: {str(e)}")
            raise RepositoryError(
                f"Failed to list activities: {str(e)}", operation="list_recent", entity="activity"
            ) from e

    def _model_to_domain(self, model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            plant_id=model.plant_id,
            type=model.type,
            timestamp=ensure_utc(model.timestamp),
            description=model.description,
            date=model.date,
            notes=model.notes,
            metadata=model.activity_metadata,
        )
