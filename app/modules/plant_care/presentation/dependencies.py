# 📄 File: app/modules/plant_care/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands every plant care endpoint what it needs: the plant care assistant wired to the
# database, and the clock that says what "now" is.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies: request clock in the configured care timezone and a
# PlantCareService built from per-request SQLAlchemy repositories sharing one session.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, plant care repositories and service
# 🔄 Connected Modules / Calls From:
# app.modules.plant_care.presentation.api.v1.*, tests (dependency overrides)

"""
Plant Care Module Dependencies

- get_clock: the single place the real clock is read; tests override it to pin "now"
- get_plant_care_service: PlantCareService over SQLAlchemy repositories

All three repositories resolve ``get_db_session`` once per request, so a
service call runs inside one transaction.
"""

from datetime import datetime

from fastapi import Depends

from app.modules.plant_care.domain.services.plant_care_service import PlantCareService
from app.modules.plant_care.infrastructure.database.activity_repository_impl import ActivityRepositoryImpl
from app.modules.plant_care.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.modules.plant_care.infrastructure.database.task_repository_impl import TaskRepositoryImpl
from app.shared.config.settings import Settings, get_settings


def get_clock(settings: Settings = Depends(get_settings)) -> datetime:
    """Current time in the configured care timezone."""
    return datetime.now(settings.care_timezone)


def get_plant_care_service(
    plant_repository: PlantRepositoryImpl = Depends(),
    task_repository: TaskRepositoryImpl = Depends(),
    activity_repository: ActivityRepositoryImpl = Depends(),
    settings: Settings = Depends(get_settings),
) -> PlantCareService:
    return PlantCareService(
        plant_repository=plant_repository,
        task_repository=task_repository,
        activity_repository=activity_repository,
        timezone=settings.care_timezone,
        attention_limit=settings.DASHBOARD_ATTENTION_LIMIT,
        recent_activity_limit=settings.DASHBOARD_RECENT_ACTIVITY_LIMIT,
        recently_added_limit=settings.RECENTLY_ADDED_LIMIT,
    )
