# 📄 File: app/modules/plant_care/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups everything that stores plant care data in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for the plant care module.
# 🔗 Dependencies:
# SQLAlchemy, app.shared.infrastructure.database
# 🔄 Connected Modules / Calls From:
# app.modules.plant_care.presentation.dependencies, migrations

from .activity_repository_impl import ActivityRepositoryImpl
from .models import ActivityModel, PlantModel, TaskModel
from .plant_repository_impl import PlantRepositoryImpl
from .task_repository_impl import TaskRepositoryImpl

__all__ = [
    "ActivityModel",
    "PlantModel",
    "TaskModel",
    "ActivityRepositoryImpl",
    "PlantRepositoryImpl",
    "TaskRepositoryImpl",
]
