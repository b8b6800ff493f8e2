# 📄 File: app/modules/plant_care/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promises the database layer makes to the plant care logic: how plants, tasks and
# activity entries can be saved and found.
# 🧪 Purpose (Technical Summary):
# Repository interfaces (ABCs) for Plant, CareTask and Activity persistence.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# plant_care_service.py, infrastructure repository implementations, test fakes

from .activity_repository import ActivityRepository
from .plant_repository import PlantRepository
from .task_repository import TaskRepository

__all__ = ["ActivityRepository", "PlantRepository", "TaskRepository"]
