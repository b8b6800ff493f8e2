"""
Shared test fixtures for the Plant Care Tracker test suite.

Provides:
- Test environment variables (applied before the application is imported)
- A fixed clock shared by engine, service and API tests
- In-memory repository fakes for PlantCareService tests
- A TestClient running the full lifespan against a fresh SQLite file per test

Usage:
    def test_example(client):
        response = client.post("/api/v1/plants", json={...})
        assert response.status_code == 201
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

import pytest

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("CARE_TIMEZONE", "UTC")
os.environ.setdefault("DB_AUTO_CREATE", "true")

from app.modules.plant_care.domain.models import Activity, CareTask, Plant, TaskType  # noqa: E402
from app.modules.plant_care.domain.repositories import (  # noqa: E402
    ActivityRepository,
    PlantRepository,
    TaskRepository,
)
from app.modules.plant_care.domain.services.plant_care_service import PlantCareService  # noqa: E402
from app.shared.config.settings import get_settings  # noqa: E402
from app.shared.core.exceptions import PlantNotFoundError, TaskNotFoundError  # noqa: E402

# Keep test output clean
logging.getLogger("app").setLevel(logging.WARNING)

FIXED_NOW = datetime(2024, 2, 14, 9, 0, tzinfo=timezone.utc)
# 2024-02-14 23:00 UTC, already the 15th on the care clock
TOKYO_NOW = datetime(2024, 2, 15, 8, 0, tzinfo=ZoneInfo("Asia/Tokyo"))


# ============================ Clock ========================================


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW


# ======================= In-memory repositories ============================


class InMemoryPlantRepository(PlantRepository):
    def __init__(self):
        self.rows: Dict[int, Plant] = {}
        self._next_id = 1

    async def create(self, plant: Plant) -> Plant:
        stored = plant.model_copy(update={"id": self._next_id})
        self.rows[stored.id] = stored
        self._next_id += 1
        return stored.model_copy()

    async def get_by_id(self, plant_id: int) -> Optional[Plant]:
        plant = self.rows.get(plant_id)
        return plant.model_copy() if plant else None

    async def list_all(self) -> List[Plant]:
        return [self.rows[key].model_copy() for key in sorted(self.rows)]

    async def update(self, plant: Plant) -> Plant:
        if plant.id not in self.rows:
            raise PlantNotFoundError(plant.id)
        self.rows[plant.id] = plant.model_copy()
        return plant.model_copy()

    async def delete(self, plant_id: int) -> bool:
        return self.rows.pop(plant_id, None) is not None

    async def exists(self, plant_id: int) -> bool:
        return plant_id in self.rows


class InMemoryTaskRepository(TaskRepository):
    def __init__(self):
        self.rows: Dict[int, CareTask] = {}
        self._next_id = 1

    async def create(self, task: CareTask) -> CareTask:
        stored = task.model_copy(update={"id": self._next_id})
        self.rows[stored.id] = stored
        self._next_id += 1
        return stored.model_copy()

    async def get_by_id(self, task_id: int) -> Optional[CareTask]:
        task = self.rows.get(task_id)
        return task.model_copy() if task else None

    async def list(
        self,
        task_type: Optional[TaskType] = None,
        completed: Optional[bool] = None,
        plant_id: Optional[int] = None,
    ) -> List[CareTask]:
        tasks = [
            task for task in self.rows.values()
            if (task_type is None or task.type == task_type)
            and (completed is None or task.completed == completed)
            and (plant_id is None or task.plant_id == plant_id)
        ]
        return [task.model_copy() for task in sorted(tasks, key=lambda t: (t.date, t.id))]

    async def update(self, task: CareTask) -> CareTask:
        if task.id not in self.rows:
            raise TaskNotFoundError(task.id)
        self.rows[task.id] = task.model_copy()
        return task.model_copy()

    async def delete(self, task_id: int) -> bool:
        return self.rows.pop(task_id, None) is not None


class InMemoryActivityRepository(ActivityRepository):
    def __init__(self):
        self.rows: List[Activity] = []

    async def create(self, activity: Activity) -> Activity:
        stored = activity.model_copy(update={"id": len(self.rows) + 1})
        self.rows.append(stored)
        return stored.model_copy()

    async def list_recent(self, limit: Optional[int] = None, plant_id: Optional[int] = None) -> List[Activity]:
        entries = [a for a in self.rows if plant_id is None or a.plant_id == plant_id]
        entries.sort(key=lambda a: (a.timestamp, a.id), reverse=True)
        return entries[:limit] if limit else entries


@pytest.fixture()
def plant_repo() -> InMemoryPlantRepository:
    return InMemoryPlantRepository()


@pytest.fixture()
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def activity_repo() -> InMemoryActivityRepository:
    return InMemoryActivityRepository()


@pytest.fixture()
def service(plant_repo, task_repo, activity_repo) -> PlantCareService:
    return PlantCareService(
        plant_repository=plant_repo,
        task_repository=task_repo,
        activity_repository=activity_repo,
        timezone=timezone.utc,
    )


# ============================ API client ===================================


def _serve(tmp_path, monkeypatch, clock_now: datetime, care_timezone: str = "UTC"):
    from fastapi.testclient import TestClient

    from app.main import create_application
    from app.modules.plant_care.presentation.dependencies import get_clock

    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'plant_care_test.db'}")
    monkeypatch.setenv("CARE_TIMEZONE", care_timezone)
    get_settings.cache_clear()

    application = create_application()
    application.dependency_overrides[get_clock] = lambda: clock_now

    with TestClient(application) as test_client:
        yield test_client

    get_settings.cache_clear()


@pytest.fixture()
def client(tmp_path, monkeypatch):
    """TestClient over a freshly built application and an empty SQLite file.

    The clock dependency is pinned to FIXED_NOW.
    """
    yield from _serve(tmp_path, monkeypatch, FIXED_NOW)


@pytest.fixture()
def tokyo_client(tmp_path, monkeypatch):
    """Same as ``client`` with CARE_TIMEZONE=Asia/Tokyo and the clock at TOKYO_NOW."""
    yield from _serve(tmp_path, monkeypatch, TOKYO_NOW, "Asia/Tokyo")
