"""PlantCareService over in-memory repositories."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from app.modules.plant_care.domain.models import CareStatusBucket, TaskType
from app.modules.plant_care.domain.services.plant_care_service import PlantCareService, PlantFilter
from app.shared.core.exceptions import (
    ConflictError,
    PlantNotFoundError,
    TaskNotFoundError,
    ValidationError,
)


def plant_data(name="Monstera", **overrides):
    data = {
        "name": name,
        "species": "Monstera deliciosa",
        "location": "Living room",
        "watering_frequency": 7,
        "light_needs": "Bright indirect",
    }
    data.update(overrides)
    return data


async def test_create_plant_assigns_id(service):
    plant = await service.create_plant(plant_data())

    assert plant.id == 1
    assert plant.last_watered is None
    assert (await service.get_plant(plant.id)).name == "Monstera"


async def test_create_plant_rejects_zero_frequency(service):
    with pytest.raises(ValidationError) as exc_info:
        await service.create_plant(plant_data(watering_frequency=0))

    assert exc_info.value.status_code == 422
    assert exc_info.value.details["errors"][0]["loc"] == ("watering_frequency",)


async def test_get_missing_plant(service):
    with pytest.raises(PlantNotFoundError):
        await service.get_plant(99)


async def test_update_plant_is_partial(service):
    plant = await service.create_plant(plant_data())

    updated = await service.update_plant(plant.id, {"location": "Bedroom"})

    assert updated.location == "Bedroom"
    assert updated.name == "Monstera"
    assert updated.created_at == plant.created_at


async def test_update_plant_validates_values(service):
    plant = await service.create_plant(plant_data())

    with pytest.raises(ValidationError):
        await service.update_plant(plant.id, {"watering_frequency": -1})


async def test_delete_plant(service):
    plant = await service.create_plant(plant_data())

    await service.delete_plant(plant.id)

    with pytest.raises(PlantNotFoundError):
        await service.delete_plant(plant.id)


async def test_list_filters(service, now):
    fern = await service.create_plant(plant_data("fern", last_watered=now - timedelta(days=1)))
    await service.create_plant(plant_data("Aloe", last_watered=now - timedelta(days=9)))
    await service.create_plant(plant_data("cactus", location="Kitchen"))

    thirsty = await service.list_plants(plant_filter=PlantFilter.NEEDS_WATER, now=now)
    assert [p.name for p in thirsty] == ["Aloe", "cactus"]

    alphabetical = await service.list_plants(plant_filter=PlantFilter.ALPHABETICAL)
    assert [p.name for p in alphabetical] == ["Aloe", "cactus", "fern"]

    kitchen = await service.list_plants(search="KITCHEN")
    assert [p.name for p in kitchen] == ["cactus"]

    everything = await service.list_plants()
    assert everything[0].id == fern.id


async def test_recently_added_returns_newest_first(service, now):
    for offset in range(7):
        await service.create_plant(plant_data(f"p{offset}", created_at=now + timedelta(minutes=offset)))

    recent = await service.list_plants(plant_filter=PlantFilter.RECENTLY_ADDED)

    assert [p.name for p in recent] == ["p6", "p5", "p4", "p3", "p2"]


async def test_care_status_for_plant(service, now):
    plant = await service.create_plant(plant_data(last_watered=now - timedelta(days=3)))

    entry = await service.get_care_status(plant.id, now=now)

    assert entry.plant.id == plant.id
    assert entry.status.days_until_due == 4
    assert entry.status.bucket is CareStatusBucket.IN_DAYS
    assert entry.status.text == "In 4 days"
    assert entry.status.progress_percent == 43


async def test_water_plant_records_task_and_activity(service, task_repo, activity_repo, now):
    plant = await service.create_plant(plant_data())

    watered = await service.water_plant(plant.id, now=now)

    assert watered.last_watered == now
    [task] = task_repo.rows.values()
    assert task.title == "Water Monstera"
    assert task.type is TaskType.WATERING
    assert task.completed is True

    [activity] = activity_repo.rows
    assert activity.plant_id == plant.id
    assert activity.type == "watering"
    assert activity.description == "Completed watering for Monstera"
    assert activity.metadata == {"task_id": task.id, "task_title": "Water Monstera"}
    assert activity.date == "2024-02-14"

    status = service.care_status_for(watered, now=now)
    assert status.status.days_until_due == 7
    assert status.status.progress == 0.0


async def test_complete_non_watering_task_leaves_last_watered(service, now):
    plant = await service.create_plant(plant_data())
    task = await service.create_task(
        {"plant_id": plant.id, "title": "Feed", "type": "fertilizing", "date": now}
    )

    completed = await service.complete_task(task.id, now=now)

    assert completed.completed is True
    assert (await service.get_plant(plant.id)).last_watered is None
    [activity] = await service.list_activities(plant_id=plant.id)
    assert activity.type == "fertilizing"


async def test_complete_task_twice_conflicts(service, now):
    plant = await service.create_plant(plant_data())
    task = await service.create_task({"plant_id": plant.id, "title": "Water", "type": "watering", "date": now})
    await service.complete_task(task.id, now=now)

    with pytest.raises(ConflictError):
        await service.complete_task(task.id, now=now)


async def test_create_task_for_missing_plant(service, now):
    with pytest.raises(PlantNotFoundError):
        await service.create_task({"plant_id": 5, "title": "Water", "type": "watering", "date": now})


async def test_create_task_rejects_unknown_type(service, now):
    plant = await service.create_plant(plant_data())

    with pytest.raises(ValidationError):
        await service.create_task({"plant_id": plant.id, "title": "Sing", "type": "singing", "date": now})


async def test_update_and_delete_task(service, now):
    plant = await service.create_plant(plant_data())
    task = await service.create_task({"plant_id": plant.id, "title": "Prune", "type": "pruning", "date": now})

    moved = await service.update_task(task.id, {"date": now + timedelta(days=2)})
    assert moved.date == now + timedelta(days=2)

    with pytest.raises(PlantNotFoundError):
        await service.update_task(task.id, {"plant_id": 42})

    await service.delete_task(task.id)
    with pytest.raises(TaskNotFoundError):
        await service.get_task(task.id)


async def test_grouped_tasks_skip_completed(service, now):
    plant = await service.create_plant(plant_data())
    for days in (0, 1, 3, 10):
        await service.create_task(
            {"plant_id": plant.id, "title": f"+{days}", "type": "watering", "date": now + timedelta(days=days)}
        )
    done = await service.create_task({"plant_id": plant.id, "title": "done", "type": "pruning", "date": now})
    await service.complete_task(done.id, now=now)

    buckets = await service.grouped_tasks(now=now)

    assert [t.title for t in buckets.today] == ["+0"]
    assert [t.title for t in buckets.tomorrow] == ["+1"]
    assert [t.title for t in buckets.this_week] == ["+3"]
    assert [t.title for t in buckets.later] == ["+10"]

    pruning = await service.grouped_tasks(task_type=TaskType.PRUNING, now=now)
    assert pruning.total() == 0


async def test_calendar_attaches_tasks_to_days(service, now):
    plant = await service.create_plant(plant_data())
    await service.create_task({"plant_id": plant.id, "title": "Water", "type": "watering", "date": now})
    await service.create_task({"plant_id": plant.id, "title": "Feed", "type": "fertilizing", "date": now})

    month = await service.calendar(1, 2024, now=now)

    assert len(month.days) == 35
    [today] = [cell for cell in month.days if cell.day.is_today]
    assert [t.title for t in today.tasks] == ["Water", "Feed"]
    assert today.indicators == [TaskType.WATERING, TaskType.FERTILIZING]


async def test_log_activity_without_plant(service, now):
    entry = await service.log_activity({"type": "SENSOR_ALERT", "description": "Low humidity", "timestamp": now})

    assert entry.plant_id is None
    assert (await service.list_activities())[0].description == "Low humidity"


async def test_log_activity_for_missing_plant(service):
    with pytest.raises(PlantNotFoundError):
        await service.log_activity({"plant_id": 3, "type": "note", "description": "Repotted"})


async def test_dashboard(service, now):
    fresh = await service.create_plant(plant_data("fresh", last_watered=now))
    thirsty = await service.create_plant(plant_data("thirsty"))
    for days in range(4):
        await service.create_task(
            {"plant_id": thirsty.id, "title": f"t{days}", "type": "watering", "date": now + timedelta(days=days)}
        )
    await service.create_task({"plant_id": fresh.id, "title": "feed", "type": "fertilizing", "date": now})
    for index in range(6):
        await service.log_activity(
            {"type": "note", "description": f"n{index}", "timestamp": now - timedelta(hours=index)}
        )

    summary = await service.dashboard(now=now)

    assert summary.total_plants == 2
    assert summary.needs_watering == 1
    assert summary.open_tasks == 5
    assert summary.tasks_by_type == {"watering": 4, "fertilizing": 1}
    assert len(summary.attention) == 3
    assert summary.attention[0].plant.name in {"fresh", "thirsty"}
    assert [a.description for a in summary.recent_activities] == ["n0", "n1", "n2", "n3"]


async def test_update_task_completion_goes_through_complete_task(service, activity_repo, now):
    plant = await service.create_plant(plant_data())
    task = await service.create_task({"plant_id": plant.id, "title": "Water", "type": "watering", "date": now})

    done = await service.update_task(task.id, {"title": "Water well", "completed": True}, now=now)

    assert done.completed is True
    assert done.title == "Water well"
    assert (await service.get_plant(plant.id)).last_watered == now
    assert len(activity_repo.rows) == 1
    with pytest.raises(ConflictError):
        await service.complete_task(task.id, now=now)


async def test_update_task_refuses_to_reopen(service, now):
    plant = await service.create_plant(plant_data())
    task = await service.create_task({"plant_id": plant.id, "title": "Prune", "type": "pruning", "date": now})
    await service.complete_task(task.id, now=now)

    with pytest.raises(ConflictError):
        await service.update_task(task.id, {"completed": False}, now=now)

    assert (await service.get_task(task.id)).completed is True


async def test_activity_dates_use_service_timezone(plant_repo, task_repo, activity_repo):
    tokyo = ZoneInfo("Asia/Tokyo")
    tokyo_service = PlantCareService(plant_repo, task_repo, activity_repo, timezone=tokyo)
    morning = datetime(2024, 2, 15, 8, 0, tzinfo=tokyo)
    plant = await tokyo_service.create_plant(plant_data())

    await tokyo_service.water_plant(plant.id, now=morning)
    alert = await tokyo_service.log_activity(
        {"type": "SENSOR_ALERT", "description": "Dry soil", "timestamp": morning}
    )

    assert [activity.date for activity in activity_repo.rows] == ["2024-02-15", "2024-02-15"]
    assert alert.timestamp.date().isoformat() == "2024-02-14"
