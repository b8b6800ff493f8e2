"""HTTP API end to end over SQLite with the clock pinned to 2024-02-14 09:00 UTC."""

from datetime import datetime, timedelta

from tests.conftest import FIXED_NOW, TOKYO_NOW

API = "/api/v1"


def iso(moment: datetime) -> str:
    return moment.isoformat()


def parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def create_plant(client, name="Monstera", **overrides):
    payload = {
        "name": name,
        "species": "Monstera deliciosa",
        "location": "Living room",
        "watering_frequency": 7,
        "light_needs": "Bright indirect",
    }
    payload.update(overrides)
    response = client.post(f"{API}/plants", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def create_task(client, plant_id, when, task_type="watering", title="Water"):
    response = client.post(
        f"{API}/tasks",
        json={"plant_id": plant_id, "title": title, "type": task_type, "date": iso(when)},
    )
    assert response.status_code == 201, response.text
    return response.json()


# =========================== Plants ========================================


def test_create_and_get_plant(client):
    plant = create_plant(client)

    response = client.get(f"{API}/plants/{plant['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Monstera"
    assert body["watering_frequency"] == 7
    assert body["last_watered"] is None


def test_invalid_plant_uses_error_envelope(client):
    response = client.post(
        f"{API}/plants",
        json={"name": "Fern", "location": "Hall", "watering_frequency": 0, "light_needs": "Low"},
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]["errors"]
    assert response.headers["X-Request-ID"] == error["request_id"]


def test_missing_plant_is_404(client):
    response = client.get(f"{API}/plants/999")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["details"]["plant_id"] == 999


def test_request_id_is_echoed(client):
    response = client.get(f"{API}/plants", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Response-Time" in response.headers


def test_patch_plant(client):
    plant = create_plant(client)

    response = client.patch(f"{API}/plants/{plant['id']}", json={"location": "Office"})

    assert response.status_code == 200
    assert response.json()["location"] == "Office"
    assert response.json()["name"] == "Monstera"


def test_list_plants_with_filters(client):
    create_plant(client, "fern", last_watered=iso(FIXED_NOW - timedelta(days=1)))
    create_plant(client, "Aloe", last_watered=iso(FIXED_NOW - timedelta(days=10)))
    create_plant(client, "cactus", location="Kitchen")

    thirsty = client.get(f"{API}/plants", params={"filter": "needs-water"}).json()
    assert [p["name"] for p in thirsty] == ["Aloe", "cactus"]

    alphabetical = client.get(f"{API}/plants", params={"filter": "alphabetical"}).json()
    assert [p["name"] for p in alphabetical] == ["Aloe", "cactus", "fern"]

    searched = client.get(f"{API}/plants", params={"search": "kitch"}).json()
    assert [p["name"] for p in searched] == ["cactus"]

    assert client.get(f"{API}/plants", params={"filter": "sideways"}).status_code == 422


def test_care_status_endpoints(client):
    plant = create_plant(client, last_watered=iso(FIXED_NOW - timedelta(days=3)))
    create_plant(client, "Ficus")

    single = client.get(f"{API}/plants/{plant['id']}/care-status").json()
    assert single["status"]["days_until_due"] == 4
    assert single["status"]["text"] == "In 4 days"
    assert single["status"]["bucket"] == "in_days"
    assert single["status"]["progress_percent"] == 43

    everything = client.get(f"{API}/plants/care-status").json()
    assert [entry["status"]["text"] for entry in everything] == ["In 4 days", "Not yet cared for"]


def test_water_plant_now(client):
    plant = create_plant(client)

    response = client.post(f"{API}/plants/{plant['id']}/water")

    assert response.status_code == 200
    body = response.json()
    assert parse(body["plant"]["last_watered"]) == FIXED_NOW
    assert body["status"]["days_until_due"] == 7
    assert body["status"]["text"] == "In 7 days"

    tasks = client.get(f"{API}/tasks", params={"plant_id": plant["id"]}).json()
    assert [(t["title"], t["completed"]) for t in tasks] == [("Water Monstera", True)]

    activities = client.get(f"{API}/plants/{plant['id']}/activities").json()
    assert activities[0]["description"] == "Completed watering for Monstera"
    assert activities[0]["metadata"]["task_title"] == "Water Monstera"


def test_delete_plant_removes_tasks_keeps_activities(client):
    plant = create_plant(client)
    create_task(client, plant["id"], FIXED_NOW)
    client.post(f"{API}/plants/{plant['id']}/water")

    response = client.delete(f"{API}/plants/{plant['id']}")

    assert response.status_code == 204
    assert client.get(f"{API}/plants/{plant['id']}").status_code == 404
    assert client.get(f"{API}/tasks").json() == []
    activities = client.get(f"{API}/activities").json()
    assert len(activities) == 1
    assert activities[0]["plant_id"] is None


# ============================ Tasks ========================================


def test_task_lifecycle(client):
    plant = create_plant(client)
    task = create_task(client, plant["id"], FIXED_NOW + timedelta(days=1), "pruning", "Trim")

    fetched = client.get(f"{API}/tasks/{task['id']}").json()
    assert fetched["type"] == "pruning"
    assert fetched["completed"] is False

    moved = client.patch(f"{API}/tasks/{task['id']}", json={"title": "Trim leaves"}).json()
    assert moved["title"] == "Trim leaves"

    completed = client.post(f"{API}/tasks/{task['id']}/complete")
    assert completed.status_code == 200
    assert completed.json()["completed"] is True

    again = client.post(f"{API}/tasks/{task['id']}/complete")
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "CONFLICT"

    assert client.delete(f"{API}/tasks/{task['id']}").status_code == 204
    assert client.get(f"{API}/tasks/{task['id']}").status_code == 404


def test_completing_watering_task_waters_plant(client):
    plant = create_plant(client)
    task = create_task(client, plant["id"], FIXED_NOW - timedelta(days=1))

    client.post(f"{API}/tasks/{task['id']}/complete")

    refreshed = client.get(f"{API}/plants/{plant['id']}").json()
    assert parse(refreshed["last_watered"]) == FIXED_NOW


def test_patching_completed_runs_full_completion(client):
    plant = create_plant(client)
    task = create_task(client, plant["id"], FIXED_NOW)

    patched = client.patch(f"{API}/tasks/{task['id']}", json={"completed": True})

    assert patched.status_code == 200
    assert patched.json()["completed"] is True
    refreshed = client.get(f"{API}/plants/{plant['id']}").json()
    assert parse(refreshed["last_watered"]) == FIXED_NOW
    activities = client.get(f"{API}/plants/{plant['id']}/activities").json()
    assert [a["type"] for a in activities] == ["watering"]
    assert client.post(f"{API}/tasks/{task['id']}/complete").status_code == 409


def test_completed_task_cannot_be_reopened(client):
    plant = create_plant(client)
    task = create_task(client, plant["id"], FIXED_NOW, "pruning", "Trim")
    client.post(f"{API}/tasks/{task['id']}/complete")

    response = client.patch(f"{API}/tasks/{task['id']}", json={"completed": False})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"
    assert client.get(f"{API}/tasks/{task['id']}").json()["completed"] is True


def test_task_created_as_completed_waters_plant(client):
    plant = create_plant(client)

    response = client.post(
        f"{API}/tasks",
        json={
            "plant_id": plant["id"],
            "title": "Water",
            "type": "watering",
            "date": iso(FIXED_NOW),
            "completed": True,
        },
    )

    assert response.status_code == 201
    assert response.json()["completed"] is True
    refreshed = client.get(f"{API}/plants/{plant['id']}").json()
    assert parse(refreshed["last_watered"]) == FIXED_NOW


def test_activity_dates_follow_care_timezone(tokyo_client):
    plant = create_plant(tokyo_client)
    open_task = create_task(tokyo_client, plant["id"], TOKYO_NOW, "pruning", "Trim")

    tokyo_client.post(f"{API}/plants/{plant['id']}/water")
    tokyo_client.post(f"{API}/activities", json={"type": "SENSOR_ALERT", "description": "Dry soil"})

    grouped = tokyo_client.get(f"{API}/tasks/grouped").json()
    assert [t["id"] for t in grouped["today"]] == [open_task["id"]]
    activities = tokyo_client.get(f"{API}/activities").json()
    assert {a["date"] for a in activities} == {"2024-02-15"}


def test_task_for_unknown_plant(client):
    response = client.post(
        f"{API}/tasks",
        json={"plant_id": 77, "title": "Water", "type": "watering", "date": iso(FIXED_NOW)},
    )

    assert response.status_code == 404


def test_grouped_tasks(client):
    plant = create_plant(client)
    midnight = FIXED_NOW.replace(hour=0)
    for offset in (0, 1, 2, 7, -1):
        create_task(client, plant["id"], midnight + timedelta(days=offset), title=f"d{offset}")

    grouped = client.get(f"{API}/tasks/grouped").json()

    assert [t["title"] for t in grouped["today"]] == ["d0"]
    assert [t["title"] for t in grouped["tomorrow"]] == ["d1"]
    assert [t["title"] for t in grouped["this_week"]] == ["d2"]
    assert sorted(t["title"] for t in grouped["later"]) == ["d-1", "d7"]
    assert grouped["total"] == 5


def test_filter_tasks_by_type_and_state(client):
    plant = create_plant(client)
    create_task(client, plant["id"], FIXED_NOW, "watering")
    create_task(client, plant["id"], FIXED_NOW, "light-check", "Check light")

    light = client.get(f"{API}/tasks", params={"type": "light-check"}).json()
    assert [t["title"] for t in light] == ["Check light"]

    done = client.get(f"{API}/tasks", params={"completed": "true"}).json()
    assert done == []


# ======================== Calendar & dashboard =============================


def test_calendar_february_2024(client):
    plant = create_plant(client)
    create_task(client, plant["id"], FIXED_NOW, "fertilizing", "Feed")

    body = client.get(f"{API}/calendar/2024/1").json()

    assert body["weeks"] == 5
    assert len(body["days"]) == 35
    assert body["days"][0]["date"] == "2024-01-28"
    today = [day for day in body["days"] if day["is_today"]]
    assert [day["date"] for day in today] == ["2024-02-14"]
    assert today[0]["indicators"] == ["fertilizing"]
    assert today[0]["tasks"][0]["title"] == "Feed"


def test_calendar_rejects_bad_month(client):
    response = client.get(f"{API}/calendar/2024/12")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "BUSINESS_RULE_VIOLATION"


def test_dashboard(client):
    fresh = create_plant(client, "fresh", last_watered=iso(FIXED_NOW))
    create_plant(client, "thirsty")
    create_task(client, fresh["id"], FIXED_NOW, "pruning", "Trim")

    body = client.get(f"{API}/dashboard").json()

    assert body["total_plants"] == 2
    assert body["needs_watering"] == 1
    assert body["open_tasks"] == 1
    assert body["tasks_by_type"] == {"pruning": 1}
    assert body["attention"][0]["plant"]["name"] == "fresh"
    assert body["recent_activities"] == []


def test_log_activity(client):
    response = client.post(f"{API}/activities", json={"type": "SENSOR_ALERT", "description": "Dry soil"})

    assert response.status_code == 201
    body = response.json()
    assert parse(body["timestamp"]) == FIXED_NOW
    assert body["date"] == "2024-02-14"

    listed = client.get(f"{API}/activities", params={"limit": 1}).json()
    assert [a["description"] for a in listed] == ["Dry soil"]


# ============================ Service ======================================


def test_health(client):
    assert client.get(f"{API}/health").json()["status"] == "healthy"
    assert client.get(f"{API}/health/ready").status_code == 200
    assert client.get(f"{API}/health/live").status_code == 200


def test_unknown_route_uses_error_envelope(client):
    response = client.get(f"{API}/greenhouses")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
