"""Grouping of care tasks into today / tomorrow / this week / later."""

from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace
from zoneinfo import ZoneInfo

from app.modules.plant_care.domain.services import care_schedule

NOW = datetime(2024, 2, 14, 15, 30, tzinfo=timezone.utc)
MIDNIGHT = NOW.replace(hour=0, minute=0)


def task(name, when):
    return SimpleNamespace(name=name, date=when)


def names(items):
    return [item.name for item in items]


def test_each_task_lands_in_its_group():
    tasks = [
        task("today-late", MIDNIGHT + timedelta(hours=23)),
        task("tomorrow", MIDNIGHT + timedelta(days=1)),
        task("in-two", MIDNIGHT + timedelta(days=2)),
        task("in-six", MIDNIGHT + timedelta(days=6, hours=23)),
        task("in-seven", MIDNIGHT + timedelta(days=7)),
        task("yesterday", MIDNIGHT - timedelta(hours=1)),
    ]

    buckets = care_schedule.bucket_tasks_by_date(tasks, now=NOW)

    assert names(buckets.today) == ["today-late"]
    assert names(buckets.tomorrow) == ["tomorrow"]
    assert names(buckets.this_week) == ["in-two", "in-six"]
    assert names(buckets.later) == ["in-seven", "yesterday"]


def test_task_exactly_a_week_out_goes_to_later():
    buckets = care_schedule.bucket_tasks_by_date([task("week", MIDNIGHT + timedelta(days=7))], now=NOW)

    assert buckets.this_week == []
    assert names(buckets.later) == ["week"]


def test_partition_is_complete_and_keeps_input_order():
    tasks = [task(f"t{offset}", MIDNIGHT + timedelta(days=offset % 9 - 2)) for offset in range(30)]

    buckets = care_schedule.bucket_tasks_by_date(tasks, now=NOW)

    grouped = buckets.today + buckets.tomorrow + buckets.this_week + buckets.later
    assert buckets.total() == len(tasks)
    assert sorted(names(grouped)) == sorted(names(tasks))
    for group in buckets.as_dict().values():
        positions = [tasks.index(item) for item in group]
        assert positions == sorted(positions)


def test_plain_dates_and_missing_dates():
    tasks = [task("date-today", date(2024, 2, 14)), task("undated", None)]

    buckets = care_schedule.bucket_tasks_by_date(tasks, now=NOW)

    assert names(buckets.today) == ["date-today"]
    assert names(buckets.later) == ["undated"]


def test_days_follow_the_timezone_of_now():
    tokyo_now = datetime(2024, 2, 15, 0, 30, tzinfo=ZoneInfo("Asia/Tokyo"))  # still the 14th in UTC
    tasks = [task("utc-evening", datetime(2024, 2, 14, 16, tzinfo=timezone.utc))]  # 01:00 on the 15th in Tokyo

    assert names(care_schedule.bucket_tasks_by_date(tasks, now=tokyo_now).today) == ["utc-evening"]
    assert names(care_schedule.bucket_tasks_by_date(tasks, now=NOW).today) == ["utc-evening"]


def test_custom_date_key():
    rows = [{"id": 1, "when": MIDNIGHT + timedelta(days=1)}]

    buckets = care_schedule.bucket_tasks_by_date(rows, now=NOW, key=lambda row: row["when"])

    assert buckets.tomorrow == rows


def test_empty_input():
    buckets = care_schedule.bucket_tasks_by_date([], now=NOW)

    assert buckets.total() == 0
    assert buckets.as_dict() == {"today": [], "tomorrow": [], "this_week": [], "later": []}
