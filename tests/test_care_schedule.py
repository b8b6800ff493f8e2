"""Per-plant scheduling: days until care, progress, status buckets and text."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from app.modules.plant_care.domain.models import CareStatusBucket
from app.modules.plant_care.domain.services import care_schedule
from app.shared.core.exceptions import CareScheduleError

LAST_CARED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(day: int, hour: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


def test_watered_four_days_ago_weekly_plant():
    now = at(5)

    assert care_schedule.days_until_next_care(LAST_CARED, 7, now=now) == 3
    assert care_schedule.water_progress(LAST_CARED, 7, now=now) == pytest.approx(4 / 7)
    assert care_schedule.care_status_bucket(LAST_CARED, 7, now=now) is CareStatusBucket.IN_DAYS
    assert care_schedule.care_status_text(LAST_CARED, 7, now=now) == "In 3 days"


def test_never_cared_for_is_maximally_urgent():
    now = at(5)

    assert care_schedule.days_until_next_care(None, 7, now=now) is None
    assert care_schedule.water_progress(None, 7, now=now) == 1.0
    assert care_schedule.care_status_text(None, 7, now=now) == "Not yet cared for"
    assert care_schedule.needs_care(None, 7, now=now) is True

    status = care_schedule.care_status(None, 7, now=now)
    assert status.never_cared is True
    assert status.is_overdue is False
    assert status.progress_percent == 100


def test_overdue_plant_saturates():
    now = at(10)

    assert care_schedule.days_until_next_care(LAST_CARED, 7, now=now) == 0
    assert care_schedule.water_progress(LAST_CARED, 7, now=now) == 1.0
    assert care_schedule.care_status_text(LAST_CARED, 7, now=now) == "Needed now"

    status = care_schedule.care_status(LAST_CARED, 7, now=now)
    assert status.bucket is CareStatusBucket.DUE_NOW
    assert status.is_overdue is True
    assert status.overdue_by_days == 2


def test_exactly_due_is_needed_now_but_not_overdue():
    now = at(8)

    assert care_schedule.days_until_next_care(LAST_CARED, 7, now=now) == 0
    status = care_schedule.care_status(LAST_CARED, 7, now=now)
    assert status.text == "Needed now"
    assert status.is_overdue is False
    assert status.overdue_by_days == 0


def test_partial_day_rounds_up():
    # Due 2024-01-08 00:00; 1 day and 1 hour away
    now = datetime(2024, 1, 6, 23, tzinfo=timezone.utc)

    assert care_schedule.days_until_next_care(LAST_CARED, 7, now=now) == 2
    assert care_schedule.care_status_text(LAST_CARED, 7, now=now) == "In 2 days"


def test_due_within_a_day_reads_tomorrow():
    now = datetime(2024, 1, 7, 12, tzinfo=timezone.utc)

    assert care_schedule.days_until_next_care(LAST_CARED, 7, now=now) == 1
    assert care_schedule.care_status_bucket(LAST_CARED, 7, now=now) is CareStatusBucket.TOMORROW
    assert care_schedule.care_status_text(LAST_CARED, 7, now=now) == "Tomorrow"


def test_progress_is_clamped_and_non_decreasing():
    samples = [LAST_CARED + timedelta(hours=hours) for hours in range(-48, 24 * 12, 7)]
    progress = [care_schedule.water_progress(LAST_CARED, 7, now=moment) for moment in samples]

    assert all(0.0 <= value <= 1.0 for value in progress)
    assert progress == sorted(progress)


def test_last_cared_in_the_future_reports_zero_progress():
    assert care_schedule.water_progress(at(10), 7, now=at(5)) == 0.0


def test_progress_percent_rounds_half_up():
    # 3.5 days of a 7 day interval is exactly 50%
    now = datetime(2024, 1, 4, 12, tzinfo=timezone.utc)
    assert care_schedule.water_progress_percent(LAST_CARED, 7, now=now) == 50

    # 1/8 of the interval is 12.5%
    assert care_schedule.water_progress_percent(LAST_CARED, 8, now=at(2)) == 13


def test_naive_datetimes_are_read_as_utc():
    naive_last = datetime(2024, 1, 1)
    naive_now = datetime(2024, 1, 5)

    assert care_schedule.days_until_next_care(naive_last, 7, now=naive_now) == 3
    assert care_schedule.days_until_next_care(naive_last, 7, now=at(5)) == 3


def test_aware_instants_compare_across_timezones():
    last = datetime(2024, 1, 1, 1, tzinfo=ZoneInfo("Europe/Berlin"))  # midnight UTC
    assert care_schedule.days_until_next_care(last, 7, now=at(5)) == 3


def test_next_care_due():
    assert care_schedule.next_care_due(LAST_CARED, 7) == at(8)
    assert care_schedule.next_care_due(None, 7) is None


@pytest.mark.parametrize("frequency", [0, -3, 1.5, True, "7"])
def test_invalid_frequency_is_rejected(frequency):
    with pytest.raises(CareScheduleError) as exc_info:
        care_schedule.days_until_next_care(LAST_CARED, frequency, now=at(5))

    assert exc_info.value.status_code == 422
    assert exc_info.value.details["field"] == "frequency_days"


def test_custom_labels_override_wording():
    labels = {CareStatusBucket.IN_DAYS: "{days}d left"}

    assert care_schedule.care_status_text(LAST_CARED, 7, now=at(5), labels=labels) == "3d left"
    assert care_schedule.care_status_text(None, 7, now=at(5), labels=labels) == "Not yet cared for"


def test_needs_care_follows_the_due_boundary():
    assert care_schedule.needs_care(LAST_CARED, 7, now=at(7)) is False
    assert care_schedule.needs_care(LAST_CARED, 7, now=at(8)) is True
    assert care_schedule.needs_care(LAST_CARED, 7, now=at(20)) is True
