# 📄 File: app/modules/plant_care/domain/services/care_schedule.py
# 🧭 Purpose (Layman Explanation):
# The watering calculator. Given when a plant was last cared for and how often it needs care,
# it works out how many days are left, how "thirsty" the plant is, which tasks belong to today
# or later, and how a month calendar should be laid out.
# 🧪 Purpose (Technical Summary):
# Pure, deterministic care-schedule engine. Every function takes ``now`` as an explicit keyword
# argument (defaulting to the real UTC clock only when omitted) and never touches storage.
# 🔗 Dependencies:
# calendar, datetime (standard library), app.shared.utils.time, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# plant_care_service.py (care status, dashboard, grouped tasks, calendar), tests

"""
Care-Schedule Engine

Return contract:
- ``days_until_next_care`` is never negative: a plant due now or overdue
  reports 0. How late a plant is comes from ``care_status`` through
  ``is_overdue`` and ``overdue_by_days``.
- A plant that has never been cared for is maximally urgent: progress 1.0,
  bucket NOT_YET_CARED, and ``days_until_next_care`` is None.
- ``water_progress`` is the fraction of the care interval that has elapsed,
  clamped to [0, 1] and non-decreasing in ``now``.

Naive datetimes are interpreted as UTC. Calendar-date comparisons (task
buckets, month grids) happen in the timezone carried by ``now``.
"""

import calendar
import math
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, tzinfo
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar, Union

from app.modules.plant_care.domain.models.schedule import (
    CalendarDay,
    CareStatus,
    CareStatusBucket,
    TaskBuckets,
)
from app.shared.core.exceptions import CareScheduleError
from app.shared.utils.time import ensure_aware, local_date, utc_now

T = TypeVar("T")

DAY = timedelta(days=1)
DAYS_IN_WEEK = 7

DEFAULT_STATUS_LABELS: Dict[CareStatusBucket, str] = {
    CareStatusBucket.NOT_YET_CARED: "Not yet cared for",
    CareStatusBucket.DUE_NOW: "Needed now",
    CareStatusBucket.TOMORROW: "Tomorrow",
    CareStatusBucket.IN_DAYS: "In {days} days",
}

DateLike = Union[date, datetime]


def _default_task_date(task: Any) -> Optional[DateLike]:
    return task.date


def _default_task_type(task: Any) -> Hashable:
    return task.type


def _resolve_now(now: Optional[datetime]) -> datetime:
    return utc_now() if now is None else ensure_aware(now)


def _check_frequency(frequency_days: int) -> None:
    if isinstance(frequency_days, bool) or not isinstance(frequency_days, int):
        raise CareScheduleError(
            "Care frequency must be a whole number of days",
            field="frequency_days",
            value=frequency_days,
        )
    if frequency_days < 1:
        raise CareScheduleError(
            "Care frequency must be at least 1 day",
            field="frequency_days",
            value=frequency_days,
        )


# =============================================================================
# PER-PLANT SCHEDULING
# =============================================================================

def next_care_due(last_cared: Optional[datetime], frequency_days: int) -> Optional[datetime]:
    """Instant the next care action is due, or None when never cared for."""
    _check_frequency(frequency_days)
    if last_cared is None:
        return None
    return ensure_aware(last_cared) + timedelta(days=frequency_days)


def days_until_next_care(
    last_cared: Optional[datetime],
    frequency_days: int,
    *,
    now: Optional[datetime] = None,
) -> Optional[int]:
    """
    Whole days until the next care action, rounded up.

    Returns None when the plant has never been cared for and 0 when the
    action is due now or overdue.

    Raises:
        CareScheduleError: If ``frequency_days`` is not a positive integer
    """
    next_due = next_care_due(last_cared, frequency_days)
    if next_due is None:
        return None

    now = _resolve_now(now)
    if next_due < now:
        return 0

    whole_days, remainder = divmod(next_due - now, DAY)
    return whole_days + (1 if remainder else 0)


def water_progress(
    last_cared: Optional[datetime],
    frequency_days: int,
    *,
    now: Optional[datetime] = None,
) -> float:
    """
    Fraction of the care interval elapsed since ``last_cared``, in [0, 1].

    Never cared for and past due both saturate at 1.0. A ``last_cared`` in
    the future reports 0.0.
    """
    _check_frequency(frequency_days)
    if last_cared is None:
        return 1.0

    now = _resolve_now(now)
    interval = timedelta(days=frequency_days)
    elapsed = now - ensure_aware(last_cared)

    if elapsed >= interval:
        return 1.0
    if elapsed <= timedelta(0):
        return 0.0
    return elapsed / interval


def water_progress_percent(
    last_cared: Optional[datetime],
    frequency_days: int,
    *,
    now: Optional[datetime] = None,
) -> int:
    """``water_progress`` as a whole percentage, halves rounded up."""
    progress = water_progress(last_cared, frequency_days, now=now)
    return int(math.floor(progress * 100 + 0.5))


def bucket_for_days(days_until: Optional[int]) -> CareStatusBucket:
    """Map a ``days_until_next_care`` result onto its display bucket."""
    if days_until is None:
        return CareStatusBucket.NOT_YET_CARED
    if days_until <= 0:
        return CareStatusBucket.DUE_NOW
    if days_until == 1:
        return CareStatusBucket.TOMORROW
    return CareStatusBucket.IN_DAYS


def format_status_text(
    bucket: CareStatusBucket,
    days_until: Optional[int],
    labels: Optional[Dict[CareStatusBucket, str]] = None,
) -> str:
    template = (labels or DEFAULT_STATUS_LABELS).get(bucket, DEFAULT_STATUS_LABELS[bucket])
    return template.format(days=days_until)


def care_status_bucket(
    last_cared: Optional[datetime],
    frequency_days: int,
    *,
    now: Optional[datetime] = None,
) -> CareStatusBucket:
    return bucket_for_days(days_until_next_care(last_cared, frequency_days, now=now))


def care_status_text(
    last_cared: Optional[datetime],
    frequency_days: int,
    *,
    now: Optional[datetime] = None,
    labels: Optional[Dict[CareStatusBucket, str]] = None,
) -> str:
    """
    Human-readable status ("Not yet cared for", "Needed now", "Tomorrow",
    "In N days"). ``labels`` overrides the wording per bucket; the
    ``{days}`` placeholder receives the day count.
    """
    days_until = days_until_next_care(last_cared, frequency_days, now=now)
    return format_status_text(bucket_for_days(days_until), days_until, labels)


def care_status(
    last_cared: Optional[datetime],
    frequency_days: int,
    *,
    now: Optional[datetime] = None,
    labels: Optional[Dict[CareStatusBucket, str]] = None,
) -> CareStatus:
    """Everything the UI needs about one plant's schedule at ``now``."""
    now = _resolve_now(now)
    next_due = next_care_due(last_cared, frequency_days)
    days_until = days_until_next_care(last_cared, frequency_days, now=now)
    bucket = bucket_for_days(days_until)

    is_overdue = next_due is not None and now > next_due
    overdue_by_days = (now - next_due) // DAY if is_overdue else 0

    return CareStatus(
        never_cared=last_cared is None,
        days_until_due=days_until,
        is_overdue=is_overdue,
        overdue_by_days=overdue_by_days,
        progress=water_progress(last_cared, frequency_days, now=now),
        progress_percent=water_progress_percent(last_cared, frequency_days, now=now),
        bucket=bucket,
        text=format_status_text(bucket, days_until, labels),
    )


def needs_care(
    last_cared: Optional[datetime],
    frequency_days: int,
    *,
    now: Optional[datetime] = None,
) -> bool:
    """True when never cared for or due now / overdue."""
    days_until = days_until_next_care(last_cared, frequency_days, now=now)
    return days_until is None or days_until == 0


# =============================================================================
# TASK GROUPING
# =============================================================================

def bucket_tasks_by_date(
    tasks: Iterable[T],
    *,
    now: Optional[datetime] = None,
    key: Callable[[T], Optional[DateLike]] = _default_task_date,
) -> TaskBuckets:
    """
    Split tasks into today / tomorrow / this week / later.

    Days are compared as calendar dates in ``now``'s timezone:
    ``this_week`` covers today+2 through today+6, and ``later`` takes every
    remaining task, past-dated ones included. Every task lands in exactly one
    group and keeps its input order there.
    """
    now = _resolve_now(now)
    tz = now.tzinfo
    today = now.date()
    buckets = TaskBuckets()

    for task in tasks:
        task_date = key(task)
        if task_date is None:
            buckets.later.append(task)
            continue

        offset = (local_date(task_date, tz) - today).days
        if offset == 0:
            buckets.today.append(task)
        elif offset == 1:
            buckets.tomorrow.append(task)
        elif 1 < offset < DAYS_IN_WEEK:
            buckets.this_week.append(task)
        else:
            buckets.later.append(task)

    return buckets


# =============================================================================
# MONTH CALENDAR
# =============================================================================

def build_month_grid(month: int, year: int, *, now: Optional[datetime] = None) -> List[CalendarDay]:
    """
    Sunday-first grid of whole weeks covering the given month.

    ``month`` is a 0-based index (0 = January), so ``build_month_grid(1, 2024)``
    is February 2024. Padding days from the neighbouring months carry
    ``is_current_month=False``; ``is_today`` is set on at most one cell, and
    only when today falls inside the requested month.

    Raises:
        CareScheduleError: If ``month`` is outside 0..11 or ``year`` is outside
            2..9998. Years 1 and 9999 are rejected whole because padding days
            at their outer edges fall outside the ``datetime.date`` range.
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 0 <= month <= 11:
        raise CareScheduleError("Month index must be between 0 and 11", field="month", value=month)
    if isinstance(year, bool) or not isinstance(year, int) or not MINYEAR < year < MAXYEAR:
        raise CareScheduleError(
            f"Year must be between {MINYEAR + 1} and {MAXYEAR - 1}", field="year", value=year
        )

    today = _resolve_now(now).date()
    month_number = month + 1
    grid = []

    for day in calendar.Calendar(firstweekday=calendar.SUNDAY).itermonthdates(year, month_number):
        in_month = day.month == month_number
        grid.append(CalendarDay(date=day, is_current_month=in_month, is_today=in_month and day == today))

    return grid


def tasks_for_day(
    tasks: Iterable[T],
    day: date,
    *,
    tz: Optional[tzinfo] = None,
    key: Callable[[T], Optional[DateLike]] = _default_task_date,
) -> List[T]:
    """Tasks whose date falls on ``day`` (as seen from ``tz``, UTC by default)."""
    matches = []
    for task in tasks:
        task_date = key(task)
        if task_date is not None and local_date(task_date, tz) == day:
            matches.append(task)
    return matches


def task_indicators_for_day(
    tasks: Iterable[T],
    day: date,
    *,
    tz: Optional[tzinfo] = None,
    key: Callable[[T], Optional[DateLike]] = _default_task_date,
    type_key: Callable[[T], Hashable] = _default_task_type,
) -> List[Hashable]:
    """Distinct task types scheduled on ``day``, in first-seen order."""
    indicators: List[Hashable] = []
    for task in tasks_for_day(tasks, day, tz=tz, key=key):
        task_type = type_key(task)
        if task_type not in indicators:
            indicators.append(task_type)
    return indicators
