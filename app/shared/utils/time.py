# 📄 File: app/shared/utils/time.py
#
# 🧭 Purpose (Layman Explanation):
# Small clock helpers so every part of the app agrees on what "now" is and how
# stored dates should be read back, no matter which database saved them.
#
# 🧪 Purpose (Technical Summary):
# Timezone normalization helpers: aware UTC "now", naive-as-UTC coercion for values
# returned by SQLite, and calendar-date projection into a reference timezone.
#
# 🔗 Dependencies:
# - datetime (standard library)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.domain.services.care_schedule (engine inputs)
# - app.modules.plant_care.infrastructure.database (row mapping)
# - app.modules.plant_care.presentation.dependencies (request clock)

from datetime import date, datetime, timezone, tzinfo
from typing import Optional, Union


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Coerce a datetime into an aware UTC value.

    Naive datetimes are interpreted as UTC (SQLite drops offsets on storage).
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, leave aware ones untouched."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def local_date(value: Union[date, datetime], tz: Optional[tzinfo]) -> date:
    """
    Calendar date of ``value`` as seen from ``tz``.

    Plain ``date`` values are already calendar days and pass through unchanged.
    """
    if not isinstance(value, datetime):
        return value
    return ensure_aware(value).astimezone(tz or timezone.utc).date()
