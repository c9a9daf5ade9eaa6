from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=999999)


def day_bounds(start: datetime, end: datetime) -> Tuple[datetime, datetime]:
    """Widen ``[start, end]`` to whole days so both boundary days are included."""
    return start_of_day(start), end_of_day(end)


def current_week_range(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Monday 00:00:00 through Sunday 23:59:59.999999 of the week containing ``now``."""
    now = now or datetime.utcnow()
    monday = start_of_day(now - timedelta(days=now.weekday()))
    sunday = end_of_day(monday + timedelta(days=6))
    return monday, sunday


def to_naive_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; convert aware datetimes on the way in."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
