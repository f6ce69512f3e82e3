"""Calendar helpers for day bucketing, weeks and streaks.

All helpers work on local calendar days. Naive datetimes are taken to be
local time; aware datetimes are converted to the local timezone first.
"""

from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Iterable

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class WeekPolicy(str, Enum):
    """How "this week" is bounded."""

    CALENDAR = "calendar"  # Monday through Sunday containing today
    ROLLING = "rolling"  # the seven days ending today


def local_day(value: date | datetime) -> date:
    """Local calendar day of a date or timestamp."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def local_timestamp(value: datetime) -> datetime:
    """Naive local datetime, so naive and aware values sort together."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def start_of_day(day: date) -> datetime:
    """Local midnight at the start of a day, as a naive datetime."""
    return datetime.combine(day, time.min)


def monday_of(day: date) -> date:
    """Monday of the week containing ``day`` (Monday=0 ... Sunday=6)."""
    return day - timedelta(days=day.weekday())


def week_days(today: date, policy: WeekPolicy = WeekPolicy.CALENDAR) -> list[date]:
    """The seven days that make up the current week, oldest first."""
    if policy == WeekPolicy.CALENDAR:
        first = monday_of(today)
    else:
        first = today - timedelta(days=6)
    return [first + timedelta(days=offset) for offset in range(7)]


def weekday_index(day: date) -> int:
    """Weekday number with Sunday=1 through Saturday=7."""
    return day.isoweekday() % 7 + 1


def weekday_label(day: date) -> str:
    """Abbreviated weekday name, e.g. ``Mon``."""
    return WEEKDAY_LABELS[weekday_index(day) - 1]


def streak_ending(days: set[date], today: date) -> int:
    """Count consecutive days in ``days`` ending at ``today``.

    Returns 0 when ``today`` itself is missing.
    """
    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_run(days: Iterable[date]) -> int:
    """Length of the longest run of consecutive days."""
    unique = set(days)
    best = 0
    for day in unique:
        # Only start counting at the first day of a run
        if day - timedelta(days=1) in unique:
            continue
        length = 1
        while day + timedelta(days=length) in unique:
            length += 1
        best = max(best, length)
    return best
