"""
Time arithmetic helpers for weekly scheduling.

Pure functions over naive local datetimes. Weekdays are numbered with
Sunday = 0 through Saturday = 6; times of day are "HH:MM" strings.

Dependencies: datetime, re (stdlib)
System role: Leaf utilities shared by every scheduling component
"""

import re
from datetime import datetime, time, timedelta

from session_planner.core.exceptions import ValidationError

TIME_OF_DAY_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")
ONE_DAY = timedelta(days=1)


def day_of_week(instant: datetime) -> int:
    """Return the weekday of an instant with 0 = Sunday."""
    return (instant.weekday() + 1) % 7


def parse_time_of_day(value: str) -> time:
    """
    Parse an "HH:MM" string.

    Args:
        value: Time of day such as "06:00" or "9:30"

    Returns:
        time: Parsed time with zero seconds

    Raises:
        ValidationError: If value is not a valid 24h "HH:MM" string
    """
    if not isinstance(value, str) or not TIME_OF_DAY_PATTERN.match(value):
        raise ValidationError(
            f"Invalid time format '{value}', expected HH:MM", field="time"
        )
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


def start_of_day(instant: datetime) -> datetime:
    """Truncate an instant to local midnight."""
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def time_of_day_to_instant(time_string: str, weekday: int, reference: datetime) -> datetime:
    """
    Resolve a weekly time of day to a concrete instant.

    Returns the first instant on or after the start of ``reference``'s
    calendar day that falls on ``weekday`` at ``time_string``.

    Args:
        time_string: "HH:MM" time of day
        weekday: Target weekday, 0 = Sunday
        reference: Anchor instant; only its calendar day is used

    Returns:
        datetime: Naive instant with zero seconds and microseconds
    """
    target = parse_time_of_day(time_string)
    midnight = start_of_day(reference)
    offset = (weekday - day_of_week(midnight)) % 7
    return datetime.combine((midnight + timedelta(days=offset)).date(), target)


def intervals_overlap(
    start_a: datetime,
    end_a: datetime,
    start_b: datetime,
    end_b: datetime,
) -> bool:
    """Half-open overlap test; touching intervals do not overlap."""
    return start_a < end_b and start_b < end_a


def day_bounds(instant: datetime) -> tuple[datetime, datetime]:
    """Return (midnight, next midnight) of the day containing ``instant``."""
    midnight = start_of_day(instant)
    return midnight, midnight + ONE_DAY


def days_between(later: datetime, earlier: datetime) -> float:
    """Fractional number of days from ``earlier`` to ``later`` (may be negative)."""
    return (later - earlier) / ONE_DAY
