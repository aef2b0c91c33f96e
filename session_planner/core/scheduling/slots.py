"""
Candidate slot generation.

Tiles each availability window on a fixed 30-minute grid for every day of
the look-ahead horizon. Windows on the same day are processed independently,
so overlapping windows may yield duplicate instants.

Dependencies: session_planner.core.scheduling.timeutils
System role: First stage of the suggestion pipeline
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from session_planner.core.exceptions import ValidationError
from session_planner.core.scheduling.records import AvailabilityWindowRecord, CandidateSlot
from session_planner.core.scheduling.timeutils import (
    day_of_week,
    start_of_day,
    time_of_day_to_instant,
)

logger = logging.getLogger(__name__)

SLOT_STEP_MINUTES = 30


def generate_candidate_slots(
    windows: Iterable[AvailabilityWindowRecord],
    days_ahead: int,
    duration_minutes: int,
    now: datetime,
) -> list[CandidateSlot]:
    """
    Generate future candidate slots from weekly availability windows.

    Args:
        windows: Availability windows, in the order they should be tiled
        days_ahead: Number of calendar days to cover, starting today
        duration_minutes: Length of each candidate slot
        now: Current instant; only slots starting strictly after it are kept

    Returns:
        list[CandidateSlot]: Ordered by day, then window order, then start

    Raises:
        ValidationError: If days_ahead or duration_minutes is not positive
    """
    if days_ahead <= 0:
        raise ValidationError("days_ahead must be at least 1", field="days_ahead")
    if duration_minutes <= 0:
        raise ValidationError("duration must be a positive number of minutes", field="duration")

    windows = list(windows)
    duration = timedelta(minutes=duration_minutes)
    step = timedelta(minutes=SLOT_STEP_MINUTES)
    today = start_of_day(now)
    slots: list[CandidateSlot] = []

    for offset in range(days_ahead):
        current_day = today + timedelta(days=offset)
        weekday = day_of_week(current_day)

        for window in windows:
            if window.day_of_week != weekday:
                continue

            window_start = time_of_day_to_instant(window.start_time, weekday, current_day)
            window_end = time_of_day_to_instant(window.end_time, weekday, current_day)
            if window_end < now:
                continue

            slot_start = window_start
            while slot_start + duration <= window_end:
                if slot_start > now:
                    slots.append(
                        CandidateSlot(
                            start=slot_start,
                            end=slot_start + duration,
                            day_of_week=weekday,
                        )
                    )
                slot_start += step

    logger.debug(
        "Generated candidate slots",
        extra={
            "window_count": len(windows),
            "days_ahead": days_ahead,
            "duration": duration_minutes,
            "slot_count": len(slots),
        },
    )
    return slots
