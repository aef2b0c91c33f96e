"""
Conflict detection between proposed intervals and booked sessions.

Dependencies: session_planner.core.scheduling.timeutils
System role: Shared overlap check for suggestions and direct booking
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Any

from session_planner.core.exceptions import ValidationError
from session_planner.core.scheduling.records import (
    CandidateSlot,
    ConflictingSession,
    ConflictResult,
    SessionRecord,
)
from session_planner.core.scheduling.timeutils import intervals_overlap


def find_conflicts(
    start: datetime,
    duration_minutes: int,
    sessions: Iterable[SessionRecord],
    exclude_id: Any = None,
) -> ConflictResult:
    """
    Find sessions overlapping ``[start, start + duration)``.

    Args:
        start: Proposed start instant
        duration_minutes: Proposed length in minutes
        sessions: Existing sessions to test against
        exclude_id: Session to ignore, e.g. the one being rescheduled

    Returns:
        ConflictResult: has_conflict plus every overlapping session in input order

    Raises:
        ValidationError: If duration_minutes is not positive
    """
    if duration_minutes <= 0:
        raise ValidationError("duration must be a positive number of minutes", field="duration")

    end = start + timedelta(minutes=duration_minutes)
    conflicting = tuple(
        ConflictingSession(
            id=session.id,
            session_type=session.session_type_name,
            scheduled_at=session.scheduled_at,
            duration=session.duration,
        )
        for session in sessions
        if (exclude_id is None or session.id != exclude_id)
        and intervals_overlap(start, end, session.scheduled_at, session.end)
    )
    return ConflictResult(has_conflict=bool(conflicting), conflicting_sessions=conflicting)


def slot_conflicts(slot: CandidateSlot, sessions: Iterable[SessionRecord]) -> bool:
    """Whether any session overlaps the slot."""
    return any(
        intervals_overlap(slot.start, slot.end, session.scheduled_at, session.end)
        for session in sessions
    )


def filter_conflicting_slots(
    slots: Iterable[CandidateSlot],
    sessions: Iterable[SessionRecord],
) -> list[CandidateSlot]:
    """Drop slots that overlap any session, preserving order."""
    sessions = list(sessions)
    return [slot for slot in slots if not slot_conflicts(slot, sessions)]
