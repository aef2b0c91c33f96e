"""
Per session type history statistics.

Dependencies: session_planner.core.scheduling.timeutils
System role: Feeds the slot scorer and the suggestion response summary
"""

from collections.abc import Iterable
from datetime import datetime

from session_planner.core.scheduling.records import (
    SessionRecord,
    SessionTypeRecord,
    SessionTypeStats,
)
from session_planner.core.scheduling.timeutils import days_between


def average_spacing_days(instants: Iterable[datetime]) -> float | None:
    """
    Mean gap in days between consecutive instants after sorting.

    Returns None when fewer than two instants are given.
    """
    ordered = sorted(instants)
    if len(ordered) < 2:
        return None
    gaps = [days_between(later, earlier) for earlier, later in zip(ordered, ordered[1:])]
    return sum(gaps) / len(gaps)


def compute_session_type_stats(
    session_type: SessionTypeRecord,
    sessions: Iterable[SessionRecord],
    now: datetime,
) -> SessionTypeStats:
    """
    Summarize the scheduling history of one session type.

    Args:
        session_type: The type being summarized
        sessions: Sessions to consider; those of other types are ignored
        now: Current instant separating past from upcoming

    Returns:
        SessionTypeStats: last scheduled start, upcoming and completed counts,
        and the unrounded average spacing of completed sessions
    """
    own = [s for s in sessions if s.session_type_id == session_type.id]
    completed = [s for s in own if s.completed]

    return SessionTypeStats(
        session_type=session_type,
        last_scheduled=max((s.scheduled_at for s in own), default=None),
        upcoming_count=sum(1 for s in own if not s.completed and s.scheduled_at >= now),
        completed_count=len(completed),
        average_spacing_days=average_spacing_days(s.scheduled_at for s in completed),
    )
