"""
Aggregate progress statistics.

Overview counts, a per session type breakdown and derived metrics: average
spacing, current and longest streak, most productive weekday and the number
of distinct days with a completed session.

Dependencies: session_planner.core.scheduling (timeutils, type_stats, scorer)
System role: Computation behind the statistics report
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any

from session_planner.core.scheduling.records import SessionRecord, SessionTypeRecord
from session_planner.core.scheduling.scorer import round_half_up
from session_planner.core.scheduling.timeutils import day_of_week
from session_planner.core.scheduling.type_stats import average_spacing_days

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


@dataclass(frozen=True)
class Overview:
    total_sessions: int
    completed_sessions: int
    upcoming_sessions: int
    completion_rate: float


@dataclass(frozen=True)
class TypeBreakdown:
    id: Any
    name: str
    category: str
    priority: int
    total_sessions: int
    completed_sessions: int
    upcoming_sessions: int
    completion_rate: float


@dataclass(frozen=True)
class DerivedMetrics:
    average_spacing: float | None
    current_streak: int
    longest_streak: int
    most_productive_day: str | None
    most_productive_day_index: int | None
    total_days_with_sessions: int


@dataclass(frozen=True)
class AggregateStats:
    overview: Overview
    by_type: list[TypeBreakdown]
    derived_metrics: DerivedMetrics


def _is_upcoming(session: SessionRecord, now: datetime) -> bool:
    return not session.completed and session.scheduled_at >= now


def current_streak(completed_starts: Iterable[datetime], now: datetime) -> int:
    """
    Count consecutive days with a completed session ending today.

    The run may begin yesterday when nothing is completed today yet, and it
    stops at the first day without a completed session. Days after today
    are ignored.
    """
    today = now.date()
    days = {instant.date() for instant in completed_starts if instant.date() <= today}

    check_day = today if today in days else today - timedelta(days=1)
    streak = 0
    while check_day in days:
        streak += 1
        check_day -= timedelta(days=1)
    return streak


def longest_streak(completed_starts: Iterable[datetime]) -> int:
    """Longest run of consecutive calendar days with a completed session."""
    days: list[date] = [instant.date() for instant in sorted(completed_starts)]
    if not days:
        return 0

    run = longest = 1
    for previous, current in zip(days, days[1:]):
        gap = (current - previous).days
        if gap == 0:
            continue
        if gap == 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest


def most_productive_day(completed_starts: Iterable[datetime]) -> int | None:
    """Weekday index (0 = Sunday) with most completions, lowest index on ties."""
    counts = [0] * 7
    for instant in completed_starts:
        counts[day_of_week(instant)] += 1
    best = max(counts)
    return counts.index(best) if best > 0 else None


def compute_aggregate_stats(
    sessions: Iterable[SessionRecord],
    session_types: Iterable[SessionTypeRecord],
    now: datetime,
) -> AggregateStats:
    """
    Build the statistics report over every stored session.

    Args:
        sessions: All sessions of all types
        session_types: All session types, including those without sessions
        now: Current instant separating past from upcoming

    Returns:
        AggregateStats: overview, per type breakdown and derived metrics
    """
    sessions = list(sessions)
    completed = [s for s in sessions if s.completed]
    completed_starts = [s.scheduled_at for s in completed]
    total = len(sessions)

    overview = Overview(
        total_sessions=total,
        completed_sessions=len(completed),
        upcoming_sessions=sum(1 for s in sessions if _is_upcoming(s, now)),
        completion_rate=round_half_up(len(completed) / total, 2) if total else 0,
    )

    by_type = []
    for session_type in session_types:
        own = [s for s in sessions if s.session_type_id == session_type.id]
        own_completed = sum(1 for s in own if s.completed)
        by_type.append(
            TypeBreakdown(
                id=session_type.id,
                name=session_type.name,
                category=session_type.category,
                priority=session_type.priority,
                total_sessions=len(own),
                completed_sessions=own_completed,
                upcoming_sessions=sum(1 for s in own if _is_upcoming(s, now)),
                completion_rate=own_completed / len(own) if own else 0,
            )
        )

    spacing = average_spacing_days(completed_starts)
    best_day = most_productive_day(completed_starts)
    derived = DerivedMetrics(
        average_spacing=round_half_up(spacing, 1) if spacing is not None else None,
        current_streak=current_streak(completed_starts, now),
        longest_streak=longest_streak(completed_starts),
        most_productive_day=DAY_NAMES[best_day] if best_day is not None else None,
        most_productive_day_index=best_day,
        total_days_with_sessions=len({instant.date() for instant in completed_starts}),
    )

    return AggregateStats(overview=overview, by_type=by_type, derived_metrics=derived)
