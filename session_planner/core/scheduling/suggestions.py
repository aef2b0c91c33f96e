"""
Suggestion pipeline.

Generates candidate slots, removes those overlapping booked sessions, scores
the rest and returns the top ranked suggestions. The pipeline is pure: all
inputs, including the current instant, are passed in.

Dependencies: session_planner.core.scheduling (slots, conflicts, scorer)
System role: Core of the suggestion engine
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from session_planner.core.exceptions import ValidationError
from session_planner.core.scheduling.conflicts import filter_conflicting_slots
from session_planner.core.scheduling.records import (
    AvailabilityWindowRecord,
    SessionRecord,
    SessionTypeStats,
)
from session_planner.core.scheduling.scorer import SlotScorer, round_half_up
from session_planner.core.scheduling.slots import generate_candidate_slots

logger = logging.getLogger(__name__)

NO_SLOTS_MESSAGE = "No available time slots found within your availability windows"


@dataclass(frozen=True)
class RankedSuggestion:
    """A scored slot with its 1-based rank."""

    rank: int
    session_type: dict[str, Any]
    suggested_start: datetime
    suggested_end: datetime
    duration: int
    score: int
    reasons: tuple[str, ...]


@dataclass(frozen=True)
class SuggestionResult:
    """Ranked suggestions plus the statistics they were computed from."""

    suggestions: list[RankedSuggestion]
    stats: SessionTypeStats
    message: str | None = None
    candidate_count: int = field(default=0, compare=False)


def rank_suggestions(
    stats: SessionTypeStats,
    windows: Iterable[AvailabilityWindowRecord],
    existing_sessions: Iterable[SessionRecord],
    *,
    duration_minutes: int,
    days_ahead: int,
    limit: int,
    now: datetime,
) -> SuggestionResult:
    """
    Produce ranked slot suggestions for a session type.

    Args:
        stats: Statistics of the session type being scheduled
        windows: Weekly availability windows
        existing_sessions: Booked sessions from ``now`` onward, of any type
        duration_minutes: Length of the session to place
        days_ahead: Look-ahead horizon in days
        limit: Maximum number of suggestions returned
        now: Current instant

    Returns:
        SuggestionResult: Suggestions ordered by score descending; ties keep
        generation order. When nothing is free, an empty list with a message.

    Raises:
        ValidationError: If limit, days_ahead or duration is not positive
    """
    if limit < 1:
        raise ValidationError("limit must be at least 1", field="limit")

    existing_sessions = list(existing_sessions)
    candidates = generate_candidate_slots(windows, days_ahead, duration_minutes, now)
    available = filter_conflicting_slots(candidates, existing_sessions)

    logger.info(
        "Filtered candidate slots",
        extra={
            "session_type": stats.name,
            "candidate_count": len(candidates),
            "available_count": len(available),
        },
    )

    if not available:
        return SuggestionResult(
            suggestions=[],
            stats=stats,
            message=NO_SLOTS_MESSAGE,
            candidate_count=len(candidates),
        )

    scorer = SlotScorer(stats, existing_sessions, now)
    scored = sorted(
        (scorer.score(slot) for slot in available),
        key=lambda scored_slot: scored_slot.score,
        reverse=True,
    )

    summary = stats.session_type.to_dict()
    suggestions = [
        RankedSuggestion(
            rank=index,
            session_type=summary,
            suggested_start=scored_slot.slot.start,
            suggested_end=scored_slot.slot.end,
            duration=duration_minutes,
            score=int(round_half_up(scored_slot.score)),
            reasons=scored_slot.reasons,
        )
        for index, scored_slot in enumerate(scored[:limit], start=1)
    ]
    return SuggestionResult(
        suggestions=suggestions,
        stats=stats,
        candidate_count=len(candidates),
    )
