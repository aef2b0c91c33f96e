"""
Heuristic slot scorer.

Scores a candidate slot for one session type with seven additive factors and
collects a human-readable reason for each factor that fires. Scores are not
clamped and may be negative.

Factors:
    1. Priority: 20 points per priority level
    2. Recency: up to 50 points for time since the type was last scheduled
    3. Spacing consistency: up to 30 points for matching the usual gap
    4. Daily load: penalty per session and per priority point on that day
    5. Time of day: morning for high priority, afternoon for low priority
    6. Urgency: sooner slots score higher
    7. Buffer: bonus when no session sits within 30 minutes on either side

Dependencies: session_planner.core.scheduling.timeutils
System role: Ranking stage of the suggestion pipeline
"""

import math
from collections.abc import Iterable
from datetime import datetime

from session_planner.core.scheduling.records import (
    CandidateSlot,
    ScoredSlot,
    SessionRecord,
    SessionTypeStats,
)
from session_planner.core.scheduling.timeutils import day_bounds, days_between

PRIORITY_WEIGHT = 20
HIGH_PRIORITY = 4
LOW_PRIORITY = 2

RECENCY_POINTS_PER_DAY = 5
RECENCY_CAP = 50
RECENCY_REASON_MIN_DAYS = 2
FIRST_TIME_BONUS = 30

SPACING_MAX = 30
SPACING_POINTS_PER_DAY = 5
SPACING_MATCH_DAYS = 0.5

SESSION_COUNT_PENALTY = 15
PRIORITY_LOAD_PENALTY = 5
BUSY_DAY_SESSIONS = 3
HIGH_PRIORITY_LOAD = 15

TIME_OF_DAY_BONUS = 10
MORNING_HOURS = range(6, 11)
AFTERNOON_HOURS = range(14, 19)

URGENCY_MAX = 40
URGENCY_POINTS_PER_DAY = 3

BUFFER_MINUTES = 30
BUFFER_BONUS = 15


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, e.g. 2.5 -> 3 and -2.5 -> -2."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class SlotScorer:
    """Score candidate slots for one session type against booked sessions."""

    def __init__(
        self,
        stats: SessionTypeStats,
        existing_sessions: Iterable[SessionRecord],
        now: datetime,
    ) -> None:
        """
        Initialize scorer.

        Args:
            stats: History of the session type being scheduled
            existing_sessions: Booked sessions considered for load and buffer
            now: Current instant used by the urgency factor
        """
        self.stats = stats
        self.existing_sessions = list(existing_sessions)
        self.now = now

    def score(self, slot: CandidateSlot) -> ScoredSlot:
        """Evaluate every factor for ``slot`` and sum them."""
        reasons: list[str] = []
        total = (
            self._priority(reasons)
            + self._recency(slot, reasons)
            + self._spacing(slot, reasons)
            + self._daily_load(slot, reasons)
            + self._time_of_day(slot, reasons)
            + self._urgency(slot)
            + self._buffer(slot, reasons)
        )
        return ScoredSlot(slot=slot, score=total, reasons=tuple(reasons))

    def _priority(self, reasons: list[str]) -> float:
        priority = self.stats.priority
        if priority >= HIGH_PRIORITY:
            reasons.append(f"High priority ({priority}/5) session type")
        return PRIORITY_WEIGHT * priority

    def _recency(self, slot: CandidateSlot, reasons: list[str]) -> float:
        last_scheduled = self.stats.last_scheduled
        if last_scheduled is None:
            reasons.append("First time scheduling this session type")
            return FIRST_TIME_BONUS

        days_since = days_between(slot.start, last_scheduled)
        if days_since >= RECENCY_REASON_MIN_DAYS:
            reasons.append(
                f"Good spacing ({days_since:.1f} days since last {self.stats.name})"
            )
        return min(days_since * RECENCY_POINTS_PER_DAY, RECENCY_CAP)

    def _spacing(self, slot: CandidateSlot, reasons: list[str]) -> float:
        average = self.stats.average_spacing_days
        last_scheduled = self.stats.last_scheduled
        # An average of exactly 0.0 counts as no history
        if not average or last_scheduled is None:
            return 0

        diff = abs(days_between(slot.start, last_scheduled) - average)
        if diff < SPACING_MATCH_DAYS:
            reasons.append(f"Matches your usual {average:.1f}-day spacing pattern")
        return max(0, SPACING_MAX - diff * SPACING_POINTS_PER_DAY)

    def _daily_load(self, slot: CandidateSlot, reasons: list[str]) -> float:
        day_start, day_end = day_bounds(slot.start)
        same_day = [
            s for s in self.existing_sessions if day_start <= s.scheduled_at < day_end
        ]
        count = len(same_day)
        load = sum(s.priority or 0 for s in same_day)

        if count == 0:
            reasons.append("No other sessions scheduled this day")
        elif count >= BUSY_DAY_SESSIONS:
            reasons.append(f"⚠️ Day already has {count} sessions scheduled")
        if load >= HIGH_PRIORITY_LOAD:
            reasons.append(f"⚠️ High priority load already scheduled today ({load})")

        return -(count * SESSION_COUNT_PENALTY) - load * PRIORITY_LOAD_PENALTY

    def _time_of_day(self, slot: CandidateSlot, reasons: list[str]) -> float:
        priority = self.stats.priority
        hour = slot.start.hour
        if priority >= HIGH_PRIORITY and hour in MORNING_HOURS:
            reasons.append("Morning time slot (ideal for high-priority work)")
            return TIME_OF_DAY_BONUS
        if priority <= LOW_PRIORITY and hour in AFTERNOON_HOURS:
            reasons.append("Afternoon time slot (good for lower-priority activities)")
            return TIME_OF_DAY_BONUS
        return 0

    def _urgency(self, slot: CandidateSlot) -> float:
        days_until = days_between(slot.start, self.now)
        return max(0, URGENCY_MAX - days_until * URGENCY_POINTS_PER_DAY)

    def _buffer(self, slot: CandidateSlot, reasons: list[str]) -> float:
        def within_buffer(gap_minutes: float) -> bool:
            return 0 < gap_minutes < BUFFER_MINUTES

        crowded_before = any(
            within_buffer((slot.start - s.end).total_seconds() / 60)
            for s in self.existing_sessions
        )
        crowded_after = any(
            within_buffer((s.scheduled_at - slot.end).total_seconds() / 60)
            for s in self.existing_sessions
        )
        if crowded_before or crowded_after:
            return 0
        reasons.append("Good buffer time around session")
        return BUFFER_BONUS
