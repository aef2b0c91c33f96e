"""
Value records exchanged by the scheduling components.

Plain frozen dataclasses built by the application layer from ORM rows, so the
scheduling algorithms never touch the database.

Dependencies: dataclasses (stdlib)
System role: Shared value shapes for the scheduling core
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any


@dataclass(frozen=True)
class SessionTypeRecord:
    """Session type summary used by statistics and suggestions."""

    id: Any
    name: str
    category: str
    priority: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class SessionRecord:
    """A booked session joined with its session type name and priority."""

    id: Any
    session_type_id: Any
    session_type_name: str
    priority: int
    scheduled_at: datetime
    duration: int
    completed: bool = False

    @property
    def end(self) -> datetime:
        return self.scheduled_at + timedelta(minutes=self.duration)


@dataclass(frozen=True)
class AvailabilityWindowRecord:
    """Recurring weekly availability; day_of_week uses 0 = Sunday."""

    id: Any
    day_of_week: int
    start_time: str
    end_time: str


@dataclass(frozen=True)
class CandidateSlot:
    """A concrete, dated interval cut from an availability window."""

    start: datetime
    end: datetime
    day_of_week: int


@dataclass(frozen=True)
class ScoredSlot:
    """Candidate slot with its heuristic score and explanation."""

    slot: CandidateSlot
    score: float
    reasons: tuple[str, ...] = ()


@dataclass(frozen=True)
class SessionTypeStats:
    """Derived scheduling history of one session type."""

    session_type: SessionTypeRecord
    last_scheduled: datetime | None
    upcoming_count: int
    completed_count: int
    average_spacing_days: float | None

    @property
    def name(self) -> str:
        return self.session_type.name

    @property
    def priority(self) -> int:
        return self.session_type.priority


@dataclass(frozen=True)
class ConflictingSession:
    """Existing session that overlaps a proposed interval."""

    id: Any
    session_type: str
    scheduled_at: datetime
    duration: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "session_type": self.session_type,
            "scheduled_at": self.scheduled_at.isoformat(),
            "duration": self.duration,
        }


@dataclass(frozen=True)
class ConflictResult:
    """Outcome of a conflict check."""

    has_conflict: bool
    conflicting_sessions: tuple[ConflictingSession, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_conflict": self.has_conflict,
            "conflicting_sessions": [c.to_dict() for c in self.conflicting_sessions],
        }
