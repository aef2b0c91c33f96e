"""
Scheduling core.

Pure, framework-free scheduling logic: candidate slot generation, conflict
detection, heuristic scoring, suggestion ranking and progress statistics.
Every function takes the current instant explicitly.

Exports:
    - generate_candidate_slots: Tile availability windows into slots
    - find_conflicts / slot_conflicts: Half-open overlap checks
    - compute_session_type_stats: History of one session type
    - SlotScorer: Seven-factor slot scoring
    - rank_suggestions: Full suggestion pipeline
    - compute_aggregate_stats: Progress report
"""

from session_planner.core.scheduling.aggregate_stats import AggregateStats, compute_aggregate_stats
from session_planner.core.scheduling.conflicts import (
    filter_conflicting_slots,
    find_conflicts,
    slot_conflicts,
)
from session_planner.core.scheduling.records import (
    AvailabilityWindowRecord,
    CandidateSlot,
    ConflictingSession,
    ConflictResult,
    ScoredSlot,
    SessionRecord,
    SessionTypeRecord,
    SessionTypeStats,
)
from session_planner.core.scheduling.scorer import SlotScorer
from session_planner.core.scheduling.slots import SLOT_STEP_MINUTES, generate_candidate_slots
from session_planner.core.scheduling.suggestions import (
    NO_SLOTS_MESSAGE,
    RankedSuggestion,
    SuggestionResult,
    rank_suggestions,
)
from session_planner.core.scheduling.type_stats import compute_session_type_stats

__all__ = [
    "AggregateStats",
    "AvailabilityWindowRecord",
    "CandidateSlot",
    "ConflictingSession",
    "ConflictResult",
    "NO_SLOTS_MESSAGE",
    "RankedSuggestion",
    "SLOT_STEP_MINUTES",
    "ScoredSlot",
    "SessionRecord",
    "SessionTypeRecord",
    "SessionTypeStats",
    "SlotScorer",
    "SuggestionResult",
    "compute_aggregate_stats",
    "compute_session_type_stats",
    "filter_conflicting_slots",
    "find_conflicts",
    "generate_candidate_slots",
    "rank_suggestions",
    "slot_conflicts",
]
