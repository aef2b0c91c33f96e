"""
Suggestion schemas.

Dependencies: pydantic
System role: Suggestion API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from session_planner.models.common import NaiveDatetime
from session_planner.models.session_type import SessionTypeSummary


class SuggestionResponse(BaseModel):
    """One ranked slot suggestion."""

    rank: int = Field(..., description="1-based position, best first")
    session_type: SessionTypeSummary
    suggested_start: datetime
    suggested_end: datetime
    duration: int
    score: int = Field(..., description="Heuristic score, rounded")
    reasons: list[str] = Field(default_factory=list, description="Why the slot scored well or badly")


class SessionTypeStatsResponse(BaseModel):
    """History summary of the session type the suggestions are for."""

    name: str
    priority: int
    upcoming_count: int
    completed_count: int
    average_spacing_days: float | None


class SuggestionsResponse(BaseModel):
    """Response schema for the suggestions endpoint."""

    suggestions: list[SuggestionResponse]
    session_type_stats: SessionTypeStatsResponse
    message: str | None = None


class AcceptSuggestionRequest(BaseModel):
    """Request schema for booking a suggested slot."""

    session_type_id: uuid.UUID
    scheduled_at: NaiveDatetime
    duration: int
