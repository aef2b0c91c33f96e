"""
Statistics schemas.

Dependencies: pydantic
System role: Statistics API contracts
"""

import uuid

from pydantic import BaseModel


class OverviewResponse(BaseModel):
    total_sessions: int
    completed_sessions: int
    upcoming_sessions: int
    completion_rate: float


class TypeBreakdownResponse(BaseModel):
    id: uuid.UUID
    name: str
    category: str
    priority: int
    total_sessions: int
    completed_sessions: int
    upcoming_sessions: int
    completion_rate: float


class DerivedMetricsResponse(BaseModel):
    average_spacing: float | None
    current_streak: int
    longest_streak: int
    most_productive_day: str | None
    most_productive_day_index: int | None
    total_days_with_sessions: int


class StatsResponse(BaseModel):
    """Response schema for the statistics endpoint."""

    overview: OverviewResponse
    by_type: list[TypeBreakdownResponse]
    derived_metrics: DerivedMetricsResponse
