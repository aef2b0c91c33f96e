"""
Session schemas.

Request/response schemas for booking, listing and updating sessions.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from session_planner.models.common import ConflictingSessionResponse, NaiveDatetime
from session_planner.models.session_type import SessionTypeSummary


class CreateSessionRequest(BaseModel):
    """Request schema for booking a session."""

    session_type_id: uuid.UUID = Field(..., description="Session type to book")
    scheduled_at: NaiveDatetime = Field(..., description="Local start time (ISO 8601)")
    duration: int = Field(..., description="Length in minutes")
    check_conflict: bool = Field(True, description="Reject overlapping bookings with 409")


class UpdateSessionRequest(BaseModel):
    """Request schema for a partial session update."""

    completed: bool | None = Field(None, description="Mark as done or not done")
    scheduled_at: NaiveDatetime | None = Field(None, description="New local start time")
    duration: int | None = Field(None, description="New length in minutes")


class SessionResponse(BaseModel):
    """Response schema for session operations."""

    id: uuid.UUID
    session_type_id: uuid.UUID
    session_type: SessionTypeSummary
    scheduled_at: datetime
    duration: int
    completed: bool
    created_at: datetime
    updated_at: datetime


class ConflictCheckResponse(BaseModel):
    """Result of a conflict check."""

    has_conflict: bool
    conflicting_sessions: list[ConflictingSessionResponse]
