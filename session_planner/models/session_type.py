"""
Session type schemas.

Request/response schemas for session type operations. Priority bounds are
checked by the service so they surface as 400 responses.

Dependencies: pydantic
System role: Session type API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateSessionTypeRequest(BaseModel):
    """Request schema for creating a session type."""

    name: str = Field(..., min_length=1, max_length=255, description="Session type name")
    category: str = Field(..., min_length=1, max_length=100, description="Category label")
    priority: int = Field(..., description="Priority from 1 (low) to 5 (high)")


class UpdateSessionTypeRequest(BaseModel):
    """Request schema for a partial session type update."""

    name: str | None = Field(None, min_length=1, max_length=255, description="Session type name")
    category: str | None = Field(None, min_length=1, max_length=100, description="Category label")
    priority: int | None = Field(None, description="Priority from 1 (low) to 5 (high)")


class SessionTypeSummary(BaseModel):
    """Compact session type embedded in session and suggestion responses."""

    id: uuid.UUID
    name: str
    category: str
    priority: int


class SessionTypeResponse(SessionTypeSummary):
    """Response schema for session type operations."""

    completed_count: int = 0
    created_at: datetime
    updated_at: datetime
