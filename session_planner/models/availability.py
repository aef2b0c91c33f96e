"""
Availability window schemas.

Dependencies: pydantic
System role: Availability API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CreateAvailabilityRequest(BaseModel):
    """Request schema for creating an availability window."""

    day_of_week: int = Field(..., description="0 = Sunday through 6 = Saturday")
    start_time: str = Field(..., description="Start time of day, HH:MM")
    end_time: str = Field(..., description="End time of day, HH:MM")


class UpdateAvailabilityRequest(BaseModel):
    """Request schema for a partial availability window update."""

    day_of_week: int | None = Field(None, description="0 = Sunday through 6 = Saturday")
    start_time: str | None = Field(None, description="Start time of day, HH:MM")
    end_time: str | None = Field(None, description="End time of day, HH:MM")


class AvailabilityResponse(BaseModel):
    """Response schema for availability window operations."""

    id: uuid.UUID
    day_of_week: int
    start_time: str
    end_time: str
    created_at: datetime
    updated_at: datetime
