"""
Common response models and utilities.

Error schemas and the naive datetime type shared by request models.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field


def _drop_timezone(value: datetime) -> datetime:
    # Instants are local wall-clock; an offset is ignored rather than converted
    return value.replace(tzinfo=None)


NaiveDatetime = Annotated[datetime, AfterValidator(_drop_timezone)]


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class ConflictingSessionResponse(BaseModel):
    """An existing session overlapping the requested interval."""

    id: str
    session_type: str
    scheduled_at: datetime
    duration: int


class ConflictResponse(BaseModel):
    """Body returned with status 409 when a booking overlaps existing sessions."""

    error: str = "Session conflicts with existing sessions"
    conflicts: list[ConflictingSessionResponse]


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = "ok"
    version: str
    environment: str
