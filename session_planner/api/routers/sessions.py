"""
Session API endpoints.

Routes:
- GET /sessions - List sessions (filters: upcoming, start_date, end_date, session_type_id)
- POST /sessions - Book a session, 409 on overlap unless check_conflict is false
- GET /sessions/conflicts - Check an interval against booked sessions
- GET /sessions/{id} - Get single session
- PUT /sessions/{id} - Update completion, start or duration
- DELETE /sessions/{id} - Delete session

Dependencies: session_planner.application.services, session_planner.models
System role: Session booking HTTP API
"""

import logging
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from session_planner.api.deps.dependencies import get_session_service
from session_planner.application.services.session_service import SessionService
from session_planner.core.scheduling.records import ConflictResult
from session_planner.models.common import ConflictResponse
from session_planner.models.session import (
    ConflictCheckResponse,
    CreateSessionRequest,
    SessionResponse,
    UpdateSessionRequest,
)

from .router_utils import conflict_response, handle_planner_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _naive(value: datetime | None) -> datetime | None:
    return value.replace(tzinfo=None) if value is not None else None


@router.get("", response_model=list[SessionResponse])
@handle_planner_errors
async def list_sessions(
    upcoming: bool = Query(False, description="Only not-completed sessions from now on"),
    start_date: datetime | None = Query(None, description="Inclusive lower bound"),
    end_date: datetime | None = Query(None, description="Inclusive upper bound"),
    session_type_id: UUID | None = Query(None, description="Filter by session type"),
    service: SessionService = Depends(get_session_service),
) -> list[SessionResponse]:
    """List sessions ordered by start time."""
    sessions = await service.list_sessions(
        upcoming=upcoming,
        start_date=_naive(start_date),
        end_date=_naive(end_date),
        session_type_id=session_type_id,
    )
    return [SessionResponse(**s) for s in sessions]


@router.post(
    "",
    response_model=SessionResponse,
    status_code=201,
    responses={409: {"model": ConflictResponse}},
)
@handle_planner_errors
async def create_session(
    request: CreateSessionRequest,
    service: SessionService = Depends(get_session_service),
):
    """
    Book a session.

    Args:
        request: Session type, start, duration and whether to check conflicts
        service: Injected session service

    Returns:
        SessionResponse: Created session, or a 409 listing overlapping sessions
    """
    logger.info(
        "Booking session",
        extra={
            "session_type_id": str(request.session_type_id),
            "scheduled_at": request.scheduled_at.isoformat(),
        },
    )
    result = await service.create_session(
        session_type_id=request.session_type_id,
        scheduled_at=request.scheduled_at,
        duration=request.duration,
        check_conflict=request.check_conflict,
    )
    if isinstance(result, ConflictResult):
        return conflict_response(result)
    return SessionResponse(**result)


@router.get("/conflicts", response_model=ConflictCheckResponse)
@handle_planner_errors
async def check_conflict(
    scheduled_at: datetime = Query(..., description="Proposed local start"),
    duration: int = Query(..., description="Proposed length in minutes"),
    exclude_id: UUID | None = Query(None, description="Session to ignore"),
    service: SessionService = Depends(get_session_service),
) -> ConflictCheckResponse:
    """Check whether an interval overlaps booked sessions."""
    result = await service.check_conflict(_naive(scheduled_at), duration, exclude_id=exclude_id)
    return ConflictCheckResponse(**result.to_dict())


@router.get("/{session_id}", response_model=SessionResponse)
@handle_planner_errors
async def get_session(
    session_id: UUID,
    service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """Get a single session."""
    return SessionResponse(**await service.get_session(session_id))


@router.put("/{session_id}", response_model=SessionResponse)
@handle_planner_errors
async def update_session(
    session_id: UUID,
    request: UpdateSessionRequest,
    service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """Toggle completion, reschedule or change duration."""
    logger.info("Updating session", extra={"session_id": str(session_id)})
    session = await service.update_session(
        session_id,
        completed=request.completed,
        scheduled_at=request.scheduled_at,
        duration=request.duration,
    )
    return SessionResponse(**session)


@router.delete("/{session_id}", status_code=204)
@handle_planner_errors
async def delete_session(
    session_id: UUID,
    service: SessionService = Depends(get_session_service),
) -> None:
    """Delete a session."""
    logger.info("Deleting session", extra={"session_id": str(session_id)})
    await service.delete_session(session_id)
