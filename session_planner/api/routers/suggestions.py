"""
Suggestion API endpoints.

Routes:
- GET /suggestions - Ranked free slots for a session type
- POST /suggestions/accept - Book a suggested slot

Dependencies: session_planner.application.services, session_planner.models
System role: Slot suggestion HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from session_planner.api.deps.dependencies import get_suggestion_service
from session_planner.application.services.suggestion_service import SuggestionService
from session_planner.core.scheduling.records import ConflictResult
from session_planner.models.common import ConflictResponse
from session_planner.models.session import SessionResponse
from session_planner.models.suggestion import AcceptSuggestionRequest, SuggestionsResponse

from .router_utils import conflict_response, handle_planner_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.get("", response_model=SuggestionsResponse)
@handle_planner_errors
async def get_suggestions(
    session_type_id: UUID = Query(..., description="Session type to schedule"),
    duration: int | None = Query(None, description="Session length in minutes"),
    days_ahead: int | None = Query(None, description="Look-ahead horizon in days"),
    limit: int | None = Query(None, description="Maximum number of suggestions"),
    service: SuggestionService = Depends(get_suggestion_service),
) -> SuggestionsResponse:
    """
    Suggest the best free slots for a session type.

    Slots come from the weekly availability windows, skip anything that
    overlaps a booked session and are ranked by score, best first.
    """
    result = await service.get_suggestions(
        session_type_id,
        duration=duration,
        days_ahead=days_ahead,
        limit=limit,
    )
    return SuggestionsResponse(**result)


@router.post(
    "/accept",
    response_model=SessionResponse,
    status_code=201,
    responses={409: {"model": ConflictResponse}},
)
@handle_planner_errors
async def accept_suggestion(
    request: AcceptSuggestionRequest,
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Book a suggested slot; 409 when it was taken in the meantime."""
    logger.info(
        "Accepting suggestion",
        extra={
            "session_type_id": str(request.session_type_id),
            "scheduled_at": request.scheduled_at.isoformat(),
        },
    )
    result = await service.accept_suggestion(
        request.session_type_id,
        request.scheduled_at,
        request.duration,
    )
    if isinstance(result, ConflictResult):
        return conflict_response(result)
    return SessionResponse(**result)
