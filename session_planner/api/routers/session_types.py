"""
Session type API endpoints.

Routes:
- GET /session-types - List session types, newest first
- POST /session-types - Create session type
- GET /session-types/{id} - Get single session type
- PUT /session-types/{id} - Update session type
- DELETE /session-types/{id} - Delete session type and its sessions

Dependencies: session_planner.application.services, session_planner.models
System role: Session type management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from session_planner.api.deps.dependencies import get_session_type_service
from session_planner.application.services.session_type_service import SessionTypeService
from session_planner.models.session_type import (
    CreateSessionTypeRequest,
    SessionTypeResponse,
    UpdateSessionTypeRequest,
)

from .router_utils import handle_planner_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session-types", tags=["session-types"])


@router.get("", response_model=list[SessionTypeResponse])
@handle_planner_errors
async def list_session_types(
    service: SessionTypeService = Depends(get_session_type_service),
) -> list[SessionTypeResponse]:
    """List all session types with their completed session counts."""
    session_types = await service.list_session_types()
    return [SessionTypeResponse(**st) for st in session_types]


@router.post("", response_model=SessionTypeResponse, status_code=201)
@handle_planner_errors
async def create_session_type(
    request: CreateSessionTypeRequest,
    service: SessionTypeService = Depends(get_session_type_service),
) -> SessionTypeResponse:
    """
    Create a session type.

    Args:
        request: Name, category and priority (1-5)
        service: Injected session type service

    Returns:
        SessionTypeResponse: Created session type
    """
    logger.info("Creating session type", extra={"session_type_name": request.name})
    session_type = await service.create_session_type(
        name=request.name,
        category=request.category,
        priority=request.priority,
    )
    return SessionTypeResponse(**session_type)


@router.get("/{session_type_id}", response_model=SessionTypeResponse)
@handle_planner_errors
async def get_session_type(
    session_type_id: UUID,
    service: SessionTypeService = Depends(get_session_type_service),
) -> SessionTypeResponse:
    """Get a single session type."""
    return SessionTypeResponse(**await service.get_session_type(session_type_id))


@router.put("/{session_type_id}", response_model=SessionTypeResponse)
@handle_planner_errors
async def update_session_type(
    session_type_id: UUID,
    request: UpdateSessionTypeRequest,
    service: SessionTypeService = Depends(get_session_type_service),
) -> SessionTypeResponse:
    """Partially update a session type."""
    logger.info("Updating session type", extra={"session_type_id": str(session_type_id)})
    session_type = await service.update_session_type(
        session_type_id,
        name=request.name,
        category=request.category,
        priority=request.priority,
    )
    return SessionTypeResponse(**session_type)


@router.delete("/{session_type_id}", status_code=204)
@handle_planner_errors
async def delete_session_type(
    session_type_id: UUID,
    service: SessionTypeService = Depends(get_session_type_service),
) -> None:
    """Delete a session type; its sessions are deleted with it."""
    logger.info("Deleting session type", extra={"session_type_id": str(session_type_id)})
    await service.delete_session_type(session_type_id)
