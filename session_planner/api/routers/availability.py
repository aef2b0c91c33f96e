"""
Availability API endpoints.

Routes:
- GET /availability - List windows by weekday and start time
- POST /availability - Create window
- PUT /availability/{id} - Update window
- DELETE /availability/{id} - Delete window

Dependencies: session_planner.application.services, session_planner.models
System role: Availability management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from session_planner.api.deps.dependencies import get_availability_service
from session_planner.application.services.availability_service import AvailabilityService
from session_planner.models.availability import (
    AvailabilityResponse,
    CreateAvailabilityRequest,
    UpdateAvailabilityRequest,
)

from .router_utils import handle_planner_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/availability", tags=["availability"])


@router.get("", response_model=list[AvailabilityResponse])
@handle_planner_errors
async def list_availability(
    service: AvailabilityService = Depends(get_availability_service),
) -> list[AvailabilityResponse]:
    """List availability windows."""
    return [AvailabilityResponse(**w) for w in await service.list_windows()]


@router.post("", response_model=AvailabilityResponse, status_code=201)
@handle_planner_errors
async def create_availability(
    request: CreateAvailabilityRequest,
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    """Create an availability window."""
    logger.info("Creating availability window", extra={"day_of_week": request.day_of_week})
    window = await service.create_window(
        day_of_week=request.day_of_week,
        start_time=request.start_time,
        end_time=request.end_time,
    )
    return AvailabilityResponse(**window)


@router.put("/{window_id}", response_model=AvailabilityResponse)
@handle_planner_errors
async def update_availability(
    window_id: UUID,
    request: UpdateAvailabilityRequest,
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    """Partially update an availability window."""
    window = await service.update_window(
        window_id,
        day_of_week=request.day_of_week,
        start_time=request.start_time,
        end_time=request.end_time,
    )
    return AvailabilityResponse(**window)


@router.delete("/{window_id}", status_code=204)
@handle_planner_errors
async def delete_availability(
    window_id: UUID,
    service: AvailabilityService = Depends(get_availability_service),
) -> None:
    """Delete an availability window."""
    await service.delete_window(window_id)
