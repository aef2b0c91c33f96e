"""
Statistics API endpoint.

Routes: GET /stats

Dependencies: session_planner.application.services, session_planner.models
System role: Progress report HTTP API
"""

from fastapi import APIRouter, Depends

from session_planner.api.deps.dependencies import get_stats_service
from session_planner.application.services.stats_service import StatsService
from session_planner.models.stats import StatsResponse

from .router_utils import handle_planner_errors

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
@handle_planner_errors
async def get_stats(service: StatsService = Depends(get_stats_service)) -> StatsResponse:
    """Overview counts, per type breakdown, streaks and spacing."""
    return StatsResponse(**await service.get_aggregate_stats())
