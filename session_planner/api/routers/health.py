"""
Health check API endpoint.

Routes: GET /health

Dependencies: session_planner.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends

from session_planner import __version__
from session_planner.api.deps.dependencies import get_settings_dependency
from session_planner.configs import Settings
from session_planner.models.common import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Basic liveness check."""
    return HealthResponse(status="ok", version=__version__, environment=settings.environment)
