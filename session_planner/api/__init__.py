"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    availability_router,
    health_router,
    session_types_router,
    sessions_router,
    stats_router,
    suggestions_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(session_types_router)
api_router.include_router(sessions_router)
api_router.include_router(availability_router)
api_router.include_router(suggestions_router)
api_router.include_router(stats_router)

__all__ = ["api_router"]
