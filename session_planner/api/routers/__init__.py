"""API routers."""

from .availability import router as availability_router
from .health import router as health_router
from .session_types import router as session_types_router
from .sessions import router as sessions_router
from .stats import router as stats_router
from .suggestions import router as suggestions_router

__all__ = [
    "availability_router",
    "health_router",
    "session_types_router",
    "sessions_router",
    "stats_router",
    "suggestions_router",
]
