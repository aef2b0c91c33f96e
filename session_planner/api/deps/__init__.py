"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_availability_service,
    get_now,
    get_session_service,
    get_session_type_service,
    get_settings_dependency,
    get_stats_service,
    get_suggestion_service,
)

__all__ = [
    "get_availability_service",
    "get_now",
    "get_session_service",
    "get_session_type_service",
    "get_settings_dependency",
    "get_stats_service",
    "get_suggestion_service",
]
