"""Application services orchestrating persistence and the scheduling core."""

from session_planner.application.services.availability_service import AvailabilityService
from session_planner.application.services.session_service import SessionService
from session_planner.application.services.session_type_service import SessionTypeService
from session_planner.application.services.stats_service import StatsService
from session_planner.application.services.suggestion_service import SuggestionService

__all__ = [
    "AvailabilityService",
    "SessionService",
    "SessionTypeService",
    "StatsService",
    "SuggestionService",
]
