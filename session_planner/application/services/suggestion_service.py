"""
Suggestion service orchestrator.

Reads a snapshot of the session type, its history, the availability windows
and all upcoming sessions, then hands them to the pure suggestion pipeline.
Accepting a suggestion books it through the session service.

Dependencies: session_planner.boundary.db.CRUD, session_planner.core.scheduling,
    session_planner.configs
System role: Suggestion use case orchestration
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.application.adapters.record_adapter import (
    session_to_record,
    session_type_to_record,
    window_to_record,
)
from session_planner.application.services.session_service import SessionService
from session_planner.boundary.db.CRUD.availability_crud import availability_window_crud
from session_planner.boundary.db.CRUD.session_crud import session_crud
from session_planner.boundary.db.CRUD.session_type_crud import session_type_crud
from session_planner.configs.scheduling import SchedulingSettings
from session_planner.core.exceptions import SessionTypeNotFoundError, ValidationError
from session_planner.core.scheduling.records import ConflictResult, SessionTypeStats
from session_planner.core.scheduling.suggestions import rank_suggestions
from session_planner.core.scheduling.type_stats import compute_session_type_stats
from session_planner.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class SuggestionService:
    """Suggestion service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        settings: SchedulingSettings | None = None,
        now: datetime | None = None,
    ) -> None:
        """
        Initialize suggestion service.

        Args:
            db: Async SQLAlchemy session
            settings: Scheduling defaults and limits
            now: Current instant (defaults to the local wall clock)
        """
        self.db = db
        self.settings = settings or SchedulingSettings()
        self.now = now or datetime.now()

    async def get_session_type_stats(self, session_type_id: UUID) -> SessionTypeStats:
        """
        Compute scheduling history of one session type.

        Raises:
            SessionTypeNotFoundError: If session type does not exist
        """
        session_type = await session_type_crud.get_by_id(self.db, session_type_id)
        if not session_type:
            raise SessionTypeNotFoundError(session_type_id)

        sessions = await session_crud.get_by_type(self.db, session_type_id)
        return compute_session_type_stats(
            session_type_to_record(session_type),
            (session_to_record(s) for s in sessions),
            self.now,
        )

    def _validate(self, duration: int, days_ahead: int, limit: int) -> None:
        max_duration = self.settings.max_duration_minutes
        if not 1 <= duration <= max_duration:
            raise ValidationError(
                f"duration must be between 1 and {max_duration} minutes", field="duration"
            )
        if days_ahead < 1:
            raise ValidationError("days_ahead must be at least 1", field="days_ahead")
        if limit < 1:
            raise ValidationError("limit must be at least 1", field="limit")

    async def get_suggestions(
        self,
        session_type_id: UUID,
        duration: int | None = None,
        days_ahead: int | None = None,
        limit: int | None = None,
    ) -> dict:
        """
        Rank free slots for a session type.

        Args:
            session_type_id: Session type to schedule
            duration: Session length in minutes (settings default when None)
            days_ahead: Look-ahead horizon in days (settings default when None)
            limit: Maximum suggestions (settings default when None)

        Returns:
            dict: suggestions, session_type_stats and an optional message

        Raises:
            ValidationError: If a parameter is out of range
            SessionTypeNotFoundError: If session type does not exist
        """
        duration = duration if duration is not None else self.settings.default_duration_minutes
        days_ahead = days_ahead if days_ahead is not None else self.settings.default_days_ahead
        limit = limit if limit is not None else self.settings.default_limit
        self._validate(duration, days_ahead, limit)

        stats = await self.get_session_type_stats(session_type_id)
        windows = await availability_window_crud.get_all_ordered(self.db)
        upcoming = await session_crud.get_starting_from(self.db, self.now)

        result = rank_suggestions(
            stats,
            (window_to_record(w) for w in windows),
            (session_to_record(s) for s in upcoming),
            duration_minutes=duration,
            days_ahead=days_ahead,
            limit=limit,
            now=self.now,
        )

        log_with_context(
            logger,
            logging.INFO,
            "Suggestions generated",
            session_type_id=session_type_id,
            duration=duration,
            days_ahead=days_ahead,
            suggestion_count=len(result.suggestions),
        )

        return {
            "suggestions": [
                {
                    "rank": s.rank,
                    "session_type": s.session_type,
                    "suggested_start": s.suggested_start,
                    "suggested_end": s.suggested_end,
                    "duration": s.duration,
                    "score": s.score,
                    "reasons": list(s.reasons),
                }
                for s in result.suggestions
            ],
            "session_type_stats": {
                "name": stats.name,
                "priority": stats.priority,
                "upcoming_count": stats.upcoming_count,
                "completed_count": stats.completed_count,
                "average_spacing_days": stats.average_spacing_days,
            },
            "message": result.message,
        }

    async def accept_suggestion(
        self,
        session_type_id: UUID,
        scheduled_at: datetime,
        duration: int,
    ) -> dict | ConflictResult:
        """
        Book a suggested slot.

        The slot is re-checked for conflicts inside the booking transaction
        unless ``recheck_on_accept`` is disabled.

        Returns:
            dict: The created session, or
            ConflictResult: When the slot was taken since it was suggested
        """
        sessions = SessionService(self.db, now=self.now)
        return await sessions.create_session(
            session_type_id,
            scheduled_at,
            duration,
            check_conflict=self.settings.recheck_on_accept,
        )
