"""
Session service orchestrator.

Coordinates booking, listing, updating and conflict checks for sessions.
Bookings hold the booking lock while the conflict check and the insert run
in one transaction.

Dependencies: session_planner.boundary.db.CRUD, session_planner.core.scheduling
System role: Session use case orchestration
"""

import logging
from datetime import datetime, timedelta
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.application.adapters.record_adapter import session_to_dict, session_to_record
from session_planner.boundary.db.CRUD.session_crud import session_crud
from session_planner.boundary.db.CRUD.session_type_crud import session_type_crud
from session_planner.core.exceptions import (
    PlannerException,
    SessionNotFoundError,
    SessionTypeNotFoundError,
    ValidationError,
)
from session_planner.core.scheduling.conflicts import find_conflicts
from session_planner.core.scheduling.records import ConflictResult

logger = logging.getLogger(__name__)


def validate_duration(duration: int) -> None:
    """
    Check a session length.

    Raises:
        ValidationError: If duration is not a positive integer
    """
    if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
        raise ValidationError(
            "duration must be a positive number (in minutes)", field="duration"
        )


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession, now: datetime | None = None) -> None:
        """
        Initialize session service.

        Args:
            db: Async SQLAlchemy session
            now: Current instant (defaults to the local wall clock)
        """
        self.db = db
        self.now = now or datetime.now()

    async def list_sessions(
        self,
        upcoming: bool = False,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        session_type_id: UUID | None = None,
    ) -> list[dict]:
        """
        Get sessions ordered by start time.

        Args:
            upcoming: Only not-completed sessions starting from now
            start_date: Inclusive lower bound on start time
            end_date: Inclusive upper bound on start time
            session_type_id: Only sessions of this type

        Returns:
            list[dict]: Session dicts with embedded session type
        """
        sessions = await session_crud.list_filtered(
            self.db,
            upcoming_from=self.now if upcoming else None,
            start_date=start_date,
            end_date=end_date,
            session_type_id=session_type_id,
        )
        return [session_to_dict(s) for s in sessions]

    async def get_session(self, session_id: UUID) -> dict:
        """
        Get session by ID.

        Raises:
            SessionNotFoundError: If session does not exist
        """
        session = await session_crud.get_with_type(self.db, session_id)
        if not session:
            raise SessionNotFoundError(session_id)
        return session_to_dict(session)

    async def check_conflict(
        self,
        start: datetime,
        duration: int,
        exclude_id: UUID | None = None,
    ) -> ConflictResult:
        """
        Find stored sessions overlapping ``[start, start + duration)``.

        Args:
            start: Proposed start
            duration: Proposed length in minutes
            exclude_id: Session to ignore, e.g. when rescheduling it

        Returns:
            ConflictResult: Every overlapping session, completed or not

        Raises:
            ValidationError: If duration is not positive
        """
        validate_duration(duration)
        end = start + timedelta(minutes=duration)
        candidates = await session_crud.get_starting_before(self.db, end)
        return find_conflicts(
            start,
            duration,
            (session_to_record(s) for s in candidates),
            exclude_id=exclude_id,
        )

    async def create_session(
        self,
        session_type_id: UUID,
        scheduled_at: datetime,
        duration: int,
        check_conflict: bool = True,
    ) -> dict | ConflictResult:
        """
        Book a session.

        Args:
            session_type_id: Owning session type
            scheduled_at: Local start time
            duration: Length in minutes
            check_conflict: Refuse to book over existing sessions

        Returns:
            dict: The created session, or
            ConflictResult: The overlapping sessions when check_conflict is set
            and the interval is taken (nothing is inserted)

        Raises:
            ValidationError: If duration is not positive
            SessionTypeNotFoundError: If the session type does not exist
        """
        validate_duration(duration)
        if not await session_type_crud.exists(self.db, session_type_id):
            raise SessionTypeNotFoundError(session_type_id)

        try:
            if check_conflict:
                await session_crud.lock_bookings(self.db)
                conflict = await self.check_conflict(scheduled_at, duration)
                if conflict.has_conflict:
                    logger.warning(
                        "Session conflicts with existing sessions",
                        extra={
                            "session_type_id": str(session_type_id),
                            "scheduled_at": scheduled_at.isoformat(),
                            "conflict_count": len(conflict.conflicting_sessions),
                        },
                    )
                    return conflict

            session = await session_crud.create_with_type(
                self.db,
                session_type_id=session_type_id,
                scheduled_at=scheduled_at,
                duration=duration,
                completed=False,
            )
            await self.db.commit()

            logger.info(
                "Session created",
                extra={
                    "session_id": str(session.id),
                    "session_type_id": str(session_type_id),
                    "scheduled_at": scheduled_at.isoformat(),
                    "duration": duration,
                    "check_conflict": check_conflict,
                },
            )
            return session_to_dict(session)
        except PlannerException:
            raise
        except Exception as e:
            logger.error(
                "Failed to create session",
                extra={"error": str(e), "session_type_id": str(session_type_id)},
            )
            raise

    async def update_session(
        self,
        session_id: UUID,
        completed: bool | None = None,
        scheduled_at: datetime | None = None,
        duration: int | None = None,
    ) -> dict:
        """
        Partially update a session: toggle completion, reschedule or resize.

        Raises:
            ValidationError: If no field is given or duration is not positive
            SessionNotFoundError: If session does not exist
        """
        fields = {
            key: value
            for key, value in {
                "completed": completed,
                "scheduled_at": scheduled_at,
                "duration": duration,
            }.items()
            if value is not None
        }
        if not fields:
            raise ValidationError("No fields to update")
        if duration is not None:
            validate_duration(duration)

        try:
            session = await session_crud.update_by_id(self.db, session_id, **fields)
            if not session:
                raise SessionNotFoundError(session_id)
            await self.db.commit()
            await self.db.refresh(session, attribute_names=["session_type"])

            logger.info(
                "Session updated",
                extra={"session_id": str(session_id), "fields": list(fields)},
            )
            return session_to_dict(session)
        except PlannerException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update session",
                extra={"error": str(e), "session_id": str(session_id)},
            )
            raise

    async def delete_session(self, session_id: UUID) -> None:
        """
        Delete a session.

        Raises:
            SessionNotFoundError: If session does not exist
        """
        deleted = await session_crud.delete_by_id(self.db, session_id)
        if not deleted:
            raise SessionNotFoundError(session_id)
        await self.db.commit()
        logger.info("Session deleted", extra={"session_id": str(session_id)})
