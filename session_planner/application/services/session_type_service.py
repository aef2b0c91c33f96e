"""
Session type service orchestrator.

Coordinates session type lifecycle operations.

Dependencies: session_planner.boundary.db.CRUD, session_planner.application.adapters
System role: Session type use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.application.adapters.record_adapter import session_type_to_dict
from session_planner.boundary.db.CRUD.session_type_crud import session_type_crud
from session_planner.core.exceptions import (
    PlannerException,
    SessionTypeNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MIN_PRIORITY = 1
MAX_PRIORITY = 5


def validate_priority(priority: int) -> None:
    """
    Check a session type priority.

    Raises:
        ValidationError: If priority is not an integer in [1, 5]
    """
    if isinstance(priority, bool) or not isinstance(priority, int) or not (
        MIN_PRIORITY <= priority <= MAX_PRIORITY
    ):
        raise ValidationError(
            f"Priority must be a number between {MIN_PRIORITY} and {MAX_PRIORITY}",
            field="priority",
        )


class SessionTypeService:
    """Session type service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session type service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_session_types(self) -> list[dict]:
        """
        Get all session types, newest first.

        Returns:
            list[dict]: Session type dicts including completed_count
        """
        session_types = await session_type_crud.get_all_newest_first(self.db)
        counts = await session_type_crud.completed_counts(self.db)
        return [session_type_to_dict(st, counts.get(st.id, 0)) for st in session_types]

    async def get_session_type(self, session_type_id: UUID) -> dict:
        """
        Get session type by ID.

        Raises:
            SessionTypeNotFoundError: If session type does not exist
        """
        session_type = await session_type_crud.get_by_id(self.db, session_type_id)
        if not session_type:
            raise SessionTypeNotFoundError(session_type_id)

        counts = await session_type_crud.completed_counts(self.db, ids=[session_type_id])
        return session_type_to_dict(session_type, counts.get(session_type_id, 0))

    async def create_session_type(self, name: str, category: str, priority: int) -> dict:
        """
        Create a session type.

        Args:
            name: Display name
            category: Grouping label
            priority: Importance from 1 to 5

        Returns:
            dict: Created session type

        Raises:
            ValidationError: If priority is out of range
        """
        validate_priority(priority)
        try:
            session_type = await session_type_crud.create(
                self.db, name=name, category=category, priority=priority
            )
            await self.db.commit()
            logger.info(
                "Session type created",
                extra={"session_type_id": str(session_type.id), "session_type_name": name},
            )
            return session_type_to_dict(session_type)
        except Exception as e:
            logger.error(
                "Failed to create session type",
                extra={"error": str(e), "session_type_name": name},
            )
            raise

    async def update_session_type(
        self,
        session_type_id: UUID,
        name: str | None = None,
        category: str | None = None,
        priority: int | None = None,
    ) -> dict:
        """
        Partially update a session type.

        Returns:
            dict: Updated session type

        Raises:
            ValidationError: If no field is given or priority is out of range
            SessionTypeNotFoundError: If session type does not exist
        """
        fields = {
            key: value
            for key, value in {"name": name, "category": category, "priority": priority}.items()
            if value is not None
        }
        if not fields:
            raise ValidationError("No fields to update")
        if "priority" in fields:
            validate_priority(priority)

        try:
            session_type = await session_type_crud.update_by_id(self.db, session_type_id, **fields)
            if not session_type:
                raise SessionTypeNotFoundError(session_type_id)
            await self.db.commit()

            logger.info(
                "Session type updated",
                extra={"session_type_id": str(session_type_id), "fields": list(fields)},
            )
            counts = await session_type_crud.completed_counts(self.db, ids=[session_type_id])
            return session_type_to_dict(session_type, counts.get(session_type_id, 0))
        except PlannerException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update session type",
                extra={"error": str(e), "session_type_id": str(session_type_id)},
            )
            raise

    async def delete_session_type(self, session_type_id: UUID) -> None:
        """
        Delete a session type and all of its sessions.

        Raises:
            SessionTypeNotFoundError: If session type does not exist
        """
        if not await session_type_crud.exists(self.db, session_type_id):
            raise SessionTypeNotFoundError(session_type_id)

        try:
            await session_type_crud.delete_with_sessions(self.db, session_type_id)
            await self.db.commit()
            logger.info("Session type deleted", extra={"session_type_id": str(session_type_id)})
        except Exception as e:
            logger.error(
                "Failed to delete session type",
                extra={"error": str(e), "session_type_id": str(session_type_id)},
            )
            raise
