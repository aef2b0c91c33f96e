"""
Session type CRUD operations.

Provides Create, Read, Update, Delete operations for SessionTypeModel
with completion counts and cascading delete.

Dependencies: sqlalchemy, session_planner.boundary.db.models
System role: Session type persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.boundary.db.models.session_model import SessionModel
from session_planner.boundary.db.models.session_type_model import SessionTypeModel
from session_planner.boundary.db.CRUD.base_crud import BaseCRUD


class SessionTypeCRUD(BaseCRUD[SessionTypeModel]):
    """
    CRUD operations for SessionTypeModel.

    Extends BaseCRUD with newest-first listing, completed session counts
    and deletion of owned sessions.
    """

    def __init__(self) -> None:
        """Initialize SessionTypeCRUD with SessionTypeModel."""
        super().__init__(SessionTypeModel)

    async def get_all_newest_first(self, session: AsyncSession) -> Sequence[SessionTypeModel]:
        """Retrieve all session types ordered by creation time, newest first."""
        stmt = select(SessionTypeModel).order_by(SessionTypeModel.created_at.desc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def completed_counts(
        self,
        session: AsyncSession,
        ids: Sequence[UUID] | None = None,
    ) -> dict[UUID, int]:
        """
        Count completed sessions per session type.

        Args:
            session: Async database session
            ids: Restrict to these session types (None for all)

        Returns:
            Mapping of session type id to completed count; types without
            completed sessions are absent
        """
        stmt = (
            select(SessionModel.session_type_id, func.count(SessionModel.id))
            .where(SessionModel.completed.is_(True))
            .group_by(SessionModel.session_type_id)
        )
        if ids is not None:
            stmt = stmt.where(SessionModel.session_type_id.in_(ids))
        result = await session.execute(stmt)
        return {type_id: count for type_id, count in result.all()}

    async def delete_with_sessions(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a session type together with all of its sessions.

        Sessions are removed explicitly so the cascade holds on backends
        that do not enforce foreign keys.

        Returns:
            True if the session type was deleted, False if not found
        """
        await session.execute(delete(SessionModel).where(SessionModel.session_type_id == id))
        return await self.delete_by_id(session, id)


session_type_crud = SessionTypeCRUD()
