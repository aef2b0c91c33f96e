"""
Generic primary-key operations shared by the planner CRUD classes.

Session type, session and availability window CRUD subclasses add their own
ordered listings and joins on top of these. Nothing in this module commits:
the application service that owns the AsyncSession decides when a unit of
work is finished.

Dependencies: sqlalchemy
System role: Row-level persistence primitives for the planner tables
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Create/read/update/delete by UUID primary key for one mapped model.

    Attributes:
        model: Mapped class this instance operates on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def _by_pk(self, id: UUID):
        return self.model.id == id

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a row and return it with server-side defaults loaded.

        The flush assigns the UUID and timestamps; the refresh reloads them
        so callers can serialize the instance straight away.
        """
        row = self.model(**values)
        session.add(row)
        await session.flush()
        await session.refresh(row)
        return row

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        result = await session.execute(select(self.model).where(self._by_pk(id)))
        return result.scalar_one_or_none()

    async def update_by_id(self, session: AsyncSession, id: UUID, **changes: Any) -> ModelT | None:
        """
        Apply ``changes`` to the row with ``id``.

        The row is loaded and mutated through the ORM rather than with a bulk
        UPDATE so ``updated_at`` fires and already-loaded instances stay in
        sync. Returns None when no such row exists.
        """
        row = await self.get_by_id(session, id)
        if row is None:
            return None
        for column, value in changes.items():
            setattr(row, column, value)
        await session.flush()
        await session.refresh(row)
        return row

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete the row with ``id``; False when nothing matched."""
        result = await session.execute(delete(self.model).where(self._by_pk(id)))
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        result = await session.execute(select(self.model.id).where(self._by_pk(id)))
        return result.scalar_one_or_none() is not None
