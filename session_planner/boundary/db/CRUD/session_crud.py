"""
Queries over booked sessions.

Every statement eager-loads the owning session type (name and priority feed
conflict reports and scoring) and orders by ``scheduled_at``.

Dependencies: sqlalchemy, session_planner.boundary.db.models
System role: Session persistence and time-range lookups
"""

from datetime import datetime
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from session_planner.boundary.db.CRUD.base_crud import BaseCRUD
from session_planner.boundary.db.models.session_model import SessionModel

# Key of the PostgreSQL advisory lock serializing bookings (ASCII "PLANBOOK").
BOOKING_LOCK_KEY = 0x504C414E424F4F4B


class SessionCRUD(BaseCRUD[SessionModel]):
    def __init__(self) -> None:
        super().__init__(SessionModel)

    @staticmethod
    def _timeline(*criteria: Any) -> Select:
        return (
            select(SessionModel)
            .options(selectinload(SessionModel.session_type))
            .where(*criteria)
            .order_by(SessionModel.scheduled_at.asc())
        )

    @staticmethod
    async def _fetch(session: AsyncSession, stmt: Select) -> Sequence[SessionModel]:
        return (await session.execute(stmt)).scalars().all()

    async def lock_bookings(self, session: AsyncSession) -> None:
        """
        Serialize conflict-check-then-write sequences until the transaction ends.

        PostgreSQL takes a transaction-scoped advisory lock, so a second booking
        waits and then sees the first one's row. SQLite already allows a single
        writer, so other dialects skip the lock.
        """
        if session.get_bind().dialect.name != "postgresql":
            return
        await session.execute(select(func.pg_advisory_xact_lock(BOOKING_LOCK_KEY)))

    async def create_with_type(self, session: AsyncSession, **values: Any) -> SessionModel:
        """Insert a session and load ``session_type`` so the response can name it."""
        booked = await self.create(session, **values)
        await session.refresh(booked, attribute_names=["session_type"])
        return booked

    async def get_with_type(self, session: AsyncSession, id: UUID) -> SessionModel | None:
        result = await session.execute(self._timeline(SessionModel.id == id))
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        session: AsyncSession,
        *,
        upcoming_from: datetime | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        session_type_id: UUID | None = None,
    ) -> Sequence[SessionModel]:
        """
        Sessions matching every given filter.

        Args:
            upcoming_from: Keep only not-completed sessions starting at or after this instant
            start_date: Inclusive lower bound on scheduled_at
            end_date: Inclusive upper bound on scheduled_at
            session_type_id: Keep only this session type
        """
        criteria = []
        if upcoming_from is not None:
            criteria += [SessionModel.scheduled_at >= upcoming_from, SessionModel.completed.is_(False)]
        if start_date is not None:
            criteria.append(SessionModel.scheduled_at >= start_date)
        if end_date is not None:
            criteria.append(SessionModel.scheduled_at <= end_date)
        if session_type_id is not None:
            criteria.append(SessionModel.session_type_id == session_type_id)
        return await self._fetch(session, self._timeline(*criteria))

    async def get_all_with_type(self, session: AsyncSession) -> Sequence[SessionModel]:
        return await self._fetch(session, self._timeline())

    async def get_starting_from(self, session: AsyncSession, start: datetime) -> Sequence[SessionModel]:
        """Sessions of any type and status starting at or after ``start``."""
        return await self._fetch(session, self._timeline(SessionModel.scheduled_at >= start))

    async def get_starting_before(self, session: AsyncSession, end: datetime) -> Sequence[SessionModel]:
        """
        Sessions starting before ``end``.

        A superset of those overlapping an interval that ends at ``end``;
        the exact half-open overlap test runs in the conflict detector.
        """
        return await self._fetch(session, self._timeline(SessionModel.scheduled_at < end))

    async def get_by_type(self, session: AsyncSession, session_type_id: UUID) -> Sequence[SessionModel]:
        return await self._fetch(session, self._timeline(SessionModel.session_type_id == session_type_id))


session_crud = SessionCRUD()
