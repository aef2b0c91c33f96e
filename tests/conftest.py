"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, pinned clock, value record factories
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from datetime import datetime
import uuid

import pytest

from session_planner.core.scheduling.records import (
    AvailabilityWindowRecord,
    SessionRecord,
    SessionTypeRecord,
)

# Monday
DEMO_NOW = datetime(2025, 11, 17, 12, 0)


@pytest.fixture
def now() -> datetime:
    """Pinned current instant: Monday 2025-11-17 12:00."""
    return DEMO_NOW


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from session_planner.boundary.db.create_tables import create_all_tables, drop_all_tables
    from session_planner.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await create_all_tables(engine)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await drop_all_tables(engine)

    await engine.dispose()


@pytest.fixture
def make_type():
    """Factory for SessionTypeRecord."""

    def _make(name: str = "Deep Work", priority: int = 5, category: str = "productivity"):
        return SessionTypeRecord(id=uuid.uuid4(), name=name, category=category, priority=priority)

    return _make


@pytest.fixture
def make_session():
    """Factory for SessionRecord, defaulting to a 60 minute session."""

    def _make(
        scheduled_at: datetime,
        duration: int = 60,
        completed: bool = False,
        session_type: SessionTypeRecord | None = None,
        priority: int = 3,
        name: str = "Existing",
    ):
        return SessionRecord(
            id=uuid.uuid4(),
            session_type_id=session_type.id if session_type else uuid.uuid4(),
            session_type_name=session_type.name if session_type else name,
            priority=session_type.priority if session_type else priority,
            scheduled_at=scheduled_at,
            duration=duration,
            completed=completed,
        )

    return _make


@pytest.fixture
def make_window():
    """Factory for AvailabilityWindowRecord."""

    def _make(day_of_week: int, start_time: str, end_time: str):
        return AvailabilityWindowRecord(
            id=uuid.uuid4(),
            day_of_week=day_of_week,
            start_time=start_time,
            end_time=end_time,
        )

    return _make


@pytest.fixture
async def seeded_db(test_async_db):
    """Test database loaded with the demo dataset."""
    from session_planner.boundary.db.seed import seed_database

    await seed_database(test_async_db)
    return test_async_db
