"""
Demo dataset.

Five session types, a week of availability windows and about three weeks of
completed history around Monday 2025-11-17, plus a few sessions booked for
that week. Pair with PLANNER_FIXED_NOW=2025-11-17T12:00:00 to reproduce the
demo suggestions.

Dependencies: sqlalchemy, session_planner.boundary.db
System role: Development and demo data loader

Usage:
    python -m session_planner.boundary.db.seed
"""

import asyncio
from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.boundary.db.connection import dispose_engine, get_async_session_factory
from session_planner.boundary.db.create_tables import create_all_tables
from session_planner.boundary.db.models import (
    AvailabilityWindowModel,
    SessionModel,
    SessionTypeModel,
)

DEMO_NOW = datetime(2025, 11, 17, 12, 0)

SESSION_TYPES = [
    ("Deep Work", "productivity", 5),
    ("Workout", "fitness", 4),
    ("Language Practice", "learning", 3),
    ("Reading", "learning", 2),
    ("Meditation", "wellness", 3),
]

WEEKDAY_WINDOWS = [("06:00", "08:00"), ("19:00", "21:00")]

AVAILABILITY_WINDOWS = (
    [(day, start, end) for day in (1, 2) for start, end in WEEKDAY_WINDOWS]
    + [(3, "06:00", "08:00"), (3, "12:00", "13:00"), (3, "19:00", "21:00")]
    + [(day, start, end) for day in (4, 5) for start, end in WEEKDAY_WINDOWS]
    + [(6, "09:00", "12:00"), (6, "14:00", "17:00"), (0, "09:00", "11:00")]
)

# (session type name, ISO start, duration minutes, completed)
SESSIONS = [
    ("Deep Work", "2025-10-28T07:00", 90, True),
    ("Deep Work", "2025-10-31T07:00", 120, True),
    ("Deep Work", "2025-11-03T19:00", 90, True),
    ("Deep Work", "2025-11-06T07:00", 60, True),
    ("Deep Work", "2025-11-09T19:00", 120, True),
    ("Deep Work", "2025-11-12T07:00", 90, True),
    ("Deep Work", "2025-11-15T19:00", 60, True),
    ("Workout", "2025-10-29T06:30", 45, True),
    ("Workout", "2025-11-01T06:30", 60, True),
    ("Workout", "2025-11-03T06:30", 45, True),
    ("Workout", "2025-11-05T19:30", 60, True),
    ("Workout", "2025-11-08T06:30", 45, True),
    ("Workout", "2025-11-10T19:30", 60, True),
    ("Workout", "2025-11-13T06:30", 45, True),
    ("Workout", "2025-11-15T06:30", 60, True),
    ("Language Practice", "2025-11-01T12:00", 30, True),
    ("Language Practice", "2025-11-04T12:00", 30, True),
    ("Language Practice", "2025-11-07T19:00", 30, True),
    ("Language Practice", "2025-11-11T12:00", 30, True),
    ("Language Practice", "2025-11-14T19:00", 30, True),
    ("Reading", "2025-11-02T20:00", 45, True),
    ("Reading", "2025-11-08T20:00", 60, True),
    ("Reading", "2025-11-14T20:00", 45, True),
    ("Meditation", "2025-11-10T06:00", 15, True),
    ("Meditation", "2025-11-11T06:00", 15, True),
    ("Meditation", "2025-11-12T06:00", 15, True),
    ("Meditation", "2025-11-13T06:00", 15, True),
    ("Meditation", "2025-11-14T06:00", 15, True),
    ("Meditation", "2025-11-16T06:00", 15, True),
    # Demo day
    ("Meditation", "2025-11-17T06:00", 15, True),
    ("Deep Work", "2025-11-17T14:00", 120, False),
    # Rest of the week
    ("Reading", "2025-11-19T12:00", 45, False),
    ("Workout", "2025-11-21T19:00", 60, False),
]


async def seed_database(db: AsyncSession) -> dict[str, int]:
    """
    Replace all data with the demo dataset and commit.

    Args:
        db: Async database session

    Returns:
        dict: Number of rows created per table
    """
    await db.execute(delete(SessionModel))
    await db.execute(delete(AvailabilityWindowModel))
    await db.execute(delete(SessionTypeModel))

    types_by_name = {}
    for name, category, priority in SESSION_TYPES:
        session_type = SessionTypeModel(name=name, category=category, priority=priority)
        db.add(session_type)
        types_by_name[name] = session_type
    await db.flush()

    db.add_all(
        AvailabilityWindowModel(day_of_week=day, start_time=start, end_time=end)
        for day, start, end in AVAILABILITY_WINDOWS
    )
    db.add_all(
        SessionModel(
            session_type_id=types_by_name[name].id,
            scheduled_at=datetime.fromisoformat(start),
            duration=duration,
            completed=completed,
        )
        for name, start, duration, completed in SESSIONS
    )
    await db.commit()

    return {
        "session_types": len(SESSION_TYPES),
        "availability_windows": len(AVAILABILITY_WINDOWS),
        "sessions": len(SESSIONS),
    }


async def _main() -> None:
    await create_all_tables()
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as db:
        counts = await seed_database(db)
    await dispose_engine()
    print(f"Seeded database: {counts}")


if __name__ == "__main__":
    asyncio.run(_main())
