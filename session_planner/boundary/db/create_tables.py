"""
Schema bootstrap for the planner tables.

Usage:
    python -m session_planner.boundary.db.create_tables          # create missing tables
    python -m session_planner.boundary.db.create_tables --reset  # drop, then recreate

Dependencies: sqlalchemy, session_planner.configs
"""

import asyncio
import sys

from sqlalchemy.ext.asyncio import AsyncEngine

from session_planner.boundary.db.base import Base
from session_planner.boundary.db.connection import dispose_engine, get_async_engine

# Registers session_types, sessions and availability_windows on Base.metadata.
from session_planner.boundary.db import models  # noqa: F401


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """Create any missing tables; existing tables and rows are left alone."""
    async with (engine or get_async_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """Drop every planner table. Destroys all sessions, types and windows."""
    async with (engine or get_async_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _main(reset: bool) -> None:
    if reset:
        await drop_all_tables()
    await create_all_tables()
    await dispose_engine()
    print("Tables recreated." if reset else "Tables created.")


if __name__ == "__main__":
    asyncio.run(_main(reset="--reset" in sys.argv[1:]))
