"""
Async engine, session factory and the request-scoped session dependency.

Dependencies: sqlalchemy, session_planner.configs
System role: Database connection lifecycle
"""

from functools import lru_cache
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from session_planner.configs import get_settings
from session_planner.configs.database import DatabaseSettings


def _engine_options(config: DatabaseSettings) -> dict[str, Any]:
    # One shared connection keeps an in-memory SQLite database alive between sessions.
    if config.is_sqlite:
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_size": config.pool_size,
        "max_overflow": config.max_overflow,
        "pool_timeout": config.pool_timeout,
        "pool_pre_ping": True,
    }


@lru_cache
def get_async_engine() -> AsyncEngine:
    """Process-wide engine built from DatabaseSettings (PostgreSQL via asyncpg, or SQLite via aiosqlite)."""
    config = get_settings().database
    return create_async_engine(
        config.async_database_url,
        echo=config.echo_sql,
        **_engine_options(config),
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory with autoflush off and no expiry on commit.

    Services flush explicitly before conflict queries, and response models
    read attributes after commit without another round trip.
    """
    return async_sessionmaker(bind=get_async_engine(), autoflush=False, expire_on_commit=False)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one AsyncSession per request, closed afterwards."""
    async with get_async_session_factory()() as session:
        yield session


async def dispose_engine() -> None:
    """Close pooled connections and forget the cached engine."""
    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
    get_async_session_factory.cache_clear()
    get_async_engine.cache_clear()
