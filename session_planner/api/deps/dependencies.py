"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: session_planner.configs, session_planner.application, session_planner.boundary
System role: DI container for service injection
"""

from datetime import datetime

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.configs import Settings, get_settings
from session_planner.boundary.db import get_async_db
from session_planner.application.services import (
    AvailabilityService,
    SessionService,
    SessionTypeService,
    StatsService,
    SuggestionService,
)


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_now(settings: Settings = Depends(get_settings_dependency)) -> datetime:
    """
    Current instant for the request.

    Returns the pinned ``PLANNER_FIXED_NOW`` when configured, otherwise the
    local wall clock.
    """
    return settings.scheduling.fixed_now or datetime.now()


def get_session_type_service(db: AsyncSession = Depends(get_async_db)) -> SessionTypeService:
    """
    Get session type service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionTypeService: Session type service instance
    """
    return SessionTypeService(db=db)


def get_session_service(
    db: AsyncSession = Depends(get_async_db),
    now: datetime = Depends(get_now),
) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)
        now: Current instant (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db, now=now)


def get_availability_service(db: AsyncSession = Depends(get_async_db)) -> AvailabilityService:
    """Get availability service instance."""
    return AvailabilityService(db=db)


def get_suggestion_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
    now: datetime = Depends(get_now),
) -> SuggestionService:
    """
    Get suggestion service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (scheduling section is used)
        now: Current instant (injected via Depends)

    Returns:
        SuggestionService: Suggestion service instance
    """
    return SuggestionService(db=db, settings=settings.scheduling, now=now)


def get_stats_service(
    db: AsyncSession = Depends(get_async_db),
    now: datetime = Depends(get_now),
) -> StatsService:
    """Get statistics service instance."""
    return StatsService(db=db, now=now)
