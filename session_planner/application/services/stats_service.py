"""
Statistics service orchestrator.

Dependencies: session_planner.boundary.db.CRUD, session_planner.core.scheduling
System role: Progress report use case
"""

import logging
from dataclasses import asdict
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.application.adapters.record_adapter import (
    session_to_record,
    session_type_to_record,
)
from session_planner.boundary.db.CRUD.session_crud import session_crud
from session_planner.boundary.db.CRUD.session_type_crud import session_type_crud
from session_planner.core.scheduling.aggregate_stats import compute_aggregate_stats

logger = logging.getLogger(__name__)


class StatsService:
    """Statistics service orchestrator."""

    def __init__(self, db: AsyncSession, now: datetime | None = None) -> None:
        self.db = db
        self.now = now or datetime.now()

    async def get_aggregate_stats(self) -> dict:
        """
        Build the progress report over every session.

        Returns:
            dict: overview, by_type and derived_metrics sections
        """
        try:
            sessions = await session_crud.get_all_with_type(self.db)
            session_types = await session_type_crud.get_all_newest_first(self.db)
            stats = compute_aggregate_stats(
                (session_to_record(s) for s in sessions),
                (session_type_to_record(st) for st in session_types),
                self.now,
            )
            return asdict(stats)
        except Exception as e:
            logger.error("Failed to compute statistics", extra={"error": str(e)})
            raise
