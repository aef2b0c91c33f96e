"""
Availability window CRUD operations.

Dependencies: sqlalchemy, session_planner.boundary.db.models
System role: Availability persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.boundary.db.models.availability_window_model import AvailabilityWindowModel
from session_planner.boundary.db.CRUD.base_crud import BaseCRUD


class AvailabilityWindowCRUD(BaseCRUD[AvailabilityWindowModel]):
    """CRUD operations for AvailabilityWindowModel."""

    def __init__(self) -> None:
        """Initialize AvailabilityWindowCRUD with AvailabilityWindowModel."""
        super().__init__(AvailabilityWindowModel)

    async def get_all_ordered(self, session: AsyncSession) -> Sequence[AvailabilityWindowModel]:
        """Retrieve all windows ordered by weekday, then start time."""
        stmt = select(AvailabilityWindowModel).order_by(
            AvailabilityWindowModel.day_of_week.asc(),
            AvailabilityWindowModel.start_time.asc(),
        )
        result = await session.execute(stmt)
        return result.scalars().all()


availability_window_crud = AvailabilityWindowCRUD()
