"""
Availability service orchestrator.

Coordinates availability window lifecycle operations and validation.

Dependencies: session_planner.boundary.db.CRUD, session_planner.core.scheduling
System role: Availability use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from session_planner.application.adapters.record_adapter import window_to_dict
from session_planner.boundary.db.CRUD.availability_crud import availability_window_crud
from session_planner.core.exceptions import (
    AvailabilityWindowNotFoundError,
    PlannerException,
    ValidationError,
)
from session_planner.core.scheduling.timeutils import parse_time_of_day

logger = logging.getLogger(__name__)


def validate_window(day_of_week: int, start_time: str, end_time: str) -> None:
    """
    Check an availability window.

    Raises:
        ValidationError: If the day is outside [0, 6], a time is not HH:MM,
            or start_time is not before end_time
    """
    if isinstance(day_of_week, bool) or not isinstance(day_of_week, int) or not 0 <= day_of_week <= 6:
        raise ValidationError(
            "day_of_week must be a number between 0 (Sunday) and 6 (Saturday)",
            field="day_of_week",
        )

    parsed = {}
    for field, value in (("start_time", start_time), ("end_time", end_time)):
        try:
            parsed[field] = parse_time_of_day(value)
        except ValidationError:
            raise ValidationError(f"{field} must be in HH:MM format", field=field) from None

    if parsed["start_time"] >= parsed["end_time"]:
        raise ValidationError("start_time must be before end_time", field="start_time")


class AvailabilityService:
    """Availability window service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize availability service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_windows(self) -> list[dict]:
        """Get all windows ordered by weekday, then start time."""
        windows = await availability_window_crud.get_all_ordered(self.db)
        return [window_to_dict(w) for w in windows]

    async def create_window(self, day_of_week: int, start_time: str, end_time: str) -> dict:
        """
        Create an availability window.

        Raises:
            ValidationError: If the window is invalid
        """
        validate_window(day_of_week, start_time, end_time)
        try:
            window = await availability_window_crud.create(
                self.db,
                day_of_week=day_of_week,
                start_time=start_time,
                end_time=end_time,
            )
            await self.db.commit()
            logger.info(
                "Availability window created",
                extra={
                    "window_id": str(window.id),
                    "day_of_week": day_of_week,
                    "start_time": start_time,
                    "end_time": end_time,
                },
            )
            return window_to_dict(window)
        except Exception as e:
            logger.error(
                "Failed to create availability window",
                extra={"error": str(e), "day_of_week": day_of_week},
            )
            raise

    async def update_window(
        self,
        window_id: UUID,
        day_of_week: int | None = None,
        start_time: str | None = None,
        end_time: str | None = None,
    ) -> dict:
        """
        Partially update a window; the merged result is re-validated.

        Raises:
            ValidationError: If no field is given or the merged window is invalid
            AvailabilityWindowNotFoundError: If the window does not exist
        """
        fields = {
            key: value
            for key, value in {
                "day_of_week": day_of_week,
                "start_time": start_time,
                "end_time": end_time,
            }.items()
            if value is not None
        }
        if not fields:
            raise ValidationError("No fields to update")

        window = await availability_window_crud.get_by_id(self.db, window_id)
        if not window:
            raise AvailabilityWindowNotFoundError(window_id)

        validate_window(
            fields.get("day_of_week", window.day_of_week),
            fields.get("start_time", window.start_time),
            fields.get("end_time", window.end_time),
        )

        try:
            window = await availability_window_crud.update_by_id(self.db, window_id, **fields)
            await self.db.commit()
            logger.info(
                "Availability window updated",
                extra={"window_id": str(window_id), "fields": list(fields)},
            )
            return window_to_dict(window)
        except PlannerException:
            raise
        except Exception as e:
            logger.error(
                "Failed to update availability window",
                extra={"error": str(e), "window_id": str(window_id)},
            )
            raise

    async def delete_window(self, window_id: UUID) -> None:
        """
        Delete a window.

        Raises:
            AvailabilityWindowNotFoundError: If the window does not exist
        """
        deleted = await availability_window_crud.delete_by_id(self.db, window_id)
        if not deleted:
            raise AvailabilityWindowNotFoundError(window_id)
        await self.db.commit()
        logger.info("Availability window deleted", extra={"window_id": str(window_id)})
