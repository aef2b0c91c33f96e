"""
Availability window ORM model.

A recurring weekly interval during which sessions may be scheduled.

Dependencies: sqlalchemy, session_planner.boundary.db.base
System role: Availability persistence
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from session_planner.boundary.db.base import Base, UUIDMixin, TimestampMixin


class AvailabilityWindowModel(Base, UUIDMixin, TimestampMixin):
    """
    Availability window ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        day_of_week: 0 = Sunday through 6 = Saturday
        start_time: "HH:MM" local start
        end_time: "HH:MM" local end, after start_time
    """

    __tablename__ = "availability_windows"
    __table_args__ = (
        CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_availability_day_of_week"),
    )

    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
