"""
Session ORM model.

A booked, dated occurrence of a session type.

Dependencies: sqlalchemy, session_planner.boundary.db.base
System role: Scheduled session persistence
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from session_planner.boundary.db.base import Base, UUIDMixin, TimestampMixin

if TYPE_CHECKING:
    from session_planner.boundary.db.models.session_type_model import SessionTypeModel


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        session_type_id: Owning session type (CASCADE on delete)
        scheduled_at: Naive local start instant
        duration: Length in minutes (positive)
        completed: Whether the session has been done
        session_type: Owning SessionTypeModel
    """

    __tablename__ = "sessions"
    __table_args__ = (
        CheckConstraint("duration > 0", name="ck_sessions_duration_positive"),
    )

    session_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("session_types.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    scheduled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        index=True,
        doc="Local wall-clock start time",
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False, doc="Minutes")
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    session_type: Mapped["SessionTypeModel"] = relationship(back_populates="sessions")
