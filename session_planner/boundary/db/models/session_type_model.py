"""
Session type ORM model.

Represents a reusable category of recurring activity with a priority weight.

Dependencies: sqlalchemy, session_planner.boundary.db.base
System role: Session type persistence
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from session_planner.boundary.db.base import Base, UUIDMixin, TimestampMixin

if TYPE_CHECKING:
    from session_planner.boundary.db.models.session_model import SessionModel


class SessionTypeModel(Base, UUIDMixin, TimestampMixin):
    """
    Session type ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name, e.g. "Deep Work"
        category: Free-form grouping label, e.g. "productivity"
        priority: Importance from 1 (low) to 5 (high)
        sessions: Sessions booked for this type
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        sessions: One-to-many with SessionModel (CASCADE on type deletion)
    """

    __tablename__ = "session_types"
    __table_args__ = (
        CheckConstraint("priority BETWEEN 1 AND 5", name="ck_session_types_priority"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, doc="Session type name")
    category: Mapped[str] = mapped_column(String(100), nullable=False, doc="Category label")
    priority: Mapped[int] = mapped_column(Integer, nullable=False, doc="Priority 1-5")

    sessions: Mapped[list["SessionModel"]] = relationship(
        back_populates="session_type",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
