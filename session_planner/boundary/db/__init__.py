"""
Persistence for session types, booked sessions and weekly availability.

Models map the three planner tables; the module-level CRUD singletons are
what application services call, always with a request-scoped AsyncSession.
"""

from session_planner.boundary.db.base import Base, TimestampMixin, UUIDMixin
from session_planner.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from session_planner.boundary.db.models import (
    AvailabilityWindowModel,
    SessionModel,
    SessionTypeModel,
)
from session_planner.boundary.db.CRUD import (
    AvailabilityWindowCRUD,
    BaseCRUD,
    SessionCRUD,
    SessionTypeCRUD,
    availability_window_crud,
    session_crud,
    session_type_crud,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "SessionTypeModel",
    "SessionModel",
    "AvailabilityWindowModel",
    "BaseCRUD",
    "SessionTypeCRUD",
    "SessionCRUD",
    "AvailabilityWindowCRUD",
    "session_type_crud",
    "session_crud",
    "availability_window_crud",
]
