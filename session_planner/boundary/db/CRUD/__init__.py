"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from session_planner.boundary.db.CRUD import session_crud, session_type_crud

    # Use singleton instances
    session = await session_crud.get_with_type(db, session_id)

    # Or instantiate classes directly for custom behavior
    from session_planner.boundary.db.CRUD import SessionCRUD
    custom_crud = SessionCRUD()
"""

from session_planner.boundary.db.CRUD.base_crud import BaseCRUD
from session_planner.boundary.db.CRUD.session_type_crud import SessionTypeCRUD, session_type_crud
from session_planner.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from session_planner.boundary.db.CRUD.availability_crud import (
    AvailabilityWindowCRUD,
    availability_window_crud,
)

__all__ = [
    "BaseCRUD",
    "SessionTypeCRUD",
    "session_type_crud",
    "SessionCRUD",
    "session_crud",
    "AvailabilityWindowCRUD",
    "availability_window_crud",
]
