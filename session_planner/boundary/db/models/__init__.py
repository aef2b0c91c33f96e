"""ORM models for session types, sessions and availability windows."""

from session_planner.boundary.db.models.availability_window_model import AvailabilityWindowModel
from session_planner.boundary.db.models.session_model import SessionModel
from session_planner.boundary.db.models.session_type_model import SessionTypeModel

__all__ = ["SessionTypeModel", "SessionModel", "AvailabilityWindowModel"]
