"""
ORM to record adapter.

Converts ORM rows into the scheduling core's value records and into the
plain dicts returned by the application services.

Dependencies: session_planner.boundary.db.models, session_planner.core.scheduling
System role: Translation between persistence and domain shapes
"""

from session_planner.boundary.db.models import (
    AvailabilityWindowModel,
    SessionModel,
    SessionTypeModel,
)
from session_planner.core.scheduling.records import (
    AvailabilityWindowRecord,
    SessionRecord,
    SessionTypeRecord,
)


def session_type_to_record(model: SessionTypeModel) -> SessionTypeRecord:
    return SessionTypeRecord(
        id=model.id,
        name=model.name,
        category=model.category,
        priority=model.priority,
    )


def session_to_record(model: SessionModel) -> SessionRecord:
    """Build a SessionRecord; ``model.session_type`` must be loaded."""
    return SessionRecord(
        id=model.id,
        session_type_id=model.session_type_id,
        session_type_name=model.session_type.name,
        priority=model.session_type.priority,
        scheduled_at=model.scheduled_at,
        duration=model.duration,
        completed=model.completed,
    )


def window_to_record(model: AvailabilityWindowModel) -> AvailabilityWindowRecord:
    return AvailabilityWindowRecord(
        id=model.id,
        day_of_week=model.day_of_week,
        start_time=model.start_time,
        end_time=model.end_time,
    )


def session_type_to_dict(model: SessionTypeModel, completed_count: int = 0) -> dict:
    return {
        "id": model.id,
        "name": model.name,
        "category": model.category,
        "priority": model.priority,
        "completed_count": completed_count,
        "created_at": model.created_at,
        "updated_at": model.updated_at,
    }


def session_to_dict(model: SessionModel) -> dict:
    session_type = model.session_type
    return {
        "id": model.id,
        "session_type_id": model.session_type_id,
        "session_type": {
            "id": session_type.id,
            "name": session_type.name,
            "category": session_type.category,
            "priority": session_type.priority,
        },
        "scheduled_at": model.scheduled_at,
        "duration": model.duration,
        "completed": model.completed,
        "created_at": model.created_at,
        "updated_at": model.updated_at,
    }


def window_to_dict(model: AvailabilityWindowModel) -> dict:
    return {
        "id": model.id,
        "day_of_week": model.day_of_week,
        "start_time": model.start_time,
        "end_time": model.end_time,
        "created_at": model.created_at,
        "updated_at": model.updated_at,
    }
