"""Supporting adapters."""

from session_planner.application.adapters.record_adapter import (
    session_to_dict,
    session_to_record,
    session_type_to_dict,
    session_type_to_record,
    window_to_dict,
    window_to_record,
)

__all__ = [
    "session_to_dict",
    "session_to_record",
    "session_type_to_dict",
    "session_type_to_record",
    "window_to_dict",
    "window_to_record",
]
