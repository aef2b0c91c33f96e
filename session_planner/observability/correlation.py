"""
Per-request correlation ids.

A ContextVar follows the request through awaits and into service code, so
every log line for one HTTP call shares an id without threading it through
function signatures.

Dependencies: contextvars, uuid
"""

import uuid
from contextvars import ContextVar

_NO_ID = ""

_current_id: ContextVar[str] = ContextVar("planner_correlation_id", default=_NO_ID)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind ``correlation_id`` (or a fresh UUID4 string) to the current context and return it."""
    bound = correlation_id or str(uuid.uuid4())
    _current_id.set(bound)
    return bound


def get_correlation_id() -> str:
    return _current_id.get()


def clear_correlation_id() -> None:
    _current_id.set(_NO_ID)
