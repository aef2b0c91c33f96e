"""
Planner error types.

Services raise these; the router decorator maps them to HTTP statuses
(ValidationError -> 400, NotFoundError -> 404). Booking overlaps are not
errors: they come back as a ConflictResult and become a 409 response.

Dependencies: None (pure domain layer)
"""

from typing import Any


class PlannerException(Exception):
    """
    Root of every planner error.

    Attributes:
        message: Text returned to API clients as ``detail``
        details: Structured context for logs, never sent to clients
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(PlannerException):
    """A request value breaks a domain rule (priority range, HH:MM format, duration cap...)."""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)
        self.field = field
        if field:
            self.details["field"] = field


class NotFoundError(PlannerException):
    """A referenced row does not exist."""

    resource = "Record"

    def __init__(self, resource_id: Any, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"{self.resource} not found: {resource_id}", details)
        self.resource_id = resource_id
        self.details["resource_id"] = str(resource_id)


class SessionTypeNotFoundError(NotFoundError):
    resource = "Session type"


class SessionNotFoundError(NotFoundError):
    resource = "Session"


class AvailabilityWindowNotFoundError(NotFoundError):
    resource = "Availability window"
