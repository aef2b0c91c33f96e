"""
Planner error handling utilities.

Provides a decorator for consistent error handling across API endpoints and
the 409 response used when a booking overlaps existing sessions.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from session_planner.core.exceptions import NotFoundError, PlannerException, ValidationError
from session_planner.core.scheduling.records import ConflictResult
from session_planner.models.common import ConflictResponse
from session_planner.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_planner_errors(func: F) -> F:
    """
    Decorator to handle planner errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"resource": e.resource, "resource_id": str(e.resource_id)},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationError as e:
            logger.warning(
                "Invalid request",
                extra={"field": e.field, "error": e.message},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=422,
                detail=e.errors(include_url=False),
            )

        except PlannerException as e:
            logger.warning("Planner operation rejected", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure in planner operation",
                e,
                endpoint=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore


def conflict_response(result: ConflictResult) -> JSONResponse:
    """Build the 409 response listing the overlapping sessions."""
    body = ConflictResponse(
        conflicts=[c.to_dict() for c in result.conflicting_sessions],
    )
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=body.model_dump(mode="json"),
    )
