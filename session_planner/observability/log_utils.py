"""
Structured logging helpers.

Log records carry context in ``extra``; these helpers turn scheduling values
(ids, instants, durations, value records, collections) into short strings
first, so formatters and log shippers never receive raw objects.

Dependencies: logging (stdlib)
System role: Context formatting for service and middleware logs
"""

import dataclasses
import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Any
from uuid import UUID

MAX_VALUE_LENGTH = 500


def _describe(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return f"{value.total_seconds() / 60:g}min"
    if isinstance(value, UUID):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return type(value).__name__
    if isinstance(value, Mapping):
        return f"dict({len(value)} keys)"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"{type(value).__name__}({len(value)} items)"
    return str(value)


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a value for a log record without ever raising.

    Args:
        value: Anything passed as logging context
        max_length: Longer renderings are cut and marked as truncated

    Returns:
        str: Short, log-safe representation
    """
    if value is None:
        return "None"
    try:
        rendered = _describe(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(rendered) > max_length:
        return f"{rendered[:max_length]}... (truncated, {len(rendered)} total)"
    return rendered


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log ``message`` at ``level`` with every context value made log-safe."""
    logger.log(level, message, extra={k: safe_log_value(v) for k, v in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with traceback, its type and message, and extra context.

    Must be called from inside the ``except`` block handling ``exc``.
    """
    extra = {k: safe_log_value(v) for k, v in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.exception(message, extra=extra)
