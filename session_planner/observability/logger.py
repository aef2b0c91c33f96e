"""
Root logger setup for the planner service.

Dependencies: logging (stdlib)
System role: Single stdout handler with correlation-aware format
"""

import logging
import sys

from session_planner.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(correlation_id)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Libraries that log every statement or connection at INFO.
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg")


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the request's correlation id, or ``-`` outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Replace root handlers with one stdout handler at ``level``.

    Safe to call more than once; uvicorn reloads and test apps re-run the
    lifespan, and previously installed handlers are dropped each time.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    stream = logging.StreamHandler(sys.stdout)
    stream.addFilter(CorrelationIdFilter())
    stream.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root.addHandler(stream)
    root.setLevel(logging.getLevelName(level.upper()))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
