"""
ASGI entry point for the Smart Session Planner.

Run locally with ``python -m session_planner.main`` or
``uvicorn session_planner.main:app``.

Dependencies: fastapi, uvicorn, session_planner.api, session_planner.configs
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from session_planner import __version__
from session_planner.api import api_router
from session_planner.boundary.db.connection import dispose_engine
from session_planner.boundary.db.create_tables import create_all_tables
from session_planner.configs import get_settings
from session_planner.observability.logger import configure_logging
from session_planner.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging and, for SQLite, create missing tables.

    PostgreSQL schemas are created out of band with
    ``python -m session_planner.boundary.db.create_tables``.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    if settings.database.is_sqlite:
        await create_all_tables()

    pinned = settings.scheduling.fixed_now
    logger.info(
        "Planner started",
        extra={
            "environment": settings.environment,
            "sqlite": settings.database.is_sqlite,
            "fixed_now": pinned.isoformat() if pinned else None,
        },
    )

    yield

    await dispose_engine()
    logger.info("Planner stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    docs_enabled = not settings.is_production

    app = FastAPI(
        title="Smart Session Planner API",
        description="Weekly session planning with conflict checks and ranked slot suggestions",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )

    # Starlette runs the last-added middleware first, so correlation ids are
    # bound before the access log line is written.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )

    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("session_planner.main:app", host="localhost", port=8082, reload=get_settings().debug)
