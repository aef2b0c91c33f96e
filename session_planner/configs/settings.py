"""
Application settings.

Combines the shared fields with the database and scheduling sections. The
instance is built once per process; tests construct their own.

Dependencies: pydantic, pydantic_settings
System role: Root configuration object injected into the API
"""

from functools import lru_cache

from pydantic import Field

from session_planner.configs.base import PlannerBaseSettings
from session_planner.configs.database import DatabaseSettings
from session_planner.configs.scheduling import SchedulingSettings


class Settings(PlannerBaseSettings):
    """Root settings with one attribute per section."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    scheduling: SchedulingSettings = Field(default_factory=SchedulingSettings)


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment on first call and reuse them."""
    return Settings()
