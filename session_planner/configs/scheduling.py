"""
Scheduling configuration settings.

Defaults and limits for slot suggestions, plus an optional pinned clock
used for demos and reproducible runs.

Dependencies: pydantic, pydantic_settings
System role: Tunables for the suggestion pipeline and booking flow
"""

from datetime import datetime

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from session_planner.configs.base import PlannerBaseSettings


class SchedulingSettings(PlannerBaseSettings):
    """Suggestion and booking configuration."""

    model_config = SettingsConfigDict(env_prefix="PLANNER_")

    default_duration_minutes: int = Field(
        default=60, ge=1, description="Session length used when a request omits it"
    )
    default_days_ahead: int = Field(
        default=7, ge=1, description="Look-ahead horizon for suggestions in days"
    )
    default_limit: int = Field(
        default=5, ge=1, description="Number of suggestions returned by default"
    )
    max_duration_minutes: int = Field(
        default=480, ge=1, description="Longest session that may be scheduled"
    )
    fixed_now: datetime | None = Field(
        default=None,
        description="Pin the current instant (naive local time), e.g. 2025-11-17T12:00:00",
    )
    recheck_on_accept: bool = Field(
        default=True,
        description="Re-run conflict detection when a suggestion is accepted",
    )
