"""
Shared settings base.

Every settings section reads the same `.env` file, ignores unknown keys and
carries the runtime environment and log level.

Dependencies: pydantic, pydantic_settings
System role: Parent class of all planner settings sections
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PlannerBaseSettings(BaseSettings):
    """Fields and env loading common to every settings section."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Deployment environment reported by /health",
    )
    debug: bool = Field(default=False, description="Enable uvicorn auto-reload")
    log_level: str = Field(default="INFO", description="Root logger level name")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
