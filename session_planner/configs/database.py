"""
Database section (``POSTGRES_*`` variables).

PostgreSQL through asyncpg is the deployed target. ``POSTGRES_URL_OVERRIDE``
takes any async SQLAlchemy URL, which is how local runs and the test suite
point the app at SQLite.

Dependencies: pydantic, pydantic_settings
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from session_planner.configs.base import PlannerBaseSettings


class DatabaseSettings(PlannerBaseSettings):
    """Connection and pool parameters."""

    model_config = SettingsConfigDict(env_prefix="POSTGRES_")

    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    db: str = Field(default="session_planner", description="Database name")
    sslmode: str = Field(default="disable", description="'require' adds ssl=require for asyncpg")

    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, ge=1, description="Seconds to wait for a pooled connection")
    echo_sql: bool = False

    url_override: str | None = Field(
        default=None,
        description="Full async URL, e.g. sqlite+aiosqlite:///./planner.db",
    )

    @property
    def async_database_url(self) -> str:
        if self.url_override:
            return self.url_override
        query = "?ssl=require" if self.sslmode == "require" else ""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}{query}"

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")
