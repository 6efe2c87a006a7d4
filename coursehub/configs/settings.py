"""
Application settings.

Groups the database, HTTP API and logging settings of the course platform
into one object that FastAPI dependencies and the app factory share.

Dependencies: coursehub.configs submodules
System role: Central configuration aggregator
"""

from functools import lru_cache

from pydantic import Field

from coursehub.configs.api import ApiSettings
from coursehub.configs.base import BaseSettings
from coursehub.configs.database import DatabaseSettings
from coursehub.configs.observability import ObservabilitySettings


class Settings(BaseSettings):
    """
    All settings of the course platform.

    Attributes:
        database: Connection and pool settings (POSTGRES_*)
        api: Deadlines, identity headers and CORS (API_*)
        observability: Log levels (LOG_*)
    """

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """Settings read once from the environment and cached for the process."""
    return Settings()
