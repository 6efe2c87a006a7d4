"""
Observability configuration settings.

Log levels for the application and for SQLAlchemy's engine logger.

Dependencies: pydantic_settings
System role: Logging configuration
"""

from pydantic import Field

from coursehub.configs.base import BaseSettings, settings_config


class ObservabilitySettings(BaseSettings):
    """Logging configuration (LOG_* variables)."""

    model_config = settings_config("LOG_")

    level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    sql_level: str = Field(
        default="WARNING",
        description="Log level for sqlalchemy.engine",
    )
