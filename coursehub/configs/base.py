"""
Shared settings plumbing.

Every concern reads its own environment prefix from the process
environment and an optional .env file.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"


def settings_config(env_prefix: str = "") -> SettingsConfigDict:
    """Build the model_config of a settings class reading env_prefix variables."""
    return SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix=env_prefix,
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(PydanticBaseSettings):
    """Settings base carrying the deployment environment name."""

    model_config = settings_config()

    environment: str = Field(
        default="development",
        description="Deployment environment (development, staging, production)",
    )
