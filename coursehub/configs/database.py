"""
Database configuration settings.

Connection parameters for the course platform's PostgreSQL database,
reached through asyncpg. A full SQLAlchemy URL can replace the individual
fields, which is how tests and local runs point at SQLite.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the ORM
"""

from typing import Any

from pydantic import Field

from coursehub.configs.base import BaseSettings, settings_config


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool configuration (POSTGRES_* variables)."""

    model_config = settings_config("POSTGRES_")

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="coursehub", description="PostgreSQL database name")
    sslmode: str = Field(default="disable", description="'require' enables TLS")

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy async URL; overrides the individual fields when set",
    )

    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, ge=1, description="Seconds to wait for a pooled connection")
    echo_sql: bool = False

    @property
    def async_database_url(self) -> str:
        """SQLAlchemy URL for the async engine."""
        if self.url:
            return self.url
        query = "?ssl=require" if self.sslmode == "require" else ""
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}{query}"
        )

    @property
    def is_postgres(self) -> bool:
        return self.async_database_url.startswith("postgresql")

    def engine_options(self) -> dict[str, Any]:
        """
        Keyword arguments for create_async_engine.

        Pool sizing only applies to PostgreSQL; other dialects keep their
        default pool.
        """
        options: dict[str, Any] = {"echo": self.echo_sql}
        if self.is_postgres:
            options.update(
                pool_size=self.pool_size,
                max_overflow=self.max_overflow,
                pool_timeout=self.pool_timeout,
                pool_pre_ping=True,
            )
        return options
