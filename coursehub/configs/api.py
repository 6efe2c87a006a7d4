"""
HTTP API configuration settings.

Request deadlines, identity header names forwarded by the upstream
auth gateway, and CORS origins.

Dependencies: pydantic, pydantic_settings
System role: API surface configuration
"""

from pydantic import Field

from coursehub.configs.base import BaseSettings, settings_config


class ApiSettings(BaseSettings):
    """API configuration."""

    model_config = settings_config("API_")

    title: str = Field(default="Course Platform API", description="OpenAPI title")
    version: str = Field(default="0.1.0", description="API version")

    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Default deadline applied to every service operation",
    )

    user_id_header: str = Field(
        default="X-User-ID",
        description="Header carrying the authenticated user id (set by the auth gateway)",
    )
    user_role_header: str = Field(
        default="X-User-Role",
        description="Header carrying the authenticated user role (set by the auth gateway)",
    )

    allowed_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="CORS allowed origins",
    )
