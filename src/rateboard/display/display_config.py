"""Settings for the headless display process."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplayConfig(BaseSettings):
    """Pydantic settings container for a single display instance."""

    model_config = SettingsConfigDict(env_prefix="RATEBOARD_DISPLAY_", env_file=".env", extra="ignore")

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the rateboard backend API.",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout for polled reads.",
    )
    fallback_poll_interval_seconds: float = Field(
        default=30.0,
        ge=1.0,
        description="Poll interval used until display settings have been fetched.",
    )
    timezone: str = Field(
        default="Asia/Kolkata",
        description="Named timezone for the on-screen clock.",
    )
    viewport_width: int = Field(
        default=1920,
        ge=0,
        description="Viewport width used for responsive layout derivation.",
    )
