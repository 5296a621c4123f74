"""
Backend Configuration Module

Centralized settings management using Pydantic.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # App Info
    app_name: str = Field(default="Solution Content Service", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    # CORS (for the admin editor and storefront)
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        alias="CORS_ORIGINS",
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    use_logfire: bool = Field(default=False, alias="USE_LOGFIRE")
    logfire_service_name: str = Field(
        default="solution-content-backend", alias="LOGFIRE_SERVICE_NAME"
    )

    # Normalization
    # Per-axis distance within which a stored raw anchor counts as a historical preset
    legacy_anchor_tolerance: float = Field(
        default=0.5, ge=0, le=100, alias="LEGACY_ANCHOR_TOLERANCE"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
