"""Configuration management for Canary.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is read once per process
and is immutable afterwards; the default error handler lives here.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ERROR_HANDLER = "canary.infrastructure.handlers.default_handler:DefaultHandler"


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CANARY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Authorization Settings
    error_handler: str = Field(
        default=DEFAULT_ERROR_HANDLER,
        description="Import path ('package.module:attribute') of the default error handler",
    )

    @field_validator("error_handler")
    @classmethod
    def validate_error_handler(cls, v: str) -> str:
        """Validate the handler import path has a module and an attribute."""
        module_name, _, attribute = v.partition(":")
        if not module_name.strip() or not attribute.strip():
            raise ValueError(
                "error_handler must look like 'package.module:attribute', "
                f"got {v!r}"
            )
        return v.strip()

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    The settings are loaded once and then shared, so the default error
    handler is read-only at request time.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
