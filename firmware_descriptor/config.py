"""Configuration management using Pydantic settings."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (parent of firmware_descriptor/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigurationError(Exception):
    """Raised when application configuration is invalid."""

    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Remote firmware service
    FIRMWARE_API_URL: str | None = Field(
        default=None,
        description="Base URL of the remote firmware service (e.g., https://fw.example.com/api)"
    )
    HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Timeout for remote firmware service calls"
    )

    # Recency tracking
    MAX_RECENT_FIRMWARES: int = Field(
        default=10,
        description="Maximum number of firmware records kept in the recency list"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level for the CLI"
    )

    @property
    def log_level(self) -> int:
        """Numeric log level for logging.basicConfig."""
        return logging.getLevelNamesMapping()[self.LOG_LEVEL.upper()]

    def validate_config(self) -> None:
        """Validate that the configuration is usable.

        Raises:
            ConfigurationError: If any setting is invalid
        """
        errors: list[str] = []

        if self.HTTP_TIMEOUT_SECONDS <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS must be positive")

        if self.MAX_RECENT_FIRMWARES <= 0:
            errors.append("MAX_RECENT_FIRMWARES must be positive")

        if self.LOG_LEVEL.upper() not in _LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )

        if self.FIRMWARE_API_URL is not None and not self.FIRMWARE_API_URL.startswith(
            ("http://", "https://")
        ):
            errors.append("FIRMWARE_API_URL must be an http:// or https:// URL")

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
