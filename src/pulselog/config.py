# ABOUTME: Configuration management for pulselog using pydantic-settings
# ABOUTME: Loads CLI settings from PULSELOG_* environment variables and .env files

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OUTPUT_FORMATS = ("json", "lines")


class Settings(BaseSettings):
    """pulselog CLI settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="PULSELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    output_format: str = "json"
    encoding: str = "utf-8"  # Used when reading log files

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate a logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        fmt = v.strip().lower()
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {', '.join(OUTPUT_FORMATS)}. Got: {v}")
        return fmt


def get_settings() -> Settings:
    """Get a settings instance."""
    return Settings()
