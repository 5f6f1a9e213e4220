"""Configuration management for Pebble."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PEBBLE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default="$ ", description="Prompt printed before every line")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_file: Optional[Path] = Field(None, description="Write logs to this file instead of stderr")

    # Terminal Configuration
    raw_mode: Optional[bool] = Field(
        None, description="Read keystrokes in raw mode; unset means only when stdin is a terminal"
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level


def load_settings(**overrides: Any) -> Settings:
    """Load settings from the environment and apply explicit overrides.

    Overrides left as None keep the environment value.
    """
    settings = Settings()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        settings = Settings.model_validate({**settings.model_dump(), **updates})
    return settings
