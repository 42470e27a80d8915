"""Harness settings powered by Pydantic BaseSettings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HarnessSettings(BaseSettings):
    """Environment-driven settings for the harness CLI."""

    model_config = SettingsConfigDict(
        env_prefix="HARNESS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_path: Path | None = Field(default=None)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)


def get_settings() -> HarnessSettings:
    """Get a settings instance."""
    return HarnessSettings()
