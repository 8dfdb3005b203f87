"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from TVSLOG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TVSLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: LogLevel = "WARNING"

    # Reading
    encoding: str = "utf-8"
    strict: bool = False  # Abort on the first bad row instead of skipping it

    # Output
    show_ignored: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
