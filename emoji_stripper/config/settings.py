from typing import ClassVar

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EMOJI_STRIPPER_",
        env_file=".env",
        extra="ignore",
    )

    LOG_LEVELS: ClassVar[frozenset[str]] = frozenset(
        {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    )

    log_level: str = "WARNING"
    file_encoding: str = "utf-8"

    markdown_suffix: str = ".md"
    backup_suffix: str = ".bak"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in cls.LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'. Choose from: {sorted(cls.LOG_LEVELS)}")
        return level

    @field_validator("markdown_suffix", "backup_suffix")
    @classmethod
    def _must_start_with_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"suffix must start with '.' and not be empty, got '{value}'")
        return value
