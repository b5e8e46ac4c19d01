"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./teamboard.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC+HH:MM offset) used for timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )
    notification_cleanup_threshold: int = Field(
        default=100,
        description="Log size above which a recipient's notifications are pruned",
        gt=0,
    )
    notification_max_keep: int = Field(
        default=50,
        description="Number of most recent notifications kept after pruning",
        gt=0,
    )
    mention_candidate_limit: int = Field(
        default=8,
        description="Maximum number of members offered while composing a mention",
        gt=0,
    )
    mention_blur_grace_seconds: float = Field(
        default=0.2,
        description="Delay before a blurred composer closes its candidate list",
        ge=0,
    )

    @model_validator(mode="after")
    def _validate_retention(self) -> "Settings":
        if self.notification_max_keep > self.notification_cleanup_threshold:
            raise ValueError(
                "NOTIFICATION_MAX_KEEP must not exceed NOTIFICATION_CLEANUP_THRESHOLD"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
