"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./hostel.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name used to render timestamps",
    )
    notification_storage_key: str = Field(
        default="student_notifications",
        description="Storage key holding the serialized notification collection",
        min_length=1,
        max_length=120,
    )
    notification_seed_enabled: bool = Field(
        default=True,
        description="Populate the fallback notifications when nothing is stored yet",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("notification_storage_key")
    @classmethod
    def _strip_storage_key(cls, value: str) -> str:
        key = value.strip()
        if not key:
            raise ValueError("NOTIFICATION_STORAGE_KEY must not be blank")
        return key


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
