"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Transaction Records Service"
    app_version: str = "0.1.0"

    log_level: str = "INFO"

    # Listing cache (disable to always read through to the store)
    cache_enabled: bool = True

    # Stamp updated records with the update time instead of keeping the
    # creation time
    refresh_timestamp_on_update: bool = True

    # Zone for record timestamps
    timezone: str = "UTC"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
