"""
Centralized configuration using Pydantic BaseSettings.
All environment variables are loaded here - no hardcoded values.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # Application
    APP_NAME: str = "Streaming Catalog"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Playback simulation: seconds slept per minute of content
    PLAYBACK_SECONDS_PER_MINUTE: float = 1.0

    # Identifier prefixes for generated ids
    USER_ID_PREFIX: str = "user"
    ITEM_ID_PREFIX: str = "stream"

    # Telemetry
    ENABLE_OTEL: bool = False  # Default to False to prevent gRPC errors in dev


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance - singleton pattern."""
    return Settings()
