"""Configuration and environment loading for Pushbullet Types."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from PUSHBULLET_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PUSHBULLET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Batch decoding
    skip_invalid_pushes: bool = False  # Drop undecodable pushes instead of failing the page


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
