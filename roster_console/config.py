"""Console configuration using pydantic-settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Console settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Backend
    api_base_url: str = "http://localhost:8080"
    http_timeout: float = 30.0
    http_retry_attempts: int = 3
    http_retry_wait_min: float = 2.0
    http_retry_wait_max: float = 10.0

    # Lists
    default_page_size: int = 10


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
