"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Frozen: read once at startup and shared read-only across requests
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=[".env", ".env.local"],  # Load .env first, then .env.local (so .env.local overrides)
    )

    # Application settings
    app_name: str = "Olivia Chat Proxy"
    environment: str = "local"

    # CORS settings
    allowed_origins: List[str] = ["*"]

    # Logging settings
    log_level: str = "INFO"

    # OpenAI settings
    openai_api_key: str = ""
    fetch_timeout: int = Field(default=10000, ge=1, description="Per-attempt timeout in ms")
    openai_max_retries: int = Field(default=2, ge=0)
    openai_retry_base_delay: int = Field(default=1000, ge=0, description="Linear backoff step in ms")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
