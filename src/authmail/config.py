"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from authmail.schemas import DEFAULT_FROM


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Brevo
    auth_brevo_key: str = Field(default="", description="Brevo API key")
    brevo_api_url: str = Field(
        default="https://api.brevo.com/v3/smtp/email",
        description="Brevo transactional email endpoint",
    )
    brevo_timeout: float = Field(default=30.0, description="Brevo API timeout in seconds")

    # Email
    email_from: str = Field(
        default=DEFAULT_FROM, description="From address for sign-in emails"
    )

    # App
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
