"""Connector configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Connector settings loaded from environment variables.

    The host's configuration store is expected to export these values; the
    credentials are opaque strings issued by Shutterstock.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Shutterstock API credentials
    shutterstock_consumer_key: SecretStr = Field(
        default=SecretStr(""), description="Consumer key used for basic auth"
    )
    shutterstock_consumer_secret: SecretStr = Field(
        default=SecretStr(""), description="Consumer secret used for basic auth"
    )
    shutterstock_token: SecretStr = Field(
        default=SecretStr(""), description="OAuth bearer token for account endpoints"
    )
    shutterstock_base_url: str = Field(default="https://api.shutterstock.com/v2/")

    # HTTP Client Settings
    http_timeout_seconds: float = Field(default=5.0, gt=0.0, le=120.0)
    http_max_attempts: int = Field(default=1, ge=1, le=10)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
