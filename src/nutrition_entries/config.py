"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_id: str
    app_key: str
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 9000
    nutritionix_base_url: str = "https://trackapi.nutritionix.com"
    lookup_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("app_id", "app_key")
    @classmethod
    def _require_credential(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
