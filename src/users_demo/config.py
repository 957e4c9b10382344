"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_BASE_URL = "http://94.198.50.185:7081/api/users"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 5.0
    strict: bool = False
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="USERS_DEMO_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
