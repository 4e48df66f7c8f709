"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - welcome_message always contains "Welcome"

Design Decisions:
    - Values come from the environment or a .env file, case-insensitive
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    app_name: str = "Users API"
    app_version: str = "1.0.0"
    welcome_message: str = "Welcome to the Users API"

    @field_validator("welcome_message")
    @classmethod
    def require_welcome(cls, v: str) -> str:
        if "Welcome" not in v:
            raise ValueError("welcome_message must contain 'Welcome'")
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: str | list[str]) -> list[str]:
        """CORS_ORIGINS is a comma-separated list in the environment."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
