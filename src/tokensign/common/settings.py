"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOKENSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Signing
    algorithm: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256",
        description="HMAC algorithm used when none is given explicitly",
    )
    secret: SecretStr | None = Field(
        default=None,
        description="Shared HMAC secret (UTF-8)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Minimum log level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit logs as JSON lines",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
