"""Configuration management using Pydantic settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Chat settings
    chat_backend: Literal["keybase", "webhook"] = Field(
        default="keybase",
        description="How messages are delivered: keybase CLI or an incoming webhook",
    )
    chat_channel: str = Field(
        default="github",
        description="Channel inside the destination team to send messages to",
    )
    keybase_command: str = Field(
        default="keybase",
        description="keybase executable used to send chat messages",
    )
    chat_webhook_url: str | None = Field(
        default=None,
        description="Incoming webhook URL, required when chat_backend is 'webhook'",
    )

    # Optional settings
    github_webhook_secret: str | None = Field(
        default=None,
        description="Secret for validating GitHub webhook signatures. Unset disables the check.",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
