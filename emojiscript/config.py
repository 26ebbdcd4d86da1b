"""Runtime settings for the emojiscript service, server and CLI.

Values come from ``EMOJISCRIPT_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="EMOJISCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_title: str = "EmojiScript API"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8081

    # CORS
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "https://emoji-script.vercel.app",
    ]

    # Transpile limits
    max_code_length: int = 100_000
    default_target: str = "javascript"

    # Response cache
    cache_max_size: int = 1000
    cache_ttl_seconds: float = 3600.0

    # Rate limiting (requests per client per window)
    rate_limit_requests: int = 100
    rate_limit_window_seconds: float = 60.0

    log_level: str = "info"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
