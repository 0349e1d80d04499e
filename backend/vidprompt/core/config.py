"""Configuration management using pydantic-settings."""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "video-prompt-generator"

    # Prompt generation
    prompt_version: str = "2.0.0"
    variation_count: int = Field(default=3, ge=1, le=10)
    # History page size when the client sends no limit; None returns everything
    default_prompt_limit: Optional[int] = Field(default=None, ge=1)

    # Template library seed file; the bundled library is used when unset
    templates_file: Optional[Path] = None

    # Server settings
    backend_host: str = "localhost"
    backend_port: int = 8000
    frontend_port: int = 3000


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
