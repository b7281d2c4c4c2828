"""Application configuration."""
from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    max_prompt_length: int = 500
    strict_template_checks: bool = True
    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("ARTECODE_LOG_LEVEL", "LOG_LEVEL"),
    )
    default_canvas_width: int = 400
    default_canvas_height: int = 400


settings = Settings()
