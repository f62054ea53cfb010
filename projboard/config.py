"""
Configuration settings for the project board.

Uses Pydantic Settings to load environment variables for logging, validation
limits, and rendering defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Validation limits for submitted projects
    capacity_min: int = Field(1, alias="CAPACITY_MIN")
    capacity_max: int = Field(10, alias="CAPACITY_MAX")
    description_min_length: int = Field(5, alias="DESCRIPTION_MIN_LENGTH")

    # Rendering
    render_width: int = Field(80, alias="RENDER_WIDTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
