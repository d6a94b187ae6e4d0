"""Centralised environment-driven settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings sourced from ``ORIENTEERING_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ORIENTEERING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"
    MAX_CHECKPOINTS: int = 20
    NO_SOLUTION_SENTINEL: int = -1
    COURSES_PATH: str = ""


settings = Settings()

__all__ = ["Settings", "settings"]
