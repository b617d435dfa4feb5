"""
Application settings.

Values come from environment variables prefixed ``WEATHER_CHARTS_`` or a
local ``.env`` file, e.g. ``WEATHER_CHARTS_SITE_DIR=public``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for rendering charts."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_CHARTS_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "weather-charts"
    app_env: str = "development"
    debug: bool = False

    site_dir: Path = Field(default=Path("site"), description="Output directory for rendered charts")
    font_size: str = Field(default="2px", description="CSS font size of axis labels")
    resolve_colors: bool = Field(
        default=False,
        description="Write hex colors instead of CSS color-mix() expressions",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
