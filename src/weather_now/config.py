"""
Application settings loaded from the environment.

All values can be overridden with ``WEATHER_NOW_``-prefixed environment
variables or a local ``.env`` file. The WeatherAPI.com key is a secret and is
never hard-coded::

    export WEATHER_NOW_API_KEY=...
    weather-now current "Paris"
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_now.schemas import Units


class Settings(BaseSettings):
    """Runtime configuration for the weather client and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_NOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="weather-now", description="Application name")
    app_env: str = Field(default="development", description="Deployment environment")
    debug: bool = Field(default=False, description="Verbose logging")

    api_key: SecretStr | None = Field(default=None, description="WeatherAPI.com key")
    base_url: str = Field(
        default="https://api.weatherapi.com/v1/",
        description="WeatherAPI.com base endpoint (with trailing slash)",
    )
    http_timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    # Coordinates used by `weather-now here` when none are given
    lat: float = Field(default=48.8566, ge=-90, le=90)
    lon: float = Field(default=2.3522, ge=-180, le=180)
    default_units: Units = Field(default=Units.CELSIUS)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached after first load)."""
    return Settings()
