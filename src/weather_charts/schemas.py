"""
Forecast sample models.

Pydantic models for the already-deserialized forecast arrays the charts
consume. Field names follow Open-Meteo's hourly/daily variables.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HourlySample(BaseModel):
    """One hour of forecast data."""

    model_config = ConfigDict(frozen=True)

    timestamp: str = Field(
        ..., min_length=10, description="ISO-8601 local time, e.g. 2023-11-10T08:00"
    )
    apparent_temperature: float = Field(..., description="Feels-like temperature in °C")
    precipitation_probability: float = Field(0.0, ge=0, le=100)
    precipitation: float = Field(0.0, ge=0, description="Precipitation in mm")
    wind_speed: float = Field(0.0, ge=0, description="Wind speed at 10 m in km/h")
    wind_direction: float = Field(
        0.0, ge=0, le=360, description="Wind direction at 10 m in degrees"
    )


class DailySample(BaseModel):
    """One day of forecast data."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., min_length=10, description="ISO-8601 day, e.g. 2023-11-10")
    uv_index_max: float = Field(..., ge=0)
