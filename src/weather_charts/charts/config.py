"""Per-chart constants as explicit, overridable configuration.

Defaults reproduce the original widget: a 0-30 mm rain axis, a -10..30 °C
temperature axis and a 0-11 UV axis, each drawn 40 units tall.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_charts.geometry import ColorSpace, Rgb, Threshold, ValueScale

if TYPE_CHECKING:
    from collections.abc import Sequence

# Precipitation intensity bands in mm/h
PRECIPITATION_THRESHOLDS = (
    Threshold(0.0, "Nothing", opacity=0.2),
    Threshold(2.5, "Light", opacity=0.4),
    Threshold(7.6, "Moderate", opacity=0.6),
    Threshold(50.0, "Heavy", label_offset=2.0),
)

TEMPERATURE_THRESHOLDS = (
    Threshold(30.0, "30°C", stroke_width=0.2, label_offset=2.0),
    Threshold(0.0, "0°C", opacity=0.5),
    Threshold(5.0, "5°C", opacity=0.8),
    Threshold(10.0, "10°C", opacity=0.8),
    Threshold(-10.0, "-10°C", opacity=0.1, stroke_width=0.2),
)

MAX_UV = 11.0
MIN_UV = 0.0
ENJOY_UV = 2.5  # below: safe to enjoy being outside
SEEK_SHADE_UV = 7.5  # below: seek shade at midday; above: avoid midday sun

UV_THRESHOLDS = (
    Threshold(MAX_UV, "11", stroke_width=0.2, label_offset=2.0),
    Threshold(MIN_UV, "0", stroke_width=0.2),
    Threshold(ENJOY_UV, "2.5", stroke_width=0.2),
    Threshold(SEEK_SHADE_UV, "7.5", stroke_width=0.2),
)


def check_series_length(values: Sequence[float], timestamps: Sequence[str]) -> None:
    """Require one timestamp per hourly value; day ticks are walked over the timestamps."""
    if len(values) != len(timestamps):
        msg = f"Expected {len(values)} timestamps, got {len(timestamps)}"
        raise ValueError(msg)


@dataclass(frozen=True)
class PrecipitationChartConfig:
    """Rain amount on a fixed mm axis; probability drives marker opacity."""

    max_precipitation: float = 30.0
    lower_margin: float = 10.0
    color: Rgb = Rgb(78, 104, 129)
    wet_radius: float = 0.5
    dry_radius: float = 0.3
    thresholds: tuple[Threshold, ...] = PRECIPITATION_THRESHOLDS

    @property
    def height(self) -> float:
        return self.max_precipitation + self.lower_margin

    def scale(self) -> ValueScale:
        return ValueScale(0.0, self.max_precipitation, 0.0, self.max_precipitation)


@dataclass(frozen=True)
class TemperatureChartConfig:
    """Apparent temperature colored from blue (cold) to red (hot)."""

    max_temperature: float = 30.0
    min_temperature: float = -10.0
    high_color: Rgb = Rgb(255, 0, 0)
    low_color: Rgb = Rgb(0, 0, 255)
    color_space: ColorSpace = ColorSpace.OKLAB
    radius: float = 0.5
    unit: str = "°C"
    thresholds: tuple[Threshold, ...] = TEMPERATURE_THRESHOLDS

    @property
    def height(self) -> float:
        return self.max_temperature - self.min_temperature

    def scale(self) -> ValueScale:
        return ValueScale(self.min_temperature, self.max_temperature, 0.0, self.height)


@dataclass(frozen=True)
class UvChartConfig:
    """Daily UV maximum colored from green (low) to magenta (extreme)."""

    max_uv: float = MAX_UV
    min_uv: float = MIN_UV
    plot_height: float = 30.0
    lower_margin: float = 10.0
    high_color: Rgb = Rgb(255, 0, 255)
    low_color: Rgb = Rgb(0, 255, 0)
    color_space: ColorSpace = ColorSpace.HSL_SHORTER_HUE
    radius: float = 0.5
    hours_per_day: int = 24
    thresholds: tuple[Threshold, ...] = UV_THRESHOLDS

    @property
    def height(self) -> float:
        return self.plot_height + self.lower_margin

    def scale(self) -> ValueScale:
        return ValueScale(self.min_uv, self.max_uv, 0.0, self.plot_height)
