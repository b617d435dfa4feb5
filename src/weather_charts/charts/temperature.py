"""Hourly apparent temperature chart."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_charts.charts.config import TemperatureChartConfig, check_series_length
from weather_charts.geometry import (
    AxisGridBuilder,
    ChartGeometry,
    ColorInterpolator,
    DayTicker,
    Marker,
    format_number,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_CONFIG = TemperatureChartConfig()


def temperature_interpolator(config: TemperatureChartConfig = DEFAULT_CONFIG) -> ColorInterpolator:
    """Color scale from ``low_color`` at the bottom to ``high_color`` at the top."""
    return ColorInterpolator(
        scale=config.scale(),
        high=config.high_color,
        low=config.low_color,
        space=config.color_space,
    )


def build_temperature_chart(
    temperature: Sequence[float],
    timestamps: Sequence[str],
    config: TemperatureChartConfig = DEFAULT_CONFIG,
) -> ChartGeometry:
    """Build the temperature chart, one colored marker per hour."""
    check_series_length(temperature, timestamps)
    scale = config.scale()
    to_color = temperature_interpolator(config)
    width = len(temperature)

    ticks = DayTicker(height=config.height, stroke=to_color(config.max_temperature)).build(
        timestamps
    )
    grid_lines = AxisGridBuilder(scale, to_color).build(config.thresholds, width)

    markers = tuple(
        Marker(
            cx=i,
            cy=scale.to_coordinate(value),
            r=config.radius,
            fill=to_color(value),
            title=f"{format_number(value)}{config.unit}",
        )
        for i, value in enumerate(temperature)
    )

    return ChartGeometry(
        title="Temperature",
        viewbox_width=width,
        viewbox_height=config.height,
        grid_lines=grid_lines,
        ticks=ticks,
        markers=markers,
    )
