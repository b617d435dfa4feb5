"""Hourly precipitation chart."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_charts.charts.config import PrecipitationChartConfig, check_series_length
from weather_charts.geometry import (
    AxisGridBuilder,
    ChartGeometry,
    DayTicker,
    Marker,
    format_number,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_CONFIG = PrecipitationChartConfig()


def precipitation_tooltip(mm: float, probability: float) -> str:
    """Tooltip text, e.g. ``0.6mm with 5%``.

    No space before ``mm``: the unit is glued to the number the same way the
    temperature tooltip writes ``8.9°C``.
    """
    return f"{format_number(mm)}mm with {format_number(probability)}%"


def build_precipitation_chart(
    precipitation: Sequence[float],
    probability: Sequence[float],
    timestamps: Sequence[str],
    config: PrecipitationChartConfig = DEFAULT_CONFIG,
) -> ChartGeometry:
    """Build the precipitation chart from parallel hourly sequences.

    Args:
        precipitation: Rain amount per hour in mm.
        probability: Probability of precipitation per hour, 0-100.
        timestamps: ISO-8601 hour timestamps, used for day tick labels.
        config: Axis limits, color and thresholds.

    Raises:
        ValueError: If ``precipitation`` and ``probability`` differ in length,
            or ``timestamps`` is not as long as ``precipitation``.
    """
    check_series_length(precipitation, timestamps)
    scale = config.scale()
    width = len(precipitation)

    ticks = DayTicker(height=config.height, stroke=config.color).build(timestamps)
    grid_lines = AxisGridBuilder(scale, config.color).build(config.thresholds, width)

    markers = tuple(
        Marker(
            cx=i,
            cy=scale.to_coordinate(mm),
            r=config.wet_radius if mm > 0 else config.dry_radius,
            fill=config.color,
            opacity=chance / 100,
            title=precipitation_tooltip(mm, chance),
        )
        for i, (mm, chance) in enumerate(zip(precipitation, probability, strict=True))
    )

    return ChartGeometry(
        title="Precipitation",
        viewbox_width=width,
        viewbox_height=config.height,
        grid_lines=grid_lines,
        ticks=ticks,
        markers=markers,
    )
