"""Daily UV index chart.

Open-Meteo only gives a daily UV maximum, so each day's value is repeated
across that day's 24 hourly slots to line up with the hourly charts. The
markers do not show any variation within a day.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_charts.charts.config import UvChartConfig
from weather_charts.geometry import (
    AxisGridBuilder,
    ChartGeometry,
    ColorInterpolator,
    Marker,
    format_number,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_CONFIG = UvChartConfig()


def uv_interpolator(config: UvChartConfig = DEFAULT_CONFIG) -> ColorInterpolator:
    return ColorInterpolator(
        scale=config.scale(),
        high=config.high_color,
        low=config.low_color,
        space=config.color_space,
    )


def build_uv_chart(
    uv_index_max: Sequence[float],
    dates: Sequence[str],
    config: UvChartConfig = DEFAULT_CONFIG,
) -> ChartGeometry:
    """Build the UV chart; the chart is ``hours_per_day`` units wide per date."""
    scale = config.scale()
    to_color = uv_interpolator(config)
    width = len(dates) * config.hours_per_day

    grid_lines = AxisGridBuilder(scale, to_color).build(config.thresholds, width)

    markers = []
    for day, uv in enumerate(uv_index_max):
        cy = scale.to_coordinate(uv)
        fill = to_color(uv)
        title = format_number(uv)
        for hour in range(config.hours_per_day):
            markers.append(
                Marker(
                    cx=day * config.hours_per_day + hour,
                    cy=cy,
                    r=config.radius,
                    fill=fill,
                    title=title,
                )
            )

    return ChartGeometry(
        title="UV",
        viewbox_width=width,
        viewbox_height=config.height,
        grid_lines=grid_lines,
        markers=tuple(markers),
    )
