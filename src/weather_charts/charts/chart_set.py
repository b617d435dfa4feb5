"""All three charts for one forecast, as the widget shows them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_charts.charts.config import (
    PrecipitationChartConfig,
    TemperatureChartConfig,
    UvChartConfig,
)
from weather_charts.charts.precipitation import build_precipitation_chart
from weather_charts.charts.temperature import build_temperature_chart
from weather_charts.charts.uv import build_uv_chart

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_charts.geometry import ChartGeometry
    from weather_charts.schemas import DailySample, HourlySample


@dataclass(frozen=True)
class ChartSet:
    """Precipitation, temperature and UV charts plus the period they cover."""

    precipitation: ChartGeometry
    temperature: ChartGeometry
    uv: ChartGeometry
    period_start: str | None = None
    period_end: str | None = None

    def charts(self) -> tuple[ChartGeometry, ...]:
        """Charts in display order."""
        return (self.precipitation, self.temperature, self.uv)


def build_chart_set(
    hourly: Sequence[HourlySample],
    daily: Sequence[DailySample],
    *,
    precipitation_config: PrecipitationChartConfig | None = None,
    temperature_config: TemperatureChartConfig | None = None,
    uv_config: UvChartConfig | None = None,
) -> ChartSet:
    """Split the sample records into series and build every chart."""
    timestamps = [h.timestamp for h in hourly]
    dates = [d.date for d in daily]

    precipitation = build_precipitation_chart(
        [h.precipitation for h in hourly],
        [h.precipitation_probability for h in hourly],
        timestamps,
        precipitation_config or PrecipitationChartConfig(),
    )
    temperature = build_temperature_chart(
        [h.apparent_temperature for h in hourly],
        timestamps,
        temperature_config or TemperatureChartConfig(),
    )
    uv = build_uv_chart(
        [d.uv_index_max for d in daily],
        dates,
        uv_config or UvChartConfig(),
    )

    return ChartSet(
        precipitation=precipitation,
        temperature=temperature,
        uv=uv,
        period_start=timestamps[0] if timestamps else None,
        period_end=timestamps[-1] if timestamps else None,
    )
