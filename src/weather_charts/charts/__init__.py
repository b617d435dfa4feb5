"""Chart variants: weather series -> ChartGeometry.

Public API:
  - precipitation: build_precipitation_chart
  - temperature: build_temperature_chart
  - uv: build_uv_chart
  - chart_set: ChartSet, build_chart_set
  - config: PrecipitationChartConfig, TemperatureChartConfig, UvChartConfig

Adding a chart
--------------
1. Add a frozen config dataclass to ``charts/config.py`` holding the axis
   limits, colors and thresholds.
2. Create ``charts/{name}.py`` with a ``build_{name}_chart`` function that
   composes ``ValueScale``, ``ColorInterpolator``, ``AxisGridBuilder`` and
   ``DayTicker`` into a ``ChartGeometry``.
3. Add it to ``ChartSet`` and to ``templates/charts.html.j2``.
"""

from weather_charts.charts.chart_set import ChartSet, build_chart_set
from weather_charts.charts.config import (
    PrecipitationChartConfig,
    TemperatureChartConfig,
    UvChartConfig,
)
from weather_charts.charts.precipitation import build_precipitation_chart
from weather_charts.charts.temperature import build_temperature_chart
from weather_charts.charts.uv import build_uv_chart

__all__ = [
    "ChartSet",
    "PrecipitationChartConfig",
    "TemperatureChartConfig",
    "UvChartConfig",
    "build_chart_set",
    "build_precipitation_chart",
    "build_temperature_chart",
    "build_uv_chart",
]
