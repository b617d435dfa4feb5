"""Pure time-series to chart geometry mapping.

Public API:
  - scale: ValueScale, ScaleConfigError
  - color: ColorInterpolator, ColorMix, ColorSpace, Rgb
  - axis: AxisGridBuilder
  - ticks: DayTicker, day_label, day_of_month
  - models: ChartGeometry, GridLine, Tick, Marker, Label, Threshold
  - formatting: format_number

Nothing in here does I/O or keeps state between calls.
"""

from weather_charts.geometry.axis import AxisGridBuilder
from weather_charts.geometry.color import ColorInterpolator, ColorMix, ColorSpace, Paint, Rgb
from weather_charts.geometry.formatting import format_number
from weather_charts.geometry.models import (
    ChartGeometry,
    GridLine,
    Label,
    Marker,
    Threshold,
    Tick,
)
from weather_charts.geometry.scale import ScaleConfigError, ValueScale, clamp
from weather_charts.geometry.ticks import DayTicker, day_label, day_of_month

__all__ = [
    "AxisGridBuilder",
    "ChartGeometry",
    "ColorInterpolator",
    "ColorMix",
    "ColorSpace",
    "DayTicker",
    "GridLine",
    "Label",
    "Marker",
    "Paint",
    "Rgb",
    "ScaleConfigError",
    "Threshold",
    "Tick",
    "ValueScale",
    "clamp",
    "day_label",
    "day_of_month",
    "format_number",
]
