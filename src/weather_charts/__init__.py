"""Weather Charts - hourly/daily forecast series rendered as SVG charts.

Architecture::

    schemas.py     Forecast sample models (hourly and daily)
    geometry/      Scales, color interpolation, grid lines, day ticks
    charts/        Precipitation, temperature and UV chart builders
    renderers/     Pure ChartGeometry -> SVG/HTML (Jinja2 templates)
    flows/         Prefect orchestration (render charts to the site directory)
    config.py      Settings from environment / .env

Data flow: samples -> charts (geometry) -> renderers -> site/

Fetching and decoding the forecast is the caller's job; everything here
starts from validated ``HourlySample`` / ``DailySample`` lists.
"""

__version__ = "0.1.0"

from weather_charts.config import Settings
from weather_charts.schemas import DailySample, HourlySample

__all__ = ["DailySample", "HourlySample", "Settings", "__version__"]
