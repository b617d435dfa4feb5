"""SVG rendering of chart geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_charts.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Callable

    from weather_charts.charts import ChartSet
    from weather_charts.geometry import ChartGeometry, Paint

DEFAULT_FONT_SIZE = "2px"


def _paint_function(resolve_colors: bool) -> Callable[[Paint], str]:
    """Return how paints are written: CSS expressions or concrete hex colors."""
    if resolve_colors:
        return lambda paint: paint.to_hex()
    return lambda paint: paint.css()


def render_chart_svg(
    geometry: ChartGeometry,
    *,
    font_size: str = DEFAULT_FONT_SIZE,
    resolve_colors: bool = False,
) -> str:
    """Render one chart as an inline ``<svg>`` element.

    Ticks are drawn first, then grid lines, then markers on top.

    Args:
        geometry: Chart to draw.
        font_size: CSS font size for tick and grid labels.
        resolve_colors: Write ``#rrggbb`` instead of ``color-mix()`` for
            viewers without CSS color-mix support.
    """
    return render_template(
        "chart.svg.j2",
        chart=geometry,
        font_size=font_size,
        paint=_paint_function(resolve_colors),
    )


def render_charts_html(
    chart_set: ChartSet,
    *,
    font_size: str = DEFAULT_FONT_SIZE,
    resolve_colors: bool = False,
) -> str:
    """Render all charts and the covered period as an HTML fragment."""
    charts = [
        {
            "title": chart.title,
            "svg": render_chart_svg(chart, font_size=font_size, resolve_colors=resolve_colors),
        }
        for chart in chart_set.charts()
    ]
    return render_template(
        "charts.html.j2",
        charts=charts,
        period_start=chart_set.period_start,
        period_end=chart_set.period_end,
    )
