"""
Prefect flow for rendering forecast charts to static files.

Takes forecast samples already fetched and validated by the caller, builds
the chart geometry and writes one SVG per chart plus an HTML fragment
combining them.

Run from Python:
    from weather_charts.flows.render import render_site
    render_site(hourly, daily)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_charts.charts import ChartSet, build_chart_set
from weather_charts.config import get_settings
from weather_charts.renderers.svg import render_chart_svg, render_charts_html
from weather_charts.schemas import DailySample, HourlySample  # noqa: TC001 - flow parameter types

CHART_FILES = {
    "precipitation": "precipitation.svg",
    "temperature": "temperature.svg",
    "uv": "uv.svg",
}
INDEX_FILE = "index.html"


@task(name="build-charts")
def build_charts(hourly: list[HourlySample], daily: list[DailySample]) -> ChartSet:
    """Build geometry for all charts."""
    return build_chart_set(hourly, daily)


@task(name="render-charts")
def render_charts(
    chart_set: ChartSet, font_size: str = "2px", resolve_colors: bool = False
) -> dict[str, str]:
    """Render each chart to SVG and all of them to an HTML fragment.

    Returns:
        Mapping of output file name to markup.
    """
    documents = {
        CHART_FILES[name]: render_chart_svg(
            getattr(chart_set, name), font_size=font_size, resolve_colors=resolve_colors
        )
        for name in CHART_FILES
    }
    documents[INDEX_FILE] = render_charts_html(
        chart_set, font_size=font_size, resolve_colors=resolve_colors
    )
    return documents


@task(name="write-charts")
def write_charts(documents: dict[str, str], site_dir: Path) -> list[Path]:
    """Write rendered documents into the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, markup in documents.items():
        path = site_dir / name
        with path.open("w", encoding="utf-8") as f:
            f.write(markup)
        paths.append(path)
    return paths


@flow(name="render-charts-site", log_prints=True)
def render_site(
    hourly: list[HourlySample],
    daily: list[DailySample],
    site_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Render precipitation, temperature and UV charts to ``site_dir``.

    Falls back to ``Settings.site_dir`` when no directory is given.
    """
    settings = get_settings()
    output_dir = site_dir if site_dir is not None else settings.site_dir
    print(f"Environment: {settings.app_env}")
    if settings.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    if not hourly and not daily:
        print("No forecast samples given, nothing to render.")
        return {"error": "no data"}

    if len(hourly) % 24:
        print(f"Warning: {len(hourly)} hourly samples is not a whole number of days.")

    print(f"Building charts for {len(hourly)} hours and {len(daily)} days...")
    chart_set = build_charts(hourly, daily)

    print("Rendering charts...")
    documents = render_charts(chart_set, settings.font_size, settings.resolve_colors)

    print(f"Writing charts to {output_dir}...")
    paths = write_charts(documents, output_dir)

    print(f"Charts written: {', '.join(p.name for p in paths)}")
    return {
        "charts": len(CHART_FILES),
        "environment": settings.app_env,
        "output": str(output_dir),
        "files": [str(p) for p in paths],
        "period": [chart_set.period_start, chart_set.period_end],
    }
