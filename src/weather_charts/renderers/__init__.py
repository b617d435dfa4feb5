"""Markup adapters: ChartGeometry -> SVG/HTML strings.

Renderers only walk the geometry; every coordinate and color is computed
in ``geometry/`` and ``charts/``.
  - Input: ChartGeometry or ChartSet
  - Output: str (SVG element or HTML fragment, not a full page)
  - No side effects, no I/O

Public API:
  - svg: render_chart_svg, render_charts_html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from weather_charts.geometry import format_number

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_jinja_env.filters["num"] = format_number


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
