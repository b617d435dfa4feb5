"""Renderer-agnostic chart description.

A ``ChartGeometry`` is everything a markup adapter needs to draw a chart:
the viewbox, the horizontal grid lines, the vertical day ticks and one
marker per sample. All values are frozen; a chart is built fresh per call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from weather_charts.geometry.formatting import format_number

if TYPE_CHECKING:
    from weather_charts.geometry.color import Paint


@dataclass(frozen=True)
class Threshold:
    """A named reference value drawn as a horizontal grid line."""

    value: float
    label: str
    opacity: float | None = None
    stroke_width: float = 0.1
    label_offset: float = 0.0  # push labels at the very top below the edge


@dataclass(frozen=True)
class Label:
    """A text label anchored at ``(x, y)``."""

    x: float
    y: float
    text: str


@dataclass(frozen=True)
class GridLine:
    """Horizontal reference line across the full chart width."""

    x1: float
    x2: float
    y: float
    stroke: Paint
    stroke_width: float
    label: Label
    title: str
    opacity: float | None = None


@dataclass(frozen=True)
class Tick:
    """Vertical time marker from ``y1`` to ``y2``."""

    x: float
    y1: float
    y2: float
    stroke: Paint
    stroke_width: float
    label: Label
    title: str


@dataclass(frozen=True)
class Marker:
    """A single sample drawn as a circle."""

    cx: float
    cy: float
    r: float
    fill: Paint
    title: str
    opacity: float | None = None


@dataclass(frozen=True)
class ChartGeometry:
    """Complete description of one chart."""

    title: str
    viewbox_width: float
    viewbox_height: float
    grid_lines: tuple[GridLine, ...] = field(default_factory=tuple)
    ticks: tuple[Tick, ...] = field(default_factory=tuple)
    markers: tuple[Marker, ...] = field(default_factory=tuple)

    @property
    def viewbox(self) -> str:
        """SVG ``viewBox`` attribute value."""
        return f"0 0 {format_number(self.viewbox_width)} {format_number(self.viewbox_height)}"
