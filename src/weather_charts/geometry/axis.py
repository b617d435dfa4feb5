"""Horizontal grid lines at named threshold values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_charts.geometry.color import ColorInterpolator
from weather_charts.geometry.models import GridLine, Label

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_charts.geometry.color import Paint
    from weather_charts.geometry.models import Threshold
    from weather_charts.geometry.scale import ValueScale


@dataclass(frozen=True)
class AxisGridBuilder:
    """Build one grid line per threshold on a given scale.

    ``stroke`` is either a fixed paint or an interpolator that colors each
    line by its own threshold value.
    """

    scale: ValueScale
    stroke: Paint | ColorInterpolator

    def stroke_for(self, value: float) -> Paint:
        if isinstance(self.stroke, ColorInterpolator):
            return self.stroke.to_color(value)
        return self.stroke

    def build(self, thresholds: Sequence[Threshold], chart_width: float) -> tuple[GridLine, ...]:
        """Emit grid lines spanning ``[0, chart_width]`` in threshold order."""
        lines = []
        for threshold in thresholds:
            y = self.scale.to_coordinate(threshold.value)
            lines.append(
                GridLine(
                    x1=0,
                    x2=chart_width,
                    y=y,
                    stroke=self.stroke_for(threshold.value),
                    stroke_width=threshold.stroke_width,
                    opacity=threshold.opacity,
                    label=Label(x=0, y=y + threshold.label_offset, text=threshold.label),
                    title=threshold.label,
                )
            )
        return tuple(lines)
