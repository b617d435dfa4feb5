"""Clamped linear mapping from weather values to chart coordinates."""

from __future__ import annotations

from dataclasses import dataclass


class ScaleConfigError(ValueError):
    """Raised when a scale is configured with an empty or inverted span."""


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return min(max(value, low), high)


@dataclass(frozen=True)
class ValueScale:
    """Map a domain value onto an inverted vertical axis.

    ``domain_max`` lands on ``range_min`` (the top of the chart) and
    ``domain_min`` on ``range_max`` (the bottom), so a higher value is drawn
    higher up. Inputs outside the domain are clamped, never rejected.
    """

    domain_min: float
    domain_max: float
    range_min: float
    range_max: float

    def __post_init__(self) -> None:
        if self.domain_span <= 0:
            msg = f"Domain span must be positive, got [{self.domain_min}, {self.domain_max}]"
            raise ScaleConfigError(msg)
        if self.range_span <= 0:
            msg = f"Range span must be positive, got [{self.range_min}, {self.range_max}]"
            raise ScaleConfigError(msg)

    @property
    def domain_span(self) -> float:
        return self.domain_max - self.domain_min

    @property
    def range_span(self) -> float:
        return self.range_max - self.range_min

    def to_coordinate(self, value: float) -> float:
        """Convert a domain value to a y coordinate within the range."""
        # factor first: keeps 30 / 11 * x and 1.0 * x bit-identical to the widget
        factor = self.range_span / self.domain_span
        return self.range_min + factor * (
            self.domain_max - clamp(value, self.domain_min, self.domain_max)
        )

    def __call__(self, value: float) -> float:
        return self.to_coordinate(value)
