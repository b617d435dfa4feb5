"""Day ticks at 08:00 and 20:00 over an hourly time axis.

The ticker assumes exactly 24 hourly samples per day starting at midnight:
it hops through the sequence by position (9 samples to the first 08:00, 12
more to 20:00, then 9 to the next day's check) instead of parsing clock
times, so any other sampling puts the ticks at the wrong hours.

A day consumes 21 positions while the tick x advances by 24, so the walk
runs ahead of the data: three whole days (72 samples) produce a seventh
tick at x=80, labelled ``??/8:00``, past the end of the chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_charts.geometry.models import Label, Tick

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_charts.geometry.color import Paint

HOURS_PER_DAY = 24
MORNING_HOUR = 8
EVENING_HOUR = 20
UNKNOWN_DAY = "??"

# positions consumed to reach each tick from the previous one
_MORNING_HOP = MORNING_HOUR + 1
_EVENING_HOP = EVENING_HOUR - MORNING_HOUR


def day_of_month(timestamp: str) -> str:
    """Two-digit day of an ISO-8601 timestamp (``2023-11-10T08:00`` -> ``10``)."""
    if len(timestamp) < 10:
        return UNKNOWN_DAY
    return timestamp[8:10]


def day_label(timestamps: Sequence[str], day_index: int) -> str:
    """Day of month for the first sample of day ``day_index``, or ``??``."""
    position = day_index * HOURS_PER_DAY
    if position >= len(timestamps):
        return UNKNOWN_DAY
    return day_of_month(timestamps[position])


@dataclass(frozen=True)
class DayTicker:
    """Build vertical ticks spanning a chart of the given height."""

    height: float
    stroke: Paint
    stroke_width: float = 0.1
    label_y: float = 2.0

    def build(self, timestamps: Sequence[str]) -> tuple[Tick, ...]:
        ticks = []
        remaining = len(timestamps)
        day = 0
        while remaining >= _MORNING_HOP:
            remaining -= _MORNING_HOP
            label = day_label(timestamps, day)
            ticks.append(self._tick(day, MORNING_HOUR, label))
            if remaining < _EVENING_HOP:
                break
            remaining -= _EVENING_HOP
            ticks.append(self._tick(day, EVENING_HOUR, label))
            day += 1
        return tuple(ticks)

    def _tick(self, day: int, hour: int, day_text: str) -> Tick:
        x = hour + day * HOURS_PER_DAY
        clock = f"{hour}:00"
        return Tick(
            x=x,
            y1=0,
            y2=self.height,
            stroke=self.stroke,
            stroke_width=self.stroke_width,
            label=Label(x=x, y=self.label_y, text=f"{day_text}/{clock}"),
            title=clock,
        )
