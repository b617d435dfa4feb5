"""Shared fixtures: a two-day Open-Meteo forecast for Vienna (2023-11-10)."""

from __future__ import annotations

import pytest

from weather_charts.schemas import DailySample, HourlySample

TIMES = [f"2023-11-{day}T{hour:02d}:00" for day in (10, 11) for hour in range(24)]

APPARENT_TEMPERATURE = [
    1.3, 2.3, 3.1, 0.8, 1.3, 1.6, 2, 2.3, 2.7, 3.7, 4.8, 6.7,
    8.9, 8.4, 9.1, 5.6, 4, 4.1, 4.2, 4.2, 4.1, 3.5, 3.2, 3.2,
    2.5, 2.3, 2.6, 2.1, 1.9, 2.1, 2.4, 2.9, 3, 2, 1.7, 3,
    2.5, 2.9, 3.1, 3.1, 1.2, -0.4, -0.8, -1.1, -0.9, -1.5, -1.7, -1.8,
]  # fmt: skip

PRECIPITATION_PROBABILITY = [
    0, 0, 0, 0, 0, 0, 0, 5, 11, 16, 19, 23,
    26, 38, 49, 61, 63, 66, 68, 60, 53, 45, 31, 17,
    3, 3, 3, 3, 2, 1, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 3, 7, 10, 8, 5, 3, 3, 3,
]  # fmt: skip

PRECIPITATION = [
    0, 0, 0, 0, 0, 0, 0, 0.6, 0.5, 0, 0, 0,
    0, 0, 0, 0, 0, 0.7, 0.9, 0.4, 0.2, 0.1, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
]  # fmt: skip

WIND_SPEED = [
    5.7, 3.7, 4.1, 2.8, 4.2, 4.5, 7.7, 8.1, 10, 13.3, 18.3, 17.9,
    11.3, 10.9, 5.1, 14.1, 17.8, 17.3, 15.9, 14.5, 13, 14.4, 14.8, 12.6,
    15.1, 14.8, 12.3, 13.7, 14.4, 11.9, 10.1, 8.7, 12.6, 21, 24.9, 21,
    24.2, 23.7, 22.7, 17.4, 20.6, 24.9, 24.6, 24.5, 22.3, 24.1, 24.1, 25.6,
]  # fmt: skip

WIND_DIRECTION = [
    252, 299, 285, 130, 149, 151, 139, 111, 131, 147, 158, 170,
    158, 136, 219, 266, 262, 265, 267, 264, 264, 267, 271, 270,
    271, 271, 275, 268, 271, 270, 268, 275, 272, 264, 272, 275,
    275, 279, 293, 283, 276, 274, 276, 274, 273, 267, 268, 268,
]  # fmt: skip

DATES = ["2023-11-10", "2023-11-11"]
UV_INDEX_MAX = [1.45, 0.95]


@pytest.fixture
def hourly() -> list[HourlySample]:
    """48 hourly samples starting at midnight."""
    return [
        HourlySample(
            timestamp=TIMES[i],
            apparent_temperature=APPARENT_TEMPERATURE[i],
            precipitation_probability=PRECIPITATION_PROBABILITY[i],
            precipitation=PRECIPITATION[i],
            wind_speed=WIND_SPEED[i],
            wind_direction=WIND_DIRECTION[i],
        )
        for i in range(len(TIMES))
    ]


@pytest.fixture
def daily() -> list[DailySample]:
    """Two daily UV maxima."""
    return [DailySample(date=d, uv_index_max=uv) for d, uv in zip(DATES, UV_INDEX_MAX)]
