"""Two-stop color interpolation in a perceptual color space.

Colors are described the way a browser mixes them (CSS ``color-mix()``),
and can also be evaluated here for renderers that cannot do it themselves:

    >>> mix = ColorMix(ColorSpace.OKLAB, Rgb(255, 0, 0), 100.0, Rgb(0, 0, 255))
    >>> mix.css()
    'color-mix(in oklab, rgb(255, 0, 0) 100%, rgb(0, 0, 255))'
    >>> mix.to_hex()
    '#ff0000'
"""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from weather_charts.geometry.formatting import format_number
from weather_charts.geometry.scale import clamp

if TYPE_CHECKING:
    from weather_charts.geometry.scale import ValueScale


class ColorSpace(StrEnum):
    """Interpolation spaces, named as CSS ``color-mix()`` spells them."""

    SRGB = "srgb"
    OKLAB = "oklab"
    HSL_SHORTER_HUE = "hsl shorter hue"


@dataclass(frozen=True)
class Rgb:
    """An 8-bit sRGB color."""

    r: int
    g: int
    b: int

    def css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_rgb(self) -> Rgb:
        return self

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return self.css()


@dataclass(frozen=True)
class ColorMix:
    """``high`` at ``high_percentage`` percent, the remainder ``low``."""

    space: ColorSpace
    high: Rgb
    high_percentage: float
    low: Rgb

    def css(self) -> str:
        return (
            f"color-mix(in {self.space}, {self.high.css()} "
            f"{format_number(self.high_percentage)}%, {self.low.css()})"
        )

    def to_rgb(self) -> Rgb:
        """Evaluate the mix to a concrete sRGB color."""
        weight = clamp(self.high_percentage / 100.0, 0.0, 1.0)
        if self.space is ColorSpace.OKLAB:
            return _mix_oklab(self.high, self.low, weight)
        if self.space is ColorSpace.HSL_SHORTER_HUE:
            return _mix_hsl_shorter(self.high, self.low, weight)
        return _from_unit(
            *(_lerp(lo, hi, weight) for hi, lo in zip(_to_unit(self.high), _to_unit(self.low)))
        )

    def to_hex(self) -> str:
        return self.to_rgb().to_hex()

    def __str__(self) -> str:
        return self.css()


#: Anything a renderer can paint with.
Paint = Rgb | ColorMix


@dataclass(frozen=True)
class ColorInterpolator:
    """Color a value by its position on a scale, from ``low`` up to ``high``."""

    scale: ValueScale
    high: Rgb
    low: Rgb
    space: ColorSpace

    def fraction(self, value: float) -> float:
        """Distance of ``value`` from the top of the scale, in ``[0, 1]``."""
        span = abs(
            self.scale.to_coordinate(self.scale.domain_max)
            - self.scale.to_coordinate(self.scale.domain_min)
        )
        return clamp(self.scale.to_coordinate(value) / span, 0.0, 1.0)

    def percentage(self, value: float) -> float:
        """Share of the high color in the mix, in percent."""
        return 100.0 - self.fraction(value) * 100.0

    def to_color(self, value: float) -> ColorMix:
        return ColorMix(self.space, self.high, self.percentage(value), self.low)

    def __call__(self, value: float) -> ColorMix:
        return self.to_color(value)


def _lerp(low: float, high: float, weight: float) -> float:
    return low + (high - low) * weight


def _to_unit(color: Rgb) -> tuple[float, float, float]:
    return color.r / 255, color.g / 255, color.b / 255


def _from_unit(r: float, g: float, b: float) -> Rgb:
    return Rgb(*(round(clamp(c, 0.0, 1.0) * 255) for c in (r, g, b)))


# OKLab conversion after https://bottosson.github.io/posts/oklab/


def _srgb_to_linear(c: float) -> float:
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c: float) -> float:
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * math.pow(c, 1 / 2.4) - 0.055


def _rgb_to_oklab(color: Rgb) -> tuple[float, float, float]:
    r, g, b = (_srgb_to_linear(c) for c in _to_unit(color))
    lms_l = math.cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
    lms_m = math.cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
    lms_s = math.cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
    return (
        0.2104542553 * lms_l + 0.7936177850 * lms_m - 0.0040720468 * lms_s,
        1.9779984951 * lms_l - 2.4285922050 * lms_m + 0.4505937099 * lms_s,
        0.0259040371 * lms_l + 0.7827717662 * lms_m - 0.8086757660 * lms_s,
    )


def _oklab_to_rgb(lightness: float, a: float, b: float) -> Rgb:
    lms_l = (lightness + 0.3963377774 * a + 0.2158037573 * b) ** 3
    lms_m = (lightness - 0.1055613458 * a - 0.0638541728 * b) ** 3
    lms_s = (lightness - 0.0894841775 * a - 1.2914855480 * b) ** 3
    linear = (
        4.0767416621 * lms_l - 3.3077115913 * lms_m + 0.2309699292 * lms_s,
        -1.2684380046 * lms_l + 2.6097574011 * lms_m - 0.3413193965 * lms_s,
        -0.0041960863 * lms_l - 0.7034186147 * lms_m + 1.7076147010 * lms_s,
    )
    return _from_unit(*(_linear_to_srgb(clamp(c, 0.0, 1.0)) for c in linear))


def _mix_oklab(high: Rgb, low: Rgb, weight: float) -> Rgb:
    mixed = (_lerp(lo, hi, weight) for hi, lo in zip(_rgb_to_oklab(high), _rgb_to_oklab(low)))
    return _oklab_to_rgb(*mixed)


def _mix_hsl_shorter(high: Rgb, low: Rgb, weight: float) -> Rgb:
    h_hue, h_light, h_sat = colorsys.rgb_to_hls(*_to_unit(high))
    l_hue, l_light, l_sat = colorsys.rgb_to_hls(*_to_unit(low))
    high_deg, low_deg = round(h_hue * 360, 6), round(l_hue * 360, 6)
    # grey has no hue; take the other color's
    if h_sat == 0:
        high_deg = low_deg
    elif l_sat == 0:
        low_deg = high_deg
    # shorter arc: never travel more than 180 degrees around the wheel
    if high_deg - low_deg > 180:
        low_deg += 360
    elif low_deg - high_deg > 180:
        high_deg += 360
    hue = _lerp(low_deg, high_deg, weight) % 360
    light = _lerp(l_light, h_light, weight)
    sat = _lerp(l_sat, h_sat, weight)
    return _from_unit(*colorsys.hls_to_rgb(hue / 360, light, sat))
