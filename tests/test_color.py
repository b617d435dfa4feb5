"""Tests for color interpolation."""

from __future__ import annotations

import pytest

from weather_charts.charts.temperature import temperature_interpolator
from weather_charts.charts.uv import uv_interpolator
from weather_charts.geometry import ColorInterpolator, ColorMix, ColorSpace, Rgb, ValueScale

RED = Rgb(255, 0, 0)
BLUE = Rgb(0, 0, 255)
MAGENTA = Rgb(255, 0, 255)
GREEN = Rgb(0, 255, 0)


class TestRgb:
    """Test the sRGB color value."""

    def test_css(self) -> None:
        assert Rgb(78, 104, 129).css() == "rgb(78, 104, 129)"

    def test_str_is_css(self) -> None:
        assert str(RED) == "rgb(255, 0, 0)"

    def test_hex(self) -> None:
        assert Rgb(78, 104, 129).to_hex() == "#4e6881"


class TestColorMixCss:
    """Test CSS color-mix() expressions."""

    def test_oklab(self) -> None:
        mix = ColorMix(ColorSpace.OKLAB, RED, 52.75, BLUE)
        assert mix.css() == "color-mix(in oklab, rgb(255, 0, 0) 52.75%, rgb(0, 0, 255))"

    def test_hsl_shorter_hue(self) -> None:
        mix = ColorMix(ColorSpace.HSL_SHORTER_HUE, MAGENTA, 0.0, GREEN)
        assert mix.css() == "color-mix(in hsl shorter hue, rgb(255, 0, 255) 0%, rgb(0, 255, 0))"


class TestColorMixEvaluation:
    """Test evaluating mixes to concrete colors."""

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_full_high_is_high_color(self, space: ColorSpace) -> None:
        assert ColorMix(space, MAGENTA, 100.0, GREEN).to_hex() == "#ff00ff"

    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_zero_high_is_low_color(self, space: ColorSpace) -> None:
        assert ColorMix(space, MAGENTA, 0.0, GREEN).to_hex() == "#00ff00"

    def test_oklab_endpoints(self) -> None:
        assert ColorMix(ColorSpace.OKLAB, RED, 100.0, BLUE).to_hex() == "#ff0000"
        assert ColorMix(ColorSpace.OKLAB, RED, 0.0, BLUE).to_hex() == "#0000ff"

    def test_oklab_midpoint_is_purple(self) -> None:
        mixed = ColorMix(ColorSpace.OKLAB, RED, 50.0, BLUE).to_rgb()
        assert mixed.r > 100
        assert mixed.b > 100
        assert mixed.g < min(mixed.r, mixed.b)

    def test_srgb_midpoint(self) -> None:
        mixed = ColorMix(ColorSpace.SRGB, Rgb(200, 0, 100), 50.0, Rgb(0, 100, 0)).to_rgb()
        assert mixed == Rgb(100, 50, 50)

    def test_hsl_shorter_hue_midpoint(self) -> None:
        """Magenta (300°) and green (120°) meet at azure (210°)."""
        mixed = ColorMix(ColorSpace.HSL_SHORTER_HUE, MAGENTA, 50.0, GREEN).to_rgb()
        assert mixed.r == 0
        assert mixed.g in (127, 128)
        assert mixed.b == 255

    def test_hsl_shorter_hue_wraps_around_red(self) -> None:
        """Red (0°) and magenta (300°) mix through 330°, not through green."""
        mixed = ColorMix(ColorSpace.HSL_SHORTER_HUE, RED, 50.0, MAGENTA).to_rgb()
        assert mixed.r == 255
        assert mixed.g == 0
        assert 120 <= mixed.b <= 135

    def test_out_of_range_percentage_is_clamped(self) -> None:
        assert ColorMix(ColorSpace.SRGB, RED, 150.0, BLUE).to_hex() == "#ff0000"


class TestColorInterpolator:
    """Test value to color mapping."""

    @pytest.fixture
    def interpolator(self) -> ColorInterpolator:
        return temperature_interpolator()

    def test_top_is_all_high_color(self, interpolator: ColorInterpolator) -> None:
        assert interpolator.to_color(30.0).css() == (
            "color-mix(in oklab, rgb(255, 0, 0) 100%, rgb(0, 0, 255))"
        )

    def test_bottom_is_all_low_color(self, interpolator: ColorInterpolator) -> None:
        assert interpolator.to_color(-10.0).css() == (
            "color-mix(in oklab, rgb(255, 0, 0) 0%, rgb(0, 0, 255))"
        )

    def test_midpoint(self, interpolator: ColorInterpolator) -> None:
        assert interpolator.percentage(10.0) == 50.0
        assert interpolator.to_color(10.0).css() == (
            "color-mix(in oklab, rgb(255, 0, 0) 50%, rgb(0, 0, 255))"
        )

    def test_fraction_for_sample_value(self, interpolator: ColorInterpolator) -> None:
        assert interpolator.fraction(8.9) == pytest.approx(21.1 / 40)
        assert interpolator.percentage(8.9) == pytest.approx((40 - 21.1) / 40 * 100)

    @pytest.mark.parametrize("value", [-1000.0, -10.0, -0.4, 8.9, 30.0, 1000.0])
    def test_fraction_within_unit_interval(
        self, interpolator: ColorInterpolator, value: float
    ) -> None:
        assert 0.0 <= interpolator.fraction(value) <= 1.0

    @pytest.mark.parametrize("epsilon", [1e-9, 0.5, 100.0])
    def test_clamped_above_top(self, interpolator: ColorInterpolator, epsilon: float) -> None:
        assert interpolator.to_color(30.0 + epsilon) == interpolator.to_color(30.0)

    def test_clamped_below_bottom(self, interpolator: ColorInterpolator) -> None:
        assert interpolator.to_color(-40.0) == interpolator.to_color(-10.0)

    def test_higher_value_means_more_high_color(self, interpolator: ColorInterpolator) -> None:
        assert interpolator.percentage(20.0) > interpolator.percentage(0.0)

    def test_callable(self, interpolator: ColorInterpolator) -> None:
        assert interpolator(5.0) == interpolator.to_color(5.0)

    def test_taller_range_does_not_change_fraction(self) -> None:
        scale = ValueScale(0.0, 10.0, 0.0, 20.0)
        interpolator = ColorInterpolator(scale, RED, BLUE, ColorSpace.SRGB)
        assert interpolator.fraction(5.0) == 0.5


class TestUvInterpolator:
    """Test the UV color scale."""

    def test_max_uv(self) -> None:
        assert uv_interpolator().to_color(11.0).css() == (
            "color-mix(in hsl shorter hue, rgb(255, 0, 255) 100%, rgb(0, 255, 0))"
        )

    def test_min_uv(self) -> None:
        assert uv_interpolator().percentage(0.0) == 0.0

    def test_extreme_uv_is_clamped(self) -> None:
        assert uv_interpolator().to_color(14.0) == uv_interpolator().to_color(11.0)
