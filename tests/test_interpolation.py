# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for interpolation primitives and the fade-out chroma correction."""

import pytest

from tincture import ChannelRangeError, Color, ColorSpace, InterpolationConfig, color_ease_out
from tincture.engine.interpolation import (
    clamp_unit,
    hue_delta,
    interpolate_channels,
    lerp,
    lerp_hue,
)


class TestLerp:

    def test_midpoint(self):
        assert lerp(10.0, 20.0, 0.5) == pytest.approx(15.0)

    def test_endpoints(self):
        assert lerp(-3.0, 7.0, 0.0) == -3.0
        assert lerp(-3.0, 7.0, 1.0) == 7.0

    def test_t_clamped(self):
        assert lerp(0.0, 10.0, 2.0) == 10.0
        assert lerp(0.0, 10.0, -1.0) == 0.0

    def test_clamp_unit(self):
        assert clamp_unit(0.25) == 0.25
        assert clamp_unit(4) == 1.0

    @pytest.mark.parametrize("t", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_t(self, t):
        with pytest.raises(ChannelRangeError) as exc:
            clamp_unit(t)
        assert exc.value.field == "t"
        with pytest.raises(ChannelRangeError):
            lerp(0.0, 1.0, t)


class TestHue:

    def test_wraparound_midpoint(self):
        assert lerp_hue(350.0, 10.0, 0.5) == pytest.approx(0.0)

    def test_wraparound_reverse(self):
        assert lerp_hue(10.0, 350.0, 0.5) == pytest.approx(0.0)

    def test_never_goes_the_long_way(self):
        assert lerp_hue(350.0, 10.0, 0.25) == pytest.approx(355.0)
        assert lerp_hue(350.0, 10.0, 0.75) == pytest.approx(5.0)

    def test_plain_arc(self):
        assert lerp_hue(30.0, 90.0, 0.5) == pytest.approx(60.0)

    def test_unnormalized_inputs(self):
        assert lerp_hue(-10.0, 370.0, 0.5) == pytest.approx(0.0)

    def test_signed_delta(self):
        assert hue_delta(350.0, 10.0) == pytest.approx(20.0)
        assert hue_delta(10.0, 350.0) == pytest.approx(-20.0)
        assert hue_delta(0.0, 90.0) == pytest.approx(90.0)

    def test_result_in_range(self):
        for t in (0.0, 0.1, 0.5, 0.9, 1.0):
            h = lerp_hue(300.0, 60.0, t)
            assert 0.0 <= h < 360.0


class TestInterpolateChannels:

    def test_hsv_hue_is_first_channel(self):
        out = interpolate_channels(ColorSpace.HSV, (350.0, 0.2, 0.4), (10.0, 0.6, 0.8), 0.5)
        assert out == pytest.approx((0.0, 0.4, 0.6))

    def test_oklch_hue_is_last_channel(self):
        out = interpolate_channels(ColorSpace.OKLCH, (0.5, 0.1, 340.0), (0.7, 0.2, 20.0), 0.5)
        assert out == pytest.approx((0.6, 0.15, 0.0))

    def test_rectangular_space_is_fully_linear(self):
        out = interpolate_channels(ColorSpace.LAB, (50.0, 350.0, 0.0), (70.0, 10.0, 20.0), 0.5)
        assert out == pytest.approx((60.0, 180.0, 10.0))


class TestColorEaseOut:

    def _red(self, alpha):
        return Color.from_rgb(255, 0, 0, alpha=alpha)

    def test_no_correction_by_default(self):
        a, b = self._red(1.0), self._red(0.0)
        eased = color_ease_out(a, b, 0.5, "oklch")
        plain = Color.interpolate(a, b, 0.5, "oklch")
        assert eased == plain

    def test_fading_boosts_chroma(self):
        a, b = self._red(1.0), self._red(0.0)
        base_c = a.oklch().c
        eased = color_ease_out(a, b, 0.5, "oklch", chroma_correction=True)
        assert eased.oklch().c == pytest.approx(base_c * 1.5, rel=1e-6)
        assert eased.alpha == pytest.approx(0.5)

    def test_chroma_ceiling(self):
        a, b = self._red(1.0), self._red(0.0)
        cfg = InterpolationConfig(chroma_ceiling=0.3)
        eased = color_ease_out(a, b, 0.9, "oklch", chroma_correction=True, config=cfg)
        assert eased.oklch().c == pytest.approx(0.3, rel=1e-6)

    def test_no_boost_when_alpha_not_dropping(self):
        a, b = self._red(0.2), self._red(1.0)
        eased = color_ease_out(a, b, 0.5, "oklch", chroma_correction=True)
        plain = Color.interpolate(a, b, 0.5, "oklch")
        assert eased == plain

    def test_default_ceiling(self):
        assert InterpolationConfig().chroma_ceiling == 0.55


class TestNeutralEndpoints:

    def test_neutral_start_takes_other_hue(self):
        out = interpolate_channels(ColorSpace.LCH, (100.0, 0.0, 0.0), (50.0, 60.0, 40.0), 0.5)
        assert out == pytest.approx((75.0, 30.0, 40.0))

    def test_neutral_end_takes_other_hue(self):
        out = interpolate_channels(ColorSpace.OKLCH, (0.6, 0.2, 250.0), (1.0, 2e-6, 0.0), 0.5)
        assert out == pytest.approx((0.8, 0.100001, 250.0))

    def test_gray_in_hsv(self):
        out = interpolate_channels(ColorSpace.HSV, (0.0, 0.0, 0.5), (240.0, 1.0, 1.0), 0.5)
        assert out == pytest.approx((240.0, 0.5, 0.75))

    def test_both_neutral_blend_normally(self):
        out = interpolate_channels(ColorSpace.LCH, (0.0, 0.0, 0.0), (100.0, 0.0, 0.0), 0.5)
        assert out == pytest.approx((50.0, 0.0, 0.0))

    def test_chromatic_pair_unaffected(self):
        out = interpolate_channels(ColorSpace.LCH, (50.0, 0.5, 350.0), (50.0, 0.5, 10.0), 0.5)
        assert out == pytest.approx((50.0, 0.5, 0.0))
