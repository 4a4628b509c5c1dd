# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (Lab ↔ XYZ ↔ RGB ↔ HSV, LCH, OKLab, OKLCH)."""

import numpy as np
import pytest

from tincture.engine.colorspace import (
    EPSILON,
    KAPPA,
    WHITE_D65,
    delta_e_oklab,
    hex_to_rgb,
    hsv_to_rgb,
    lab_to_lch,
    lab_to_oklab,
    lab_to_rgb,
    lab_to_xyz,
    lch_to_lab,
    linear_rgb_to_oklab,
    linear_rgb_to_xyz,
    linear_to_srgb,
    normalize_hue,
    oklab_to_lab,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_hex,
    rgb_to_hsv,
    rgb_to_lab,
    srgb_to_linear,
    xyz_to_lab,
    xyz_to_linear_rgb,
)
from tincture.errors import TypeMismatchError


def _random_rgb(n=200, seed=42):
    return np.random.RandomState(seed).random((n, 3)) * 255.0


class TestNormalizeHue:

    def test_in_range_unchanged(self):
        assert normalize_hue(123.5) == pytest.approx(123.5)

    def test_negative_wraps(self):
        assert normalize_hue(-30.0) == pytest.approx(330.0)

    def test_large_wraps(self):
        assert normalize_hue(725.0) == pytest.approx(5.0)

    def test_full_turn_is_zero(self):
        assert normalize_hue(360.0) == 0.0
        assert normalize_hue(-360.0) == 0.0

    def test_array(self):
        result = normalize_hue(np.array([-90.0, 450.0, 10.0]))
        np.testing.assert_allclose(result, [270.0, 90.0, 10.0])


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-10)

    def test_linear_threshold(self):
        """Values below 0.0031308 use the 12.92 slope."""
        val = 0.002
        srgb = linear_to_srgb(np.array([val]))
        assert float(srgb[0]) == pytest.approx(val * 12.92, abs=1e-12)

    def test_negative_values_stay_finite(self):
        out = linear_to_srgb(np.array([-0.1, -2.0]))
        assert np.all(np.isfinite(out))
        np.testing.assert_allclose(out, [-1.292, -25.84])

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)


class TestLabXYZ:

    def test_white_point(self):
        lab = xyz_to_lab(WHITE_D65)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-10)

    def test_black(self):
        lab = xyz_to_lab(np.zeros(3))
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-10)

    def test_dark_lightness_uses_kappa_branch(self):
        """L below kappa·epsilon (8) maps Y linearly."""
        xyz = lab_to_xyz(np.array([5.0, 0.0, 0.0]))
        assert xyz[1] == pytest.approx(5.0 / KAPPA * 100.0, rel=1e-12)
        assert KAPPA * EPSILON == pytest.approx(8.0)

    def test_roundtrip(self):
        lab = np.array([[50.0, 20.0, -30.0], [5.0, 1.0, 2.0], [90.0, -40.0, 60.0]])
        recovered = xyz_to_lab(lab_to_xyz(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-9)


class TestXYZLinearRGB:

    def test_white_maps_to_unit_rgb(self):
        rgb = xyz_to_linear_rgb(WHITE_D65)
        np.testing.assert_allclose(rgb, [1.0, 1.0, 1.0], atol=1e-6)

    def test_roundtrip(self):
        rgb = np.random.RandomState(7).random((50, 3))
        recovered = xyz_to_linear_rgb(linear_rgb_to_xyz(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-12)


class TestLabRGB:

    def test_black(self):
        np.testing.assert_allclose(rgb_to_lab(np.zeros(3)), [0.0, 0.0, 0.0], atol=1e-10)

    def test_white(self):
        lab = rgb_to_lab(np.array([255.0, 255.0, 255.0]))
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-4)

    def test_primary_red(self):
        lab = rgb_to_lab(np.array([255.0, 0.0, 0.0]))
        np.testing.assert_allclose(lab, [53.24, 80.09, 67.20], atol=0.05)

    def test_input_is_clipped(self):
        np.testing.assert_allclose(
            rgb_to_lab(np.array([300.0, -20.0, 0.0])),
            rgb_to_lab(np.array([255.0, 0.0, 0.0])),
        )

    def test_out_of_gamut_output_is_clipped(self):
        rgb = lab_to_rgb(np.array([50.0, 150.0, -150.0]))
        assert np.all(rgb >= 0.0)
        assert np.all(rgb <= 255.0)

    def test_rgb_lab_rgb_roundtrip(self):
        rgb = _random_rgb()
        recovered = lab_to_rgb(rgb_to_lab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-4)

    def test_lab_rgb_lab_roundtrip(self):
        lab = rgb_to_lab(_random_rgb(seed=3))
        recovered = rgb_to_lab(lab_to_rgb(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-4)


class TestLCH:

    def test_roundtrip_chromatic(self):
        lab = np.array([60.0, 30.0, -40.0])
        recovered = lch_to_lab(lab_to_lch(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-10)

    def test_chroma_calculation(self):
        lch = lab_to_lch(np.array([50.0, 30.0, 40.0]))
        assert lch[1] == pytest.approx(50.0)

    def test_neutral_hue_is_zero(self):
        lch = lab_to_lch(np.array([50.0, -0.0, -0.0]))
        assert lch[1] == 0.0
        assert lch[2] == 0.0

    def test_residual_chroma_is_neutral(self):
        lch = lab_to_lch(np.array([100.0, 1.2e-5, -1.3e-5]))
        assert lch[2] == 0.0
        oklch = oklab_to_oklch(np.array([1.0, -4e-8, 3.7e-8]))
        assert oklch[2] == 0.0

    def test_small_real_chroma_keeps_hue(self):
        assert lab_to_lch(np.array([50.0, 0.0, 0.01]))[2] == pytest.approx(90.0)
        assert oklab_to_oklch(np.array([0.5, 0.0, -0.001]))[2] == pytest.approx(270.0)

    def test_hue_range(self):
        lch = lab_to_lch(np.array([50.0, 10.0, -10.0]))
        assert lch[2] == pytest.approx(315.0)

    def test_unnormalized_hue_input(self):
        np.testing.assert_allclose(
            lch_to_lab(np.array([50.0, 20.0, -90.0])),
            lch_to_lab(np.array([50.0, 20.0, 270.0])),
            atol=1e-10,
        )


class TestHSV:

    @pytest.mark.parametrize(
        "rgb, hsv",
        [
            ((255, 0, 0), (0.0, 1.0, 1.0)),
            ((0, 255, 0), (120.0, 1.0, 1.0)),
            ((0, 0, 255), (240.0, 1.0, 1.0)),
            ((255, 255, 0), (60.0, 1.0, 1.0)),
            ((255, 0, 255), (300.0, 1.0, 1.0)),
        ],
    )
    def test_primaries(self, rgb, hsv):
        np.testing.assert_allclose(rgb_to_hsv(np.array(rgb, dtype=float)), hsv, atol=1e-10)
        np.testing.assert_allclose(hsv_to_rgb(np.array(hsv)), rgb, atol=1e-10)

    def test_gray_has_zero_hue_and_saturation(self):
        hsv = rgb_to_hsv(np.array([128.0, 128.0, 128.0]))
        np.testing.assert_allclose(hsv, [0.0, 0.0, 128.0 / 255.0])

    def test_black(self):
        np.testing.assert_allclose(rgb_to_hsv(np.zeros(3)), [0.0, 0.0, 0.0])

    def test_near_gray_is_neutral(self):
        hsv = rgb_to_hsv(np.array([2.0, 2.0 + 1e-9, 2.0 - 1e-9]))
        assert hsv[0] == 0.0
        assert hsv[1] == 0.0

    def test_one_step_off_gray_has_hue(self):
        hsv = rgb_to_hsv(np.array([128.0, 128.0, 129.0]))
        assert hsv[0] == pytest.approx(240.0)

    def test_hue_wraps(self):
        np.testing.assert_allclose(
            hsv_to_rgb(np.array([360.0, 1.0, 1.0])),
            hsv_to_rgb(np.array([0.0, 1.0, 1.0])),
        )
        np.testing.assert_allclose(
            hsv_to_rgb(np.array([-120.0, 1.0, 1.0])),
            [0.0, 0.0, 255.0],
            atol=1e-10,
        )

    def test_batch_roundtrip(self):
        rgb = _random_rgb(seed=11)
        recovered = hsv_to_rgb(rgb_to_hsv(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-9)


class TestOKLab:

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert lab[1] == pytest.approx(0.0, abs=1e-6)

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-12)

    def test_linear_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-8)

    def test_cie_lab_white(self):
        oklab = lab_to_oklab(np.array([100.0, 0.0, 0.0]))
        np.testing.assert_allclose(oklab, [1.0, 0.0, 0.0], atol=1e-4)

    def test_cie_lab_roundtrip_out_of_gamut(self):
        """No clipping on the OKLab path, so even out-of-gamut Lab survives."""
        lab = np.array([[50.0, 120.0, -100.0], [30.0, -60.0, 20.0]])
        recovered = oklab_to_lab(lab_to_oklab(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-6)

    def test_oklch_roundtrip(self):
        lab = np.array([0.7, 0.1, -0.05])
        recovered = oklch_to_oklab(oklab_to_oklch(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-12)


class TestHex:

    def test_format(self):
        assert rgb_to_hex(np.array([57.0, 65.0, 200.0])) == "#3941C8"

    def test_rounds_half_up_and_clips(self):
        assert rgb_to_hex(np.array([127.5, 300.0, -5.0])) == "#80FF00"

    def test_parse_long(self):
        np.testing.assert_array_equal(hex_to_rgb("#3941C8"), [57.0, 65.0, 200.0])

    def test_parse_short_without_hash(self):
        np.testing.assert_array_equal(hex_to_rgb("f80"), [255.0, 136.0, 0.0])

    @pytest.mark.parametrize("bad", ["#12345", "#GGGGGG", ""])
    def test_invalid(self, bad):
        with pytest.raises(TypeMismatchError):
            hex_to_rgb(bad)

    def test_not_a_string(self):
        with pytest.raises(TypeError):
            hex_to_rgb(0xFF0000)


class TestDeltaE:

    def test_identical_colors_zero(self):
        lab = np.array([0.5, 0.1, -0.1])
        assert delta_e_oklab(lab, lab) == pytest.approx(0.0, abs=1e-12)

    def test_scalar_result_is_float(self):
        assert isinstance(delta_e_oklab(np.zeros(3), np.ones(3)), float)

    def test_black_white_large_distance(self):
        assert delta_e_oklab(np.array([0.0, 0.0, 0.0]), np.array([1.0, 0.0, 0.0])) == pytest.approx(1.0)

    def test_batch(self):
        a = np.array([[0.5, 0.0, 0.0], [0.2, 0.1, 0.0]])
        b = np.array([[0.5, 0.3, 0.4], [0.2, 0.1, 0.0]])
        np.testing.assert_allclose(delta_e_oklab(a, b), [0.5, 0.0])
