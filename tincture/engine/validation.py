# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Boundary validation for channel inputs.

Each validator takes a raw input (plain number, Number or Percent) and the
field name used in error messages, and returns a float on the scale the
color space conversions expect. Validators never mutate anything, so a
setter can run all of them before touching its color.
"""

from __future__ import annotations

import math

from tincture.errors import ChannelRangeError, ConfigurationError
from tincture.engine.colorspace import normalize_hue
from tincture.schema import ColorSpace, Percent
from tincture.schema.color_values import coerce_channel


# CSS reference ranges: what 100% means on an unbounded axis
PERCENT_REFERENCE = {
    "rgb": 255.0,
    "lab_axis": 125.0,
    "lch_chroma": 150.0,
    "oklab_axis": 0.4,
    "oklch_chroma": 0.4,
}


def _number(value: object, field: str) -> tuple[float, bool]:
    """Return (value, is_percent), rejecting non-finite numbers."""
    tagged = coerce_channel(value, field)
    number = float(tagged.value)
    if not math.isfinite(number):
        raise ChannelRangeError(field, f"'{field}' must be finite, got {number}")
    return number, isinstance(tagged, Percent)


def unit_channel(value: object, field: str) -> float:
    """
    A fraction in [0, 1], or a Percent scaled down from [0, 100].

    Used for alpha, HSV saturation/value and OKLab/OKLCH lightness.
    """
    number, is_percent = _number(value, field)
    if is_percent:
        return number / 100.0
    if not 0.0 <= number <= 1.0:
        raise ChannelRangeError(field, f"'{field}' must be 0-1, got {number}")
    return number


def alpha_channel(value: object) -> float:
    """Opacity in [0, 1]."""
    return unit_channel(value, "alpha")


def hue_channel(value: object, field: str) -> float:
    """Any finite angle in degrees, wrapped into [0, 360)."""
    number, is_percent = _number(value, field)
    if is_percent:
        # 100% is a full turn
        number = number * 3.6
    return normalize_hue(number)


def chroma_channel(value: object, field: str, reference: float) -> float:
    """Non-negative chroma. Negative input clamps to 0 instead of raising."""
    number, is_percent = _number(value, field)
    if is_percent:
        number = number / 100.0 * reference
    return max(number, 0.0)


def axis_channel(value: object, field: str, reference: float) -> float:
    """An unbounded axis (Lab/OKLab a and b, sRGB channels)."""
    number, is_percent = _number(value, field)
    if is_percent:
        return number / 100.0 * reference
    return number


def cie_lightness(value: object, field: str) -> float:
    """
    CIE lightness on the [0, 100] scale.

    A Percent is taken as-is. A plain number in [0, 1] is a fraction and
    is scaled by 100; a plain number above 1 is already on the percentage
    scale. Note that 1 therefore means 100, not 1%. The result is clamped
    to [0, 100].
    """
    number, is_percent = _number(value, field)
    if not is_percent and 0.0 <= number <= 1.0:
        number *= 100.0
    return min(max(number, 0.0), 100.0)


def validate_channels(space: ColorSpace, values: tuple) -> tuple[float, float, float]:
    """
    Validate the three channels of ``space``.

    Returns:
        Channels on the scale the conversions in colorspace expect

    Raises:
        TypeMismatchError: a value is neither a number nor a Percent
        ChannelRangeError: a value is outside its channel's domain
    """
    c1, c2, c3 = values
    name = space.value

    if space is ColorSpace.RGB:
        ref = PERCENT_REFERENCE["rgb"]
        return (
            axis_channel(c1, "rgb.r", ref),
            axis_channel(c2, "rgb.g", ref),
            axis_channel(c3, "rgb.b", ref),
        )
    if space is ColorSpace.HSV:
        return (
            hue_channel(c1, "hsv.h"),
            unit_channel(c2, "hsv.s"),
            unit_channel(c3, "hsv.v"),
        )
    if space is ColorSpace.LCH:
        return (
            cie_lightness(c1, "lch.l"),
            chroma_channel(c2, "lch.c", PERCENT_REFERENCE["lch_chroma"]),
            hue_channel(c3, "lch.h"),
        )
    if space is ColorSpace.OKLAB:
        ref = PERCENT_REFERENCE["oklab_axis"]
        return (
            unit_channel(c1, "oklab.l"),
            axis_channel(c2, "oklab.a", ref),
            axis_channel(c3, "oklab.b", ref),
        )
    if space is ColorSpace.OKLCH:
        return (
            unit_channel(c1, "oklch.l"),
            chroma_channel(c2, "oklch.c", PERCENT_REFERENCE["oklch_chroma"]),
            hue_channel(c3, "oklch.h"),
        )
    if space is ColorSpace.LAB:
        ref = PERCENT_REFERENCE["lab_axis"]
        return (
            cie_lightness(c1, "lab.l"),
            axis_channel(c2, "lab.a", ref),
            axis_channel(c3, "lab.b", ref),
        )
    raise ConfigurationError(f"No channel rules for color space {name!r}")
