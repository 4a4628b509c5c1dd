# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Configuration objects.

Every configurable operation takes an optional ``config`` argument and
falls back to the defaults below when it is None.
"""

from __future__ import annotations

from dataclasses import dataclass

from tincture.schema import ColorSpace


@dataclass(frozen=True)
class InterpolationConfig:
    """Configuration for the fade-out chroma correction."""

    # Absolute OKLCH chroma ceiling after the (1 + t) boost.
    # sRGB colors top out around 0.32; 0.55 leaves room for wide gamuts.
    chroma_ceiling: float = 0.55


@dataclass(frozen=True)
class GradientConfig:
    """Defaults for newly constructed gradients."""

    # CSS default: top → bottom
    angle: float = 180.0
    space: ColorSpace = ColorSpace.RGB


@dataclass(frozen=True)
class CssPrecision:
    """
    Decimal places per serialized field.

    Consumers compare the serialized strings, so these defaults are part
    of the output contract.
    """

    alpha: int = 4

    # lightness is always printed as a percentage
    lab_lightness: int = 4
    lab_axis: int = 4

    lch_lightness: int = 4
    lch_chroma: int = 4
    lch_hue: int = 2

    hsv_hue: int = 2
    hsv_percent: int = 4

    oklab_lightness: int = 4
    oklab_axis: int = 5

    oklch_lightness: int = 4
    oklch_chroma: int = 5
    oklch_hue: int = 2

    gradient_angle: int = 4
    gradient_position: int = 4
