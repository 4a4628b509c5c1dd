# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color engine for Tincture.

Pure conversions (colorspace), the Color state, interpolation, scales and
gradients. Everything is synchronous and free of I/O.
"""

from tincture.engine.config import CssPrecision, GradientConfig, InterpolationConfig
from tincture.engine.color import Color
from tincture.engine.interpolation import color_ease_out, lerp, lerp_hue
from tincture.engine.scale import ColorScale, scale
from tincture.engine.gradient import GradientStop, LinearGradient

__all__ = [
    "Color",
    "ColorScale",
    "scale",
    "GradientStop",
    "LinearGradient",
    "color_ease_out",
    "lerp",
    "lerp_hue",
    "InterpolationConfig",
    "GradientConfig",
    "CssPrecision",
]
