# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tincture -- Colorimetric state, conversion and gradient engine.

Colors are stored canonically as CIE Lab plus alpha and read or written
through RGB, HSV, LCH, OKLab, OKLCH and Lab views. Colors blend in any of
those spaces (hue channels along the shorter arc), and multi-stop linear
gradients evaluate, morph and serialize to CSS-style strings.

Quick start::

    from tincture import Color, LinearGradient

    red = Color.from_rgb(255, 0, 0)
    blue = Color.from_hex("#0000FF")
    Color.interpolate(red, blue, 0.5, "oklch").css("oklch")

    g = LinearGradient([(red, 0), (blue, 1)], angle=90, space="lab")
    g.get_color_at(0.25)
    g.css()
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from tincture.errors import (
    ChannelRangeError,
    ConfigurationError,
    TinctureError,
    TypeMismatchError,
)
from tincture.schema import ColorSpace, Number, Percent, pct
from tincture.engine import (
    Color,
    ColorScale,
    CssPrecision,
    GradientConfig,
    GradientStop,
    InterpolationConfig,
    LinearGradient,
    color_ease_out,
    scale,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "Color",
    "ColorSpace",
    "LinearGradient",
    "GradientStop",
    "ColorScale",
    "scale",
    "color_ease_out",
    # Channel inputs
    "Number",
    "Percent",
    "pct",
    # Configuration
    "InterpolationConfig",
    "GradientConfig",
    "CssPrecision",
    # Errors
    "TinctureError",
    "TypeMismatchError",
    "ChannelRangeError",
    "ConfigurationError",
    # Version
    "__version__",
]
