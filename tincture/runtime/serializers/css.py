# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
CSS-style serialization.

Output formats (alpha is always slash-separated):

    lab(L% a b / alpha)
    lch(L% c h / alpha)
    rgb(r g b / alpha)            r, g, b rounded to integers
    hsv(h s% v% / alpha)          not valid CSS; placeholder syntax
    oklab(L% a b / alpha)
    oklch(L% c h / alpha)
    linear-gradient(<angle>deg in <space>, <color> <position>%, ...)

Field precision comes from CssPrecision. Consumers compare these
strings, so changing a default changes the output contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from tincture.engine.config import CssPrecision
from tincture.errors import ConfigurationError
from tincture.runtime.serializers.base import format_hue, format_number, format_percent
from tincture.schema import ColorSpace, ColorValue

if TYPE_CHECKING:
    from tincture.engine.gradient import LinearGradient


def color_to_css(value: ColorValue, precision: Optional[CssPrecision] = None) -> str:
    """Serialize a color snapshot in its own space."""
    p = precision or CssPrecision()
    alpha = format_number(value.alpha, p.alpha)
    space = value.space

    if space is ColorSpace.LAB:
        body = (
            f"{format_number(value.l, p.lab_lightness)}% "
            f"{format_number(value.a, p.lab_axis)} "
            f"{format_number(value.b, p.lab_axis)}"
        )
    elif space is ColorSpace.LCH:
        body = (
            f"{format_number(value.l, p.lch_lightness)}% "
            f"{format_number(value.c, p.lch_chroma)} "
            f"{format_hue(value.h, p.lch_hue)}"
        )
    elif space is ColorSpace.RGB:
        body = " ".join(format_number(c, 0) for c in value.channels)
    elif space is ColorSpace.HSV:
        body = (
            f"{format_hue(value.h, p.hsv_hue)} "
            f"{format_percent(value.s, p.hsv_percent)}% "
            f"{format_percent(value.v, p.hsv_percent)}%"
        )
    elif space is ColorSpace.OKLAB:
        body = (
            f"{format_percent(value.l, p.oklab_lightness)}% "
            f"{format_number(value.a, p.oklab_axis)} "
            f"{format_number(value.b, p.oklab_axis)}"
        )
    elif space is ColorSpace.OKLCH:
        body = (
            f"{format_percent(value.l, p.oklch_lightness)}% "
            f"{format_number(value.c, p.oklch_chroma)} "
            f"{format_hue(value.h, p.oklch_hue)}"
        )
    else:
        raise ConfigurationError(f"No CSS form for color space {space!r}")

    return f"{space.value}({body} / {alpha})"


def format_position(value: float, decimals: int = 4) -> str:
    """
    Format a gradient stop position.

    Values <= 1 are fractions and are multiplied by 100; values > 1 are
    taken as percentages already. A stop meant to sit at 1% must therefore
    be given as 0.01, since 1 renders as 100%.
    """
    percent = value * 100.0 if value <= 1 else value
    return f"{format_number(percent, decimals)}%"


def gradient_to_css(
    gradient: LinearGradient,
    space: Union[ColorSpace, str, None] = None,
    precision: Optional[CssPrecision] = None,
) -> str:
    """
    Serialize a linear gradient.

    Args:
        gradient: Gradient to serialize
        space: Color space for the stops and the ``in <space>`` clause
            (defaults to the gradient's own space)
        precision: Field precision (uses defaults if None)

    Returns:
        ``linear-gradient(...)`` string, or "none" for a gradient without stops

    Raises:
        ConfigurationError: a stop position is unresolved
    """
    p = precision or CssPrecision()
    stops = gradient.stops
    if not stops:
        return "none"

    mode = gradient.space if space is None else ColorSpace.coerce(space)

    parts = []
    for stop in stops:
        if stop.position is None:
            raise ConfigurationError(
                "Gradient has unresolved stop positions; call fill_missing_positions() first"
            )
        positions = [format_position(stop.position, p.gradient_position)]
        if stop.end_position is not None:
            positions.append(format_position(stop.end_position, p.gradient_position))
        parts.append(f"{stop.color.css(mode, p)} {' '.join(positions)}")

    angle = format_number(gradient.angle, p.gradient_angle)
    return f"linear-gradient({angle}deg in {mode.value}, {', '.join(parts)})"
