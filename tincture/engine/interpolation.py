# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Interpolation primitives.

Rectangular channels blend linearly. Angular (hue) channels blend along
the shorter arc of the hue circle, so 350° → 10° passes through 0°,
never through 180°. A neutral endpoint has no meaningful hue, so it takes
the hue of the other endpoint and only its chroma blends.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional, Union

from tincture.engine.colorspace import (
    HSV_ACHROMATIC,
    LAB_ACHROMATIC,
    OKLAB_ACHROMATIC,
    normalize_hue,
)
from tincture.engine.config import InterpolationConfig
from tincture.errors import ChannelRangeError
from tincture.schema import ColorSpace

if TYPE_CHECKING:
    from tincture.engine.color import Color

logger = logging.getLogger(__name__)


def clamp_unit(t: float) -> float:
    """
    Clamp an interpolation parameter into [0, 1].

    Raises:
        ChannelRangeError: t is NaN or infinite
    """
    t = float(t)
    if not math.isfinite(t):
        raise ChannelRangeError("t", f"Interpolation parameter must be finite, got {t}")
    return min(max(t, 0.0), 1.0)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation with t clamped to [0, 1]."""
    t = clamp_unit(t)
    return a + (b - a) * t


def hue_delta(a: float, b: float) -> float:
    """Signed shortest arc from a to b, in (-180, 180]."""
    a = normalize_hue(a)
    b = normalize_hue(b)
    return ((b - a) % 360.0 + 540.0) % 360.0 - 180.0


def lerp_hue(a: float, b: float, t: float) -> float:
    """Circular interpolation of angles in degrees along the shorter arc."""
    t = clamp_unit(t)
    return normalize_hue(normalize_hue(a) + hue_delta(a, b) * t)


# (index of the chroma-like channel, achromatic tolerance) per hue space
_NEUTRAL_CHANNEL = {
    ColorSpace.HSV: (1, HSV_ACHROMATIC),
    ColorSpace.LCH: (1, LAB_ACHROMATIC),
    ColorSpace.OKLCH: (1, OKLAB_ACHROMATIC),
}


def _is_neutral(space: ColorSpace, channels: tuple[float, float, float]) -> bool:
    index, tolerance = _NEUTRAL_CHANNEL[space]
    return channels[index] < tolerance


def _with_hue(
    channels: tuple[float, float, float], index: int, hue: float
) -> tuple[float, float, float]:
    values = list(channels)
    values[index] = hue
    return (values[0], values[1], values[2])


def interpolate_channels(
    space: ColorSpace,
    a: tuple[float, float, float],
    b: tuple[float, float, float],
    t: float,
) -> tuple[float, float, float]:
    """
    Blend two channel triples of ``space``.

    The hue channel (if the space has one) uses lerp_hue; the others
    use lerp. When exactly one side is neutral, its hue is replaced by
    the other side's before blending.
    """
    hue_index = space.hue_index
    if hue_index is not None:
        a_neutral = _is_neutral(space, a)
        b_neutral = _is_neutral(space, b)
        if a_neutral and not b_neutral:
            a = _with_hue(a, hue_index, b[hue_index])
        elif b_neutral and not a_neutral:
            b = _with_hue(b, hue_index, a[hue_index])

    blended = []
    for i, (ca, cb) in enumerate(zip(a, b)):
        if i == hue_index:
            blended.append(lerp_hue(ca, cb, t))
        else:
            blended.append(lerp(ca, cb, t))
    return (blended[0], blended[1], blended[2])


def color_ease_out(
    color_a: Color,
    color_b: Color,
    t: float,
    space: Union[ColorSpace, str] = ColorSpace.RGB,
    *,
    chroma_correction: bool = False,
    config: Optional[InterpolationConfig] = None,
) -> Color:
    """
    Blend two colors, optionally compensating desaturation during fades.

    When chroma_correction is requested and the blended color is more
    transparent than color_a, its OKLCH chroma is multiplied by (1 + t)
    and capped at config.chroma_ceiling. Lowering alpha over a backdrop
    makes a color read as washed out; the boost offsets that.

    Args:
        color_a: Start color
        color_b: End color
        t: Blend parameter, clamped to [0, 1]
        space: Color space to blend in
        chroma_correction: Apply the fade-out chroma boost (off by default)
        config: Interpolation settings (uses defaults if None)

    Returns:
        A new Color
    """
    cfg = config or InterpolationConfig()
    t = clamp_unit(t)

    result = type(color_a).interpolate(color_a, color_b, t, space)
    if not chroma_correction or result.alpha >= color_a.alpha:
        return result

    oklch = result.oklch()
    boosted = min(oklch.c * (1.0 + t), cfg.chroma_ceiling)
    logger.debug("Fade-out chroma correction: C %.5f -> %.5f (t=%.3f)", oklch.c, boosted, t)
    return result.set_oklch(oklch.l, boosted, oklch.h)
