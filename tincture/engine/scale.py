# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Multi-color scales.

A scale spreads N colors evenly over t in [0, 1] and interpolates
between neighbours in a chosen color space.
"""

from __future__ import annotations

import math
from typing import Iterable, Union

from tincture.engine.color import Color
from tincture.engine.interpolation import clamp_unit
from tincture.errors import ConfigurationError
from tincture.schema import ColorSpace


class ColorScale:
    """
    Reusable evaluator over an ordered list of colors.

    The colors are copied on construction, so later changes to the input
    colors do not affect the scale.

    Example:
        >>> s = ColorScale([Color.from_hex("#000"), Color.from_hex("#fff")])
        >>> s(1.0).hex()
        '#FFFFFF'
    """

    def __init__(self, colors: Iterable[Color], space: Union[ColorSpace, str] = ColorSpace.RGB) -> None:
        self._colors = tuple(c.clone() for c in colors)
        if not self._colors:
            raise ConfigurationError("A color scale needs at least one color")
        self.space = ColorSpace.coerce(space)

    def __len__(self) -> int:
        return len(self._colors)

    def __call__(self, t: float) -> Color:
        """Color at global position t (clamped to [0, 1])."""
        t = clamp_unit(t)
        n = len(self._colors)
        if n == 1:
            return self._colors[0].clone()

        scaled = t * (n - 1)
        i = min(int(math.floor(scaled)), n - 2)
        u = scaled - i
        return Color.interpolate(self._colors[i], self._colors[i + 1], u, self.space)

    def colors(self, count: int) -> list[Color]:
        """
        Sample ``count`` evenly spaced colors, endpoints included.

        Raises:
            ConfigurationError: count < 1
        """
        if count < 1:
            raise ConfigurationError(f"Sample count must be >= 1, got {count}")
        if count == 1:
            return [self(0.0)]
        return [self(i / (count - 1)) for i in range(count)]


def scale(colors: Iterable[Color], space: Union[ColorSpace, str] = ColorSpace.RGB) -> ColorScale:
    """
    Build a scale over ``colors`` blended in ``space``.

    With one color the scale is constant. With N > 1 colors, t is mapped to
    segment i = min(floor(t·(N−1)), N−2) and local parameter t·(N−1) − i.

    Raises:
        ConfigurationError: colors is empty
    """
    return ColorScale(colors, space)
