# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
The mutable Color entity.

A Color stores exactly one value: CIE Lab plus alpha. Every other color
space is a projection recomputed from that value on each read and
returned as a frozen snapshot. Writers validate all channels first and
then replace the whole (Lab, alpha) state in a single assignment, so a
failed write leaves the color untouched.

Example:
    >>> c = Color.from_rgb(255, 0, 0)
    >>> c.css("rgb")
    'rgb(255 0 0 / 1)'
    >>> c.hex()
    '#FF0000'
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Union

import numpy as np
from numpy.typing import NDArray

from tincture.engine import colorspace as cs
from tincture.engine.config import CssPrecision
from tincture.engine.interpolation import clamp_unit, interpolate_channels, lerp
from tincture.engine.validation import alpha_channel, validate_channels
from tincture.runtime.serializers.css import color_to_css
from tincture.schema import (
    SNAPSHOT_TYPES,
    ChannelInput,
    ColorSpace,
    ColorValue,
    HSVValue,
    LabValue,
    LCHValue,
    OKLabValue,
    OKLCHValue,
    RGBValue,
)

SpaceLike = Union[ColorSpace, str]

Converter = Callable[[NDArray[np.float64]], NDArray[np.float64]]


def _identity(values: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64)


_FROM_LAB: dict[ColorSpace, Converter] = {
    ColorSpace.RGB: cs.lab_to_rgb,
    ColorSpace.HSV: lambda lab: cs.rgb_to_hsv(cs.lab_to_rgb(lab)),
    ColorSpace.LCH: cs.lab_to_lch,
    ColorSpace.OKLAB: cs.lab_to_oklab,
    ColorSpace.OKLCH: lambda lab: cs.oklab_to_oklch(cs.lab_to_oklab(lab)),
    ColorSpace.LAB: _identity,
}

_TO_LAB: dict[ColorSpace, Converter] = {
    ColorSpace.RGB: cs.rgb_to_lab,
    ColorSpace.HSV: lambda hsv: cs.rgb_to_lab(cs.hsv_to_rgb(hsv)),
    ColorSpace.LCH: cs.lch_to_lab,
    ColorSpace.OKLAB: cs.oklab_to_lab,
    ColorSpace.OKLCH: lambda lch: cs.oklab_to_lab(cs.oklch_to_oklab(lch)),
    ColorSpace.LAB: _identity,
}

# Views whose lightness is a [0, 1] fraction, as their setters require
_UNIT_LIGHTNESS = frozenset({ColorSpace.OKLAB, ColorSpace.OKLCH})


class Color:
    """
    A color held canonically as CIE Lab (D65) plus alpha.

    A new Color is black: Lab (0, 0, 0), alpha 1.

    Instances are plain mutable values with no internal locking; confine
    an instance to one thread or serialize writes externally.
    """

    __slots__ = ("_lab", "_alpha")

    def __init__(self) -> None:
        self._lab: tuple[float, float, float] = (0.0, 0.0, 0.0)
        self._alpha: float = 1.0

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_space(
        cls,
        space: SpaceLike,
        c1: ChannelInput,
        c2: ChannelInput,
        c3: ChannelInput,
        alpha: ChannelInput = 1.0,
    ) -> Color:
        """Create a color from validated channels of ``space``."""
        return cls().set(space, c1, c2, c3, alpha=alpha)

    @classmethod
    def from_rgb(cls, r: ChannelInput, g: ChannelInput, b: ChannelInput, alpha: ChannelInput = 1.0) -> Color:
        return cls().set_rgb(r, g, b, alpha=alpha)

    @classmethod
    def from_hsv(cls, h: ChannelInput, s: ChannelInput, v: ChannelInput, alpha: ChannelInput = 1.0) -> Color:
        return cls().set_hsv(h, s, v, alpha=alpha)

    @classmethod
    def from_lch(cls, l: ChannelInput, c: ChannelInput, h: ChannelInput, alpha: ChannelInput = 1.0) -> Color:
        return cls().set_lch(l, c, h, alpha=alpha)

    @classmethod
    def from_oklab(cls, l: ChannelInput, a: ChannelInput, b: ChannelInput, alpha: ChannelInput = 1.0) -> Color:
        return cls().set_oklab(l, a, b, alpha=alpha)

    @classmethod
    def from_oklch(cls, l: ChannelInput, c: ChannelInput, h: ChannelInput, alpha: ChannelInput = 1.0) -> Color:
        return cls().set_oklch(l, c, h, alpha=alpha)

    @classmethod
    def from_lab(cls, l: ChannelInput, a: ChannelInput, b: ChannelInput, alpha: ChannelInput = 1.0) -> Color:
        return cls().set_lab(l, a, b, alpha=alpha)

    @classmethod
    def from_hex(cls, hex_color: str, alpha: ChannelInput = 1.0) -> Color:
        """Create a color from "#RRGGBB" or "#RGB"."""
        r, g, b = cs.hex_to_rgb(hex_color)
        return cls().set_rgb(float(r), float(g), float(b), alpha=alpha)

    # -------------------------------------------------------------------------
    # Canonical state
    # -------------------------------------------------------------------------

    def _assign(self, space: ColorSpace, channels: tuple[float, float, float], alpha: float) -> None:
        """Convert already-validated channels to Lab and replace the state."""
        lab = _TO_LAB[space](np.array(channels, dtype=np.float64))
        L = min(max(float(lab[0]), 0.0), 100.0)
        alpha = min(max(float(alpha), 0.0), 1.0)
        # Single assignment: readers never see a half-written color
        self._lab, self._alpha = (L, float(lab[1]), float(lab[2])), alpha

    @property
    def alpha(self) -> float:
        """Opacity in [0, 1]."""
        return self._alpha

    @alpha.setter
    def alpha(self, value: ChannelInput) -> None:
        self._alpha = alpha_channel(value)

    # -------------------------------------------------------------------------
    # Generic views
    # -------------------------------------------------------------------------

    def get(self, space: SpaceLike) -> ColorValue:
        """Snapshot of this color in ``space``, computed fresh."""
        space = ColorSpace.coerce(space)
        values = _FROM_LAB[space](np.array(self._lab, dtype=np.float64))
        c1, c2, c3 = (float(v) for v in values)
        if space in _UNIT_LIGHTNESS:
            # Bright unclipped Lab can land slightly above OKLab L = 1
            c1 = min(max(c1, 0.0), 1.0)
        return SNAPSHOT_TYPES[space](c1, c2, c3, self._alpha)

    def set(
        self,
        space: SpaceLike,
        c1: ChannelInput,
        c2: ChannelInput,
        c3: ChannelInput,
        alpha: Optional[ChannelInput] = None,
    ) -> Color:
        """
        Replace this color with channels given in ``space``.

        All channels (and alpha, when given) are validated before any
        state changes. alpha=None keeps the current alpha.

        Raises:
            TypeMismatchError: a value is neither a number nor a Percent
            ChannelRangeError: a value is outside its channel's domain

        Returns:
            self, for chaining
        """
        space = ColorSpace.coerce(space)
        channels = validate_channels(space, (c1, c2, c3))
        new_alpha = self._alpha if alpha is None else alpha_channel(alpha)
        self._assign(space, channels, new_alpha)
        return self

    # -------------------------------------------------------------------------
    # Named views
    # -------------------------------------------------------------------------

    def rgb(self) -> RGBValue:
        return self.get(ColorSpace.RGB)

    def set_rgb(self, r: ChannelInput, g: ChannelInput, b: ChannelInput, alpha: Optional[ChannelInput] = None) -> Color:
        """Set from sRGB on the 0-255 scale (Percent: 100% = 255). Out-of-gamut values clip."""
        return self.set(ColorSpace.RGB, r, g, b, alpha)

    def hsv(self) -> HSVValue:
        return self.get(ColorSpace.HSV)

    def set_hsv(self, h: ChannelInput, s: ChannelInput, v: ChannelInput, alpha: Optional[ChannelInput] = None) -> Color:
        """Set from HSV. Hue is any angle; s and v must be 0-1 or a Percent."""
        return self.set(ColorSpace.HSV, h, s, v, alpha)

    def lch(self) -> LCHValue:
        return self.get(ColorSpace.LCH)

    def set_lch(self, l: ChannelInput, c: ChannelInput, h: ChannelInput, alpha: Optional[ChannelInput] = None) -> Color:
        """Set from CIE LCH. Negative chroma clamps to 0."""
        return self.set(ColorSpace.LCH, l, c, h, alpha)

    def oklab(self) -> OKLabValue:
        return self.get(ColorSpace.OKLAB)

    def set_oklab(self, l: ChannelInput, a: ChannelInput, b: ChannelInput, alpha: Optional[ChannelInput] = None) -> Color:
        return self.set(ColorSpace.OKLAB, l, a, b, alpha)

    def oklch(self) -> OKLCHValue:
        return self.get(ColorSpace.OKLCH)

    def set_oklch(self, l: ChannelInput, c: ChannelInput, h: ChannelInput, alpha: Optional[ChannelInput] = None) -> Color:
        return self.set(ColorSpace.OKLCH, l, c, h, alpha)

    def lab(self) -> LabValue:
        return self.get(ColorSpace.LAB)

    def set_lab(self, l: ChannelInput, a: ChannelInput, b: ChannelInput, alpha: Optional[ChannelInput] = None) -> Color:
        """
        Set from CIE Lab.

        Lightness is a fraction in [0, 1], a number above 1 on the 0-100
        scale, or a Percent.
        """
        return self.set(ColorSpace.LAB, l, a, b, alpha)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def css(self, space: SpaceLike = ColorSpace.LAB, precision: Optional[CssPrecision] = None) -> str:
        """CSS-style string in ``space``, e.g. ``lab(50% 20 -30 / 1)``."""
        return color_to_css(self.get(space), precision)

    def hex(self) -> str:
        """"#RRGGBB" of the gamut-clipped sRGB value. Alpha is dropped."""
        return cs.rgb_to_hex(np.array(self.rgb().channels))

    def to_dict(self) -> dict:
        l, a, b = self._lab
        return {"l": l, "a": a, "b": b, "alpha": self._alpha}

    # -------------------------------------------------------------------------
    # Comparison / copying
    # -------------------------------------------------------------------------

    def clone(self) -> Color:
        """Independent copy."""
        other = Color.__new__(Color)
        other._lab, other._alpha = self._lab, self._alpha
        return other

    def is_close(self, other: Color, abs_tol: float = 1e-6) -> bool:
        """True if Lab channels and alpha agree within abs_tol."""
        pairs = zip(self._lab + (self._alpha,), other._lab + (other._alpha,))
        return all(math.isclose(x, y, abs_tol=abs_tol) for x, y in pairs)

    def delta_e(self, other: Color) -> float:
        """Perceptual distance (Euclidean OKLab ΔE) to ``other``."""
        return cs.delta_e_oklab(
            np.array(self.oklab().channels),
            np.array(other.oklab().channels),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._lab == other._lab and self._alpha == other._alpha

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        l, a, b = self._lab
        return f"Color(lab=({l:.4f}, {a:.4f}, {b:.4f}), alpha={self._alpha:.4f})"

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    @staticmethod
    def interpolate(color_a: Color, color_b: Color, t: float, space: SpaceLike = ColorSpace.RGB) -> Color:
        """
        Blend two colors in ``space``.

        t is clamped to [0, 1]. Non-hue channels blend linearly, the hue
        channel (HSV, LCH, OKLCH) along the shorter arc. Alpha blends
        linearly regardless of space.

        Returns:
            A new Color; neither input is modified
        """
        space = ColorSpace.coerce(space)
        t = clamp_unit(t)

        blended = interpolate_channels(
            space,
            color_a.get(space).channels,
            color_b.get(space).channels,
            t,
        )
        result = Color()
        result._assign(space, blended, lerp(color_a.alpha, color_b.alpha, t))
        return result
