# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Value types shared across Tincture.

Design principles:
- Snapshots are immutable: every read of a color produces a fresh,
  frozen value that never aliases the color's canonical state
- Channel inputs are an explicit tagged union: Number | Percent
- Color spaces are an Enum, not free-form strings

Channel ranges of the snapshot types:
- RGB:   r, g, b in [0, 255]
- HSV:   h in [0, 360), s, v in [0, 1]
- LCH:   l in [0, 100], c >= 0, h in [0, 360)
- OKLab: l in [0, 1], a, b unbounded (~[-0.4, 0.4] for sRGB)
- OKLCH: l in [0, 1], c >= 0, h in [0, 360)
- Lab:   l in [0, 100], a, b unbounded (~[-160, 160])
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from tincture.errors import ChannelRangeError, ConfigurationError, TypeMismatchError


# =============================================================================
# Color Spaces
# =============================================================================


class ColorSpace(Enum):
    """Color spaces a Color can be read from, written to and blended in."""

    RGB = "rgb"
    HSV = "hsv"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    LAB = "lab"

    @classmethod
    def coerce(cls, value: Union[ColorSpace, str]) -> ColorSpace:
        """Accept a ColorSpace or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        known = ", ".join(s.value for s in cls)
        raise ConfigurationError(f"Unknown color space {value!r} (expected one of: {known})")

    @property
    def hue_index(self) -> Optional[int]:
        """Index of the angular channel, or None for rectangular spaces."""
        return _HUE_INDEX.get(self)


_HUE_INDEX = {
    ColorSpace.HSV: 0,
    ColorSpace.LCH: 2,
    ColorSpace.OKLCH: 2,
}


# =============================================================================
# Channel Values (Number | Percent)
# =============================================================================


def is_real(value: object) -> bool:
    """True for real numbers, excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Number:
    """A plain numeric channel value, interpreted on the channel's own scale."""
    value: float

    def __post_init__(self) -> None:
        if not is_real(self.value):
            raise TypeMismatchError(f"Number requires a real value, got {self.value!r}")


@dataclass(frozen=True, slots=True)
class Percent:
    """
    A percentage channel value in [0, 100].

    How a percentage maps onto a channel depends on the channel:
    unit channels (alpha, saturation, OKLab lightness) divide by 100,
    CIE lightness takes it as-is, chroma and a/b axes scale by the
    CSS reference range of their space.
    """
    value: float

    def __post_init__(self) -> None:
        if not is_real(self.value):
            raise TypeMismatchError(f"Percent requires a real value, got {self.value!r}")
        if not math.isfinite(self.value) or not 0.0 <= self.value <= 100.0:
            raise ChannelRangeError("percent", f"Percent must be 0-100, got {self.value}")

    def to_number(self) -> float:
        """Fraction in [0, 1]."""
        return self.value / 100.0

    def __str__(self) -> str:
        return f"{self.value:g}%"


ChannelValue = Union[Number, Percent]
ChannelInput = Union[float, int, Number, Percent]


def pct(value: float) -> Percent:
    """Shorthand for Percent(value)."""
    return Percent(value)


def coerce_channel(value: object, field: str) -> ChannelValue:
    """
    Tag a raw input as Number or Percent.

    Raises:
        TypeMismatchError: value is neither a real number nor a Percent
    """
    if isinstance(value, (Number, Percent)):
        return value
    if is_real(value):
        return Number(float(value))
    raise TypeMismatchError(
        f"'{field}' must be a number or Percent, got {type(value).__name__}"
    )


# =============================================================================
# Snapshots
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBValue:
    """sRGB channels on the 0-255 scale."""
    space: ClassVar[ColorSpace] = ColorSpace.RGB
    r: float
    g: float
    b: float
    alpha: float = 1.0

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b, "alpha": self.alpha}


@dataclass(frozen=True, slots=True)
class HSVValue:
    """Hue in degrees, saturation and value as fractions."""
    space: ClassVar[ColorSpace] = ColorSpace.HSV
    h: float
    s: float
    v: float
    alpha: float = 1.0

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.v)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "v": self.v, "alpha": self.alpha}


@dataclass(frozen=True, slots=True)
class LCHValue:
    """CIE LCh(ab): cylindrical form of CIE Lab."""
    space: ClassVar[ColorSpace] = ColorSpace.LCH
    l: float
    c: float
    h: float
    alpha: float = 1.0

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.l, self.c, self.h)

    def to_dict(self) -> dict:
        return {"l": self.l, "c": self.c, "h": self.h, "alpha": self.alpha}


@dataclass(frozen=True, slots=True)
class OKLabValue:
    """OKLab with lightness as a fraction."""
    space: ClassVar[ColorSpace] = ColorSpace.OKLAB
    l: float
    a: float
    b: float
    alpha: float = 1.0

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.l, self.a, self.b)

    def to_dict(self) -> dict:
        return {"l": self.l, "a": self.a, "b": self.b, "alpha": self.alpha}


@dataclass(frozen=True, slots=True)
class OKLCHValue:
    """OKLCH: cylindrical form of OKLab."""
    space: ClassVar[ColorSpace] = ColorSpace.OKLCH
    l: float
    c: float
    h: float
    alpha: float = 1.0

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.l, self.c, self.h)

    def to_dict(self) -> dict:
        return {"l": self.l, "c": self.c, "h": self.h, "alpha": self.alpha}


@dataclass(frozen=True, slots=True)
class LabValue:
    """CIE Lab (D65), the canonical representation."""
    space: ClassVar[ColorSpace] = ColorSpace.LAB
    l: float
    a: float
    b: float
    alpha: float = 1.0

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.l, self.a, self.b)

    def to_dict(self) -> dict:
        return {"l": self.l, "a": self.a, "b": self.b, "alpha": self.alpha}


ColorValue = Union[RGBValue, HSVValue, LCHValue, OKLabValue, OKLCHValue, LabValue]

SNAPSHOT_TYPES: dict[ColorSpace, type] = {
    ColorSpace.RGB: RGBValue,
    ColorSpace.HSV: HSVValue,
    ColorSpace.LCH: LCHValue,
    ColorSpace.OKLAB: OKLabValue,
    ColorSpace.OKLCH: OKLCHValue,
    ColorSpace.LAB: LabValue,
}
