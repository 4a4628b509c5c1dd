# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion graph (every edge has a forward and an inverse):

    Lab ↔ XYZ ↔ Linear RGB ↔ sRGB ↔ HSV
     ↕              ↕
    LCH           OKLab ↔ OKLCH

References:
- CIE Lab: D65 reference white, CIE epsilon/kappa constants
- sRGB: IEC 61966-2-1 piecewise transfer function
- OKLab: https://bottosson.github.io/posts/oklab/

All functions operate on arrays of shape (..., 3); a single color is an
array of shape (3,). They are pure NumPy, deterministic and total for
finite input.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tincture.errors import TypeMismatchError


# =============================================================================
# Constants
# =============================================================================

# D65 reference white, Y normalized to 100
WHITE_D65 = np.array([95.047, 100.0, 108.883], dtype=np.float64)

EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 27.0

# Below these the color is treated as neutral and its hue reported as 0.
# Conversion round trips leave residues far under any visible difference
# (about 2e-5 Lab chroma for white).
LAB_ACHROMATIC = 1e-4
OKLAB_ACHROMATIC = 1e-5
# max - min of sRGB channels on the 0-1 scale
HSV_ACHROMATIC = 1e-6


def normalize_hue(degrees):
    """Wrap degrees into [0, 360). Works on scalars and arrays."""
    wrapped = np.mod(np.mod(degrees, 360.0) + 360.0, 360.0)
    # fmod of values a hair below 360 can round up to exactly 360.0
    wrapped = np.where(wrapped >= 360.0, 0.0, wrapped)
    if np.ndim(wrapped) == 0:
        return float(wrapped)
    return wrapped


def _split(values: NDArray[np.float64]) -> tuple[NDArray, NDArray, NDArray]:
    return values[..., 0], values[..., 1], values[..., 2]


# =============================================================================
# CIE Lab ↔ XYZ
# =============================================================================


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE Lab to XYZ (D65, Y in [0, 100]).

    The X and Z axes use the cube test on f³ against epsilon; the Y axis
    tests L directly against kappa·epsilon (= 8).
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = _split(lab)

    fy = (L + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0

    def finv(t):
        t3 = t ** 3
        return np.where(t3 > EPSILON, t3, (116.0 * t - 16.0) / KAPPA)

    xr = finv(fx)
    yr = np.where(L > KAPPA * EPSILON, fy ** 3, L / KAPPA)
    zr = finv(fz)

    return np.stack([xr, yr, zr], axis=-1) * WHITE_D65


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert XYZ (D65, Y in [0, 100]) to CIE Lab."""
    xyz = np.asarray(xyz, dtype=np.float64)
    ratios = xyz / WHITE_D65

    f = np.where(ratios > EPSILON, np.cbrt(ratios), (KAPPA * ratios + 16.0) / 116.0)
    fx, fy, fz = _split(f)

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # Keep the power branch away from negative bases; np.where evaluates both
    safe = np.maximum(srgb, 0.04045)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((safe + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB.

    Inverse of srgb_to_linear. Out-of-gamut values are not clipped here;
    clipping happens in lab_to_rgb.
    """
    linear = np.asarray(linear, dtype=np.float64)
    safe = np.maximum(linear, 0.0031308)
    return np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(safe, 1.0 / 2.4) - 0.055
    )


# =============================================================================
# XYZ ↔ Linear RGB
# =============================================================================

# Linear sRGB to XYZ (D65), rows sum to the reference white
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert XYZ (Y in [0, 100]) to linear RGB (nominally [0, 1])."""
    xyz = np.asarray(xyz, dtype=np.float64) / 100.0
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB to XYZ (Y in [0, 100])."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ) * 100.0


# =============================================================================
# Lab ↔ sRGB (0-255)
# =============================================================================


def lab_to_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE Lab to sRGB on the 0-255 scale.

    Full chain: Lab → XYZ → Linear RGB → sRGB. Out-of-gamut colors are
    clipped to [0, 255] (gamut clamping).
    """
    linear = xyz_to_linear_rgb(lab_to_xyz(lab))
    srgb = linear_to_srgb(linear)
    return np.clip(srgb, 0.0, 1.0) * 255.0


def rgb_to_lab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB on the 0-255 scale to CIE Lab.

    Input is clipped to [0, 255] first.
    """
    srgb = np.clip(np.asarray(rgb, dtype=np.float64) / 255.0, 0.0, 1.0)
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


# =============================================================================
# Rectangular ↔ Cylindrical (shared by Lab/LCH and OKLab/OKLCH)
# =============================================================================


def _to_polar(values: NDArray[np.float64], tolerance: float) -> NDArray[np.float64]:
    values = np.asarray(values, dtype=np.float64)
    L, a, b = _split(values)

    C = np.hypot(a, b)
    H = normalize_hue(np.degrees(np.arctan2(b, a)))
    # Hue of a neutral is 0 by convention
    H = np.where(C < tolerance, 0.0, H)
    return np.stack([L, C, H], axis=-1)


def _from_polar(values: NDArray[np.float64]) -> NDArray[np.float64]:
    values = np.asarray(values, dtype=np.float64)
    L, C, H = _split(values)

    H_rad = np.radians(normalize_hue(H))
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE Lab to LCH.

    Returns:
        Array of shape (..., 3) with (L, C, H); H in degrees [0, 360)
    """
    return _to_polar(lab, LAB_ACHROMATIC)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert LCH (H in degrees, any magnitude) to CIE Lab."""
    return _from_polar(lch)


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    return _to_polar(lab, OKLAB_ACHROMATIC)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    return _from_polar(lch)


# =============================================================================
# sRGB ↔ HSV
# =============================================================================


def rgb_to_hsv(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB (0-255) to HSV.

    Returns:
        Array of shape (..., 3) with (H, S, V); H in degrees [0, 360),
        S and V in [0, 1]. H and S are 0 for grays and black.
    """
    srgb = np.clip(np.asarray(rgb, dtype=np.float64) / 255.0, 0.0, 1.0)
    r, g, b = _split(srgb)

    cmax = np.max(srgb, axis=-1)
    cmin = np.min(srgb, axis=-1)
    delta = cmax - cmin
    neutral = delta < HSV_ACHROMATIC
    safe_delta = np.where(neutral, 1.0, delta)

    h = np.select(
        [neutral, cmax == r, cmax == g],
        [
            0.0,
            60.0 * np.mod((g - b) / safe_delta, 6.0),
            60.0 * ((b - r) / safe_delta + 2.0),
        ],
        default=60.0 * ((r - g) / safe_delta + 4.0),
    )
    h = np.asarray(normalize_hue(h), dtype=np.float64)

    s = np.where(neutral | (cmax == 0.0), 0.0, delta / np.where(cmax == 0.0, 1.0, cmax))
    return np.stack([h, s, cmax], axis=-1)


def hsv_to_rgb(hsv: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSV to sRGB (0-255).

    Hue is wrapped into [0, 360); saturation and value are clipped to [0, 1].
    """
    hsv = np.asarray(hsv, dtype=np.float64)
    h, s, v = _split(hsv)
    h = np.asarray(normalize_hue(h), dtype=np.float64)
    s = np.clip(s, 0.0, 1.0)
    v = np.clip(v, 0.0, 1.0)

    c = v * s
    x = c * (1.0 - np.abs(np.mod(h / 60.0, 2.0) - 1.0))
    m = v - c
    zero = np.zeros_like(c)

    sector = np.floor(h / 60.0).astype(np.int64)
    conditions = [sector == i for i in range(5)]
    r = np.select(conditions, [c, x, zero, zero, x], default=c)
    g = np.select(conditions, [x, c, c, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, c, c], default=x)

    return np.stack([r + m, g + m, b + m], axis=-1) * 255.0


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Signed cube root keeps out-of-gamut colors finite
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cubed)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)

    # Cube
    lms = lms_cbrt ** 3

    # LMS to RGB
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# CIE Lab ↔ OKLab (via XYZ and Linear RGB)
# =============================================================================


def lab_to_oklab(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE Lab to OKLab.

    Full chain: Lab → XYZ → Linear RGB → OKLab. No gamut clipping, so
    the conversion is invertible for out-of-gamut colors too.
    """
    return linear_rgb_to_oklab(xyz_to_linear_rgb(lab_to_xyz(lab)))


def oklab_to_lab(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert OKLab to CIE Lab. Inverse of lab_to_oklab."""
    return xyz_to_lab(linear_rgb_to_xyz(oklab_to_linear_rgb(lab)))


# =============================================================================
# Hex
# =============================================================================


def rgb_to_hex(rgb: NDArray[np.float64]) -> str:
    """
    Format a single sRGB (0-255) color as a hex string.

    Returns:
        Hex string like "#3941C8"
    """
    channels = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 255.0)
    r, g, b = (int(np.floor(c + 0.5)) for c in channels)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(hex_color: str) -> NDArray[np.float64]:
    """
    Parse "#RRGGBB", "#RGB" (with or without '#') into sRGB (0-255).

    Raises:
        TypeMismatchError: not a string or not valid hex
    """
    if not isinstance(hex_color, str):
        raise TypeMismatchError(f"Hex color must be a string, got {type(hex_color).__name__}")

    digits = hex_color.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise TypeMismatchError(f"Invalid hex color: {hex_color!r}")

    try:
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
    except ValueError:
        raise TypeMismatchError(f"Invalid hex color: {hex_color!r}") from None

    return np.array([r, g, b], dtype=np.float64)


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def delta_e_oklab(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
) -> NDArray[np.float64] | float:
    """
    Perceptual color difference as Euclidean distance in OKLab.

    Reference thresholds (OKLab Euclidean, 0-1 scale):
    - ΔE ≈ 0.02: barely perceptible (expert eye)
    - ΔE ≈ 0.04: noticeable difference
    - ΔE ≈ 0.08+: clearly different colors

    Args:
        lab1: Array of shape (..., 3) with OKLab values
        lab2: Array of the same shape

    Returns:
        float for single colors, array of shape (...) for batches
    """
    delta = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    distance = np.sqrt(np.sum(delta ** 2, axis=-1))
    if np.ndim(distance) == 0:
        return float(distance)
    return distance
