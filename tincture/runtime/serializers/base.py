# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Number formatting shared by serializers."""

from __future__ import annotations

import math


def format_number(value: float, decimals: int = 4) -> str:
    """
    Round half-up to ``decimals`` places and drop trailing zeros.

    Non-finite values format as "0"; negative zero formats as "0".

    >>> format_number(12.345678)
    '12.3457'
    >>> format_number(100.0)
    '100'
    """
    value = float(value)
    if not math.isfinite(value):
        return "0"

    scale = 10 ** decimals
    rounded = math.floor(value * scale + 0.5) / scale
    if rounded == 0:
        return "0"

    text = f"{rounded:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_hue(value: float, decimals: int = 2) -> str:
    """Format an angle in degrees; values that round up to 360 print as 0."""
    text = format_number(value, decimals)
    if float(text) >= 360.0:
        return "0"
    return text


def format_percent(fraction: float, decimals: int = 4) -> str:
    """Format a fraction as a percentage number (no '%' sign)."""
    return format_number(fraction * 100.0, decimals)
