# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Value types for colors and channel inputs.

Snapshots are frozen dataclasses: reading a color never hands out a
reference into its canonical state.
"""

from tincture.schema.color_values import (
    SNAPSHOT_TYPES,
    ChannelInput,
    ChannelValue,
    ColorSpace,
    ColorValue,
    HSVValue,
    LabValue,
    LCHValue,
    Number,
    OKLabValue,
    OKLCHValue,
    Percent,
    RGBValue,
    coerce_channel,
    pct,
)

__all__ = [
    # Color spaces
    "ColorSpace",
    # Channel inputs
    "Number",
    "Percent",
    "pct",
    "coerce_channel",
    "ChannelValue",
    "ChannelInput",
    # Snapshots
    "RGBValue",
    "HSVValue",
    "LCHValue",
    "OKLabValue",
    "OKLCHValue",
    "LabValue",
    "ColorValue",
    "SNAPSHOT_TYPES",
]
