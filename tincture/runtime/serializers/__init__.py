# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Serializers for Tincture colors and gradients."""

from tincture.runtime.serializers.base import format_hue, format_number, format_percent
from tincture.runtime.serializers.css import (
    color_to_css,
    format_position,
    gradient_to_css,
)

__all__ = [
    "color_to_css",
    "gradient_to_css",
    "format_position",
    "format_number",
    "format_hue",
    "format_percent",
]
