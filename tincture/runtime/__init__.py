# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Output runtime for Tincture.

Serialization of colors and gradients into CSS-style strings. The
serialized form is the contract with external consumers such as CSS
gradient parsers.
"""

from tincture.runtime.serializers import (
    color_to_css,
    format_number,
    format_position,
    gradient_to_css,
)

__all__ = [
    "color_to_css",
    "gradient_to_css",
    "format_position",
    "format_number",
]
