# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Exception types raised by Tincture.

All errors are programmer errors: they are raised synchronously at the
call site and leave the target color or gradient unmodified.
"""

from __future__ import annotations

from typing import Optional


class TinctureError(Exception):
    """Base class for all Tincture errors."""


class TypeMismatchError(TinctureError, TypeError):
    """A value is neither a real number nor a Percent."""


class ChannelRangeError(TinctureError, ValueError):
    """
    A numeric channel value lies outside its declared domain.

    Attributes:
        field: Name of the offending channel (e.g. "alpha", "hsv.s")
    """

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message or f"Value out of range for '{field}'")


class ConfigurationError(TinctureError, ValueError):
    """A gradient, scale or color space is configured in an unusable way."""
