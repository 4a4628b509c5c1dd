# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Multi-stop linear gradients.

A LinearGradient is an ordered list of stops plus an angle and the color
space used to blend between stops. Stops are kept sorted by position
after every mutation; stops sharing a position keep their insertion
order.

Positions follow the CSS dual convention: a value <= 1 is a fraction of
the gradient line, a value > 1 is already a percentage. Mixing the two
within one gradient is allowed but rarely what the caller wants.

Stops may be added without a position. While any position is missing the
stops stay in insertion order, evaluation is refused, and
fill_missing_positions() must be called to spread them out.
"""

from __future__ import annotations

import logging
import math
from bisect import bisect_right
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Iterator, Optional, Union

from tincture.engine.color import Color
from tincture.engine.config import CssPrecision, GradientConfig, InterpolationConfig
from tincture.engine.interpolation import clamp_unit, color_ease_out, lerp
from tincture.errors import ChannelRangeError, ConfigurationError, TypeMismatchError
from tincture.runtime.serializers.css import gradient_to_css
from tincture.schema import ColorSpace
from tincture.schema.color_values import is_real

logger = logging.getLogger(__name__)


def _position(value: object, field: str) -> Optional[float]:
    if value is None:
        return None
    if not is_real(value):
        raise TypeMismatchError(f"'{field}' must be a number or None, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise ChannelRangeError(field, f"'{field}' must be finite, got {value}")
    return value


@dataclass(frozen=True)
class GradientStop:
    """
    A color pinned to a position on the gradient line.

    Attributes:
        color: Stop color
        position: Fraction (<= 1), percentage (> 1), or None if unresolved
        end_position: Optional second position; the color is held solid
            from position to end_position (CSS double-position stop)
    """
    color: Color
    position: Optional[float] = None
    end_position: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise TypeMismatchError(f"Stop color must be a Color, got {type(self.color).__name__}")
        object.__setattr__(self, "position", _position(self.position, "position"))
        object.__setattr__(self, "end_position", _position(self.end_position, "end_position"))
        if self.end_position is not None and self.position is None:
            raise ConfigurationError("A stop with end_position needs a position")

    def to_dict(self) -> dict:
        d = {"color": self.color.to_dict(), "position": self.position}
        if self.end_position is not None:
            d["end_position"] = self.end_position
        return d


StopLike = Union[GradientStop, tuple]


def _as_stop(stop: StopLike) -> GradientStop:
    if isinstance(stop, GradientStop):
        return stop
    if isinstance(stop, tuple) and 1 <= len(stop) <= 3:
        return GradientStop(*stop)
    raise TypeMismatchError(f"Expected GradientStop or (color, position) tuple, got {stop!r}")


class LinearGradient:
    """
    A CSS-style linear gradient.

    Args:
        stops: GradientStops or (color, position[, end_position]) tuples
        angle: Direction in degrees (default from GradientConfig: 180)
        space: Color space to interpolate in (default from GradientConfig: rgb)
        config: Gradient defaults (uses GradientConfig() if None)
    """

    def __init__(
        self,
        stops: Iterable[StopLike] = (),
        angle: Optional[float] = None,
        space: Union[ColorSpace, str, None] = None,
        *,
        config: Optional[GradientConfig] = None,
    ) -> None:
        cfg = config or GradientConfig()
        self.angle = _position(cfg.angle if angle is None else angle, "angle")
        self._space = ColorSpace.coerce(cfg.space if space is None else space)
        self._stops: list[GradientStop] = [_as_stop(s) for s in stops]
        self._sort()

    # -------------------------------------------------------------------------
    # Stops
    # -------------------------------------------------------------------------

    @property
    def space(self) -> ColorSpace:
        return self._space

    @space.setter
    def space(self, value: Union[ColorSpace, str]) -> None:
        self._space = ColorSpace.coerce(value)

    @property
    def stops(self) -> tuple[GradientStop, ...]:
        """Stops in order (snapshot of the list; colors are shared)."""
        return tuple(self._stops)

    @property
    def is_resolved(self) -> bool:
        """True when every stop has a position."""
        return all(s.position is not None for s in self._stops)

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[GradientStop]:
        return iter(tuple(self._stops))

    def _sort(self) -> None:
        # list.sort is stable: equal positions keep insertion order
        if self.is_resolved:
            self._stops.sort(key=lambda s: s.position)

    def add_stop(
        self,
        color: Color,
        position: Optional[float] = None,
        end_position: Optional[float] = None,
    ) -> LinearGradient:
        """Insert a stop and re-sort. Returns self."""
        self._stops.append(GradientStop(color, position, end_position))
        self._sort()
        return self

    def fill_missing_positions(self) -> LinearGradient:
        """
        Resolve stops without a position.

        Each run of unresolved stops is spaced evenly between the resolved
        stops on either side, e.g. [0, None, None, 1] → [0, 1/3, 2/3, 1].

        Raises:
            ConfigurationError: the first or last stop has no position

        Returns:
            self
        """
        if not self._stops or self.is_resolved:
            return self
        if self._stops[0].position is None or self._stops[-1].position is None:
            raise ConfigurationError(
                "Cannot infer positions: the first and last stops need explicit positions"
            )

        filled = list(self._stops)
        i = 0
        while i < len(filled):
            if filled[i].position is not None:
                i += 1
                continue

            before = i - 1
            after = i
            while filled[after].position is None:
                after += 1

            lo = filled[before].position
            hi = filled[after].position
            span = after - before
            for k in range(i, after):
                filled[k] = replace(filled[k], position=lo + (hi - lo) * (k - before) / span)
            logger.debug("Filled %d stop position(s) between %s and %s", after - i, lo, hi)
            i = after

        self._stops = filled
        self._sort()
        return self

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def _points(self) -> list[tuple[float, Color]]:
        """
        (position, color) pairs along the line, double-position stops expanded.

        Positions never decrease: a position below an earlier one is raised
        to it, as CSS does.
        """
        if not self._stops:
            raise ConfigurationError("Gradient has no stops")
        if not self.is_resolved:
            raise ConfigurationError(
                "Gradient has unresolved stop positions; call fill_missing_positions() first"
            )

        points: list[tuple[float, Color]] = []
        running = -math.inf
        for stop in self._stops:
            for pos in (stop.position, stop.end_position):
                if pos is None:
                    continue
                running = max(running, pos)
                points.append((running, stop.color))
        return points

    def get_color_at(self, position: float) -> Color:
        """
        Color at ``position`` on the gradient line.

        Positions outside the stop range clamp to the first/last stop,
        whose color is returned unchanged (as a copy).

        Raises:
            ConfigurationError: no stops, or unresolved positions
        """
        position = _position(position, "position")
        if position is None:
            raise TypeMismatchError("position must be a number")

        points = self._points()
        first_pos, first_color = points[0]
        last_pos, last_color = points[-1]
        if position <= first_pos:
            return first_color.clone()
        if position >= last_pos:
            return last_color.clone()

        positions = [p for p, _ in points]
        i = bisect_right(positions, position) - 1
        pos_a, color_a = points[i]
        pos_b, color_b = points[i + 1]
        t = (position - pos_a) / (pos_b - pos_a)
        return Color.interpolate(color_a, color_b, t, self._space)

    # -------------------------------------------------------------------------
    # Morphing
    # -------------------------------------------------------------------------

    def morph(
        self,
        other: LinearGradient,
        t: float,
        *,
        config: Optional[InterpolationConfig] = None,
    ) -> LinearGradient:
        """
        Blend this gradient into ``other``.

        Both gradients are sampled at the union of their stop positions,
        so gradients with different stop counts blend without resampling
        artifacts. Each pair is blended in other's space with the fade-out
        chroma correction; the angle blends linearly.

        Returns:
            A new gradient in other's space
        """
        t = clamp_unit(t)
        angle = lerp(self.angle, other.angle, t)

        positions = sorted(
            {p for p, _ in self._points()} | {p for p, _ in other._points()}
        )
        logger.debug("Morphing gradients at t=%.3f over %d positions", t, len(positions))

        stops = [
            GradientStop(
                color_ease_out(
                    self.get_color_at(pos),
                    other.get_color_at(pos),
                    t,
                    other.space,
                    chroma_correction=True,
                    config=config,
                ),
                pos,
            )
            for pos in positions
        ]
        return LinearGradient(stops, angle=angle, space=other.space)

    def morpher(
        self,
        other: LinearGradient,
        *,
        config: Optional[InterpolationConfig] = None,
    ) -> Callable[[float], LinearGradient]:
        """
        Reusable ``t → morph(other, t)`` function.

        The gradients are captured by reference: later edits to either are
        seen by subsequent calls.
        """
        def _at(t: float) -> LinearGradient:
            return self.morph(other, t, config=config)

        return _at

    # -------------------------------------------------------------------------
    # Output / copying
    # -------------------------------------------------------------------------

    def css(
        self,
        space: Union[ColorSpace, str, None] = None,
        precision: Optional[CssPrecision] = None,
    ) -> str:
        """
        ``linear-gradient(<angle>deg in <space>, <color> <pos>%, ...)``.

        Positions <= 1 print as value·100%, positions > 1 print as-is.
        An empty gradient prints "none".
        """
        return gradient_to_css(self, space, precision)

    def clone(self) -> LinearGradient:
        """Independent copy, colors included."""
        copy = LinearGradient(angle=self.angle, space=self._space)
        copy._stops = [replace(s, color=s.color.clone()) for s in self._stops]
        return copy

    def to_dict(self) -> dict:
        return {
            "angle": self.angle,
            "space": self._space.value,
            "stops": [s.to_dict() for s in self._stops],
        }

    def __repr__(self) -> str:
        return (
            f"LinearGradient(angle={self.angle}, space={self._space.value!r}, "
            f"stops={len(self._stops)})"
        )
