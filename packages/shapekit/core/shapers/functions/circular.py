"""Circular and elliptic shapers.

All of these evaluate arcs directly from the input coordinate; there is
no iterative solving. Square roots are taken with the radicand floored at
zero so inputs outside [0, 1] still return a number.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapekit.core.shapers.normalization import clamp_open, clamp_unit, safe_sqrt


@dataclass(frozen=True)
class CircularEaseIn:
    """Quarter circle centered at (0, 1)."""

    def __call__(self, x: float) -> float:
        return 1.0 - safe_sqrt(1.0 - x * x)


@dataclass(frozen=True)
class CircularEaseOut:
    """Quarter circle centered at (1, 0)."""

    def __call__(self, x: float) -> float:
        return safe_sqrt(1.0 - (1.0 - x) * (1.0 - x))


@dataclass(frozen=True)
class DoubleCircleSeat:
    """Two circular arcs meeting at (a, a) with a horizontal tangent."""

    a: float

    def __call__(self, x: float) -> float:
        a = self.a
        if x <= a:
            return safe_sqrt(a * a - (x - a) * (x - a))
        return 1.0 - safe_sqrt((1.0 - a) * (1.0 - a) - (x - a) * (x - a))


@dataclass(frozen=True)
class DoubleCircleSigmoid:
    """Two circular arcs meeting at (a, a) with a vertical tangent."""

    a: float

    def __call__(self, x: float) -> float:
        a = self.a
        if x <= a:
            return a - safe_sqrt(a * a - x * x)
        return a + safe_sqrt((1.0 - a) * (1.0 - a) - (x - 1.0) * (x - 1.0))


@dataclass(frozen=True)
class DoubleEllipticSeat:
    """Two elliptical arcs meeting at (a, b) with a horizontal tangent."""

    a: float
    b: float

    def __call__(self, x: float) -> float:
        a, b = self.a, self.b
        if x <= a:
            return (b / a) * safe_sqrt(a * a - (x - a) * (x - a))
        return 1.0 - ((1.0 - b) / (1.0 - a)) * safe_sqrt(
            (1.0 - a) * (1.0 - a) - (x - a) * (x - a)
        )


@dataclass(frozen=True)
class DoubleEllipticSigmoid:
    """Two elliptical arcs meeting at (a, b) with a vertical tangent."""

    a: float
    b: float

    def __call__(self, x: float) -> float:
        a, b = self.a, self.b
        if x <= a:
            return b * (1.0 - safe_sqrt(a * a - x * x) / a)
        return b + ((1.0 - b) / (1.0 - a)) * safe_sqrt(
            (1.0 - a) * (1.0 - a) - (x - 1.0) * (x - 1.0)
        )


def circular_ease_in() -> CircularEaseIn:
    """Create a circular ease-in."""
    return CircularEaseIn()


def circular_ease_out() -> CircularEaseOut:
    """Create a circular ease-out."""
    return CircularEaseOut()


def double_circle_seat(a: float = 0.5) -> DoubleCircleSeat:
    """Create a double-circle seat.

    Args:
        a: Inflection point along the diagonal, clamped to [0, 1].

    Returns:
        Shaper with ``f(a) == a``.
    """
    return DoubleCircleSeat(a=clamp_unit(a))


def double_circle_sigmoid(a: float = 0.5) -> DoubleCircleSigmoid:
    """Create a double-circle sigmoid.

    Args:
        a: Inflection point along the diagonal, clamped to [0, 1].

    Returns:
        Shaper with ``f(a) == a``.
    """
    return DoubleCircleSigmoid(a=clamp_unit(a))


def double_elliptic_seat(a: float = 0.5, b: float = 0.5) -> DoubleEllipticSeat:
    """Create a double-elliptic seat, a generalization of the double-circle seat.

    Args:
        a: Joint x, clamped to [EPSILON, 1 - EPSILON].
        b: Joint y, clamped to [0, 1]. Sets the axis ratio of both ellipses.

    Returns:
        Shaper with ``f(a) == b``.
    """
    return DoubleEllipticSeat(a=clamp_open(a), b=clamp_unit(b))


def double_elliptic_sigmoid(a: float = 0.5, b: float = 0.5) -> DoubleEllipticSigmoid:
    """Create a double-elliptic sigmoid, a generalization of the double-circle sigmoid.

    Args:
        a: Joint x, clamped to [EPSILON, 1 - EPSILON].
        b: Joint y, clamped to [0, 1].

    Returns:
        Shaper with ``f(a) == b``.
    """
    return DoubleEllipticSigmoid(a=clamp_open(a), b=clamp_unit(b))
