"""Exponential and logistic shapers."""

from __future__ import annotations

from dataclasses import dataclass
import math

from shapekit.core.shapers.normalization import clamp_open, clamp_unit, invert, safe_pow


def _logistic(z: float) -> float:
    """Standard logistic ``1 / (1 + e^-z)`` without overflow for large |z|."""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    e = math.exp(z)
    return e / (1.0 + e)


@dataclass(frozen=True)
class ExponentialEasing:
    """``y = x ** exponent``; inputs below zero evaluate to zero."""

    exponent: float

    def __call__(self, x: float) -> float:
        return safe_pow(max(0.0, x), self.exponent)


@dataclass(frozen=True)
class DoubleExponentialSeat:
    """Two exponential arcs joined at (0.5, 0.5) with a flat seat."""

    exponent: float

    def __call__(self, x: float) -> float:
        if x <= 0.5:
            return safe_pow(max(0.0, 2.0 * x), self.exponent) / 2.0
        return 1.0 - safe_pow(max(0.0, 2.0 * (1.0 - x)), self.exponent) / 2.0


class DoubleExponentialSigmoid(DoubleExponentialSeat):
    """Same arc pair as the seat, with an exponent > 1 for an S-shape."""


@dataclass(frozen=True)
class LogisticSigmoid:
    """Logistic curve rescaled so that f(0) = 0, f(0.5) = 0.5 and f(1) = 1."""

    steepness: float
    low: float
    high: float

    def __call__(self, x: float) -> float:
        y = (_logistic((x - 0.5) * self.steepness * 2.0) - self.low) / (self.high - self.low)
        return clamp_unit(y)


def exponential_easing(a: float = 0.5) -> ExponentialEasing:
    """Create an exponential ease-in / ease-out.

    Below ``a = 0.5`` the curve de-emphasises (exponent ``2a`` < 1, an
    ease-out); above it emphasises (exponent ``1 / (1 - 2(a - 0.5))`` > 1,
    an ease-in). ``a = 0.5`` is the identity.

    Args:
        a: Control parameter, clamped to [EPSILON, 1 - EPSILON].

    Returns:
        Exponential shaper.

    Example:
        >>> exponential_easing(0.5)(0.3)
        0.3
    """
    a = clamp_open(a)
    if a < 0.5:
        exponent = 2.0 * a
    else:
        exponent = 1.0 / (1.0 - 2.0 * (a - 0.5))
    return ExponentialEasing(exponent=exponent)


def double_exponential_seat(a: float = 0.5) -> DoubleExponentialSeat:
    """Create a double-exponential seat.

    Args:
        a: Seat flatness, clamped to [EPSILON, 1 - EPSILON]. The arcs use
            the exponent ``1 - a``.

    Returns:
        Shaper passing through (0, 0), (0.5, 0.5) and (1, 1).
    """
    return DoubleExponentialSeat(exponent=1.0 - clamp_open(a))


def double_exponential_sigmoid(a: float = 0.5) -> DoubleExponentialSigmoid:
    """Create a double-exponential sigmoid.

    ``a`` is inverted before use so that larger values give a steeper
    sigmoid; the arcs use the exponent ``1 / (1 - a)``. Approximates the
    raised inverted cosine to within 1% near ``a = 0.426``.

    Args:
        a: Steepness, clamped to [EPSILON, 1 - EPSILON].

    Returns:
        Shaper passing through (0, 0), (0.5, 0.5) and (1, 1).
    """
    return DoubleExponentialSigmoid(exponent=1.0 / invert(clamp_open(a)))


def logistic_sigmoid(a: float = 0.5) -> LogisticSigmoid:
    """Create a normalized logistic sigmoid.

    Args:
        a: Growth rate, clamped to [EPSILON, 1 - EPSILON] and mapped to a
            steepness of ``1 / (1 - a) - 1``. As ``a`` approaches 0 the
            curve collapses to y = x.

    Returns:
        Shaper with output clamped to [0, 1].
    """
    a = clamp_open(a)
    steepness = 1.0 / (1.0 - a) - 1.0
    return LogisticSigmoid(
        steepness=steepness,
        low=_logistic(-steepness),
        high=_logistic(steepness),
    )
