"""Polynomial shapers: seats, sigmoids and the raised-cosine approximation.

Each constructor normalizes its parameters once and returns a frozen
dataclass whose ``__call__`` evaluates the curve.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapekit.core.shapers.normalization import (
    clamp_open,
    clamp_param,
    clamp_unit,
    invert,
    safe_pow,
)

_BW_A = 4.0 / 9.0
_BW_B = 17.0 / 9.0
_BW_C = 22.0 / 9.0

# Upper bound for integer orders; NaN and infinity land here too
MAX_ORDER = 100


@dataclass(frozen=True)
class BlinnWyvillCosine:
    """Sixth-order approximation of ``0.5 * (1 - cos(pi * x))``.

    Stays within 0.003 of the raised inverted cosine on [0, 1], with flat
    derivatives at both ends and ``f(0.5) = 0.5``.
    """

    def __call__(self, x: float) -> float:
        x2 = x * x
        x4 = x2 * x2
        x6 = x4 * x2
        return _BW_A * x6 - _BW_B * x4 + _BW_C * x2


@dataclass(frozen=True)
class DoubleCubicSeat:
    """Two cubics meeting with a horizontal tangent at (a, b)."""

    a: float
    b: float

    def __call__(self, x: float) -> float:
        a, b = self.a, self.b
        if x <= a:
            return b - b * safe_pow(1.0 - x / a, 3)
        return b + (1.0 - b) * safe_pow((x - a) / (1.0 - a), 3)


@dataclass(frozen=True)
class DoubleCubicSeatLinearBlend:
    """Double-cubic seat on the diagonal, blended with y = x by weight b."""

    a: float
    b: float

    def __call__(self, x: float) -> float:
        a, b = self.a, self.b
        if x <= a:
            return b * x + (1.0 - b) * a * (1.0 - safe_pow(1.0 - x / a, 3))
        return b * x + (1.0 - b) * (a + (1.0 - a) * safe_pow((x - a) / (1.0 - a), 3))


@dataclass(frozen=True)
class DoubleOddPolynomialSeat:
    """Seat built from an odd exponent ``p = 2n + 1``.

    Larger exponents widen the plateau around (a, b).
    """

    a: float
    b: float
    p: int

    def __call__(self, x: float) -> float:
        a, b, p = self.a, self.b, self.p
        if x <= a:
            return b - b * safe_pow(1.0 - x / a, p)
        return b + (1.0 - b) * safe_pow((x - a) / (1.0 - a), p)


@dataclass(frozen=True)
class DoublePolynomialSigmoid:
    """Symmetric pair of order-n polynomials joined at x = 0.5."""

    n: int

    def __call__(self, x: float) -> float:
        n = self.n
        if x <= 0.5:
            return safe_pow(2.0 * x, n) / 2.0
        if n % 2 == 0:
            return 1.0 - safe_pow(2.0 * (x - 1.0), n) / 2.0
        return 1.0 + safe_pow(2.0 * (x - 1.0), n) / 2.0


@dataclass(frozen=True)
class QuadraticThroughPoint:
    """Axis-aligned parabola ``y = A x^2 - B x`` through (0,0), (a,b), (1,1).

    Output is clamped to [0, 1]: not every control point keeps the parabola
    inside the unit square.
    """

    A: float
    B: float

    def __call__(self, x: float) -> float:
        y = self.A * (x * x) - self.B * x
        return clamp_unit(y)


def blinn_wyvill_cosine_approximation() -> BlinnWyvillCosine:
    """Create the Blinn-Wyvill raised-cosine approximation."""
    return BlinnWyvillCosine()


def double_cubic_seat(a: float = 0.5, b: float = 0.5) -> DoubleCubicSeat:
    """Create a double-cubic seat.

    Args:
        a: Inflection x, clamped to [EPSILON, 1 - EPSILON].
        b: Inflection height, clamped to [0, 1] and inverted so that larger
            values lower the seat (``f(a) == 1 - b``).

    Returns:
        Shaper with C1 continuity and a flat tangent at x = a.

    Example:
        >>> seat = double_cubic_seat(0.5, 0.5)
        >>> seat(0.5)
        0.5
    """
    return DoubleCubicSeat(a=clamp_open(a), b=invert(clamp_unit(b)))


def double_cubic_seat_with_linear_blend(
    a: float = 0.5, b: float = 0.5
) -> DoubleCubicSeatLinearBlend:
    """Create a double-cubic seat blended with the identity line.

    Args:
        a: Inflection point along the diagonal, clamped to [EPSILON, 1 - EPSILON].
        b: Blend amount, clamped to [0, 1] and inverted: ``b = 1`` gives the
            pure cubic seat, ``b = 0`` gives y = x.

    Returns:
        Shaper passing through (0, 0), (a, a) and (1, 1).
    """
    return DoubleCubicSeatLinearBlend(a=clamp_open(a), b=invert(clamp_unit(b)))


def double_odd_polynomial_seat(
    a: float = 0.5, b: float = 0.5, n: int = 1
) -> DoubleOddPolynomialSeat:
    """Create a double-odd-polynomial seat.

    Unlike the cubic seat, ``b`` is not inverted: ``f(a) == b``.

    Args:
        a: Inflection x, clamped to [EPSILON, 1 - EPSILON].
        b: Inflection height, clamped to [0, 1].
        n: Plateau breadth; clamped to [0, MAX_ORDER] and truncated to an
            integer. A good working range is 1 to about 20.

    Returns:
        Shaper using the odd exponent ``2n + 1``.
    """
    n_int = int(clamp_param(n, 0, MAX_ORDER))
    return DoubleOddPolynomialSeat(a=clamp_open(a), b=clamp_unit(b), p=2 * n_int + 1)


def double_polynomial_sigmoid(n: int = 2) -> DoublePolynomialSigmoid:
    """Create a symmetric double-polynomial sigmoid.

    Args:
        n: Polynomial order; clamped to [1, MAX_ORDER] and truncated to an
            integer. Even and odd
            orders use different sign branches above x = 0.5.

    Returns:
        Shaper with ``f(0.5) == 0.5`` for every order.
    """
    return DoublePolynomialSigmoid(n=int(clamp_param(n, 1, MAX_ORDER)))


def quadratic_through_a_given_point(a: float = 0.5, b: float = 0.5) -> QuadraticThroughPoint:
    """Create a parabola passing through the control point.

    Args:
        a: Control x, clamped to [EPSILON, 1 - EPSILON].
        b: Control y, clamped to [0, 1] and inverted (the curve passes
            through ``(a, 1 - b)``).

    Returns:
        Shaper with output clamped to [0, 1].
    """
    a = clamp_open(a)
    b = invert(clamp_unit(b))
    A = (1.0 - b) / (1.0 - a) - (b / a)
    B = (A * (a * a) - b) / a
    return QuadraticThroughPoint(A=A, B=B)
