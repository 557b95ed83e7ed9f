"""Bezier shapers.

Bezier curves give x and y as functions of a parameter t, so evaluating
y for a given x means recovering t first: analytically for the quadratic,
by a fixed number of Newton-Raphson steps for the cubic. Adapted from Don
Lancaster's BEZMATH.PS.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapekit.core.shapers.normalization import (
    EPSILON,
    clamp_open,
    clamp_unit,
    invert,
    safe_sqrt,
)

# Fixed Newton step count; results depend on this exact value.
NEWTON_ITERATIONS = 5

# Parametric positions of the two target points in the through-points fit
_T1 = 0.3
_T2 = 0.7


@dataclass(frozen=True)
class QuadraticBezier:
    """Quadratic Bezier through (0,0), control (a, b) and (1,1)."""

    a: float
    b: float

    def __call__(self, x: float) -> float:
        a, b = self.a, self.b
        om2a = 1.0 - 2.0 * a
        t = (safe_sqrt(a * a + om2a * x) - a) / om2a
        return (1.0 - 2.0 * b) * (t * t) + (2.0 * b) * t


@dataclass(frozen=True)
class CubicBezier:
    """Cubic Bezier from (0,0) to (1,1) in power-basis form.

    ``x(t) = A t^3 + B t^2 + C t + D`` and ``y(t) = E t^3 + F t^2 + G t + H``.
    """

    A: float
    B: float
    C: float
    D: float
    E: float
    F: float
    G: float
    H: float

    @classmethod
    def from_control_points(cls, x1: float, y1: float, x2: float, y2: float) -> CubicBezier:
        """Derive polynomial coefficients from the two interior control points."""
        x0, y0 = 0.0, 0.0
        x3, y3 = 1.0, 1.0
        return cls(
            A=x3 - 3.0 * x2 + 3.0 * x1 - x0,
            B=3.0 * x2 - 6.0 * x1 + 3.0 * x0,
            C=3.0 * x1 - 3.0 * x0,
            D=x0,
            E=y3 - 3.0 * y2 + 3.0 * y1 - y0,
            F=3.0 * y2 - 6.0 * y1 + 3.0 * y0,
            G=3.0 * y1 - 3.0 * y0,
            H=y0,
        )

    def x_from_t(self, t: float) -> float:
        return self.A * (t * t * t) + self.B * (t * t) + self.C * t + self.D

    def y_from_t(self, t: float) -> float:
        return self.E * (t * t * t) + self.F * (t * t) + self.G * t + self.H

    def slope_from_t(self, t: float) -> float:
        """dx/dt at t."""
        return 3.0 * self.A * t * t + 2.0 * self.B * t + self.C

    def solve_t(self, x: float) -> float:
        """Recover t for x with NEWTON_ITERATIONS Newton-Raphson steps.

        Seeded at ``t = x`` and clamped to [0, 1] after every step. No
        convergence test is made. A zero derivative leaves t unchanged for
        that step.
        """
        t = x
        for _ in range(NEWTON_ITERATIONS):
            slope = self.slope_from_t(t)
            if slope != 0.0:
                t -= (self.x_from_t(t) - x) / slope
            t = min(1.0, max(0.0, t))
        return t

    def __call__(self, x: float) -> float:
        return self.y_from_t(self.solve_t(x))


@dataclass(frozen=True)
class CubicBezierThroughPoints:
    """Cubic Bezier fitted near two target points, output clamped to [0, 1]."""

    curve: CubicBezier

    def __call__(self, x: float) -> float:
        return clamp_unit(self.curve(x))


def _bernstein(t: float) -> tuple[float, float, float, float]:
    mt = 1.0 - t
    return (mt * mt * mt, 3.0 * t * mt * mt, 3.0 * t * t * mt, t * t * t)


def quadratic_bezier(a: float = 0.25, b: float = 0.75) -> QuadraticBezier:
    """Create a quadratic Bezier shaper.

    The entering and exiting slopes match the double-linear join through
    the control point.

    Args:
        a: Control x, clamped to [0, 1]. Exactly 0.5 is nudged by EPSILON
            to keep the inversion denominator ``1 - 2a`` non-zero.
        b: Control y, clamped to [0, 1] and inverted (the control point is
            ``(a, 1 - b)``).

    Returns:
        Quadratic Bezier shaper.
    """
    a = clamp_unit(a)
    b = clamp_unit(b)
    if a == 0.5:
        a += EPSILON
    return QuadraticBezier(a=a, b=invert(b))


def cubic_bezier(
    a: float = 0.25, b: float = 0.9, c: float = 0.75, d: float = 0.1
) -> CubicBezier:
    """Create a cubic Bezier shaper.

    Args:
        a: First control x, clamped to [0, 1].
        b: First control y, clamped to [0, 1] and inverted (``1 - b``).
        c: Second control x, clamped to [0, 1].
        d: Second control y, clamped to [0, 1] and inverted (``1 - d``).

    Returns:
        Cubic Bezier shaper. Control x-values inside [0, 1] keep ``x(t)``
        monotonic, so every x maps to a single y.
    """
    return CubicBezier.from_control_points(
        clamp_unit(a),
        invert(clamp_unit(b)),
        clamp_unit(c),
        invert(clamp_unit(d)),
    )


def cubic_bezier_nearly_through_two_points(
    a: float = 0.3, b: float = 0.6, c: float = 0.7, d: float = 0.4
) -> CubicBezierThroughPoints:
    """Create a cubic Bezier that passes close to two target points.

    The targets ``(a, 1 - b)`` and ``(c, 1 - d)`` are assigned to the
    parametric positions t = 0.3 and t = 0.7, and the two interior control
    points are solved from that linear system. The fit is approximate: the
    curve is evaluated in x, not t, so it need not hit the targets exactly.

    Args:
        a: First target x, clamped to [EPSILON, 1 - EPSILON].
        b: First target y (inverted), clamped to [EPSILON, 1 - EPSILON].
        c: Second target x, clamped to [EPSILON, 1 - EPSILON].
        d: Second target y (inverted), clamped to [EPSILON, 1 - EPSILON].

    Returns:
        Shaper with output clamped to [0, 1].
    """
    x0, y0 = 0.0, 0.0
    x3, y3 = 1.0, 1.0
    x4, y4 = clamp_open(a), invert(clamp_open(b))
    x5, y5 = clamp_open(c), invert(clamp_open(d))

    b0t1, b1t1, b2t1, b3t1 = _bernstein(_T1)
    b0t2, b1t2, b2t2, b3t2 = _bernstein(_T2)

    ccx = x4 - x0 * b0t1 - x3 * b3t1
    ccy = y4 - y0 * b0t1 - y3 * b3t1
    ffx = x5 - x0 * b0t2 - x3 * b3t2
    ffy = y5 - y0 * b0t2 - y3 * b3t2

    denom = b2t1 - (b1t1 * b2t2) / b1t2
    x2 = (ccx - (ffx * b1t1) / b1t2) / denom
    y2 = (ccy - (ffy * b1t1) / b1t2) / denom
    x1 = (ccx - x2 * b2t1) / b1t1
    y1 = (ccy - y2 * b2t1) / b1t1

    # Only the x-coordinates are constrained; y may leave the unit square.
    x1 = clamp_open(x1)
    x2 = clamp_open(x2)

    return CubicBezierThroughPoints(curve=CubicBezier.from_control_points(x1, y1, x2, y2))
