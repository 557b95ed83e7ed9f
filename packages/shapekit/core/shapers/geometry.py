"""Plane geometry solvers for the composite shapers.

- Circular arc fillet between two lines (Robert D. Miller, "Joining Two
  Lines with a Circular Arc Fillet", Graphics Gems III)
- Circle through three points (Paul Bourke, "Equation of a Circle from
  3 Points")

Degenerate input is reported by returning None; callers choose the
fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from shapekit.core.shapers.normalization import EPSILON

logger = logging.getLogger(__name__)

Point = tuple[float, float]


@dataclass(frozen=True)
class CircleGeometry:
    """Circle center and radius."""

    center_x: float
    center_y: float
    radius: float


@dataclass(frozen=True)
class FilletGeometry:
    """Arc joining two lines, with its tangent points.

    Attributes:
        center_x: Arc center x.
        center_y: Arc center y.
        radius: Arc radius.
        start_angle: Angle (radians) of the tangent point on the first line.
        end_angle: Angle (radians) of the tangent point on the second line.
    """

    center_x: float
    center_y: float
    radius: float
    start_angle: float
    end_angle: float

    @property
    def start(self) -> Point:
        return (
            self.center_x + self.radius * math.cos(self.start_angle),
            self.center_y + self.radius * math.sin(self.start_angle),
        )

    @property
    def end(self) -> Point:
        return (
            self.center_x + self.radius * math.cos(self.end_angle),
            self.center_y + self.radius * math.sin(self.end_angle),
        )


def line_to_point_distance(a: float, b: float, c: float, px: float, py: float) -> float:
    """Signed distance from the line ``a*x + b*y + c = 0`` to (px, py).

    Returns 0 when the line coefficients are degenerate (a = b = 0).
    """
    d = math.sqrt(a * a + b * b)
    if d == 0:
        return 0.0
    return (a * px + b * py + c) / d


def _foot_of_perpendicular(a: float, b: float, c: float, px: float, py: float) -> Point:
    """Project (px, py) onto the line ``a*x + b*y + c = 0``."""
    dp = a * a + b * b
    if dp == 0:
        return (0.0, 0.0)
    cp = a * py - b * px
    return ((-a * c - b * cp) / dp, (a * cp - b * c) / dp)


def compute_fillet(
    p1: Point, p2: Point, p3: Point, p4: Point, radius: float
) -> FilletGeometry | None:
    """Compute the fillet arc between line p1-p2 and line p3-p4.

    Args:
        p1: First point of line 1.
        p2: Second point of line 1.
        p3: First point of line 2.
        p4: Second point of line 2.
        radius: Fillet radius.

    Returns:
        Arc geometry, or None when the lines are parallel or coincident, or
        when either segment's midpoint lies on the other line.
    """
    (p1x, p1y), (p2x, p2y) = p1, p2
    (p3x, p3y), (p4x, p4y) = p3, p4

    c1 = p2x * p1y - p1x * p2y
    a1 = p2y - p1y
    b1 = p1x - p2x
    c2 = p4x * p3y - p3x * p4y
    a2 = p4y - p3y
    b2 = p3x - p4x

    if a1 * b2 == a2 * b1:
        logger.debug("Fillet lines are parallel or coincident")
        return None

    d1 = line_to_point_distance(a1, b1, c1, (p3x + p4x) / 2, (p3y + p4y) / 2)
    if d1 == 0:
        logger.debug("Second segment midpoint lies on the first line")
        return None
    d2 = line_to_point_distance(a2, b2, c2, (p1x + p2x) / 2, (p1y + p2y) / 2)
    if d2 == 0:
        logger.debug("First segment midpoint lies on the second line")
        return None

    # Offset each line by the radius towards the other segment
    rr = radius if d1 > 0 else -radius
    c1p = c1 - rr * math.sqrt(a1 * a1 + b1 * b1)
    rr = radius if d2 > 0 else -radius
    c2p = c2 - rr * math.sqrt(a2 * a2 + b2 * b2)

    # The offset lines intersect at the arc center
    d = a1 * b2 - a2 * b1
    center_x = (c2p * b1 - c1p * b2) / d
    center_y = (c1p * a2 - c2p * a1) / d

    pa = _foot_of_perpendicular(a1, b1, c1, center_x, center_y)
    pb = _foot_of_perpendicular(a2, b2, c2, center_x, center_y)

    gv1x, gv1y = pa[0] - center_x, pa[1] - center_y
    gv2x, gv2y = pb[0] - center_x, pb[1] - center_y

    arc_start = math.atan2(gv1y, gv1x)
    arc_angle = 0.0
    dd = math.sqrt((gv1x * gv1x + gv1y * gv1y) * (gv2x * gv2x + gv2y * gv2y))
    if dd != 0:
        cos_angle = (gv1x * gv2x + gv1y * gv2y) / dd
        arc_angle = math.acos(max(-1.0, min(1.0, cos_angle)))

    cross = gv1x * gv2y - gv2x * gv1y
    if cross < 0:
        arc_start -= arc_angle
        start_angle, end_angle = arc_start + arc_angle, arc_start
    else:
        start_angle, end_angle = arc_start, arc_start + arc_angle

    return FilletGeometry(
        center_x=center_x,
        center_y=center_y,
        radius=radius,
        start_angle=start_angle,
        end_angle=end_angle,
    )


def is_perpendicular(p1: Point, p2: Point, p3: Point) -> bool:
    """Check whether chord p1-p2 or p2-p3 is parallel to an axis.

    Such chords make the slope form of the three-point circle undefined.
    The one axis-aligned pair that circle_from_three_points handles
    directly (vertical p1-p2 with horizontal p2-p3) is reported as False.
    """
    y_delta_a = p2[1] - p1[1]
    x_delta_a = p2[0] - p1[0]
    y_delta_b = p3[1] - p2[1]
    x_delta_b = p3[0] - p2[0]

    if abs(x_delta_a) <= EPSILON and abs(y_delta_b) <= EPSILON:
        return False
    return any(
        abs(delta) <= EPSILON for delta in (y_delta_a, y_delta_b, x_delta_a, x_delta_b)
    )


def circle_from_three_points(p1: Point, p2: Point, p3: Point) -> CircleGeometry | None:
    """Circle through three points, given chords that pass is_perpendicular.

    Returns:
        The circle, or None when the points are colinear.
    """
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    y_delta_a = y2 - y1
    x_delta_a = x2 - x1
    y_delta_b = y3 - y2
    x_delta_b = x3 - x2

    if abs(x_delta_a) <= EPSILON and abs(y_delta_b) <= EPSILON:
        cx = 0.5 * (x2 + x3)
        cy = 0.5 * (y1 + y2)
        return CircleGeometry(cx, cy, math.hypot(cx - x1, cy - y1))

    a_slope = y_delta_a / x_delta_a
    b_slope = y_delta_b / x_delta_b
    if abs(a_slope - b_slope) <= EPSILON:
        return None

    cx = (a_slope * b_slope * (y1 - y3) + b_slope * (x1 + x2) - a_slope * (x2 + x3)) / (
        2 * (b_slope - a_slope)
    )
    cy = -(cx - (x1 + x2) / 2) / a_slope + (y1 + y2) / 2
    return CircleGeometry(cx, cy, math.hypot(cx - x1, cy - y1))


class DegenerateCircleError(ValueError):
    """No ordering of the three points gives a solvable chord pair."""


def circle_through_points(p1: Point, p2: Point, p3: Point) -> CircleGeometry | None:
    """Circle through three points, trying every ordering of the points.

    Returns:
        The circle, or None when the points are colinear.

    Raises:
        DegenerateCircleError: If every ordering has an axis-aligned chord.
    """
    orderings = (
        (p1, p2, p3),
        (p1, p3, p2),
        (p2, p1, p3),
        (p2, p3, p1),
        (p3, p2, p1),
        (p3, p1, p2),
    )
    for q1, q2, q3 in orderings:
        if not is_perpendicular(q1, q2, q3):
            return circle_from_three_points(q1, q2, q3)
    raise DegenerateCircleError(f"No usable chord pair through {p1}, {p2}, {p3}")
