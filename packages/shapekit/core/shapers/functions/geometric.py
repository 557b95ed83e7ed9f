"""Geometric composite shapers: circular fillet and arc through a point."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from shapekit.core.shapers.geometry import (
    CircleGeometry,
    DegenerateCircleError,
    FilletGeometry,
    circle_through_points,
    compute_fillet,
)
from shapekit.core.shapers.normalization import (
    EPSILON,
    clamp_open,
    clamp_param,
    clamp_unit,
    invert,
    safe_sqrt,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CircularFillet:
    """Two lines through (0,0)-(a,b) and (a,b)-(1,1) joined by an arc.

    Evaluation is linear up to the first tangent point, follows the arc
    between the tangent points, and is linear again after the second.

    Attributes:
        start_x: x of the tangent point on the first line.
        start_y: y of the tangent point on the first line.
        end_x: x of the tangent point on the second line.
        end_y: y of the tangent point on the second line.
        geometry: Arc geometry, or None for a plain double-linear join.
    """

    start_x: float
    start_y: float
    end_x: float
    end_y: float
    geometry: FilletGeometry | None = None

    def __call__(self, x: float) -> float:
        x = clamp_unit(x)
        if x <= self.start_x:
            if self.start_x <= 0.0:
                return self.start_y
            return (x / self.start_x) * self.start_y
        if x >= self.end_x or self.geometry is None:
            if self.end_x >= 1.0:
                return self.end_y
            t = (x - self.end_x) / (1.0 - self.end_x)
            return self.end_y + t * (1.0 - self.end_y)

        g = self.geometry
        dy = safe_sqrt(g.radius * g.radius - (x - g.center_x) * (x - g.center_x))
        if x >= g.center_x:
            return g.center_y - dy
        return g.center_y + dy


@dataclass(frozen=True)
class CircularArcThroughPoint:
    """Circular arc through (0,0), a control point and (1,1).

    A ``circle`` of None means the control point lies on the diagonal and
    the arc has straightened into y = x.
    """

    circle: CircleGeometry | None

    def __call__(self, x: float) -> float:
        x = clamp_param(x, EPSILON, 1.0 - EPSILON)
        if self.circle is None:
            return x
        c = self.circle
        dy = safe_sqrt(c.radius * c.radius - (x - c.center_x) * (x - c.center_x))
        if x >= c.center_x:
            return c.center_y - dy
        return c.center_y + dy


def circular_fillet(a: float = 0.7, b: float = 0.3, radius: float = 0.1) -> CircularFillet:
    """Create a double-linear shaper with a circular fillet at the joint.

    Args:
        a: Joint x, clamped to [EPSILON, 1 - EPSILON].
        b: Joint y, clamped to [EPSILON, 1 - EPSILON]. Not inverted.
        radius: Fillet radius; negative values are treated as 0.

    Returns:
        Fillet shaper. When the lines are parallel or otherwise degenerate
        (e.g. a joint on the diagonal) no arc is fitted and the shaper is
        the double-linear join through (a, b).
    """
    a = clamp_open(a)
    b = clamp_open(b)
    radius = max(0.0, float(radius))

    geometry = compute_fillet((0.0, 0.0), (a, b), (a, b), (1.0, 1.0), radius)
    if geometry is None:
        logger.debug("No fillet for joint (%s, %s); using double-linear join", a, b)
        return CircularFillet(start_x=a, start_y=b, end_x=a, end_y=b)

    start_x, start_y = geometry.start
    end_x, end_y = geometry.end
    return CircularFillet(
        start_x=start_x,
        start_y=start_y,
        end_x=end_x,
        end_y=end_y,
        geometry=geometry,
    )


def _corner_circle(a: float, center_x: float) -> CircleGeometry:
    """Unit circle anchored at the corner the control point leans toward."""
    if a < center_x:
        return CircleGeometry(center_x=1.0, center_y=0.0, radius=1.0)
    return CircleGeometry(center_x=0.0, center_y=1.0, radius=1.0)


def circular_arc_through_a_point(a: float = 0.4, b: float = 0.4) -> CircularArcThroughPoint:
    """Create a circular arc through ``(a, 1 - b)`` and the unit-square corners.

    Only control points close to the main diagonal give a circle that stays
    in the unit square. When the solved center falls strictly inside the
    square, a unit circle centered at (1, 0) or (0, 1) is used instead.

    Args:
        a: Control x, clamped to [EPSILON, 1 - EPSILON].
        b: Control y, clamped to [EPSILON, 1 - EPSILON] and inverted.

    Returns:
        Arc shaper. Evaluation clamps x into [EPSILON, 1 - EPSILON].
    """
    a = clamp_open(a)
    b = invert(clamp_open(b))

    try:
        circle = circle_through_points((0.0, 0.0), (a, b), (1.0, 1.0))
    except DegenerateCircleError:
        logger.debug("No solvable chord pair through (%s, %s); using corner circle", a, b)
        # Above the diagonal leans toward (1, 0), below it toward (0, 1)
        return CircularArcThroughPoint(circle=_corner_circle(a, 1.0 if b > a else 0.0))

    if circle is None:
        return CircularArcThroughPoint(circle=None)

    if 0.0 < circle.center_x < 1.0:
        logger.debug("Arc center %s lies inside the unit square; using corner circle", circle)
        circle = _corner_circle(a, circle.center_x)
    return CircularArcThroughPoint(circle=circle)
