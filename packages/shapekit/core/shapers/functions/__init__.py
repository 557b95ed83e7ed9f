"""Shaper constructors, grouped by family."""

from shapekit.core.shapers.functions.bezier import (
    cubic_bezier,
    cubic_bezier_nearly_through_two_points,
    quadratic_bezier,
)
from shapekit.core.shapers.functions.circular import (
    circular_ease_in,
    circular_ease_out,
    double_circle_seat,
    double_circle_sigmoid,
    double_elliptic_seat,
    double_elliptic_sigmoid,
)
from shapekit.core.shapers.functions.exponential import (
    double_exponential_seat,
    double_exponential_sigmoid,
    exponential_easing,
    logistic_sigmoid,
)
from shapekit.core.shapers.functions.geometric import (
    circular_arc_through_a_point,
    circular_fillet,
)
from shapekit.core.shapers.functions.polynomial import (
    blinn_wyvill_cosine_approximation,
    double_cubic_seat,
    double_cubic_seat_with_linear_blend,
    double_odd_polynomial_seat,
    double_polynomial_sigmoid,
    quadratic_through_a_given_point,
)

__all__ = [
    "blinn_wyvill_cosine_approximation",
    "circular_arc_through_a_point",
    "circular_ease_in",
    "circular_ease_out",
    "circular_fillet",
    "cubic_bezier",
    "cubic_bezier_nearly_through_two_points",
    "double_circle_seat",
    "double_circle_sigmoid",
    "double_cubic_seat",
    "double_cubic_seat_with_linear_blend",
    "double_elliptic_seat",
    "double_elliptic_sigmoid",
    "double_exponential_seat",
    "double_exponential_sigmoid",
    "double_odd_polynomial_seat",
    "double_polynomial_sigmoid",
    "exponential_easing",
    "logistic_sigmoid",
    "quadratic_bezier",
    "quadratic_through_a_given_point",
]
