"""Shaper library: registers the built-in shaper families."""

from __future__ import annotations

from collections.abc import Callable

from shapekit.core.shapers.functions import (
    blinn_wyvill_cosine_approximation,
    circular_arc_through_a_point,
    circular_ease_in,
    circular_ease_out,
    circular_fillet,
    cubic_bezier,
    cubic_bezier_nearly_through_two_points,
    double_circle_seat,
    double_circle_sigmoid,
    double_cubic_seat,
    double_cubic_seat_with_linear_blend,
    double_elliptic_seat,
    double_elliptic_sigmoid,
    double_exponential_seat,
    double_exponential_sigmoid,
    double_odd_polynomial_seat,
    double_polynomial_sigmoid,
    exponential_easing,
    logistic_sigmoid,
    quadratic_bezier,
    quadratic_through_a_given_point,
)
from shapekit.core.shapers.models import Shaper, ShaperKind
from shapekit.core.shapers.registry import ShaperDefinition, ShaperRegistry


def build_default_registry() -> ShaperRegistry:
    """Construct a registry containing every built-in shaper family."""
    registry = ShaperRegistry()

    def register(
        kind: ShaperKind,
        factory: Callable[..., Shaper],
        description: str,
        params: dict[str, float] | None = None,
    ) -> None:
        registry.register(
            ShaperDefinition(
                kind=kind,
                factory=factory,
                default_params=params or {},
                description=description,
            )
        )

    # Polynomial
    register(
        ShaperKind.BLINN_WYVILL_COSINE,
        blinn_wyvill_cosine_approximation,
        "Polynomial approximation of the raised inverted cosine",
    )
    register(
        ShaperKind.DOUBLE_CUBIC_SEAT,
        double_cubic_seat,
        "Two cubics meeting with a flat tangent at (a, 1-b)",
        params={"a": 0.5, "b": 0.5},
    )
    register(
        ShaperKind.DOUBLE_CUBIC_SEAT_LINEAR_BLEND,
        double_cubic_seat_with_linear_blend,
        "Cubic seat at (a, a) blended with y = x",
        params={"a": 0.5, "b": 0.5},
    )
    register(
        ShaperKind.DOUBLE_ODD_POLYNOMIAL_SEAT,
        double_odd_polynomial_seat,
        "Seat using the odd exponent 2n+1 through (a, b)",
        params={"a": 0.5, "b": 0.5, "n": 1},
    )
    register(
        ShaperKind.DOUBLE_POLYNOMIAL_SIGMOID,
        double_polynomial_sigmoid,
        "Symmetric order-n polynomial sigmoid",
        params={"n": 2},
    )
    register(
        ShaperKind.QUADRATIC_THROUGH_POINT,
        quadratic_through_a_given_point,
        "Parabola through (a, 1-b), clamped to [0, 1]",
        params={"a": 0.5, "b": 0.5},
    )

    # Exponential
    register(
        ShaperKind.EXPONENTIAL_EASING,
        exponential_easing,
        "Exponential ease-out (a < 0.5) or ease-in (a > 0.5)",
        params={"a": 0.5},
    )
    register(
        ShaperKind.DOUBLE_EXPONENTIAL_SEAT,
        double_exponential_seat,
        "Seat from two exponential arcs",
        params={"a": 0.5},
    )
    register(
        ShaperKind.DOUBLE_EXPONENTIAL_SIGMOID,
        double_exponential_sigmoid,
        "Sigmoid from two exponential arcs",
        params={"a": 0.5},
    )
    register(
        ShaperKind.LOGISTIC_SIGMOID,
        logistic_sigmoid,
        "Normalized logistic curve, clamped to [0, 1]",
        params={"a": 0.5},
    )

    # Circular and elliptic
    register(ShaperKind.CIRCULAR_EASE_IN, circular_ease_in, "Quarter-circle ease-in")
    register(ShaperKind.CIRCULAR_EASE_OUT, circular_ease_out, "Quarter-circle ease-out")
    register(
        ShaperKind.DOUBLE_CIRCLE_SEAT,
        double_circle_seat,
        "Two circular arcs meeting with a flat tangent at (a, a)",
        params={"a": 0.5},
    )
    register(
        ShaperKind.DOUBLE_CIRCLE_SIGMOID,
        double_circle_sigmoid,
        "Two circular arcs meeting with a vertical tangent at (a, a)",
        params={"a": 0.5},
    )
    register(
        ShaperKind.DOUBLE_ELLIPTIC_SEAT,
        double_elliptic_seat,
        "Two elliptical arcs meeting with a flat tangent at (a, b)",
        params={"a": 0.5, "b": 0.5},
    )
    register(
        ShaperKind.DOUBLE_ELLIPTIC_SIGMOID,
        double_elliptic_sigmoid,
        "Two elliptical arcs meeting with a vertical tangent at (a, b)",
        params={"a": 0.5, "b": 0.5},
    )

    # Bezier
    register(
        ShaperKind.QUADRATIC_BEZIER,
        quadratic_bezier,
        "Quadratic Bezier with control point (a, 1-b)",
        params={"a": 0.25, "b": 0.75},
    )
    register(
        ShaperKind.CUBIC_BEZIER,
        cubic_bezier,
        "Cubic Bezier with control points (a, 1-b) and (c, 1-d)",
        params={"a": 0.25, "b": 0.9, "c": 0.75, "d": 0.1},
    )
    register(
        ShaperKind.CUBIC_BEZIER_THROUGH_POINTS,
        cubic_bezier_nearly_through_two_points,
        "Cubic Bezier fitted near (a, 1-b) and (c, 1-d)",
        params={"a": 0.3, "b": 0.6, "c": 0.7, "d": 0.4},
    )

    # Geometric composites
    register(
        ShaperKind.CIRCULAR_FILLET,
        circular_fillet,
        "Double-linear join at (a, b) rounded with a fillet of the given radius",
        params={"a": 0.7, "b": 0.3, "radius": 0.1},
    )
    register(
        ShaperKind.CIRCULAR_ARC_THROUGH_POINT,
        circular_arc_through_a_point,
        "Circular arc through (0, 0), (a, 1-b) and (1, 1)",
        params={"a": 0.4, "b": 0.4},
    )

    return registry
