"""Shaper schema models.

This module defines the primitives shared by every shaper family:
- Shaper: the evaluator protocol, a pure ``f(x) -> y`` over the unit interval
- ShaperKind: identifiers for the built-in shaper families
- ShaperConfig: the serializable parameter set used to construct one shaper
- CurvePoint: a single sampled (x, y) pair
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class Shaper(Protocol):
    """A constructed, reusable scalar remapping function.

    Shapers are immutable once built and carry no mutable state, so a
    single instance may be evaluated from any number of threads.
    """

    def __call__(self, x: float) -> float:
        """Evaluate the shaper at x (nominally in [0, 1])."""
        ...


class ShaperKind(str, Enum):
    """Identifiers for built-in shaper families."""

    # Polynomial
    BLINN_WYVILL_COSINE = "blinn_wyvill_cosine"
    DOUBLE_CUBIC_SEAT = "double_cubic_seat"
    DOUBLE_CUBIC_SEAT_LINEAR_BLEND = "double_cubic_seat_linear_blend"
    DOUBLE_ODD_POLYNOMIAL_SEAT = "double_odd_polynomial_seat"
    DOUBLE_POLYNOMIAL_SIGMOID = "double_polynomial_sigmoid"
    QUADRATIC_THROUGH_POINT = "quadratic_through_point"

    # Exponential
    EXPONENTIAL_EASING = "exponential_easing"
    DOUBLE_EXPONENTIAL_SEAT = "double_exponential_seat"
    DOUBLE_EXPONENTIAL_SIGMOID = "double_exponential_sigmoid"
    LOGISTIC_SIGMOID = "logistic_sigmoid"

    # Circular and elliptic
    CIRCULAR_EASE_IN = "circular_ease_in"
    CIRCULAR_EASE_OUT = "circular_ease_out"
    DOUBLE_CIRCLE_SEAT = "double_circle_seat"
    DOUBLE_CIRCLE_SIGMOID = "double_circle_sigmoid"
    DOUBLE_ELLIPTIC_SEAT = "double_elliptic_seat"
    DOUBLE_ELLIPTIC_SIGMOID = "double_elliptic_sigmoid"

    # Bezier
    QUADRATIC_BEZIER = "quadratic_bezier"
    CUBIC_BEZIER = "cubic_bezier"
    CUBIC_BEZIER_THROUGH_POINTS = "cubic_bezier_through_points"

    # Geometric composites
    CIRCULAR_FILLET = "circular_fillet"
    CIRCULAR_ARC_THROUGH_POINT = "circular_arc_through_point"


class ShaperConfig(BaseModel):
    """Parameter set for constructing one shaper.

    Values are not range-checked here: out-of-range parameters are clamped
    by the shaper constructor, never rejected.

    Attributes:
        kind: Shaper family.
        params: Named numeric parameters (e.g. ``{"a": 0.3, "b": 0.7}``).
            Missing parameters fall back to the family defaults.

    Example:
        >>> config = ShaperConfig(kind="double_cubic_seat", params={"a": 0.4})
        >>> config.kind
        <ShaperKind.DOUBLE_CUBIC_SEAT: 'double_cubic_seat'>
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ShaperKind
    params: dict[str, float] = Field(default_factory=dict)


class CurvePoint(BaseModel):
    """A single sampled point of a shaper.

    Attributes:
        x: Input value in [0, 1].
        y: Output value. Unconstrained, since some shapers leave the unit
            interval near the edges of their parameter range.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., ge=0.0, le=1.0, description="Normalized input [0,1]")
    y: float = Field(..., description="Shaper output")
