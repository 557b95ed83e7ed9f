"""Value interpolation driven by a shaper."""

from __future__ import annotations

from dataclasses import dataclass

from shapekit.core.shapers.models import Shaper
from shapekit.core.utils.math import lerp


@dataclass(frozen=True)
class ShapedInterpolator:
    """Maps progress t to ``start + (end - start) * shaper(t)``."""

    start: float
    end: float
    shaper: Shaper

    def __call__(self, t: float) -> float:
        return lerp(self.start, self.end, self.shaper(t))


def interpolator(start: float, end: float, shaper: Shaper) -> ShapedInterpolator:
    """Create an interpolator between two values, eased by a shaper.

    Useful for driving an animated property: feed it the normalized time of
    a frame or tween step.

    Args:
        start: Value at t = 0 (for shapers anchored at f(0) = 0).
        end: Value at t = 1 (for shapers anchored at f(1) = 1).
        shaper: Shaper remapping progress.

    Returns:
        Callable mapping progress to a value.

    Example:
        >>> from shapekit.core.shapers.functions import exponential_easing
        >>> move = interpolator(100.0, 0.0, exponential_easing(0.5))
        >>> move(0.25)
        75.0
    """
    return ShapedInterpolator(start=float(start), end=float(end), shaper=shaper)
