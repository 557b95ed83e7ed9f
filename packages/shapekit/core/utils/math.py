"""Scalar helpers shared by the shapers and the interpolator."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Limit ``value`` to the closed range [low, high].

    Example:
        >>> clamp(1.5, 0.0, 1.0)
        1.0
    """
    return max(low, min(high, value))


def lerp(start: Number, end: Number, t: float) -> float:
    """Blend from ``start`` (t = 0) to ``end`` (t = 1).

    ``t`` is not clamped, so values outside [0, 1] extrapolate.
    """
    return float(start) + (float(end) - float(start)) * t
