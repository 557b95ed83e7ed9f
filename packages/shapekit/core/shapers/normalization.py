"""Parameter normalization and guarded numeric primitives.

Every shaper clamps its parameters once at construction. Values that
would put a zero in a denominator are kept EPSILON away from 0 and 1.
Nothing here raises for numeric input.
"""

from __future__ import annotations

import math

from shapekit.core.utils.math import clamp

EPSILON = 1e-5


def clamp_param(value: float, low: float, high: float) -> float:
    """Clamp a raw parameter into [low, high] as a float."""
    return float(clamp(float(value), low, high))


def clamp_unit(value: float) -> float:
    """Clamp into the closed unit interval [0, 1]."""
    return clamp_param(value, 0.0, 1.0)


def clamp_open(value: float) -> float:
    """Clamp into [EPSILON, 1 - EPSILON].

    Used for parameters that appear as ``a`` or ``1 - a`` in a denominator.

    Example:
        >>> clamp_open(0.0)
        1e-05
    """
    return clamp_param(value, EPSILON, 1.0 - EPSILON)


def invert(value: float) -> float:
    """Flip a normalized parameter so larger inputs raise the curve."""
    return 1.0 - value


def safe_sqrt(value: float) -> float:
    """Square root with the radicand floored at zero."""
    return math.sqrt(max(0.0, value))


def safe_pow(base: float, exponent: float) -> float:
    """Raise base to exponent, saturating instead of overflowing.

    Args:
        base: Base value. Callers using fractional exponents must pass a
            non-negative base.
        exponent: Exponent.

    Returns:
        ``base ** exponent``, or a signed infinity when the result does not
        fit in a float.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and int(exponent) % 2:
            return -math.inf
        return math.inf
