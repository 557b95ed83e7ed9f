"""Shaper sampling.

Functions for evaluating a shaper once, over an array of inputs, or over
an evenly spaced grid of the unit interval.
"""

from __future__ import annotations

import numpy as np

from shapekit.core.shapers.models import CurvePoint, Shaper


def evaluate(shaper: Shaper, x: float) -> float:
    """Evaluate a shaper at a single input.

    Example:
        >>> from shapekit.core.shapers.functions import double_circle_seat
        >>> evaluate(double_circle_seat(0.5), 0.5)
        0.5
    """
    return float(shaper(float(x)))


def sample_unit_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples over [0, 1], endpoints included.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N floats from 0.0 to 1.0.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_unit_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [float(x) for x in np.linspace(0.0, 1.0, n)]


def evaluate_many(shaper: Shaper, xs: np.ndarray | list[float]) -> np.ndarray:
    """Evaluate a shaper over an array of inputs.

    Args:
        shaper: Shaper to evaluate.
        xs: Input values (any shape).

    Returns:
        Float array with the same shape as ``xs``.
    """
    arr = np.asarray(xs, dtype=float)
    flat = np.fromiter((shaper(float(x)) for x in arr.ravel()), dtype=float, count=arr.size)
    return flat.reshape(arr.shape)


def sample_shaper(shaper: Shaper, n_samples: int) -> list[CurvePoint]:
    """Sample a shaper on the unit grid.

    Args:
        shaper: Shaper to sample.
        n_samples: Number of samples (must be >= 2).

    Returns:
        List of CurvePoints in increasing x.

    Raises:
        ValueError: If n_samples < 2.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    grid = sample_unit_grid(n_samples)
    ys = evaluate_many(shaper, grid)
    return [CurvePoint(x=x, y=float(y)) for x, y in zip(grid, ys, strict=True)]
