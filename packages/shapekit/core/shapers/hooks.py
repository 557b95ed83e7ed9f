"""Evaluation hooks.

Lets callers observe evaluations (for plotting or tracing) without the
shaper itself having any side effects.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from shapekit.core.shapers.models import Shaper

EvaluationHook = Callable[[float, float], None]


@dataclass(frozen=True)
class ObservedShaper:
    """Shaper wrapper that reports every ``(x, y)`` pair to a hook."""

    shaper: Shaper
    hook: EvaluationHook

    def __call__(self, x: float) -> float:
        y = self.shaper(x)
        self.hook(x, y)
        return y


def observe(shaper: Shaper, hook: EvaluationHook) -> ObservedShaper:
    """Wrap a shaper so the hook is called after each evaluation.

    Example:
        >>> from shapekit.core.shapers.functions import circular_ease_out
        >>> trace = []
        >>> traced = observe(circular_ease_out(), lambda x, y: trace.append((x, y)))
        >>> traced(1.0)
        1.0
        >>> trace
        [(1.0, 1.0)]
    """
    return ObservedShaper(shaper=shaper, hook=hook)
