"""Shaping functions: reusable remappings of the unit interval."""

from shapekit.core.shapers.hooks import ObservedShaper, observe
from shapekit.core.shapers.interpolation import ShapedInterpolator, interpolator
from shapekit.core.shapers.library import build_default_registry
from shapekit.core.shapers.models import CurvePoint, Shaper, ShaperConfig, ShaperKind
from shapekit.core.shapers.normalization import EPSILON
from shapekit.core.shapers.registry import ShaperDefinition, ShaperRegistry
from shapekit.core.shapers.sampling import (
    evaluate,
    evaluate_many,
    sample_shaper,
    sample_unit_grid,
)

__all__ = [
    "EPSILON",
    "CurvePoint",
    "ObservedShaper",
    "ShapedInterpolator",
    "Shaper",
    "ShaperConfig",
    "ShaperDefinition",
    "ShaperKind",
    "ShaperRegistry",
    "build_default_registry",
    "evaluate",
    "evaluate_many",
    "interpolator",
    "observe",
    "sample_shaper",
    "sample_unit_grid",
]
