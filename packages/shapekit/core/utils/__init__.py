"""Shared utilities for shapekit."""

from shapekit.core.utils.json import read_json
from shapekit.core.utils.math import clamp, lerp

__all__ = [
    "clamp",
    "lerp",
    "read_json",
]
