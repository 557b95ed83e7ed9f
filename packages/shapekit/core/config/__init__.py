"""Configuration management for shapekit."""

from shapekit.core.config.loader import (
    build_presets,
    configure_logging,
    detect_format,
    load_config,
    load_presets,
)
from shapekit.core.config.models import LoggingConfig, PresetsConfig

__all__ = [
    # Loaders
    "build_presets",
    "configure_logging",
    "detect_format",
    "load_config",
    "load_presets",
    # Models
    "LoggingConfig",
    "PresetsConfig",
]
