"""Configuration models for shaper presets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from shapekit.core.shapers.models import ShaperConfig


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False


class PresetsConfig(BaseModel):
    """A named collection of shaper configurations.

    Attributes:
        logging: Logging settings for tools that load this file.
        samples: Default number of samples when tabulating presets.
        presets: Shaper configurations keyed by preset name.

    Example:
        >>> config = PresetsConfig.model_validate(
        ...     {"presets": {"soft": {"kind": "double_cubic_seat", "params": {"a": 0.4}}}}
        ... )
        >>> sorted(config.presets)
        ['soft']
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = LoggingConfig()
    samples: int = Field(default=11, ge=2)
    presets: dict[str, ShaperConfig] = Field(default_factory=dict)
