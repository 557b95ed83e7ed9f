"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from shapekit.core.config.models import PresetsConfig
from shapekit.core.shapers.library import build_default_registry
from shapekit.core.shapers.models import Shaper
from shapekit.core.shapers.registry import ShaperRegistry
from shapekit.core.utils.json import read_json
from shapekit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)


_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def detect_format(file_path: Path | str) -> str:
    """Map a presets file extension to "json" or "yaml".

    Raises:
        ValueError: For any other extension.

    Example:
        >>> detect_format("presets.json")
        'json'
        >>> detect_format("presets.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError:
        raise ValueError(
            f"Unsupported config format: {suffix or '(none)'} "
            f"(expected one of {', '.join(sorted(_FORMATS))})"
        ) from None


def _read_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a JSON or YAML presets file into a plain dict.

    An empty YAML file reads as ``{}``.

    Args:
        path: File with a .json, .yaml or .yml extension.

    Returns:
        The top-level mapping, unvalidated.

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: If the extension is unsupported, the content does not
            parse, or the top level is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Presets file not found: {path}")

    if detect_format(path) == "json":
        try:
            return read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    content = _read_yaml(path)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(content).__name__}")
    return content


def load_presets(path: str | Path) -> PresetsConfig:
    """Load and validate a presets file.

    Args:
        path: Path to presets file (.json, .yaml, or .yml)

    Returns:
        Validated PresetsConfig

    Raises:
        ValidationError: If the file does not match the schema

    Example:
        >>> config = load_presets("presets.yaml")  # doctest: +SKIP
    """
    raw_config = load_config(path)
    config = PresetsConfig.model_validate(raw_config)
    logger.debug("Loaded %d preset(s) from %s", len(config.presets), path)
    return config


def build_presets(
    config: PresetsConfig, registry: ShaperRegistry | None = None
) -> dict[str, Shaper]:
    """Construct every preset in a config.

    Args:
        config: Validated presets config
        registry: Registry to build from (defaults to the built-in library)

    Returns:
        Shapers keyed by preset name, in file order

    Raises:
        ValueError: If a preset names a parameter its kind does not accept
    """
    if registry is None:
        registry = build_default_registry()
    shapers: dict[str, Shaper] = {}
    for name, shaper_config in config.presets.items():
        try:
            shapers[name] = registry.build(shaper_config)
        except ValueError as e:
            raise ValueError(f"Preset '{name}': {e}") from e
    return shapers


def configure_logging(config: PresetsConfig) -> None:
    """Configure Python logging from a presets config."""
    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )
