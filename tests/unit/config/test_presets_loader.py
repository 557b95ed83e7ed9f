"""Tests for preset configuration loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError
import pytest
import yaml

from shapekit.core.config import (
    LoggingConfig,
    PresetsConfig,
    build_presets,
    configure_logging,
    detect_format,
    load_config,
    load_presets,
)
from shapekit.core.shapers.functions.bezier import CubicBezier
from shapekit.core.shapers.models import ShaperKind
from shapekit.core.shapers.registry import ShaperRegistry

PRESETS = {
    "samples": 5,
    "presets": {
        "soft_seat": {"kind": "double_cubic_seat", "params": {"a": 0.4, "b": 0.6}},
        "ease": {"kind": "cubic_bezier"},
    },
}


@pytest.fixture
def yaml_presets(tmp_path: Path) -> Path:
    path = tmp_path / "presets.yaml"
    path.write_text(yaml.safe_dump(PRESETS, sort_keys=False))
    return path


@pytest.fixture
def json_presets(tmp_path: Path) -> Path:
    path = tmp_path / "presets.json"
    path.write_text(json.dumps(PRESETS))
    return path


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.yml", "yaml"), ("A.YML", "yaml")],
    )
    def test_known_extensions(self, name: str, expected: str) -> None:
        assert detect_format(name) == expected

    def test_unknown_extension(self) -> None:
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("presets.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_yaml_and_json_agree(self, yaml_presets: Path, json_presets: Path) -> None:
        assert load_config(yaml_presets) == load_config(json_presets) == PRESETS

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_empty_yaml_is_empty_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("presets: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="Expected a mapping"):
            load_config(path)


class TestLoadPresets:
    """Tests for load_presets and PresetsConfig."""

    def test_load(self, yaml_presets: Path) -> None:
        config = load_presets(yaml_presets)

        assert isinstance(config, PresetsConfig)
        assert config.samples == 5
        assert list(config.presets) == ["soft_seat", "ease"]
        assert config.presets["soft_seat"].kind is ShaperKind.DOUBLE_CUBIC_SEAT
        assert config.presets["ease"].params == {}

    def test_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("")
        config = load_presets(path)

        assert config.samples == 11
        assert config.presets == {}
        assert config.logging == LoggingConfig()

    def test_unknown_kind(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text(json.dumps({"presets": {"x": {"kind": "wobble"}}}))
        with pytest.raises(ValidationError):
            load_presets(path)

    def test_unknown_top_level_key(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text(json.dumps({"preset": {}}))
        with pytest.raises(ValidationError):
            load_presets(path)

    def test_samples_lower_bound(self) -> None:
        with pytest.raises(ValidationError):
            PresetsConfig(samples=1)

    def test_logging_level_validated(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestBuildPresets:
    """Tests for build_presets."""

    def test_builds_every_preset(self, json_presets: Path) -> None:
        shapers = build_presets(load_presets(json_presets))

        assert list(shapers) == ["soft_seat", "ease"]
        assert shapers["soft_seat"](0.4) == pytest.approx(0.4)
        assert isinstance(shapers["ease"], CubicBezier)

    def test_bad_parameter_names_preset(self) -> None:
        config = PresetsConfig.model_validate(
            {"presets": {"broken": {"kind": "logistic_sigmoid", "params": {"n": 3}}}}
        )
        with pytest.raises(ValueError, match="Preset 'broken'"):
            build_presets(config)

    def test_custom_registry(self) -> None:
        config = PresetsConfig.model_validate({"presets": {"x": {"kind": "cubic_bezier"}}})
        with pytest.raises(ValueError, match="not registered"):
            build_presets(config, registry=ShaperRegistry())

    def test_non_finite_order_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.yaml"
        path.write_text(
            "presets:\n  steep:\n    kind: double_polynomial_sigmoid\n    params: {n: .inf}\n"
        )
        shapers = build_presets(load_presets(path))
        assert shapers["steep"](0.5) == pytest.approx(0.5)


class TestConfigureLogging:
    """Tests for configure_logging from a presets file."""

    def test_applies_logging_section(self, restore_logging) -> None:
        config = PresetsConfig.model_validate({"logging": {"level": "DEBUG", "structured": True}})
        configure_logging(config)
        assert logging.getLogger().level == logging.DEBUG
