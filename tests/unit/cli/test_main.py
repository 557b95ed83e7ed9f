"""Unit tests for the shapekit CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shapekit.cli.main import build_arg_parser, main, parse_params


@pytest.fixture(autouse=True)
def _isolate_logging(restore_logging):
    """main() reconfigures the root logger."""
    yield


class TestParseParams:
    """Tests for parse_params."""

    def test_pairs(self) -> None:
        assert parse_params(["a=0.25", "b = 1"]) == {"a": 0.25, "b": 1.0}

    def test_empty(self) -> None:
        assert parse_params([]) == {}

    @pytest.mark.parametrize("pair", ["a", "=0.5"])
    def test_malformed_pair(self, pair: str) -> None:
        with pytest.raises(ValueError, match="Expected name=value"):
            parse_params([pair])

    def test_non_numeric_value(self) -> None:
        with pytest.raises(ValueError, match="is not a number"):
            parse_params(["a=steep"])


class TestArgParser:
    """Tests for build_arg_parser."""

    def test_sample_defaults(self) -> None:
        args = build_arg_parser().parse_args(["sample", "cubic_bezier"])
        assert args.kind == "cubic_bezier"
        assert args.param == []
        assert args.samples == 11
        assert args.log_level == "WARNING"

    def test_repeatable_params(self) -> None:
        args = build_arg_parser().parse_args(["sample", "x", "-p", "a=1", "--param", "b=2"])
        assert args.param == ["a=1", "b=2"]

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])


class TestCommands:
    """Tests for the CLI commands."""

    def test_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["list"]) == 0
        assert "Shapers" in capsys.readouterr().out

    def test_sample(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["sample", "exponential_easing", "-p", "a=0.75", "-n", "3"])
        out = capsys.readouterr().out

        assert code == 0
        assert "0.5000" in out
        assert "0.250000" in out

    def test_sample_unknown_kind(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["sample", "wobble"]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_sample_unknown_param(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["sample", "cubic_bezier", "-p", "steepness=2"]) == 1
        assert "Unknown parameter" in capsys.readouterr().out

    def test_sample_too_few_samples(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["sample", "cubic_bezier", "-n", "1"]) == 1

    def test_sample_infinite_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["sample", "double_polynomial_sigmoid", "-p", "n=inf", "-n", "3"])
        assert code == 0
        assert "0.500000" in capsys.readouterr().out

    def test_presets(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "presets.json"
        path.write_text(
            json.dumps({"samples": 3, "presets": {"soft": {"kind": "double_circle_seat"}}})
        )

        assert main(["presets", str(path)]) == 0
        out = capsys.readouterr().out
        assert "soft" in out
        assert "0.500000" in out

    def test_presets_sample_override(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "presets.json"
        path.write_text(json.dumps({"presets": {"soft": {"kind": "double_circle_seat"}}}))

        assert main(["presets", str(path), "-n", "5"]) == 0
        assert "0.2500" in capsys.readouterr().out

    def test_presets_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["presets", str(tmp_path / "missing.yaml")]) == 1
        assert "Could not load presets" in capsys.readouterr().out

    def test_presets_invalid_kind(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "presets.json"
        path.write_text(json.dumps({"presets": {"bad": {"kind": "wobble"}}}))

        assert main(["presets", str(path)]) == 1
        assert "Could not load presets" in capsys.readouterr().out
