"""Command-line interface for shapekit.

Lists the built-in shaper families and tabulates sampled curves.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shapekit.core.config.loader import build_presets, load_presets
from shapekit.core.shapers.library import build_default_registry
from shapekit.core.shapers.models import CurvePoint
from shapekit.core.shapers.sampling import sample_shaper
from shapekit.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


def parse_params(pairs: list[str]) -> dict[str, float]:
    """Parse ``name=value`` pairs into a parameter dict.

    Raises:
        ValueError: If a pair is malformed or its value is not a number.
    """
    params: dict[str, float] = {}
    for pair in pairs:
        name, sep, raw = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected name=value, got '{pair}'")
        try:
            params[name.strip()] = float(raw)
        except ValueError as e:
            raise ValueError(f"Parameter '{name}' is not a number: '{raw}'") from e
    return params


def _points_table(title: str, points: list[CurvePoint]) -> Table:
    table = Table(title=title)
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for p in points:
        table.add_row(f"{p.x:.4f}", f"{p.y:.6f}")
    return table


def cmd_list(args: argparse.Namespace) -> int:
    registry = build_default_registry()
    table = Table(title="Shapers")
    table.add_column("kind", style="cyan")
    table.add_column("defaults")
    table.add_column("description")
    for definition in registry:
        defaults = ", ".join(f"{k}={v}" for k, v in definition.default_params.items())
        table.add_row(definition.kind.value, defaults or "-", definition.description or "")
    console.print(table)
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    registry = build_default_registry()
    try:
        params = parse_params(args.param)
        shaper = registry.create(args.kind, **params)
        points = sample_shaper(shaper, args.samples)
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    console.print(_points_table(args.kind, points))
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    try:
        config = load_presets(args.file)
        shapers = build_presets(config)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load presets: {escape(str(e))}[/red]")
        return 1

    samples = args.samples or config.samples
    try:
        for name, shaper in shapers.items():
            config_entry = config.presets[name]
            title = f"{name} ({config_entry.kind.value})"
            console.print(_points_table(title, sample_shaper(shaper, samples)))
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="shapekit",
        description="Inspect and sample shaping functions over [0, 1].",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    p.add_argument("--json-logs", action="store_true", help="Emit structured JSON logs")

    sub = p.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List shaper kinds and their defaults")
    list_cmd.set_defaults(func=cmd_list)

    sample = sub.add_parser("sample", help="Sample one shaper")
    sample.add_argument("kind", help="Shaper kind (see 'shapekit list')")
    sample.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Shaper parameter (repeatable)",
    )
    sample.add_argument("-n", "--samples", type=int, default=11, help="Number of samples")
    sample.set_defaults(func=cmd_sample)

    presets = sub.add_parser("presets", help="Sample every preset in a JSON/YAML file")
    presets.add_argument("file", type=Path, help="Presets file (.json, .yaml, .yml)")
    presets.add_argument(
        "-n", "--samples", type=int, default=None, help="Override the file's sample count"
    )
    presets.set_defaults(func=cmd_presets)

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(level=args.log_level, structured=args.json_logs)
    logger.debug("Running command %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
