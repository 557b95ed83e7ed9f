"""Shared pytest fixtures for shapekit tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from shapekit.core.shapers.library import build_default_registry
from shapekit.core.shapers.registry import ShaperRegistry

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Shaper Fixtures
# ============================================================================


@pytest.fixture
def registry() -> ShaperRegistry:
    """Registry with every built-in shaper."""
    return build_default_registry()


@pytest.fixture
def unit_grid() -> list[float]:
    """Eleven evenly spaced inputs over [0, 1]."""
    return [i / 10 for i in range(11)]


@pytest.fixture
def interior_grid() -> list[float]:
    """Inputs strictly inside (0, 1)."""
    return [i / 20 for i in range(1, 20)]


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
