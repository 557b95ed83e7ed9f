"""Test suite for shapekit.

Test Structure:
- unit/: Unit tests for individual components
  - shapers/: Shaper families, geometry solvers, registry and sampling
  - config/: Presets file loading
  - utils/: Logging, math and JSON helpers
  - cli/: Command-line interface
- conftest.py: Shared fixtures
"""
