"""Tests for shaper registry."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from shapekit.core.shapers.functions.polynomial import DoubleCubicSeat, double_cubic_seat
from shapekit.core.shapers.models import ShaperConfig, ShaperKind
from shapekit.core.shapers.registry import ShaperDefinition, ShaperRegistry


def _seat_definition() -> ShaperDefinition:
    return ShaperDefinition(
        kind=ShaperKind.DOUBLE_CUBIC_SEAT,
        factory=double_cubic_seat,
        default_params={"a": 0.5, "b": 0.5},
        description="seat",
    )


class TestShaperRegistry:
    """Tests for ShaperRegistry."""

    def test_register_and_get(self) -> None:
        registry = ShaperRegistry()
        definition = _seat_definition()
        registry.register(definition)

        assert registry.get(ShaperKind.DOUBLE_CUBIC_SEAT) is definition
        assert registry.get("double_cubic_seat") is definition
        assert registry.kinds() == [ShaperKind.DOUBLE_CUBIC_SEAT]
        assert len(registry) == 1
        assert list(registry) == [definition]

    def test_duplicate_registration_raises(self) -> None:
        registry = ShaperRegistry()
        registry.register(_seat_definition())
        with pytest.raises(ValueError, match="already registered"):
            registry.register(_seat_definition())

    def test_unknown_kind_raises(self) -> None:
        registry = ShaperRegistry()
        with pytest.raises(ValueError, match="not registered"):
            registry.get("no_such_shaper")

    def test_known_but_unregistered_kind_raises(self) -> None:
        registry = ShaperRegistry()
        with pytest.raises(ValueError, match="not registered"):
            registry.get(ShaperKind.CUBIC_BEZIER)

    def test_create_merges_defaults(self) -> None:
        registry = ShaperRegistry()
        registry.register(_seat_definition())

        shaper = registry.create("double_cubic_seat", a=0.3)

        assert isinstance(shaper, DoubleCubicSeat)
        assert shaper.a == 0.3
        assert shaper.b == pytest.approx(0.5)

    def test_create_rejects_unknown_params(self) -> None:
        registry = ShaperRegistry()
        registry.register(_seat_definition())
        with pytest.raises(ValueError, match="Unknown parameter"):
            registry.create("double_cubic_seat", steepness=2.0)

    def test_build_from_config(self) -> None:
        registry = ShaperRegistry()
        registry.register(_seat_definition())

        config = ShaperConfig(kind=ShaperKind.DOUBLE_CUBIC_SEAT, params={"b": 0.8})
        shaper = registry.build(config)

        assert shaper(0.5) == pytest.approx(0.2)


class TestShaperDefinition:
    """Tests for ShaperDefinition."""

    def test_param_names(self) -> None:
        assert _seat_definition().param_names == ("a", "b")

    def test_frozen(self) -> None:
        definition = _seat_definition()
        with pytest.raises(FrozenInstanceError):
            definition.description = "changed"  # type: ignore[misc]
