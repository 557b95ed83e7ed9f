"""Tests for shaper schema models."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from shapekit.core.shapers.functions import circular_ease_in, cubic_bezier, double_cubic_seat
from shapekit.core.shapers.models import CurvePoint, Shaper, ShaperConfig, ShaperKind


class TestShaperKind:
    """Tests for ShaperKind."""

    def test_string_values(self) -> None:
        assert ShaperKind("cubic_bezier") is ShaperKind.CUBIC_BEZIER
        assert ShaperKind.CIRCULAR_FILLET == "circular_fillet"

    def test_family_count(self) -> None:
        assert len(ShaperKind) == 21


class TestShaperConfig:
    """Tests for ShaperConfig."""

    def test_kind_from_string(self) -> None:
        config = ShaperConfig(kind="double_cubic_seat", params={"a": 0.4})
        assert config.kind is ShaperKind.DOUBLE_CUBIC_SEAT
        assert config.params == {"a": 0.4}

    def test_params_default_empty(self) -> None:
        assert ShaperConfig(kind=ShaperKind.CIRCULAR_EASE_IN).params == {}

    def test_out_of_range_params_accepted(self) -> None:
        """Range handling is left to the shaper constructors."""
        config = ShaperConfig(kind="double_cubic_seat", params={"a": -3.0, "b": 7.0})
        assert config.params["b"] == 7.0

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShaperConfig(kind="not_a_shaper")

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShaperConfig(kind="cubic_bezier", steepness=1.0)

    def test_non_numeric_param_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShaperConfig(kind="cubic_bezier", params={"a": "steep"})

    def test_frozen(self) -> None:
        config = ShaperConfig(kind="cubic_bezier")
        with pytest.raises(ValidationError):
            config.kind = ShaperKind.QUADRATIC_BEZIER  # type: ignore[misc]


class TestCurvePoint:
    """Tests for CurvePoint."""

    def test_y_unconstrained(self) -> None:
        point = CurvePoint(x=1.0, y=1.25)
        assert point.y == 1.25

    @pytest.mark.parametrize("x", [-0.1, 1.1])
    def test_x_must_be_normalized(self, x: float) -> None:
        with pytest.raises(ValidationError):
            CurvePoint(x=x, y=0.0)


class TestShaperProtocol:
    """Tests for the Shaper protocol."""

    @pytest.mark.parametrize("factory", [double_cubic_seat, cubic_bezier, circular_ease_in])
    def test_constructed_shapers_satisfy_protocol(self, factory) -> None:
        assert isinstance(factory(), Shaper)

    def test_plain_callable_satisfies_protocol(self) -> None:
        assert isinstance(lambda x: x, Shaper)
