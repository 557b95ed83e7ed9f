"""Shaper registry and construction by kind."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
import logging
from typing import Any

from shapekit.core.shapers.models import Shaper, ShaperConfig, ShaperKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShaperDefinition:
    """Registry entry for one shaper family.

    Attributes:
        kind: Family identifier.
        factory: Constructor taking the family parameters as keywords.
        default_params: Every accepted parameter with its default value.
        description: Short human-readable summary.
    """

    kind: ShaperKind
    factory: Callable[..., Shaper]
    default_params: Mapping[str, float] = field(default_factory=dict)
    description: str | None = None

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(self.default_params)


class ShaperRegistry:
    """Registry for shaper families."""

    def __init__(self) -> None:
        self._registry: dict[ShaperKind, ShaperDefinition] = {}

    def register(self, definition: ShaperDefinition) -> None:
        if definition.kind in self._registry:
            raise ValueError(f"Shaper '{definition.kind.value}' already registered")
        self._registry[definition.kind] = definition

    def get(self, kind: ShaperKind | str) -> ShaperDefinition:
        try:
            return self._registry[ShaperKind(kind)]
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Shaper '{kind}' is not registered") from exc

    def kinds(self) -> list[ShaperKind]:
        return list(self._registry)

    def __iter__(self) -> Iterator[ShaperDefinition]:
        return iter(self._registry.values())

    def __len__(self) -> int:
        return len(self._registry)

    def create(self, kind: ShaperKind | str, **params: Any) -> Shaper:
        """Construct a shaper of the given kind.

        Missing parameters take the family defaults. Out-of-range values are
        clamped by the family constructor.

        Args:
            kind: Shaper family.
            **params: Family parameters by name.

        Returns:
            The constructed shaper.

        Raises:
            ValueError: If the kind is not registered or a parameter name is
                not accepted by the family.
        """
        definition = self.get(kind)
        unknown = sorted(set(params) - set(definition.param_names))
        if unknown:
            raise ValueError(
                f"Unknown parameter(s) for '{definition.kind.value}': {', '.join(unknown)}"
                f" (expected: {', '.join(definition.param_names) or 'none'})"
            )

        merged = {**definition.default_params, **params}
        logger.debug("Constructing %s shaper with %s", definition.kind.value, merged)
        return definition.factory(**merged)

    def build(self, config: ShaperConfig) -> Shaper:
        """Construct a shaper from a validated config."""
        return self.create(config.kind, **config.params)
