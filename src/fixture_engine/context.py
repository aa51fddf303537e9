"""Per-call generation context.

A context bundles everything a producer needs for one generation call: the
shape being generated, the constraint markers attached to this call, the
engine's configuration and random source, and a handle back into the engine
for generating sub-shapes. A fresh context is built for every call, including
recursive ones, so resolved bounds never leak from one level to the next.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

from fixture_engine.config.base import GeneratorConfig
from fixture_engine.constraints.base import (
    Constraint,
    MaxLength,
    MinLength,
    Required,
    find_constraint,
)
from fixture_engine.constraints.percentage import Percentage
from fixture_engine.errors import ConfigurationError
from fixture_engine.randomness.base import RandomSource
from fixture_engine.shapes import shape_name

if TYPE_CHECKING:
    from fixture_engine.engine.object_generator import ObjectGenerator


@dataclass(frozen=True)
class GenerationContext:
    """The shape, constraints and collaborators of one generation call."""

    shape: Any
    constraints: tuple[Constraint, ...]
    generator: "ObjectGenerator"
    random_source: RandomSource
    config: GeneratorConfig

    def generate(self, shape: Any, constraints: Iterable[Constraint] = ()) -> Any:
        """Generate a sub-shape through the engine's full dispatch."""
        return self.generator.generate(shape, constraints)

    def has_constraint(self, kind: type[Constraint]) -> bool:
        return find_constraint(self.constraints, kind) is not None

    def get_constraint(self, kind: type[Constraint]) -> Constraint | None:
        """Return the first-declared marker of exactly ``kind``."""
        return find_constraint(self.constraints, kind)

    @property
    def required(self) -> bool:
        return self.has_constraint(Required)

    @property
    def null_chance(self) -> Percentage:
        return self.config.null_chance

    def string_bounds(self) -> tuple[int, int]:
        """Resolved (min, max) string length for this call."""
        return self._resolve_bounds(self.config.min_string_length, self.config.max_string_length)

    def sequence_bounds(self) -> tuple[int, int]:
        """Resolved (min, max) container size for this call."""
        return self._resolve_bounds(self.config.min_sequence_length, self.config.max_sequence_length)

    def _resolve_bounds(self, default_min: int, default_max: int) -> tuple[int, int]:
        """Combine the call's length markers with the configured defaults.

        The maximum is exclusive. Only two explicit markers can conflict;
        a single marker adjusts the default on the other side so the range
        stays usable.

        Raises:
            ConfigurationError: If ``MinLength`` exceeds ``MaxLength``.
        """
        min_marker = self.get_constraint(MinLength)
        max_marker = self.get_constraint(MaxLength)

        minlen = min_marker.length if min_marker is not None else default_min
        maxlen = max_marker.length if max_marker is not None else default_max

        # A lone marker pulls the other configured default along with it.
        if min_marker is None and max_marker is not None:
            minlen = min(default_min, max(maxlen - 1, 0))
        elif max_marker is None and min_marker is not None:
            maxlen = max(default_max, minlen + 1)

        if minlen > maxlen:
            raise ConfigurationError(
                f"Malformed bounds for '{shape_name(self.shape)}': "
                f"minimum length {minlen} exceeds maximum length {maxlen}"
            )
        return minlen, maxlen

    def next_int(self, minval: int, maxval: int) -> int:
        """Return an integer in [minval, maxval) from the random source."""
        return self.random_source.next_int(minval, maxval)

    def next_bytes(self, count: int) -> bytes:
        return self.random_source.next_bytes(count)
