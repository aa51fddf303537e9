"""Fluent builder for configuring an ObjectGenerator."""

from typing import Any

from fixture_engine.config.base import GeneratorConfig
from fixture_engine.constraints.percentage import Percentage
from fixture_engine.engine.object_generator import ObjectGenerator, create_default_generator
from fixture_engine.producers.base import NullProducer, Producer
from fixture_engine.randomness.base import RandomSource


class ObjectGeneratorBuilder:
    """Fluent builder for creating ObjectGenerators.

    Settings are collected first and applied in ``build``, so the order of
    calls does not matter except among producers and mappings, which are
    applied in the order given.
    """

    def __init__(self, config: GeneratorConfig | None = None):
        self._settings: dict[str, Any] = config.model_dump() if config else {}
        self._random_source: RandomSource | None = None
        self._null_chances: list[tuple[Percentage | int | float, type[NullProducer] | None]] = []
        self._abstractions: list[tuple[Any, Any]] = []
        self._generic_abstractions: list[tuple[Any, Any]] = []
        self._producers: list[tuple[Producer, int | None]] = []

    def seed(self, seed: int) -> "ObjectGeneratorBuilder":
        self._settings["seed"] = seed
        return self

    def random_source(self, random_source: RandomSource) -> "ObjectGeneratorBuilder":
        self._random_source = random_source
        return self

    def string_length(self, minimum: int, maximum: int) -> "ObjectGeneratorBuilder":
        self._settings["min_string_length"] = minimum
        self._settings["max_string_length"] = maximum
        return self

    def sequence_length(self, minimum: int, maximum: int) -> "ObjectGeneratorBuilder":
        self._settings["min_sequence_length"] = minimum
        self._settings["max_sequence_length"] = maximum
        return self

    def encoding(self, encoding: str) -> "ObjectGeneratorBuilder":
        self._settings["encoding"] = encoding
        return self

    def null_chance(
        self,
        chance: Percentage | int | float,
        producer_type: type[NullProducer] | None = None,
    ) -> "ObjectGeneratorBuilder":
        self._null_chances.append((chance, producer_type))
        return self

    def map_abstraction(self, abstract: Any, concrete: Any) -> "ObjectGeneratorBuilder":
        self._abstractions.append((abstract, concrete))
        return self

    def map_generic_abstraction(self, abstract_origin: Any, concrete_origin: Any) -> "ObjectGeneratorBuilder":
        self._generic_abstractions.append((abstract_origin, concrete_origin))
        return self

    def producer(self, producer: Producer, index: int | None = None) -> "ObjectGeneratorBuilder":
        """Register an extra producer, appended or inserted at ``index``."""
        self._producers.append((producer, index))
        return self

    def build(self) -> ObjectGenerator:
        """Build the generator.

        Raises:
            pydantic.ValidationError: If the collected settings are invalid
            ConfigurationError: If a mapping, producer or null chance is invalid
        """
        config = GeneratorConfig(**self._settings)
        generator = create_default_generator(config=config, random_source=self._random_source)

        for producer, index in self._producers:
            if index is None:
                generator.producers.add(producer)
            else:
                generator.producers.insert(index, producer)

        for abstract, concrete in self._abstractions:
            generator.map_abstraction(abstract, concrete)

        for abstract_origin, concrete_origin in self._generic_abstractions:
            generator.map_generic_abstraction(abstract_origin, concrete_origin)

        for chance, producer_type in self._null_chances:
            generator.set_null_chance(chance, producer_type)

        return generator
