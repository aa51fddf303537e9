"""Object Generator - the dispatch engine.

The ObjectGenerator turns a shape and a set of constraint markers into a
value by:
- Building a fresh generation context for the call
- Asking the producer registry for the first producer that matches
- Letting that producer build the value, recursing for sub-shapes
"""

from typing import Any, Iterable, Iterator, TypeVar

from fixture_engine.config.base import GeneratorConfig
from fixture_engine.constraints.base import Constraint
from fixture_engine.constraints.percentage import Percentage
from fixture_engine.context import GenerationContext
from fixture_engine.errors import ConfigurationError, NoProducerError
from fixture_engine.producers.abstractions import AbstractionProducer, GenericAbstractionProducer
from fixture_engine.producers.base import NullProducer, Producer
from fixture_engine.producers.complex_type import ComplexTypeProducer
from fixture_engine.producers.defaults import default_producers
from fixture_engine.producers.registry import ProducerRegistry
from fixture_engine.randomness.base import DefaultRandomSource, RandomSource
from fixture_engine.utils.logging import get_logger

logger = get_logger(__name__)

P = TypeVar("P", bound=Producer)


class ObjectGenerator:
    """Engine for generating random values of arbitrary shapes.

    The ObjectGenerator:
    - Owns one configuration, one random source and one producer registry
    - Dispatches every request, including recursive ones, through the registry
    - Exposes setup helpers for null chances and abstraction mappings

    Registry and configuration changes are meant to happen during setup.
    Once set up, ``generate`` may be called from several threads at once.
    """

    def __init__(
        self,
        random_source: RandomSource | None = None,
        config: GeneratorConfig | None = None,
        producers: ProducerRegistry | list[Producer] | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.random_source = random_source or DefaultRandomSource(self.config.seed)

        if isinstance(producers, ProducerRegistry):
            self.producers = producers
        else:
            self.producers = ProducerRegistry(default_producers() if producers is None else producers)

    def generate(self, shape: Any, constraints: Iterable[Constraint] = ()) -> Any:
        """Generate one value for a shape.

        Args:
            shape: Any supported type annotation
            constraints: Markers applied to this call only

        Returns:
            The generated value, or None where a null roll succeeded

        Raises:
            NoProducerError: If no registered producer matches the shape
        """
        context = GenerationContext(
            shape=shape,
            constraints=tuple(constraints),
            generator=self,
            random_source=self.random_source,
            config=self.config,
        )

        producer = self.producers.resolve(shape)
        if producer is None:
            raise NoProducerError(shape)

        return producer.produce(context)

    def generate_many(
        self,
        shape: Any,
        count: int,
        constraints: Iterable[Constraint] = (),
    ) -> Iterator[Any]:
        """Lazily generate ``count`` independent values for a shape.

        Nothing is generated until the iterator is consumed, and each value
        comes from its own ``generate`` call.

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return self._iter_many(shape, count, tuple(constraints))

    def _iter_many(self, shape: Any, count: int, constraints: tuple[Constraint, ...]) -> Iterator[Any]:
        for _ in range(count):
            yield self.generate(shape, constraints)

    def set_null_chance(
        self,
        chance: Percentage | int | float,
        producer_type: type[NullProducer] | None = None,
    ) -> None:
        """Set the chance that null-capable shapes come back as None.

        Args:
            chance: A Percentage, an int percent or a float ratio
            producer_type: Restrict the change to registered producers of
                this type; when omitted the engine-wide default changes

        Raises:
            ConfigurationError: If producer_type is not a NullProducer type
                or no producer of that type is registered
        """
        chance = Percentage.coerce(chance)

        if producer_type is None:
            self.config.null_chance = chance
            logger.debug("null_chance.set", chance=str(chance))
            return

        if not (isinstance(producer_type, type) and issubclass(producer_type, NullProducer)):
            raise ConfigurationError(f"{producer_type!r} is not a null-capable producer type")

        targets = [p for p in self.producers if isinstance(p, producer_type)]
        if not targets:
            raise ConfigurationError(f"No {producer_type.__name__} is registered")

        for producer in targets:
            producer.null_chance = chance
        logger.debug("null_chance.set", chance=str(chance), producer=producer_type.__name__)

    def map_abstraction(self, abstract: Any, concrete: Any) -> "ObjectGenerator":
        """Generate ``concrete`` wherever ``abstract`` is requested.

        Raises:
            ConfigurationError: If the mapping is invalid
        """
        self._abstraction_producer(AbstractionProducer).map(abstract, concrete)
        return self

    def map_generic_abstraction(self, abstract_origin: Any, concrete_origin: Any) -> "ObjectGenerator":
        """Rebind a generic interface such as ``Mapping`` onto a concrete generic.

        Raises:
            ConfigurationError: If the mapping is invalid
        """
        self._abstraction_producer(GenericAbstractionProducer).map(abstract_origin, concrete_origin)
        return self

    def _abstraction_producer(self, producer_type: type[P]) -> P:
        producer = self.producers.find(producer_type)
        if producer is not None:
            return producer

        producer = producer_type()
        fallback = self.producers.find(ComplexTypeProducer)
        if fallback is None:
            self.producers.add(producer)
        else:
            self.producers.insert(self.producers.index(fallback), producer)

        logger.debug("producer.registered", producer=producer.name, position=self.producers.index(producer))
        return producer

    def __repr__(self) -> str:
        return f"ObjectGenerator(producers={len(self.producers)}, seed={self.config.seed!r})"


def create_default_generator(
    seed: int | None = None,
    config: GeneratorConfig | None = None,
    random_source: RandomSource | None = None,
) -> ObjectGenerator:
    """Create an engine with the default producers.

    Args:
        seed: Seed for the default random source; overrides ``config.seed``
        config: Engine configuration; a default one is created when omitted
        random_source: Random source to use instead of the default one

    Returns:
        A ready-to-use ObjectGenerator
    """
    config = config or GeneratorConfig()
    if seed is not None:
        config = config.model_copy(update={"seed": seed})

    generator = ObjectGenerator(
        random_source=random_source or DefaultRandomSource(config.seed),
        config=config,
    )
    logger.debug(
        "generator.created",
        seed=config.seed,
        random_source=type(generator.random_source).__name__,
        producers=len(generator.producers),
    )
    return generator
