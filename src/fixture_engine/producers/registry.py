"""Producer Registry for ordering and resolving producers."""

from typing import Any, Iterator, TypeVar

from fixture_engine.errors import ConfigurationError
from fixture_engine.producers.base import Producer

P = TypeVar("P", bound=Producer)


class ProducerRegistry:
    """Ordered collection of producers.

    Order is significant: ``resolve`` returns the first producer whose
    ``matches`` accepts a shape, so more specific producers must sit in front
    of more general ones.
    """

    def __init__(self, producers: list[Producer] | None = None):
        self._producers: list[Producer] = []
        for producer in producers or []:
            self.add(producer)

    def add(self, producer: Producer) -> None:
        """Append a producer, giving it the lowest precedence."""
        self._check(producer)
        self._producers.append(producer)

    def insert(self, index: int, producer: Producer) -> None:
        """Insert a producer at ``index``.

        Args:
            index: Position to insert at, as for ``list.insert``
            producer: The producer to insert
        """
        self._check(producer)
        self._producers.insert(index, producer)

    def remove(self, producer: Producer) -> bool:
        """Remove a producer from the registry.

        Args:
            producer: The producer instance to remove

        Returns:
            True if removed, False if not found
        """
        for i, candidate in enumerate(self._producers):
            if candidate is producer:
                del self._producers[i]
                return True
        return False

    def move(self, producer: Producer, index: int) -> None:
        """Move a registered producer to ``index``.

        Raises:
            ConfigurationError: If the producer is not registered
        """
        if not self.remove(producer):
            raise ConfigurationError(f"{producer!r} is not registered")
        self._producers.insert(index, producer)

    def find(self, producer_type: type[P]) -> P | None:
        """Get the first registered producer that is an instance of ``producer_type``."""
        for producer in self._producers:
            if isinstance(producer, producer_type):
                return producer
        return None

    def index(self, producer: Producer) -> int:
        """Position of a registered producer, or -1 if it is not registered."""
        for i, candidate in enumerate(self._producers):
            if candidate is producer:
                return i
        return -1

    def resolve(self, shape: Any) -> Producer | None:
        """Get the first producer that matches ``shape``.

        Returns:
            The matching producer or None if nothing matches
        """
        for producer in self._producers:
            if producer.matches(shape):
                return producer
        return None

    def clear(self) -> None:
        self._producers.clear()

    def _check(self, producer: Producer) -> None:
        if not isinstance(producer, Producer):
            raise ConfigurationError(f"Expected a Producer, got {type(producer).__name__}")
        if producer in self:
            raise ConfigurationError(f"{producer!r} is already registered")

    def __iter__(self) -> Iterator[Producer]:
        return iter(list(self._producers))

    def __len__(self) -> int:
        return len(self._producers)

    def __contains__(self, producer: Producer) -> bool:
        """Check if this exact producer instance is registered."""
        return any(candidate is producer for candidate in self._producers)
