"""Base classes for producers.

A producer is the unit of work behind every generated value. It answers two
questions: can it produce a value for a given shape (``matches``), and what
that value is (``produce``). Producers that need values for sub-shapes call
back into the engine through the context rather than calling each other.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from fixture_engine.constraints.percentage import Percentage
from fixture_engine.context import GenerationContext
from fixture_engine.shapes import shape_name


class Producer(ABC):
    """Abstract base class for all value producers."""

    @abstractmethod
    def matches(self, shape: Any) -> bool:
        """Determine whether this producer can generate values for ``shape``."""

    @abstractmethod
    def produce(self, context: GenerationContext) -> Any:
        """Produce a value for ``context.shape``."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{self.name}()"


class NullProducer(Producer):
    """A producer for null-capable shapes.

    Before producing a real value it rolls for ``None``: one integer is drawn
    from [0, 99] and ``None`` is returned when it falls below
    ``100 * null_chance``, unless the call carries a ``Required`` marker.
    Subclasses implement ``produce_value``.
    """

    def __init__(self, null_chance: Percentage | int | float | None = None):
        self.null_chance = null_chance

    @property
    def null_chance(self) -> Percentage | None:
        """This producer's chance of yielding None; None defers to the engine default."""
        return self._null_chance

    @null_chance.setter
    def null_chance(self, value: Percentage | int | float | None) -> None:
        self._null_chance = None if value is None else Percentage.coerce(value)

    def produce(self, context: GenerationContext) -> Any:
        if not context.required and self.roll_for_null(context):
            return None
        return self.produce_value(context)

    def roll_for_null(self, context: GenerationContext) -> bool:
        chance = self._null_chance if self._null_chance is not None else context.null_chance
        return context.next_int(0, 100) < 100 * chance

    @abstractmethod
    def produce_value(self, context: GenerationContext) -> Any:
        """Produce a value that is not None."""


class DelegatedProducer(Producer):
    """Matches one exact shape and delegates production to a function."""

    def __init__(self, shape: Any, func: Callable[[GenerationContext], Any]):
        self.shape = shape
        self._func = func

    def matches(self, shape: Any) -> bool:
        return shape is self.shape

    def produce(self, context: GenerationContext) -> Any:
        return self._func(context)

    @property
    def name(self) -> str:
        return f"DelegatedProducer[{shape_name(self.shape)}]"

    def __repr__(self) -> str:
        return f"DelegatedProducer({shape_name(self.shape)})"
