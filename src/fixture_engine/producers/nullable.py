"""Producer for ``Optional[T]`` shapes."""

from typing import Any

from fixture_engine.context import GenerationContext
from fixture_engine.producers.base import NullProducer
from fixture_engine.shapes import optional_argument


class NullableProducer(NullProducer):
    """Rolls for None on behalf of ``Optional[T]``, otherwise generates ``T``.

    The wrapped shape is generated through the engine with the same
    constraints, so ``Optional[Annotated[str, MaxLength(8)]]`` and
    ``Annotated[Optional[str], MaxLength(8)]`` behave alike.
    """

    def matches(self, shape: Any) -> bool:
        return optional_argument(shape) is not None

    def produce_value(self, context: GenerationContext) -> Any:
        return context.generate(optional_argument(context.shape), context.constraints)
