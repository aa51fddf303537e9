"""Producers for container shapes.

Every sized container draws its size once, uniformly from the resolved
sequence bounds [min, max), then generates each element through the engine
with no constraints of its own.
"""

import collections.abc
from typing import Any, get_args, get_origin

from fixture_engine.context import GenerationContext
from fixture_engine.producers.base import Producer
from fixture_engine.shapes import KeyValuePair, generic_origin


class SizedContainerProducer(Producer):
    """Base for producers that fill a container of random size."""

    def draw_size(self, context: GenerationContext) -> int:
        minlen, maxlen = context.sequence_bounds()
        return context.next_int(minlen, maxlen)

    def generate_items(self, context: GenerationContext, item_shape: Any) -> list[Any]:
        size = self.draw_size(context)
        return [context.generate(item_shape) for _ in range(size)]


class ArrayProducer(SizedContainerProducer):
    """Generates ``tuple[T, ...]`` arrays."""

    def matches(self, shape: Any) -> bool:
        if get_origin(shape) is not tuple:
            return False
        args = get_args(shape)
        return len(args) == 2 and args[1] is Ellipsis

    def produce(self, context: GenerationContext) -> tuple[Any, ...]:
        return tuple(self.generate_items(context, get_args(context.shape)[0]))


class SequenceProducer(ArrayProducer):
    """Generates general ``Iterable[T]`` sequences, materialized as tuples."""

    def matches(self, shape: Any) -> bool:
        return generic_origin(shape, collections.abc.Iterable)


class ListProducer(SizedContainerProducer):
    """Generates ``list[T]`` lists."""

    def matches(self, shape: Any) -> bool:
        return generic_origin(shape, list)

    def produce(self, context: GenerationContext) -> list[Any]:
        return self.generate_items(context, get_args(context.shape)[0])


class DictionaryProducer(SizedContainerProducer):
    """Generates ``dict[K, V]`` maps.

    One key and one value are generated per slot; a repeated key overwrites
    the earlier entry, as assignment into any map would.
    """

    def matches(self, shape: Any) -> bool:
        return generic_origin(shape, dict)

    def produce(self, context: GenerationContext) -> dict[Any, Any]:
        key_shape, value_shape = get_args(context.shape)
        result: dict[Any, Any] = {}

        for _ in range(self.draw_size(context)):
            key = context.generate(key_shape)
            result[key] = context.generate(value_shape)

        return result


class KeyValuePairProducer(Producer):
    """Generates exactly one key and one value for ``KeyValuePair[K, V]``."""

    def matches(self, shape: Any) -> bool:
        return generic_origin(shape, KeyValuePair)

    def produce(self, context: GenerationContext) -> KeyValuePair:
        key_shape, value_shape = get_args(context.shape)
        return KeyValuePair(context.generate(key_shape), context.generate(value_shape))
