"""Producers for scalar, temporal, identifier, enum and string shapes."""

import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Literal, get_args, get_origin

from fixture_engine.context import GenerationContext
from fixture_engine.errors import ConfigurationError
from fixture_engine.producers.base import DelegatedProducer, NullProducer, Producer
from fixture_engine.randomness import extensions as rx
from fixture_engine.shapes import shape_name


class EnumProducer(Producer):
    """Picks a declared enum member (or ``Literal`` value) uniformly at random."""

    def matches(self, shape: Any) -> bool:
        if isinstance(shape, type) and issubclass(shape, Enum):
            return True
        return get_origin(shape) is Literal

    def produce(self, context: GenerationContext) -> Any:
        shape = context.shape
        values = get_args(shape) if get_origin(shape) is Literal else list(shape)

        if not values:
            raise ConfigurationError(f"'{shape_name(shape)}' declares no values")

        return values[context.next_int(0, len(values))]


class StringProducer(NullProducer):
    """Generates strings of random length and content.

    The length is drawn from the resolved string bounds; each character is
    decoded from ``char_width`` random bytes using the configured encoding.
    Undecodable units become U+FFFD, so a string always has exactly the drawn
    number of characters.
    """

    def matches(self, shape: Any) -> bool:
        return shape is str

    def produce_value(self, context: GenerationContext) -> str:
        minlen, maxlen = context.string_bounds()
        length = context.next_int(minlen, maxlen)

        encoding = context.config.encoding
        width = context.config.char_width
        buffer = context.next_bytes(length * width)

        return "".join(
            buffer[i:i + width].decode(encoding, errors="replace")
            for i in range(0, len(buffer), width)
        )


class BytesProducer(Producer):
    """Generates byte strings sized by the resolved sequence bounds."""

    def matches(self, shape: Any) -> bool:
        return shape is bytes

    def produce(self, context: GenerationContext) -> bytes:
        minlen, maxlen = context.sequence_bounds()
        return context.next_bytes(context.next_int(minlen, maxlen))


def primitive_producers() -> list[DelegatedProducer]:
    """One delegated producer per built-in scalar shape."""
    table: list[tuple[Any, Any]] = [
        (bool, rx.next_boolean),
        (int, rx.next_int64),
        (float, rx.next_double),
        (complex, rx.next_complex),
        (Decimal, rx.next_decimal),
        (datetime, rx.next_datetime),
        (date, rx.next_date),
        (time, rx.next_time),
        (timedelta, rx.next_timedelta),
        (uuid.UUID, rx.next_uuid),
    ]
    return [
        DelegatedProducer(shape, lambda context, func=func: func(context.random_source))
        for shape, func in table
    ]
