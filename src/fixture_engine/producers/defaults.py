"""The standard producer line-up."""

from fixture_engine.producers.abstractions import AnnotatedProducer, GenericAbstractionProducer
from fixture_engine.producers.base import Producer
from fixture_engine.producers.complex_type import ComplexTypeProducer
from fixture_engine.producers.containers import (
    ArrayProducer,
    DictionaryProducer,
    KeyValuePairProducer,
    ListProducer,
    SequenceProducer,
)
from fixture_engine.producers.nullable import NullableProducer
from fixture_engine.producers.primitives import (
    BytesProducer,
    EnumProducer,
    StringProducer,
    primitive_producers,
)


def default_producers() -> list[Producer]:
    """Build a fresh list of the default producers, most specific first.

    ``Annotated`` and ``Optional`` wrappers are peeled off before anything
    else, and the complex-object producer comes last since it accepts any
    concrete class.
    """
    return [
        AnnotatedProducer(),
        NullableProducer(),
        EnumProducer(),
        *primitive_producers(),
        GenericAbstractionProducer(),
        ListProducer(),
        DictionaryProducer(),
        KeyValuePairProducer(),
        StringProducer(),
        BytesProducer(),
        ArrayProducer(),
        SequenceProducer(),
        ComplexTypeProducer(),
    ]
