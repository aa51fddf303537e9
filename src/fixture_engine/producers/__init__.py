"""Producers for every supported shape."""

from fixture_engine.producers.base import DelegatedProducer, NullProducer, Producer
from fixture_engine.producers.primitives import (
    BytesProducer,
    EnumProducer,
    StringProducer,
    primitive_producers,
)
from fixture_engine.producers.nullable import NullableProducer
from fixture_engine.producers.containers import (
    ArrayProducer,
    DictionaryProducer,
    KeyValuePairProducer,
    ListProducer,
    SequenceProducer,
    SizedContainerProducer,
)
from fixture_engine.producers.abstractions import (
    AbstractionProducer,
    AnnotatedProducer,
    GenericAbstractionProducer,
)
from fixture_engine.producers.complex_type import (
    ComplexTypeProducer,
    ConstructorPlan,
    ConstructorPlanCache,
    PlanParameter,
    compute_constructor_plan,
)
from fixture_engine.producers.registry import ProducerRegistry
from fixture_engine.producers.defaults import default_producers

__all__ = [
    "Producer",
    "NullProducer",
    "DelegatedProducer",
    "BytesProducer",
    "EnumProducer",
    "StringProducer",
    "primitive_producers",
    "NullableProducer",
    "SizedContainerProducer",
    "ArrayProducer",
    "SequenceProducer",
    "ListProducer",
    "DictionaryProducer",
    "KeyValuePairProducer",
    "AbstractionProducer",
    "GenericAbstractionProducer",
    "AnnotatedProducer",
    "ComplexTypeProducer",
    "ConstructorPlan",
    "ConstructorPlanCache",
    "PlanParameter",
    "compute_constructor_plan",
    "ProducerRegistry",
    "default_producers",
]
