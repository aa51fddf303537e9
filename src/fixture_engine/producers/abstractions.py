"""Producers that rewrite a request into a request for another shape.

None of these construct a value themselves: each maps the requested shape to
a different one and recurses once through the engine.
"""

import collections.abc
from typing import Annotated, Any, get_args, get_origin

from fixture_engine.constraints.base import constraint_markers
from fixture_engine.context import GenerationContext
from fixture_engine.errors import ConfigurationError
from fixture_engine.producers.base import Producer
from fixture_engine.shapes import is_abstract_shape, is_protocol, shape_name
from fixture_engine.utils.logging import get_logger

logger = get_logger(__name__)


def _check_mapping(abstract: Any, concrete: Any) -> None:
    if not is_abstract_shape(abstract):
        raise ConfigurationError(f"'{shape_name(abstract)}' must be abstract or a protocol.")

    if is_protocol(abstract) or not isinstance(concrete, type):
        return

    if not issubclass(concrete, abstract):
        raise ConfigurationError(
            f"'{shape_name(concrete)}' is not a subclass of '{shape_name(abstract)}'."
        )


class AbstractionProducer(Producer):
    """Maps abstract classes and protocols to more derived shapes.

    The target does not have to be concrete itself; it is generated through
    the engine like any other shape.
    """

    def __init__(self, type_map: dict[Any, Any] | None = None):
        self.type_map: dict[Any, Any] = {}
        for abstract, concrete in (type_map or {}).items():
            self.map(abstract, concrete)

    def map(self, abstract: Any, concrete: Any) -> "AbstractionProducer":
        """Map ``abstract`` to ``concrete``.

        Raises:
            ConfigurationError: If ``abstract`` is neither abstract nor a
                protocol, or ``concrete`` is a class that does not derive
                from a non-protocol ``abstract``
        """
        _check_mapping(abstract, concrete)
        self.type_map[abstract] = concrete
        logger.debug("abstraction.mapped", abstract=shape_name(abstract), concrete=shape_name(concrete))
        return self

    def matches(self, shape: Any) -> bool:
        return is_abstract_shape(shape) and shape in self.type_map

    def produce(self, context: GenerationContext) -> Any:
        return context.generate(self.type_map[context.shape], context.constraints)


class GenericAbstractionProducer(Producer):
    """Rebinds generic interfaces onto their generic concrete counterparts.

    ``Mapping[str, int]`` becomes ``dict[str, int]``, ``Sequence[float]``
    becomes ``list[float]``, and so on. Constraints are forwarded unchanged.
    """

    DEFAULT_TYPE_MAP: dict[Any, Any] = {
        collections.abc.Sequence: list,
        collections.abc.MutableSequence: list,
        collections.abc.Mapping: dict,
        collections.abc.MutableMapping: dict,
    }

    def __init__(self, type_map: dict[Any, Any] | None = None):
        self.type_map: dict[Any, Any] = dict(self.DEFAULT_TYPE_MAP)
        for abstract, concrete in (type_map or {}).items():
            self.map(abstract, concrete)

    def map(self, abstract_origin: Any, concrete_origin: Any) -> "GenericAbstractionProducer":
        """Map a generic interface to a generic concrete class.

        Raises:
            ConfigurationError: If the interface is not abstract or the
                concrete class does not derive from it
        """
        _check_mapping(abstract_origin, concrete_origin)
        self.type_map[abstract_origin] = concrete_origin
        logger.debug(
            "generic_abstraction.mapped",
            abstract=shape_name(abstract_origin),
            concrete=shape_name(concrete_origin),
        )
        return self

    def matches(self, shape: Any) -> bool:
        return get_origin(shape) in self.type_map and bool(get_args(shape))

    def produce(self, context: GenerationContext) -> Any:
        shape = context.shape
        concrete = self.type_map[get_origin(shape)][get_args(shape)]
        return context.generate(concrete, context.constraints)


class AnnotatedProducer(Producer):
    """Unwraps ``Annotated[T, ...]`` into ``T`` plus its constraint markers.

    Markers declared on the annotation come first, followed by any
    constraints already attached to the call, so declared markers win the
    first-declared tie-break. Metadata that is not a marker is ignored.
    """

    def matches(self, shape: Any) -> bool:
        return get_origin(shape) is Annotated

    def produce(self, context: GenerationContext) -> Any:
        shape = context.shape
        markers = constraint_markers(shape.__metadata__)
        return context.generate(shape.__origin__, markers + context.constraints)
