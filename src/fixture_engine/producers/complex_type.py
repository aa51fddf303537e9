"""Producer for complex objects.

A complex object is built in three steps:

1. Pick a constructor. Candidates are the class itself and its public
   ``classmethod`` factories annotated to return the class. The candidate
   with the most parameters wins; ties go to the first one found, with the
   class itself first.
2. Generate one value per constructor parameter and call it.
3. Generate and assign every public writable member the constructor did not
   cover: class-level annotations (except ``ClassVar``) and properties with a
   setter. Each member is generated with its own ``Annotated`` constraints.

The result of steps 1 and 3's introspection is a ``ConstructorPlan``,
computed once per class and shared through a ``ConstructorPlanCache``.
"""

from dataclasses import dataclass
import dataclasses
import inspect
from enum import Enum
from typing import Any, Callable, ClassVar, Self, get_origin, get_type_hints

from fixture_engine.constraints.percentage import Percentage
from fixture_engine.context import GenerationContext
from fixture_engine.errors import ConfigurationError
from fixture_engine.producers.base import NullProducer
from fixture_engine.shapes import is_abstract_shape, shape_name
from fixture_engine.utils.locking import ReadWriteLock
from fixture_engine.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlanParameter:
    """A constructor parameter or writable member and the shape it takes."""

    name: str
    shape: Any
    keyword: bool = False


@dataclass(frozen=True)
class ConstructorPlan:
    """How to build one class: a factory, its parameters, and leftover members."""

    factory: Callable[..., Any]
    parameters: tuple[PlanParameter, ...]
    members: tuple[PlanParameter, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.parameters)


def _factory_candidates(shape: type) -> list[Callable[..., Any]]:
    candidates: list[Callable[..., Any]] = [shape]

    for name, attr in vars(shape).items():
        if name.startswith("_") or not isinstance(attr, classmethod):
            continue
        try:
            returns = get_type_hints(attr.__func__).get("return")
        except (NameError, AttributeError, TypeError):
            continue
        if returns is shape or returns is Self:
            candidates.append(getattr(shape, name))

    return candidates


def _plan_parameters(candidate: Callable[..., Any]) -> tuple[PlanParameter, ...] | None:
    """Describe a candidate's parameters, or None if it cannot be called."""
    try:
        signature = inspect.signature(candidate, eval_str=True)
    except (ValueError, TypeError, NameError, AttributeError) as e:
        logger.debug("constructor.unusable", candidate=repr(candidate), error=str(e))
        return None

    parameters = []
    by_keyword = False

    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue

        if param.annotation is param.empty:
            if param.default is param.empty:
                return None
            # Skipped, so every later parameter has to be passed by name.
            by_keyword = True
            continue

        if param.kind is param.POSITIONAL_ONLY and by_keyword:
            return None

        parameters.append(
            PlanParameter(
                name=param.name,
                shape=param.annotation,
                keyword=by_keyword or param.kind is param.KEYWORD_ONLY,
            )
        )

    return tuple(parameters)


def _is_frozen(shape: type) -> bool:
    if dataclasses.is_dataclass(shape) and shape.__dataclass_params__.frozen:
        return True
    model_config = getattr(shape, "model_config", None)
    return isinstance(model_config, dict) and bool(model_config.get("frozen"))


def _writable_members(shape: type, covered: set[str]) -> tuple[PlanParameter, ...]:
    if _is_frozen(shape):
        return ()

    fields: dict[str, Any] = {}
    properties: dict[str, property] = {}

    for base in reversed(shape.__mro__[:-1]):
        try:
            annotations = inspect.get_annotations(base, eval_str=True)
        except (NameError, AttributeError, TypeError, SyntaxError) as e:
            logger.debug("members.annotations_unresolved", base=base.__qualname__, error=str(e))
            annotations = {}

        fields.update(annotations)
        for name, attr in vars(base).items():
            if isinstance(attr, property):
                properties[name] = attr

    members = []

    for name, hint in fields.items():
        if name.startswith("_") or name in covered or name in properties:
            continue
        if hint is ClassVar or get_origin(hint) is ClassVar:
            continue
        members.append(PlanParameter(name=name, shape=hint))

    for name, prop in properties.items():
        if name.startswith("_") or name in covered or prop.fset is None or prop.fget is None:
            continue
        try:
            returns = get_type_hints(prop.fget, include_extras=True).get("return")
        except (NameError, AttributeError, TypeError):
            continue
        if returns is not None:
            members.append(PlanParameter(name=name, shape=returns))

    return tuple(members)


def compute_constructor_plan(shape: type) -> ConstructorPlan:
    """Select the widest usable constructor for ``shape`` and list its members.

    Raises:
        ConfigurationError: If ``shape`` has no public constructor that can be
            introspected and fed generated arguments
    """
    best: tuple[Callable[..., Any], tuple[PlanParameter, ...]] | None = None

    for candidate in _factory_candidates(shape):
        parameters = _plan_parameters(candidate)
        if parameters is None:
            continue
        if best is None or len(parameters) > len(best[1]):
            best = (candidate, parameters)

    if best is None:
        raise ConfigurationError(f"'{shape_name(shape)}' has no public constructor.")

    factory, parameters = best
    members = _writable_members(shape, {p.name for p in parameters})
    return ConstructorPlan(factory=factory, parameters=parameters, members=members)


class ConstructorPlanCache:
    """Thread-safe memo of constructor plans, one per class.

    Readers look up plans under a shared lock. On a miss the caller takes the
    exclusive lock, checks again, and only then computes and stores the plan,
    so concurrent first requests for the same class compute it once and no
    reader ever sees a partially built plan.
    """

    def __init__(self, planner: Callable[[type], ConstructorPlan] = compute_constructor_plan):
        self._planner = planner
        self._plans: dict[type, ConstructorPlan] = {}
        self._lock = ReadWriteLock()
        self._computations = 0

    @property
    def computations(self) -> int:
        """Number of plans computed so far."""
        return self._computations

    def get(self, shape: type) -> ConstructorPlan:
        with self._lock.read():
            plan = self._plans.get(shape)
        if plan is not None:
            return plan

        with self._lock.write():
            plan = self._plans.get(shape)
            if plan is None:
                plan = self._planner(shape)
                self._plans[shape] = plan
                self._computations += 1
                logger.debug(
                    "plan_cache.computed",
                    shape=shape_name(shape),
                    factory=getattr(plan.factory, "__qualname__", repr(plan.factory)),
                    arity=plan.arity,
                    members=len(plan.members),
                )
        return plan

    def __contains__(self, shape: type) -> bool:
        with self._lock.read():
            return shape in self._plans

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._plans)


class ComplexTypeProducer(NullProducer):
    """Builds instances of concrete user-defined classes."""

    def __init__(
        self,
        null_chance: Percentage | int | float | None = None,
        cache: ConstructorPlanCache | None = None,
    ):
        super().__init__(null_chance)
        self.cache = cache or ConstructorPlanCache()

    def matches(self, shape: Any) -> bool:
        if not isinstance(shape, type) or get_origin(shape) is not None:
            return False
        if shape.__module__ == "builtins" or issubclass(shape, Enum):
            return False
        return not is_abstract_shape(shape)

    def produce_value(self, context: GenerationContext) -> Any:
        plan = self.cache.get(context.shape)

        args = []
        kwargs = {}
        for param in plan.parameters:
            value = context.generate(param.shape)
            if param.keyword:
                kwargs[param.name] = value
            else:
                args.append(value)

        instance = plan.factory(*args, **kwargs)

        for member in plan.members:
            setattr(instance, member.name, context.generate(member.shape))

        return instance
