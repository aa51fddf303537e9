"""Shape introspection helpers.

A shape is any Python type annotation: a class, a parameterized generic such
as ``list[int]``, ``Optional[str]`` or ``Annotated[str, MaxLength(8)]``.
"""

from dataclasses import dataclass
import inspect
import types
from typing import Any, Generic, TypeVar, Union, get_args, get_origin

K = TypeVar("K")
V = TypeVar("V")

NoneType = type(None)


@dataclass(frozen=True)
class KeyValuePair(Generic[K, V]):
    """A single key and value, e.g. ``KeyValuePair[str, int]``."""

    key: K
    value: V


def is_protocol(shape: Any) -> bool:
    """Check whether a class directly declares itself a ``typing.Protocol``."""
    return isinstance(shape, type) and bool(getattr(shape, "_is_protocol", False))


def is_abstract_shape(shape: Any) -> bool:
    """Check whether a shape is an abstract class or a protocol."""
    if not isinstance(shape, type):
        return False
    return inspect.isabstract(shape) or is_protocol(shape)


def optional_argument(shape: Any) -> Any | None:
    """Return ``T`` for ``Optional[T]`` / ``T | None``, otherwise None."""
    if get_origin(shape) not in (Union, types.UnionType):
        return None

    args = get_args(shape)
    if len(args) != 2 or NoneType not in args:
        return None
    return args[0] if args[1] is NoneType else args[1]


def generic_origin(shape: Any, *origins: Any) -> bool:
    """Check whether ``shape`` is a parameterization of one of ``origins``."""
    return get_origin(shape) in origins and bool(get_args(shape))


def shape_name(shape: Any) -> str:
    """A short, readable name for log events and error messages."""
    if isinstance(shape, type) and not get_args(shape):
        return shape.__qualname__
    return repr(shape).replace("typing.", "")
