"""Constraint markers attached to a single generation call.

Markers are attached to members with ``typing.Annotated``::

    class Person:
        alias: Annotated[str, MaxLength(16)]
        name: Annotated[str, Required(), MaxLength(24)]

or passed explicitly to ``ObjectGenerator.generate``. They are plain frozen
dataclasses so that validation libraries reading the same annotations, such
as pydantic, leave them alone.
"""

from dataclasses import dataclass
from typing import Any

from fixture_engine.errors import InvariantViolationError


@dataclass(frozen=True)
class Constraint:
    """Base class for all constraint markers."""


@dataclass(frozen=True)
class Required(Constraint):
    """The generated value must never be null."""


@dataclass(frozen=True)
class LengthConstraint(Constraint):
    """Base for markers carrying a length bound."""

    length: int

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvariantViolationError(
                f"{type(self).__name__} length must be an integer, got {self.length!r}"
            )
        if self.length < 0:
            raise InvariantViolationError(
                f"{type(self).__name__} length must not be negative, got {self.length}"
            )


@dataclass(frozen=True)
class MinLength(LengthConstraint):
    """Lower bound (inclusive) on string length or container size."""


@dataclass(frozen=True)
class MaxLength(LengthConstraint):
    """Upper bound (exclusive) on string length or container size."""


def find_constraint(constraints: tuple[Constraint, ...], kind: type[Constraint]) -> Constraint | None:
    """Return the first-declared marker of exactly ``kind``, if any."""
    for constraint in constraints:
        if type(constraint) is kind:
            return constraint
    return None


def constraint_markers(metadata: tuple[Any, ...]) -> tuple[Constraint, ...]:
    """Pick the constraint markers out of ``Annotated`` metadata, in order."""
    return tuple(item for item in metadata if isinstance(item, Constraint))
