"""Constraint primitives: the null-chance percentage and per-call markers."""

from fixture_engine.constraints.base import (
    Constraint,
    LengthConstraint,
    MaxLength,
    MinLength,
    Required,
    constraint_markers,
    find_constraint,
)
from fixture_engine.constraints.percentage import Percentage

__all__ = [
    "Constraint",
    "LengthConstraint",
    "MaxLength",
    "MinLength",
    "Percentage",
    "Required",
    "constraint_markers",
    "find_constraint",
]
