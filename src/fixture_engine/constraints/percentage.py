"""Percentage value type used for null chances."""

from typing import Any

from pydantic_core import core_schema

from fixture_engine.errors import InvariantViolationError


class Percentage:
    """A ratio in the range [0, 1].

    Integers are read as whole percentages (``Percentage(50)`` is 50%) and
    floats as ratios (``Percentage(0.5)`` is also 50%). Values outside those
    ranges are rejected when the percentage is constructed.
    """

    __slots__ = ("_ratio",)

    def __init__(self, value: int | float = 0):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvariantViolationError(
                f"Percentage requires an int or float, got {type(value).__name__}"
            )

        if isinstance(value, int):
            if not 0 <= value <= 100:
                raise InvariantViolationError("Integer values must be between 0 and 100.")
            self._ratio = value / 100
        else:
            if not 0 <= value <= 1:
                raise InvariantViolationError("Float values must be between 0 and 1.")
            self._ratio = float(value)

    @classmethod
    def coerce(cls, value: "Percentage | int | float") -> "Percentage":
        """Return ``value`` as a Percentage, converting ints and floats."""
        if isinstance(value, Percentage):
            return value
        return cls(value)

    @property
    def ratio(self) -> float:
        return self._ratio

    def __mul__(self, other: int | float) -> float:
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return other * self._ratio
        return NotImplemented

    __rmul__ = __mul__

    def __float__(self) -> float:
        return self._ratio

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Percentage):
            return self._ratio == other._ratio
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._ratio)

    def __str__(self) -> str:
        return f"{self._ratio * 100:g}%"

    def __repr__(self) -> str:
        return f"Percentage({self._ratio!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(float),
        )
