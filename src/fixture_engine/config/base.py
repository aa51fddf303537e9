"""Engine configuration.

A ``GeneratorConfig`` holds the defaults every generation call starts from:
length bounds for strings and sequences, the string encoding and the global
null chance. One configuration is owned by one ``ObjectGenerator``.
"""

import codecs
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fixture_engine.constraints.percentage import Percentage


class GeneratorConfig(BaseModel):
    """Sizing, encoding and null-chance defaults for an engine instance."""

    model_config = ConfigDict(validate_assignment=True)

    min_string_length: int = Field(default=16, ge=0, description="Minimum string length (inclusive)")
    max_string_length: int = Field(default=256, ge=0, description="Maximum string length (exclusive)")
    min_sequence_length: int = Field(default=8, ge=0, description="Minimum container size (inclusive)")
    max_sequence_length: int = Field(default=32, ge=0, description="Maximum container size (exclusive)")
    encoding: str = Field(default="utf-16-le", description="Codec used to decode random string bytes")
    null_chance: Percentage = Field(
        default_factory=Percentage,
        description="Default chance that a null-capable shape yields None",
    )
    seed: int | None = Field(default=None, description="Seed for the default random source")

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding '{value}'")

        # Codecs that emit a byte-order mark cannot decode per-character units.
        if len("aa".encode(value)) != 2 * len("a".encode(value)):
            raise ValueError(f"Encoding '{value}' writes a byte-order mark; use an explicit-endian codec")
        return value

    @model_validator(mode="after")
    def _check_bounds(self) -> "GeneratorConfig":
        if self.min_string_length > self.max_string_length:
            raise ValueError(
                f"min_string_length ({self.min_string_length}) exceeds "
                f"max_string_length ({self.max_string_length})"
            )
        if self.min_sequence_length > self.max_sequence_length:
            raise ValueError(
                f"min_sequence_length ({self.min_sequence_length}) exceeds "
                f"max_sequence_length ({self.max_sequence_length})"
            )
        return self

    @property
    def char_width(self) -> int:
        """Bytes drawn per generated character."""
        return len("a".encode(self.encoding))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
