"""Random sources and primitive value helpers."""

from fixture_engine.randomness.base import (
    DefaultRandomSource,
    FakerRandomSource,
    RandomSource,
)

__all__ = [
    "DefaultRandomSource",
    "FakerRandomSource",
    "RandomSource",
]
