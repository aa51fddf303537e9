"""
Fixture Engine - Random object generation for test fixtures.

Give it a type annotation and it produces a random value of that shape:
scalars, strings, containers and whole object graphs, with length bounds,
required markers and null chances applied along the way.
"""

__version__ = "0.1.0"

from fixture_engine.config.base import GeneratorConfig
from fixture_engine.constraints.base import MaxLength, MinLength, Required
from fixture_engine.constraints.percentage import Percentage
from fixture_engine.engine.builder import ObjectGeneratorBuilder
from fixture_engine.engine.object_generator import ObjectGenerator, create_default_generator
from fixture_engine.errors import (
    ConfigurationError,
    FixtureEngineError,
    InvariantViolationError,
    NoProducerError,
)
from fixture_engine.randomness.base import DefaultRandomSource, FakerRandomSource, RandomSource
from fixture_engine.shapes import KeyValuePair

__all__ = [
    "GeneratorConfig",
    "MaxLength",
    "MinLength",
    "Required",
    "Percentage",
    "ObjectGenerator",
    "ObjectGeneratorBuilder",
    "create_default_generator",
    "ConfigurationError",
    "FixtureEngineError",
    "InvariantViolationError",
    "NoProducerError",
    "DefaultRandomSource",
    "FakerRandomSource",
    "RandomSource",
    "KeyValuePair",
]
