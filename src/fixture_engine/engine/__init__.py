"""Engine module - dispatches generation requests to producers."""

from fixture_engine.engine.object_generator import ObjectGenerator, create_default_generator
from fixture_engine.engine.builder import ObjectGeneratorBuilder

__all__ = [
    "ObjectGenerator",
    "ObjectGeneratorBuilder",
    "create_default_generator",
]
