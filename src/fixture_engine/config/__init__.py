"""Configuration module - engine defaults and their YAML loader."""

from fixture_engine.config.base import GeneratorConfig
from fixture_engine.config.loader import ConfigLoader, load_config

__all__ = [
    "GeneratorConfig",
    "ConfigLoader",
    "load_config",
]
