"""Utility functions for the fixture engine."""

from fixture_engine.utils.helpers import generate_seed, import_object
from fixture_engine.utils.locking import ReadWriteLock
from fixture_engine.utils.logging import configure_logging, get_logger

__all__ = [
    "generate_seed",
    "import_object",
    "ReadWriteLock",
    "configure_logging",
    "get_logger",
]
