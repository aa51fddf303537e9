"""Exception types raised by the generation engine.

Configuration errors mean the engine was asked to do something it cannot do;
invariant violations are raised while building invariant-bearing values,
before generation starts. Neither is ever retried.
"""

from typing import Any


class FixtureEngineError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(FixtureEngineError):
    """Raised when the engine or one of its producers is misconfigured."""


class NoProducerError(ConfigurationError):
    """Raised when no registered producer matches a shape."""

    def __init__(self, shape: Any):
        self.shape = shape
        super().__init__(f"No producer has been registered for shape '{shape!r}'")


class InvariantViolationError(FixtureEngineError, ValueError):
    """Raised when a value type is constructed outside its valid range."""
