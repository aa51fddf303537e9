"""Random sources consumed by the generation engine."""

from abc import ABC, abstractmethod
import random

from faker import Faker

from fixture_engine.errors import ConfigurationError


class RandomSource(ABC):
    """Produces random integers in a range and random byte strings."""

    def next_int(self, minval: int, maxval: int) -> int:
        """Return an integer in the half-open range [minval, maxval).

        A collapsed range (``minval == maxval``) always yields ``minval``.

        Raises:
            ConfigurationError: If ``minval`` is greater than ``maxval``
        """
        if minval > maxval:
            raise ConfigurationError(
                f"Malformed bounds: minimum {minval} is greater than maximum {maxval}"
            )
        if minval == maxval:
            return minval
        return self._next_int(minval, maxval - 1)

    @abstractmethod
    def _next_int(self, low: int, high: int) -> int:
        """Return an integer in the closed range [low, high]."""

    @abstractmethod
    def next_bytes(self, count: int) -> bytes:
        """Return ``count`` random bytes."""


class DefaultRandomSource(RandomSource):
    """Random source backed by ``random.Random``."""

    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def _next_int(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def next_bytes(self, count: int) -> bytes:
        return self._rng.randbytes(count)


class FakerRandomSource(RandomSource):
    """Random source backed by a dedicated Faker instance."""

    def __init__(self, seed: int | None = None, locale: str | None = None):
        self._seed = seed
        self._faker = Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def faker(self) -> Faker:
        return self._faker

    def _next_int(self, low: int, high: int) -> int:
        return self._faker.random_int(min=low, max=high)

    def next_bytes(self, count: int) -> bytes:
        return self._faker.binary(length=count)
