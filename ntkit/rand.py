"""Selection of the random word generator used throughout the package."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from ntkit.kiss import Kiss, SuperKiss
from ntkit.mersenne import MersenneTwister

__all__ = ["RandomAlgorithm", "RandState", "set_rand_algorithm", "randinit"]


class RandomAlgorithm(Enum):
    """The available pseudo-random word generators."""

    KISS = 1
    MERSENNE_TWISTER = 2
    SUPER_KISS = 3


_GENERATORS = {
    RandomAlgorithm.KISS: ("Kiss", Kiss),
    RandomAlgorithm.MERSENNE_TWISTER: ("Mersenne_Twister", MersenneTwister),
    RandomAlgorithm.SUPER_KISS: ("Super_Kiss", SuperKiss),
}


def _resolve(algorithm: Any) -> RandomAlgorithm:
    if isinstance(algorithm, RandomAlgorithm):
        return algorithm
    try:
        return RandomAlgorithm(algorithm)
    except ValueError:
        return RandomAlgorithm.KISS


class RandState:
    """A random state producing 64-bit words from a chosen generator.

    Unknown algorithms fall back to KISS.
    """

    __slots__ = ("algorithm", "name", "_generator")

    def __init__(self, algorithm: Any = RandomAlgorithm.KISS) -> None:
        self.algorithm = _resolve(algorithm)
        self.name, factory = _GENERATORS[self.algorithm]
        self._generator = factory()

    @property
    def bits(self) -> int:
        """Number of bits in each word."""
        return self._generator.bits

    def word(self) -> int:
        """Return the next random word."""
        return self._generator.word()

    def randint(self, m: int) -> int:
        """Return a random word reduced modulo ``m``."""
        if m <= 0:
            raise ValueError(f"modulus must be positive, not {m!r}")
        return self.word() % m

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.word()

    def __repr__(self) -> str:
        return f"RandState({self.algorithm.name})"


def set_rand_algorithm(algorithm: Any) -> RandState:
    """Return a fresh random state for the given algorithm."""
    return RandState(algorithm)


def randinit() -> RandState:
    """Return a fresh random state using the default KISS generator."""
    return RandState(RandomAlgorithm.KISS)