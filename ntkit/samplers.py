"""Random word samplers with properties used for exercising arithmetic.

The words drawn here are deliberately skewed towards edge cases: besides
uniform words they include sparse words with only a few bits set and
differences of such words, which are close to all ones.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

__all__ = [
    "Flag",
    "test_randword1",
    "test_randword2",
    "test_randword",
    "randoms",
    "randoms_upto",
]


class _WordSource(Protocol):
    bits: int

    def word(self) -> int: ...

    def randint(self, m: int) -> int: ...


class Flag(Enum):
    """Property requested of each generated value."""

    ANY = 0
    NONZERO = 1
    ODD = 2
    FULL = 3
    NORMALISED = 4
    POSITIVE = 5


def _mask(state: _WordSource) -> int:
    return (1 << state.bits) - 1


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, not {count!r}")


def test_randword1(state: _WordSource) -> int:
    """Return a sparse word with at most six randomly chosen bits set."""
    res = 0
    for _ in range(state.randint(7)):
        res |= 1 << state.randint(state.bits)
    return res


def test_randword2(state: _WordSource) -> int:
    """Return the wrapped difference of two sparse words."""
    first = test_randword1(state)
    second = test_randword1(state)
    return (first - second) & _mask(state)


def test_randword(state: _WordSource) -> int:
    """Return a uniform, sparse or sparse-difference word, chosen at random."""
    kind = state.randint(3)
    if kind == 0:
        return state.word()
    if kind == 1:
        return test_randword1(state)
    if kind == 2:
        return test_randword2(state)
    raise RuntimeError("random generator broken")


def randoms(flag: Flag, state: _WordSource, count: int) -> list[int]:
    """Return ``count`` random words having the property named by ``flag``.

    Supported flags are ANY, ODD, NORMALISED (top bit set) and NONZERO.
    """
    _check_count(count)
    top_bit = 1 << (state.bits - 1)
    words = []
    for _ in range(count):
        w = test_randword(state)
        if flag is Flag.ANY:
            pass
        elif flag is Flag.ODD:
            w |= 1
        elif flag is Flag.NORMALISED:
            w |= top_bit
        elif flag is Flag.NONZERO:
            while w == 0:
                w = test_randword(state)
        else:
            raise ValueError(f"unknown flag in randoms: {flag!r}")
        words.append(w)
    return words


def randoms_upto(limit: int, flag: Flag, state: _WordSource, count: int) -> list[int]:
    """Return ``count`` random words below ``limit`` with the given property.

    Supported flags are ANY, ODD and NONZERO. For ODD, a value pushed up to
    ``limit`` is redrawn as the low bit of a fresh draw.
    """
    _check_count(count)
    if limit <= 0:
        raise ValueError("limit too low in randoms_upto")
    words = []
    for _ in range(count):
        w = state.randint(limit)
        if flag is Flag.ANY:
            pass
        elif flag is Flag.ODD:
            if limit == 1:
                raise ValueError("limit too low in randoms_upto")
            w |= 1
            while w >= limit:
                w = state.randint(limit) & 1
        elif flag is Flag.NONZERO:
            if limit == 1:
                raise ValueError("limit too low in randoms_upto")
            while w == 0:
                w = state.randint(limit)
        else:
            raise ValueError(f"unknown flag in randoms_upto: {flag!r}")
        words.append(w)
    return words