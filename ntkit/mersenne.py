"""The Mersenne twister (MT19937 and MT19937-64) word generator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["MersenneTwister"]


@dataclass(frozen=True)
class _MtParams:
    n: int
    m: int
    matrix_a: int
    upper_mask: int
    lower_mask: int
    seed_mul: int
    seed_shift: int
    array_mul1: int
    array_mul2: int


_PARAMS = {
    32: _MtParams(
        n=624,
        m=397,
        matrix_a=0x9908B0DF,
        upper_mask=0x80000000,
        lower_mask=0x7FFFFFFF,
        seed_mul=1812433253,
        seed_shift=30,
        array_mul1=1664525,
        array_mul2=1566083941,
    ),
    64: _MtParams(
        n=312,
        m=156,
        matrix_a=0xB5026F5AA96619E9,
        upper_mask=0xFFFFFFFF80000000,
        lower_mask=0x7FFFFFFF,
        seed_mul=6364136223846793005,
        seed_shift=62,
        array_mul1=3935559000370003845,
        array_mul2=2862933555777941757,
    ),
}

_DEFAULT_SEED = 5489
_ARRAY_SEED = 19650218


class MersenneTwister:
    """Mersenne twister over 32- or 64-bit words.

    If neither seeding method is called, the first call to ``word``
    seeds the generator with the default seed 5489.
    """

    def __init__(self, bits: int = 64) -> None:
        if bits not in _PARAMS:
            raise ValueError(f"word size must be 32 or 64 bits, not {bits!r}")
        self.bits = bits
        self._mask = (1 << bits) - 1
        self._p = _PARAMS[bits]
        self._mt = [0] * self._p.n
        self._index = self._p.n + 1

    def init_genrand(self, seed: int) -> None:
        """Seed the state from a single word."""
        p, mask, mt = self._p, self._mask, self._mt
        mt[0] = seed & mask
        for i in range(1, p.n):
            prev = mt[i - 1]
            mt[i] = (p.seed_mul * (prev ^ (prev >> p.seed_shift)) + i) & mask
        self._index = p.n

    def init_by_array(self, init_key: Iterable[int]) -> None:
        """Seed the state from a non-empty sequence of words."""
        key = [k & self._mask for k in init_key]
        if not key:
            raise ValueError("init_key must hold at least one word")
        p, mask, mt = self._p, self._mask, self._mt
        self.init_genrand(_ARRAY_SEED)

        i, j = 1, 0
        for _ in range(max(p.n, len(key))):
            prev = mt[i - 1]
            mixed = ((prev ^ (prev >> p.seed_shift)) * p.array_mul1) & mask
            mt[i] = ((mt[i] ^ mixed) + key[j] + j) & mask
            i += 1
            j += 1
            if i >= p.n:
                mt[0] = mt[p.n - 1]
                i = 1
            if j >= len(key):
                j = 0

        for _ in range(p.n - 1):
            prev = mt[i - 1]
            mixed = ((prev ^ (prev >> p.seed_shift)) * p.array_mul2) & mask
            mt[i] = ((mt[i] ^ mixed) - i) & mask
            i += 1
            if i >= p.n:
                mt[0] = mt[p.n - 1]
                i = 1

        mt[0] = 1 << (self.bits - 1)

    def _generate(self) -> None:
        p, mt = self._p, self._mt
        n = p.n
        for kk in range(n):
            y = (mt[kk] & p.upper_mask) | (mt[(kk + 1) % n] & p.lower_mask)
            mt[kk] = mt[(kk + p.m) % n] ^ (y >> 1) ^ (p.matrix_a if y & 1 else 0)
        self._index = 0

    def word(self) -> int:
        """Return the next random word."""
        if self._index >= self._p.n:
            if self._index == self._p.n + 1:
                self.init_genrand(_DEFAULT_SEED)
            self._generate()

        y = self._mt[self._index]
        self._index += 1

        if self.bits == 32:
            y ^= y >> 11
            y ^= (y << 7) & 0x9D2C5680
            y ^= (y << 15) & 0xEFC60000
            y ^= y >> 18
        else:
            y ^= (y >> 29) & 0x5555555555555555
            y ^= (y << 17) & 0x71D67FFFEDA60000
            y ^= (y << 37) & 0xFFF7EEE000000000
            y ^= y >> 43
        return y

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.word()