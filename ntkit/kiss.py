"""Marsaglia's KISS and SUPER KISS pseudo-random word generators.

Both generators come in a 32-bit and a 64-bit flavour, chosen by the
``bits`` argument. Each instance starts from the fixed default seed, so
every fresh generator of a given flavour yields the same sequence.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["Kiss", "SuperKiss"]


def _check_bits(bits: int) -> int:
    if bits not in (32, 64):
        raise ValueError(f"word size must be 32 or 64 bits, not {bits!r}")
    return bits


class Kiss:
    """The KISS generator with its default seed."""

    def __init__(self, bits: int = 64) -> None:
        self.bits = _check_bits(bits)
        self._mask = (1 << bits) - 1
        if bits == 64:
            self._x = 1234567890987654321
            self._c = 123456123456123456
            self._y = 362436362436362436
            self._z = 0x3C9A83566FA12
        else:
            self._w = 521288629
            self._z = 362436069
            self._s = 123456789
            self._c = 380116160

    def word(self) -> int:
        """Return the next random word."""
        if self.bits == 64:
            return self._word64()
        return self._word32()

    def _word64(self) -> int:
        mask = self._mask
        t = ((self._x << 58) + self._c) & mask
        self._c = self._x >> 6
        self._x = (self._x + t) & mask
        self._c += self._x < t

        y = self._y
        y ^= (y << 13) & mask
        y ^= y >> 17
        y ^= (y << 43) & mask
        self._y = y

        self._z = (6906969069 * self._z + 1234567) & mask
        return (self._x + self._y + self._z) & mask

    def _word32(self) -> int:
        mask = self._mask
        self._z = (36969 * (self._z & 65536) + (self._z >> 16)) & mask
        self._w = (18000 * (self._w & 65536) + (self._w >> 16)) & mask
        t = ((self._z << 16) + (self._w & 65536)) & mask

        self._c = (69069 * self._c + 1234567) & mask

        s = self._s
        s ^= (s << 17) & mask
        s ^= s >> 13
        s ^= (s << 5) & mask
        self._s = s

        return ((t ^ self._c) + s) & mask

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.word()


@dataclass(frozen=True)
class _SuperKissParams:
    size: int
    carry: int
    xcng: int
    xs: int
    cng_mul: int
    xs_shifts: tuple[int, int, int]
    refill_shifts: tuple[int, int]
    top: int


_SUPER_KISS_PARAMS = {
    32: _SuperKissParams(
        size=41265,
        carry=362,
        xcng=1236789,
        xs=521288629,
        cng_mul=69069,
        xs_shifts=(13, 17, 5),
        refill_shifts=(9, 7),
        top=31,
    ),
    64: _SuperKissParams(
        size=20632,
        carry=36243678541,
        xcng=12367890123456,
        xs=521288629546311,
        cng_mul=6906969069,
        xs_shifts=(13, 17, 43),
        refill_shifts=(41, 39),
        top=63,
    ),
}


class SuperKiss:
    """The SUPER KISS generator with its default seed."""

    def __init__(self, bits: int = 64) -> None:
        self.bits = _check_bits(bits)
        self._mask = (1 << bits) - 1
        self._params = params = _SUPER_KISS_PARAMS[bits]
        self._carry = params.carry
        self._xcng = params.xcng
        self._xs = params.xs
        self._index = params.size
        self._q = [(self._cng() + self._xorshift()) & self._mask for _ in range(params.size)]

    def _cng(self) -> int:
        self._xcng = (self._params.cng_mul * self._xcng + 123) & self._mask
        return self._xcng

    def _xorshift(self) -> int:
        mask = self._mask
        left1, right, left2 = self._params.xs_shifts
        xs = self._xs
        xs ^= (xs << left1) & mask
        xs ^= xs >> right
        xs ^= (xs << left2) & mask
        self._xs = xs
        return xs

    def _refill(self) -> int:
        mask = self._mask
        shift_a, shift_b = self._params.refill_shifts
        top = self._params.top
        carry = self._carry
        q = self._q
        for i, qi in enumerate(q):
            h = carry & 1
            z = ((((qi << shift_a) & mask) >> 1)
                 + (((qi << shift_b) & mask) >> 1)
                 + (carry >> 1)) & mask
            carry = ((qi >> 23) + (qi >> 25) + (z >> top)) & mask
            q[i] = ~((z << 1) + h) & mask
        self._carry = carry
        self._index = 1
        return q[0]

    def _supr(self) -> int:
        if self._index < self._params.size:
            value = self._q[self._index]
            self._index += 1
            return value
        return self._refill()

    def word(self) -> int:
        """Return the next random word."""
        return (self._supr() + self._cng() + self._xorshift()) & self._mask

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.word()