"""Signed multi-word integers with floor division and word-size comparisons.

A ``ZZ`` is an immutable signed integer. Its *size* is the number of
64-bit words in its absolute value, negated when the value is negative;
the comparison methods return differences of these sizes when the sizes
differ, and otherwise the sign of the comparison.
"""

from __future__ import annotations

from typing import Any, Protocol, Union

__all__ = ["ZZ", "parse", "WORD_BITS"]

WORD_BITS = 64
_DIGITS = frozenset("0123456789")


class _WordSource(Protocol):
    bits: int

    def word(self) -> int: ...

    def randint(self, m: int) -> int: ...


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _size_of(value: int) -> int:
    words = (abs(value).bit_length() + WORD_BITS - 1) // WORD_BITS
    return -words if value < 0 else words


def _as_int(value: Any) -> int:
    if isinstance(value, ZZ):
        return value._value
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise TypeError(f"expected ZZ or int, not {type(value).__name__}")


Operand = Union["ZZ", int]


class ZZ:
    """An immutable signed integer."""

    __slots__ = ("_value",)

    def __init__(self, value: Operand = 0) -> None:
        self._value = _as_int(value)

    @classmethod
    def from_str(cls, text: str) -> ZZ:
        """Parse a whole decimal string, optionally starting with '-'."""
        value, consumed = parse(text)
        if consumed != len(text) or not any(ch in _DIGITS for ch in text):
            raise ValueError(f"invalid decimal integer: {text!r}")
        return value

    @classmethod
    def random(cls, state: _WordSource, words: int) -> ZZ:
        """Return a random integer of at most ``abs(words)`` words.

        A negative ``words`` lets the result be negative with probability
        one half.
        """
        size = abs(words)
        bits = state.bits
        magnitude = 0
        for i in range(size):
            magnitude |= state.word() << (i * bits)
        if words < 0 and state.randint(2) == 0:
            magnitude = -magnitude
        return cls(magnitude)

    @property
    def size(self) -> int:
        """Signed number of words in the absolute value."""
        return _size_of(self._value)

    def equali(self, c: int) -> bool:
        """Return whether this integer equals ``c``."""
        return self._value == c

    def cmpi(self, b: int) -> int:
        """Compare with an int: positive, zero or negative as self >, ==, < b."""
        asize = self.size
        bsize = _sign(b)
        if asize != bsize:
            return asize - bsize
        if asize == 0:
            return 0
        mag, babs = abs(self._value), abs(b)
        if mag == babs:
            return 0
        return asize if mag > babs else -asize

    def cmp(self, other: Operand) -> int:
        """Compare with another integer: positive, zero or negative."""
        b = _as_int(other)
        asize, bsize = self.size, _size_of(b)
        if asize != bsize:
            return asize - bsize
        mag, bmag = abs(self._value), abs(b)
        sgn = (mag > bmag) - (mag < bmag)
        return -sgn if asize < 0 else sgn

    def cmpabs(self, other: Operand) -> int:
        """Compare absolute values: positive, zero or negative."""
        b = _as_int(other)
        asize, bsize = abs(self.size), abs(_size_of(b))
        if asize != bsize:
            return asize - bsize
        mag, bmag = abs(self._value), abs(b)
        return (mag > bmag) - (mag < bmag)

    def is_zero(self) -> bool:
        """Return whether this integer is zero."""
        return self._value == 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"ZZ({self._value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ZZ):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: Operand) -> bool:
        return self.cmp(other) < 0

    def __le__(self, other: Operand) -> bool:
        return self.cmp(other) <= 0

    def __gt__(self, other: Operand) -> bool:
        return self.cmp(other) > 0

    def __ge__(self, other: Operand) -> bool:
        return self.cmp(other) >= 0

    def __neg__(self) -> ZZ:
        return ZZ(-self._value)

    def __abs__(self) -> ZZ:
        return ZZ(abs(self._value))

    def __add__(self, other: Operand) -> ZZ:
        return ZZ(self._value + _as_int(other))

    __radd__ = __add__

    def __sub__(self, other: Operand) -> ZZ:
        return ZZ(self._value - _as_int(other))

    def __rsub__(self, other: Operand) -> ZZ:
        return ZZ(_as_int(other) - self._value)

    def __mul__(self, other: Operand) -> ZZ:
        return ZZ(self._value * _as_int(other))

    __rmul__ = __mul__

    def __divmod__(self, other: Operand) -> tuple[ZZ, ZZ]:
        """Quotient rounded towards minus infinity, and the remainder."""
        b = _as_int(other)
        if b == 0:
            raise ZeroDivisionError("division by zero")
        q, r = divmod(self._value, b)
        return ZZ(q), ZZ(r)

    def __floordiv__(self, other: Operand) -> ZZ:
        return divmod(self, other)[0]

    def __mod__(self, other: Operand) -> ZZ:
        return divmod(self, other)[1]

    def __lshift__(self, exp: int) -> ZZ:
        if exp < 0:
            raise ValueError(f"shift count must not be negative, not {exp!r}")
        return ZZ(self._value << exp)

    def __rshift__(self, exp: int) -> ZZ:
        """Shift the absolute value right, keeping the sign."""
        if exp < 0:
            raise ValueError(f"shift count must not be negative, not {exp!r}")
        magnitude = abs(self._value) >> exp
        return ZZ(-magnitude if self._value < 0 else magnitude)


def parse(text: str) -> tuple[ZZ, int]:
    """Read a leading decimal integer from ``text``.

    An optional '-' may come first. Returns the value and the number of
    characters consumed; with no digits the value is zero.
    """
    negative = text.startswith("-")
    body = text[1:] if negative else text
    count = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        count += 1
    magnitude = int(body[:count]) if count else 0
    return ZZ(-magnitude if negative else magnitude), count + negative