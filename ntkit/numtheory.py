"""Powers, greatest common divisors and Bezout cofactors of signed integers."""

from __future__ import annotations

from typing import Union

from ntkit.zz import ZZ

__all__ = ["powi", "gcd", "xgcd"]

Operand = Union[ZZ, int]


def _value(x: Operand) -> int:
    return int(ZZ(x))


def _sign(x: int) -> int:
    return -1 if x < 0 else 1


def powi(a: Operand, b: int) -> ZZ:
    """Return ``a`` raised to the non-negative power ``b``.

    ``0 ** 0`` is one, as is any value to the power zero.
    """
    if isinstance(b, bool) or not isinstance(b, int):
        raise TypeError(f"exponent must be an int, not {type(b).__name__}")
    if b < 0:
        raise ValueError(f"exponent must not be negative, not {b!r}")
    base = _value(a)
    if b == 0:
        return ZZ(1)
    if b == 1 or base == 0:
        return ZZ(base)
    return ZZ(base ** b)


def _gcd_magnitudes(x: int, y: int) -> int:
    while y:
        x, y = y, x % y
    return x


def gcd(a: Operand, b: Operand) -> ZZ:
    """Return the greatest common divisor of ``a`` and ``b``.

    If ``a`` is zero the result is ``b`` and if ``b`` is zero it is ``a``,
    signs included. Otherwise the result is negative exactly when both
    arguments are negative.
    """
    x, y = _value(a), _value(b)
    if x == 0:
        return ZZ(y)
    if y == 0:
        return ZZ(x)
    g = _gcd_magnitudes(abs(x), abs(y))
    return ZZ(-g if x < 0 and y < 0 else g)


def _cofactor(big: int, small: int) -> int:
    """Return ``t`` with ``small * t`` congruent to gcd(big, small) mod ``big``."""
    old_r, r = big, small
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_t, t = t, old_t - q * t
    return old_t


def xgcd(a: Operand, b: Operand) -> tuple[ZZ, ZZ, ZZ]:
    """Return ``(g, s, t)`` with ``g == a*s + b*t`` and ``g`` as from ``gcd``.

    If ``a`` is zero the result is ``(b, 0, 1)``; if ``b`` is zero it is
    ``(a, 1, 0)``.
    """
    x, y = _value(a), _value(b)
    if x == 0:
        return ZZ(y), ZZ(0), ZZ(1)
    if y == 0:
        return ZZ(x), ZZ(1), ZZ(0)

    swapped = abs(x) < abs(y)
    if swapped:
        x, y = y, x

    g = int(gcd(x, y))
    t = _cofactor(abs(x), abs(y)) * _sign(y) * _sign(g)
    s, rem = divmod(g - y * t, x)
    if rem:
        raise ArithmeticError("cofactor computation failed")

    if swapped:
        s, t = t, s
    return ZZ(g), ZZ(s), ZZ(t)