"""Signed integers, number theory helpers, seeded random word generators, SHA-1 and test samplers."""

__version__ = "0.1.0"

__all__ = ["kiss", "mersenne", "rand", "sha1", "samplers", "zz", "numtheory"]