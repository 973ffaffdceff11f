"""The SHA-1 message digest, byte oriented."""

from __future__ import annotations

import struct

__all__ = ["Sha1", "sha1"]

BLOCK_SIZE = 64
DIGEST_SIZE = 20

_MASK32 = 0xFFFFFFFF
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i, wi in enumerate(w):
        if i < 20:
            f = d ^ (b & (c ^ d))
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = (b & c) | (d & (b ^ c))
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6
        a, b, c, d, e = (_rotl(a, 5) + f + e + k + wi) & _MASK32, a, _rotl(b, 30), c, d

    return tuple((x + y) & _MASK32 for x, y in zip(state, (a, b, c, d, e)))


class Sha1:
    """Incremental SHA-1 hasher."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE
    name = "sha1"

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = _INITIAL
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        chunk = bytes(data)
        self._length += len(chunk)
        buffer = self._buffer + chunk
        full = len(buffer) - len(buffer) % BLOCK_SIZE
        state = self._state
        for start in range(0, full, BLOCK_SIZE):
            state = _compress(state, buffer[start:start + BLOCK_SIZE])
        self._state = state
        self._buffer = buffer[full:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        pad_len = (55 - len(self._buffer)) % BLOCK_SIZE
        tail = self._buffer + b"\x80" + b"\x00" * pad_len + struct.pack(">Q", bit_length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal text."""
        return self.digest().hex()

    def copy(self) -> Sha1:
        """Return an independent hasher with the same state."""
        clone = Sha1()
        clone._state = self._state
        clone._buffer = self._buffer
        clone._length = self._length
        return clone


def sha1(data: bytes) -> bytes:
    """Return the SHA-1 digest of ``data``."""
    return Sha1(data).digest()