"""RIPEMD-160 message digest."""

from __future__ import annotations

import struct

DIGEST_SIZE = 20
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_LEFT_WORDS = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
_RIGHT_WORDS = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)
_LEFT_SHIFTS = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
_RIGHT_SHIFTS = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)


def _rol(x: int, n: int) -> int:
    x &= _MASK
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f1(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f2(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _f3(x: int, y: int, z: int) -> int:
    return (x | (~y & _MASK)) ^ z


def _f4(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def _f5(x: int, y: int, z: int) -> int:
    return x ^ (y | (~z & _MASK))


def _expand(values):
    return tuple(v for v in values for _ in range(16))


_LEFT_FUNCS = _expand((_f1, _f2, _f3, _f4, _f5))
_RIGHT_FUNCS = _expand((_f5, _f4, _f3, _f2, _f1))
_LEFT_CONSTS = _expand((0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E))
_RIGHT_CONSTS = _expand((0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000))

_LEFT_LINE = tuple(zip(_LEFT_FUNCS, _LEFT_CONSTS, _LEFT_WORDS, _LEFT_SHIFTS))
_RIGHT_LINE = tuple(zip(_RIGHT_FUNCS, _RIGHT_CONSTS, _RIGHT_WORDS, _RIGHT_SHIFTS))


def _line(state, words, steps):
    a, b, c, d, e = state
    for func, const, index, shift in steps:
        t = (_rol(a + func(b, c, d) + words[index] + const, shift) + e) & _MASK
        a, e, d, c, b = e, d, _rol(c, 10), b, t
    return a, b, c, d, e


def _compress(state: tuple, chunk: bytes) -> tuple:
    """Process one 64-byte chunk and return the new state."""
    words = struct.unpack("<16I", chunk)
    a1, b1, c1, d1, e1 = _line(state, words, _LEFT_LINE)
    a2, b2, c2, d2, e2 = _line(state, words, _RIGHT_LINE)
    s0, s1, s2, s3, s4 = state
    return (
        (s1 + c1 + d2) & _MASK,
        (s2 + d1 + e2) & _MASK,
        (s3 + e1 + a2) & _MASK,
        (s4 + a1 + b2) & _MASK,
        (s0 + b1 + c2) & _MASK,
    )


def _padding(length: int) -> bytes:
    pad_len = 1 + ((119 - (length % 64)) % 64)
    return b"\x80" + b"\x00" * (pad_len - 1) + struct.pack("<Q", (length << 3) & 0xFFFFFFFFFFFFFFFF)


class Ripemd160:
    """Incremental RIPEMD-160 hasher with a hashlib-like interface."""

    name = "ripemd160"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._length += len(data)
        pending = self._buffer + data
        full = len(pending) - len(pending) % BLOCK_SIZE
        state = self._state
        for start in range(0, full, BLOCK_SIZE):
            state = _compress(state, pending[start:start + BLOCK_SIZE])
        self._state = state
        self._buffer = pending[full:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        tail = self._buffer + _padding(self._length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return struct.pack("<5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()

    def copy(self) -> "Ripemd160":
        """Return an independent copy of this hasher."""
        other = Ripemd160()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def ripemd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return Ripemd160(data).digest()


def ripemd160_32(data: bytes) -> bytes:
    """Hash exactly 32 bytes in a single padded block."""
    data = bytes(data)
    if len(data) != 32:
        raise ValueError(f"ripemd160_32 expects 32 bytes, got {len(data)}")
    block = data + _padding(32)
    return struct.pack("<5I", *_compress(_INITIAL_STATE, block))


def ripemd160_hex(digest: bytes) -> str:
    """Format a 20-byte digest as lowercase hexadecimal."""
    digest = bytes(digest)
    if len(digest) < DIGEST_SIZE:
        raise ValueError(f"digest must hold at least {DIGEST_SIZE} bytes")
    return digest[:DIGEST_SIZE].hex()


def ripemd160_comp_hash(h0: bytes, h1: bytes) -> bool:
    """Tell whether two digests agree in their first 20 bytes."""
    h0, h1 = bytes(h0), bytes(h1)
    if len(h0) < DIGEST_SIZE or len(h1) < DIGEST_SIZE:
        raise ValueError(f"digests must hold at least {DIGEST_SIZE} bytes")
    return h0[:DIGEST_SIZE] == h1[:DIGEST_SIZE]