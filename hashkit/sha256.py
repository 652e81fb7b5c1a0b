"""SHA-256 message digest with fixed-size helpers."""

from __future__ import annotations

import os
import struct
from functools import partial

DIGEST_SIZE = 32
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_FILE_CHUNK = 8192

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _schedule(chunk: bytes) -> list:
    """Expand a 64-byte chunk into the 64-word message schedule."""
    w = list(struct.unpack(">16I", chunk))
    for _ in range(48):
        x15, x2 = w[-15], w[-2]
        s0 = _ror(x15, 7) ^ _ror(x15, 18) ^ (x15 >> 3)
        s1 = _ror(x2, 17) ^ _ror(x2, 19) ^ (x2 >> 10)
        w.append((w[-16] + s0 + w[-7] + s1) & _MASK)
    return w


def _compress(state: tuple, chunk: bytes) -> tuple:
    """Process one 64-byte chunk and return the new state."""
    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, _schedule(chunk)):
        big_s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = h + big_s1 + ch + k + wi
        big_s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = big_s0 + maj
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK
    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d, e, f, g, h)))


def _padding(length: int) -> bytes:
    pad_len = 1 + ((119 - (length % 64)) % 64)
    return b"\x80" + b"\x00" * (pad_len - 1) + struct.pack(">Q", (length << 3) & 0xFFFFFFFFFFFFFFFF)


def _pack_state(state: tuple) -> bytes:
    return struct.pack(">8I", *state)


def _hash_padded(message: bytes) -> bytes:
    """Hash a message that fits exactly its padded blocks, starting fresh."""
    padded = message + _padding(len(message))
    state = _INITIAL_STATE
    for start in range(0, len(padded), BLOCK_SIZE):
        state = _compress(state, padded[start:start + BLOCK_SIZE])
    return _pack_state(state)


class Sha256:
    """Incremental SHA-256 hasher with a hashlib-like interface."""

    name = "sha256"
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
        """Return the 32-byte digest of everything fed so far."""
        tail = self._buffer + _padding(self._length)
        state = self._state
        for start in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[start:start + BLOCK_SIZE])
        return _pack_state(state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hexadecimal."""
        return self.digest().hex()

    def copy(self) -> "Sha256":
        """Return an independent copy of this hasher."""
        other = Sha256()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return Sha256(data).digest()


def sha256_33(data: bytes) -> bytes:
    """Hash exactly 33 bytes, such as a compressed public key, in one block."""
    data = bytes(data)
    if len(data) != 33:
        raise ValueError(f"sha256_33 expects 33 bytes, got {len(data)}")
    return _hash_padded(data)


def sha256_65(data: bytes) -> bytes:
    """Hash exactly 65 bytes, such as an uncompressed public key, in two blocks."""
    data = bytes(data)
    if len(data) != 65:
        raise ValueError(f"sha256_65 expects 65 bytes, got {len(data)}")
    return _hash_padded(data)


def sha256_checksum(data: bytes) -> bytes:
    """Return the first 4 bytes of SHA-256(SHA-256(data)) for data of at most 55 bytes."""
    data = bytes(data)
    if len(data) > 55:
        raise ValueError(f"sha256_checksum accepts at most 55 bytes, got {len(data)}")
    return _hash_padded(_hash_padded(data))[:4]


def sha256_file(path: str | os.PathLike) -> bytes:
    """Return the SHA-256 digest of a file's contents."""
    hasher = Sha256()
    with open(path, "rb") as handle:
        for chunk in iter(partial(handle.read, _FILE_CHUNK), b""):
            hasher.update(chunk)
    return hasher.digest()


def sha256_hex(digest: bytes) -> str:
    """Format a 32-byte digest as lowercase hexadecimal."""
    digest = bytes(digest)
    if len(digest) < DIGEST_SIZE:
        raise ValueError(f"digest must hold at least {DIGEST_SIZE} bytes")
    return digest[:DIGEST_SIZE].hex()