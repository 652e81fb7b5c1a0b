"""SHA-256 over four pre-padded messages computed side by side."""

from __future__ import annotations

from typing import Iterable

from .sha256 import BLOCK_SIZE, _INITIAL_STATE, _compress, _pack_state, _padding

LANES = 4
CHECKSUM_SIZE = 4


def _collect(blocks: Iterable[bytes], size: int) -> list[bytes]:
    """Return the four inputs as bytes, checking their count and size."""
    items = [bytes(block) for block in blocks]
    if len(items) != LANES:
        raise ValueError(f"expected {LANES} inputs, got {len(items)}")
    for position, item in enumerate(items):
        if len(item) != size:
            raise ValueError(f"input {position} must be {size} bytes, got {len(item)}")
    return items


def _run(padded: bytes) -> tuple:
    """Compress every block of an already padded message from the initial state."""
    state = _INITIAL_STATE
    for start in range(0, len(padded), BLOCK_SIZE):
        state = _compress(state, padded[start:start + BLOCK_SIZE])
    return state


def sha256_1b_x4(blocks: Iterable[bytes]) -> list[bytes]:
    """Hash four single 64-byte blocks that already carry their padding.

    Digests come back in input order.
    """
    return [_pack_state(_run(block)) for block in _collect(blocks, BLOCK_SIZE)]


def sha256_2b_x4(blocks: Iterable[bytes]) -> list[bytes]:
    """Hash four 128-byte (two-block) messages that already carry their padding.

    Digests come back in input order.
    """
    return [_pack_state(_run(block)) for block in _collect(blocks, 2 * BLOCK_SIZE)]


def sha256_checksum_x4(blocks: Iterable[bytes]) -> list[bytes]:
    """Return the first 4 bytes of SHA-256 applied twice, for four padded single blocks.

    Each input is one 64-byte block holding a padded message; the inner digest
    is hashed again and the leading 4 bytes of the outer digest are returned.
    """
    results = []
    for block in _collect(blocks, BLOCK_SIZE):
        inner = _pack_state(_run(block))
        outer = _run(inner + _padding(len(inner)))
        results.append(_pack_state(outer)[:CHECKSUM_SIZE])
    return results