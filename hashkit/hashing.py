"""Single and four-way SHA-256 and RIPEMD-160 helpers over byte strings."""

from __future__ import annotations

import os
from typing import Callable, Iterable

from .ripemd160 import ripemd160 as _ripemd160
from .sha256 import sha256 as _sha256
from .sha256 import sha256_file as _sha256_file

LANES = 4


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return _sha256(bytes(data))


def rmd160(data: bytes) -> bytes:
    """Return the 20-byte RIPEMD-160 digest of ``data``."""
    return _ripemd160(bytes(data))


def _four_equal_length(inputs: Iterable[bytes]) -> list[bytes]:
    """Return the inputs as bytes, requiring four of them of one shared length."""
    items = [bytes(item) for item in inputs]
    if len(items) != LANES:
        raise ValueError(f"expected {LANES} inputs, got {len(items)}")
    lengths = {len(item) for item in items}
    if len(lengths) != 1:
        raise ValueError(
            f"all inputs must share one length, got {[len(item) for item in items]}"
        )
    return items


def _map_four(func: Callable[[bytes], bytes], inputs: Iterable[bytes]) -> list[bytes]:
    return [func(item) for item in _four_equal_length(inputs)]


def sha256_4(inputs: Iterable[bytes]) -> list[bytes]:
    """Hash four equally long messages with SHA-256; digests keep input order."""
    return _map_four(sha256, inputs)


def rmd160_4(inputs: Iterable[bytes]) -> list[bytes]:
    """Hash four equally long messages with RIPEMD-160; digests keep input order."""
    return _map_four(rmd160, inputs)


def sha256_file(path: str | os.PathLike) -> bytes:
    """Return the SHA-256 digest of a file's contents.

    Raises ``OSError`` (such as ``FileNotFoundError``) if the file cannot be read.
    """
    return _sha256_file(path)