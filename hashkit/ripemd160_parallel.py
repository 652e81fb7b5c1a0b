"""RIPEMD-160 of four 32-byte messages computed side by side."""

from __future__ import annotations

import struct
from typing import Iterable

from .ripemd160 import (
    _INITIAL_STATE,
    _LEFT_LINE,
    _MASK,
    _RIGHT_LINE,
    _padding,
    _rol,
    ripemd160_32,
)

LANES = 4
MESSAGE_SIZE = 32

_SELF_TEST_MESSAGES = (
    b"This is a test message to test01",
    b"This is a test message to test02",
    b"This is a test message to test03",
    b"This is a test message to test04",
)


def _rol_lanes(values: tuple, shift: int) -> tuple:
    return tuple(_rol(v, shift) for v in values)


def _line_lanes(words: list, steps) -> tuple:
    """Run one RIPEMD-160 line over all lanes at once."""
    a, b, c, d, e = (tuple(v for _ in range(LANES)) for v in _INITIAL_STATE)
    for func, const, index, shift in steps:
        t = tuple(
            (_rol(av + func(bv, cv, dv) + w[index] + const, shift) + ev) & _MASK
            for av, bv, cv, dv, ev, w in zip(a, b, c, d, e, words)
        )
        a, e, d, c, b = e, d, _rol_lanes(c, 10), b, t
    return a, b, c, d, e


def _transform_lanes(blocks: list) -> list:
    """Compress one 64-byte block per lane from the initial state."""
    words = [struct.unpack("<16I", block) for block in blocks]
    a1, b1, c1, d1, e1 = _line_lanes(words, _LEFT_LINE)
    a2, b2, c2, d2, e2 = _line_lanes(words, _RIGHT_LINE)
    s0, s1, s2, s3, s4 = _INITIAL_STATE
    return [
        struct.pack(
            "<5I",
            (s1 + c1[lane] + d2[lane]) & _MASK,
            (s2 + d1[lane] + e2[lane]) & _MASK,
            (s3 + e1[lane] + a2[lane]) & _MASK,
            (s4 + a1[lane] + b2[lane]) & _MASK,
            (s0 + b1[lane] + c2[lane]) & _MASK,
        )
        for lane in range(LANES)
    ]


def ripemd160_32_x4(inputs: Iterable[bytes]) -> list[bytes]:
    """Hash four 32-byte messages; digests come back in input order."""
    messages = [bytes(m) for m in inputs]
    if len(messages) != LANES:
        raise ValueError(f"expected {LANES} messages, got {len(messages)}")
    for position, message in enumerate(messages):
        if len(message) != MESSAGE_SIZE:
            raise ValueError(
                f"message {position} must be {MESSAGE_SIZE} bytes, got {len(message)}"
            )
    tail = _padding(MESSAGE_SIZE)
    return _transform_lanes([message + tail for message in messages])


def self_test() -> bool:
    """Check the four-lane hash against the single-message hash."""
    expected = [ripemd160_32(m) for m in _SELF_TEST_MESSAGES]
    return ripemd160_32_x4(_SELF_TEST_MESSAGES) == expected