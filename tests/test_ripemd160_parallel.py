import pytest

from hashkit.ripemd160 import ripemd160, ripemd160_32
from hashkit.ripemd160_parallel import ripemd160_32_x4, self_test

MESSAGES = [
    b"This is a test message to test01",
    b"This is a test message to test02",
    b"This is a test message to test03",
    b"This is a test message to test04",
]


def test_matches_single_lane_hash():
    assert ripemd160_32_x4(MESSAGES) == [ripemd160_32(m) for m in MESSAGES]


def test_matches_general_hash():
    assert ripemd160_32_x4(MESSAGES) == [ripemd160(m) for m in MESSAGES]


def test_order_follows_inputs():
    reversed_digests = ripemd160_32_x4(list(reversed(MESSAGES)))
    assert reversed_digests == list(reversed(ripemd160_32_x4(MESSAGES)))


def test_identical_inputs_give_identical_digests():
    block = bytes(range(32))
    digests = ripemd160_32_x4([block] * 4)
    assert len(set(digests)) == 1
    assert digests[0] == ripemd160(block)


def test_digest_sizes():
    assert [len(d) for d in ripemd160_32_x4(MESSAGES)] == [20, 20, 20, 20]


def test_distinct_inputs_give_distinct_digests():
    assert len(set(ripemd160_32_x4(MESSAGES))) == 4


def test_inputs_not_modified():
    buffers = [bytearray(m) for m in MESSAGES]
    ripemd160_32_x4(buffers)
    assert [bytes(b) for b in buffers] == MESSAGES


def test_accepts_generator():
    assert ripemd160_32_x4(m for m in MESSAGES) == [ripemd160(m) for m in MESSAGES]


def test_wrong_lane_count():
    with pytest.raises(ValueError):
        ripemd160_32_x4(MESSAGES[:3])
    with pytest.raises(ValueError):
        ripemd160_32_x4(MESSAGES + MESSAGES[:1])


def test_wrong_message_length():
    with pytest.raises(ValueError):
        ripemd160_32_x4(MESSAGES[:3] + [b"short"])


def test_self_test_passes():
    assert self_test() is True