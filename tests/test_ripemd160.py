import pytest

from hashkit.ripemd160 import (
    Ripemd160,
    ripemd160,
    ripemd160_32,
    ripemd160_comp_hash,
    ripemd160_hex,
)


@pytest.mark.parametrize(
    "message, expected",
    [
        (b"", "9c1185a5c5e9fc54612808977ee8f548b2258d31"),
        (b"abc", "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"),
        (b"message digest", "5d0689ef49d2fae572b881b123a85ffa21595f36"),
    ],
)
def test_reference_vectors(message, expected):
    assert ripemd160(message).hex() == expected


def test_digest_length():
    assert len(ripemd160(b"some data")) == 20


def test_class_matches_function():
    data = b"The quick brown fox jumps over the lazy dog"
    assert Ripemd160(data).digest() == ripemd160(data)


@pytest.mark.parametrize("length", [0, 1, 31, 32, 55, 56, 63, 64, 65, 119, 120, 128, 200])
def test_incremental_equals_one_shot(length):
    data = bytes(i % 251 for i in range(length))
    hasher = Ripemd160()
    for start in range(0, length, 7):
        hasher.update(data[start:start + 7])
    assert hasher.digest() == ripemd160(data)


def test_split_points_agree():
    data = bytes(range(200))
    expected = ripemd160(data)
    for cut in (0, 1, 63, 64, 65, 128, 199, 200):
        hasher = Ripemd160(data[:cut])
        hasher.update(data[cut:])
        assert hasher.digest() == expected


def test_digest_does_not_consume_state():
    hasher = Ripemd160(b"abc")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"def")
    assert hasher.digest() == ripemd160(b"abcdef")


def test_hexdigest_matches_digest():
    hasher = Ripemd160(b"hex check")
    assert hasher.hexdigest() == hasher.digest().hex()
    assert len(hasher.hexdigest()) == 40


def test_copy_is_independent():
    original = Ripemd160(b"prefix")
    clone = original.copy()
    clone.update(b"-suffix")
    assert original.digest() == ripemd160(b"prefix")
    assert clone.digest() == ripemd160(b"prefix-suffix")


def test_different_inputs_differ():
    assert ripemd160(b"a") != ripemd160(b"b")


@pytest.mark.parametrize(
    "message",
    [
        b"This is a test message to test01",
        b"This is a test message to test02",
        b"This is a test message to test03",
        b"This is a test message to test04",
    ],
)
def test_ripemd160_32_matches_general(message):
    assert len(message) == 32
    assert ripemd160_32(message) == ripemd160(message)


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_ripemd160_32_rejects_wrong_length(length):
    with pytest.raises(ValueError):
        ripemd160_32(b"\x00" * length)


def test_ripemd160_hex_formats_digest():
    digest = ripemd160(b"abc")
    assert ripemd160_hex(digest) == digest.hex()


def test_ripemd160_hex_uses_first_twenty_bytes():
    digest = ripemd160(b"abc")
    assert ripemd160_hex(digest + b"\xff\xff") == digest.hex()


def test_ripemd160_hex_rejects_short_digest():
    with pytest.raises(ValueError):
        ripemd160_hex(b"\x00" * 19)


def test_comp_hash_equal():
    assert ripemd160_comp_hash(ripemd160(b"x"), ripemd160(b"x")) is True


def test_comp_hash_unequal():
    assert ripemd160_comp_hash(ripemd160(b"x"), ripemd160(b"y")) is False


def test_comp_hash_ignores_trailing_bytes():
    digest = ripemd160(b"x")
    assert ripemd160_comp_hash(digest + b"\x01", digest + b"\x02") is True


def test_comp_hash_detects_last_byte_difference():
    digest = ripemd160(b"x")
    altered = digest[:19] + bytes([digest[19] ^ 1])
    assert ripemd160_comp_hash(digest, altered) is False


def test_comp_hash_rejects_short_input():
    with pytest.raises(ValueError):
        ripemd160_comp_hash(b"\x00" * 10, ripemd160(b"x"))