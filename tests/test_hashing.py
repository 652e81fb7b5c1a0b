import hashlib

import pytest

from hashkit.hashing import rmd160, rmd160_4, sha256, sha256_4, sha256_file


def test_sha256_matches_hashlib():
    for data in (b"", b"abc", b"x" * 55, b"y" * 64, bytes(range(200))):
        assert sha256(data) == hashlib.sha256(data).digest()


def test_sha256_accepts_bytearray():
    assert sha256(bytearray(b"abc")) == hashlib.sha256(b"abc").digest()


def test_rmd160_known_vectors():
    assert rmd160(b"").hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"
    assert rmd160(b"abc").hex() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"


def test_rmd160_digest_length():
    assert len(rmd160(b"z" * 1000)) == 20


def test_sha256_4_matches_single():
    inputs = [b"message-%d" % i for i in range(4)]
    assert sha256_4(inputs) == [sha256(m) for m in inputs]


def test_rmd160_4_matches_single():
    inputs = [bytes([i]) * 33 for i in range(4)]
    assert rmd160_4(inputs) == [rmd160(m) for m in inputs]


def test_four_way_keeps_order():
    inputs = [b"aaaa", b"bbbb", b"cccc", b"dddd"]
    reversed_out = sha256_4(list(reversed(inputs)))
    assert sha256_4(inputs) == list(reversed(reversed_out))


@pytest.mark.parametrize("func", [sha256_4, rmd160_4])
def test_four_way_rejects_wrong_count(func):
    with pytest.raises(ValueError):
        func([b"a", b"b", b"c"])


@pytest.mark.parametrize("func", [sha256_4, rmd160_4])
def test_four_way_rejects_mixed_lengths(func):
    with pytest.raises(ValueError):
        func([b"a", b"b", b"c", b"dd"])


def test_sha256_file_matches_content(tmp_path):
    content = bytes(range(256)) * 100
    target = tmp_path / "data.bin"
    target.write_bytes(content)
    assert sha256_file(target) == hashlib.sha256(content).digest()
    assert sha256_file(str(target)) == sha256(content)


def test_sha256_file_empty(tmp_path):
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    assert sha256_file(target) == hashlib.sha256(b"").digest()


def test_sha256_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        sha256_file(tmp_path / "missing.bin")