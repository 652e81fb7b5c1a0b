# hashkit

Hash functions written in pure Python, using only the standard library:

- **SHA-256** (`hashkit.sha256`): a streaming hasher, fixed-size helpers for
  33-byte and 65-byte inputs (compressed and uncompressed public keys), the
  4-byte double-SHA-256 checksum, and file hashing.
- **RIPEMD-160** (`hashkit.ripemd160`): a streaming hasher and a single-block
  helper for 32-byte inputs.
- **SHA-512** (`hashkit.sha512`): a streaming hasher, HMAC-SHA512 and
  PBKDF2-HMAC-SHA512.
- **Four-input helpers** (`hashkit.ripemd160_parallel`,
  `hashkit.sha256_parallel`): hash four equally shaped inputs in one call.
- **`hashkit.hashing`**: one-shot `sha256` and `rmd160`, four-at-a-time
  variants, and file hashing.

## Installation

```
pip install hashkit
```

## Usage

### Streaming hashers

`Sha256`, `Ripemd160` and `Sha512` share the `update` / `digest` /
`hexdigest` / `copy` interface; the constructor takes optional initial data.
`Sha512` also has `reset()`, which returns it to the empty state.

```python
from hashkit.sha256 import Sha256
from hashkit.ripemd160 import Ripemd160
from hashkit.sha512 import Sha512

h = Sha256(b"hello ")
h.update(b"world")
print(h.hexdigest())

print(Ripemd160(b"abc").hexdigest())

s = Sha512()
s.update(b"abc")
print(s.hexdigest())
s.reset()
```

`digest()` does not change the hasher, so more data can be fed afterwards.

### One-shot functions

```python
from hashkit.sha256 import sha256, sha256_33, sha256_65, sha256_checksum, sha256_file, sha256_hex
from hashkit.ripemd160 import ripemd160, ripemd160_32, ripemd160_hex, ripemd160_comp_hash
from hashkit.sha512 import sha512, hmac_sha512, pbkdf2_hmac_sha512, sha512_hex

print(sha256_hex(sha256(b"abc")))

pubkey_hash = ripemd160_32(sha256_33(bytes(33)))
print(ripemd160_hex(pubkey_hash))

checksum = sha256_checksum(b"\x00" + pubkey_hash)  # first 4 bytes of SHA256(SHA256(data))

file_digest = sha256_file("some/file.bin")

mac = hmac_sha512(b"secret", b"message")

password = b"password"
seed = pbkdf2_hmac_sha512(password, b"salt", 2048, 64)
print(sha512_hex(seed))
```

Limits and errors:

- `sha256_33`, `sha256_65` and `ripemd160_32` take exactly 33, 65 and 32
  bytes; any other length raises `ValueError`.
- `sha256_checksum` accepts at most 55 bytes and raises `ValueError` beyond.
- `sha256_hex`, `ripemd160_hex` and `sha512_hex` format the first 32, 20 and
  64 bytes of their argument and raise `ValueError` if it is shorter.
- `ripemd160_comp_hash(h0, h1)` tells whether the first 20 bytes of two
  digests are equal, and raises `ValueError` if either is shorter.
- `hmac_sha512` truncates keys longer than 128 bytes to 128 bytes (it does
  not hash them first).
- `pbkdf2_hmac_sha512(password, salt, iterations, length)` first reduces
  passwords of 128 bytes or more with SHA-512; an iteration count of 0
  behaves like 1; negative `iterations` or `length` raise `ValueError`.
- `sha256_file` raises `OSError` (such as `FileNotFoundError`) if the file
  cannot be read.

### Four inputs at a time

```python
from hashkit.ripemd160_parallel import ripemd160_32_x4, self_test
from hashkit.sha256_parallel import sha256_1b_x4, sha256_2b_x4, sha256_checksum_x4

digests = ripemd160_32_x4([bytes(32)] * 4)   # four 20-byte digests, in input order
assert self_test()                           # four-input RIPEMD-160 agrees with ripemd160_32
```

`sha256_1b_x4` and `sha256_2b_x4` take four blocks of 64 and 128 bytes that
already carry their SHA-256 padding, and return the four 32-byte digests.
`sha256_checksum_x4` takes four padded 64-byte blocks, hashes each, hashes
that digest again, and returns the leading 4 bytes of each result. Each of
these functions raises `ValueError` unless it gets exactly four inputs of
the required size.

### The `hashing` module

```python
from hashkit import hashing

hashing.sha256(b"data")
hashing.rmd160(b"data")
hashing.sha256_4([b"a", b"b", b"c", b"d"])
hashing.rmd160_4([b"a", b"b", b"c", b"d"])
hashing.sha256_file("some/file.bin")
```

`sha256_4` and `rmd160_4` require exactly four inputs of one shared length
and raise `ValueError` otherwise.

## What this package does not do

- It has no command-line tool; it is a library only.
- It provides no Keccak-256 or SHA-3 function.
- Everything runs in plain Python: the four-input helpers give the same
  results as hashing each input alone, not extra speed.

## Running the tests

```
pip install -e ".[test]"
pytest
```