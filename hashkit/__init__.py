"""Pure-Python SHA-256, SHA-512, RIPEMD-160, HMAC-SHA512 and PBKDF2-HMAC-SHA512."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "ripemd160",
    "ripemd160_parallel",
    "sha256",
    "sha256_parallel",
    "sha512",
]