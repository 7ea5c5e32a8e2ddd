# bootstrap.py
# SHA-512/t initial hash values, see NIST FIPS 180-4, Section 5.3.6

from __future__ import annotations

from functools import lru_cache

from compression import sha2_compress
from constants import H512, K64
from preprocessing import preprocess

SHA512_T_PREFIX: bytes = b"SHA-512/"


class HashConfigurationError(ValueError): ...


def check_truncation(bits: int) -> int:
    """Validate a SHA-512/t output length; t = 384 belongs to SHA-384"""
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"SHA-512/t length must be an int, not {type(bits).__name__}")
    if bits <= 0 or bits >= 512:
        raise HashConfigurationError(f"SHA-512/t length must satisfy 0 < t < 512, got {bits}")
    if bits == 384:
        raise HashConfigurationError("SHA-512/384 is not defined, use SHA-384 instead")
    return bits


def intermediate_hash_values() -> tuple[int, ...]:
    """H(0)'' of Section 5.3.6: the SHA-512 initial hash value with every byte xored with 0xa5"""
    return tuple(word ^ 0xA5A5A5A5A5A5A5A5 for word in H512)


def derivation_message(bits: int) -> bytes:
    return SHA512_T_PREFIX + str(check_truncation(bits)).encode("ascii")


@lru_cache(maxsize=None, typed=True)
def sha512_t_initial_hash_values(bits: int) -> tuple[int, ...]:
    """SHA-512 of "SHA-512/t" under the intermediate hash value.

    The whole eight-word result is the initial hash value; truncation to
    t bits only happens to the digests computed with it."""
    blocks = preprocess(derivation_message(bits), 64)
    return sha2_compress(intermediate_hash_values(), blocks, K64, 64)


__all__: list = [
    "SHA512_T_PREFIX", "HashConfigurationError", "check_truncation",
    "intermediate_hash_values", "derivation_message", "sha512_t_initial_hash_values",
]
