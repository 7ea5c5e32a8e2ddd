# shs.py
# A naive Python implementation of the secure hash standard (NIST FIPS 180-4),
# with every round constant and initial hash value derived rather than tabulated.

from __future__ import annotations

import typing as t
import warnings
from functools import wraps

from typing_extensions import Buffer

from bootstrap import HashConfigurationError, check_truncation, sha512_t_initial_hash_values
from compression import sha1_compress, sha2_compress
from constants import H1, H224, H256, H384, H512, K1, K32, K64
from preprocessing import block_size, preprocess
from utils import bytes_for_bits, format_digest

HashFunction = t.Callable[..., bytes]


def _sha1_digest(message: Buffer) -> bytes:
    state = sha1_compress(H1, preprocess(message, 32), K1)
    return format_digest(state, 32, 160)


def _sha2_digest(
    message: Buffer,
    initial_hash_values: t.Sequence[int],
    constants: t.Sequence[int],
    word_bit_length: int,
    digest_bits: int,
) -> bytes:
    blocks = preprocess(message, word_bit_length)
    state = sha2_compress(initial_hash_values, blocks, constants, word_bit_length)
    return format_digest(state, word_bit_length, digest_bits)


"""
NOTE: The `usedforsecurity` parameter in the following functions is primarily advisory.
It has no effect on the digest. For SHA-1, leaving `usedforsecurity=True` emits a
UserWarning, since SHA-1 is no longer considered collision resistant.
"""


def _shadef(
    digest_bits: int, word_bit_length: int, *, name: t.Optional[str] = None, insecure: bool = False
) -> t.Callable[[t.Callable[[Buffer], bytes]], HashFunction]:

    def decorator(func: t.Callable[[Buffer], bytes]) -> HashFunction:

        @wraps(func)
        def wrapper(string: Buffer = b"", *, usedforsecurity: bool = True) -> bytes:

            if not isinstance(string, Buffer):
                raise TypeError("Strings must be encoded before hashing")

            if insecure and usedforsecurity:
                warnings.warn(
                    f"{wrapper.name.upper()} is not considered secure for cryptographic purposes.",
                    UserWarning,
                    stacklevel=2,
                )

            return func(string)

        wrapper.name = name or func.__name__
        wrapper.digest_size = bytes_for_bits(digest_bits)
        wrapper.block_size = block_size(word_bit_length)
        if name:
            wrapper.__name__ = wrapper.__qualname__ = name
        return wrapper

    return decorator


@_shadef(digest_bits=160, word_bit_length=32, insecure=True)
def sha1(string: Buffer = b"") -> bytes:
    return _sha1_digest(string)


@_shadef(digest_bits=224, word_bit_length=32)
def sha224(string: Buffer = b"") -> bytes:
    return _sha2_digest(string, H224, K32, 32, 224)


@_shadef(digest_bits=256, word_bit_length=32)
def sha256(string: Buffer = b"") -> bytes:
    return _sha2_digest(string, H256, K32, 32, 256)


@_shadef(digest_bits=384, word_bit_length=64)
def sha384(string: Buffer = b"") -> bytes:
    return _sha2_digest(string, H384, K64, 64, 384)


@_shadef(digest_bits=512, word_bit_length=64)
def sha512(string: Buffer = b"") -> bytes:
    return _sha2_digest(string, H512, K64, 64, 512)


def sha512_t(bits: int) -> HashFunction:
    """Build the SHA-512/t hash function for a *bits*-bit digest.

    *bits* is checked here, before any message is seen, and the initial
    hash value for it is derived once and shared by every call:

    >>> sha512_t(224)(b"abc").hex()
    '4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa'
    """
    check_truncation(bits)
    initial_hash_values = sha512_t_initial_hash_values(bits)

    @_shadef(digest_bits=bits, word_bit_length=64, name=f"sha512_{bits}")
    def truncated(string: Buffer = b"") -> bytes:
        return _sha2_digest(string, initial_hash_values, K64, 64, bits)

    return truncated


sha512_224: HashFunction = sha512_t(224)

sha512_256: HashFunction = sha512_t(256)


_dispatch: dict[str, HashFunction] = {
    "sha1": sha1,
    "sha224": sha224,
    "sha256": sha256,
    "sha384": sha384,
    "sha512": sha512,
    "sha512_224": sha512_224,
    "sha512_256": sha512_256,
}

algorithms_available: frozenset = frozenset(_dispatch)


def _normalize(name: str) -> str:
    # "SHA-512/256" -> "sha512_256"
    return name.lower().replace("-", "").replace("/", "_")


def new(name: str, string: Buffer = b"", *, usedforsecurity: bool = True) -> bytes:
    """Hash *string* with the algorithm called *name*.

    Besides the names in `algorithms_available`, any "sha512_<t>" (or
    "SHA-512/<t>") with a valid t selects SHA-512/t."""
    algo = _normalize(name)

    try:
        func = _dispatch[algo]
    except KeyError:
        prefix, _, suffix = algo.partition("_")
        # Only the canonical "SHA-512/t" spelling of t: ASCII digits, no leading zero
        if prefix != "sha512" or not (suffix.isascii() and suffix.isdigit()) or suffix != str(int(suffix)):
            raise ValueError(f"Unsupported algorithm: {name!r}") from None
        func = sha512_t(int(suffix))

    return func(string, usedforsecurity=usedforsecurity)


__all__: list = [
    "HashConfigurationError",
    "HashFunction",
    "algorithms_available",
    "new",
    "sha1",
    "sha224",
    "sha256",
    "sha384",
    "sha512",
    "sha512_t",
    "sha512_224",
    "sha512_256",
]
