# constants.py
# Round constants and initial hash values, derived rather than tabulated.
# See NIST FIPS 180-4, Sections 4.2 and 5.3.

from __future__ import annotations

import decimal

from primes import nprimes

# Significant digits carried through root extraction. 64-bit constants
# need the first 64 fractional bits exact, which a double cannot hold.
ROOT_PRECISION: int = 64

# Newton iteration stops once two successive guesses differ by less.
ROOT_TOLERANCE = decimal.Decimal("1e-32")


def nth_root(value: int, root: int) -> decimal.Decimal:
    """Newton-Raphson approximation of the real root-th root of value.

    Starts from 1 and iterates x' = ((r - 1)x + v / x^(r-1)) / r until
    two guesses differ by less than ROOT_TOLERANCE, then returns the
    newer of the two."""
    if value < 0:
        raise ValueError(f"Cannot take a real root of negative value {value}")
    if root < 2:
        raise ValueError(f"Root degree must be at least 2, got {root}")

    with decimal.localcontext() as ctx:
        ctx.prec = ROOT_PRECISION
        target = decimal.Decimal(value)
        guess = decimal.Decimal(1)
        while True:
            next_guess = ((root - 1) * guess + target / guess ** (root - 1)) / root
            if abs(guess - next_guess) < ROOT_TOLERANCE:
                return next_guess
            guess = next_guess


def nth_root_fractional_bits(prime: int, root: int, word_bit_length: int) -> int:
    """Returns `⌊frac(prime^(1/root))·2ʷ⌋`, the first w fractional bits as a word."""
    value = nth_root(prime, root)
    with decimal.localcontext() as ctx:
        ctx.prec = ROOT_PRECISION
        fractional = value - int(value)
        return int(fractional * (2**word_bit_length)) & ((1 << word_bit_length) - 1)


def derive_round_constants(count: int, word_bit_length: int) -> tuple[int, ...]:
    """Cube roots of the first *count* primes, Section 4.2.2 and 4.2.3"""
    return tuple(
        nth_root_fractional_bits(prime, 3, word_bit_length) for prime in nprimes(count)
    )


def derive_initial_hash_values(word_bit_length: int, offset: int = 0) -> tuple[int, ...]:
    """Square roots of eight consecutive primes starting at index *offset*.

    offset=0 gives SHA-256 / SHA-512 (primes 2..19), offset=8 gives
    SHA-384 (primes 23..53). SHA-224 takes the low halves of the SHA-384
    words, see derive_sha224_initial_hash_values."""
    primes = nprimes(offset + 8)[offset:]
    return tuple(nth_root_fractional_bits(prime, 2, word_bit_length) for prime in primes)


def derive_sha224_initial_hash_values() -> tuple[int, ...]:
    """Second 32 bits of the fractional parts of the square roots of primes 23..53,
    i.e. the low halves of the SHA-384 words, Section 5.3.2"""
    return tuple(word & 0xFFFFFFFF for word in derive_initial_hash_values(64, offset=8))


def derive_sha1_constants() -> tuple[int, ...]:
    """`⌊√n·2³⁰⌋` for n in (2, 3, 5, 10), each used for 20 rounds, Section 4.2.1"""
    stage_constants: list = []
    for n in (2, 3, 5, 10):
        root = nth_root(n, 2)
        with decimal.localcontext() as ctx:
            ctx.prec = ROOT_PRECISION
            stage_constants.append(int(root * (2**30)))
    return tuple(k for k in stage_constants for _ in range(20))


def _sha1_initial_hash_values() -> tuple[int, ...]:
    # Counting nibble pattern written least significant byte first.
    pattern = ("01234567", "89abcdef", "fedcba98", "76543210", "f0e1d2c3")
    return tuple(int.from_bytes(bytes.fromhex(word), "little") for word in pattern)


K1:   tuple = derive_sha1_constants()

K32:  tuple = derive_round_constants(64, 32)

K64:  tuple = derive_round_constants(80, 64)

H1:   tuple = _sha1_initial_hash_values()

H224: tuple = derive_sha224_initial_hash_values()

H256: tuple = derive_initial_hash_values(32)

H384: tuple = derive_initial_hash_values(64, offset=8)

H512: tuple = derive_initial_hash_values(64)


__all__: list = [
    "ROOT_PRECISION", "ROOT_TOLERANCE",
    "nth_root", "nth_root_fractional_bits",
    "derive_round_constants", "derive_initial_hash_values",
    "derive_sha224_initial_hash_values", "derive_sha1_constants",
    "K1", "K32", "K64", "H1", "H224", "H256", "H384", "H512",
]
