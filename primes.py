# primes.py
# Prime numbers used to derive the SHA-2 constants.

from __future__ import annotations

import math
import typing as t


def is_prime(number: int) -> bool:
    """Trial division by every candidate divisor up to isqrt(number)"""
    if number < 2: return False
    if number == 2: return True
    if number % 2 == 0: return False

    for i in range(3, math.isqrt(number) + 1, 2):
        if number % i == 0: return False
    return True


def next_prime(value: int) -> int:
    """Returns the smallest prime >= value"""
    candidate = max(value, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def iter_primes() -> t.Iterator[int]:
    candidate = 2
    while True:
        candidate = next_prime(candidate)
        yield candidate
        candidate += 1


def nprimes(n: int) -> list[int]:
    """Returns the first n prime numbers"""
    primes: list = []
    for prime in iter_primes():
        if len(primes) >= n:
            break
        primes.append(prime)
    return primes


def nth_prime(index: int) -> int:
    """Returns the index-th prime, counting from zero (nth_prime(0) == 2)"""
    if index < 0:
        raise ValueError(f"Prime index must be non-negative, got {index}")
    return nprimes(index + 1)[index]


__all__: list = ["is_prime", "next_prime", "iter_primes", "nprimes", "nth_prime"]
