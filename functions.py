# functions.py
# Operations on words and the logical functions of NIST FIPS 180-4, Sections 3.2 and 4.1

from __future__ import annotations

# Rotation/shift amounts (first, second, third) per word width, Section 4.1.2 and 4.1.3.
# The third amount of sigma0/sigma1 is a plain right shift.
SIGMA_AMOUNTS: dict = {
    32: {
        "uSigma0": (2, 13, 22),
        "uSigma1": (6, 11, 25),
        "sigma0": (7, 18, 3),
        "sigma1": (17, 19, 10),
    },
    64: {
        "uSigma0": (28, 34, 39),
        "uSigma1": (14, 18, 41),
        "sigma0": (1, 8, 7),
        "sigma1": (19, 61, 6),
    },
}


def mask(w: int) -> int:
    return (1 << w) - 1


def rotr(x: int, n: int, w: int) -> int:
    '''Rotate Right (circular right shift) operation'''
    return ((x >> n) | (x << (w - n))) & mask(w)

def rotl(x: int, n: int, w: int) -> int:
    '''Rotate Left (circular left shift) operation'''
    return ((x << n) | (x >> (w - n))) & mask(w)


def shr(x: int, n: int) -> int:
    '''Right Shift operation'''
    return x >> n


def ch(x: int, y: int, z: int) -> int:
    '''Choice
    _
    SHA-1 -> 0 <= t <= 19, every SHA-2 round'''
    return (x & y) ^ (~x & z)

def parity(x: int, y: int, z: int) -> int:
    '''Parity
    _
    SHA-1 -> 20 <= t <= 39 and 60 <= t <= 79'''
    return x ^ y ^ z

def maj(x: int, y: int, z: int) -> int:
    '''Majority
    _
    SHA-1 -> 40 <= t <= 59, every SHA-2 round'''
    return (x & y) ^ (x & z) ^ (y & z)


def uSigma0(x: int, w: int) -> int:
    s1, s2, s3 = SIGMA_AMOUNTS[w]["uSigma0"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ rotr(x, s3, w)

def uSigma1(x: int, w: int) -> int:
    s1, s2, s3 = SIGMA_AMOUNTS[w]["uSigma1"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ rotr(x, s3, w)

def sigma0(x: int, w: int) -> int:
    s1, s2, s3 = SIGMA_AMOUNTS[w]["sigma0"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ shr(x, s3)

def sigma1(x: int, w: int) -> int:
    s1, s2, s3 = SIGMA_AMOUNTS[w]["sigma1"]
    return rotr(x, s1, w) ^ rotr(x, s2, w) ^ shr(x, s3)


# Round function of SHA-1 round t is SHA1_FUNCTIONS[t // 20]
SHA1_FUNCTIONS: tuple = (ch, parity, maj, parity)


__all__: list = [
    "SIGMA_AMOUNTS", "SHA1_FUNCTIONS", "mask", "rotr", "rotl", "shr",
    "ch", "parity", "maj", "uSigma0", "uSigma1", "sigma0", "sigma1",
]
