# compression.py
# Hash computation, see NIST FIPS 180-4, Section 6.1.2 (SHA-1) and 6.2.2 / 6.4.2 (SHA-2)

from __future__ import annotations

import typing as t

from constants import K1
from functions import SHA1_FUNCTIONS, ch, maj, mask, rotl, sigma0, sigma1, uSigma0, uSigma1
from utils import check_word_bit_length

Block = t.Sequence[int]


def schedule_sha1(block: Block) -> list[int]:
    """Expand one block into the 80-word SHA-1 message schedule"""
    W: list = []

    for t in range(80):
        if t <= 15:
            W.append(block[t])
        else:
            W.append(rotl(W[t - 3] ^ W[t - 8] ^ W[t - 14] ^ W[t - 16], 1, 32))

    return W


def schedule_sha2(block: Block, rounds: int, word_bit_length: int) -> list[int]:
    """Expand one block into a SHA-2 message schedule of *rounds* words"""
    w, m = check_word_bit_length(word_bit_length), mask(word_bit_length)
    W: list = []

    for t in range(rounds):
        if t <= 15:
            W.append(block[t])
        else:
            W.append((sigma1(W[t - 2], w) + W[t - 7] + sigma0(W[t - 15], w) + W[t - 16]) & m)

    return W


def sha1_compress(
    state: t.Sequence[int], blocks: t.Iterable[Block], constants: t.Sequence[int] = K1
) -> tuple[int, ...]:
    """Fold *blocks* into a five-word SHA-1 state, one block at a time"""
    m = mask(32)
    H = tuple(state)

    for block in blocks:
        W = schedule_sha1(block)

        a, b, c, d, e = H

        for t in range(80):
            f = SHA1_FUNCTIONS[t // 20]
            temp = (rotl(a, 5, 32) + f(b, c, d) + e + constants[t] + W[t]) & m
            a, b, c, d, e = temp, a, rotl(b, 30, 32), c, d

        H = tuple((x + y) & m for x, y in zip(H, (a, b, c, d, e)))

    return H


def sha2_compress(
    state: t.Sequence[int],
    blocks: t.Iterable[Block],
    constants: t.Sequence[int],
    word_bit_length: int,
) -> tuple[int, ...]:
    """Fold *blocks* into an eight-word SHA-2 state.

    The number of rounds is the number of constants: 64 for 32-bit words
    (SHA-224, SHA-256), 80 for 64-bit words (SHA-384, SHA-512, SHA-512/t)."""
    w, m = check_word_bit_length(word_bit_length), mask(word_bit_length)
    rounds = len(constants)
    H = tuple(state)

    for block in blocks:
        W = schedule_sha2(block, rounds, w)

        a, b, c, d, e, f, g, h = H

        for t in range(rounds):
            t1 = (h + uSigma1(e, w) + ch(e, f, g) + constants[t] + W[t]) & m
            t2 = (uSigma0(a, w) + maj(a, b, c)) & m

            h, g, f = g, f, e
            e = (d + t1) & m
            d, c, b = c, b, a
            a = (t1 + t2) & m

        H = tuple((x + y) & m for x, y in zip(H, (a, b, c, d, e, f, g, h)))

    return H


__all__: list = ["Block", "schedule_sha1", "schedule_sha2", "sha1_compress", "sha2_compress"]
