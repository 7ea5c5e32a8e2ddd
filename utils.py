# utils.py
# Word/byte conversions and digest formatting

from __future__ import annotations

import typing as t

BITS_PER_BYTE: int = 8

# SHA-1, SHA-224 and SHA-256 use 32-bit words; SHA-384, SHA-512 and SHA-512/t use 64-bit words
WORD_BIT_LENGTHS: tuple = (32, 64)


def check_word_bit_length(word_bit_length: int) -> int:
    if word_bit_length not in WORD_BIT_LENGTHS:
        raise ValueError(f"Unsupported word size: {word_bit_length} bits, expected 32 or 64")
    return word_bit_length


def bytes_for_bits(bits: int) -> int:
    """Number of bytes needed to hold *bits* bits, rounded up"""
    return (bits + BITS_PER_BYTE - 1) // BITS_PER_BYTE


def words_to_bytes(words: t.Iterable[int], word_bit_length: int) -> bytes:
    """Big-endian serialization, most significant byte of each word first"""
    size = word_bit_length // BITS_PER_BYTE
    return b"".join(word.to_bytes(size, "big") for word in words)


def bytes_to_words(data: bytes, word_bit_length: int) -> tuple[int, ...]:
    size = word_bit_length // BITS_PER_BYTE
    if len(data) % size:
        raise ValueError(f"{len(data)} bytes is not a whole number of {word_bit_length}-bit words")
    return tuple(int.from_bytes(data[i : i + size], "big") for i in range(0, len(data), size))


def format_digest(state: t.Sequence[int], word_bit_length: int, digest_bits: int) -> bytes:
    """Serialize the final hash value and keep its leftmost *digest_bits* bits.

    SHA-224, SHA-384 and SHA-512/t differ from their parent algorithm only
    by initial hash value and by this truncation, Section 6.3, 6.5 and 6.7.
    When *digest_bits* is not a multiple of 8 the last byte is kept whole."""
    state_bits = len(state) * word_bit_length
    if digest_bits > state_bits:
        raise ValueError(
            f"Cannot take a {digest_bits}-bit digest from a {state_bits}-bit state"
        )
    return words_to_bytes(state, word_bit_length)[: bytes_for_bits(digest_bits)]


__all__: list = ["BITS_PER_BYTE", "WORD_BIT_LENGTHS", "check_word_bit_length", "bytes_for_bits", "words_to_bytes", "bytes_to_words", "format_digest"]
