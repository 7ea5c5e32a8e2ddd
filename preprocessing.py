# preprocessing.py
# Message padding and parsing, see NIST FIPS 180-4, Section 5.1 and 5.2

from __future__ import annotations

from typing_extensions import Buffer

from utils import BITS_PER_BYTE, bytes_to_words, check_word_bit_length

WORDS_PER_BLOCK: int = 16


class MessageTooLongError(ValueError): ...


def block_size(word_bit_length: int) -> int:
    """Block size in bits: 512 for 32-bit words, 1024 for 64-bit words"""
    return WORDS_PER_BLOCK * check_word_bit_length(word_bit_length)


def encode_length(message_len: int, length_field_size: int) -> bytes:
    """Message length in bits as a big-endian field of *length_field_size* bits"""
    if message_len >= 1 << length_field_size:
        raise MessageTooLongError(
            f"Message of {message_len} bits does not fit a {length_field_size}-bit length field"
        )
    return message_len.to_bytes(length_field_size // BITS_PER_BYTE, 'big')


def pad(message: Buffer, word_bit_length: int) -> bytearray:
    '''The purpose of this padding is to ensure that the padded
    message is a multiple of 512 or 1024 bits, depending on the
    word size. The length field takes the last two words of the final
    block: 64 bits for SHA-1/224/256, 128 bits for SHA-384/512.'''
    block_bytes: int = block_size(word_bit_length) // BITS_PER_BYTE
    padded = bytearray(message)
    length_field = encode_length(len(padded) * BITS_PER_BYTE, 2 * word_bit_length)

    padded.append(0x80)
    padded.extend(bytes(-(len(padded) + len(length_field)) % block_bytes))
    padded += length_field
    return padded


def preprocess(message: Buffer, word_bit_length: int) -> list[tuple[int, ...]]:
    """Pad *message* and parse it into blocks of sixteen big-endian words"""
    padded = pad(message, word_bit_length)
    block_bytes = block_size(word_bit_length) // BITS_PER_BYTE
    return [
        bytes_to_words(padded[i : i + block_bytes], word_bit_length)
        for i in range(0, len(padded), block_bytes)
    ]


__all__: list = ["WORDS_PER_BLOCK", "MessageTooLongError", "block_size", "encode_length", "pad", "preprocess"]
