# test_compression.py
# Unit test for word functions and the compression pipeline

import hashlib
import unittest

from compression import schedule_sha1, schedule_sha2, sha1_compress, sha2_compress
from constants import H1, H256, H512, K1, K32, K64
from functions import ch, maj, parity, rotl, rotr, shr, sigma0, sigma1, uSigma0, uSigma1
from preprocessing import preprocess
from utils import bytes_to_words


class FunctionsTest(unittest.TestCase):
    def test_rotations(self):
        self.assertEqual(rotr(1, 1, 32), 0x80000000)
        self.assertEqual(rotl(0x80000000, 1, 32), 1)
        self.assertEqual(rotr(0x12345678, 8, 32), 0x78123456)
        self.assertEqual(rotl(0x12345678, 8, 32), 0x34567812)
        self.assertEqual(rotr(1, 1, 64), 0x8000000000000000)
        self.assertEqual(shr(0x80, 4), 0x08)

    def test_logical_functions(self):
        self.assertEqual(ch(0xF0, 0xCC, 0xAA), 0xCA)
        self.assertEqual(maj(0xF0, 0xCC, 0xAA), 0xE8)
        self.assertEqual(parity(0xF0, 0xCC, 0xAA), 0x96)

    def test_sigma_amounts_differ_by_width(self):
        self.assertEqual(sigma0(1, 32), 0x02004000)
        self.assertEqual(sigma0(1, 64), 0x8100000000000000)
        self.assertEqual(sigma1(1 << 10, 32), (1 << 25) ^ (1 << 23) ^ 1)
        self.assertEqual(uSigma0(1, 32), (1 << 30) ^ (1 << 19) ^ (1 << 10))
        self.assertEqual(uSigma1(1, 64), (1 << 50) ^ (1 << 46) ^ (1 << 23))

    def test_results_fit_the_word(self):
        x = 0xFFFFFFFF
        for func in (uSigma0, uSigma1, sigma0, sigma1):
            self.assertLessEqual(func(x, 32), x)


class ScheduleTest(unittest.TestCase):
    def test_sha1_schedule(self):
        (block,) = preprocess(b"abc", 32)
        W = schedule_sha1(block)
        self.assertEqual(len(W), 80)
        self.assertEqual(tuple(W[:16]), block)
        self.assertEqual(W[16], rotl(W[13] ^ W[8] ^ W[2] ^ W[0], 1, 32))

    def test_sha2_schedule_lengths(self):
        (block32,) = preprocess(b"abc", 32)
        (block64,) = preprocess(b"abc", 64)
        self.assertEqual(len(schedule_sha2(block32, 64, 32)), 64)
        self.assertEqual(len(schedule_sha2(block64, 80, 64)), 80)
        self.assertTrue(all(w < 1 << 32 for w in schedule_sha2(block32, 64, 32)))


class CompressTest(unittest.TestCase):
    def test_sha1_state(self):
        state = sha1_compress(H1, preprocess(b"abc", 32), K1)
        self.assertEqual(state, bytes_to_words(hashlib.sha1(b"abc").digest(), 32))

    def test_sha256_state(self):
        state = sha2_compress(H256, preprocess(b"abc", 32), K32, 32)
        self.assertEqual(state, bytes_to_words(hashlib.sha256(b"abc").digest(), 32))

    def test_sha512_state(self):
        state = sha2_compress(H512, preprocess(b"abc", 64), K64, 64)
        self.assertEqual(state, bytes_to_words(hashlib.sha512(b"abc").digest(), 64))

    def test_no_blocks_keeps_initial_value(self):
        self.assertEqual(sha2_compress(H256, [], K32, 32), H256)
        self.assertEqual(sha1_compress(H1, []), H1)

    def test_unsupported_word_size(self):
        (block,) = preprocess(b"abc", 32)
        for width in (16, 48, 128):
            with self.assertRaises(ValueError, msg=width):
                sha2_compress(H256, [block], K32, width)
            with self.assertRaises(ValueError, msg=width):
                schedule_sha2(block, 64, width)

    def test_blocks_chain_in_order(self):
        first, second = preprocess(bytes(100), 32)
        chained = sha2_compress(sha2_compress(H256, [first], K32, 32), [second], K32, 32)
        self.assertEqual(chained, sha2_compress(H256, [first, second], K32, 32))
        self.assertNotEqual(chained, sha2_compress(H256, [second, first], K32, 32))

        first, second = preprocess(bytes(100), 32)
        self.assertEqual(
            sha1_compress(sha1_compress(H1, [first]), [second]),
            sha1_compress(H1, [first, second]),
        )


if __name__ == "__main__":
    unittest.main()
