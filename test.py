# test.py
# Unit test

import hashlib
import unittest
import warnings

from shs import (
    HashConfigurationError,
    algorithms_available,
    new,
    sha1,
    sha224,
    sha256,
    sha384,
    sha512,
    sha512_t,
    sha512_224,
    sha512_256,
)


class SecureHashStandardTest(unittest.TestCase):
    def setUp(self):
        self.test_vectors = [
            b"",
            b"a",
            b"abc",
            b"message digest",
            b"abcdefghijklmnopqrstuvwxyz",
            b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
            b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
            b"1234567890" * 8,
            bytes(range(256)) * 5,
        ]

    def test_sha1(self):
        for msg in self.test_vectors:
            expected = hashlib.sha1(msg).hexdigest()
            result = sha1(msg, usedforsecurity=False).hex()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha224(self):
        for msg in self.test_vectors:
            expected = hashlib.sha224(msg).hexdigest()
            result = sha224(msg).hex()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha256(self):
        for msg in self.test_vectors:
            expected = hashlib.sha256(msg).hexdigest()
            result = sha256(msg).hex()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha384(self):
        for msg in self.test_vectors:
            expected = hashlib.sha384(msg).hexdigest()
            result = sha384(msg).hex()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_sha512(self):
        for msg in self.test_vectors:
            expected = hashlib.sha512(msg).hexdigest()
            result = sha512(msg).hex()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    @unittest.skipUnless("sha512_224" in hashlib.algorithms_available, "OpenSSL lacks SHA-512/224")
    def test_sha512_224(self):
        for msg in self.test_vectors:
            expected = hashlib.new("sha512_224", msg).hexdigest()
            result = sha512_224(msg).hex()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    @unittest.skipUnless("sha512_256" in hashlib.algorithms_available, "OpenSSL lacks SHA-512/256")
    def test_sha512_256(self):
        for msg in self.test_vectors:
            expected = hashlib.new("sha512_256", msg).hexdigest()
            result = sha512_256(msg).hex()
            self.assertEqual(result, expected, f"Failed for message: {msg}")

    def test_buffer_types(self):
        expected = sha256(b"abc")
        self.assertEqual(sha256(bytearray(b"abc")), expected)
        self.assertEqual(sha256(memoryview(b"abc")), expected)


class KnownAnswerTest(unittest.TestCase):
    """Example digests of the string "abc" published alongside FIPS 180-4"""

    def test_abc(self):
        vectors = {
            sha224: "23097d223405d8228642a477bda255b32aadbce4bda0b3f7e36c9da7",
            sha256: "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
            sha384: "cb00753f45a35e8bb5a03d699ac65007272c32ab0eded1631a8b605a43ff5bed"
                    "8086072ba1e7cc2358baeca134c825a7",
            sha512: "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
                    "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
            sha512_224: "4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa",
            sha512_256: "53048e2681941ef99b2e29b76b4c7dabe4c2d0c634fc6d46e0e2f13107e7af23",
        }
        for func, expected in vectors.items():
            self.assertEqual(func(b"abc"), bytes.fromhex(expected), func.name)

    def test_sha1(self):
        self.assertEqual(
            sha1(b"abc", usedforsecurity=False),
            bytes.fromhex("a9993e364706816aba3e25717850c26c9cd0d89d"),
        )
        self.assertEqual(
            sha1(b"", usedforsecurity=False),
            bytes.fromhex("da39a3ee5e6b4b0d3255bfef95601890afd80709"),
        )

    def test_sha512_t_call_form(self):
        self.assertEqual(
            sha512_t(224)(b"abc"),
            bytes.fromhex("4634270f707b6a54daae7530460842e20e37ed265ceee9a43e8924aa"),
        )


class DigestLengthTest(unittest.TestCase):
    def test_fixed_lengths(self):
        sizes = {sha224: 28, sha256: 32, sha384: 48, sha512: 64, sha512_224: 28, sha512_256: 32}
        for func, size in sizes.items():
            self.assertEqual(func.digest_size, size)
            for length in (0, 1, 55, 56, 63, 64, 111, 112, 127, 128, 1000):
                self.assertEqual(len(func(b"x" * length)), size, (func.name, length))
        self.assertEqual(len(sha1(b"", usedforsecurity=False)), 20)

    def test_sha512_t_rounds_up(self):
        self.assertEqual(len(sha512_t(1)(b"abc")), 1)
        self.assertEqual(len(sha512_t(8)(b"abc")), 1)
        self.assertEqual(len(sha512_t(9)(b"abc")), 2)
        self.assertEqual(len(sha512_t(200)(b"abc")), 25)
        self.assertEqual(len(sha512_t(511)(b"abc")), 64)

    def test_deterministic(self):
        for func in (sha224, sha256, sha384, sha512, sha512_224, sha512_256):
            self.assertEqual(func(b"same input"), func(b"same input"))

    def test_block_sizes(self):
        self.assertEqual(sha1.block_size, 512)
        self.assertEqual(sha256.block_size, 512)
        self.assertEqual(sha512.block_size, 1024)
        self.assertEqual(sha512_224.block_size, 1024)


class InterfaceTest(unittest.TestCase):
    def test_strings_rejected(self):
        with self.assertRaises(TypeError):
            sha256("abc")
        with self.assertRaises(TypeError):
            sha512_t(256)("abc")

    def test_sha1_warns_when_used_for_security(self):
        with self.assertWarns(UserWarning):
            sha1(b"abc")

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            sha1(b"abc", usedforsecurity=False)
            sha256(b"abc")

    def test_sha512_t_rejects_bad_lengths(self):
        for bits in (0, 384, 512, 1024, -8):
            with self.assertRaises(HashConfigurationError, msg=bits):
                sha512_t(bits)
        for bits in (224.0, "224", True):
            with self.assertRaises(TypeError, msg=repr(bits)):
                sha512_t(bits)

    def test_configuration_error_is_value_error(self):
        self.assertTrue(issubclass(HashConfigurationError, ValueError))

    def test_names(self):
        self.assertEqual(sha256.name, "sha256")
        self.assertEqual(sha512_224.name, "sha512_224")
        self.assertEqual(sha512_t(200).name, "sha512_200")
        self.assertEqual(sha512_t(200).__name__, "sha512_200")

    def test_new(self):
        self.assertEqual(new("sha256", b"abc"), sha256(b"abc"))
        self.assertEqual(new("SHA-384", b"abc"), sha384(b"abc"))
        self.assertEqual(new("SHA-512/224", b"abc"), sha512_224(b"abc"))
        self.assertEqual(new("sha512_200", b"abc"), sha512_t(200)(b"abc"))
        self.assertEqual(new("sha1", b"abc", usedforsecurity=False), sha1(b"abc", usedforsecurity=False))

    def test_new_unsupported(self):
        for name in ("md5", "sha3_256", "sha512_", "sha512_abc", "sha256_128",
                     "sha512_0224", "sha512_+224", "sha512_\uff12\uff12\uff14", "sha512_\u0662\u0662\u0664"):
            with self.assertRaises(ValueError, msg=name):
                new(name, b"abc")
        with self.assertRaises(HashConfigurationError):
            new("sha512_384", b"abc")

    def test_algorithms_available(self):
        self.assertEqual(
            algorithms_available,
            {"sha1", "sha224", "sha256", "sha384", "sha512", "sha512_224", "sha512_256"},
        )
        for name in algorithms_available:
            self.assertIsInstance(new(name, b"", usedforsecurity=False), bytes)


if __name__ == "__main__":
    unittest.main()
