# test_bootstrap.py
# Unit test for the SHA-512/t initial hash value derivation

import unittest

from bootstrap import (
    HashConfigurationError,
    check_truncation,
    derivation_message,
    intermediate_hash_values,
    sha512_t_initial_hash_values,
)
from compression import sha2_compress
from constants import H512, K64
from preprocessing import preprocess
from shs import sha512, sha512_t
from utils import format_digest


class BootstrapTest(unittest.TestCase):
    def test_intermediate_hash_values(self):
        iv = intermediate_hash_values()
        self.assertEqual(len(iv), 8)
        self.assertEqual(iv[0], 0xCFAC43C256196CAD)
        self.assertEqual(tuple(word ^ 0xA5A5A5A5A5A5A5A5 for word in iv), H512)

    def test_derivation_message(self):
        self.assertEqual(derivation_message(224), b"SHA-512/224")
        self.assertEqual(derivation_message(256), b"SHA-512/256")
        self.assertEqual(derivation_message(8), b"SHA-512/8")
        self.assertEqual(derivation_message(64), b"SHA-512/64")

    def test_sha512_224_initial_hash_values(self):
        # FIPS 180-4, Section 5.3.6.1
        self.assertEqual(sha512_t_initial_hash_values(224), (
            0x8C3D37C819544DA2, 0x73E1996689DCD4D6, 0x1DFAB7AE32FF9C82, 0x679DD514582F9FCF,
            0x0F6D2B697BD44DA8, 0x77E36F7304C48942, 0x3F9D85A86A1D36C8, 0x1112E6AD91D692A1,
        ))

    def test_sha512_256_initial_hash_values(self):
        # FIPS 180-4, Section 5.3.6.2
        self.assertEqual(sha512_t_initial_hash_values(256), (
            0x22312194FC2BF72C, 0x9F555FA3C84C64C2, 0x2393B86B6F53B151, 0x963877195940EABD,
            0x96283EE2A88EFFE3, 0xBE5E1E2553863992, 0x2B0199FC2C85B8AA, 0x0EB72DDC81C52CA2,
        ))

    def test_computed_once(self):
        self.assertIs(sha512_t_initial_hash_values(200), sha512_t_initial_hash_values(200))
        self.assertNotEqual(sha512_t_initial_hash_values(200), sha512_t_initial_hash_values(201))

    def test_check_truncation(self):
        for bits in (1, 8, 224, 256, 383, 385, 511):
            self.assertEqual(check_truncation(bits), bits)
        for bits in (0, 384, 512, -1):
            with self.assertRaises(HashConfigurationError, msg=bits):
                check_truncation(bits)
        with self.assertRaises(HashConfigurationError):
            sha512_t_initial_hash_values(384)
        with self.assertRaises(TypeError):
            sha512_t_initial_hash_values(True)


class TruncationTest(unittest.TestCase):
    def full_state_digest(self, bits, message):
        blocks = preprocess(message, 64)
        state = sha2_compress(sha512_t_initial_hash_values(bits), blocks, K64, 64)
        return format_digest(state, 64, 512)

    def test_prefix_of_own_state(self):
        for bits in (224, 256):
            for message in (b"", b"abc", bytes(200)):
                digest = sha512_t(bits)(message)
                self.assertEqual(digest, self.full_state_digest(bits, message)[: bits // 8])
                self.assertNotEqual(digest, sha512(message)[: bits // 8])


if __name__ == "__main__":
    unittest.main()
