import unittest
from binascii import hexlify
from hashlib import sha1, sha256, sha512
from srpclient import digests
from srpclient.errors import SRPError, UnsupportedDigest
from srpclient.util import bytes_from_hex

class Digests(unittest.TestCase):
    def test_names(self):
        gd = digests.get_digest
        for name in ["SHA-256", "SHA256", "sha256", "sha-256", "Sha_256"]:
            self.assertIs(gd(name), digests.SHA256)
        self.assertIs(gd("SHA-1"), digests.SHA1)
        self.assertIs(gd("sha1"), digests.SHA1)
        self.assertIs(gd("SHA-384"), digests.SHA384)
        self.assertIs(gd("SHA-512"), digests.SHA512)
        self.assertIs(gd(digests.SHA512), digests.SHA512)

    def test_unsupported(self):
        gd = digests.get_digest
        self.assertRaises(UnsupportedDigest, gd, "MD5")
        self.assertRaises(UnsupportedDigest, gd, "SHA-3")
        self.assertRaises(UnsupportedDigest, gd, "")
        self.assertRaises(UnsupportedDigest, gd, sha256)
        self.assertRaises(UnsupportedDigest, gd, None)
        self.assertRaises(UnsupportedDigest, gd,
                          digests.Digest("SHA-256", sha256))
        self.assertRaises(ValueError, gd, "MD5")
        self.assertRaises(SRPError, gd, "MD5")

    def test_sizes(self):
        self.assertEqual(digests.SHA1.digest_size, 20)
        self.assertEqual(digests.SHA256.digest_size, 32)
        self.assertEqual(digests.SHA384.digest_size, 48)
        self.assertEqual(digests.SHA512.digest_size, 64)

    def test_hash(self):
        h = digests.SHA256.hash
        foo = bytes_from_hex("2C26B46B68FFC68FF99B453C1D30413413422D706483BFA0F98A5E886266E7AE")
        bar = bytes_from_hex("FCDE2B2EDBA56BF408601FB721FE9B5C338D10EE429EA04FAE5511B68FBF8FB9")
        foobar = bytes_from_hex("C3AB8FF13720E8AD9047DD39466B3C8974E592C2FA383D4A3960714CAEF0C4F2")
        self.assertEqual(h(b"foo"), foo)
        self.assertEqual(h(b"bar"), bar)
        # segments are concatenated, then hashed once
        self.assertEqual(h(b"foo", b"bar"), foobar)
        self.assertEqual(h(b"fo", b"", b"obar"), foobar)
        self.assertNotEqual(h(b"foo", b"bar"), h(h(b"foo"), h(b"bar")))

    def test_hash_matches_hashlib(self):
        self.assertEqual(digests.SHA1.hash(b"a", b"b"), sha1(b"ab").digest())
        self.assertEqual(hexlify(digests.SHA512.hash()),
                         hexlify(sha512(b"").digest()))
