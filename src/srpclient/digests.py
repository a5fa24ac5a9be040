import hashlib
from .errors import UnsupportedDigest

"""The closed set of hash functions a parameter set may be bound to.

A digest is chosen once, when a Params object is built, and is never looked
up by name again after that. Asking for anything outside this list fails at
configuration time with UnsupportedDigest.

    d = get_digest("SHA-256") # or SHA256, or "sha256"
    d.hash(b"seg1", b"seg2")  # == sha256(b"seg1seg2").digest()
"""

class Digest:
    def __init__(self, name, hashfunc):
        self.name = name
        self.hashfunc = hashfunc
        self.digest_size = hashfunc().digest_size

    def hash(self, *segments):
        # segments are concatenated first and digested once
        h = self.hashfunc()
        for segment in segments:
            assert isinstance(segment, bytes), repr(segment)
            h.update(segment)
        return h.digest()

    def __repr__(self):
        return "<Digest %s>" % self.name

SHA1 = Digest("SHA-1", hashlib.sha1)
SHA256 = Digest("SHA-256", hashlib.sha256)
SHA384 = Digest("SHA-384", hashlib.sha384)
SHA512 = Digest("SHA-512", hashlib.sha512)

ALL_DIGESTS = [SHA1, SHA256, SHA384, SHA512]

_BY_NAME = {}
for _d in ALL_DIGESTS:
    _BY_NAME[_d.name.replace("-", "").lower()] = _d
del _d

def get_digest(digest):
    if isinstance(digest, Digest):
        if digest not in ALL_DIGESTS:
            raise UnsupportedDigest("unknown digest %r" % (digest,))
        return digest
    if not isinstance(digest, str):
        raise UnsupportedDigest("digest must be a name or a Digest, not %r"
                                % (digest,))
    try:
        return _BY_NAME[digest.replace("-", "").replace("_", "").lower()]
    except KeyError:
        raise UnsupportedDigest("unsupported digest algorithm %r" % digest)
