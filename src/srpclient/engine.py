import logging
from .params import Params
from .util import bytes_to_number, number_to_bytes, pad

log = logging.getLogger(__name__)

# N, g: group parameters (prime and generator)
# H(): the digest bound to the parameter set
# PAD(): left-pad with zeros to the byte length of N
# k: SRP-6a multiplier, k = H(N | PAD(g))
# x: private key derived from the salt and credentials,
#    x = H(s | H(I | ":" | P))
#
# Integers are converted to byte strings big-endian with no leading zero
# byte, as in RFC 5054 and RFC 2945. PAD() is only applied where the RFC
# asks for it.

def _to_utf8(s):
    if isinstance(s, bytes):
        return s
    if isinstance(s, str):
        return s.encode("utf-8")
    raise TypeError("expected str or bytes, got %r" % type(s))

class Engine:
    "This class holds the per-group constants and primitives of SRP-6a."

    def __init__(self, params):
        if not isinstance(params, Params):
            raise TypeError("params must be a Params, not %r" % (params,))
        self.params = params
        self.N = params.group.N
        self.g = params.group.g
        self.digest = params.digest
        self.N_SIZE = params.group.element_size_bytes
        self._k = None

    def hash(self, *segments):
        return self.digest.hash(*segments)

    def pad(self, data):
        return pad(data, self.N_SIZE)

    def k(self):
        if self._k is None:
            self._k = bytes_to_number(self.hash(number_to_bytes(self.N),
                                                self.pad(number_to_bytes(self.g))))
            log.debug("computed multiplier for %r", self.params)
        return self._k

    def is_degenerate(self, x):
        return x % self.N == 0

    def hashed_credentials(self, identity, password):
        # the separator is not escaped: ("a:b", "c") and ("a", "b:c") hash
        # the same
        return self.hash(_to_utf8(identity) + b":" + _to_utf8(password))

    def private_key(self, salt, identity, password):
        if not isinstance(salt, bytes):
            raise TypeError("salt must be bytes")
        hashed = self.hashed_credentials(identity, password)
        return bytes_to_number(self.hash(salt, hashed))
