import os, logging
from hkdf import Hkdf
from .engine import Engine
from .errors import ProtocolAbort, MissingSalt
from .parameters.rfc5054 import DefaultParams
from .util import (bytes_to_number, number_to_bytes, mod_pow,
                   pad, random_bytes, secure_equal)

log = logging.getLogger(__name__)

# I: identity (user name)        P: password
# s: salt                        v: verifier
# a, A: client's private and public ephemeral values
# B: server's public ephemeral value
# k: multiplier, k = H(N | PAD(g))
# u: scrambling parameter, u = H(PAD(A) | PAD(B))
# x: private key, x = H(s | H(I | ":" | P))
# S: premaster secret
#
# registration:
#  v = g^x % N                              (s, v) go to the server
#
# exchange (client side):
#  a = random()
#  A = g^a % N
#  S = (B - k * g^x) ^ (a + u * x) % N
#  m1 = H(PAD(A) | PAD(B) | PAD(S))         client proof, sent to the server
#  m2 = H(PAD(A) | m1 | PAD(S))             expected server proof
#
# the server side (for reference, not implemented here):
#  B = (k*v + g^b) % N
#  S = (A * v^u) ^ b % N

class Challenge:
    """The result of one exchange. Send public_key and proof to the server,
    then hand the server's answer to is_proof_valid(). All values are
    big-endian byte strings."""

    __slots__ = ("k", "x", "a", "A", "u", "S", "m1", "m2",
                 "_digest", "_pad_size")

    def __init__(self, k, x, a, A, u, S, m1, m2, digest, pad_size):
        for name, value in [("k", k), ("x", x), ("a", a), ("A", A),
                            ("u", u), ("S", S), ("m1", m1), ("m2", m2),
                            ("_digest", digest), ("_pad_size", pad_size)]:
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("Challenge is immutable")

    def __delattr__(self, name):
        raise AttributeError("Challenge is immutable")

    def __repr__(self):
        return "<Challenge A=%s...>" % self.A[:8].hex()

    @property
    def secret_key(self):
        return self.S

    @property
    def public_key(self):
        return self.A

    @property
    def proof(self):
        return self.m1

    def is_proof_valid(self, m2):
        """Compare the server's proof against the one we expect, in constant
        time. A mismatch is a normal outcome (the server does not know our
        verifier), so this returns False rather than raising."""
        if not isinstance(m2, (bytes, bytearray, memoryview)):
            return False
        return secure_equal(self.m2, m2)

    def session_key(self, length=None, info=b"SRP session key"):
        """Derive symmetric key material from the premaster secret. Both
        sides get the same key if (and only if) they derived the same S.
        Only use it after is_proof_valid() has returned True."""
        if length is None:
            length = self._digest.digest_size
        ikm = pad(self.S, self._pad_size)
        h = Hkdf(salt=b"", input_key_material=ikm, hash=self._digest.hashfunc)
        return h.expand(info, length)

class SRPClient:
    """This class manages the client side of one SRP-6a registration or
    login.

    entropy_f is expected to behave like os.urandom. It is the only source
    of randomness: it supplies the ephemeral exponent a in exchange() and
    the salt in random_salt() and register(). The only reason to not use
    os.urandom is for deterministic unit tests, and a fixed entropy_f fixes
    the salt as well as a.
    """

    def __init__(self, identity, password,
                 params=DefaultParams, entropy_f=os.urandom):
        if not isinstance(identity, (str, bytes)):
            raise TypeError("identity must be str or bytes, not %r"
                            % type(identity))
        if not isinstance(password, (str, bytes)):
            raise TypeError("password must be str or bytes")
        if not callable(entropy_f):
            raise TypeError("entropy_f must be callable")
        self.identity = identity
        self._password = password
        self.e = Engine(params)
        self.entropy_f = entropy_f
        self._salt = None

    def __repr__(self):
        return "<SRPClient %r %r>" % (self.identity, self.e.params)

    def random_salt(self):
        return random_bytes(self.e.N_SIZE, self.entropy_f)

    def seed(self, salt):
        if not isinstance(salt, bytes):
            raise TypeError("salt must be bytes")
        self._salt = salt

    @property
    def salt(self):
        return self._salt

    def _x(self):
        if self._salt is None:
            raise MissingSalt("call seed() before using the salt")
        return self.e.private_key(self._salt, self.identity, self._password)

    def verifier(self):
        x = self._x()
        v = mod_pow(self.e.g, x, self.e.N)
        return number_to_bytes(v)

    def register(self):
        """Pick a fresh salt and return (salt, verifier), the pair the server
        stores in place of the password."""
        salt = self.random_salt()
        self.seed(salt)
        log.debug("generated registration salt for %r", self.identity)
        return salt, self.verifier()

    def exchange(self, B):
        if not isinstance(B, bytes):
            raise TypeError("B must be bytes")
        e = self.e
        B_num = bytes_to_number(B)
        # The client MUST abort authentication if B % N is zero. This
        # happens before we touch the salt, the entropy source or the hash.
        if e.is_degenerate(B_num):
            log.debug("server sent a degenerate B, aborting")
            raise ProtocolAbort("server public value B is zero mod N")
        x = self._x()

        a = bytes_to_number(random_bytes(e.N_SIZE, self.entropy_f))
        A = mod_pow(e.g, a, e.N)
        A_bytes = number_to_bytes(A)
        k = e.k()
        u = bytes_to_number(e.hash(e.pad(A_bytes), e.pad(B)))

        # (B - (k * g^x)) ^ (a + (u * x)) % N
        # B - k*g^x is usually negative, mod_pow reduces it into [0, N)
        base = B_num - k * mod_pow(e.g, x, e.N)
        S = mod_pow(base, a + u * x, e.N)
        S_bytes = number_to_bytes(S)

        m1 = e.hash(e.pad(A_bytes), e.pad(B), e.pad(S_bytes))
        m2 = e.hash(e.pad(A_bytes), m1, e.pad(S_bytes))
        log.debug("computed challenge for %r", self.identity)

        return Challenge(k=number_to_bytes(k), x=number_to_bytes(x),
                         a=number_to_bytes(a), A=A_bytes,
                         u=number_to_bytes(u), S=S_bytes,
                         m1=m1, m2=m2, digest=e.digest, pad_size=e.N_SIZE)
