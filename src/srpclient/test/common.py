from hashlib import sha256
from itertools import count
from srpclient.util import (bytes_to_number, number_to_bytes, mod_pow,
                            pad, random_bytes)

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return b"".join([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, bytes)
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for i in range(len(block)):
                yield block[i:i+1]

def fixed_entropy(value):
    # always hands out the same number, left-padded to whatever size is
    # asked for. An SRPClient draws its salt from the same entropy_f, so
    # random_salt() and register() get this value too.
    def entropy_f(numbytes):
        assert len(value) <= numbytes
        return pad(value, numbytes)
    return entropy_f

def no_entropy(numbytes):
    raise AssertionError("entropy should not have been used")

class Server:
    """The SRP-6a server side, just enough of it to act as the counterpart
    in tests."""
    def __init__(self, params, verifier, entropy_f):
        self.params = params
        self.N = params.group.N
        self.g = params.group.g
        self.N_SIZE = params.group.element_size_bytes
        self.v = bytes_to_number(verifier)
        self.b = bytes_to_number(random_bytes(self.N_SIZE, entropy_f))

    def H(self, *segments):
        return self.params.digest.hash(*segments)

    def PAD(self, data):
        return pad(data, self.N_SIZE)

    def k(self):
        return bytes_to_number(self.H(number_to_bytes(self.N),
                                      self.PAD(number_to_bytes(self.g))))

    def public_key(self):
        B = (self.k() * self.v + mod_pow(self.g, self.b, self.N)) % self.N
        return number_to_bytes(B)

    def premaster(self, A_bytes):
        B_bytes = self.public_key()
        A = bytes_to_number(A_bytes)
        u = bytes_to_number(self.H(self.PAD(A_bytes), self.PAD(B_bytes)))
        S = mod_pow(A * mod_pow(self.v, u, self.N), self.b, self.N)
        return number_to_bytes(S)

    def proofs(self, A_bytes):
        # returns (expected m1, m2)
        B_bytes = self.public_key()
        S_bytes = self.premaster(A_bytes)
        m1 = self.H(self.PAD(A_bytes), self.PAD(B_bytes), self.PAD(S_bytes))
        m2 = self.H(self.PAD(A_bytes), m1, self.PAD(S_bytes))
        return m1, m2
