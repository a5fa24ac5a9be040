import os, re, hmac, binascii, math

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num):
    """Return the minimal big-endian encoding of a non-negative integer.

    There is never a leading zero byte, except that zero itself encodes to
    a single zero byte.
    """
    if num < 0:
        raise ValueError("cannot encode a negative number")
    s = num.to_bytes(size_bytes(num), "big")
    assert len(s) == 1 or s[0] != 0
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError("expected bytes, got %r" % type(s))
    return int.from_bytes(s, "big")

def mod_pow(base, exponent, modulus):
    """Return base**exponent % modulus as a value in [0, modulus).

    The base is reduced into [0, modulus) before exponentiating, so a base
    that came out of a subtraction (and may be negative) is still handled
    as its canonical residue.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base % modulus, exponent, modulus)

def pad(data, length):
    # left-pad with zeros up to length, never truncate
    if len(data) >= length:
        return data
    return b"\x00" * (length - len(data)) + data

_HEX_PAIR = re.compile(r"[A-Fa-f0-9]{2}")

def bytes_from_hex(text):
    """Parse human-formatted hex, such as the grouped blocks printed in the
    RFCs. Each pair of hex digits becomes one byte, anything else
    (whitespace, separators, stray characters) is skipped. Input with no hex
    pairs at all gives b"".
    """
    return bytes(int(pair, 16) for pair in _HEX_PAIR.findall(text))

def bytes_to_hex(data):
    return binascii.hexlify(data).decode("ascii")

def secure_equal(a, b):
    # hmac.compare_digest is constant-time for equal-length inputs and
    # returns False for different lengths
    return hmac.compare_digest(bytes(a), bytes(b))

def random_bytes(count, entropy_f=os.urandom):
    # entropy_f is expected to behave like os.urandom
    data = entropy_f(count)
    assert isinstance(data, bytes)
    if len(data) != count:
        raise ValueError("entropy function returned %d bytes, wanted %d"
                         % (len(data), count))
    return data
