class SRPError(Exception):
    pass
class ProtocolAbort(SRPError):
    """The server's public value B is zero modulo N. Continuing would let
    the server force a publicly-known premaster secret, so the exchange has
    to be abandoned. Do not resubmit the same B."""
class MissingSalt(SRPError):
    """seed() (or register()) must be called before the verifier or an
    exchange can be computed."""
class UnsupportedDigest(SRPError, ValueError):
    """The requested hash algorithm is not one of the supported digests."""
