from .client import SRPClient, Challenge
from .errors import SRPError, ProtocolAbort, MissingSalt, UnsupportedDigest
from .params import Params
SRPClient, Challenge, Params # hush pyflakes
SRPError, ProtocolAbort, MissingSalt, UnsupportedDigest # hush pyflakes

__version__ = "0.1.0"
