from ..params import Params
from ..groups import (RFC5054_1024, RFC5054_2048, RFC5054_3072,
                      RFC5054_4096, RFC5054_6144, RFC5054_8192)
from ..digests import SHA1, SHA256, SHA512

# Params1024Sha1 is what the RFC 5054 Appendix B test vectors use. It is
# roughly as strong as an 80-bit symmetric key and SHA-1 is past its prime,
# so only use it to talk to peers that insist on it. Params2048Sha256 has
# 112-bit security, Params3072Sha256 has 128-bit security. The larger groups
# are slow in pure python, every exchange does several full-size modular
# exponentiations.
Params1024Sha1 = Params(RFC5054_1024, SHA1)
Params2048Sha256 = Params(RFC5054_2048, SHA256)
Params3072Sha256 = Params(RFC5054_3072, SHA256)
Params4096Sha256 = Params(RFC5054_4096, SHA256)
Params6144Sha512 = Params(RFC5054_6144, SHA512)
Params8192Sha512 = Params(RFC5054_8192, SHA512)

DefaultParams = Params2048Sha256

ALL_PARAMS = [Params1024Sha1, Params2048Sha256, Params3072Sha256,
              Params4096Sha256, Params6144Sha512, Params8192Sha512]
