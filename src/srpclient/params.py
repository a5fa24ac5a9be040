from .groups import Group
from .digests import get_digest

# A parameter set binds one group to one hash function. Both sides of an
# exchange must agree on the whole set: the same N and g with a different
# digest is a different, incompatible protocol. The digest is resolved here,
# once, so an unknown algorithm fails when the Params is built and not in
# the middle of an exchange. Params are shared by every client that uses
# them, so they cannot be changed after construction.

class Params:
    __slots__ = ("group", "digest")

    def __init__(self, group, digest):
        if not isinstance(group, Group):
            raise TypeError("group must be a Group, not %r" % (group,))
        object.__setattr__(self, "group", group)
        object.__setattr__(self, "digest", get_digest(digest))

    def __setattr__(self, name, value):
        raise AttributeError("Params is immutable")

    def __delattr__(self, name):
        raise AttributeError("Params is immutable")

    def __repr__(self):
        return "<Params %r %s>" % (self.group, self.digest.name)
