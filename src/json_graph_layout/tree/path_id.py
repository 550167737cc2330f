"""PathIdCodec: converts canonical JSON access paths into node identifiers.

Processing:
- All whitespace is removed (e.g. "root.first name" -> "root.firstname")
- Every character outside [A-Za-z0-9_-[].] becomes "_"
  (e.g. "root.e-mail@home" -> "root.e-mail_home")
- An empty result becomes "root"

Ids are readable enough to debug by eye but the mapping is not invertible:
"root.a b" and "root.ab" share an id, as do a key literally named "[0]" and
the first element of an array at the same parent.
"""

import re

# Any whitespace run, removed outright
_WHITESPACE = re.compile(r"\s+")

# Everything the id alphabet does not allow
_DISALLOWED = re.compile(r"[^a-zA-Z0-9_\-\[\]\.]")

ROOT_ID = "root"


class PathIdCodec:
    """Maps canonical paths to stable identifier strings.

    Pure and total: every string (including "") encodes to a non-empty id and
    the same path always yields the same id.

    Example usage:
        codec = PathIdCodec()
        codec.encode("root.users[0].name")   # "root.users[0].name"
        codec.encode("root.first name")      # "root.firstname"
        codec.encode("root.naïve")           # "root.na_ve"
    """

    def encode(self, path: str) -> str:
        """Encode a canonical path.

        Args:
            path: Canonical access path such as ``root.items[3].id``.

        Returns:
            Identifier restricted to ``[A-Za-z0-9_\\-\\[\\]\\.]``.
        """
        s = _WHITESPACE.sub("", path)
        s = _DISALLOWED.sub("_", s)
        return s or ROOT_ID


_codec = PathIdCodec()


def encode_path(path: str) -> str:
    """Module-level shortcut for ``PathIdCodec().encode(path)``."""
    return _codec.encode(path)
