"""Content-based identities for JSON values.

Maps arbitrary JSON values to small integers so that sequences of objects
and arrays can be aligned by the LCS aligner, which compares elements with
plain equality. Two values share an identity iff their canonical
serializations are byte-identical.

A ValueIdentity is scoped to a single array comparison: create one per
call, encode both arrays through it, decode the results, and drop it.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, List

from .canon import canon, sha256_hex
from .types import JsonDeltaError


class UnknownIdentityError(JsonDeltaError, LookupError):
    """
    Raised when decode() is given an identity this scope never produced.

    This is an internal invariant violation, not a user-facing condition:
    every identity reaching decode() must come from encode() on the same
    ValueIdentity.
    """

    def __init__(self, identity: int, known: int):
        super().__init__(f"identity {identity} was never assigned in this scope")
        self.identity = identity
        self.known = known

    def __str__(self) -> str:
        return (
            f"UnknownIdentityError(identity={self.identity}, known={self.known}): "
            f"{self.args[0]}"
        )


class ValueIdentity:
    """Dense, first-seen-order identity table for JSON values."""

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._values: List[Any] = []

    def __len__(self) -> int:
        return len(self._values)

    def encode(self, value: Any) -> int:
        """Return the identity of value, assigning the next one if unseen."""
        digest = sha256_hex(canon(value))
        identity = self._ids.get(digest)
        if identity is None:
            identity = len(self._values)
            self._ids[digest] = identity
            self._values.append(value)
        return identity

    def encode_all(self, values: List[Any]) -> List[int]:
        return [self.encode(v) for v in values]

    def decode(self, identity: int) -> Any:
        """Recover a value for an identity (a copy of its first-seen form).

        Raises:
            UnknownIdentityError: If identity was not produced by encode().
        """
        if not 0 <= identity < len(self._values):
            raise UnknownIdentityError(identity, len(self._values))
        return copy.deepcopy(self._values[identity])
