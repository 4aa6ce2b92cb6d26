"""
sequencer_types.utils.hash
==========================

Keccak-256 (the pre-standard SHA-3 padding, as used by Ethereum and by the
reference sequencer's commitment scheme).

Provided APIs
-------------
- keccak256(data) -> bytes              one-shot digest
- Keccak256()                           streaming hasher (update/digest)

Note that `hashlib.sha3_256` is *not* interchangeable: it uses the FIPS-202
padding byte and yields different digests.
"""

from __future__ import annotations

from Crypto.Hash import keccak as _keccak

from .bytes import BytesLike
from .bytes import b as _b

DIGEST_SIZE = 32


class Keccak256:
    """Streaming Keccak-256 with a hashlib-like surface."""

    __slots__ = ("_h",)

    digest_size = DIGEST_SIZE

    def __init__(self, data: BytesLike = b"") -> None:
        self._h = _keccak.new(digest_bits=256)
        if data:
            self.update(data)

    def update(self, data: BytesLike) -> "Keccak256":
        self._h.update(_b(data))
        return self

    def digest(self) -> bytes:
        return self._h.digest()

    def hexdigest(self) -> str:
        return self._h.hexdigest()


def keccak256(data: BytesLike) -> bytes:
    """Keccak-256 digest of `data`."""
    return Keccak256(data).digest()


__all__ = ["DIGEST_SIZE", "Keccak256", "keccak256"]
