from __future__ import annotations

"""
Commitment
==========

A 32-byte binding digest produced by finalizing a CommitmentBuilder
(Keccak-256 over a deterministic byte stream).

Integer view
------------
The digest may be viewed as an unsigned 256-bit integer read *little-endian*
(byte 0 is least significant). Going the other way, `from_uint256` accepts
only values strictly below the scalar field order `FIELD_MODULUS`; anything
else raises RangeError. `finalize()` itself never range-checks, so a digest
is *not* guaranteed to be below the modulus.

Text view
---------
Across JSON a commitment travels as a tagged value (see
sequencer_types.encoding.tagged), by default under the "HASH" tag.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from sequencer_types.encoding.tagged import TAG_HASH, TaggedBase64
from sequencer_types.errors import FormatError, RangeError
from sequencer_types.types.u256 import U256
from sequencer_types.utils.bytes import BytesLike, expect_len, to_hex

COMMITMENT_SIZE = 32

# Scalar field order r of BLS12-381.
FIELD_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001


@dataclass(frozen=True)
class Commitment:
    raw: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", expect_len(self.raw, COMMITMENT_SIZE, name="commitment"))

    # ---- constructors ----

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "Commitment":
        return cls(raw=data)

    @classmethod
    def from_uint256(cls, value: int) -> "Commitment":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"from_uint256 expects int, got {type(value).__name__}")
        if value < 0 or value >= FIELD_MODULUS:
            raise RangeError("integer is not a valid commitment field element", value=hex(value))
        return cls(raw=U256(value).to_bytes_le())

    @classmethod
    def parse_tagged(cls, text: Any) -> Tuple[str, "Commitment"]:
        """Decode tagged text into ``(tag, commitment)``; the value must be 32 bytes."""
        tb = TaggedBase64.parse(text)
        if len(tb.value) != COMMITMENT_SIZE:
            raise FormatError(
                f"tagged commitment must carry {COMMITMENT_SIZE} bytes, got {len(tb.value)}",
                tag=tb.tag,
            )
        return tb.tag, cls(raw=tb.value)

    @classmethod
    def from_tagged(cls, text: Any, expected_tag: Optional[str] = None) -> "Commitment":
        tag, c = cls.parse_tagged(text)
        if expected_tag is not None and tag != expected_tag:
            raise FormatError("unexpected tag", expected=expected_tag, got=tag)
        return c

    # ---- views ----

    def uint256(self) -> U256:
        return U256.from_bytes_le(self.raw)

    def to_tagged(self, tag: str = TAG_HASH) -> str:
        return TaggedBase64(tag=tag, value=self.raw).encode()

    def hex(self) -> str:
        return to_hex(self.raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return COMMITMENT_SIZE

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"Commitment({self.hex()})"


__all__ = ["Commitment", "COMMITMENT_SIZE", "FIELD_MODULUS"]
