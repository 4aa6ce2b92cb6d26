from __future__ import annotations

"""
sequencer_types/types/l1.py
===========================

L1BlockInfo: the sequencer's view of an L1 (settlement layer) block.

Fields (wire order):
  - number:     u64 L1 block number
  - timestamp:  U256 L1 block timestamp, JSON "0x…" minimal hex
  - hash:       32 bytes, JSON "0x…" with exactly 64 hex digits

Commitment (tag "L1BLOCK"):
    u64_field("number") · u256_field("timestamp") · fixed_size_field("hash")
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from sequencer_types.config import CodecConfig
from sequencer_types.encoding import jsoncodec
from sequencer_types.encoding.commit import CommitmentBuilder
from sequencer_types.errors import FormatError, RangeError
from sequencer_types.types.commitment import Commitment
from sequencer_types.types.u256 import U256
from sequencer_types.utils.bytes import expect_len, from_hex, to_hex

L1_HASH_LEN = 32
COMMIT_TAG = "L1BLOCK"

U64_MAX = (1 << 64) - 1


def check_u64(name: str, v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{name} must be int, got {type(v).__name__}")
    if v < 0 or v > U64_MAX:
        raise RangeError(f"{name} out of range for u64", value=v)
    return int(v)


@dataclass(frozen=True)
class L1BlockInfo:
    number: int
    timestamp: U256
    hash: bytes

    def __post_init__(self) -> None:
        check_u64("number", self.number)
        if not isinstance(self.timestamp, U256):
            object.__setattr__(self, "timestamp", U256(self.timestamp))
        object.__setattr__(self, "hash", expect_len(self.hash, L1_HASH_LEN, name="L1 block hash"))

    # ---- JSON ----

    def to_obj(self) -> Mapping[str, Any]:
        """Wire mapping; key order is part of the format."""
        return {
            "number": int(self.number),
            "timestamp": self.timestamp.to_hex(),
            "hash": to_hex(self.hash),
        }

    def to_json(self) -> str:
        return jsoncodec.dumps(self.to_obj())

    @staticmethod
    def from_obj(
        o: Any, *, config: Optional[CodecConfig] = None, path: str = "$"
    ) -> "L1BlockInfo":
        o = jsoncodec.validate("L1BlockInfo", o, config=config, path=path)
        try:
            ts = U256.from_hex(o["timestamp"])
        except (FormatError, RangeError) as e:
            raise jsoncodec.field_error("L1BlockInfo", jsoncodec.join_path(path, "timestamp"), e)
        try:
            h = from_hex(o["hash"], length=L1_HASH_LEN, name="hash")
        except FormatError as e:
            raise jsoncodec.field_error("L1BlockInfo", jsoncodec.join_path(path, "hash"), e)
        out = L1BlockInfo(number=o["number"], timestamp=ts, hash=h)
        jsoncodec.log_decoded("L1BlockInfo", path)
        return out

    @staticmethod
    def from_json(
        text: Union[str, bytes, bytearray], *, config: Optional[CodecConfig] = None
    ) -> "L1BlockInfo":
        return L1BlockInfo.from_obj(jsoncodec.loads(text), config=config)

    # ---- commitment ----

    def commit(self) -> Commitment:
        return (
            CommitmentBuilder(COMMIT_TAG)
            .u64_field("number", self.number)
            .u256_field("timestamp", self.timestamp)
            .fixed_size_field("hash", self.hash)
            .finalize()
        )


__all__ = ["L1BlockInfo", "L1_HASH_LEN", "COMMIT_TAG", "check_u64"]
