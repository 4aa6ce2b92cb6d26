from __future__ import annotations

"""
sequencer_types/types/header.py
===============================

Sequencer block header.

Fields (wire order):
  - height:                  u64 block height
  - timestamp:               u64 seconds
  - l1_head:                 u64 latest L1 block number seen
  - l1_finalized:            optional L1BlockInfo (omitted from JSON when absent;
                             JSON null is read as absent)
  - payload_commitment:      tagged 32-byte digest, tag "HASH"
  - block_merkle_tree_root:  tagged value, tag "MERKLE_COMM"
  - fee_merkle_tree_root:    tagged value, tag "MERKLE_COMM"

The Merkle roots carry more than a bare digest (root, tree height, leaf
count: 48 bytes on the wire), so the three commitment-valued fields hold the
full `TaggedBase64` rather than a 32-byte `Commitment`.

Commitment (tag "HEADER"):
    u64_field("height") · u64_field("timestamp") · u64_field("l1_head")
    · optional_field("l1_finalized", L1BlockInfo.commit())
    · fixed_size_field(<name>, <tagged value bytes>) for the three roots
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

from sequencer_types.config import CodecConfig
from sequencer_types.encoding import jsoncodec
from sequencer_types.encoding.commit import CommitmentBuilder
from sequencer_types.encoding.tagged import TAG_HASH, TAG_MERKLE_COMM, TaggedBase64
from sequencer_types.errors import FormatError
from sequencer_types.types.commitment import COMMITMENT_SIZE, Commitment
from sequencer_types.types.l1 import L1BlockInfo, check_u64

COMMIT_TAG = "HEADER"

# field name -> (required tag, exact value size or None), in wire order
TAGGED_FIELDS = (
    ("payload_commitment", TAG_HASH, COMMITMENT_SIZE),
    ("block_merkle_tree_root", TAG_MERKLE_COMM, None),
    ("fee_merkle_tree_root", TAG_MERKLE_COMM, None),
)

TaggedLike = Union[TaggedBase64, str]


@dataclass(frozen=True)
class Header:
    height: int
    timestamp: int
    l1_head: int
    l1_finalized: Optional[L1BlockInfo]
    payload_commitment: TaggedBase64
    block_merkle_tree_root: TaggedBase64
    fee_merkle_tree_root: TaggedBase64

    def __post_init__(self) -> None:
        for name in ("height", "timestamp", "l1_head"):
            check_u64(name, getattr(self, name))
        if self.l1_finalized is not None and not isinstance(self.l1_finalized, L1BlockInfo):
            raise TypeError("l1_finalized must be L1BlockInfo or None")
        for name, tag, size in TAGGED_FIELDS:
            object.__setattr__(self, name, _tagged(name, getattr(self, name), tag, size))

    # ---- JSON ----

    def to_obj(self) -> Mapping[str, Any]:
        """Wire mapping; key order is part of the format."""
        o: dict = {
            "height": int(self.height),
            "timestamp": int(self.timestamp),
            "l1_head": int(self.l1_head),
        }
        if self.l1_finalized is not None:
            o["l1_finalized"] = self.l1_finalized.to_obj()
        for name, _, _ in TAGGED_FIELDS:
            o[name] = getattr(self, name).encode()
        return o

    def to_json(self) -> str:
        return jsoncodec.dumps(self.to_obj())

    @staticmethod
    def from_obj(o: Any, *, config: Optional[CodecConfig] = None, path: str = "$") -> "Header":
        o = jsoncodec.validate("Header", o, config=config, path=path)

        l1 = None
        if o.get("l1_finalized") is not None:
            l1 = L1BlockInfo.from_obj(
                o["l1_finalized"], config=config, path=jsoncodec.join_path(path, "l1_finalized")
            )

        tagged = {}
        for name, tag, size in TAGGED_FIELDS:
            try:
                tagged[name] = _tagged(name, o[name], tag, size)
            except FormatError as e:
                raise jsoncodec.field_error("Header", jsoncodec.join_path(path, name), e)

        out = Header(
            height=o["height"],
            timestamp=o["timestamp"],
            l1_head=o["l1_head"],
            l1_finalized=l1,
            **tagged,
        )
        jsoncodec.log_decoded("Header", path)
        return out

    @staticmethod
    def from_json(
        text: Union[str, bytes, bytearray], *, config: Optional[CodecConfig] = None
    ) -> "Header":
        return Header.from_obj(jsoncodec.loads(text), config=config)

    # ---- commitment ----

    def commit(self) -> Commitment:
        b = (
            CommitmentBuilder(COMMIT_TAG)
            .u64_field("height", self.height)
            .u64_field("timestamp", self.timestamp)
            .u64_field("l1_head", self.l1_head)
            .optional_field(
                "l1_finalized",
                self.l1_finalized.commit() if self.l1_finalized is not None else None,
            )
        )
        for name, _, _ in TAGGED_FIELDS:
            b.fixed_size_field(name, getattr(self, name).value)
        return b.finalize()

    # ---- helpers ----

    def with_l1_finalized(self, info: Optional[L1BlockInfo]) -> "Header":
        return replace(self, l1_finalized=info)


def _tagged(name: str, v: TaggedLike, tag: str, size: Optional[int]) -> TaggedBase64:
    if isinstance(v, str):
        v = TaggedBase64.parse(v, expected_tag=tag)
    elif not isinstance(v, TaggedBase64):
        raise TypeError(f"{name} must be TaggedBase64 or str, got {type(v).__name__}")
    if v.tag != tag:
        raise FormatError("unexpected tag", field=name, expected=tag, got=v.tag)
    if size is not None and len(v.value) != size:
        raise FormatError(f"{name} must carry {size} bytes, got {len(v.value)}", field=name)
    return v


__all__ = ["Header", "COMMIT_TAG", "TAGGED_FIELDS"]
