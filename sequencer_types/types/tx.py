from __future__ import annotations

"""
sequencer_types/types/tx.py
===========================

Transaction envelope: an opaque payload addressed to a VM id.

JSON: ``{"vm": <u64>, "payload": [<byte>, ...]}``. The payload travels as an
array of small integers (one per byte), never as hex or base64.

Commitment (tag "TRANSACTION"):
    u64_field("vm") · var_size_field("payload")
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from sequencer_types.config import CodecConfig
from sequencer_types.encoding import jsoncodec
from sequencer_types.encoding.commit import CommitmentBuilder
from sequencer_types.types.commitment import Commitment
from sequencer_types.types.l1 import check_u64
from sequencer_types.utils.bytes import b

COMMIT_TAG = "TRANSACTION"


@dataclass(frozen=True)
class Transaction:
    vm: int
    payload: bytes

    def __post_init__(self) -> None:
        check_u64("vm", self.vm)
        object.__setattr__(self, "payload", b(self.payload))

    def to_obj(self) -> Mapping[str, Any]:
        return {"vm": int(self.vm), "payload": list(self.payload)}

    def to_json(self) -> str:
        return jsoncodec.dumps(self.to_obj())

    @staticmethod
    def from_obj(
        o: Any, *, config: Optional[CodecConfig] = None, path: str = "$"
    ) -> "Transaction":
        # schema bounds every payload item to [0, 255]
        o = jsoncodec.validate("Transaction", o, config=config, path=path)
        out = Transaction(vm=o["vm"], payload=bytes(o["payload"]))
        jsoncodec.log_decoded("Transaction", path)
        return out

    @staticmethod
    def from_json(
        text: Union[str, bytes, bytearray], *, config: Optional[CodecConfig] = None
    ) -> "Transaction":
        return Transaction.from_obj(jsoncodec.loads(text), config=config)

    def commit(self) -> Commitment:
        return (
            CommitmentBuilder(COMMIT_TAG)
            .u64_field("vm", self.vm)
            .var_size_field("payload", self.payload)
            .finalize()
        )

    def __len__(self) -> int:
        return len(self.payload)


__all__ = ["Transaction", "COMMIT_TAG"]
