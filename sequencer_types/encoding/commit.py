from __future__ import annotations

"""
Domain-separated commitment builder
===================================

Every record commitment is Keccak-256 over a byte stream assembled field by
field, in a hand-written, fixed order:

    constant_str(TAG) || <field>* ...

Primitives (all integers little-endian):

- constant_str(s)      utf8(s) || 0xC0 0x7F
- fixed_size_bytes(b)  b
- var_size_bytes(b)    u64(len(b)) || b
- u64(n)               8 bytes
- u256(n)              32 bytes

Named variants prefix ``constant_str(name)``:

- u64_field / u256_field / fixed_size_field / var_size_field
- field(name, c)            32-byte nested commitment
- optional_field(name, c)   u64(0) when absent, else u64(1) || c
- array_field(name, cs)     u64(len(cs)) || c_0 || c_1 ...

The terminator 0xC0 0x7F can never occur in valid UTF-8, so a constant string
cannot run into the bytes that follow it. The builder is single-use: once
finalized further writes raise.

    >>> b = CommitmentBuilder("L1BLOCK").u64_field("number", 123)
    >>> len(b.finalize().raw)
    32
"""

from typing import Iterable, Optional, Union

from sequencer_types.errors import InternalError, RangeError
from sequencer_types.types.commitment import Commitment
from sequencer_types.utils.bytes import BytesLike, b
from sequencer_types.utils.hash import Keccak256

# Appended after every constant string; invalid as UTF-8 in any position.
STR_TERMINATOR = b"\xc0\x7f"

U64_MAX = (1 << 64) - 1
U256_MAX = (1 << 256) - 1

CommitmentLike = Union[Commitment, BytesLike]


def _commitment_bytes(c: CommitmentLike) -> bytes:
    if isinstance(c, Commitment):
        return c.raw
    return Commitment.from_bytes(c).raw


def _check_uint(n: int, hi: int, kind: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{kind} expects int, got {type(n).__name__}")
    if n < 0 or n > hi:
        raise RangeError(f"integer out of range for {kind}", value=hex(n))
    return n


class CommitmentBuilder:
    __slots__ = ("_h", "_done")

    def __init__(self, tag: str) -> None:
        self._h = Keccak256()
        self._done = False
        self.constant_str(tag)

    def _write(self, data: bytes) -> "CommitmentBuilder":
        if self._done:
            raise InternalError("commitment builder already finalized")
        self._h.update(data)
        return self

    # ---- primitives ----

    def constant_str(self, s: str) -> "CommitmentBuilder":
        return self._write(s.encode("utf-8") + STR_TERMINATOR)

    def fixed_size_bytes(self, data: BytesLike) -> "CommitmentBuilder":
        return self._write(b(data))

    def var_size_bytes(self, data: BytesLike) -> "CommitmentBuilder":
        raw = b(data)
        self.u64(len(raw))
        return self._write(raw)

    def u64(self, n: int) -> "CommitmentBuilder":
        return self._write(_check_uint(n, U64_MAX, "u64").to_bytes(8, "little"))

    def u256(self, n: int) -> "CommitmentBuilder":
        return self._write(_check_uint(n, U256_MAX, "u256").to_bytes(32, "little"))

    # ---- named fields ----

    def u64_field(self, name: str, n: int) -> "CommitmentBuilder":
        return self.constant_str(name).u64(n)

    def u256_field(self, name: str, n: int) -> "CommitmentBuilder":
        return self.constant_str(name).u256(n)

    def fixed_size_field(self, name: str, data: BytesLike) -> "CommitmentBuilder":
        return self.constant_str(name).fixed_size_bytes(data)

    def var_size_field(self, name: str, data: BytesLike) -> "CommitmentBuilder":
        return self.constant_str(name).var_size_bytes(data)

    def field(self, name: str, c: CommitmentLike) -> "CommitmentBuilder":
        return self.constant_str(name).fixed_size_bytes(_commitment_bytes(c))

    def optional_field(self, name: str, c: Optional[CommitmentLike]) -> "CommitmentBuilder":
        self.constant_str(name)
        if c is None:
            return self.u64(0)
        return self.u64(1).fixed_size_bytes(_commitment_bytes(c))

    def array_field(self, name: str, cs: Iterable[CommitmentLike]) -> "CommitmentBuilder":
        items = [_commitment_bytes(c) for c in cs]
        self.constant_str(name).u64(len(items))
        for raw in items:
            self.fixed_size_bytes(raw)
        return self

    # ---- result ----

    def finalize(self) -> Commitment:
        """Digest the stream. The result is not reduced or range-checked."""
        if self._done:
            raise InternalError("commitment builder already finalized")
        self._done = True
        return Commitment(raw=self._h.digest())


__all__ = ["CommitmentBuilder", "STR_TERMINATOR"]
