from __future__ import annotations

"""
sequencer_types/types/u256.py
=============================

256-bit unsigned integer value type.

`U256` is an immutable `int` subclass constrained to [0, 2**256). Arithmetic
that must stay inside the domain (`+`, `-`) is checked and raises RangeError
instead of wrapping; any other int operation degrades to a plain `int`.

Text form (JSON):
  - encode: "0x" + lowercase hex with no leading zeros ("0x0" for zero)
  - decode: lowercase "0x" prefix required, at least one digit, hex digits
    only, no leading zeros, value < 2**256; violations raise FormatError

Byte forms:
  - from_bytes_be / from_bytes_le accept at most 32 bytes (implicitly
    zero-padded on the most-significant side)
  - to_bytes_be / to_bytes_le always produce exactly 32 bytes
"""

import re
from typing import Any

from sequencer_types.errors import FormatError, RangeError
from sequencer_types.utils.bytes import BytesLike, ensure_max_len

U256_BYTES = 32
U256_MAX = (1 << 256) - 1

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


class U256(int):
    __slots__ = ()

    def __new__(cls, value: int = 0) -> "U256":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"U256 expects int, got {type(value).__name__}")
        if value < 0 or value > U256_MAX:
            raise RangeError("integer out of range for U256", value=hex(value))
        return super().__new__(cls, value)

    # ---- construction helpers ----

    @classmethod
    def from_bytes_be(cls, data: BytesLike) -> "U256":
        return cls(int.from_bytes(ensure_max_len(data, U256_BYTES, name="U256 bytes"), "big"))

    @classmethod
    def from_bytes_le(cls, data: BytesLike) -> "U256":
        return cls(int.from_bytes(ensure_max_len(data, U256_BYTES, name="U256 bytes"), "little"))

    @classmethod
    def from_hex(cls, text: Any) -> "U256":
        """Parse the canonical ``0x`` text form."""
        if not isinstance(text, str):
            raise FormatError("U256 hex must be a string", got=type(text).__name__)
        if not text.startswith("0x"):
            raise FormatError("U256 hex is missing 0x prefix", value=text)
        digits = text[2:]
        if not _HEX_DIGITS.fullmatch(digits):
            raise FormatError("U256 hex contains no or invalid hex digits", value=text)
        if len(digits) > 1 and digits[0] == "0":
            raise FormatError("U256 hex has leading zero digits", value=text)
        if len(digits) > 2 * U256_BYTES:
            raise FormatError("U256 hex exceeds 256 bits", value=text)
        return cls(int(digits, 16))

    # ---- encoders ----

    def to_hex(self) -> str:
        return f"0x{int(self):x}"

    def to_bytes_be(self) -> bytes:
        return int(self).to_bytes(U256_BYTES, "big")

    def to_bytes_le(self) -> bytes:
        return int(self).to_bytes(U256_BYTES, "little")

    # ---- checked arithmetic ----

    def __add__(self, other: Any) -> "U256":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        total = int(self) + int(other)
        if total < 0 or total > U256_MAX:
            raise RangeError("U256 addition overflow", lhs=self.to_hex(), rhs=hex(other))
        return U256(total)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "U256":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        diff = int(self) - int(other)
        if diff < 0 or diff > U256_MAX:
            raise RangeError("U256 subtraction underflow", lhs=self.to_hex(), rhs=hex(other))
        return U256(diff)

    def __rsub__(self, other: Any) -> "U256":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return U256(other) - self

    # ---- presentation ----

    def __repr__(self) -> str:
        return f"U256({self.to_hex()})"

    __str__ = to_hex

    def __reduce__(self):
        return (U256, (int(self),))


__all__ = ["U256", "U256_BYTES", "U256_MAX"]
