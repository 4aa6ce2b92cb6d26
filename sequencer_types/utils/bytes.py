"""
sequencer_types.utils.bytes
===========================

Lightweight, dependency-free helpers around byte handling:

- Hex helpers: to_hex / from_hex (strict, 0x-prefixed)
- Length guards: expect_len / ensure_max_len
- Bytes-like normalization: b()
- CRC-8 (poly 0x07, init 0x00, no reflection, no xor-out) used by the
  tagged-value checksum

Examples
--------
>>> to_hex(b"\\x01\\x23")
'0x0123'
>>> from_hex('0xdeadbeef')
b'\\xde\\xad\\xbe\\xef'
>>> crc8(b"123456789")
244
"""

from __future__ import annotations

import re
from typing import Union

from ..errors import FormatError

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_BODY = re.compile(r"[0-9a-fA-F]*")


# -----------------------
# Basic bytes/hex helpers
# -----------------------

def b(x: BytesLike) -> bytes:
    """Normalize a bytes-like value to immutable bytes."""
    if isinstance(x, bytes):
        return x
    if isinstance(x, (bytearray, memoryview)):
        return bytes(x)
    raise TypeError(f"expected bytes-like, got {type(x).__name__}")


def to_hex(data: BytesLike, *, prefix: bool = True) -> str:
    """Return lowercase hex string of data."""
    h = b(data).hex()
    return f"0x{h}" if prefix else h


def from_hex(h: str, *, length: int | None = None, name: str = "hex") -> bytes:
    """
    Parse a ``0x``-prefixed hex string into bytes.

    Unlike a forgiving tooling parser this is wire-strict: the lowercase
    ``0x`` prefix is required, whitespace is not stripped, and the digit count
    must be even. When ``length`` is given the decoded size must match exactly.
    """
    if not isinstance(h, str):
        raise FormatError(f"{name} must be a string", got=type(h).__name__)
    if not h.startswith("0x"):
        raise FormatError(f"{name} is missing 0x prefix", value=h)
    body = h[2:]
    if not _HEX_BODY.fullmatch(body):
        raise FormatError(f"{name} contains non-hex characters", value=h)
    if len(body) % 2:
        raise FormatError(f"{name} has an odd number of hex digits", value=h)
    out = bytes.fromhex(body)
    if length is not None and len(out) != length:
        raise FormatError(f"{name} must be {length} bytes, got {len(out)}", value=h)
    return out


# ---------------------
# Length/shape guarding
# ---------------------

def expect_len(data: BytesLike, n: int, *, name: str = "bytes") -> bytes:
    """Return ``data`` as immutable bytes after validating exact length ``n``."""
    data_b = b(data)
    if len(data_b) != n:
        raise FormatError(f"{name} must be length {n}, got {len(data_b)}")
    return data_b


def ensure_max_len(data: BytesLike, n: int, *, name: str = "bytes") -> bytes:
    data_b = b(data)
    if len(data_b) > n:
        raise FormatError(f"{name} must be at most {n} bytes, got {len(data_b)}")
    return data_b


# ---------------
# CRC-8
# ---------------

_CRC8_POLY = 0x07


def _crc8_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = ((crc << 1) ^ _CRC8_POLY) & 0xFF if crc & 0x80 else (crc << 1) & 0xFF
        table.append(crc)
    return tuple(table)


_CRC8_TABLE = _crc8_table()


def crc8(*chunks: BytesLike, init: int = 0x00) -> int:
    """CRC-8/SMBUS over the concatenation of ``chunks``."""
    crc = init
    for chunk in chunks:
        for x in b(chunk):
            crc = _CRC8_TABLE[crc ^ x]
    return crc


__all__ = [
    "BytesLike",
    "b",
    "to_hex",
    "from_hex",
    "expect_len",
    "ensure_max_len",
    "crc8",
]
