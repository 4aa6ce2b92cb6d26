"""
sequencer_types.types
=====================

Value and record types:

- u256:        U256 (checked 256-bit unsigned integer, "0x…" text form)
- commitment:  Commitment (32-byte digest, integer and tagged views)
- l1:          L1BlockInfo
- header:      Header
- tx:          Transaction

Attributes resolve lazily on first access, so importing this package does
not pull in the codec or hashing stack.

Example
-------
>>> from sequencer_types.types import Header, L1BlockInfo, U256
>>> from sequencer_types.types import header, tx  # submodules too
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

__all__ = [
    # submodules
    "u256",
    "commitment",
    "l1",
    "header",
    "tx",
    # re-exported symbols
    "U256",
    "Commitment",
    "FIELD_MODULUS",
    "L1BlockInfo",
    "Header",
    "Transaction",
]

_SUBMODULES = {
    "u256": "sequencer_types.types.u256",
    "commitment": "sequencer_types.types.commitment",
    "l1": "sequencer_types.types.l1",
    "header": "sequencer_types.types.header",
    "tx": "sequencer_types.types.tx",
}

_SYMBOLS = {
    "U256": ("sequencer_types.types.u256", "U256"),
    "Commitment": ("sequencer_types.types.commitment", "Commitment"),
    "FIELD_MODULUS": ("sequencer_types.types.commitment", "FIELD_MODULUS"),
    "L1BlockInfo": ("sequencer_types.types.l1", "L1BlockInfo"),
    "Header": ("sequencer_types.types.header", "Header"),
    "Transaction": ("sequencer_types.types.tx", "Transaction"),
}


def __getattr__(name: str):
    if name in _SUBMODULES:
        return importlib.import_module(_SUBMODULES[name])
    target = _SYMBOLS.get(name)
    if target:
        mod = importlib.import_module(target[0])
        return getattr(mod, target[1])
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    base = set(globals().keys())
    return sorted(base | set(_SUBMODULES.keys()) | set(_SYMBOLS.keys()))


if TYPE_CHECKING:
    from .commitment import FIELD_MODULUS, Commitment  # noqa: F401
    from .header import Header  # noqa: F401
    from .l1 import L1BlockInfo  # noqa: F401
    from .tx import Transaction  # noqa: F401
    from .u256 import U256  # noqa: F401
