"""
sequencer_types.utils
---------------------

Utility toolkit used across the package.

Submodules are exposed lazily so importing `sequencer_types.utils` is cheap:

    from sequencer_types import utils
    h = utils.hash.keccak256(b"hello")
    raw = utils.bytes.from_hex("0x0102")

- `bytes` : strict hex helpers, length guards, CRC-8
- `hash`  : Keccak-256

Names like `bytes` and `hash` shadow Python builtins if imported directly;
prefer module-qualified access.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any, Dict, Iterable, List

__all__: List[str] = ["bytes", "hash"]

_SUBMODS: Dict[str, str] = {
    "bytes": "sequencer_types.utils.bytes",
    "hash": "sequencer_types.utils.hash",
}

if TYPE_CHECKING:  # pragma: no cover - type-checking only
    from . import bytes as bytes  # type: ignore
    from . import hash as hash  # type: ignore


def __getattr__(name: str) -> Any:
    if name in _SUBMODS:
        mod = import_module(_SUBMODS[name])
        globals()[name] = mod
        return mod
    raise AttributeError(f"module 'sequencer_types.utils' has no attribute '{name}'")


def __dir__() -> Iterable[str]:  # pragma: no cover - sugar for REPLs
    return sorted(set(list(globals().keys()) + list(__all__)))
