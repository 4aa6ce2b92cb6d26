"""
sequencer_types.encoding
========================

Public encoding surface:

- tagged.py:     TaggedBase64, the ``TAG~base64url`` text form of digests
- commit.py:     CommitmentBuilder, domain-separated Keccak-256 commitments
- jsoncodec.py:  strict JSON boundary (schemas, ordered compact dumps/loads)

Names resolve lazily: the record types import these modules while the
value types are still initialising, so nothing is imported eagerly here.

>>> from sequencer_types.encoding import dumps, loads, CommitmentBuilder
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

__all__ = [
    "tagged",
    "commit",
    "jsoncodec",
    "TaggedBase64",
    "CommitmentBuilder",
    "dumps",
    "loads",
]

_SUBMODULES = {
    "tagged": "sequencer_types.encoding.tagged",
    "commit": "sequencer_types.encoding.commit",
    "jsoncodec": "sequencer_types.encoding.jsoncodec",
}

_SYMBOLS = {
    "TaggedBase64": ("sequencer_types.encoding.tagged", "TaggedBase64"),
    "CommitmentBuilder": ("sequencer_types.encoding.commit", "CommitmentBuilder"),
    "dumps": ("sequencer_types.encoding.jsoncodec", "dumps"),
    "loads": ("sequencer_types.encoding.jsoncodec", "loads"),
}


def __getattr__(name: str):
    if name in _SUBMODULES:
        return importlib.import_module(_SUBMODULES[name])
    target = _SYMBOLS.get(name)
    if target:
        return getattr(importlib.import_module(target[0]), target[1])
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(set(globals().keys()) | set(_SUBMODULES.keys()) | set(_SYMBOLS.keys()))


if TYPE_CHECKING:
    from .commit import CommitmentBuilder  # noqa: F401
    from .jsoncodec import dumps, loads  # noqa: F401
    from .tagged import TaggedBase64  # noqa: F401
