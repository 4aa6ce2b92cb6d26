"""
sequencer-types package.

Canonical records exchanged with the sequencer (L1 anchor info, block header,
transaction envelope): strict JSON codec plus the Keccak-based commitment
scheme shared with the reference sequencer implementation.

Only re-exports the version here to keep import-time side effects near zero.
Record types live in `sequencer_types.types`, codecs in
`sequencer_types.encoding`.
"""

from __future__ import annotations

from .version import __version__


def get_version() -> str:
    """Return the semantic version string for this package."""
    return __version__


__all__ = ["__version__", "get_version"]
