"""
Version helpers for sequencer-types.

Resolution order:
    1) installed distribution metadata (`sequencer-types`)
    2) DEFAULT_VERSION (source checkout without an install)

This module has **no external dependencies** and is safe to import very early.
"""

from __future__ import annotations

from importlib import metadata
from typing import Optional

DEFAULT_VERSION = "0.1.0"
DIST_NAME = "sequencer-types"


def _dist_version() -> Optional[str]:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return None


def resolve_version() -> str:
    """Distribution metadata when installed, else DEFAULT_VERSION."""
    return _dist_version() or DEFAULT_VERSION


__version__ = resolve_version()
