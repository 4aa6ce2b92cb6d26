"""
sequencer_types.errors
----------------------

A small, consistent error system for the codec and commitment layer.

Design goals
------------
- One root `SequencerTypesError` with machine-friendly `code` and optional `data`.
- Concrete subclasses for the three data-correctness kinds (format, range,
  decode) plus configuration.
- Non-invasive helpers to enrich errors with contextual fields.
- Safe JSON representation (`to_dict`) suitable for logs and RPC bridges.

Nothing raised here is retryable: every failure is a property of the input
value, never of the environment.

This module uses only stdlib to avoid import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# ---------------------------------------------------------------------------
# Error codes & classes
# ---------------------------------------------------------------------------


class ErrorCode(str, Enum):
    INTERNAL = "TYPES/INTERNAL"
    # Malformed text: hex, base64, tagged values, wrong lengths
    FORMAT = "TYPES/FORMAT"
    # Integer outside U256 or the commitment field
    RANGE = "TYPES/RANGE"
    # JSON record decoding (missing keys, wrong value types)
    DECODE = "TYPES/DECODE"
    CONFIG = "TYPES/CONFIG"


@dataclass(eq=False)
class SequencerTypesError(Exception):
    """
    Root error for sequencer-types.

    Attributes
    ----------
    code: str
        Machine-stable error code (see ErrorCode).
    message: str
        Human hint suitable for logs.
    data: dict
        Optional machine data (field names, lengths, paths). JSON-serializable.
    retryable: bool
        Always False for this package; kept for interop with callers that
        route on it.
    cause: Optional[BaseException]
        Wrapped original exception; not included in equality comparison.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    retryable: bool = False
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Make Exception(args) meaningful for interop
        super().__init__(f"{getattr(self.code, 'value', self.code)}: {self.message}")

    # ---------------- Public API ----------------

    def with_context(self, **ctx: Any) -> "SequencerTypesError":
        """Return a *new* error with extra context merged (does not mutate)."""
        return self._clone(data={**self.data, **_jsonmap(ctx)})

    def with_cause(self, exc: BaseException) -> "SequencerTypesError":
        """Attach/replace the causal exception (returns a new instance)."""
        err = self._clone(data=dict(self.data), cause=exc)
        err.__cause__ = exc
        return err

    def _clone(self, **changes: Any) -> "SequencerTypesError":
        err = type(self).__new__(type(self))
        err.__dict__.update(self.__dict__)
        err.__dict__.update(changes)
        err.args = self.args
        return err

    def to_dict(self, include_cause: bool = False) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs/RPC bridges."""
        out = {
            "code": str(getattr(self.code, "value", self.code)),
            "message": self.message,
            "data": _coerce_json(self.data),
            "retryable": self.retryable,
        }
        if include_cause and self.cause is not None:
            out["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }
        return out

    def __str__(self) -> str:  # pragma: no cover - human formatting
        code = getattr(self.code, "value", self.code)
        parts = [f"{code}: {self.message}"]
        if self.data:
            preview = ", ".join(f"{k}={_preview(v)}" for k, v in self.data.items())
            parts.append(f"[{preview}]")
        return " ".join(parts)


class InternalError(SequencerTypesError):
    def __init__(self, message="internal error", **data: Any) -> None:
        super().__init__(code=ErrorCode.INTERNAL, message=message, data=_jsonmap(data))


class FormatError(SequencerTypesError, ValueError):
    """Malformed hex/base64/tagged text, wrong length, non-ASCII tag."""

    def __init__(self, message="malformed value", **data: Any) -> None:
        super().__init__(code=ErrorCode.FORMAT, message=message, data=_jsonmap(data))


class RangeError(SequencerTypesError, ValueError):
    """Integer does not fit U256 or the commitment field."""

    def __init__(self, message="value out of range", **data: Any) -> None:
        super().__init__(code=ErrorCode.RANGE, message=message, data=_jsonmap(data))


class DecodeError(SequencerTypesError, ValueError):
    """A JSON record could not be decoded; no partial record is ever returned."""

    def __init__(self, message="decode failed", **data: Any) -> None:
        super().__init__(code=ErrorCode.DECODE, message=message, data=_jsonmap(data))


class ConfigError(SequencerTypesError, ValueError):
    def __init__(self, message="invalid configuration", **data: Any) -> None:
        super().__init__(code=ErrorCode.CONFIG, message=message, data=_jsonmap(data))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    # Keep JSON primitives; stringify the rest; hex-encode bytes.
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    if isinstance(v, (list, tuple)):
        return [_coerce_json(x) for x in v]
    if isinstance(v, dict):
        return {str(k): _coerce_json(x) for k, x in v.items()}
    if isinstance(v, (bytes, bytearray)):
        return v.hex()
    return str(v)


def _preview(v: Any, limit: int = 96) -> str:
    s = str(_coerce_json(v))
    return s if len(s) <= limit else s[:limit] + "…"


__all__ = [
    "ErrorCode",
    "SequencerTypesError",
    "InternalError",
    "FormatError",
    "RangeError",
    "DecodeError",
    "ConfigError",
]
