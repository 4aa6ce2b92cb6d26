"""
sequencer_types.encoding.jsoncodec
==================================

Strict JSON boundary for the sequencer records.

Encoding
--------
``dumps(obj)`` produces compact JSON (no insignificant whitespace, ASCII only)
and keeps the key order of the mapping it is given. Records build their
mapping in the fixed wire order, so output is byte-stable.

Decoding
--------
``loads(text)`` parses and insists on a top-level object. Each record shape
is described by a JSON Schema (Draft 2020-12) validated with `jsonschema`:

- all required keys present
- JSON value kinds (u64 → integer in [0, 2**64), U256 → string, ...)
- with ``CodecConfig.reject_unknown_keys`` no extra keys either

Integers are strict: booleans and floats (``1.0`` included) never count as
integers. Value-level parsing (hex, tagged text) is done by the record types
and surfaced through `field_error`, so every failure reaches the caller as a
DecodeError carrying the JSON path of the offending value.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Union

from jsonschema import Draft202012Validator, validators

from sequencer_types.config import DEFAULT_CODEC_CONFIG, CodecConfig
from sequencer_types.errors import DecodeError, SequencerTypesError
from sequencer_types.logging import get_logger

log = get_logger(__name__)

U64_MAX = (1 << 64) - 1

# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

_U64 = {"type": "integer", "minimum": 0, "maximum": U64_MAX}
_BYTE = {"type": "integer", "minimum": 0, "maximum": 255}
_STR = {"type": "string"}

SCHEMAS: Dict[str, Dict[str, Any]] = {
    "L1BlockInfo": {
        "type": "object",
        "properties": {
            "number": _U64,
            "timestamp": _STR,
            "hash": _STR,
        },
        "required": ["number", "timestamp", "hash"],
    },
    "Header": {
        "type": "object",
        "properties": {
            "height": _U64,
            "timestamp": _U64,
            "l1_head": _U64,
            # nested record is validated by its own schema
            "l1_finalized": {"type": ["object", "null"]},
            "payload_commitment": _STR,
            "block_merkle_tree_root": _STR,
            "fee_merkle_tree_root": _STR,
        },
        "required": [
            "height",
            "timestamp",
            "l1_head",
            "payload_commitment",
            "block_merkle_tree_root",
            "fee_merkle_tree_root",
        ],
    },
    "Transaction": {
        "type": "object",
        "properties": {
            "vm": _U64,
            "payload": {"type": "array", "items": _BYTE},
        },
        "required": ["vm", "payload"],
    },
}


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


_StrictValidator = validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


@lru_cache(maxsize=None)
def _validator(record: str, reject_unknown: bool) -> Any:
    schema = dict(SCHEMAS[record])
    if reject_unknown:
        schema["additionalProperties"] = False
    _StrictValidator.check_schema(schema)
    return _StrictValidator(schema)


# ---------------------------------------------------------------------------
# Paths & errors
# ---------------------------------------------------------------------------

def join_path(base: str, key: Union[str, int]) -> str:
    """``$`` + ``height`` → ``$.height``; ``$.payload`` + 3 → ``$.payload[3]``."""
    if isinstance(key, int):
        return f"{base}[{key}]"
    return f"{base}.{key}"


def field_error(record: str, path: str, exc: SequencerTypesError) -> DecodeError:
    """Re-raise a value-level failure (format/range) as a DecodeError at ``path``."""
    err = DecodeError(
        f"{record}: invalid value at {path}: {exc.message}",
        record=record,
        path=path,
        reason=str(getattr(exc.code, "value", exc.code)),
    )
    return err.with_cause(exc)  # type: ignore[return-value]


def validate(
    record: str,
    obj: Any,
    *,
    config: Optional[CodecConfig] = None,
    path: str = "$",
) -> Mapping[str, Any]:
    """
    Check ``obj`` against the schema of ``record``; return it as a mapping.

    Raises DecodeError describing the first problem (ordered by JSON path),
    with every schema message listed in ``data["errors"]``.
    """
    cfg = config or DEFAULT_CODEC_CONFIG
    if not isinstance(obj, Mapping):
        raise DecodeError(
            f"{record}: expected a JSON object at {path}",
            record=record,
            path=path,
            got=type(obj).__name__,
        )
    # jsonschema only treats dicts as JSON objects
    instance = obj if isinstance(obj, dict) else dict(obj)
    errors = sorted(
        _validator(record, cfg.reject_unknown_keys).iter_errors(instance),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if errors:
        first = errors[0]
        where = path
        for p in first.absolute_path:
            where = join_path(where, p)
        msgs = []
        for e in errors:
            loc = path
            for p in e.absolute_path:
                loc = join_path(loc, p)
            msgs.append(f"{loc}: {e.message}")
        raise DecodeError(
            f"{record}: {first.message} (at {where})",
            record=record,
            path=where,
            errors=msgs,
        )
    return instance


# ---------------------------------------------------------------------------
# Text <-> objects
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> Any:
    raise DecodeError(f"invalid JSON constant {name}")


def dumps(obj: Mapping[str, Any]) -> str:
    """Compact, ASCII-only JSON preserving the mapping's key order."""
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=True, allow_nan=False)


def loads(text: Union[str, bytes, bytearray]) -> Dict[str, Any]:
    """Parse JSON text that must hold a single object."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("JSON text is not valid UTF-8").with_cause(e)  # type: ignore[misc]
    if not isinstance(text, str):
        raise DecodeError("JSON input must be str or bytes", got=type(text).__name__)
    try:
        obj = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise DecodeError(
            f"invalid JSON: {e.msg}", line=e.lineno, column=e.colno
        ).with_cause(e)  # type: ignore[misc]
    if not isinstance(obj, dict):
        raise DecodeError("expected a JSON object", got=type(obj).__name__)
    return obj


def log_decoded(record: str, path: str) -> None:
    if path == "$":
        log.debug("decoded record", extra={"record": record})


__all__ = [
    "SCHEMAS",
    "log_decoded",
    "dumps",
    "field_error",
    "join_path",
    "loads",
    "validate",
]
