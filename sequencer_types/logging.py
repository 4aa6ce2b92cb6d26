"""
sequencer_types.logging
-----------------------

Logging for the codec layer. Stdlib only.

The package logs under ``sequencer_types.*`` and only ever emits DEBUG
records (one per decoded top-level record, carrying ``record=<type>``).
Failures are raised as `SequencerTypesError`s, never logged in their place.

Applications that want to see those records attach a handler once:

    from sequencer_types import logging as slog

    slog.configure(json=True, level="DEBUG")
    Header.from_json(raw)
    # {"ts":"...","level":"DEBUG","logger":"sequencer_types.encoding.jsoncodec","msg":"decoded record","record":"Header"}
"""

from __future__ import annotations

import datetime as _dt
import io
import json
import logging
import sys
import traceback
from typing import Any, Dict, Optional, Union

ROOT_LOGGER = "sequencer_types"

TEXT_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"

# Attributes every LogRecord has; anything else came in through `extra=`.
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def _coerce(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return v.hex()
    if isinstance(v, (list, tuple)):
        return [_coerce(x) for x in v]
    if isinstance(v, dict):
        return {str(k): _coerce(x) for k, x in v.items()}
    return str(v)


class JSONFormatter(logging.Formatter):
    """One compact JSON object per line; `extra=` fields become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _dt.datetime.fromtimestamp(record.created, _dt.timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k not in _STANDARD_ATTRS and not k.startswith("_"):
                payload.setdefault(k, _coerce(v))
        if record.exc_info:
            payload["err"] = "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return json.dumps(payload, separators=(",", ":"), default=str)


def configure(
    *,
    json: bool = False,
    level: Union[str, int] = "INFO",
    stream: io.TextIOBase = sys.stderr,
) -> logging.Logger:
    """
    Replace the handlers of the package logger with one stream handler.

    ``json=True`` selects `JSONFormatter`; otherwise a plain
    ``ts | LEVEL | logger | message`` line. Unknown level names raise
    ValueError (as `logging.Logger.setLevel` does).
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter() if json else logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or ROOT_LOGGER)


__all__ = ["JSONFormatter", "ROOT_LOGGER", "configure", "get_logger"]
