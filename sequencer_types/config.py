"""
sequencer-types codec configuration.

Configuration is always explicit: decoders take an optional ``config=``
argument and fall back to `DEFAULT_CODEC_CONFIG`. Nothing is read from the
environment or from files.

    from sequencer_types.config import CodecConfig

    strict = CodecConfig(reject_unknown_keys=True)
    Header.from_json(raw, config=strict)
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigError


@dataclass(frozen=True)
class CodecConfig:
    # Decoding a record with keys outside its schema raises DecodeError when set.
    reject_unknown_keys: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.reject_unknown_keys, bool):
            raise ConfigError(
                "reject_unknown_keys must be a boolean",
                got=type(self.reject_unknown_keys).__name__,
            )


DEFAULT_CODEC_CONFIG = CodecConfig()


__all__ = ["CodecConfig", "DEFAULT_CODEC_CONFIG"]
