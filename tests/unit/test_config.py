from __future__ import annotations

import pytest

from sequencer_types.config import DEFAULT_CODEC_CONFIG, CodecConfig
from sequencer_types.errors import ConfigError, DecodeError
from sequencer_types.types import Transaction


def test_defaults_tolerate_unknown_keys():
    assert DEFAULT_CODEC_CONFIG == CodecConfig()
    assert DEFAULT_CODEC_CONFIG.reject_unknown_keys is False


@pytest.mark.parametrize("value", ["1", 1, 0, None, "true"])
def test_reject_unknown_keys_must_be_bool(value):
    with pytest.raises(ConfigError):
        CodecConfig(reject_unknown_keys=value)


def test_config_is_explicit_not_environmental(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SEQTYPES_REJECT_UNKNOWN_KEYS", "1")
    tx = Transaction.from_obj({"vm": 0, "payload": [], "extra": True})
    assert tx == Transaction(vm=0, payload=b"")
    assert CodecConfig().reject_unknown_keys is False


def test_strict_config_rejects_unknown_keys():
    with pytest.raises(DecodeError) as ei:
        Transaction.from_obj(
            {"vm": 0, "payload": [], "extra": True},
            config=CodecConfig(reject_unknown_keys=True),
        )
    assert ei.value.data["record"] == "Transaction"
