from __future__ import annotations

import json

import pytest

from sequencer_types.errors import (
    ConfigError,
    DecodeError,
    ErrorCode,
    FormatError,
    RangeError,
    SequencerTypesError,
)


@pytest.mark.parametrize(
    "cls,code",
    [
        (FormatError, ErrorCode.FORMAT),
        (RangeError, ErrorCode.RANGE),
        (DecodeError, ErrorCode.DECODE),
        (ConfigError, ErrorCode.CONFIG),
    ],
)
def test_kinds_are_value_errors(cls, code):
    err = cls("boom", field="x")
    assert isinstance(err, SequencerTypesError)
    assert isinstance(err, ValueError)
    assert err.code == code
    assert err.retryable is False
    assert err.data == {"field": "x"}


def test_to_dict_is_json_safe():
    err = FormatError("bad bytes", raw=b"\x01\x02", items=(1, 2))
    d = err.to_dict()
    assert d == {
        "code": "TYPES/FORMAT",
        "message": "bad bytes",
        "data": {"raw": "0102", "items": [1, 2]},
        "retryable": False,
    }
    json.dumps(d)


def test_str_includes_code_and_data():
    s = str(RangeError("too big", value="0x1"))
    assert s.startswith("TYPES/RANGE: too big")
    assert "value=0x1" in s


def test_with_context_does_not_mutate():
    base = DecodeError("nope", path="$")
    richer = base.with_context(record="Header")
    assert base.data == {"path": "$"}
    assert richer.data == {"path": "$", "record": "Header"}
    assert type(richer) is DecodeError


def test_with_cause_links_exception():
    inner = ValueError("inner")
    err = FormatError("outer").with_cause(inner)
    assert err.cause is inner
    assert err.__cause__ is inner
    assert err.to_dict(include_cause=True)["cause"] == {"type": "ValueError", "message": "inner"}


def test_errors_raise_and_catch():
    with pytest.raises(ValueError):
        raise DecodeError("missing key")
