from __future__ import annotations

from collections import OrderedDict

import pytest

from sequencer_types.encoding import dumps, jsoncodec, loads
from sequencer_types.errors import DecodeError


def test_dumps_is_compact_ordered_ascii():
    obj = OrderedDict([("b", 1), ("a", [1, 2]), ("s", "é")])
    assert dumps(obj) == '{"b":1,"a":[1,2],"s":"\\u00e9"}'


def test_dumps_rejects_nan():
    with pytest.raises(ValueError):
        dumps({"x": float("nan")})


def test_loads_object_only():
    assert loads('{"a":1}') == {"a": 1}
    assert loads(b'{"a":1}') == {"a": 1}
    for text in ("[1]", '"s"', "null", "1"):
        with pytest.raises(DecodeError):
            loads(text)


def test_loads_reports_position():
    with pytest.raises(DecodeError) as ei:
        loads('{"a":\n}')
    assert ei.value.data["line"] == 2


def test_loads_rejects_bad_utf8_and_constants():
    with pytest.raises(DecodeError):
        loads(b"\xff\xfe")
    with pytest.raises(DecodeError):
        loads('{"a":Infinity}')
    with pytest.raises(DecodeError):
        loads(None)  # type: ignore[arg-type]


def test_join_path():
    assert jsoncodec.join_path("$", "a") == "$.a"
    assert jsoncodec.join_path("$.a", 0) == "$.a[0]"


def test_validate_lists_every_problem():
    with pytest.raises(DecodeError) as ei:
        jsoncodec.validate("Transaction", {"vm": -1, "payload": [300, "x"]})
    err = ei.value
    assert err.data["record"] == "Transaction"
    assert len(err.data["errors"]) == 3
    # first problem by path
    assert err.data["path"] == "$.payload[0]"


def test_validate_non_mapping():
    with pytest.raises(DecodeError) as ei:
        jsoncodec.validate("Header", ["height"], path="$.x")
    assert ei.value.data["path"] == "$.x"


def test_validate_accepts_any_mapping():
    src = OrderedDict([("vm", 1), ("payload", [])])
    assert jsoncodec.validate("Transaction", src) == {"vm": 1, "payload": []}


def test_schemas_declare_required_keys():
    assert jsoncodec.SCHEMAS["L1BlockInfo"]["required"] == ["number", "timestamp", "hash"]
    assert "l1_finalized" not in jsoncodec.SCHEMAS["Header"]["required"]
    assert jsoncodec.SCHEMAS["Transaction"]["required"] == ["vm", "payload"]
