"""
TaggedBase64 text form: ``TAG~base64url(value || checksum)``.

Checks the reference values used by the header, padding tolerance, alphabet
strictness and that the checksum binds the tag to the payload.
"""

from __future__ import annotations

import pytest

from sequencer_types.encoding.tagged import TaggedBase64, checksum, encode, parse
from sequencer_types.errors import FormatError
from sequencer_types.utils.bytes import crc8

from tests.vectors import (
    BLOCK_MERKLE_ROOT,
    BLOCK_MERKLE_ROOT_VALUE_HEX,
    FEE_MERKLE_ROOT,
    FEE_MERKLE_ROOT_VALUE_HEX,
    PAYLOAD_COMMITMENT,
)


def test_crc8_check_value():
    # CRC-8/SMBUS catalogue check value
    assert crc8(b"123456789") == 0xF4
    assert crc8(b"1234", b"56789") == 0xF4


@pytest.mark.parametrize(
    "text,tag,value_hex,cs",
    [
        (BLOCK_MERKLE_ROOT, "MERKLE_COMM", BLOCK_MERKLE_ROOT_VALUE_HEX, 38),
        (FEE_MERKLE_ROOT, "MERKLE_COMM", FEE_MERKLE_ROOT_VALUE_HEX, 116),
    ],
)
def test_reference_merkle_roots(text, tag, value_hex, cs):
    tb = TaggedBase64.parse(text)
    assert tb.tag == tag
    assert tb.value.hex() == value_hex
    assert len(tb) == 48
    assert tb.checksum == cs
    assert str(tb) == text


def test_reference_payload_commitment():
    tb = parse(PAYLOAD_COMMITMENT, expected_tag="HASH")
    assert len(tb.value) == 32
    assert tb.checksum == 238
    assert tb.encode() == PAYLOAD_COMMITMENT


def test_padding_is_optional_on_decode():
    # 49 raw bytes -> two padding characters in the padded form
    padded = BLOCK_MERKLE_ROOT + "=="
    assert parse(padded) == parse(BLOCK_MERKLE_ROOT)
    assert "=" not in parse(padded).encode()


def test_standard_alphabet_rejected():
    assert "-" in BLOCK_MERKLE_ROOT and "_" in BLOCK_MERKLE_ROOT
    with pytest.raises(FormatError):
        parse(BLOCK_MERKLE_ROOT.replace("-", "+"))
    body = BLOCK_MERKLE_ROOT.split("~", 1)[1].replace("_", "/")
    with pytest.raises(FormatError):
        parse("MERKLE_COMM~" + body)


def test_checksum_mismatch_rejected():
    assert PAYLOAD_COMMITMENT.endswith("u")
    with pytest.raises(FormatError):
        parse(PAYLOAD_COMMITMENT[:-1] + "v")


def test_checksum_binds_tag():
    text = encode("A", b"\x01\x02\x03")
    with pytest.raises(FormatError):
        parse("B" + text[1:])


def test_checksum_formula():
    v = bytes(range(10))
    assert checksum("HASH", v) == crc8(b"HASH", v) ^ 10


def test_expected_tag_enforced():
    with pytest.raises(FormatError):
        parse(PAYLOAD_COMMITMENT, expected_tag="MERKLE_COMM")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "HASH",
        "~AAAA",
        "HA SH~AA",
        "HASH~",
        "HASH~A",
        "HASH~AA=A",
        "HÄSH~AA",
        "HASH~AA===",
    ],
)
def test_malformed_text_rejected(text):
    with pytest.raises(FormatError):
        parse(text)


def test_non_string_rejected():
    with pytest.raises(FormatError):
        parse(b"HASH~AA")  # type: ignore[arg-type]


def test_empty_value_round_trips():
    text = encode("T", b"")
    tb = parse(text)
    assert tb.value == b"" and tb.tag == "T"


def test_invalid_tag_on_construction():
    with pytest.raises(FormatError):
        TaggedBase64(tag="bad~tag", value=b"")
    with pytest.raises(FormatError):
        TaggedBase64(tag="", value=b"")
