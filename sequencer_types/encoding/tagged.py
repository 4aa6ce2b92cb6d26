from __future__ import annotations

"""
Tagged values (TaggedBase64)
============================

Self-describing text form for opaque digests crossing the JSON boundary:

    TAG~<base64url(value || checksum)>

- TAG: one or more characters from the URL-safe base64 alphabet
  (A-Z a-z 0-9 - _), e.g. "HASH", "MERKLE_COMM".
- base64url: RFC 4648 §5 alphabet, emitted *without* padding. Padded input is
  accepted on decode; the standard-alphabet '+' and '/' are rejected.
- checksum: one byte, CRC-8(tag || value) XOR (len(value) mod 256), binding
  the tag to the payload so a value re-tagged for another purpose fails.

The tag tells a decoder what the bytes are *for*; callers that expect a
particular role should pass `expected_tag` and get a FormatError otherwise.
"""

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Any, Optional

from sequencer_types.errors import FormatError
from sequencer_types.utils.bytes import BytesLike, b, crc8

SEPARATOR = "~"

# Well-known tags
TAG_HASH = "HASH"
TAG_MERKLE_COMM = "MERKLE_COMM"

_TAG_RE = re.compile(r"[A-Za-z0-9_\-]+")
_B64URL_RE = re.compile(r"[A-Za-z0-9_\-]*={0,2}")


def checksum(tag: str, value: BytesLike) -> int:
    v = b(value)
    return crc8(tag.encode("ascii"), v) ^ (len(v) & 0xFF)


def _check_tag(tag: Any) -> str:
    if not isinstance(tag, str) or not tag.isascii() or not _TAG_RE.fullmatch(tag):
        raise FormatError("invalid tag for tagged value", tag=str(tag))
    return tag


@dataclass(frozen=True)
class TaggedBase64:
    tag: str
    value: bytes

    def __post_init__(self) -> None:
        _check_tag(self.tag)
        object.__setattr__(self, "value", b(self.value))

    # ---- codec ----

    @property
    def checksum(self) -> int:
        return checksum(self.tag, self.value)

    def encode(self) -> str:
        payload = self.value + bytes([self.checksum])
        body = base64.urlsafe_b64encode(payload).rstrip(b"=").decode("ascii")
        return f"{self.tag}{SEPARATOR}{body}"

    @staticmethod
    def parse(text: Any, *, expected_tag: Optional[str] = None) -> "TaggedBase64":
        """
        Decode ``TAG~base64url``. Raises FormatError on bad syntax, bad base64,
        checksum mismatch, or (when given) a tag other than ``expected_tag``.
        """
        if not isinstance(text, str):
            raise FormatError("tagged value must be a string", got=type(text).__name__)
        if not text.isascii():
            raise FormatError("tagged value must be ASCII")
        tag, sep, body = text.partition(SEPARATOR)
        if not sep:
            raise FormatError("tagged value is missing '~' separator", value=text)
        _check_tag(tag)
        if not _B64URL_RE.fullmatch(body):
            raise FormatError("tagged value body is not url-safe base64", value=text)

        unpadded = body.rstrip("=")
        padded = unpadded + "=" * (-len(unpadded) % 4)
        try:
            raw = base64.urlsafe_b64decode(padded)
        except (binascii.Error, ValueError) as e:
            raise FormatError("tagged value body is not valid base64", value=text).with_cause(e)
        if not raw:
            raise FormatError("tagged value has no checksum byte", value=text)

        value, got = raw[:-1], raw[-1]
        want = checksum(tag, value)
        if got != want:
            raise FormatError(
                "tagged value checksum mismatch", value=text, expected=want, got=got
            )
        if expected_tag is not None and tag != expected_tag:
            raise FormatError("unexpected tag", expected=expected_tag, got=tag)
        return TaggedBase64(tag=tag, value=value)

    # ---- convenience ----

    def __str__(self) -> str:
        return self.encode()

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)


def encode(tag: str, value: BytesLike) -> str:
    return TaggedBase64(tag=tag, value=value).encode()


def parse(text: Any, *, expected_tag: Optional[str] = None) -> TaggedBase64:
    return TaggedBase64.parse(text, expected_tag=expected_tag)


__all__ = [
    "SEPARATOR",
    "TAG_HASH",
    "TAG_MERKLE_COMM",
    "TaggedBase64",
    "checksum",
    "encode",
    "parse",
]
