"""Opaque payload holder and shape classification for wire fields."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ScalarPayload:
    """Payload that decoded as a JSON string."""

    value: str


@dataclass(frozen=True)
class SequencePayload:
    """Payload that decoded as a JSON array; items stay undecoded-by-shape."""

    items: tuple[Any, ...]


@dataclass(frozen=True)
class UnrecognizedPayload:
    """Payload that is absent, malformed, or neither a string nor an array."""


DecodedPayload = Union[ScalarPayload, SequencePayload, UnrecognizedPayload]

_UNRECOGNIZED = UnrecognizedPayload()


@dataclass(frozen=True)
class RawPayload:
    """Original encoded bytes of a `content` or `input` field.

    Nothing is decoded at construction time. Every extractor decodes the bytes
    again on demand, so one holder can be read by any number of extractors.
    An empty holder stands for an absent field.
    """

    raw: bytes = b""

    @classmethod
    def from_json(cls, data: bytes | bytearray | str) -> RawPayload:
        if isinstance(data, str):
            return cls(data.encode("utf-8"))
        return cls(bytes(data))

    @classmethod
    def from_value(cls, value: Any) -> RawPayload:
        """Wrap an already-decoded value by re-encoding it."""
        if isinstance(value, RawPayload):
            return value
        if value is None:
            return cls()
        try:
            encoded = json.dumps(value, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError, RecursionError):
            return cls()
        return cls(encoded.encode("utf-8"))

    @property
    def is_empty(self) -> bool:
        return not self.raw.strip()

    def decode(self) -> DecodedPayload:
        return decode_payload(self)

    def to_value(self) -> Any:
        """Generic decode of the held bytes; None when absent or malformed."""
        _, value = _decode_json(self.raw)
        return value


def _decode_json(raw: bytes) -> tuple[bool, Any]:
    """Generic decode; returns (ok, value) instead of raising."""
    if not raw.strip():
        return False, None
    try:
        return True, json.loads(raw)
    except (ValueError, UnicodeDecodeError, RecursionError):
        return False, None


def _as_raw_bytes(payload: Any) -> bytes | None:
    if isinstance(payload, RawPayload):
        return payload.raw
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    return None


def decode_payload(payload: Any) -> DecodedPayload:
    """Classify a payload as scalar, sequence, or unrecognized.

    Accepts a `RawPayload`, raw JSON bytes, or an already-decoded Python value.
    Never raises.
    """
    raw = _as_raw_bytes(payload)
    if raw is not None:
        ok, value = _decode_json(raw)
        if not ok:
            return _UNRECOGNIZED
    else:
        value = payload

    if isinstance(value, str):
        return ScalarPayload(value)
    if isinstance(value, (list, tuple)):
        return SequencePayload(tuple(value))
    return _UNRECOGNIZED


def try_decode_string(payload: Any) -> str | None:
    decoded = decode_payload(payload)
    if isinstance(decoded, ScalarPayload):
        return decoded.value
    return None


def try_decode_sequence(payload: Any) -> tuple[Any, ...] | None:
    decoded = decode_payload(payload)
    if isinstance(decoded, SequencePayload):
        return decoded.items
    return None


def try_decode_object(item: Any) -> dict[str, Any] | None:
    """Return `item` as a string-keyed mapping, or None when it is not one."""
    if isinstance(item, dict):
        return item
    return None


def is_string_content(payload: Any) -> bool:
    """Return whether the payload decodes as a plain string."""
    return isinstance(decode_payload(payload), ScalarPayload)
