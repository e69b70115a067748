"""Entity values: JSON extended with tagged strings for richer types."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Mapping

from dtl.types import (
    BYTES_TAG,
    DECIMAL_TAG,
    NI,
    NI_TAG,
    TIME_TAG,
    URI,
    URI_TAG,
    UUID,
    UUID_TAG,
    TransitError,
    decode_bytes,
    decode_date,
    decode_datetime,
    decode_decimal,
    encode_bytes,
    encode_date,
    encode_datetime,
    encode_decimal,
)


def _decode_time(text: str) -> date:
    return decode_datetime(text) if "T" in text else decode_date(text)


_DECODERS: tuple[tuple[str, Callable[[str], Any]], ...] = (
    (URI_TAG, URI.decode),
    (TIME_TAG, _decode_time),
    (BYTES_TAG, decode_bytes),
    (NI_TAG, NI.decode),
    (DECIMAL_TAG, decode_decimal),
    (UUID_TAG, UUID.decode),
)


def decode_string(text: str) -> Any:
    """Turn a tagged string into its value; other strings come back unchanged."""
    if not text.startswith("~"):
        return text
    for tag, decoder in _DECODERS:
        if text.startswith(tag):
            return decoder(text)
    return text


def encode(value: Any) -> Any:
    """Turn an entity value into plain JSON-compatible data."""
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (URI, UUID, NI)):
        return value.encode()
    if isinstance(value, datetime):
        return encode_datetime(value)
    if isinstance(value, date):
        return encode_date(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return encode_bytes(value)
    if isinstance(value, Decimal):
        return encode_decimal(value)
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, not {type(key).__name__}")
            result[key] = encode(item)
        return result
    raise TypeError(f"cannot encode value of type {type(value).__name__}")


def decode(value: Any) -> Any:
    """Turn plain JSON-compatible data into entity values."""
    if value is None or isinstance(value, (bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        return decode_string(value)
    if isinstance(value, (list, tuple)):
        return [decode(item) for item in value]
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, not {type(key).__name__}")
            result[key] = decode(item)
        return result
    raise TypeError(f"cannot decode value of type {type(value).__name__}")


def _reject_constant(name: str) -> Any:
    raise TransitError(f"invalid JSON constant: {name}")


def dumps(value: Any) -> str:
    """Serialise an entity value to compact JSON text."""
    return json.dumps(encode(value), ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def loads(text: str) -> Any:
    """Parse JSON text into an entity value."""
    return decode(json.loads(text, parse_constant=_reject_constant))


_FIELDS: tuple[tuple[str, str, type, bool], ...] = (
    ("_id", "id", str, False),
    ("_deleted", "deleted", bool, False),
    ("_ts", "timestamp", int, True),
    ("_filtered", "filtered", bool, False),
    ("_updated", "updated", int, True),
    ("_hash", "hash", str, False),
)


def _check(key: str, value: Any, kind: type, unsigned: bool) -> Any:
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise TransitError(f"field {key!r} must be {kind.__name__}, got {value!r}")
    if unsigned and value < 0:
        raise TransitError(f"field {key!r} must not be negative, got {value!r}")
    return value


@dataclass
class Entity:
    """An entity: fixed metadata fields plus free-form content."""

    id: str
    deleted: bool
    timestamp: int
    filtered: bool
    updated: int
    hash: str
    previous: int | None = None
    content: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the entity as JSON-compatible data, content flattened alongside metadata."""
        data: dict[str, Any] = {key: getattr(self, attr) for key, attr, _, _ in _FIELDS}
        data["_previous"] = self.previous
        data.update(encode(self.content))
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Entity:
        """Build an entity from JSON-compatible data such as ``json.loads`` returns."""
        rest = dict(data)
        kwargs: dict[str, Any] = {}
        for key, attr, kind, unsigned in _FIELDS:
            if key not in rest:
                raise TransitError(f"missing field {key!r}")
            kwargs[attr] = _check(key, rest.pop(key), kind, unsigned)
        previous = rest.pop("_previous", None)
        if previous is not None:
            _check("_previous", previous, int, True)
        return cls(previous=previous, content=decode(rest), **kwargs)