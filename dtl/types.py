"""Tagged string encodings for the value types that plain JSON lacks."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation

URI_TAG = "~r"
UUID_TAG = "~u"
NI_TAG = "~:"
BYTES_TAG = "~b"
TIME_TAG = "~t"
DECIMAL_TAG = "~f"

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})")
_DATETIME_RE = re.compile(
    r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})"
    r"T([0-9]{1,2}):([0-9]{1,2}):([0-9]{1,2})"
    r"\.([0-9]{1,9})"
    r"([+-])([0-9]{2}):?([0-9]{2})"
)


class TransitError(ValueError):
    """Raised when a tagged string cannot be decoded or a value encoded."""


def _strip(text: str, tag: str, kind: str) -> str:
    if not text.startswith(tag):
        raise TransitError(f"{kind} value must start with {tag!r}: {text!r}")
    return text[len(tag):]


@dataclass(frozen=True)
class URI:
    """A URI, written as ``~r<uri>``."""

    value: str

    def __str__(self) -> str:
        return self.encode()

    def encode(self) -> str:
        return URI_TAG + self.value

    @classmethod
    def decode(cls, text: str) -> URI:
        return cls(_strip(text, URI_TAG, "URI"))


@dataclass(frozen=True)
class UUID:
    """A UUID kept as its text, written as ``~u<uuid>``."""

    value: str

    def __str__(self) -> str:
        return self.encode()

    def encode(self) -> str:
        return UUID_TAG + self.value

    @classmethod
    def decode(cls, text: str) -> UUID:
        return cls(_strip(text, UUID_TAG, "UUID"))


@dataclass(frozen=True)
class NI:
    """A namespaced identifier, written as ``~:<namespace>:<identifier>``."""

    namespace: str
    identifier: str

    def __str__(self) -> str:
        return self.encode()

    def encode(self) -> str:
        return f"{NI_TAG}{self.namespace}:{self.identifier}"

    @classmethod
    def decode(cls, text: str) -> NI:
        rest = _strip(text, NI_TAG, "NI")
        namespace, sep, identifier = rest.rpartition(":")
        if not sep:
            raise TransitError(f"NI value has no namespace separator: {text!r}")
        return cls(namespace, identifier)


def encode_bytes(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as ``~b`` followed by standard padded base64."""
    return BYTES_TAG + base64.b64encode(bytes(data)).decode("ascii")


def decode_bytes(text: str) -> bytes:
    body = _strip(text, BYTES_TAG, "bytes")
    try:
        return base64.b64decode(body.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise TransitError(f"invalid base64 in {text!r}") from exc


def parse_date(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` date."""
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise TransitError(f"invalid date: {text!r}")
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError as exc:
        raise TransitError(f"invalid date: {text!r}") from exc


def encode_date(value: date) -> str:
    return f"{TIME_TAG}{value.year:04d}-{value.month:02d}-{value.day:02d}"


def decode_date(text: str) -> date:
    body = _strip(text, TIME_TAG, "date")
    if "T" in text:
        raise TransitError(f"date value holds a time: {text!r}")
    return parse_date(body)


def parse_datetime(text: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM:SS.fff+HHMM`` into an aware UTC datetime."""
    match = _DATETIME_RE.fullmatch(text)
    if match is None:
        raise TransitError(f"invalid datetime: {text!r}")
    year, month, day, hour, minute, second, fraction, sign, off_h, off_m = match.groups()
    microsecond = int(fraction.ljust(9, "0")[:6])
    offset = timedelta(hours=int(off_h), minutes=int(off_m))
    if sign == "-":
        offset = -offset
    try:
        local = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond,
            tzinfo=timezone(offset),
        )
    except ValueError as exc:
        raise TransitError(f"invalid datetime: {text!r}") from exc
    return local.astimezone(timezone.utc)


def encode_datetime(value: datetime) -> str:
    """Encode a datetime in UTC with nanosecond precision; naive values count as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    u = value.astimezone(timezone.utc)
    return (
        f"{TIME_TAG}{u.year:04d}-{u.month:02d}-{u.day:02d}"
        f"T{u.hour:02d}:{u.minute:02d}:{u.second:02d}"
        f".{u.microsecond * 1000:09d}+0000"
    )


def decode_datetime(text: str) -> datetime:
    body = _strip(text, TIME_TAG, "datetime")
    if "T" not in text:
        raise TransitError(f"datetime value has no time: {text!r}")
    return parse_datetime(body)


def parse_decimal(text: str) -> Decimal:
    """Parse a finite decimal number."""
    if text != text.strip():
        raise TransitError(f"invalid decimal: {text!r}")
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise TransitError(f"invalid decimal: {text!r}") from exc
    if not value.is_finite():
        raise TransitError(f"decimal must be finite: {text!r}")
    return value


def encode_decimal(value: Decimal) -> str:
    """Encode a decimal in plain notation, without an exponent."""
    if not value.is_finite():
        raise TransitError(f"decimal must be finite: {value!r}")
    return DECIMAL_TAG + format(value, "f")


def decode_decimal(text: str) -> Decimal:
    return parse_decimal(_strip(text, DECIMAL_TAG, "decimal"))