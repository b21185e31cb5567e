"""
Field kinds: per-field transcoding rules.

A kind knows how one field's Python value maps onto each wire format:
JSON-ish values for Amino and Data, and scalar values or sub-messages for
Proto. Entities never convert their own fields; they delegate to the kind
declared in their schema.
"""

import base64
import binascii
import re
from datetime import datetime, timedelta, timezone
from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import Any, Optional, Tuple

from google.protobuf import any_pb2, descriptor_pb2, duration_pb2, timestamp_pb2

from .config import get_config
from .errors import CodecError, MalformedInputError, UnparsableNumberError


_FieldProto = descriptor_pb2.FieldDescriptorProto

ANY_FILE = any_pb2.DESCRIPTOR.name
TIMESTAMP_FILE = timestamp_pb2.DESCRIPTOR.name
DURATION_FILE = duration_pb2.DESCRIPTOR.name

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
DEC_PLACES = 18
_DEC_UNIT = Decimal(1).scaleb(-DEC_PLACES)

_INTEGER = re.compile(r"-?[0-9]+")
_DECIMAL = re.compile(r"-?[0-9]+(?:\.([0-9]+))?")
_DURATION = re.compile(r"(-?[0-9]+)(?:\.([0-9]{1,9}))?s")
_RFC3339 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt ]([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?([Zz]|[+-][0-9]{2}:[0-9]{2})"
)


class WireFormat(Enum):
    """The three supported wire representations."""
    AMINO = "amino"
    DATA = "data"
    PROTO = "proto"


# (field type, fully-qualified type name, dependency)
ProtoType = Tuple[int, Optional[str], Any]


def _type_name(value: Any) -> str:
    return type(value).__name__


# =============================================================================
# Value helpers
# =============================================================================

def parse_integer(raw: Any) -> int:
    """Parse a decimal-string (or native) integer without going through float."""
    if isinstance(raw, bool):
        raise UnparsableNumberError(f"expected an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER.fullmatch(raw):
        return int(raw)
    raise UnparsableNumberError(f"not an integer: {raw!r}")


def parse_dec(raw: Any) -> Decimal:
    """Parse a fixed-point decimal string with at most 18 fractional digits."""
    if isinstance(raw, bool):
        raise UnparsableNumberError(f"expected a decimal, got {raw!r}")
    if isinstance(raw, int):
        return Decimal(raw)
    match = _DECIMAL.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise UnparsableNumberError(f"not a decimal: {raw!r}")
    if match.group(1) and len(match.group(1)) > DEC_PLACES:
        raise UnparsableNumberError(f"more than {DEC_PLACES} fractional digits: {raw!r}")
    return Decimal(raw)


def format_dec(value: Any) -> str:
    """Render a decimal with exactly 18 fractional digits, never in exponent form.

    Values that would need more than 18 fractional digits are refused rather
    than rounded.
    """
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise UnparsableNumberError(f"expected Decimal or int, got {_type_name(value)}")
    value = Decimal(value)
    if not value.is_finite():
        raise UnparsableNumberError(f"not a finite decimal: {value}")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + DEC_PLACES + 1)
        try:
            quantized = value.quantize(_DEC_UNIT, rounding=ROUND_DOWN)
        except InvalidOperation as exc:
            raise UnparsableNumberError(f"cannot render decimal {value}") from exc
        if quantized != value:
            raise UnparsableNumberError(f"{value} has more than {DEC_PLACES} fractional digits")
        return format(quantized, "f")


def dec_to_atomics(value: Any) -> str:
    """Render a decimal as its 10^18-scaled integer (cosmos ``LegacyDec`` in proto)."""
    return str(int(format_dec(value).replace(".", "")))


def dec_from_atomics(raw: Any) -> Decimal:
    """Parse a 10^18-scaled integer string back into a decimal."""
    return Decimal(f"{parse_integer(raw)}E-{DEC_PLACES}")


def _as_utc(value: Any) -> datetime:
    if not isinstance(value, datetime):
        raise MalformedInputError(f"expected datetime, got {_type_name(value)}")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime, precision: str = "auto") -> str:
    """Render a datetime as an RFC 3339 UTC string ending in ``Z``."""
    naive = _as_utc(value).replace(tzinfo=None)
    return naive.isoformat(timespec=precision) + "Z"


def parse_timestamp(raw: Any) -> datetime:
    """Parse an RFC 3339 timestamp into an aware UTC datetime.

    Fractions finer than a microsecond are truncated.
    """
    match = _RFC3339.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise MalformedInputError(f"not an ISO-8601 timestamp: {raw!r}")
    year, month, day, hour, minute, second, fraction, offset = match.groups()
    microsecond = int((fraction or "")[:6].ljust(6, "0"))
    try:
        if offset in ("Z", "z"):
            tzinfo = timezone.utc
        else:
            sign = 1 if offset[0] == "+" else -1
            tzinfo = timezone(sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6])))
        value = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond,
            tzinfo=tzinfo,
        )
        return value.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise MalformedInputError(f"invalid timestamp {raw!r}: {exc}") from exc


def _micros(value: Any) -> int:
    if not isinstance(value, timedelta):
        raise MalformedInputError(f"expected timedelta, got {_type_name(value)}")
    return (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds


def _signed(magnitude: int, negative: bool) -> int:
    return -magnitude if negative else magnitude


def format_duration(value: timedelta) -> str:
    """Render a timedelta in protobuf JSON form, e.g. ``"3600s"`` or ``"1.500000s"``."""
    micros = _micros(value)
    seconds, fraction = divmod(abs(micros), 1_000_000)
    sign = "-" if micros < 0 else ""
    if fraction:
        return f"{sign}{seconds}.{fraction:06d}s"
    return f"{sign}{seconds}s"


def parse_duration(raw: Any) -> timedelta:
    """Parse a protobuf JSON duration. Fractions finer than a microsecond are truncated."""
    match = _DURATION.fullmatch(raw) if isinstance(raw, str) else None
    if match is None:
        raise MalformedInputError(f"not a duration: {raw!r}")
    seconds, fraction = match.groups()
    micros = abs(int(seconds)) * 1_000_000 + int((fraction or "")[:6].ljust(6, "0"))
    try:
        return timedelta(microseconds=_signed(micros, seconds.startswith("-")))
    except OverflowError as exc:
        raise MalformedInputError(f"duration out of range: {raw!r}") from exc


# =============================================================================
# Kind base
# =============================================================================

class Kind:
    """Transcoding rule for one field.

    Scalar kinds implement encode/decode for both JSON and proto values.
    Message kinds (``message = True``) fill and read a sub-message instead.
    """
    message = False
    repeated = False

    def empty(self) -> Any:
        return None

    def coerce(self, value: Any) -> Any:
        """Normalize a value assigned at construction time. Never called with None."""
        return value

    def encode_json(self, value: Any, fmt: WireFormat) -> Any:
        raise NotImplementedError

    def decode_json(self, raw: Any, fmt: WireFormat) -> Any:
        raise NotImplementedError

    def encode_proto(self, value: Any) -> Any:
        return value

    def decode_proto(self, raw: Any) -> Any:
        return raw

    def fill_message(self, value: Any, target) -> None:
        raise NotImplementedError

    def read_message(self, source) -> Any:
        raise NotImplementedError

    def proto_type(self) -> ProtoType:
        raise NotImplementedError

    # Container-level access, used by the entity engine

    def write_proto(self, msg, name: str, value: Any) -> None:
        if value is None:
            return
        if self.message:
            target = getattr(msg, name)
            target.SetInParent()
            self.fill_message(value, target)
        else:
            setattr(msg, name, self.encode_proto(value))

    def has_proto(self, msg, name: str) -> bool:
        return msg.HasField(name) if self.message else True

    def read_proto(self, msg, name: str) -> Any:
        if self.message:
            return self.read_message(getattr(msg, name))
        return self.decode_proto(getattr(msg, name))


# =============================================================================
# Scalars
# =============================================================================

class StringKind(Kind):
    def encode_json(self, value, fmt):
        if not isinstance(value, str):
            raise MalformedInputError(f"expected str, got {_type_name(value)}")
        return value

    def decode_json(self, raw, fmt):
        if not isinstance(raw, str):
            raise MalformedInputError(f"expected a string, got {_type_name(raw)}")
        return raw

    def encode_proto(self, value):
        return self.encode_json(value, WireFormat.PROTO)

    def proto_type(self):
        return (_FieldProto.TYPE_STRING, None, None)


class BoolKind(Kind):
    def encode_json(self, value, fmt):
        return bool(value)

    def decode_json(self, raw, fmt):
        if not isinstance(raw, bool):
            raise MalformedInputError(f"expected a boolean, got {_type_name(raw)}")
        return raw

    def encode_proto(self, value):
        return bool(value)

    def proto_type(self):
        return (_FieldProto.TYPE_BOOL, None, None)


class BytesKind(Kind):
    """Raw bytes; base64 in JSON forms."""

    def encode_json(self, value, fmt):
        return base64.b64encode(bytes(value)).decode("ascii")

    def decode_json(self, raw, fmt):
        if not isinstance(raw, str):
            raise MalformedInputError(f"expected a base64 string, got {_type_name(raw)}")
        try:
            return base64.b64decode(raw, validate=True)
        except binascii.Error as exc:
            raise MalformedInputError(f"invalid base64: {exc}") from exc

    def encode_proto(self, value):
        return bytes(value)

    def decode_proto(self, raw):
        return bytes(raw)

    def proto_type(self):
        return (_FieldProto.TYPE_BYTES, None, None)


class IntegerKind(Kind):
    """Integer carried as a decimal string in JSON forms.

    When ``proto_string`` is set the proto field is a string as well
    (cosmos ``Int``), otherwise a native 64-bit integer.
    """

    def __init__(self, field_type: int, low: Optional[int] = None,
                 high: Optional[int] = None, proto_string: bool = False):
        self.field_type = field_type
        self.low = low
        self.high = high
        self.proto_string = proto_string

    def _checked(self, value: int) -> int:
        if self.low is not None and value < self.low:
            raise UnparsableNumberError(f"{value} is below {self.low}")
        if self.high is not None and value > self.high:
            raise UnparsableNumberError(f"{value} exceeds {self.high}")
        return value

    def _native(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnparsableNumberError(f"expected int, got {_type_name(value)}")
        return self._checked(value)

    def encode_json(self, value, fmt):
        return str(self._native(value))

    def decode_json(self, raw, fmt):
        return self._checked(parse_integer(raw))

    def encode_proto(self, value):
        value = self._native(value)
        return str(value) if self.proto_string else value

    def decode_proto(self, raw):
        return self._checked(parse_integer(raw))

    def proto_type(self):
        return (self.field_type, None, None)


class DecKind(Kind):
    """Fixed-point decimal with 18 fractional digits (cosmos ``Dec``).

    JSON forms carry the fixed-point text (``"1.500000000000000000"``); the
    proto string is the 10^18-scaled integer (``"1500000000000000000"``), as
    gogoproto marshals ``LegacyDec``.
    """

    def encode_json(self, value, fmt):
        return format_dec(value)

    def decode_json(self, raw, fmt):
        return parse_dec(raw)

    def encode_proto(self, value):
        return dec_to_atomics(value)

    def decode_proto(self, raw):
        return dec_from_atomics(raw)

    def proto_type(self):
        return (_FieldProto.TYPE_STRING, None, None)


class TimestampKind(Kind):
    message = True

    def coerce(self, value):
        return _as_utc(value) if isinstance(value, datetime) else value

    def encode_json(self, value, fmt):
        return format_timestamp(value, get_config().timestamp_precision)

    def decode_json(self, raw, fmt):
        return parse_timestamp(raw)

    def fill_message(self, value, target):
        delta = _as_utc(value) - EPOCH
        target.seconds = delta.days * 86400 + delta.seconds
        target.nanos = delta.microseconds * 1000

    def read_message(self, source):
        try:
            return EPOCH + timedelta(seconds=source.seconds, microseconds=source.nanos // 1000)
        except OverflowError as exc:
            raise MalformedInputError(f"timestamp out of range: {source.seconds}s") from exc

    def proto_type(self):
        return (_FieldProto.TYPE_MESSAGE, ".google.protobuf.Timestamp", TIMESTAMP_FILE)


class DurationKind(Kind):
    """Span of time as a ``timedelta``.

    Amino carries the nanosecond count as a decimal string (Go
    ``time.Duration``); Data uses the protobuf JSON form ``"3600s"``.
    """
    message = True

    def encode_json(self, value, fmt):
        if fmt is WireFormat.AMINO:
            return str(_micros(value) * 1000)
        return format_duration(value)

    def decode_json(self, raw, fmt):
        if fmt is not WireFormat.AMINO:
            return parse_duration(raw)
        nanos = parse_integer(raw)
        try:
            return timedelta(microseconds=_signed(abs(nanos) // 1000, nanos < 0))
        except OverflowError as exc:
            raise MalformedInputError(f"duration out of range: {raw!r}") from exc

    def fill_message(self, value, target):
        micros = _micros(value)
        seconds, fraction = divmod(abs(micros), 1_000_000)
        target.seconds = _signed(seconds, micros < 0)
        target.nanos = _signed(fraction * 1000, micros < 0)

    def read_message(self, source):
        try:
            micros = _signed(abs(source.nanos) // 1000, source.nanos < 0)
            return timedelta(seconds=source.seconds, microseconds=micros)
        except OverflowError as exc:
            raise MalformedInputError(f"duration out of range: {source.seconds}s") from exc

    def proto_type(self):
        return (_FieldProto.TYPE_MESSAGE, ".google.protobuf.Duration", DURATION_FILE)


class EnumKind(Kind):
    """Enum: member name in JSON forms, integer code in proto."""

    def __init__(self, enum_cls, proto_name: str):
        self.enum_cls = enum_cls
        self.proto_name = proto_name

    def _member(self, value):
        try:
            return self.enum_cls(value)
        except ValueError as exc:
            raise MalformedInputError(f"unknown {self.enum_cls.__name__} value {value!r}") from exc

    def encode_json(self, value, fmt):
        return self._member(value).name

    def decode_json(self, raw, fmt):
        if isinstance(raw, str):
            try:
                return self.enum_cls[raw]
            except KeyError:
                raise MalformedInputError(f"unknown {self.enum_cls.__name__} {raw!r}") from None
        if isinstance(raw, int) and not isinstance(raw, bool):
            return self._member(raw)
        raise MalformedInputError(f"expected an enum name, got {_type_name(raw)}")

    def encode_proto(self, value):
        return int(self._member(value))

    def decode_proto(self, raw):
        return self._member(raw)

    def proto_type(self):
        return (_FieldProto.TYPE_ENUM, "." + self.proto_name, self)


# =============================================================================
# Composites
# =============================================================================

class NestedKind(Kind):
    """An owned entity embedded without a discriminator."""
    message = True

    def __init__(self, entity_cls):
        self.entity_cls = entity_cls

    def _check(self, value):
        if not isinstance(value, self.entity_cls):
            raise MalformedInputError(
                f"expected {self.entity_cls.__name__}, got {_type_name(value)}"
            )
        return value

    def encode_json(self, value, fmt):
        return self._check(value).encode_fields(fmt)

    def decode_json(self, raw, fmt):
        return self.entity_cls.decode_fields(raw, fmt)

    def fill_message(self, value, target):
        self._check(value).write_proto(target)

    def read_message(self, source):
        return self.entity_cls.read_proto(source)

    def proto_type(self):
        return (_FieldProto.TYPE_MESSAGE, "." + self.entity_cls.proto_name, self.entity_cls)


class AnyOfKind(Kind):
    """A polymorphic field resolved through a variant family."""
    message = True

    def __init__(self, family):
        self.family = family

    def encode_json(self, value, fmt):
        return self.family.encode(value, fmt)

    def decode_json(self, raw, fmt):
        return self.family.decode(raw, fmt)

    def fill_message(self, value, target):
        packed = self.family.pack_any(value)
        target.type_url = packed.type_url
        target.value = packed.value

    def read_message(self, source):
        return self.family.unpack_any(source)

    def proto_type(self):
        return (_FieldProto.TYPE_MESSAGE, ".google.protobuf.Any", ANY_FILE)


class RepeatedKind(Kind):
    repeated = True

    def __init__(self, item: Kind):
        self.item = item

    def empty(self):
        return []

    def collect(self, items: list) -> Any:
        return items

    def coerce(self, value):
        if isinstance(value, (list, tuple)):
            return self.collect([v if v is None else self.item.coerce(v) for v in value])
        return value

    def encode_json(self, value, fmt):
        return [self.item.encode_json(v, fmt) for v in value]

    def decode_json(self, raw, fmt):
        if not isinstance(raw, list):
            raise MalformedInputError(f"expected a list, got {_type_name(raw)}")
        items = []
        for index, entry in enumerate(raw):
            try:
                items.append(self.item.decode_json(entry, fmt))
            except CodecError as exc:
                raise exc.at(index)
        return self.collect(items)

    def write_proto(self, msg, name, value):
        if value is None:
            return
        container = getattr(msg, name)
        for entry in value:
            if self.item.message:
                self.item.fill_message(entry, container.add())
            else:
                container.append(self.item.encode_proto(entry))

    def has_proto(self, msg, name):
        return True

    def read_proto(self, msg, name):
        items = []
        for index, entry in enumerate(getattr(msg, name)):
            try:
                if self.item.message:
                    items.append(self.item.read_message(entry))
                else:
                    items.append(self.item.decode_proto(entry))
            except CodecError as exc:
                raise exc.at(index)
        return self.collect(items)

    def proto_type(self):
        return self.item.proto_type()


STRING = StringKind()
BOOL = BoolKind()
BYTES = BytesKind()
UINT64 = IntegerKind(_FieldProto.TYPE_UINT64, 0, 2 ** 64 - 1)
INT64 = IntegerKind(_FieldProto.TYPE_INT64, -2 ** 63, 2 ** 63 - 1)
BIGINT = IntegerKind(_FieldProto.TYPE_STRING, proto_string=True)
UBIGINT = IntegerKind(_FieldProto.TYPE_STRING, low=0, proto_string=True)
DEC = DecKind()
TIMESTAMP = TimestampKind()
DURATION = DurationKind()


def nested(entity_cls) -> NestedKind:
    return NestedKind(entity_cls)


def any_of(family) -> AnyOfKind:
    return AnyOfKind(family)


def repeated(item: Kind) -> RepeatedKind:
    return RepeatedKind(item)


def enum_of(enum_cls, proto_name: str) -> EnumKind:
    return EnumKind(enum_cls, proto_name)
