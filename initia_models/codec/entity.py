"""
Entity base class: schema-driven conversion to and from every wire format.

Subclasses are dataclasses that declare their fields with ``wire()`` and
set a few class attributes:

    proto_name          full protobuf message name
    type_url            "/" + proto_name for entities that can be packed
                        into Any; also emitted as "@type" in Data form
    amino_type          Amino envelope tag, e.g. "cosmos-sdk/MsgSend"
    amino_value_field   for entities whose Amino value is a single scalar
                        (public keys) instead of an object

No subclass writes conversion code; everything below walks the schema.
"""

import json
from typing import Any, Dict, Optional

from google.protobuf import any_pb2
from google.protobuf.message import DecodeError

from .config import get_config
from .errors import CodecError, MalformedInputError, UnrecognizedTypeError, UnsupportedConversionError
from .kinds import WireFormat
from .proto import message_class
from .schema import WireField, schema_of


def _expect_object(raw: Any, cls: type) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise MalformedInputError(f"expected an object for {cls.__name__}, got {type(raw).__name__}")
    return raw


class Entity:
    """Base for all typed entities."""
    proto_name: str = ""
    type_url: Optional[str] = None
    amino_type: Optional[str] = None
    amino_value_field: Optional[str] = None

    def __post_init__(self):
        # Normalize constructor values to the form decoding produces
        for f in schema_of(type(self)):
            value = getattr(self, f.name)
            if value is not None:
                setattr(self, f.name, f.kind.coerce(value))

    @classmethod
    def wire_fields(cls):
        return schema_of(cls)

    @classmethod
    def _wire_field(cls, name: str) -> WireField:
        for f in schema_of(cls):
            if f.name == name:
                return f
        raise UnsupportedConversionError(f"{cls.__name__} has no wire field {name!r}")

    # =========================================================================
    # Field-level engine (shared by Amino and Data)
    # =========================================================================

    def _encode_field(self, f: WireField, fmt: WireFormat) -> Any:
        value = getattr(self, f.name)
        try:
            if value is None:
                if not f.optional:
                    raise MalformedInputError("required field is not set")
                return None
            return f.kind.encode_json(value, fmt)
        except CodecError as exc:
            raise exc.at(f.key(fmt))

    @classmethod
    def _decode_field(cls, f: WireField, raw: Any, fmt: WireFormat) -> Any:
        try:
            if raw is None:
                if not f.optional:
                    raise MalformedInputError("missing required field")
                return f.kind.empty()
            return f.kind.decode_json(raw, fmt)
        except CodecError as exc:
            raise exc.at(f.key(fmt))

    def encode_fields(self, fmt: WireFormat) -> Dict[str, Any]:
        """Encode every field into a bare JSON object (no discriminator)."""
        return {f.key(fmt): self._encode_field(f, fmt) for f in schema_of(type(self))}

    @classmethod
    def decode_fields(cls, raw: Any, fmt: WireFormat):
        """Build an entity from a bare JSON object (no discriminator)."""
        raw = _expect_object(raw, cls)
        schema = schema_of(cls)

        if get_config().reject_unknown_fields:
            unknown = set(raw) - {f.key(fmt) for f in schema}
            if unknown:
                raise MalformedInputError(f"unexpected fields for {cls.__name__}: {sorted(unknown)}")

        values = {f.name: cls._decode_field(f, raw.get(f.key(fmt)), fmt) for f in schema}
        return cls(**values)

    # =========================================================================
    # Amino
    # =========================================================================

    def to_amino(self) -> Any:
        cls = type(self)
        if cls.amino_type is None:
            if cls.type_url is not None:
                raise UnsupportedConversionError(f"{cls.__name__} has no amino representation")
            return self.encode_fields(WireFormat.AMINO)

        if cls.amino_value_field:
            value = self._encode_field(cls._wire_field(cls.amino_value_field), WireFormat.AMINO)
        else:
            value = self.encode_fields(WireFormat.AMINO)
        return {"type": cls.amino_type, "value": value}

    @classmethod
    def from_amino(cls, raw: Any):
        if cls.amino_type is None:
            if cls.type_url is not None:
                raise UnsupportedConversionError(f"{cls.__name__} has no amino representation")
            return cls.decode_fields(raw, WireFormat.AMINO)

        raw = _expect_object(raw, cls)
        tag = raw.get("type")
        if tag is None:
            raise MalformedInputError("missing amino type discriminator").at("type")
        if tag != cls.amino_type:
            raise UnrecognizedTypeError(f"expected {cls.amino_type!r}, got {tag!r}").at("type")
        if raw.get("value") is None:
            raise MalformedInputError("missing required field").at("value")

        try:
            if cls.amino_value_field:
                f = cls._wire_field(cls.amino_value_field)
                return cls(**{f.name: f.kind.decode_json(raw["value"], WireFormat.AMINO)})
            return cls.decode_fields(raw["value"], WireFormat.AMINO)
        except CodecError as exc:
            raise exc.at("value")

    def to_amino_json(self) -> str:
        """Canonical Amino JSON: sorted keys, no whitespace."""
        return json.dumps(self.to_amino(), sort_keys=True, separators=(',', ':'))

    # =========================================================================
    # Data
    # =========================================================================

    def to_data(self) -> Dict[str, Any]:
        data = self.encode_fields(WireFormat.DATA)
        type_url = type(self).type_url
        if type_url is None:
            return data
        return {"@type": type_url, **data}

    @classmethod
    def from_data(cls, raw: Any):
        raw = _expect_object(raw, cls)
        if cls.type_url is None:
            return cls.decode_fields(raw, WireFormat.DATA)

        tag = raw.get("@type")
        if tag is None:
            raise MalformedInputError("missing required field").at("@type")
        if tag != cls.type_url:
            raise UnrecognizedTypeError(f"expected {cls.type_url!r}, got {tag!r}").at("@type")
        fields_only = {k: v for k, v in raw.items() if k != "@type"}
        return cls.decode_fields(fields_only, WireFormat.DATA)

    def to_json(self) -> str:
        return json.dumps(self.to_data(), separators=(',', ':'))

    @classmethod
    def from_json(cls, text: str):
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedInputError(f"invalid JSON: {exc}") from exc
        return cls.from_data(raw)

    # =========================================================================
    # Proto
    # =========================================================================

    @classmethod
    def message_class(cls):
        return message_class(cls)

    def write_proto(self, msg) -> None:
        """Fill an existing message of this entity's type."""
        for f in schema_of(type(self)):
            value = getattr(self, f.name)
            try:
                if value is None and not f.optional:
                    raise MalformedInputError("required field is not set")
                f.kind.write_proto(msg, f.proto_name, value)
            except CodecError as exc:
                raise exc.at(f.proto_name)

    @classmethod
    def read_proto(cls, msg):
        values = {}
        for f in schema_of(cls):
            try:
                if not f.kind.has_proto(msg, f.proto_name):
                    if not f.optional:
                        raise MalformedInputError("missing required field")
                    values[f.name] = f.kind.empty()
                else:
                    values[f.name] = f.kind.read_proto(msg, f.proto_name)
            except CodecError as exc:
                raise exc.at(f.proto_name)
        return cls(**values)

    def to_proto(self):
        msg = self.message_class()()
        self.write_proto(msg)
        return msg

    @classmethod
    def from_proto(cls, msg):
        full_name = msg.DESCRIPTOR.full_name
        if full_name != cls.proto_name:
            raise MalformedInputError(f"expected {cls.proto_name} message, got {full_name}")
        return cls.read_proto(msg)

    def to_proto_bytes(self) -> bytes:
        return self.to_proto().SerializeToString()

    @classmethod
    def from_proto_bytes(cls, data: bytes):
        msg = cls.message_class()()
        try:
            msg.ParseFromString(data)
        except DecodeError as exc:
            raise MalformedInputError(f"invalid {cls.proto_name} bytes: {exc}") from exc
        return cls.read_proto(msg)

    def pack_any(self) -> any_pb2.Any:
        cls = type(self)
        if cls.type_url is None:
            raise UnsupportedConversionError(f"{cls.__name__} cannot be packed into Any")
        return any_pb2.Any(type_url=cls.type_url, value=self.to_proto_bytes())

    @classmethod
    def unpack_any(cls, packed):
        if cls.type_url is None:
            raise UnsupportedConversionError(f"{cls.__name__} cannot be unpacked from Any")
        if packed.type_url != cls.type_url:
            raise UnrecognizedTypeError(f"expected {cls.type_url!r}, got {packed.type_url!r}").at("type_url")
        try:
            return cls.from_proto_bytes(packed.value)
        except CodecError as exc:
            raise exc.at("value")
