"""
Generic multi-format codec.

This package provides:
- kinds: per-field transcoding rules (numbers, timestamps, enums, nesting)
- schema: the wire() field declaration used by every entity
- entity: the Entity base class driving Amino / Data / Proto round-trips
- registry: polymorphic variant families keyed by discriminator
- proto: protobuf message classes built from entity schemas
- config: process-wide settings loadable from YAML
- errors: typed conversion failures
"""

from .errors import (
    CodecError,
    MalformedInputError,
    UnparsableNumberError,
    UnrecognizedTypeError,
    UnsupportedConversionError,
    ConfigurationError,
)

from .config import (
    CodecConfig,
    get_config,
    configure,
    parse_config,
    load_config,
)

from .kinds import (
    WireFormat,
    Kind,
    STRING,
    BOOL,
    BYTES,
    UINT64,
    INT64,
    BIGINT,
    UBIGINT,
    DEC,
    TIMESTAMP,
    DURATION,
    nested,
    any_of,
    repeated,
    enum_of,
    parse_integer,
    parse_dec,
    format_dec,
    dec_to_atomics,
    dec_from_atomics,
    parse_timestamp,
    format_timestamp,
    parse_duration,
    format_duration,
)

from .schema import WireField, wire, schema_of
from .registry import Family
from .entity import Entity
from .proto import message_class

__all__ = [
    # Errors
    "CodecError",
    "MalformedInputError",
    "UnparsableNumberError",
    "UnrecognizedTypeError",
    "UnsupportedConversionError",
    "ConfigurationError",
    # Config
    "CodecConfig",
    "get_config",
    "configure",
    "parse_config",
    "load_config",
    # Kinds
    "WireFormat",
    "Kind",
    "STRING",
    "BOOL",
    "BYTES",
    "UINT64",
    "INT64",
    "BIGINT",
    "UBIGINT",
    "DEC",
    "TIMESTAMP",
    "DURATION",
    "nested",
    "any_of",
    "repeated",
    "enum_of",
    "parse_integer",
    "parse_dec",
    "format_dec",
    "dec_to_atomics",
    "dec_from_atomics",
    "parse_timestamp",
    "format_timestamp",
    "parse_duration",
    "format_duration",
    # Schema
    "WireField",
    "wire",
    "schema_of",
    # Engine
    "Family",
    "Entity",
    "message_class",
]
