"""
Polymorphic Variant Registry

A Family groups the entity classes that may appear in one polymorphic
field (public key, account, proposal content, authorization, message).
It keeps one lookup table per wire format, keyed by that format's
discriminator:

    AMINO  "cosmos-sdk/TextProposal"          (envelope "type")
    DATA   "/cosmos.gov.v1beta1.TextProposal" ("@type")
    PROTO  "/cosmos.gov.v1beta1.TextProposal" (Any.type_url)

Usage:
    CONTENT = Family("proposal content")

    @CONTENT.register
    @dataclass
    class TextProposal(Entity):
        ...
"""

import logging
from typing import Any, Callable, Dict, List

from .errors import MalformedInputError, UnrecognizedTypeError, UnsupportedConversionError
from .kinds import WireFormat


logger = logging.getLogger(__name__)


# Decoder(variant_cls, payload) -> entity
_DECODERS: Dict[WireFormat, Callable[[type, Any], Any]] = {
    WireFormat.AMINO: lambda cls, raw: cls.from_amino(raw),
    WireFormat.DATA: lambda cls, raw: cls.from_data(raw),
    WireFormat.PROTO: lambda cls, packed: cls.unpack_any(packed),
}


class Family:
    """Closed set of variants for one polymorphic field."""

    def __init__(self, name: str):
        self.name = name
        self._tables: Dict[WireFormat, Dict[str, type]] = {fmt: {} for fmt in WireFormat}
        self._variants: List[type] = []

    def __repr__(self) -> str:
        return f"Family({self.name!r}, variants={[v.__name__ for v in self._variants]})"

    def __contains__(self, item) -> bool:
        cls = item if isinstance(item, type) else type(item)
        return cls in self._variants

    @property
    def variants(self) -> List[type]:
        return list(self._variants)

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, cls: type) -> type:
        """Class decorator adding a variant to every format table it supports."""
        type_url = getattr(cls, "type_url", None)
        if not type_url:
            raise UnsupportedConversionError(
                f"{cls.__name__} cannot join {self.name}: it declares no type_url"
            )
        if type_url != "/" + cls.proto_name:
            raise UnsupportedConversionError(
                f"{cls.__name__} type_url {type_url!r} does not match message {cls.proto_name!r}"
            )

        self._add(WireFormat.DATA, type_url, cls)
        self._add(WireFormat.PROTO, type_url, cls)
        if cls.amino_type:
            self._add(WireFormat.AMINO, cls.amino_type, cls)
        else:
            logger.debug("%s has no amino type; %s amino dispatch will not match it",
                         cls.__name__, self.name)

        if cls not in self._variants:
            self._variants.append(cls)
        logger.debug("Registered %s in %s", cls.__name__, self.name)
        return cls

    def _add(self, fmt: WireFormat, tag: str, cls: type) -> None:
        existing = self._tables[fmt].get(tag)
        if existing is not None and existing is not cls:
            raise UnsupportedConversionError(
                f"{self.name} {fmt.value} tag {tag!r} already registered to {existing.__name__}"
            )
        self._tables[fmt][tag] = cls

    # =========================================================================
    # Dispatch
    # =========================================================================

    def lookup(self, tag: str, fmt: WireFormat) -> type:
        """Return the variant registered for a discriminator in one format."""
        cls = self._tables[fmt].get(tag)
        if cls is None:
            raise UnrecognizedTypeError(f"{self.name} type {tag!r} not recognized")
        return cls

    def _dispatch(self, fmt: WireFormat, tag: Any, payload: Any, key: str):
        if tag is None:
            raise MalformedInputError(f"missing {self.name} discriminator").at(key)
        if not isinstance(tag, str):
            raise MalformedInputError(f"discriminator must be a string, got {tag!r}").at(key)
        try:
            cls = self.lookup(tag, fmt)
        except UnrecognizedTypeError as exc:
            raise exc.at(key)
        return _DECODERS[fmt](cls, payload)

    def from_amino(self, raw: Any):
        if not isinstance(raw, dict):
            raise MalformedInputError(f"expected an amino object for {self.name}")
        return self._dispatch(WireFormat.AMINO, raw.get("type"), raw, "type")

    def from_data(self, raw: Any):
        if not isinstance(raw, dict):
            raise MalformedInputError(f"expected a data object for {self.name}")
        return self._dispatch(WireFormat.DATA, raw.get("@type"), raw, "@type")

    def unpack_any(self, packed):
        """Decode a packed Any by its type URL."""
        return self._dispatch(WireFormat.PROTO, packed.type_url or None, packed, "type_url")

    from_proto = unpack_any

    def decode(self, raw: Any, fmt: WireFormat):
        if fmt is WireFormat.AMINO:
            return self.from_amino(raw)
        if fmt is WireFormat.DATA:
            return self.from_data(raw)
        return self.unpack_any(raw)

    # =========================================================================
    # Encoding
    # =========================================================================

    def _member(self, value: Any):
        if type(value) not in self._variants:
            raise UnsupportedConversionError(
                f"{type(value).__name__} is not a registered {self.name} variant"
            )
        return value

    def encode(self, value: Any, fmt: WireFormat):
        value = self._member(value)
        if fmt is WireFormat.AMINO:
            return value.to_amino()
        if fmt is WireFormat.DATA:
            return value.to_data()
        return value.pack_any()

    def pack_any(self, value: Any):
        return self._member(value).pack_any()
