"""
Declarative field schema for entities.

Entities are dataclasses whose fields are declared with ``wire()``:

    @dataclass
    class Coin(Entity):
        proto_name = "cosmos.base.v1beta1.Coin"

        denom: str = wire(STRING, 1)
        amount: int = wire(BIGINT, 2)

The wire key defaults to the attribute name in every format; ``amino``,
``data`` and ``proto`` override it per format.
"""

import dataclasses
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple

from .kinds import Kind, WireFormat


WIRE = "initia_models.wire"


@dataclass(frozen=True)
class WireField:
    """One schema entry: attribute name, kind, and its key in each format."""
    name: str
    kind: Kind
    number: int
    amino_key: str
    data_key: str
    proto_name: str
    optional: bool = False

    def key(self, fmt: WireFormat) -> str:
        if fmt is WireFormat.AMINO:
            return self.amino_key
        if fmt is WireFormat.DATA:
            return self.data_key
        return self.proto_name


def wire(kind: Kind, number: int, amino: Optional[str] = None, data: Optional[str] = None,
         proto: Optional[str] = None, optional: bool = False):
    """Declare a dataclass field together with its wire mapping.

    Optional fields default to ``None`` (or an empty collection for
    repeated kinds) and must follow the required ones.
    """
    metadata = {
        WIRE: {
            "kind": kind,
            "number": number,
            "amino": amino,
            "data": data,
            "proto": proto,
            "optional": optional,
        }
    }
    if not optional:
        return field(metadata=metadata)
    if kind.repeated:
        return field(default_factory=kind.empty, metadata=metadata)
    return field(default=None, metadata=metadata)


@lru_cache(maxsize=None)
def schema_of(entity_cls) -> Tuple[WireField, ...]:
    """Return the wire fields of an entity class in declaration order."""
    entries = []
    for f in dataclasses.fields(entity_cls):
        meta = f.metadata.get(WIRE)
        if meta is None:
            continue
        entries.append(WireField(
            name=f.name,
            kind=meta["kind"],
            number=meta["number"],
            amino_key=meta["amino"] or f.name,
            data_key=meta["data"] or f.name,
            proto_name=meta["proto"] or f.name,
            optional=meta["optional"],
        ))
    return tuple(entries)
