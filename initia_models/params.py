"""
Parameter change proposals.
"""

from dataclasses import dataclass
from typing import List

from .codec import STRING, Entity, nested, repeated, wire
from .gov.content import CONTENT


@dataclass
class ParamChange(Entity):
    """A single parameter update. ``value`` is the JSON-encoded new value."""
    proto_name = "cosmos.params.v1beta1.ParamChange"

    subspace: str = wire(STRING, 1)
    key: str = wire(STRING, 2)
    value: str = wire(STRING, 3)


@CONTENT.register
@dataclass
class ParameterChangeProposal(Entity):
    """Proposal to change one or more module parameters."""
    proto_name = "cosmos.params.v1beta1.ParameterChangeProposal"
    type_url = "/cosmos.params.v1beta1.ParameterChangeProposal"
    amino_type = "cosmos-sdk/ParameterChangeProposal"

    title: str = wire(STRING, 1)
    description: str = wire(STRING, 2)
    changes: List[ParamChange] = wire(repeated(nested(ParamChange)), 3)
