"""
Proposal content family and TextProposal.

Content variants from other modules (params, ibc) register into CONTENT
as well.
"""

from dataclasses import dataclass

from ..codec import STRING, Entity, Family, wire


CONTENT = Family("proposal content")


@CONTENT.register
@dataclass
class TextProposal(Entity):
    """Generic proposal with a title and description; has no on-chain effect."""
    proto_name = "cosmos.gov.v1beta1.TextProposal"
    type_url = "/cosmos.gov.v1beta1.TextProposal"
    amino_type = "cosmos-sdk/TextProposal"

    title: str = wire(STRING, 1)
    description: str = wire(STRING, 2)
