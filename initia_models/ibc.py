"""
IBC client proposals.
"""

from dataclasses import dataclass

from .codec import STRING, Entity, wire
from .gov.content import CONTENT


@CONTENT.register
@dataclass
class ClientUpdateProposal(Entity):
    """
    Replaces an expired or frozen subject client with a substitute client
    of the same type.
    """
    proto_name = "ibc.core.client.v1.ClientUpdateProposal"
    type_url = "/ibc.core.client.v1.ClientUpdateProposal"
    amino_type = "ibc/ClientUpdateProposal"

    title: str = wire(STRING, 1)
    description: str = wire(STRING, 2)
    subject_client_id: str = wire(STRING, 3)
    substitute_client_id: str = wire(STRING, 4)
