"""
Slashing messages.
"""

from dataclasses import dataclass

from .codec import STRING, Entity, wire
from .msg import MSG


@MSG.register
@dataclass
class MsgUnjail(Entity):
    """
    Bring a jailed validator back into the active set.

    Amino and the legacy REST API name the operator address ``address``;
    proto JSON keeps the field name ``validator_addr``.
    """
    proto_name = "cosmos.slashing.v1beta1.MsgUnjail"
    type_url = "/cosmos.slashing.v1beta1.MsgUnjail"
    amino_type = "cosmos-sdk/MsgUnjail"

    validator_addr: str = wire(STRING, 1, amino="address")
