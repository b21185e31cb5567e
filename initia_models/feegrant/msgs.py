"""
Fee grant messages.
"""

from dataclasses import dataclass

from ..codec import STRING, Entity, any_of, wire
from ..msg import MSG
from .allowances import ALLOWANCE


@MSG.register
@dataclass
class MsgGrantAllowance(Entity):
    """Let ``grantee`` pay fees from ``granter``'s account under ``allowance``."""
    proto_name = "cosmos.feegrant.v1beta1.MsgGrantAllowance"
    type_url = "/cosmos.feegrant.v1beta1.MsgGrantAllowance"
    amino_type = "cosmos-sdk/MsgGrantAllowance"

    granter: str = wire(STRING, 1)
    grantee: str = wire(STRING, 2)
    allowance: Entity = wire(any_of(ALLOWANCE), 3)


@MSG.register
@dataclass
class MsgRevokeAllowance(Entity):
    """Remove the fee allowance ``granter`` gave to ``grantee``."""
    proto_name = "cosmos.feegrant.v1beta1.MsgRevokeAllowance"
    type_url = "/cosmos.feegrant.v1beta1.MsgRevokeAllowance"
    amino_type = "cosmos-sdk/MsgRevokeAllowance"

    granter: str = wire(STRING, 1)
    grantee: str = wire(STRING, 2)
