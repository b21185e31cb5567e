"""
Authz messages.
"""

from dataclasses import dataclass
from typing import List

from ..codec import STRING, Entity, any_of, nested, repeated, wire
from ..msg import MSG
from .authorizations import AuthorizationGrant


@MSG.register
@dataclass
class MsgGrant(Entity):
    """Grant ``grantee`` an authorization over ``granter``'s account."""
    proto_name = "cosmos.authz.v1beta1.MsgGrant"
    type_url = "/cosmos.authz.v1beta1.MsgGrant"
    amino_type = "cosmos-sdk/MsgGrant"

    granter: str = wire(STRING, 1)
    grantee: str = wire(STRING, 2)
    grant: AuthorizationGrant = wire(nested(AuthorizationGrant), 3)


@MSG.register
@dataclass
class MsgRevoke(Entity):
    """Revoke any authorization for ``msg_type_url`` granted to ``grantee``."""
    proto_name = "cosmos.authz.v1beta1.MsgRevoke"
    type_url = "/cosmos.authz.v1beta1.MsgRevoke"
    amino_type = "cosmos-sdk/MsgRevoke"

    granter: str = wire(STRING, 1)
    grantee: str = wire(STRING, 2)
    msg_type_url: str = wire(STRING, 3)


@MSG.register
@dataclass
class MsgExec(Entity):
    """Execute messages on behalf of their signer using a previous grant."""
    proto_name = "cosmos.authz.v1beta1.MsgExec"
    type_url = "/cosmos.authz.v1beta1.MsgExec"
    amino_type = "cosmos-sdk/MsgExec"

    grantee: str = wire(STRING, 1)
    msgs: List[Entity] = wire(repeated(any_of(MSG)), 2)
