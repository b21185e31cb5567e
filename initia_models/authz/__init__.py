"""
Authz: authorizations, grants, and grant/exec/revoke messages.
"""

from .authorizations import (
    AUTHORIZATION,
    GenericAuthorization,
    SendAuthorization,
    AuthorizationType,
    StakeValidators,
    StakeAuthorization,
    AuthorizationGrant,
)
from .msgs import MsgGrant, MsgRevoke, MsgExec

__all__ = [
    # Authorizations
    "AUTHORIZATION",
    "GenericAuthorization",
    "SendAuthorization",
    "AuthorizationType",
    "StakeValidators",
    "StakeAuthorization",
    "AuthorizationGrant",
    # Messages
    "MsgGrant",
    "MsgRevoke",
    "MsgExec",
]
