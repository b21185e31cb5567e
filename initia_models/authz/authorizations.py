"""
Authorization family and grants.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import List, Optional

from ..codec import STRING, TIMESTAMP, Entity, Family, any_of, enum_of, nested, repeated, wire
from ..coin import COINS, Coin, Coins


AUTHORIZATION = Family("authorization")


@AUTHORIZATION.register
@dataclass
class GenericAuthorization(Entity):
    """Unrestricted permission to execute messages of type ``msg``."""
    proto_name = "cosmos.authz.v1beta1.GenericAuthorization"
    type_url = "/cosmos.authz.v1beta1.GenericAuthorization"
    amino_type = "cosmos-sdk/GenericAuthorization"

    msg: str = wire(STRING, 1)


@AUTHORIZATION.register
@dataclass
class SendAuthorization(Entity):
    """Permission to send up to ``spend_limit``, optionally only to ``allow_list``."""
    proto_name = "cosmos.bank.v1beta1.SendAuthorization"
    type_url = "/cosmos.bank.v1beta1.SendAuthorization"
    amino_type = "cosmos-sdk/SendAuthorization"

    spend_limit: Coins = wire(COINS, 1)
    allow_list: List[str] = wire(repeated(STRING), 2, optional=True)


class AuthorizationType(IntEnum):
    AUTHORIZATION_TYPE_UNSPECIFIED = 0
    AUTHORIZATION_TYPE_DELEGATE = 1
    AUTHORIZATION_TYPE_UNDELEGATE = 2
    AUTHORIZATION_TYPE_REDELEGATE = 3
    AUTHORIZATION_TYPE_CANCEL_UNBONDING_DELEGATION = 4


@dataclass
class StakeValidators(Entity):
    """Validator addresses listed by a stake authorization's allow or deny list."""
    proto_name = "cosmos.staking.v1beta1.StakeAuthorizationValidators"

    address: List[str] = wire(repeated(STRING), 1)


@AUTHORIZATION.register
@dataclass
class StakeAuthorization(Entity):
    """
    Permission to delegate, undelegate or redelegate, capped by
    ``max_tokens`` and restricted by an allow or deny list of validators.
    """
    proto_name = "cosmos.staking.v1beta1.StakeAuthorization"
    type_url = "/cosmos.staking.v1beta1.StakeAuthorization"
    amino_type = "cosmos-sdk/StakeAuthorization"

    authorization_type: AuthorizationType = wire(
        enum_of(AuthorizationType, "cosmos.staking.v1beta1.AuthorizationType"), 4
    )
    max_tokens: Optional[Coin] = wire(nested(Coin), 1, optional=True)
    allow_list: Optional[StakeValidators] = wire(nested(StakeValidators), 2, optional=True)
    deny_list: Optional[StakeValidators] = wire(nested(StakeValidators), 3, optional=True)


@dataclass
class AuthorizationGrant(Entity):
    """An authorization together with its optional expiration."""
    proto_name = "cosmos.authz.v1beta1.Grant"

    authorization: Entity = wire(any_of(AUTHORIZATION), 1)
    expiration: Optional[datetime] = wire(TIMESTAMP, 2, optional=True)
