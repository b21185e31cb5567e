"""
Staking messages.
"""

from dataclasses import dataclass

from ..codec import STRING, UBIGINT, Entity, any_of, nested, wire
from ..coin import Coin
from ..msg import MSG
from ..public_key import PUBLIC_KEY
from .validator import CommissionRates, Description


@MSG.register
@dataclass
class MsgDelegate(Entity):
    """Bond ``amount`` from a delegator to a validator."""
    proto_name = "cosmos.staking.v1beta1.MsgDelegate"
    type_url = "/cosmos.staking.v1beta1.MsgDelegate"
    amino_type = "cosmos-sdk/MsgDelegate"

    delegator_address: str = wire(STRING, 1)
    validator_address: str = wire(STRING, 2)
    amount: Coin = wire(nested(Coin), 3)


@MSG.register
@dataclass
class MsgUndelegate(Entity):
    """Start unbonding ``amount`` from a validator."""
    proto_name = "cosmos.staking.v1beta1.MsgUndelegate"
    type_url = "/cosmos.staking.v1beta1.MsgUndelegate"
    amino_type = "cosmos-sdk/MsgUndelegate"

    delegator_address: str = wire(STRING, 1)
    validator_address: str = wire(STRING, 2)
    amount: Coin = wire(nested(Coin), 3)


@MSG.register
@dataclass
class MsgBeginRedelegate(Entity):
    """Move ``amount`` of bonded stake from one validator to another without unbonding."""
    proto_name = "cosmos.staking.v1beta1.MsgBeginRedelegate"
    type_url = "/cosmos.staking.v1beta1.MsgBeginRedelegate"
    amino_type = "cosmos-sdk/MsgBeginRedelegate"

    delegator_address: str = wire(STRING, 1)
    validator_src_address: str = wire(STRING, 2)
    validator_dst_address: str = wire(STRING, 3)
    amount: Coin = wire(nested(Coin), 4)


@MSG.register
@dataclass
class MsgCreateValidator(Entity):
    """
    Register a new validator with its consensus key and self-bond.

    ``pubkey`` is the validator's ed25519 consensus key, packed like any
    other public key.
    """
    proto_name = "cosmos.staking.v1beta1.MsgCreateValidator"
    type_url = "/cosmos.staking.v1beta1.MsgCreateValidator"
    amino_type = "cosmos-sdk/MsgCreateValidator"

    description: Description = wire(nested(Description), 1)
    commission: CommissionRates = wire(nested(CommissionRates), 2)
    min_self_delegation: int = wire(UBIGINT, 3)
    delegator_address: str = wire(STRING, 4)
    validator_address: str = wire(STRING, 5)
    pubkey: Entity = wire(any_of(PUBLIC_KEY), 6)
    value: Coin = wire(nested(Coin), 7)
