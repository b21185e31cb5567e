"""
Delegations, unbonding delegations and redelegations.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List

from ..codec import DEC, INT64, STRING, TIMESTAMP, UBIGINT, Entity, nested, repeated, wire


@dataclass
class Delegation(Entity):
    """Bond of a delegator to a validator, measured in validator shares."""
    proto_name = "cosmos.staking.v1beta1.Delegation"

    delegator_address: str = wire(STRING, 1)
    validator_address: str = wire(STRING, 2)
    shares: Decimal = wire(DEC, 3)


@dataclass
class UnbondingDelegationEntry(Entity):
    """One pending unbonding: ``balance`` is what will be returned at ``completion_time``."""
    proto_name = "cosmos.staking.v1beta1.UnbondingDelegationEntry"

    creation_height: int = wire(INT64, 1)
    completion_time: datetime = wire(TIMESTAMP, 2)
    initial_balance: int = wire(UBIGINT, 3)
    balance: int = wire(UBIGINT, 4)


@dataclass
class UnbondingDelegation(Entity):
    """All pending unbondings of one delegator from one validator."""
    proto_name = "cosmos.staking.v1beta1.UnbondingDelegation"

    delegator_address: str = wire(STRING, 1)
    validator_address: str = wire(STRING, 2)
    entries: List[UnbondingDelegationEntry] = wire(repeated(nested(UnbondingDelegationEntry)), 3)


@dataclass
class RedelegationEntry(Entity):
    """One pending redelegation and the destination shares it created."""
    proto_name = "cosmos.staking.v1beta1.RedelegationEntry"

    creation_height: int = wire(INT64, 1)
    completion_time: datetime = wire(TIMESTAMP, 2)
    initial_balance: int = wire(UBIGINT, 3)
    shares_dst: Decimal = wire(DEC, 4)


@dataclass
class Redelegation(Entity):
    """Pending moves of a delegator's stake from a source to a destination validator."""
    proto_name = "cosmos.staking.v1beta1.Redelegation"

    delegator_address: str = wire(STRING, 1)
    validator_src_address: str = wire(STRING, 2)
    validator_dst_address: str = wire(STRING, 3)
    entries: List[RedelegationEntry] = wire(repeated(nested(RedelegationEntry)), 4)
