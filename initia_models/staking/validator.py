"""
Validators and their commission.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from typing import Optional

from ..codec import (
    BOOL,
    DEC,
    INT64,
    STRING,
    TIMESTAMP,
    UBIGINT,
    Entity,
    any_of,
    enum_of,
    nested,
    wire,
)
from ..public_key import PUBLIC_KEY


class BondStatus(IntEnum):
    BOND_STATUS_UNSPECIFIED = 0
    BOND_STATUS_UNBONDED = 1
    BOND_STATUS_UNBONDING = 2
    BOND_STATUS_BONDED = 3


@dataclass
class Description(Entity):
    """Self-reported validator metadata."""
    proto_name = "cosmos.staking.v1beta1.Description"

    moniker: str = wire(STRING, 1)
    identity: str = wire(STRING, 2)
    website: str = wire(STRING, 3)
    security_contact: str = wire(STRING, 4)
    details: str = wire(STRING, 5)


@dataclass
class CommissionRates(Entity):
    """Current rate, its ceiling, and the largest allowed daily change."""
    proto_name = "cosmos.staking.v1beta1.CommissionRates"

    rate: Decimal = wire(DEC, 1)
    max_rate: Decimal = wire(DEC, 2)
    max_change_rate: Decimal = wire(DEC, 3)


@dataclass
class Commission(Entity):
    """Commission rates and when they last changed."""
    proto_name = "cosmos.staking.v1beta1.Commission"

    commission_rates: CommissionRates = wire(nested(CommissionRates), 1)
    update_time: datetime = wire(TIMESTAMP, 2)


@dataclass
class Validator(Entity):
    """
    A validator as returned by the staking module.

    ``tokens`` is the bonded amount; ``delegator_shares`` the total shares
    issued to its delegators. A validator that never unbonded reports
    height 0 and the epoch as its unbonding time.
    """
    proto_name = "cosmos.staking.v1beta1.Validator"

    operator_address: str = wire(STRING, 1)
    jailed: bool = wire(BOOL, 3)
    status: BondStatus = wire(enum_of(BondStatus, "cosmos.staking.v1beta1.BondStatus"), 4)
    tokens: int = wire(UBIGINT, 5)
    delegator_shares: Decimal = wire(DEC, 6)
    description: Description = wire(nested(Description), 7)
    unbonding_height: int = wire(INT64, 8)
    unbonding_time: datetime = wire(TIMESTAMP, 9)
    commission: Commission = wire(nested(Commission), 10)
    min_self_delegation: int = wire(UBIGINT, 11)
    consensus_pubkey: Optional[Entity] = wire(any_of(PUBLIC_KEY), 2, optional=True)

    Status = BondStatus
