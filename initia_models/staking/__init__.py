"""
Staking: validators, delegations, unbondings, redelegations and messages.
"""

from .validator import BondStatus, Description, CommissionRates, Commission, Validator
from .delegation import (
    Delegation,
    UnbondingDelegationEntry,
    UnbondingDelegation,
    RedelegationEntry,
    Redelegation,
)
from .msgs import MsgDelegate, MsgUndelegate, MsgBeginRedelegate, MsgCreateValidator

__all__ = [
    # Validators
    "BondStatus",
    "Description",
    "CommissionRates",
    "Commission",
    "Validator",
    # Delegations
    "Delegation",
    "UnbondingDelegationEntry",
    "UnbondingDelegation",
    "RedelegationEntry",
    "Redelegation",
    # Messages
    "MsgDelegate",
    "MsgUndelegate",
    "MsgBeginRedelegate",
    "MsgCreateValidator",
]
