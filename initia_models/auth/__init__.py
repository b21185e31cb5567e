"""
Accounts: base, vesting variants, and the ACCOUNT family used to decode
whatever variant a node returns.
"""

from .account import ACCOUNT, AccountMixin, BaseAccount
from .vesting import (
    BaseVestingAccount,
    DelayedVestingAccount,
    ContinuousVestingAccount,
    Period,
    PeriodicVestingAccount,
)

__all__ = [
    "ACCOUNT",
    "AccountMixin",
    "BaseAccount",
    "BaseVestingAccount",
    "DelayedVestingAccount",
    "ContinuousVestingAccount",
    "Period",
    "PeriodicVestingAccount",
]
