"""
Vesting account variants.

Every vesting account wraps a BaseVestingAccount, which in turn wraps a
BaseAccount. The wrapped accounts are embedded without a discriminator:

    {"type": "cosmos-sdk/DelayedVestingAccount",
     "value": {"base_vesting_account": {"base_account": {...}, ...}}}
"""

from dataclasses import dataclass
from typing import List

from ..codec import INT64, Entity, nested, repeated, wire
from ..coin import COINS, Coins
from .account import ACCOUNT, AccountMixin, BaseAccount


@ACCOUNT.register
@dataclass
class BaseVestingAccount(AccountMixin, Entity):
    """
    Holds the fields common to all vesting accounts.

    ``end_time`` is a unix timestamp in seconds, as on chain.
    """
    proto_name = "cosmos.vesting.v1beta1.BaseVestingAccount"
    type_url = "/cosmos.vesting.v1beta1.BaseVestingAccount"
    amino_type = "cosmos-sdk/BaseVestingAccount"

    base_account: BaseAccount = wire(nested(BaseAccount), 1)
    original_vesting: Coins = wire(COINS, 2)
    delegated_free: Coins = wire(COINS, 3)
    delegated_vesting: Coins = wire(COINS, 4)
    end_time: int = wire(INT64, 5)

    def _base_account(self) -> BaseAccount:
        return self.base_account


class _WrapsVesting(AccountMixin):
    def _base_account(self) -> BaseAccount:
        return self.base_vesting_account.base_account


@ACCOUNT.register
@dataclass
class DelayedVestingAccount(_WrapsVesting, Entity):
    """
    Vests all coins after a specific time, but none prior. In other words,
    it keeps them locked until ``end_time``.
    """
    proto_name = "cosmos.vesting.v1beta1.DelayedVestingAccount"
    type_url = "/cosmos.vesting.v1beta1.DelayedVestingAccount"
    amino_type = "cosmos-sdk/DelayedVestingAccount"

    base_vesting_account: BaseVestingAccount = wire(nested(BaseVestingAccount), 1)


@ACCOUNT.register
@dataclass
class ContinuousVestingAccount(_WrapsVesting, Entity):
    """Vests coins linearly from ``start_time`` until ``end_time``."""
    proto_name = "cosmos.vesting.v1beta1.ContinuousVestingAccount"
    type_url = "/cosmos.vesting.v1beta1.ContinuousVestingAccount"
    amino_type = "cosmos-sdk/ContinuousVestingAccount"

    base_vesting_account: BaseVestingAccount = wire(nested(BaseVestingAccount), 1)
    start_time: int = wire(INT64, 2)


@dataclass
class Period(Entity):
    """One vesting period: a length in seconds and the coins released after it."""
    proto_name = "cosmos.vesting.v1beta1.Period"

    length: int = wire(INT64, 1)
    amount: Coins = wire(COINS, 2)


@ACCOUNT.register
@dataclass
class PeriodicVestingAccount(_WrapsVesting, Entity):
    """Vests coins according to a list of consecutive periods."""
    proto_name = "cosmos.vesting.v1beta1.PeriodicVestingAccount"
    type_url = "/cosmos.vesting.v1beta1.PeriodicVestingAccount"
    amino_type = "cosmos-sdk/PeriodicVestingAccount"

    base_vesting_account: BaseVestingAccount = wire(nested(BaseVestingAccount), 1)
    start_time: int = wire(INT64, 2)
    vesting_periods: List[Period] = wire(repeated(nested(Period)), 3)
