"""
Account family and BaseAccount.
"""

from dataclasses import dataclass
from typing import Optional

from ..codec import STRING, UINT64, Entity, Family, any_of, wire
from ..public_key import PUBLIC_KEY


ACCOUNT = Family("account")


class AccountMixin:
    """Accessors shared by every account variant.

    Vesting variants delegate to the BaseAccount they wrap.
    """

    def _base_account(self) -> 'BaseAccount':
        raise NotImplementedError

    def get_account_number(self) -> int:
        return self._base_account().account_number

    def get_sequence_number(self) -> int:
        return self._base_account().sequence

    def get_public_key(self):
        return self._base_account().pub_key


@ACCOUNT.register
@dataclass
class BaseAccount(AccountMixin, Entity):
    """
    Defines a basic account type: address, public key, account number
    and sequence. Amino names the key ``public_key``; Data and Proto use
    ``pub_key``.
    """
    proto_name = "cosmos.auth.v1beta1.BaseAccount"
    type_url = "/cosmos.auth.v1beta1.BaseAccount"
    amino_type = "cosmos-sdk/BaseAccount"

    address: str = wire(STRING, 1)
    account_number: int = wire(UINT64, 3)
    sequence: int = wire(UINT64, 4)
    pub_key: Optional[Entity] = wire(any_of(PUBLIC_KEY), 2, amino="public_key", optional=True)

    def _base_account(self) -> 'BaseAccount':
        return self
