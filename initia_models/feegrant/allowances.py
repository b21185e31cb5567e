"""
Fee allowance family.

An allowance lets a grantee pay transaction fees from the granter's
account. ``AllowedMsgAllowance`` wraps another allowance, so the family
is recursive:

    {"type": "cosmos-sdk/AllowedMsgAllowance",
     "value": {"allowance": {"type": "cosmos-sdk/BasicAllowance", ...},
               "allowed_messages": ["/cosmos.gov.v1beta1.MsgVote"]}}
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from ..codec import DURATION, STRING, TIMESTAMP, Entity, Family, any_of, nested, repeated, wire
from ..coin import COINS, Coins


ALLOWANCE = Family("fee allowance")


@ALLOWANCE.register
@dataclass
class BasicAllowance(Entity):
    """
    Fees up to ``spend_limit`` until ``expiration``. An empty limit means
    no cap; a missing expiration means the allowance never expires.
    """
    proto_name = "cosmos.feegrant.v1beta1.BasicAllowance"
    type_url = "/cosmos.feegrant.v1beta1.BasicAllowance"
    amino_type = "cosmos-sdk/BasicAllowance"

    spend_limit: Coins = wire(COINS, 1, optional=True)
    expiration: Optional[datetime] = wire(TIMESTAMP, 2, optional=True)


@ALLOWANCE.register
@dataclass
class PeriodicAllowance(Entity):
    """
    A basic allowance whose spendable amount refills every ``period``.

    ``period_can_spend`` is what is left in the current period, which ends
    at ``period_reset``.
    """
    proto_name = "cosmos.feegrant.v1beta1.PeriodicAllowance"
    type_url = "/cosmos.feegrant.v1beta1.PeriodicAllowance"
    amino_type = "cosmos-sdk/PeriodicAllowance"

    basic: BasicAllowance = wire(nested(BasicAllowance), 1)
    period: timedelta = wire(DURATION, 2)
    period_spend_limit: Coins = wire(COINS, 3)
    period_can_spend: Coins = wire(COINS, 4)
    period_reset: datetime = wire(TIMESTAMP, 5)


@ALLOWANCE.register
@dataclass
class AllowedMsgAllowance(Entity):
    """Restrict a wrapped allowance to the listed message type URLs."""
    proto_name = "cosmos.feegrant.v1beta1.AllowedMsgAllowance"
    type_url = "/cosmos.feegrant.v1beta1.AllowedMsgAllowance"
    amino_type = "cosmos-sdk/AllowedMsgAllowance"

    allowance: Entity = wire(any_of(ALLOWANCE), 1)
    allowed_messages: List[str] = wire(repeated(STRING), 2)
