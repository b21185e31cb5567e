"""
Bank messages.
"""

from dataclasses import dataclass

from .codec import STRING, Entity, wire
from .coin import COINS, Coins
from .msg import MSG


@MSG.register
@dataclass
class MsgSend(Entity):
    """Send coins from one address to another."""
    proto_name = "cosmos.bank.v1beta1.MsgSend"
    type_url = "/cosmos.bank.v1beta1.MsgSend"
    amino_type = "cosmos-sdk/MsgSend"

    from_address: str = wire(STRING, 1)
    to_address: str = wire(STRING, 2)
    amount: Coins = wire(COINS, 3)
